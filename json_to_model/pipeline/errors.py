"""
Exceptions raised by the model generation pipeline.
"""

from __future__ import annotations


class JsonToModelError(Exception):
    """Base class for every error raised by json_to_model."""


class InvalidStructure(JsonToModelError, ValueError):
    """The document is not a JSON object (or a non-empty array whose first item is one)."""


class UnsupportedOption(JsonToModelError, ValueError):
    """The target language or serialization style is not supported."""
