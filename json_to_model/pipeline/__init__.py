"""
Pipeline - JSON document to typed model generator.

This module turns a sample JSON document into model classes in three
phases:

1. Phase 1 (Inference): Map every JSON value to a type reference
2. Phase 2 (Extractor): Build the root model and one level of nested models
3. Phase 3 (Backend): Render the models with the target language's templates
"""

from __future__ import annotations

from .config import (
    SERIALIZATION_STYLES,
    GenerationOptions,
    TargetLanguage,
    normalize_style,
    serialization_styles,
)
from .errors import InvalidStructure, JsonToModelError, UnsupportedOption
from .generator import BACKENDS, GenerationResult, ModelGenerator, file_extension, generate, get_backend

__all__ = [
    "ModelGenerator",
    "GenerationResult",
    "GenerationOptions",
    "TargetLanguage",
    "SERIALIZATION_STYLES",
    "BACKENDS",
    "generate",
    "get_backend",
    "file_extension",
    "normalize_style",
    "serialization_styles",
    "JsonToModelError",
    "InvalidStructure",
    "UnsupportedOption",
]
