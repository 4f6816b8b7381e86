"""
Code generation backends.

Contains language-specific model emitters.
"""

from __future__ import annotations

from .base import ModelBackend
from .dart_backend import DartBackend
from .kotlin_backend import KotlinBackend
from .typescript_backend import TypeScriptBackend

__all__ = [
    "ModelBackend",
    "TypeScriptBackend",
    "DartBackend",
    "KotlinBackend",
]
