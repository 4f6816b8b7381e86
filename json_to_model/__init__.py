"""JSON to Model

A Python package for generating typed model classes from sample JSON
documents. Supports TypeScript, Dart and Kotlin, with constructor,
null-safety and serialization-annotation options.
"""

__version__ = "0.1.0"

from .pipeline import (
    SERIALIZATION_STYLES,
    GenerationOptions,
    GenerationResult,
    InvalidStructure,
    JsonToModelError,
    ModelGenerator,
    TargetLanguage,
    UnsupportedOption,
    generate,
    serialization_styles,
)

__all__ = [
    "generate",
    "ModelGenerator",
    "GenerationResult",
    "GenerationOptions",
    "TargetLanguage",
    "SERIALIZATION_STYLES",
    "serialization_styles",
    "JsonToModelError",
    "InvalidStructure",
    "UnsupportedOption",
]
