"""
Analyzer module.

Contains type inference, model extraction and the IR they produce.
"""

from __future__ import annotations

from .extractor import ModelExtractor, extract
from .inference import infer
from .ir_nodes import (
    BOOLEAN,
    FLOAT,
    INTEGER,
    STRING,
    Model,
    ModelSet,
    Property,
    TypeKind,
    TypeRef,
)

__all__ = [
    "Model",
    "ModelSet",
    "Property",
    "TypeRef",
    "TypeKind",
    "STRING",
    "INTEGER",
    "FLOAT",
    "BOOLEAN",
    "ModelExtractor",
    "extract",
    "infer",
]
