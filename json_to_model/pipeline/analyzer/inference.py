"""
Type inference for JSON values.

Maps a parsed JSON value to a TypeRef. Only the first element of an array
and the first key of an object are inspected.
"""

from __future__ import annotations

from typing import Any

from ...utils import to_pascal_case
from .ir_nodes import BOOLEAN, FLOAT, INTEGER, STRING, TypeRef

# Model name used for objects that have no keys
EMPTY_OBJECT_NAME = "Object"


def infer(value: Any) -> TypeRef:
    """
    Infer the type descriptor of a JSON value.

    Args:
        value: A value produced by a JSON parser

    Returns:
        The inferred TypeRef
    """
    if value is None:
        return TypeRef.dynamic()

    if isinstance(value, list):
        if not value:
            return TypeRef.array_of(TypeRef.dynamic())
        return TypeRef.array_of(infer(value[0]))

    if isinstance(value, dict):
        return TypeRef.reference(reference_name(value))

    if isinstance(value, str):
        return TypeRef.primitive(STRING)

    # bool is a subclass of int
    if isinstance(value, bool):
        return TypeRef.primitive(BOOLEAN)

    if isinstance(value, int):
        return TypeRef.primitive(INTEGER)

    if isinstance(value, float):
        # 1.0 has no fractional component and is classified as an integer
        return TypeRef.primitive(INTEGER if value.is_integer() else FLOAT)

    return TypeRef.dynamic()


def reference_name(obj: dict) -> str:
    """Name of the model an object refers to: its first key in PascalCase."""
    first_key = next(iter(obj), None)
    if first_key is None:
        return EMPTY_OBJECT_NAME
    return to_pascal_case(str(first_key)) or EMPTY_OBJECT_NAME
