"""
IR (Intermediate Representation) node definitions.

These nodes describe the models inferred from a JSON document, ready for
code generation. Type references are immutable so that inference of the
same value always yields an equal descriptor.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class TypeKind(Enum):
    """Kind of type in the IR."""

    PRIMITIVE = "primitive"  # string, integer, float, boolean
    DYNAMIC = "dynamic"  # null or unresolved value
    ARRAY = "array"  # list of one element type
    REFERENCE = "reference"  # a named model


# Names carried by PRIMITIVE type refs
STRING = "string"
INTEGER = "integer"
FLOAT = "float"
BOOLEAN = "boolean"

PRIMITIVE_NAMES = (STRING, INTEGER, FLOAT, BOOLEAN)


@dataclass(frozen=True)
class TypeRef:
    """An inferred type descriptor."""

    kind: TypeKind = TypeKind.DYNAMIC

    # Primitive name for PRIMITIVE, model name for REFERENCE
    name: str = ""

    # Element type for ARRAY
    type_args: tuple[TypeRef, ...] = ()

    @staticmethod
    def primitive(name: str) -> TypeRef:
        if name not in PRIMITIVE_NAMES:
            raise ValueError(f"Unknown primitive type: {name}")
        return TypeRef(TypeKind.PRIMITIVE, name)

    @staticmethod
    def dynamic() -> TypeRef:
        return TypeRef(TypeKind.DYNAMIC)

    @staticmethod
    def array_of(item: TypeRef) -> TypeRef:
        return TypeRef(TypeKind.ARRAY, type_args=(item,))

    @staticmethod
    def reference(model_name: str) -> TypeRef:
        return TypeRef(TypeKind.REFERENCE, model_name)

    @property
    def item(self) -> TypeRef | None:
        """Element type of an ARRAY, None otherwise."""
        return self.type_args[0] if self.kind == TypeKind.ARRAY and self.type_args else None

    @property
    def is_reference(self) -> bool:
        return self.kind == TypeKind.REFERENCE

    @property
    def is_array_of_reference(self) -> bool:
        return self.item is not None and self.item.kind == TypeKind.REFERENCE

    def __str__(self) -> str:
        if self.kind == TypeKind.PRIMITIVE:
            return self.name
        if self.kind == TypeKind.REFERENCE:
            return f"ref<{self.name}>"
        if self.kind == TypeKind.ARRAY:
            return f"array<{self.item}>"
        return "dynamic"


@dataclass
class Property:
    """A field of a model."""

    name: str = ""  # camelCase identifier
    json_key: str = ""  # Original JSON key, used for serialization mapping
    type_ref: TypeRef = field(default_factory=TypeRef.dynamic)
    is_nullable: bool = False
    is_array: bool = False
    is_object: bool = False

    @property
    def is_renamed(self) -> bool:
        """Whether the identifier differs from the JSON key."""
        return self.name != self.json_key


@dataclass
class Model:
    """A named, ordered collection of properties."""

    name: str = ""
    properties: list[Property] = field(default_factory=list)

    def get_property(self, json_key: str) -> Property | None:
        for prop in self.properties:
            if prop.json_key == json_key:
                return prop
        return None


@dataclass
class ModelSet:
    """The root model and the nested models extracted from it."""

    root: Model = field(default_factory=Model)

    # Nested models in discovery order
    nested: list[Model] = field(default_factory=list)

    @property
    def models(self) -> list[Model]:
        """All models in rendering order: nested models first, root last."""
        return [*self.nested, self.root]

    @property
    def model_names(self) -> set[str]:
        return {model.name for model in self.models}

    def has_model(self, name: str) -> bool:
        return name in self.model_names
