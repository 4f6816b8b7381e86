"""
TypeScript code generation backend.

Generates TypeScript classes, or interfaces for the type-only style.
"""

from __future__ import annotations

import json
from typing import Any

from ..analyzer.ir_nodes import Model, Property
from .base import ModelBackend

CLASS_TRANSFORMER = "class-transformer"
TYPE_ONLY = "type-only"


class TypeScriptBackend(ModelBackend):
    """TypeScript code generation backend."""

    TEMPLATE_LANG = "typescript"
    FILE_EXTENSION = "ts"

    TYPE_MAP = {
        "string": "string",
        "integer": "number",
        "float": "number",
        "boolean": "boolean",
    }
    DYNAMIC_TYPE = "any"
    GENERIC_OBJECT_TYPE = "Record<string, any>"

    # Values used for fields that are declared without a constructor
    DEFAULT_VALUES = {
        "string": '""',
        "number": "0",
        "boolean": "false",
    }

    def file_name(self, model_name: str) -> str:
        """`<Name>Model`, without doubling an existing Model suffix."""
        if model_name.endswith("Model"):
            return model_name
        return f"{model_name}Model"

    def array_type(self, item_type: str) -> str:
        return f"{item_type}[]"

    def default_value(self, prop: Property) -> str | None:
        if prop.is_nullable:
            return None
        if prop.is_array:
            return "[]"
        if self.is_known_reference(prop.type_ref):
            return f"new {prop.type_ref.name}()"
        if prop.is_object:
            return "{}"
        return self.DEFAULT_VALUES.get(self.translate_type(prop.type_ref))

    @property
    def is_interface(self) -> bool:
        return self.style == TYPE_ONLY

    def _prepare_model_context(self, model: Model) -> dict[str, Any]:
        ctx = super()._prepare_model_context(model)
        ctx["kind"] = "interface" if self.is_interface else "class"
        ctx["include_constructor"] = self.options.include_constructor and not self.is_interface
        ctx["constructor_params"] = self._constructor_params(model)
        return ctx

    def _prepare_field_context(self, prop: Property) -> dict[str, Any]:
        type_str = self.translate_type(prop.type_ref)
        declaration = f"{prop.name}{'?' if prop.is_nullable else ''}: {type_str}"

        # Classes without a constructor initialize their fields in place
        if not self.is_interface and not self.options.include_constructor:
            default = self.default_value(prop)
            if default is not None:
                declaration += f" = {default}"

        return {
            "name": prop.name,
            "type": type_str,
            "declaration": f"{declaration};",
            "decorators": self._decorators(prop),
        }

    def _decorators(self, prop: Property) -> list[str]:
        """class-transformer decorators for a field."""
        if self.style != CLASS_TRANSFORMER:
            return []

        decorators = []
        nested_model = self.nested_model_of(prop)
        if nested_model:
            self.imports.add("Type")
            decorators.append(f"@Type(() => {nested_model})")
        if prop.is_renamed:
            self.imports.add("Expose")
            decorators.append(f"@Expose({{ name: {json.dumps(prop.json_key)} }})")
        return decorators

    def _constructor_params(self, model: Model) -> str:
        """
        Constructor parameter list, one parameter per field.

        Nullable fields become optional parameters only when every parameter
        after them is optional as well; otherwise they take `T | undefined`.
        """
        params = []
        trailing_optional = True
        for prop in reversed(model.properties):
            type_str = self.translate_type(prop.type_ref)
            if not prop.is_nullable:
                trailing_optional = False
                params.append(f"{prop.name}: {type_str}")
            elif trailing_optional:
                params.append(f"{prop.name}?: {type_str}")
            else:
                params.append(f"{prop.name}: {type_str} | undefined")
        return ", ".join(reversed(params))
