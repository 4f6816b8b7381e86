"""
Kotlin code generation backend.

Generates Kotlin data classes (or plain classes with defaults), annotated
for kotlinx.serialization, Jackson or Gson.
"""

from __future__ import annotations

from typing import Any

from ..analyzer.ir_nodes import Model, ModelSet, Property
from .base import ModelBackend

DEFAULT_PACKAGE = "com.example.models"

KOTLINX_SERIALIZATION = "kotlinx-serialization"
JACKSON = "jackson"
GSON = "gson"

# style -> (rename annotation, its import)
RENAME_ANNOTATIONS = {
    KOTLINX_SERIALIZATION: ("SerialName", "kotlinx.serialization.SerialName"),
    JACKSON: ("JsonProperty", "com.fasterxml.jackson.annotation.JsonProperty"),
    GSON: ("SerializedName", "com.google.gson.annotations.SerializedName"),
}


def kotlin_string(value: str) -> str:
    """Double-quoted Kotlin string literal."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"').replace("$", "\\$")
    return f'"{escaped}"'


class KotlinBackend(ModelBackend):
    """Kotlin code generation backend."""

    TEMPLATE_LANG = "kotlin"
    FILE_EXTENSION = "kt"

    TYPE_MAP = {
        "string": "String",
        "integer": "Int",
        "float": "Double",
        "boolean": "Boolean",
    }
    DYNAMIC_TYPE = "Any"
    GENERIC_OBJECT_TYPE = "Map<String, Any?>"

    DEFAULT_VALUES = {
        "String": '""',
        "Int": "0",
        "Double": "0.0",
        "Boolean": "false",
        "Any": "Any()",
    }

    def file_name(self, model_name: str) -> str:
        """Kotlin files are named after their main class."""
        return model_name

    def array_type(self, item_type: str) -> str:
        return f"List<{item_type}>"

    def field_type(self, prop: Property) -> str:
        type_str = self.translate_type(prop.type_ref)
        return f"{type_str}?" if prop.is_nullable else type_str

    def default_value(self, prop: Property) -> str | None:
        if prop.is_nullable:
            return "null"
        if prop.is_array:
            return "emptyList()"
        if self.is_known_reference(prop.type_ref):
            return f"{prop.type_ref.name}()"
        if prop.is_object:
            return "emptyMap()"
        return self.DEFAULT_VALUES.get(self.translate_type(prop.type_ref))

    def _prepare_prefix_context(self, model_set: ModelSet) -> dict[str, Any]:
        if self.style == KOTLINX_SERIALIZATION:
            self.imports.add("kotlinx.serialization.Serializable")
        ctx = super()._prepare_prefix_context(model_set)
        ctx["package_name"] = self.options.package_name or DEFAULT_PACKAGE
        return ctx

    def _prepare_model_context(self, model: Model) -> dict[str, Any]:
        ctx = super()._prepare_model_context(model)
        ctx["annotation"] = "@Serializable" if self.style == KOTLINX_SERIALIZATION else None
        # A data class needs at least one constructor parameter
        ctx["data_class"] = self.options.include_constructor and bool(model.properties)
        return ctx

    def _prepare_field_context(self, prop: Property) -> dict[str, Any]:
        type_str = self.field_type(prop)

        if self.options.include_constructor:
            declaration = f"val {prop.name}: {type_str}"
            if prop.is_nullable:
                declaration += " = null"
        else:
            declaration = f"var {prop.name}: {type_str} = {self.default_value(prop)}"

        annotations = []
        if prop.is_renamed and self.style in RENAME_ANNOTATIONS:
            annotation, import_path = RENAME_ANNOTATIONS[self.style]
            self.imports.add(import_path)
            annotations.append(f"@{annotation}({kotlin_string(prop.json_key)})")

        return {
            "name": prop.name,
            "type": type_str,
            "declaration": declaration,
            "annotations": annotations,
        }
