"""
Dart code generation backend.

Generates Dart classes, optionally with json_serializable annotations or
hand-written fromJson/toJson routines.
"""

from __future__ import annotations

from typing import Any

from ...utils import to_snake_case
from ..analyzer.ir_nodes import FLOAT, INTEGER, Model, ModelSet, Property, TypeKind
from .base import ModelBackend

JSON_SERIALIZABLE = "json-serializable"
FROM_JSON_TO_JSON = "from-json-to-json"

JSON_MAP = "Map<String, dynamic>"

# num conversion for numeric primitives
NUM_CASTS = {
    FLOAT: "toDouble",
    INTEGER: "toInt",
}


def dart_string(value: str) -> str:
    """Single-quoted Dart string literal."""
    escaped = value.replace("\\", "\\\\").replace("'", "\\'").replace("$", "\\$")
    return f"'{escaped}'"


class DartBackend(ModelBackend):
    """Dart code generation backend."""

    TEMPLATE_LANG = "dart"
    FILE_EXTENSION = "dart"

    TYPE_MAP = {
        "string": "String",
        "integer": "int",
        "float": "double",
        "boolean": "bool",
    }
    DYNAMIC_TYPE = "dynamic"
    GENERIC_OBJECT_TYPE = JSON_MAP

    DEFAULT_VALUES = {
        "String": "''",
        "int": "0",
        "double": "0.0",
        "bool": "false",
    }

    def file_name(self, model_name: str) -> str:
        """Dart files are snake_case: `UserProfile` -> `user_profile`."""
        return to_snake_case(model_name)

    def array_type(self, item_type: str) -> str:
        return f"List<{item_type}>"

    def field_type(self, prop: Property) -> str:
        """Declared type of a field, with `?` when nullable (never on dynamic)."""
        type_str = self.translate_type(prop.type_ref)
        if prop.is_nullable and type_str != self.DYNAMIC_TYPE:
            return f"{type_str}?"
        return type_str

    def default_value(self, prop: Property) -> str | None:
        if prop.is_nullable or prop.type_ref.kind == TypeKind.DYNAMIC:
            return None
        if prop.is_array:
            return "[]"
        if self.is_known_reference(prop.type_ref):
            return f"{prop.type_ref.name}()"
        if prop.is_object:
            return "{}"
        return self.DEFAULT_VALUES.get(self.translate_type(prop.type_ref))

    def _prepare_prefix_context(self, model_set: ModelSet) -> dict[str, Any]:
        ctx = super()._prepare_prefix_context(model_set)
        ctx["part_file"] = f"{self.file_name(model_set.root.name)}.g.dart"
        return ctx

    def _prepare_model_context(self, model: Model) -> dict[str, Any]:
        ctx = super()._prepare_model_context(model)
        ctx["annotation"] = "@JsonSerializable()" if self.style == JSON_SERIALIZABLE else None
        ctx["constructor"] = self._constructor_kind(model)
        if self.style == FROM_JSON_TO_JSON:
            ctx["from_json_body"] = self._from_json_body(model)
        return ctx

    def _prepare_field_context(self, prop: Property) -> dict[str, Any]:
        type_str = self.field_type(prop)

        if self.options.include_constructor:
            declaration = f"final {type_str} {prop.name};"
        else:
            default = self.default_value(prop)
            declaration = f"{type_str} {prop.name}{'' if default is None else f' = {default}'};"

        annotations = []
        if self.style == JSON_SERIALIZABLE and prop.is_renamed:
            annotations.append(f"@JsonKey(name: {dart_string(prop.json_key)})")

        return {
            "name": prop.name,
            "type": type_str,
            "declaration": declaration,
            "annotations": annotations,
            "required": not prop.is_nullable and prop.type_ref.kind != TypeKind.DYNAMIC,
            "json_key": dart_string(prop.json_key),
            "to_json": self._to_json_expr(prop),
        }

    def _constructor_kind(self, model: Model) -> str | None:
        """
        "named" for a constructor with one named parameter per field, "default"
        for an explicit `Name();`, None to rely on the implicit one.

        A class that declares a fromJson factory loses its implicit default
        constructor, so the serialization styles always declare one.
        """
        if self.options.include_constructor and model.properties:
            return "named"
        if self.options.include_constructor or self.style != "none":
            return "default"
        return None

    def _from_json_body(self, model: Model) -> list[str]:
        """
        Statement lines of a hand-written fromJson factory.

        Uses the named constructor when there is one, otherwise a cascade on
        the default constructor.
        """
        if not model.properties:
            return [f"return {model.name}();"]

        if self.options.include_constructor:
            lines = [f"return {model.name}("]
            lines.extend(f"  {prop.name}: {self._from_json_expr(prop)}," for prop in model.properties)
            lines.append(");")
            return lines

        lines = [f"return {model.name}()"]
        lines.extend(f"  ..{prop.name} = {self._from_json_expr(prop)}" for prop in model.properties)
        lines[-1] += ";"
        return lines

    def _from_json_expr(self, prop: Property) -> str:
        """Expression reading one field out of the `json` map."""
        access = f"json[{dart_string(prop.json_key)}]"
        nullable = prop.is_nullable
        type_ref = prop.type_ref

        if self.is_known_reference(type_ref):
            read = f"{type_ref.name}.fromJson({access} as {JSON_MAP})"
            return f"{access} == null ? null : {read}" if nullable else read

        # Numeric items are read through num so that [1.5, 2] decodes as List<double>
        numeric_cast = None
        if type_ref.item is not None and type_ref.item.kind == TypeKind.PRIMITIVE:
            numeric_cast = NUM_CASTS.get(type_ref.item.name)

        if self.is_known_reference(type_ref.item) or numeric_cast:
            if numeric_cast:
                item_read = f"map((e) => (e as num).{numeric_cast}()).toList()"
            else:
                item_read = f"map((e) => {type_ref.item.name}.fromJson(e as {JSON_MAP})).toList()"
            if nullable:
                return f"({access} as List<dynamic>?)?.{item_read}"
            return f"({access} as List<dynamic>).{item_read}"

        if type_ref.kind == TypeKind.PRIMITIVE:
            if type_ref.name == FLOAT:
                return f"({access} as num?)?.toDouble()" if nullable else f"({access} as num).toDouble()"
            if type_ref.name == INTEGER:
                return f"({access} as num?)?.toInt()" if nullable else f"({access} as num).toInt()"
            return f"{access} as {self.field_type(prop)}"

        if type_ref.kind == TypeKind.ARRAY:
            list_type = self.translate_type(type_ref)
            read = f"{list_type}.from({access} as List<dynamic>)"
            return f"{access} == null ? null : {read}" if nullable else read

        if type_ref.kind == TypeKind.REFERENCE:
            return f"{access} as {self.field_type(prop)}"

        return access

    def _to_json_expr(self, prop: Property) -> str:
        """Expression writing one field into the map returned by toJson."""
        op = "?." if prop.is_nullable else "."
        if self.is_known_reference(prop.type_ref):
            return f"{prop.name}{op}toJson()"
        if self.is_known_reference(prop.type_ref.item):
            return f"{prop.name}{op}map((e) => e.toJson()).toList()"
        return prop.name
