"""
Model extraction from a JSON document.

Builds the root model from the document's top-level keys and one nested
model for every object-valued property. Extraction stops there: objects
found inside a nested model keep their reference type but get no model.
"""

from __future__ import annotations

import logging
from typing import Any

from ...utils import to_camel_case, to_pascal_case
from ..config import GenerationOptions
from ..errors import InvalidStructure
from .inference import infer
from .ir_nodes import Model, ModelSet, Property, TypeKind

logger = logging.getLogger(__name__)

DEFAULT_ROOT_NAME = "Model"


class ModelExtractor:
    """Builds a ModelSet from a parsed JSON document."""

    def __init__(self, options: GenerationOptions | None = None):
        """
        Initialize the extractor.

        Args:
            options: Generation options; only null_safety is used here
        """
        self.options = options or GenerationOptions()

    def extract(self, document: Any, root_name: str = DEFAULT_ROOT_NAME) -> ModelSet:
        """
        Extract the root model and its nested models.

        Args:
            document: Parsed JSON; a non-empty array is replaced by its first item
            root_name: Name of the root model, normalized to PascalCase

        Returns:
            ModelSet with nested models in the order their properties were found

        Raises:
            InvalidStructure: If the document is not an object
        """
        data = self._unwrap(document)

        root = self._build_model(to_pascal_case(root_name) or DEFAULT_ROOT_NAME, data)
        model_set = ModelSet(root=root)

        nested_by_name: dict[str, Model] = {}
        for prop in root.properties:
            sample = self._nested_sample(prop, data[prop.json_key])
            if sample is None:
                continue

            model_name = prop.type_ref.name if prop.type_ref.is_reference else prop.type_ref.item.name
            model = self._build_model(model_name, sample)

            existing = nested_by_name.get(model_name)
            if existing is not None:
                logger.debug("Merging second sample of nested model %s (property %s)", model_name, prop.json_key)
                self._merge(existing, model)
                continue

            if model_name == root.name:
                logger.warning("Nested model %s has the same name as the root model", model_name)

            nested_by_name[model_name] = model
            model_set.nested.append(model)

        logger.debug(
            "Extracted %s with %d properties and %d nested models",
            root.name,
            len(root.properties),
            len(model_set.nested),
        )
        return model_set

    def _unwrap(self, document: Any) -> dict:
        """Return the object to extract from, or raise InvalidStructure."""
        if isinstance(document, list):
            if not document:
                raise InvalidStructure("Invalid data structure for model generation: empty array")
            document = document[0]

        if not isinstance(document, dict):
            raise InvalidStructure(f"Invalid data structure for model generation: expected an object, got {_json_type_name(document)}")
        return document

    def _build_model(self, name: str, data: dict) -> Model:
        """Build one model from the top-level keys of an object, without recursing."""
        model = Model(name=name)
        for key, value in data.items():
            model.properties.append(self._build_property(str(key), value))
        return model

    def _build_property(self, key: str, value: Any) -> Property:
        type_ref = infer(value)
        return Property(
            name=to_camel_case(key),
            json_key=key,
            type_ref=type_ref,
            is_nullable=value is None or self.options.null_safety,
            is_array=type_ref.kind == TypeKind.ARRAY,
            is_object=type_ref.kind == TypeKind.REFERENCE,
        )

    def _nested_sample(self, prop: Property, value: Any) -> dict | None:
        """The object a nested model is built from, if the property has one."""
        if prop.type_ref.is_reference:
            return value
        if prop.type_ref.is_array_of_reference:
            return value[0]
        return None

    def _merge(self, target: Model, other: Model) -> None:
        """
        Merge a second sample of a nested model into the first one.

        Keys present in only one sample become nullable; a key that was
        null in the first sample takes its type from the second.
        """
        other_keys = {prop.json_key for prop in other.properties}
        for prop in target.properties:
            if prop.json_key not in other_keys:
                prop.is_nullable = True

        for prop in other.properties:
            existing = target.get_property(prop.json_key)
            if existing is None:
                prop.is_nullable = True
                target.properties.append(prop)
            elif existing.type_ref.kind == TypeKind.DYNAMIC and prop.type_ref.kind != TypeKind.DYNAMIC:
                existing.type_ref = prop.type_ref
                existing.is_array = prop.is_array
                existing.is_object = prop.is_object


def extract(document: Any, root_name: str = DEFAULT_ROOT_NAME, options: GenerationOptions | None = None) -> ModelSet:
    """Extract a ModelSet from a document; see ModelExtractor.extract."""
    return ModelExtractor(options).extract(document, root_name)


def _json_type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return type(value).__name__
