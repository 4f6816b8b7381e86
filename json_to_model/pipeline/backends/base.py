"""
Base class for code generation backends.

Defines the interface that all language-specific backends implement and
the rendering loop they share: nested models first, root model last.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

import jinja2

from ..analyzer.ir_nodes import Model, ModelSet, Property, TypeKind, TypeRef
from ..config import GenerationOptions


class ModelBackend(ABC):
    """Abstract base class for code generation backends."""

    # Type mapping from primitive names to language types
    TYPE_MAP: dict[str, str] = {}

    # Language type for dynamic / untyped values
    DYNAMIC_TYPE: str = ""

    # Language type for objects that have no generated model
    GENERIC_OBJECT_TYPE: str = ""

    # Template directory name
    TEMPLATE_LANG: str = ""

    # File extension
    FILE_EXTENSION: str = ""

    def __init__(self, options: GenerationOptions):
        """
        Initialize the backend.

        Args:
            options: Generation options, already validated for this language
        """
        self.options = options
        self.known_models: set[str] = set()
        self.imports: set[str] = set()
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent.parent / "templates" / self.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
            undefined=jinja2.StrictUndefined,
        )

        self.prefix_template = self.jinja_env.get_template(f"prefix.{self.FILE_EXTENSION}.jinja2")
        self.class_template = self.jinja_env.get_template(f"class.{self.FILE_EXTENSION}.jinja2")

    @property
    def style(self) -> str:
        return self.options.serialization_style

    def emit(self, model_set: ModelSet) -> tuple[str, str]:
        """
        Render a model set.

        Args:
            model_set: Root model and nested models

        Returns:
            Tuple of (source text, suggested file name without extension)
        """
        return self.generate(model_set), self.file_name(model_set.root.name)

    def generate(self, model_set: ModelSet) -> str:
        """
        Generate code for every model in the set.

        Args:
            model_set: Root model and nested models

        Returns:
            Generated code as a string
        """
        # Reset per-call state
        self.known_models = model_set.model_names
        self.imports = set()

        # Classes are rendered first so that they can register imports
        classes = [self.class_template.render(self._prepare_model_context(model)).rstrip() for model in model_set.models]

        prefix = self.prefix_template.render(self._prepare_prefix_context(model_set)).strip()

        parts = [prefix] if prefix else []
        parts.extend(classes)
        return "\n\n".join(parts) + "\n"

    @abstractmethod
    def file_name(self, model_name: str) -> str:
        """
        Suggested file name for a root model, without extension.

        Args:
            model_name: PascalCase name of the root model

        Returns:
            File name in the language's customary casing
        """

    @abstractmethod
    def default_value(self, prop: Property) -> str | None:
        """
        Initializer for a field that is not set by a constructor.

        Args:
            prop: The property

        Returns:
            Language literal, or None when the field needs no initializer
        """

    @abstractmethod
    def _prepare_field_context(self, prop: Property) -> dict[str, Any]:
        """
        Prepare the template context for a field.

        Args:
            prop: The property

        Returns:
            Dictionary of template variables
        """

    def _prepare_prefix_context(self, model_set: ModelSet) -> dict[str, Any]:
        """Template variables for the file prefix (package, imports)."""
        return {
            "imports": sorted(self.imports),
            "style": self.style,
        }

    def _prepare_model_context(self, model: Model) -> dict[str, Any]:
        """
        Prepare the template context for a model.

        Args:
            model: The model

        Returns:
            Dictionary of template variables
        """
        return {
            "name": model.name,
            "fields": [self._prepare_field_context(prop) for prop in model.properties],
            "include_constructor": self.options.include_constructor,
            "style": self.style,
        }

    def translate_type(self, type_ref: TypeRef) -> str:
        """
        Translate an IR type to a language-specific type string.

        References to models outside the model set (objects nested deeper than
        one level) become the generic object type.

        Args:
            type_ref: The type reference

        Returns:
            Language-specific type string, without nullability marker
        """
        if type_ref.kind == TypeKind.PRIMITIVE:
            return self.TYPE_MAP[type_ref.name]

        if type_ref.kind == TypeKind.REFERENCE:
            return type_ref.name if self.is_known_reference(type_ref) else self.GENERIC_OBJECT_TYPE

        if type_ref.kind == TypeKind.ARRAY:
            return self.array_type(self.translate_type(type_ref.item))

        return self.DYNAMIC_TYPE

    @abstractmethod
    def array_type(self, item_type: str) -> str:
        """Language type for a list of `item_type`."""

    def is_known_reference(self, type_ref: TypeRef | None) -> bool:
        """Whether the type refers to a model that is being generated."""
        return type_ref is not None and type_ref.kind == TypeKind.REFERENCE and type_ref.name in self.known_models

    def nested_model_of(self, prop: Property) -> str | None:
        """
        Name of the generated model a field holds, directly or as list items.

        Returns:
            Model name, or None for fields of any other type
        """
        if self.is_known_reference(prop.type_ref):
            return prop.type_ref.name
        if self.is_known_reference(prop.type_ref.item):
            return prop.type_ref.item.name
        return None
