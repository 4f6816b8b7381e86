"""
Model generator.

Main entry point that coordinates the pipeline phases:
extraction of the model set from a JSON document, then emission by the
backend registered for the target language.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from .analyzer import ModelExtractor
from .backends import DartBackend, KotlinBackend, ModelBackend, TypeScriptBackend
from .config import GenerationOptions, TargetLanguage

logger = logging.getLogger(__name__)

BACKENDS: dict[TargetLanguage, type[ModelBackend]] = {
    TargetLanguage.TYPESCRIPT: TypeScriptBackend,
    TargetLanguage.DART: DartBackend,
    TargetLanguage.KOTLIN: KotlinBackend,
}


def get_backend(language: TargetLanguage | str, options: GenerationOptions) -> ModelBackend:
    """Instantiate the backend for a target language."""
    return BACKENDS[TargetLanguage.parse(language)](options)


def file_extension(language: TargetLanguage | str) -> str:
    """File extension, without the dot, of sources in a target language."""
    return BACKENDS[TargetLanguage.parse(language)].FILE_EXTENSION


@dataclass(frozen=True)
class GenerationResult:
    """Generated source text and the file name suggested for it."""

    code: str

    # Without extension
    file_name: str

    language: TargetLanguage

    @property
    def extension(self) -> str:
        return file_extension(self.language)

    @property
    def suggested_path(self) -> str:
        return f"{self.file_name}.{self.extension}"


class ModelGenerator:
    """
    Model generator.

    Usage:
        generator = ModelGenerator("User", document, options, "dart")
        result = generator.generate()
        print(result.code)
    """

    def __init__(
        self,
        root_name: str,
        document: Any,
        options: GenerationOptions | None = None,
        language: TargetLanguage | str = TargetLanguage.TYPESCRIPT,
    ):
        """
        Initialize the generator.

        Args:
            root_name: Name of the root model
            document: Parsed JSON document
            options: Generation options (defaults are used if None)
            language: Target language ("typescript", "dart" or "kotlin")

        Raises:
            UnsupportedOption: If the language or the serialization style is not supported
        """
        self.root_name = root_name
        self.document = document
        self.language = TargetLanguage.parse(language)
        self.options = (options or GenerationOptions()).validated_for(self.language)

    def generate(self) -> GenerationResult:
        """
        Generate the models.

        Returns:
            GenerationResult with the source text and suggested file name

        Raises:
            InvalidStructure: If the document is not an object
        """
        model_set = ModelExtractor(self.options).extract(self.document, self.root_name)

        backend = get_backend(self.language, self.options)
        logger.debug(
            "Emitting %d models with %s (style %s)",
            len(model_set.models),
            type(backend).__name__,
            self.options.serialization_style,
        )
        code, file_name = backend.emit(model_set)
        return GenerationResult(code=code, file_name=file_name, language=self.language)


def generate(
    document: Any,
    root_name: str = "Model",
    target_language: TargetLanguage | str = TargetLanguage.TYPESCRIPT,
    options: GenerationOptions | None = None,
) -> GenerationResult:
    """
    Generate source code for the models described by a JSON document.

    Args:
        document: Parsed JSON; an object, or a non-empty array of objects
        root_name: Name of the root model
        target_language: "typescript", "dart" or "kotlin"
        options: Generation options (defaults are used if None)

    Returns:
        GenerationResult

    Raises:
        UnsupportedOption: If the language or the serialization style is not supported
        InvalidStructure: If the document is not an object
    """
    return ModelGenerator(root_name, document, options, target_language).generate()
