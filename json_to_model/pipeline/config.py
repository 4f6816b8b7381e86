"""
Configuration for the model generation pipeline.

Holds the target language selector, the per-language table of legal
serialization styles, and the immutable options record passed to `generate`.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from enum import Enum

from .errors import UnsupportedOption


class TargetLanguage(str, Enum):
    """Languages the backends can emit."""

    TYPESCRIPT = "typescript"
    DART = "dart"
    KOTLIN = "kotlin"

    @classmethod
    def parse(cls, value: TargetLanguage | str) -> TargetLanguage:
        """
        Resolve a language name or alias.

        Args:
            value: A TargetLanguage, its value, or an alias ("ts", "kt")

        Returns:
            The matching TargetLanguage

        Raises:
            UnsupportedOption: If the name is not recognized
        """
        if isinstance(value, TargetLanguage):
            return value
        key = str(value).strip().lower()
        key = LANGUAGE_ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            supported = ", ".join(language.value for language in cls)
            raise UnsupportedOption(f"Unsupported target language: {value!r} (expected one of: {supported})") from None


LANGUAGE_ALIASES: dict[str, str] = {
    "ts": "typescript",
    "kt": "kotlin",
}

# Legal serialization styles per language; the first entry is the default
SERIALIZATION_STYLES: dict[TargetLanguage, tuple[str, ...]] = {
    TargetLanguage.TYPESCRIPT: ("none", "class-transformer", "type-only"),
    TargetLanguage.DART: ("none", "json-serializable", "from-json-to-json"),
    TargetLanguage.KOTLIN: ("none", "kotlinx-serialization", "jackson", "gson"),
}

# Labels shown by the web front end
STYLE_ALIASES: dict[str, str] = {
    "@JsonSerializable": "json-serializable",
    "fromJson/toJson": "from-json-to-json",
    "@Serializable": "kotlinx-serialization",
    "Jackson": "jackson",
    "Gson": "gson",
}

# camelCase keys accepted by from_dict
_DICT_KEY_ALIASES: dict[str, str] = {
    "includeConstructor": "include_constructor",
    "nullSafety": "null_safety",
    "serializationOptions": "serialization_style",
    "serializationStyle": "serialization_style",
    "packageName": "package_name",
}


def serialization_styles(language: TargetLanguage | str) -> tuple[str, ...]:
    """Return the serialization styles accepted for a language."""
    return SERIALIZATION_STYLES[TargetLanguage.parse(language)]


def normalize_style(language: TargetLanguage | str, style: str) -> str:
    """
    Map a serialization style or one of its aliases to its canonical name.

    Args:
        language: Target language the style must belong to
        style: Style name as given by the caller

    Returns:
        Canonical style name

    Raises:
        UnsupportedOption: If the style is not a string or not legal for the language
    """
    language = TargetLanguage.parse(language)
    legal = SERIALIZATION_STYLES[language]
    if not isinstance(style, str):
        raise UnsupportedOption(f"Serialization style must be a string, got {style!r} (expected one of: {', '.join(legal)})")
    candidate = STYLE_ALIASES.get(style, style)
    if candidate not in legal:
        candidate = candidate.lower()
    if candidate not in legal:
        raise UnsupportedOption(f"Serialization style {style!r} is not supported for {language.value} (expected one of: {', '.join(legal)})")
    return candidate


@dataclass(frozen=True)
class GenerationOptions:
    """Options controlling how models are rendered."""

    # Emit a constructor / initializer for every model
    include_constructor: bool = True

    # Treat every field as nullable, whatever value was observed
    null_safety: bool = True

    # One of SERIALIZATION_STYLES[language]
    serialization_style: str = "none"

    # Package declaration for languages that have one (Kotlin)
    package_name: str | None = None

    @staticmethod
    def from_dict(d: dict) -> GenerationOptions:
        """Create options from a dictionary, ignoring unknown keys."""
        known = {f for f in GenerationOptions.__dataclass_fields__}
        values = {}
        for k, v in d.items():
            k = _DICT_KEY_ALIASES.get(k, k)
            if k in known:
                values[k] = v
        return GenerationOptions(**values)

    def to_dict(self) -> dict:
        """Convert options to a dictionary."""
        return asdict(self)

    def validated_for(self, language: TargetLanguage | str) -> GenerationOptions:
        """
        Check the options against a target language.

        Args:
            language: Target language

        Returns:
            A copy whose serialization style is the canonical name

        Raises:
            UnsupportedOption: If the serialization style is not legal for the language
        """
        style = normalize_style(language, self.serialization_style)
        if style == self.serialization_style:
            return self
        return replace(self, serialization_style=style)
