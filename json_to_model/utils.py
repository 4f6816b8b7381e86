"""
Naming utilities shared by the analyzer and every backend.
"""

import re

# A separator followed by any single character
_SEPARATOR_PATTERN = re.compile(r"[_-](.)")

# Characters that end a word in to_snake_case
_WORD_BREAK_PATTERN = re.compile(r"[\W_]+")


def _collapse_separators(text: str) -> str:
    """Delete each `_x` / `-x` separator and upper-case the character after it."""
    return _SEPARATOR_PATTERN.sub(lambda match: match.group(1).upper(), text)


def to_pascal_case(text: str) -> str:
    """Convert a JSON key to a PascalCase identifier.

    The first character is upper-cased and every `_x` or `-x` after it becomes `X`.
    Nothing else is touched, so the conversion is best-effort on unusual keys:

    Examples:
        "first_name" -> "FirstName"
        "content-type" -> "ContentType"
        "userId" -> "UserId"
        "a__b" -> "A_b" (the second underscore is the character that gets upper-cased)
        "_id" -> "_id" (a leading separator is kept)
        "name_" -> "Name_" (a trailing separator is kept)

    Args:
        text: The key to convert

    Returns:
        PascalCase string
    """
    if not text:
        return ""
    return text[0].upper() + _collapse_separators(text[1:])


def to_camel_case(text: str) -> str:
    """Convert a JSON key to a camelCase identifier.

    Same rules as `to_pascal_case` except that the first character is lower-cased.
    `to_camel_case(to_pascal_case(s))` only differs from `s` at the first character
    and at separators; it is not a full round trip ("URL" -> "uRL").

    Different keys can map to the same identifier ("first_name" and "firstName"
    both give "firstName"). Such keys are not disambiguated, so an object holding
    both yields two fields with the same name.

    Args:
        text: The key to convert

    Returns:
        camelCase string
    """
    if not text:
        return ""
    return text[0].lower() + _collapse_separators(text[1:])


def to_snake_case(text: str) -> str:
    """Convert PascalCase, camelCase or kebab-case text to snake_case.

    Words break at separators, at a lower-to-upper case change and between
    letters and digits. Letters outside ASCII are kept.

    Examples:
        "UserProfile" -> "user_profile"
        "Model" -> "model"
        "api-response" -> "api_response"
        "Café" -> "café"
        "Order2" -> "order_2"

    Args:
        text: The text to convert

    Returns:
        snake_case string, or the lower-cased text when it has no word characters
    """
    if not text:
        return ""

    words = []
    for chunk in _WORD_BREAK_PATTERN.split(text):
        word = ""
        for char in chunk:
            if word and (
                (char.isupper() and not word[-1].isupper())
                or char.isdigit() != word[-1].isdigit()
            ):
                words.append(word)
                word = ""
            word += char
        if word:
            words.append(word)

    return "_".join(word.lower() for word in words) or text.lower()
