"""Identifier case conversion for generated TypeScript names."""

import re

# Word boundaries: "getUser" -> "get User", "HTTPStatus" -> "HTTP Status"
_SPLIT_PATTERNS = (
    re.compile(r"([a-z0-9])([A-Z])"),
    re.compile(r"([A-Z])([A-Z][a-z])"),
)
_STRIP_PATTERN = re.compile(r"[^A-Za-z0-9]+")


def split_words(text: str) -> list[str]:
    """Split an identifier into words on case changes and punctuation."""
    for pattern in _SPLIT_PATTERNS:
        text = pattern.sub(r"\1 \2", text)
    return [word for word in _STRIP_PATTERN.split(text) if word]


def _capitalize_word(word: str, index: int) -> str:
    if index > 0 and word[0].isdigit():
        return "_" + word.lower()
    return word[0].upper() + word[1:].lower()


def camel_case(text: str) -> str:
    """Convert to camelCase, e.g. 'GetUserByID' -> 'getUserById'."""
    words = split_words(text)
    return "".join(
        word.lower() if i == 0 else _capitalize_word(word, i)
        for i, word in enumerate(words)
    )


def pascal_case(text: str) -> str:
    """Convert to PascalCase, e.g. 'get_user' -> 'GetUser'."""
    return "".join(_capitalize_word(word, i) for i, word in enumerate(split_words(text)))


def convert_name(name: str, prefix: str = "", suffix: str = "") -> str:
    """Apply the type naming convention to a GraphQL name.

    Each underscore-separated part is pascal-cased on its own so that
    underscores survive; prefix and suffix are attached unconverted.
    """
    converted = "_".join(pascal_case(part) for part in name.split("_"))
    return f"{prefix}{converted}{suffix}"
