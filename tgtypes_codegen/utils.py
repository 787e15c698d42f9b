"""
Utility functions for the Telegram types generator.
"""

import keyword
import re

# Regex pattern to split TitleCase text into words; digits stick to the preceding word
_WORD_PATTERN = re.compile(r"[A-Z][a-z0-9]*|[a-z0-9]+")


def _split_into_words(text: str) -> list[str]:
    """Split text into words, handling TitleCase boundaries."""
    return _WORD_PATTERN.findall(text)


def title_to_snake(text: str) -> str:
    """Convert TitleCase text to snake_case.

    Examples:
        "Photo" -> "photo"
        "Mpeg4Gif" -> "mpeg4_gif"
        "InputMessageContent" -> "input_message_content"

    Args:
        text: The text to convert

    Returns:
        snake_case string
    """
    if not text:
        return ""
    return "_".join(word.lower() for word in _split_into_words(text))


def strip_prefix(text: str, prefix: str) -> str:
    """Remove prefix from text if present."""
    return text[len(prefix) :] if text.startswith(prefix) else text


# Names generated struct bodies already bind: dataclass helpers and DataClassJsonMixin methods
_RESERVED_NAMES = {"field", "config", "to_dict", "to_json", "from_dict", "from_json", "schema"}


def python_attribute_name(wire_name: str) -> str:
    """Return a valid Python attribute name for a wire field name.

    Examples:
        "file_id" -> "file_id"
        "from" -> "from_"
    """
    if keyword.iskeyword(wire_name) or wire_name in _RESERVED_NAMES:
        return f"{wire_name}_"
    return wire_name
