"""
Fixed classification lists for zero-field types and polymorphic families.

The Bot API description does not say which zero-field types are families or
which concrete types a reply_markup field accepts, so these lists are kept
here by hand. Generation fails fast when the description outgrows them.
"""

from __future__ import annotations

from types import MappingProxyType

from ...utils import title_to_snake

INPUT_MEDIA = "InputMedia"
CALLBACK_GAME = "CallbackGame"
INLINE_QUERY_RESULT = "InlineQueryResult"
INPUT_FILE = "InputFile"
INPUT_MESSAGE_CONTENT = "InputMessageContent"
PASSPORT_ELEMENT_ERROR = "PassportElementError"
VOICE_CHAT_STARTED = "VoiceChatStarted"

# Synthetic family, not declared by the API description
REPLY_MARKUP = "ReplyMarkup"

# TODO: derive from the reply_markup field types once the description marks them as a family.
REPLY_MARKUP_TYPES: tuple[str, ...] = (
    "InlineKeyboardMarkup",
    "ReplyKeyboardMarkup",
    "ReplyKeyboardRemove",
    "ForceReply",
)

# Zero-field types that are generic families: discriminated when they have members, marker otherwise
GENERIC_FAMILIES = frozenset(
    {
        CALLBACK_GAME,
        INLINE_QUERY_RESULT,
        INPUT_FILE,
        INPUT_MESSAGE_CONTENT,
        PASSPORT_ELEMENT_ERROR,
    }
)

# Zero-field types that really are empty structs
EMPTY_TYPES = frozenset({VOICE_CHAT_STARTED})

# Families whose members carry a "type" tag on the wire, with the name
# prefixes stripped (in order) to derive the tag
TAG_PREFIXES = MappingProxyType(
    {
        INPUT_MEDIA: (INPUT_MEDIA,),
        INLINE_QUERY_RESULT: (INLINE_QUERY_RESULT, "Cached"),
    }
)

TYPE_FIELD = "type"
MEDIA_FIELD = "media"


def accessor_name(family: str) -> str:
    """Name of the method a family's members implement.

    Examples:
        "InlineQueryResult" -> "inline_query_result"
        "InputMedia" -> "input_media_params"
    """
    if family == INPUT_MEDIA:
        return f"{title_to_snake(family)}_params"
    return title_to_snake(family)
