"""
Runtime support for generated Telegram types.

Generated modules import these helpers for sparse encoding, "type" tag
injection and InputMedia attachment handling. Nothing here runs at
generation time.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Any, Protocol, runtime_checkable

from dataclasses_json import DataClassJsonMixin

from .errors import EncodingError

logger = logging.getLogger(__name__)

ATTACH_PREFIX = "attach://"
DEFAULT_FILE_NAME = "file"
TYPE_TAG_FIELD = "type"


@runtime_checkable
class Reader(Protocol):
    """Anything with a binary read() method."""

    def read(self, size: int = -1) -> bytes: ...


@runtime_checkable
class NamedReader(Protocol):
    """A readable stream that also knows the file name to upload it under."""

    @property
    def name(self) -> str: ...

    def read(self, size: int = -1) -> bytes: ...


@dataclass
class NamedFile:
    """Pairs a bare stream with a file name.

    Streams without a name of their own are uploaded as ``DEFAULT_FILE_NAME``.
    """

    file: IO[bytes]
    file_name: str = ""

    @property
    def name(self) -> str:
        return self.file_name or DEFAULT_FILE_NAME

    def read(self, size: int = -1) -> bytes:
        return self.file.read(size)


def omit_empty(value: Any) -> bool:
    """Exclude predicate for sparse encoding.

    None, False, zero numbers and empty strings or lists are left off the wire.
    Nested structs arrive here already encoded as dicts and are always kept.
    """
    if value is None or value is False:
        return True
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0
    if isinstance(value, (str, bytes, list, tuple)):
        return len(value) == 0
    return False


def with_type_tag(tag: str, fields: dict[str, Any]) -> dict[str, Any]:
    """Return a new mapping with the "type" discriminator ahead of the encoded fields."""
    return {TYPE_TAG_FIELD: tag, **fields}


def encode_family(value: Any) -> Any:
    """Field encoder for family-typed fields.

    Nested dataclasses are normally flattened field by field, which would skip
    a member's own to_dict() and therefore its "type" tag.
    """
    if isinstance(value, (list, tuple)):
        return [encode_family(item) for item in value]
    if isinstance(value, DataClassJsonMixin):
        return value.to_dict(encode_json=False)
    return value


def normalize_media(value: Any, media_name: str) -> tuple[Any, dict[str, NamedReader]]:
    """Rewrite an InputMedia value's media field into its wire form.

    Returns a normalized copy of value plus the attachments it needs; value
    itself is left untouched.

    Args:
        value: An InputMedia member (dataclass with a ``media`` field)
        media_name: Name to register an uploaded stream under

    Returns:
        (normalized copy, {attachment name: reader})

    Raises:
        EncodingError: If media is not a string, a named reader or a readable stream
    """
    media = value.media
    if media is None or isinstance(media, str):
        return value, {}

    if isinstance(media, NamedReader):
        reader = media
    elif isinstance(media, Reader):
        reader = NamedFile(file=media)
    else:
        raise EncodingError(f"unknown type for InputMedia: {type(media).__name__}", type(media))

    # Opened files report their full path as name; only the base name is a usable key
    name = media_name or Path(reader.name).name
    return dataclasses.replace(value, media=ATTACH_PREFIX + name), {name: reader}


def input_media_params(value: Any, media_name: str, data: dict[str, NamedReader]) -> bytes:
    """Encode an InputMedia member, moving uploaded content into data.

    Args:
        value: An InputMedia member
        media_name: Name to register an uploaded stream under
        data: Caller-owned attachment table, updated in place

    Returns:
        The JSON encoding of the normalized value
    """
    normalized, attachments = normalize_media(value, media_name)
    for name, reader in attachments.items():
        logger.debug("Attaching %s for %s", name, type(value).__name__)
        data[name] = reader
    return normalized.to_json().encode("utf-8")
