"""
Polymorphism binder.

For every family a struct belongs to, decides the methods that make the
struct satisfy the family interface.
"""

from __future__ import annotations

import logging

from ...errors import SchemaError
from ...utils import strip_prefix, title_to_snake
from ..schema.nodes import TypeDescriptor
from .classifier import TypeClassifier
from .families import (
    INLINE_QUERY_RESULT,
    INPUT_MEDIA,
    INPUT_MESSAGE_CONTENT,
    PASSPORT_ELEMENT_ERROR,
    REPLY_MARKUP,
    REPLY_MARKUP_TYPES,
    TAG_PREFIXES,
    accessor_name,
)
from .ir_nodes import FamilyKind, MethodDef, MethodKind

logger = logging.getLogger(__name__)


def type_tag(type_name: str, family: str) -> str:
    """
    Derive the wire "type" tag of a family member.

    Examples:
        ("InputMediaPhoto", "InputMedia") -> "photo"
        ("InlineQueryResultCachedMpeg4Gif", "InlineQueryResult") -> "mpeg4_gif"
    """
    name = type_name
    for prefix in TAG_PREFIXES[family]:
        name = strip_prefix(name, prefix)
    return title_to_snake(name)


class PolymorphismBinder:
    """Binds structs to the families they belong to."""

    def __init__(self, classifier: TypeClassifier):
        self.classifier = classifier

    def bind(self, type_desc: TypeDescriptor) -> list[MethodDef]:
        """
        Build the conformance methods of a struct.

        Args:
            type_desc: A type classified as a struct

        Returns:
            Methods in family declaration order, reply markup last

        Raises:
            SchemaError: If the type declares a family the binder cannot handle
        """
        methods = []
        for parent in type_desc.subtype_of:
            methods.extend(self._bind_family(type_desc, parent))

        if type_desc.name in REPLY_MARKUP_TYPES:
            methods.append(self._accessor(REPLY_MARKUP))

        return methods

    def _bind_family(self, type_desc: TypeDescriptor, parent: str) -> list[MethodDef]:
        """Methods needed for one (type, family) pair."""
        family = self.classifier.family(parent)
        if family is not None and family.kind == FamilyKind.MARKER:
            return []

        if parent == INPUT_MEDIA:
            logger.debug("Binding %s to %s with media attachments", type_desc.name, parent)
            return [
                self._tagged_encode(type_desc, parent),
                MethodDef(kind=MethodKind.MEDIA_ACCESSOR, name=accessor_name(parent), family=parent),
            ]

        if parent == INLINE_QUERY_RESULT:
            logger.debug("Binding %s to %s with a type tag", type_desc.name, parent)
            return [self._tagged_encode(type_desc, parent), self._accessor(parent)]

        if parent in (INPUT_MESSAGE_CONTENT, PASSPORT_ELEMENT_ERROR):
            logger.debug("Binding %s to %s", type_desc.name, parent)
            return [self._accessor(parent)]

        raise SchemaError(
            f"unable to handle parent type {parent} while generating for type {type_desc.name}",
            type_name=type_desc.name,
            family=parent,
        )

    def _tagged_encode(self, type_desc: TypeDescriptor, parent: str) -> MethodDef:
        return MethodDef(
            kind=MethodKind.TAGGED_ENCODE,
            name="to_dict",
            family=parent,
            tag=type_tag(type_desc.name, parent),
        )

    def _accessor(self, family: str) -> MethodDef:
        return MethodDef(kind=MethodKind.ACCESSOR, name=accessor_name(family), family=family)
