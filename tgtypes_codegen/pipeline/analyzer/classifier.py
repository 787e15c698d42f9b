"""
Type classifier.

Decides the generated shape of every described type: a concrete struct, a
marker family or a discriminated family.
"""

from __future__ import annotations

import logging
from enum import Enum

from ...errors import SchemaError
from ..config import CodeGeneratorConfig
from ..schema.nodes import APIDescription, TypeDescriptor
from .families import (
    EMPTY_TYPES,
    GENERIC_FAMILIES,
    INPUT_MEDIA,
    REPLY_MARKUP,
    REPLY_MARKUP_TYPES,
    accessor_name,
)
from .ir_nodes import FamilyDef, FamilyKind, MethodDef, MethodKind

logger = logging.getLogger(__name__)


class TypeShape(Enum):
    """Generated shape of a described type."""

    STRUCT = "struct"
    MARKER_FAMILY = "marker_family"
    DISCRIMINATED_FAMILY = "discriminated_family"


class TypeClassifier:
    """Classifies described types and keeps the resulting family table."""

    def __init__(self, description: APIDescription, config: CodeGeneratorConfig):
        """
        Initialize the classifier.

        Args:
            description: The loaded API description
            config: Code generation configuration
        """
        self.description = description
        self.empty_types = EMPTY_TYPES | set(config.additional_empty_types)
        self._shapes: dict[str, TypeShape] = {}
        self._families: dict[str, FamilyDef] = {REPLY_MARKUP: self._reply_markup_family()}

    def classify(self, type_desc: TypeDescriptor) -> TypeShape:
        """
        Decide the generated shape of a type.

        Args:
            type_desc: The type to classify

        Returns:
            The type's shape

        Raises:
            SchemaError: If the type has no fields and is not a known family or empty type
        """
        if type_desc.name in self._shapes:
            return self._shapes[type_desc.name]

        if type_desc.fields:
            shape = TypeShape.STRUCT
        elif type_desc.name == INPUT_MEDIA or type_desc.name in GENERIC_FAMILIES:
            family = self._family_from_type(type_desc)
            self._families[type_desc.name] = family
            shape = TypeShape.DISCRIMINATED_FAMILY if family.kind == FamilyKind.DISCRIMINATED else TypeShape.MARKER_FAMILY
        elif type_desc.name in self.empty_types:
            shape = TypeShape.STRUCT
        else:
            raise SchemaError(
                f"unknown type {type_desc.name} has no fields - please check if this requires implementation",
                type_name=type_desc.name,
            )

        logger.debug("Classified %s as %s", type_desc.name, shape.value)
        self._shapes[type_desc.name] = shape
        return shape

    def family(self, name: str) -> FamilyDef | None:
        """
        Look up a family by name.

        Args:
            name: Family name

        Returns:
            The family, or None if name is not a family
        """
        if name not in self._families:
            type_desc = self.description.get_type(name)
            if type_desc is None or type_desc.fields:
                return None
            if self.classify(type_desc) == TypeShape.STRUCT:
                return None
        return self._families[name]

    def families_of(self, type_name: str) -> set[str]:
        """Names of the families a type is a member of, including the synthetic one."""
        names = set()
        type_desc = self.description.get_type(type_name)
        if type_desc is not None:
            names.update(name for name in type_desc.subtype_of if self.family(name) is not None)
        if type_name in REPLY_MARKUP_TYPES:
            names.add(REPLY_MARKUP)
        return names

    def _family_from_type(self, type_desc: TypeDescriptor) -> FamilyDef:
        """Build the family a zero-field type stands for."""
        family = FamilyDef(
            name=type_desc.name,
            description=list(type_desc.description),
            href=type_desc.href,
            members=list(type_desc.subtypes),
        )

        # Nothing will ever need to satisfy a family without members structurally
        if not type_desc.subtypes:
            return family

        method_kind = MethodKind.MEDIA_ACCESSOR if type_desc.name == INPUT_MEDIA else MethodKind.ACCESSOR
        family.kind = FamilyKind.DISCRIMINATED
        family.method = MethodDef(kind=method_kind, name=accessor_name(type_desc.name), family=type_desc.name)
        return family

    def _reply_markup_family(self) -> FamilyDef:
        """The reply_markup field accepts several unrelated keyboard types."""
        return FamilyDef(
            name=REPLY_MARKUP,
            kind=FamilyKind.DISCRIMINATED,
            description=["Any of the keyboard markups a reply_markup field accepts: " + ", ".join(REPLY_MARKUP_TYPES) + "."],
            method=MethodDef(kind=MethodKind.ACCESSOR, name=accessor_name(REPLY_MARKUP), family=REPLY_MARKUP),
            members=list(REPLY_MARKUP_TYPES),
        )
