"""
Field projector.

Maps the fields of a struct-shaped type to generated field definitions:
picks one preferred wire type per field, applies the InputMedia and
InlineQueryResult substitutions and decides nullability.
"""

from __future__ import annotations

import logging

from ...errors import SchemaError
from ...utils import python_attribute_name
from ..config import CodeGeneratorConfig
from ..schema.nodes import APIDescription, FieldDescriptor, TypeDescriptor
from .classifier import TypeClassifier
from .families import (
    INLINE_QUERY_RESULT,
    INPUT_FILE,
    INPUT_MEDIA,
    MEDIA_FIELD,
    TAG_PREFIXES,
    TYPE_FIELD,
)
from .ir_nodes import FamilyKind, FieldDef, TypeKind, TypeRef

logger = logging.getLogger(__name__)

ARRAY_PREFIX = "Array of "

PRIMITIVE_TYPES = {
    "Integer": "int",
    "Float": "float",
    "Float number": "float",
    "String": "str",
    "Boolean": "bool",
    "True": "bool",
}


class FieldProjector:
    """Projects described fields onto generated fields."""

    def __init__(self, description: APIDescription, classifier: TypeClassifier, config: CodeGeneratorConfig):
        self.description = description
        self.classifier = classifier
        self.config = config

    def project(self, type_desc: TypeDescriptor) -> list[FieldDef]:
        """
        Build the ordered field list of a struct.

        Args:
            type_desc: A type classified as a struct

        Returns:
            Generated fields, in description order

        Raises:
            SchemaError: If a field type cannot be resolved
        """
        fields = []
        for field_desc in type_desc.fields:
            field_def = self._project_field(type_desc, field_desc)
            if field_def is not None:
                fields.append(field_def)
        return fields

    def _project_field(self, type_desc: TypeDescriptor, field_desc: FieldDescriptor) -> FieldDef | None:
        """Project a single field, or return None if it is set by the tag encoder instead."""
        type_name = self.preferred_type(type_desc, field_desc)

        if type_desc.is_subtype_of(INLINE_QUERY_RESULT) or type_desc.is_subtype_of(INPUT_MEDIA):
            # The "type" value comes from the tagged encoder, it is not user-settable
            if field_desc.name == TYPE_FIELD:
                logger.debug("Dropping %s.%s, set by the tagged encoder", type_desc.name, field_desc.name)
                return None

        if type_desc.is_subtype_of(INPUT_MEDIA) and field_desc.name == MEDIA_FIELD:
            # Every media field shares the upload handling of InputFile
            type_name = INPUT_FILE

        type_ref = self.resolve_type(type_name, type_desc, field_desc)
        if type_ref.kind in (TypeKind.CLASS, TypeKind.FAMILY) and not field_desc.required:
            type_ref.is_nullable = True

        return FieldDef(
            name=python_attribute_name(field_desc.name),
            original_name=field_desc.name,
            type_ref=type_ref,
            is_required=field_desc.required,
            description=field_desc.description,
            uses_family_encoder=self._needs_family_encoder(type_ref),
        )

    def preferred_type(self, type_desc: TypeDescriptor, field_desc: FieldDescriptor) -> str:
        """
        Pick one wire type out of a field's alternatives.

        Alternatives that all belong to one family resolve to that family;
        otherwise the first configured priority present wins.

        Raises:
            SchemaError: If no alternative can be chosen
        """
        types = field_desc.types
        if not types:
            raise SchemaError(f"field {field_desc.name} of type {type_desc.name} has no declared type", type_name=type_desc.name)

        if len(types) == 1:
            return types[0]

        family = self._common_family(types)
        if family is not None:
            return family

        for candidate in self.config.type_priority:
            if candidate in types:
                return candidate

        raise SchemaError(
            f"unable to choose one of multiple types {types} for field {field_desc.name} of type {type_desc.name}",
            type_name=type_desc.name,
        )

    def resolve_type(self, type_name: str, type_desc: TypeDescriptor, field_desc: FieldDescriptor) -> TypeRef:
        """
        Resolve a wire type name to a type reference.

        Raises:
            SchemaError: If the name is neither a primitive nor a described type
        """
        if type_name.startswith(ARRAY_PREFIX):
            item = self.resolve_type(type_name[len(ARRAY_PREFIX) :], type_desc, field_desc)
            return TypeRef(kind=TypeKind.ARRAY, name="list", type_args=[item])

        if type_name in PRIMITIVE_TYPES:
            return TypeRef(kind=TypeKind.PRIMITIVE, name=PRIMITIVE_TYPES[type_name])

        if self.classifier.family(type_name) is not None:
            return TypeRef(kind=TypeKind.FAMILY, name=type_name)

        if self.description.is_schema_type(type_name):
            return TypeRef(kind=TypeKind.CLASS, name=type_name)

        raise SchemaError(
            f"unknown type {type_name} for field {field_desc.name} of type {type_desc.name}",
            type_name=type_desc.name,
        )

    def _common_family(self, types: list[str]) -> str | None:
        """The single family every alternative belongs to, if there is one."""
        shared: set[str] | None = None
        for type_name in types:
            families = self.classifier.families_of(type_name)
            shared = families if shared is None else shared & families
        if shared and len(shared) == 1:
            return shared.pop()
        return None

    def _needs_family_encoder(self, type_ref: TypeRef) -> bool:
        """Whether the field holds values that inject a "type" tag or implement a family."""
        inner = type_ref.innermost()
        if inner.kind == TypeKind.FAMILY:
            family = self.classifier.family(inner.name)
            return family is not None and family.kind == FamilyKind.DISCRIMINATED
        if inner.kind == TypeKind.CLASS:
            target = self.description.get_type(inner.name)
            return target is not None and any(target.is_subtype_of(name) for name in TAG_PREFIXES)
        return False
