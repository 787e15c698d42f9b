"""
Node definitions for the Bot API description.

These nodes represent the loaded API description before any classification
or language-specific processing. They are read-only during generation.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class FieldDescriptor:
    """One field of a described type."""

    name: str = ""  # Wire name, snake_case
    description: str = ""

    # Wire type alternatives, e.g. ["InputFile", "String"] or ["Array of PhotoSize"]
    types: list[str] = field(default_factory=list)

    required: bool = False


@dataclass
class TypeDescriptor:
    """One type of the API description."""

    name: str = ""
    description: list[str] = field(default_factory=list)
    href: str = ""
    fields: list[FieldDescriptor] = field(default_factory=list)

    # Families this type belongs to
    subtype_of: list[str] = field(default_factory=list)

    # Members, when this type is itself a family
    subtypes: list[str] = field(default_factory=list)

    def is_subtype_of(self, family: str) -> bool:
        return family in self.subtype_of


@dataclass
class APIDescription:
    """Root of the loaded API description."""

    version: str = ""
    release_date: str = ""
    changelog: str = ""

    # Types in declaration order
    types: dict[str, TypeDescriptor] = field(default_factory=dict)

    def get_type(self, name: str) -> TypeDescriptor | None:
        return self.types.get(name)

    def is_schema_type(self, name: str) -> bool:
        return name in self.types
