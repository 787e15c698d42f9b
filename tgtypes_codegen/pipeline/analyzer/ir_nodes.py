"""
IR (Intermediate Representation) node definitions.

These nodes are the generated declarations: family interfaces, structs,
their fields and the conformance methods bound onto them. All type
references are resolved and every shape decision is made.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class TypeKind(Enum):
    """Kind of type in the IR."""

    PRIMITIVE = "primitive"  # int, str, bool, float
    CLASS = "class"  # A generated struct
    FAMILY = "family"  # A generated family interface
    ARRAY = "array"  # list[T]


@dataclass
class TypeRef:
    """A resolved type reference."""

    kind: TypeKind = TypeKind.PRIMITIVE
    name: str = ""  # Type name (e.g., "int", "PhotoSize")

    # For arrays
    type_args: list[TypeRef] = field(default_factory=list)

    # May be absent, distinguishable from the type's zero value
    is_nullable: bool = False

    def innermost(self) -> TypeRef:
        """The element type once all array levels are unwrapped."""
        type_ref = self
        while type_ref.kind == TypeKind.ARRAY and type_ref.type_args:
            type_ref = type_ref.type_args[0]
        return type_ref


class FamilyKind(Enum):
    """Shape of a generated family interface."""

    MARKER = "marker"  # No methods
    DISCRIMINATED = "discriminated"  # One accessor method shared by all members


class MethodKind(Enum):
    """Kind of conformance method bound onto a struct."""

    TAGGED_ENCODE = "tagged_encode"  # to_dict() override injecting the "type" tag
    ACCESSOR = "accessor"  # family() -> bytes
    MEDIA_ACCESSOR = "media_accessor"  # input_media_params(media_name, data) -> bytes


@dataclass
class MethodDef:
    """A method a struct or family declares."""

    kind: MethodKind = MethodKind.ACCESSOR
    name: str = ""
    family: str = ""

    # For TAGGED_ENCODE: the wire tag
    tag: str | None = None


@dataclass
class FieldDef:
    """A field definition in a struct."""

    name: str = ""  # Python attribute name
    original_name: str = ""  # Wire name
    type_ref: TypeRef | None = None
    is_required: bool = False
    description: str = ""

    # Encode through the family encoder so nested members keep their tag
    uses_family_encoder: bool = False


@dataclass
class FamilyDef:
    """A family interface definition."""

    name: str = ""
    kind: FamilyKind = FamilyKind.MARKER
    description: list[str] = field(default_factory=list)
    href: str = ""

    # Required method, for discriminated families
    method: MethodDef | None = None

    members: list[str] = field(default_factory=list)


@dataclass
class StructDef:
    """A concrete struct definition."""

    name: str = ""
    description: list[str] = field(default_factory=list)
    href: str = ""
    fields: list[FieldDef] = field(default_factory=list)
    methods: list[MethodDef] = field(default_factory=list)


@dataclass
class IR:
    """The complete Intermediate Representation."""

    api_version: str = ""

    # Families and structs, in generation order
    declarations: list[FamilyDef | StructDef] = field(default_factory=list)

    # Module the generated code imports runtime helpers from
    runtime_module: str = ""

    # Command line recorded in the generation comment
    command_line: str = ""

    @property
    def families(self) -> list[FamilyDef]:
        return [d for d in self.declarations if isinstance(d, FamilyDef)]

    @property
    def structs(self) -> list[StructDef]:
        return [d for d in self.declarations if isinstance(d, StructDef)]

    def get(self, name: str) -> FamilyDef | StructDef | None:
        for declaration in self.declarations:
            if declaration.name == name:
                return declaration
        return None
