"""
Analyzer module.

Contains type classification, field projection, family binding and IR building.
"""

from __future__ import annotations

from .analyzer import SchemaAnalyzer
from .binder import PolymorphismBinder, type_tag
from .classifier import TypeClassifier, TypeShape
from .ir_nodes import (
    IR,
    FamilyDef,
    FamilyKind,
    FieldDef,
    MethodDef,
    MethodKind,
    StructDef,
    TypeKind,
    TypeRef,
)
from .projector import FieldProjector

__all__ = [
    "IR",
    "FamilyDef",
    "FamilyKind",
    "FieldDef",
    "MethodDef",
    "MethodKind",
    "StructDef",
    "TypeKind",
    "TypeRef",
    "SchemaAnalyzer",
    "TypeClassifier",
    "TypeShape",
    "FieldProjector",
    "PolymorphismBinder",
    "type_tag",
]
