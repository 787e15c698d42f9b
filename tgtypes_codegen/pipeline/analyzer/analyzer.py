"""
Schema analyzer that transforms the API description to IR.

Phase 2 of the pipeline: classify every type, project struct fields and
bind structs to their families.
"""

from __future__ import annotations

import logging

from ...errors import SchemaError
from ..config import CodeGeneratorConfig
from ..schema.nodes import APIDescription, TypeDescriptor
from .binder import PolymorphismBinder
from .classifier import TypeClassifier, TypeShape
from .families import REPLY_MARKUP
from .ir_nodes import IR, StructDef
from .projector import FieldProjector

logger = logging.getLogger(__name__)


class SchemaAnalyzer:
    """Analyzes an API description and builds IR."""

    def __init__(self, config: CodeGeneratorConfig):
        """
        Initialize the analyzer.

        Args:
            config: Code generation configuration
        """
        self.config = config

        # Will be set during analysis
        self.classifier: TypeClassifier | None = None
        self.projector: FieldProjector | None = None
        self.binder: PolymorphismBinder | None = None

    def analyze(self, description: APIDescription) -> IR:
        """
        Analyze the description and build IR.

        Args:
            description: The loaded API description

        Returns:
            IR ready for code generation

        Raises:
            SchemaError: If any type cannot be classified, projected or bound
        """
        self.classifier = TypeClassifier(description, self.config)
        self.projector = FieldProjector(description, self.classifier, self.config)
        self.binder = PolymorphismBinder(self.classifier)

        ir = IR(api_version=description.version, runtime_module=self.config.runtime_module)

        # The synthetic family goes first; nothing in the description declares it
        ir.declarations.append(self.classifier.family(REPLY_MARKUP))

        for type_desc in description.types.values():
            if type_desc.name in self.config.ignore_types:
                continue

            shape = self.classifier.classify(type_desc)
            if shape == TypeShape.STRUCT:
                ir.declarations.append(self._analyze_struct(type_desc))
            else:
                ir.declarations.append(self.classifier.family(type_desc.name))

        logger.info("Analyzed %d families and %d structs", len(ir.families), len(ir.structs))
        return ir

    def _analyze_struct(self, type_desc: TypeDescriptor) -> StructDef:
        """Build the struct definition of a single type."""
        struct = StructDef(
            name=type_desc.name,
            description=list(type_desc.description),
            href=type_desc.href,
            fields=self.projector.project(type_desc),
            methods=self.binder.bind(type_desc),
        )
        self._check_member_names(struct)
        return struct

    def _check_member_names(self, struct: StructDef) -> None:
        """Methods must not shadow fields or each other."""
        seen = {field_def.name for field_def in struct.fields}
        for method in struct.methods:
            if method.name in seen:
                raise SchemaError(
                    f"method {method.name} for family {method.family} clashes with a member of type {struct.name}",
                    type_name=struct.name,
                    family=method.family,
                )
            seen.add(method.name)
