"""
Pipeline - AST-based Bot API description to Python types generator.

1. Phase 1 (Parser): Load the API description into nodes
2. Phase 2 (Analyzer): Classify types, project fields, bind families into IR
3. Phase 3 (AST Backend): Generate Python AST from IR
4. Phase 4 (Serializer): Convert AST to source code
5. Phase 5 (Formatter): Optional post-processing (ruff or black)
6. Phase 6 (Writer): Atomic write of the generated module
"""

from __future__ import annotations

from .config import CodeGeneratorConfig, FormatterConfig, OutputConfig, OutputMode
from .generator import PipelineGenerator
from .schema import APIDescription, FieldDescriptor, SchemaParser, TypeDescriptor, load_api_description
from .writer import AtomicWriter

__all__ = [
    "PipelineGenerator",
    "CodeGeneratorConfig",
    "FormatterConfig",
    "OutputConfig",
    "OutputMode",
    "APIDescription",
    "FieldDescriptor",
    "TypeDescriptor",
    "SchemaParser",
    "load_api_description",
    "AtomicWriter",
]
