"""Telegram Bot API types generator

A Python package for generating client-library type definitions from a
Bot API description. Handles polymorphic families (reply markups, inline
query results, input media, ...) without native union types.
"""

__version__ = "1.0.1"

from .errors import EncodingError, OutputError, SchemaError
from .pipeline import (
    APIDescription,
    AtomicWriter,
    CodeGeneratorConfig,
    FormatterConfig,
    OutputConfig,
    OutputMode,
    PipelineGenerator,
    load_api_description,
)

__all__ = [
    "PipelineGenerator",
    "CodeGeneratorConfig",
    "FormatterConfig",
    "OutputConfig",
    "OutputMode",
    "APIDescription",
    "load_api_description",
    "AtomicWriter",
    "SchemaError",
    "EncodingError",
    "OutputError",
]
