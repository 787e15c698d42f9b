"""
Exceptions raised by the generator and by generated code at runtime.
"""

from __future__ import annotations


class SchemaError(Exception):
    """Raised when the API description cannot be turned into type definitions.

    This can happen when:
    - A type has no fields and is not a known family or empty type
    - A type declares a parent family the binder does not know about
    - A field has no resolvable preferred type

    Generation is aborted; no partial output is produced.
    """

    def __init__(self, message: str, type_name: str = "", family: str | None = None):
        super().__init__(message)
        self.type_name = type_name
        self.family = family


class EncodingError(Exception):
    """Raised by generated code when a value cannot be encoded for the wire."""

    def __init__(self, message: str, value_type: type | None = None):
        super().__init__(message)
        self.value_type = value_type


class OutputError(Exception):
    """Raised when generated code cannot be written to its destination."""

    pass
