"""
AST backends.

Contains language-specific generators that emit source from IR.
"""

from __future__ import annotations

from .base import AstBackend
from .python_ast_backend import PythonAstBackend

__all__ = [
    "AstBackend",
    "PythonAstBackend",
]
