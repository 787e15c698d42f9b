"""
Post-processing formatters for generated code.
"""

from __future__ import annotations

from .base import Formatter
from .black_formatter import BlackFormatter
from .ruff_formatter import RuffFormatter

FORMATTERS: dict[str, type[Formatter]] = {
    "ruff": RuffFormatter,
    "black": BlackFormatter,
}


def get_formatter(backend: str) -> Formatter:
    """Instantiate the formatter registered under backend."""
    if backend not in FORMATTERS:
        raise ValueError(f"Unknown formatter '{backend}', expected one of {sorted(FORMATTERS)}")
    return FORMATTERS[backend]()


__all__ = [
    "FORMATTERS",
    "Formatter",
    "BlackFormatter",
    "RuffFormatter",
    "get_formatter",
]
