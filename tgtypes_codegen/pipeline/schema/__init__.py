"""
Schema module.

Contains the API description nodes and the api.json parser.
"""

from __future__ import annotations

from .nodes import APIDescription, FieldDescriptor, TypeDescriptor
from .parser import SchemaParser, load_api_description

__all__ = [
    "APIDescription",
    "FieldDescriptor",
    "TypeDescriptor",
    "SchemaParser",
    "load_api_description",
]
