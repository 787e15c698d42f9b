"""
Parser that builds an APIDescription from the api.json layout.

Phase 1 of the pipeline: load types, fields and subtype edges without any
classification or language-specific processing.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from ...errors import SchemaError
from .nodes import APIDescription, FieldDescriptor, TypeDescriptor

logger = logging.getLogger(__name__)


class SchemaParser:
    """Parses the JSON API description into nodes."""

    def parse(self, raw: dict[str, Any]) -> APIDescription:
        """
        Parse a JSON API description.

        Args:
            raw: The decoded api.json document

        Returns:
            APIDescription with types in declaration order

        Raises:
            SchemaError: If a type is structurally malformed
        """
        description = APIDescription(
            version=raw.get("version", ""),
            release_date=raw.get("release_date", ""),
            changelog=raw.get("changelog", ""),
        )

        for name, type_schema in (raw.get("types") or {}).items():
            description.types[name] = self._parse_type(name, type_schema)

        self._check_subtype_edges(description)
        logger.debug("Parsed %d types from API %s", len(description.types), description.version or "(unversioned)")
        return description

    def _parse_type(self, name: str, type_schema: dict[str, Any]) -> TypeDescriptor:
        """Parse a single type entry."""
        type_desc = TypeDescriptor(
            name=type_schema.get("name", name),
            description=list(type_schema.get("description") or []),
            href=type_schema.get("href", ""),
            subtype_of=list(type_schema.get("subtype_of") or []),
            subtypes=list(type_schema.get("subtypes") or []),
        )

        seen: set[str] = set()
        for field_schema in type_schema.get("fields") or []:
            field_desc = self._parse_field(field_schema)
            if field_desc.name in seen:
                raise SchemaError(f"duplicate field {field_desc.name} in type {type_desc.name}", type_name=type_desc.name)
            seen.add(field_desc.name)
            type_desc.fields.append(field_desc)

        return type_desc

    def _parse_field(self, field_schema: dict[str, Any]) -> FieldDescriptor:
        """Parse a single field entry."""
        return FieldDescriptor(
            name=field_schema.get("name", ""),
            description=field_schema.get("description", ""),
            types=list(field_schema.get("types") or []),
            required=bool(field_schema.get("required", False)),
        )

    def _check_subtype_edges(self, description: APIDescription) -> None:
        """Check that every subtype edge points at a described type."""
        for type_desc in description.types.values():
            for name in type_desc.subtype_of + type_desc.subtypes:
                if not description.is_schema_type(name):
                    raise SchemaError(
                        f"type {type_desc.name} references undescribed type {name}",
                        type_name=type_desc.name,
                    )


def load_api_description(path: str | Path) -> APIDescription:
    """Load and parse an api.json file."""
    with open(path, encoding="utf-8") as f:
        raw = json.load(f)
    return SchemaParser().parse(raw)
