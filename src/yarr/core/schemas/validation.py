"""Shared schema validation utilities.

yarr validates structured YAML payloads using JSON Schema. Schemas are stored
as YAML files under ``yarr.data/schemas/`` and loaded in a single, consistent
way.
"""
from __future__ import annotations

from typing import Any, Dict, List

from jsonschema import Draft202012Validator

from yarr.data import get_data_path, read_yaml


class SchemaValidationError(ValueError):
    """Raised when schema validation fails.

    ``errors`` holds one human-readable line per violation.
    """

    def __init__(self, message: str, errors: List[str] | None = None) -> None:
        super().__init__(message)
        self.errors = list(errors or [])


def load_schema(schema_name: str) -> Dict[str, Any]:
    """Load a bundled schema dict.

    Automatically appends ``.yaml`` if no extension is present.

    Raises:
        FileNotFoundError: If schema file doesn't exist.
        ValueError: If schema is not a YAML mapping.
    """
    lowered = schema_name.lower()
    if not (lowered.endswith(".yaml") or lowered.endswith(".yml")):
        schema_name = f"{schema_name}.yaml"

    path = get_data_path("schemas", schema_name)
    if not path.exists():
        raise FileNotFoundError(f"Schema not found: {schema_name}")

    schema = read_yaml("schemas", schema_name)
    if not isinstance(schema, dict):
        raise ValueError(f"Schema {schema_name} must be a mapping")
    return schema


def _format_error(error: Any) -> str:
    location = ".".join(str(p) for p in error.absolute_path)
    if location:
        return f"{location}: {error.message}"
    return str(error.message)


def validate_payload(payload: Any, schema_name: str) -> None:
    """Validate ``payload`` against a bundled schema.

    Raises:
        SchemaValidationError: Listing every violation, sorted by location.
    """
    schema = load_schema(schema_name)
    validator = Draft202012Validator(schema)
    errors = sorted(validator.iter_errors(payload), key=lambda e: [str(p) for p in e.absolute_path])
    if not errors:
        return
    lines = [_format_error(e) for e in errors]
    raise SchemaValidationError("; ".join(lines), errors=lines)


__all__ = ["SchemaValidationError", "load_schema", "validate_payload"]
