"""Utility to surface packaged JSON schemas and examples."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

from jsonschema import Draft7Validator, ValidationError
from referencing import Registry
from referencing.jsonschema import DRAFT7

PACKAGE_ROOT = Path(__file__).resolve().parents[1]
SCHEMA_DIR = PACKAGE_ROOT / "schemas"
EXAMPLE_DIR = SCHEMA_DIR / "examples"

SchemaValidationError = ValidationError
"""Alias for jsonschema.ValidationError.
Keeps callers unaware of the implementation.
"""

SCHEMA_FILES = {
    "transaction_field_v1": "transaction_field_schema_v1.json",
    "country_entry_v1": "country_entry_schema_v1.json",
    "transaction_fields_v1": "transaction_fields_schema_v1.json",
    "fields_list_response_v1": "fields_list_response_schema_v1.json",
    "field_get_response_v1": "field_get_response_schema_v1.json",
    "country_list_response_v1": "country_list_response_schema_v1.json",
    "country_get_response_v1": "country_get_response_schema_v1.json",
}

EXAMPLE_FILES = {
    "country_entry_example_min": "country_entry_example_min.json",
    "transaction_fields_example_min": "transaction_fields_example_min.json",
    "transaction_field_example_min": "transaction_field_example_min.json",
    "fields_list_response_example_min": "fields_list_response_example_min.json",
    "field_get_response_example_min": "field_get_response_example_min.json",
    "country_list_response_example_min": (
        "country_list_response_example_min.json"
    ),
    "country_get_response_example_min": "country_get_response_example_min.json",
}

_SCHEMAS: dict[str, Mapping[str, Any]] = {}
_EXAMPLES: dict[str, Mapping[str, Any]] = {}
_REGISTRY: Registry | None = None


def _load_json_file(path: Path) -> Mapping[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def _schema_path(name: str) -> Path:
    filename = SCHEMA_FILES[name]
    return SCHEMA_DIR / filename


def _example_path(name: str) -> Path:
    filename = EXAMPLE_FILES[name]
    return EXAMPLE_DIR / filename


def get_schema(name: str) -> Mapping[str, Any]:
    """Return the JSON schema with the given registry name."""

    if name not in _SCHEMAS:
        _SCHEMAS[name] = _load_json_file(_schema_path(name))
    return _SCHEMAS[name]


def get_example(name: str) -> Mapping[str, Any]:
    """Return a representative example payload by name."""

    if name not in _EXAMPLES:
        _EXAMPLES[name] = _load_json_file(_example_path(name))
    return _EXAMPLES[name]


def _get_registry() -> Registry:
    """Return a registry keyed by schema filename so files can $ref each other."""

    global _REGISTRY
    if _REGISTRY is None:
        _REGISTRY = Registry().with_resources(
            (filename, DRAFT7.create_resource(get_schema(name)))
            for name, filename in SCHEMA_FILES.items()
        )
    return _REGISTRY


def validate(name: str, instance: Any) -> None:
    """Validate an instance against a named schema."""

    schema = get_schema(name)
    Draft7Validator(schema, registry=_get_registry()).validate(instance)
