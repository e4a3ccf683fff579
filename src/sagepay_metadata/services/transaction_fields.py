"""Metadata for the SagePay transaction data fields.

This is pure data: the shape, character set, length bounds and message
membership of every field the gateway protocol carries. Nothing here
validates, cleans or sends values.

Lengths are in bytes for a single-byte encoding (ISO 8859-1). Storage for
UTF-8 data must be sized accordingly.

An optional field with a minimum length of 1 must not be sent when empty;
one with a minimum length of zero may be sent as an empty string.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from ..domain.models import FieldSpec
from ..mcp import schema_registry
from ..mcp.schema_registry import SchemaValidationError
from .metadata_config import get_metadata_config

_LOG = logging.getLogger(__name__)

DATA_FILE = Path(__file__).resolve().parents[1] / "data" / "transaction_fields.json"
TABLE_SCHEMA = "transaction_fields_v1"

FORMAT_OBJECT = "object"
FORMAT_JSON = "json"
FORMAT_ARRAY = "array"
FORMATS = (FORMAT_OBJECT, FORMAT_JSON, FORMAT_ARRAY)

_RAW_JSON: str | None = None
_TABLE: dict[str, dict[str, Any]] | None = None
_FIELDS: Mapping[str, FieldSpec] | None = None


def _load_raw_json() -> str:
    global _RAW_JSON
    if _RAW_JSON is None:
        _RAW_JSON = DATA_FILE.read_text(encoding="utf-8").strip()
    return _RAW_JSON


def _bounds_ok(entry: Mapping[str, Any]) -> bool:
    low = entry.get("min")
    high = entry.get("max")
    return low is None or high is None or low <= high


def _load_overrides(path: Path) -> dict[str, dict[str, Any]]:
    """Return valid override entries from a JSON file, skipping bad ones."""

    try:
        with path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except OSError as exc:
        _LOG.warning("Unable to read field overrides %s: %s", path, exc)
        return {}
    except json.JSONDecodeError as exc:
        _LOG.warning("Field overrides %s are not valid JSON: %s", path, exc)
        return {}

    if not isinstance(data, dict):
        _LOG.warning("Field overrides %s must be a JSON object", path)
        return {}

    accepted: dict[str, dict[str, Any]] = {}
    for name, entry in data.items():
        try:
            schema_registry.validate(TABLE_SCHEMA, {name: entry})
        except SchemaValidationError as exc:
            _LOG.warning("Skipping field override %s: %s", name, exc.message)
            continue
        if not _bounds_ok(entry):
            _LOG.warning("Skipping field override %s: min exceeds max", name)
            continue
        accepted[name] = entry
    return accepted


def _load_table() -> dict[str, dict[str, Any]]:
    global _TABLE
    if _TABLE is None:
        table = json.loads(_load_raw_json())
        config = get_metadata_config()
        if config.fields_file is not None:
            overrides = _load_overrides(config.fields_file)
            if overrides:
                _LOG.info(
                    "Applied %d field overrides from %s",
                    len(overrides),
                    config.fields_file,
                )
            table.update(overrides)
        _TABLE = table
    return _TABLE


def reload() -> None:
    """Drop cached tables so the next access reads the current config."""

    global _RAW_JSON, _TABLE, _FIELDS
    _RAW_JSON = None
    _TABLE = None
    _FIELDS = None


def get_json() -> str:
    """Return the built-in table as its serialized JSON document."""

    return _load_raw_json()


def get_array() -> dict[str, dict[str, Any]]:
    """Return the table as plain nested dicts (a fresh copy per call)."""

    return json.loads(json.dumps(_load_table()))


def get_fields() -> Mapping[str, FieldSpec]:
    """Return a read-only mapping of field name to FieldSpec."""

    global _FIELDS
    if _FIELDS is None:
        specs = {
            name: FieldSpec.from_mapping(name, entry)
            for name, entry in _load_table().items()
        }
        _FIELDS = MappingProxyType(specs)
    return _FIELDS


def get(format: str = FORMAT_OBJECT) -> Any:
    """Return the table in the requested format.

    Args:
        format: "object" (FieldSpec mapping, the default), "json" (raw
            document text) or "array" (plain dicts).
    """

    if format == FORMAT_JSON:
        return get_json()
    if format == FORMAT_ARRAY:
        return get_array()
    if format == FORMAT_OBJECT:
        return get_fields()
    raise ValueError(f"Unsupported metadata format: {format!r}")


def get_field(name: str) -> FieldSpec | None:
    """Return one field's metadata, or None if the name is unknown."""

    return get_fields().get(name)


def field_names() -> tuple[str, ...]:
    return tuple(get_fields())


def fields_for_source(source: str) -> dict[str, FieldSpec]:
    """Return the fields carried in the named protocol message."""

    return {
        name: spec for name, spec in get_fields().items() if spec.used_in(source)
    }


def tamper_fields() -> dict[str, FieldSpec]:
    """Return the fields that feed the notification tamper-detection code."""

    return {name: spec for name, spec in get_fields().items() if spec.tamper}


def stored_fields() -> dict[str, FieldSpec]:
    """Return the fields tracked from page to page."""

    return {name: spec for name, spec in get_fields().items() if spec.store}
