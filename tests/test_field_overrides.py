"""Loading extra or replacement field entries from a configured file."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from sagepay_metadata.services import transaction_fields
from sagepay_metadata.services.metadata_config import (
    DEFAULT_MAX_LIST,
    DEFAULT_METADATA_CONFIG,
    MetadataConfig,
    reset_metadata_config,
    set_metadata_config,
)

EXTRA_FIELD = {
    "required": False,
    "type": "string",
    "chars": ["A", "a", "9"],
    "min": 1,
    "max": 10,
    "source": ["custom"],
    "store": True,
}


@pytest.fixture(autouse=True)
def isolated_table() -> None:
    """Drop cached tables before and after each override scenario."""

    set_metadata_config(DEFAULT_METADATA_CONFIG)
    transaction_fields.reload()
    yield
    reset_metadata_config()
    transaction_fields.reload()


def _use_overrides(path: Path) -> None:
    set_metadata_config(MetadataConfig(fields_file=path, max_list=DEFAULT_MAX_LIST))
    transaction_fields.reload()


def _write(path: Path, payload: object) -> Path:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_override_adds_and_replaces_fields(tmp_path: Path) -> None:
    vendor = dict(transaction_fields.get_array()["Vendor"], max=20)
    _use_overrides(
        _write(tmp_path / "fields.json", {"LoyaltyRef": EXTRA_FIELD, "Vendor": vendor})
    )

    assert transaction_fields.get_field("LoyaltyRef").source == ("custom",)
    assert transaction_fields.get_field("Vendor").max == 20
    assert transaction_fields.get_array()["LoyaltyRef"] == EXTRA_FIELD
    assert "LoyaltyRef" in transaction_fields.fields_for_source("custom")


def test_raw_document_ignores_overrides(tmp_path: Path) -> None:
    _use_overrides(_write(tmp_path / "fields.json", {"LoyaltyRef": EXTRA_FIELD}))

    assert "LoyaltyRef" not in json.loads(transaction_fields.get_json())


def test_invalid_entries_are_skipped(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    bad_type = dict(EXTRA_FIELD, type="telephone")
    bad_bounds = dict(EXTRA_FIELD, min=12, max=4)
    _use_overrides(
        _write(
            tmp_path / "fields.json",
            {"BadType": bad_type, "BadBounds": bad_bounds, "Good": EXTRA_FIELD},
        )
    )

    caplog.set_level(logging.WARNING)
    fields = transaction_fields.get_fields()

    assert "Good" in fields
    assert "BadType" not in fields
    assert "BadBounds" not in fields
    messages = [record.getMessage() for record in caplog.records]
    assert any("Skipping field override BadType" in message for message in messages)
    assert any("min exceeds max" in message for message in messages)


@pytest.mark.parametrize("content", ["{not json", "[1, 2, 3]"])
def test_unusable_file_falls_back_to_builtin(
    tmp_path: Path, caplog: pytest.LogCaptureFixture, content: str
) -> None:
    path = tmp_path / "fields.json"
    path.write_text(content, encoding="utf-8")
    _use_overrides(path)

    caplog.set_level(logging.WARNING)
    table = transaction_fields.get_array()

    assert table == json.loads(transaction_fields.get_json())
    assert any("overrides" in record.getMessage() for record in caplog.records)


def test_missing_file_falls_back_to_builtin(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    _use_overrides(tmp_path / "absent.json")

    caplog.set_level(logging.WARNING)
    fields = transaction_fields.get_fields()

    assert "VendorTxCode" in fields
    assert any(
        "Unable to read field overrides" in record.getMessage()
        for record in caplog.records
    )


def test_override_names_must_be_alphanumeric(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    _use_overrides(
        _write(
            tmp_path / "fields.json",
            {"Loyalty-Ref": EXTRA_FIELD, "Good": EXTRA_FIELD},
        )
    )

    caplog.set_level(logging.WARNING)
    fields = transaction_fields.get_fields()

    assert "Loyalty-Ref" not in fields
    assert "Good" in fields
    assert any(
        "Skipping field override Loyalty-Ref" in record.getMessage()
        for record in caplog.records
    )
