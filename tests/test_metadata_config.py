"""Environment parsing for metadata configuration."""

from __future__ import annotations

from pathlib import Path

import pytest

from sagepay_metadata.services.metadata_config import (
    DEFAULT_MAX_LIST,
    FIELDS_FILE_ENV,
    MAX_LIST_ENV,
    MetadataConfig,
    get_metadata_config,
    reset_metadata_config,
    set_metadata_config,
)


def test_defaults_without_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(FIELDS_FILE_ENV, raising=False)
    monkeypatch.delenv(MAX_LIST_ENV, raising=False)

    config = MetadataConfig.from_env()

    assert config.fields_file is None
    assert config.max_list == DEFAULT_MAX_LIST


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("25", 25),
        ("", DEFAULT_MAX_LIST),
        ("lots", DEFAULT_MAX_LIST),
        ("0", DEFAULT_MAX_LIST),
    ],
)
def test_max_list_parsing(
    monkeypatch: pytest.MonkeyPatch, raw: str, expected: int
) -> None:
    monkeypatch.setenv(MAX_LIST_ENV, raw)

    assert MetadataConfig.from_env().max_list == expected


def test_fields_file_from_environment(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    target = tmp_path / "overrides.json"
    monkeypatch.setenv(FIELDS_FILE_ENV, f"  {target}  ")

    assert MetadataConfig.from_env().fields_file == target


def test_custom_config_takes_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(MAX_LIST_ENV, "10")
    set_metadata_config(MetadataConfig(fields_file=None, max_list=3))

    assert get_metadata_config().max_list == 3

    reset_metadata_config()
    assert get_metadata_config().max_list == 10
