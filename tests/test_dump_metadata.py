"""Smoke test for the local metadata dump CLI."""

from __future__ import annotations

import json
import os
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]


def _run(*args: str) -> str:
    env = dict(os.environ, PYTHONIOENCODING="utf-8")
    env.pop("SAGEPAY_METADATA_FIELDS_FILE", None)
    result = subprocess.run(
        [sys.executable, "scripts/dump_metadata.py", *args],
        cwd=ROOT,
        capture_output=True,
        text=True,
        encoding="utf-8",
        env=env,
        check=True,
    )
    return result.stdout.strip()


def test_dump_raw_fields_document() -> None:
    output = _run("fields", "--format", "json")

    raw = ROOT / "src" / "sagepay_metadata" / "data" / "transaction_fields.json"
    assert output == raw.read_text(encoding="utf-8").strip()


def test_dump_fields_for_source() -> None:
    data = json.loads(_run("fields", "--source", "paypal-complete"))

    assert set(data) == {"VPSProtocol", "TxType", "Amount", "VPSTxId", "Accept"}


def test_dump_countries_without_postcodes() -> None:
    data = json.loads(_run("countries", "--postcodes", "unused"))

    assert data["HK"] == "Hong Kong"
    assert "GB" not in data
