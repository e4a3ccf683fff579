"""Reason codes used in resource error payloads."""

from __future__ import annotations

INVALID_INPUT = "invalid_input"
"""Request failed schema validation or carried an unsupported option."""

UNKNOWN_FIELD = "unknown_field"
"""The requested field name is not in the metadata table."""

UNKNOWN_COUNTRY = "unknown_country"
"""The requested country code is not in the ISO-3166 table."""

RESPONSE_VALIDATION_FAILED = "response_validation_failed"
"""The service produced output that violated the published response schema."""
