"""Resource registry exposing the SagePay metadata tables."""

from __future__ import annotations

import sys
from typing import Any, Mapping

from ..domain.models import CountryEntry
from ..services import iso3166, transaction_fields
from ..services.metadata_config import get_metadata_config
from . import reason_codes, schema_registry
from .schema_registry import SchemaValidationError

FIELDS_LIST_RESPONSE_SCHEMA = "fields_list_response_v1"
FIELD_GET_RESPONSE_SCHEMA = "field_get_response_v1"
COUNTRY_LIST_RESPONSE_SCHEMA = "country_list_response_v1"
COUNTRY_GET_RESPONSE_SCHEMA = "country_get_response_v1"

POSTCODES_ALL = "all"
POSTCODES_USED = "used"
POSTCODES_UNUSED = "unused"


def _error(reason: str, detail: str) -> dict[str, str]:
    """Return an error payload with a stable reason code."""

    return {"status": "error", "reason": reason, "detail": detail}


def _validated(
    schema_name: str, response: dict[str, Any], detail: str
) -> Mapping[str, Any]:
    try:
        schema_registry.validate(schema_name, response)
    except SchemaValidationError:
        return _error(reason_codes.RESPONSE_VALIDATION_FAILED, detail)
    return response


def _country_payload(entry: CountryEntry) -> dict[str, Any]:
    return {
        "code": entry.code,
        "name": entry.name,
        "postcodes_used": entry.postcodes_used,
    }


class HealthResource:
    """Simple wellbeing resource."""

    __slots__ = ()

    def get_status(self) -> Mapping[str, str]:
        """Return a status digest."""

        return {
            "status": "ok",
            "detail": "SagePay metadata resources ready",
        }

    def __call__(self) -> Mapping[str, str]:
        return self.get_status()


class TransactionFieldsResource:
    """Lists field metadata, optionally narrowed to one protocol message."""

    __slots__ = ()

    def get_status(self) -> Mapping[str, str]:
        count = len(transaction_fields.get_fields())
        return {"status": "ok", "detail": f"{count} transaction fields loaded"}

    def __call__(self, request: Mapping[str, Any] | None = None) -> Mapping[str, Any]:
        source = (request or {}).get("source")
        if source is None:
            specs = transaction_fields.get_fields()
        elif isinstance(source, str) and source:
            specs = transaction_fields.fields_for_source(source)
        else:
            return _error(
                reason_codes.INVALID_INPUT, "The source filter must be a message name."
            )

        response: dict[str, Any] = {
            "operation": "transaction_fields_list",
            "count": len(specs),
            "fields": {name: spec.to_dict() for name, spec in specs.items()},
        }
        if source is not None:
            response["source"] = source
        return _validated(
            FIELDS_LIST_RESPONSE_SCHEMA,
            response,
            "Field list response violated the published contract.",
        )


class TransactionFieldGetResource:
    """Returns the metadata for a single named field."""

    __slots__ = ()

    def get_status(self) -> Mapping[str, str]:
        return {"status": "ok", "detail": "transaction field lookup ready"}

    def __call__(self, request: Mapping[str, Any] | None = None) -> Mapping[str, Any]:
        name = (request or {}).get("name")
        if not name or not isinstance(name, str):
            return _error(reason_codes.INVALID_INPUT, "A field name is required.")

        spec = transaction_fields.get_field(name)
        if spec is None:
            return _error(
                reason_codes.UNKNOWN_FIELD,
                "The requested field is not in the metadata table.",
            )

        response = {
            "operation": "transaction_field_get",
            "name": name,
            "field": spec.to_dict(),
        }
        return _validated(
            FIELD_GET_RESPONSE_SCHEMA,
            response,
            "Field response violated the published contract.",
        )


class CountriesListResource:
    """Lists ISO-3166 countries, optionally split by postcode usage."""

    __slots__ = ()

    def get_status(self) -> Mapping[str, str]:
        return {
            "status": "ok",
            "detail": f"{len(iso3166.COUNTRIES)} countries loaded",
        }

    def __call__(self, request: Mapping[str, Any] | None = None) -> Mapping[str, Any]:
        postcodes = (request or {}).get("postcodes") or POSTCODES_ALL
        if postcodes == POSTCODES_ALL:
            countries = iso3166.get()
        elif postcodes == POSTCODES_USED:
            countries = iso3166.countries_with_postcodes()
        elif postcodes == POSTCODES_UNUSED:
            countries = iso3166.countries_without_postcodes()
        else:
            return _error(
                reason_codes.INVALID_INPUT,
                "The postcodes filter must be one of all, used or unused.",
            )

        limit = get_metadata_config().max_list
        codes = list(countries)
        entries = [iso3166.get_entry(code) for code in codes[:limit]]
        payload = [_country_payload(entry) for entry in entries if entry is not None]
        response = {
            "operation": "iso3166_countries_list",
            "count": len(payload),
            "postcodes": postcodes,
            "truncated": len(codes) > limit,
            "countries": payload,
        }
        return _validated(
            COUNTRY_LIST_RESPONSE_SCHEMA,
            response,
            "Country list response violated the published contract.",
        )


class CountryGetResource:
    """Returns one country's name and postcode usage."""

    __slots__ = ()

    def get_status(self) -> Mapping[str, str]:
        return {"status": "ok", "detail": "country lookup ready"}

    def __call__(self, request: Mapping[str, Any] | None = None) -> Mapping[str, Any]:
        code = (request or {}).get("code")
        if not code or not isinstance(code, str):
            return _error(reason_codes.INVALID_INPUT, "A country code is required.")

        entry = iso3166.get_entry(code)
        if entry is None:
            return _error(
                reason_codes.UNKNOWN_COUNTRY,
                "The requested country code is not recognised.",
            )

        response = {
            "operation": "iso3166_country_get",
            "country": _country_payload(entry),
        }
        return _validated(
            COUNTRY_GET_RESPONSE_SCHEMA,
            response,
            "Country response violated the published contract.",
        )


RESOURCE_REGISTRY = {
    "health": HealthResource(),
    "metadata://transaction/fields": TransactionFieldsResource(),
    "metadata://transaction/field/{name}": TransactionFieldGetResource(),
    "metadata://iso3166/countries": CountriesListResource(),
    "metadata://iso3166/country/{code}": CountryGetResource(),
}
"""Resource registry keyed by resource URI."""


def create_server() -> Mapping[str, Mapping[str, Any]]:
    """Return the configured resources."""

    return {"resources": RESOURCE_REGISTRY}


def main() -> None:
    """Log available resources without launching networking."""

    sys.stdout.write("SagePay metadata server initialized with resources:\n\n")
    for name, resource in RESOURCE_REGISTRY.items():
        sys.stdout.write(f"- {name}: {resource.get_status()}\n")


if __name__ == "__main__":
    main()
