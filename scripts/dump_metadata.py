"""LOCAL-only CLI to print the SagePay metadata tables as JSON."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent
sys.path.insert(0, str(ROOT.parent / "src"))

POSTCODE_CHOICES = ("used", "unused")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Print SagePay field or country metadata as JSON.",
    )
    sub = parser.add_subparsers(dest="table", required=True)

    fields = sub.add_parser("fields", help="Transaction field metadata.")
    fields.add_argument(
        "--format",
        choices=["json", "array"],
        default="array",
        help="'json' prints the raw table document; 'array' the decoded table.",
    )
    fields.add_argument(
        "--source",
        default=None,
        help="Only include fields carried in this protocol message.",
    )

    countries = sub.add_parser("countries", help="ISO-3166 country table.")
    countries.add_argument(
        "--postcodes",
        choices=POSTCODE_CHOICES,
        default=None,
        help="Only include countries that do or do not use postcodes.",
    )
    return parser.parse_args(argv)


def dump_fields(args: argparse.Namespace) -> str:
    from sagepay_metadata.services import transaction_fields

    if args.format == "json" and args.source is None:
        return transaction_fields.get_json()

    table = transaction_fields.get_array()
    if args.source is not None:
        table = {
            name: entry
            for name, entry in table.items()
            if args.source in entry.get("source", [])
        }
    return json.dumps(table, ensure_ascii=False)


def dump_countries(args: argparse.Namespace) -> str:
    from sagepay_metadata.services import iso3166

    if args.postcodes == "used":
        countries = iso3166.countries_with_postcodes()
    elif args.postcodes == "unused":
        countries = iso3166.countries_without_postcodes()
    else:
        countries = iso3166.get()
    return json.dumps(countries, ensure_ascii=False)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    if args.table == "fields":
        output = dump_fields(args)
    else:
        output = dump_countries(args)
    sys.stdout.write(output)
    sys.stdout.write("\n")


if __name__ == "__main__":
    main()
