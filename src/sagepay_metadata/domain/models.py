"""Core metadata entities without I/O for SagePay Metadata."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class FieldSpec:
    """Shape and message membership of a single protocol field."""

    name: str
    required: bool
    type: str
    min: int | float | None
    max: int | float | None
    chars: tuple[str, ...] = ()
    default: str | None = None
    values: tuple[str, ...] = ()
    source: tuple[str, ...] = ()
    tamper: bool = False
    store: bool = False
    notes: str | None = None

    @classmethod
    def from_mapping(cls, name: str, entry: Mapping[str, Any]) -> "FieldSpec":
        """Build a spec from one decoded table entry."""

        return cls(
            name=name,
            required=bool(entry.get("required", False)),
            type=entry["type"],
            min=entry.get("min"),
            max=entry.get("max"),
            chars=tuple(entry.get("chars", ())),
            default=entry.get("default"),
            values=tuple(entry.get("values", ())),
            source=tuple(entry.get("source", ())),
            tamper=bool(entry.get("tamper", False)),
            store=bool(entry.get("store", False)),
            notes=entry.get("notes"),
        )

    def used_in(self, source: str) -> bool:
        return source in self.source

    def to_dict(self) -> dict[str, Any]:
        """Return the entry in the raw table's key layout."""

        entry: dict[str, Any] = {
            "required": self.required,
            "type": self.type,
        }
        if self.chars:
            entry["chars"] = list(self.chars)
        if self.values:
            entry["values"] = list(self.values)
        if self.min is not None:
            entry["min"] = self.min
        if self.max is not None:
            entry["max"] = self.max
        if self.default is not None:
            entry["default"] = self.default
        entry["source"] = list(self.source)
        if self.tamper:
            entry["tamper"] = True
        entry["store"] = self.store
        if self.notes is not None:
            entry["notes"] = self.notes
        return entry


@dataclass(frozen=True)
class CountryEntry:
    """ISO-3166 alpha-2 code with its display name."""

    code: str
    name: str
    postcodes_used: bool
