"""Catalog entries and read-only lookup tables keyed by id."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Iterable, Mapping


@dataclass(frozen=True)
class CatalogEntry:
    """One option within a catalog dimension (repair type, size band, finish, ...)."""
    id: str
    label: str
    multiplier: float = 1.0
    amount: float = 0.0         # flat adder (modifiers, conditions, add-ons)
    base: float = 0.0           # base price (size bands, unit base rates)
    bundle: str | None = None   # step bundle id (paint scopes, prep levels)
    group: str | None = None    # e.g. "interior" / "exterior"
    note: str | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"id": self.id, "label": self.label, "multiplier": self.multiplier}
        if self.amount:
            out["amount"] = self.amount
        if self.base:
            out["base"] = self.base
        if self.bundle is not None:
            out["bundle"] = self.bundle
        if self.group is not None:
            out["group"] = self.group
        if self.note is not None:
            out["note"] = self.note
        return out


def build_table(entries: Iterable[CatalogEntry]) -> Mapping[str, CatalogEntry]:
    """Index entries by id into an immutable mapping, preserving catalog order."""
    table: dict[str, CatalogEntry] = {}
    for entry in entries:
        if entry.id in table:
            raise ValueError(f"duplicate catalog id {entry.id!r}")
        if entry.multiplier < 0:
            raise ValueError(f"catalog id {entry.id!r} has a negative multiplier")
        table[entry.id] = entry
    return MappingProxyType(table)


def lookup(table: Mapping[str, CatalogEntry], entry_id: str | None) -> CatalogEntry | None:
    """Return the entry for entry_id, or None when unset or unknown."""
    if not entry_id:
        return None
    return table.get(entry_id)


def multiplier_of(table: Mapping[str, CatalogEntry], entry_id: str | None) -> float:
    """Multiplier of the selected entry; 1.0 (neutral) when unset or unknown."""
    entry = lookup(table, entry_id)
    return entry.multiplier if entry is not None else 1.0


def label_of(table: Mapping[str, CatalogEntry], entry_id: str | None, default: str) -> str:
    entry = lookup(table, entry_id)
    return entry.label if entry is not None else default


def table_to_list(table: Mapping[str, CatalogEntry]) -> list[dict[str, Any]]:
    return [entry.to_dict() for entry in table.values()]
