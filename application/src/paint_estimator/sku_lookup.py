"""Turn compound SKU strings back into readable catalog labels."""

from __future__ import annotations

from typing import Mapping

from . import painting_catalog
from .catalog import CatalogEntry
from .drywall_catalog import DEFAULT_DRYWALL_CATALOG

DRYWALL = "drywall"
PAINTING = "painting"
LABEL_SEPARATOR = " • "


def _tables(kind: str) -> list[Mapping[str, CatalogEntry]]:
    if kind == DRYWALL:
        return DEFAULT_DRYWALL_CATALOG.dimensions()
    if kind == PAINTING:
        return painting_catalog.ALL_TABLES
    raise ValueError(f"unknown SKU kind {kind!r} (expected {DRYWALL!r} or {PAINTING!r})")


def _search(code: str, kind: str) -> str | None:
    """First matching label across the kind's tables, in SKU dimension order."""
    for table in _tables(kind):
        entry = table.get(code)
        if entry is not None:
            return entry.label
    return None


def _split_codes(sku: str) -> list[str]:
    """'T8 S2 (W1,W2) H3' -> ['T8', 'S2', 'W1', 'W2', 'H3']; '(+AD1)' groups are unwrapped too."""
    codes: list[str] = []
    for token in sku.split():
        if token.startswith("(") and token.endswith(")"):
            inner = token[1:-1].lstrip("+")
            codes.extend(c for c in inner.split(",") if c)
        else:
            codes.append(token)
    return codes


def get_single_sku_label(code: str, kind: str) -> str:
    """Label for one code, or the code itself when it is not in the catalog."""
    return _search(code, kind) or code


def get_sku_labels(sku: str, kind: str) -> str:
    """
    Readable form of a compound SKU.

    get_sku_labels("T2 S1 O1 A1 F1 P1 H2", "drywall") ->
    'Small holes (nails/anchors) • Small (2–6") • Wall • ... • Furnished room'
    """
    return LABEL_SEPARATOR.join(get_single_sku_label(code, kind) for code in _split_codes(sku.strip()))
