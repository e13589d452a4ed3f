"""Unit tests for catalog: table validation, read-only tables, neutral lookups."""

from __future__ import annotations

import pytest

from paint_estimator.catalog import (
    CatalogEntry,
    build_table,
    label_of,
    lookup,
    multiplier_of,
    table_to_list,
)


def test_build_table_rejects_duplicates_and_negative_multipliers():
    with pytest.raises(ValueError):
        build_table([CatalogEntry("A1", "One"), CatalogEntry("A1", "Again")])
    with pytest.raises(ValueError):
        build_table([CatalogEntry("A1", "One", multiplier=-0.5)])


def test_table_is_read_only_and_ordered():
    table = build_table([CatalogEntry("B2", "Second"), CatalogEntry("A1", "First")])
    assert list(table) == ["B2", "A1"]
    with pytest.raises(TypeError):
        table["C3"] = CatalogEntry("C3", "Third")


def test_lookup_helpers():
    table = build_table([CatalogEntry("A1", "One", multiplier=1.5)])
    assert lookup(table, None) is None
    assert lookup(table, "") is None
    assert lookup(table, "A2") is None
    assert multiplier_of(table, "A1") == 1.5
    assert multiplier_of(table, "A2") == 1.0
    assert label_of(table, "A2", "Access") == "Access"


def test_entry_to_dict_omits_empty_fields():
    table = build_table([
        CatalogEntry("P3", "Spot blend", multiplier=1.3, bundle="S4"),
        CatalogEntry("W1", "Stain-block primer", amount=30),
    ])
    assert table_to_list(table) == [
        {"id": "P3", "label": "Spot blend", "multiplier": 1.3, "bundle": "S4"},
        {"id": "W1", "label": "Stain-block primer", "multiplier": 1.0, "amount": 30},
    ]
