"""Unit tests for drywall_engine: SKU composition, multipliers, modifiers, tax."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest

from paint_estimator.catalog import CatalogEntry, build_table
from paint_estimator.drywall_catalog import DEFAULT_DRYWALL_CATALOG, DrywallCatalog
from paint_estimator.drywall_engine import (
    EstimateSelection,
    build_sku,
    bundle_steps,
    clamp_quantity,
    compute_estimate,
    missing_dimensions,
    required_missing,
    selection_from_dict,
)

TAX = 0.0825


def _flat_catalog() -> DrywallCatalog:
    # S1 base 500, T2 adder 50, every other dimension neutral
    return DrywallCatalog(
        size_bands=build_table([CatalogEntry("S1", "Small", base=500)]),
        repair_types=build_table([CatalogEntry("T2", "Small holes", amount=50)]),
        orientations=build_table([CatalogEntry("O1", "Wall")]),
        access_options=build_table([CatalogEntry("A1", "Standard")]),
        finish_types=build_table([CatalogEntry("F1", "Smooth")]),
        paint_scopes=build_table([CatalogEntry("P0", "No paint", bundle="S2")]),
        protection_options=build_table([CatalogEntry("H1", "Empty room")]),
    )


def _full(**overrides) -> EstimateSelection:
    dims = dict(
        repair_type="T2", size="S1", orientation="O1", access="A1",
        finish="F1", paint_scope="P0", protection="H1",
    )
    dims.update(overrides)
    return EstimateSelection(**dims)


def test_single_patch_neutral_multipliers():
    r = compute_estimate(_full(), catalog=_flat_catalog(), tax_rate=TAX)
    assert r.labor_subtotal == 550
    assert r.modifiers_total == 0
    assert r.subtotal == 550
    assert r.tax == 45  # 45.375 rounds down
    assert r.total == 595


def test_quantity_three():
    r = compute_estimate(_full(quantity=3), catalog=_flat_catalog(), tax_rate=TAX)
    assert r.subtotal == 1650
    assert r.tax == 136  # 136.125
    assert r.total == 1786


def test_tax_rounds_half_up():
    # 1000 * 0.0825 = 82.5 -> 83 (round() would give 82)
    cat = DrywallCatalog(size_bands=build_table([CatalogEntry("S1", "Small", base=1000)]))
    r = compute_estimate(_full(repair_type=None), catalog=cat, tax_rate=TAX)
    assert r.subtotal == 1000
    assert r.tax == 83


@pytest.mark.parametrize("qty", [0, -4, None, "abc", float("nan"), 0.5])
def test_quantity_below_one_treated_as_one(qty):
    one = compute_estimate(_full(quantity=1), catalog=_flat_catalog(), tax_rate=TAX)
    r = compute_estimate(_full(quantity=qty), catalog=_flat_catalog(), tax_rate=TAX)
    assert r.total == one.total
    assert r.items[0].title == "Drywall repair (1x)"


def test_clamp_quantity():
    assert clamp_quantity(3) == 3
    assert clamp_quantity("2") == 2
    assert clamp_quantity(2.9) == 2
    assert clamp_quantity(float("inf")) == 1


def test_labor_subtotal_linear_in_quantity():
    for q in (2, 5, 10):
        r = compute_estimate(_full(quantity=q), catalog=_flat_catalog(), tax_rate=TAX)
        assert r.labor_subtotal == 550 * q


def test_total_is_subtotal_plus_tax_default_catalog():
    sel = EstimateSelection(
        repair_type="T8", size="S2", orientation="O2", access="A2",
        finish="F5", paint_scope="P6", protection="H3", modifiers=["W2", "W1"], quantity=2,
    )
    r = compute_estimate(sel, tax_rate=TAX)
    # (220 + 60) * 1.25 * 1.15 * 1.25 * 1.9 * 1.2 = 1147.125 per patch
    assert r.labor_subtotal == 2294  # 2294.25
    assert r.modifiers_total == 180  # (30 + 60) * 2
    assert r.subtotal == r.labor_subtotal + r.modifiers_total
    assert r.tax == round(r.subtotal * TAX)
    assert r.total == r.subtotal + r.tax
    assert r.bundle_id == "S5"


def test_missing_dimensions_use_placeholders():
    sel = EstimateSelection()
    assert build_sku(sel) == "T? S? O? A? F? P? H?"
    r = compute_estimate(sel, tax_rate=TAX)
    assert r.sku == "T? S? O? A? F? P? H?"
    assert r.labor_subtotal == 0
    assert r.total == 0
    assert r.bundle_id == "S2"
    assert required_missing(sel) is True


def test_partial_selection_placeholders_only_where_unset():
    sel = EstimateSelection(repair_type="T3", finish="F3")
    assert build_sku(sel) == "T3 S? O? A? F3 P? H?"
    assert missing_dimensions(sel) == ["size", "orientation", "access", "paint_scope", "protection"]


def test_modifier_order_does_not_change_sku():
    a = build_sku(_full(modifiers=["W2", "W1"]))
    b = build_sku(_full(modifiers=["W1", "W2"]))
    assert a == b == "T2 S1 O1 A1 F1 P0 (W1,W2) H1"


def test_no_modifiers_no_group():
    assert "(" not in build_sku(_full())
    assert build_sku(_full(modifiers=[])) == "T2 S1 O1 A1 F1 P0 H1"


def test_unknown_ids_are_neutral():
    r = compute_estimate(_full(orientation="O9", modifiers=["ZZ"]), catalog=_flat_catalog(), tax_rate=TAX)
    assert r.labor_subtotal == 550
    assert r.modifiers_total == 0
    assert "(ZZ)" in r.sku


def test_unset_repair_type_contributes_no_adder():
    r = compute_estimate(_full(repair_type=None), catalog=_flat_catalog(), tax_rate=TAX)
    assert r.labor_subtotal == 500


def test_line_items():
    sel = _full(modifiers=["W2", "W1", "W2"], quantity=2)
    r = compute_estimate(sel, tax_rate=TAX)
    titles = [it.title for it in r.items]
    assert titles[0] == "Drywall repair (2x)"
    assert titles[1:3] == ["Soft board removal required", "Stain-block primer required"]
    assert titles[-1] == "Estimated tax"
    assert r.items[1].amount == 120
    assert r.items[2].amount == 60
    assert r.items[-1].description == "Tax rate 8.25%"
    assert r.items[-1].amount == r.tax
    assert sum(it.amount for it in r.items[:-1]) == r.subtotal


def test_bundle_from_paint_scope():
    assert compute_estimate(_full(paint_scope="P3"), tax_rate=TAX).bundle_id == "S4"
    assert compute_estimate(_full(paint_scope="P1"), tax_rate=TAX).bundle_id == "S3"
    assert compute_estimate(_full(paint_scope=None), tax_rate=TAX).bundle_id == "S2"


def test_bundle_steps():
    bundle = bundle_steps("S4")
    assert bundle is not None
    assert bundle.title == "Blend paint"
    assert bundle.steps[-1] == "Paint spot blend (best-effort)"
    assert bundle_steps("S9") is None


def test_required_missing_false_when_complete():
    assert required_missing(_full()) is False
    assert missing_dimensions(_full()) == []


@patch.dict(os.environ, {"ESTIMATE_TAX_RATE": "0.1"})
def test_tax_rate_from_environment():
    r = compute_estimate(_full(), catalog=_flat_catalog())
    assert r.tax == 55


def test_selection_from_dict_camel_case():
    sel = selection_from_dict({
        "repairType": "T8",
        "size": " S2 ",
        "paintScope": "P6",
        "modifiers": ["W2", "W1", "W2", ""],
        "quantity": "0",
        "notes": None,
    })
    assert sel.repair_type == "T8"
    assert sel.size == "S2"
    assert sel.paint_scope == "P6"
    assert sel.orientation is None
    assert sel.modifiers == ["W2", "W1"]
    assert sel.quantity == 1
    assert sel.notes == ""


def test_estimate_to_dict():
    d = compute_estimate(_full(), catalog=_flat_catalog(), tax_rate=TAX).to_dict()
    assert d["sku"] == "T2 S1 O1 A1 F1 P0 H1"
    assert d["total"] == 595
    assert d["items"][0] == {
        "title": "Drywall repair (1x)",
        "description": "Base S1 + T2 with multipliers",
        "amount": 550,
    }


def test_default_catalog_tables_are_read_only():
    with pytest.raises(TypeError):
        DEFAULT_DRYWALL_CATALOG.size_bands["S9"] = CatalogEntry("S9", "Huge", base=1)
