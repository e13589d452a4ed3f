"""Drywall repair estimator: SKU composition, multipliers, modifiers, and flat tax."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

from . import settings
from .catalog import lookup, multiplier_of
from .drywall_catalog import DEFAULT_DRYWALL_CATALOG, DrywallCatalog, StepBundle
from .money import round_whole

# (selection attribute, SKU placeholder) for each required dimension, in SKU order.
# Modifiers are inserted between paint_scope and protection.
REQUIRED_DIMENSIONS: list[tuple[str, str]] = [
    ("repair_type", "T?"),
    ("size", "S?"),
    ("orientation", "O?"),
    ("access", "A?"),
    ("finish", "F?"),
    ("paint_scope", "P?"),
    ("protection", "H?"),
]

# camelCase keys sent by browser forms
_DICT_ALIASES = {
    "repair_type": "repairType",
    "paint_scope": "paintScope",
}


@dataclass
class EstimateSelection:
    """Current choice per dimension. Any dimension may be unset while the form is in progress."""
    repair_type: str | None = None
    size: str | None = None
    orientation: str | None = None
    access: str | None = None
    finish: str | None = None
    paint_scope: str | None = None
    protection: str | None = None
    modifiers: list[str] = field(default_factory=list)
    quantity: int = 1  # number of patches / sets
    notes: str = ""


@dataclass
class LineItem:
    title: str
    description: str
    amount: int

    def to_dict(self) -> dict[str, Any]:
        return {"title": self.title, "description": self.description, "amount": self.amount}


@dataclass
class EstimateResult:
    """Derived estimate (whole dollars). Pure function of the selection and catalog."""
    sku: str
    bundle_id: str
    labor_subtotal: int
    modifiers_total: int
    subtotal: int
    tax: int
    total: int
    items: list[LineItem] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "sku": self.sku,
            "bundle_id": self.bundle_id,
            "labor_subtotal": self.labor_subtotal,
            "modifiers_total": self.modifiers_total,
            "subtotal": self.subtotal,
            "tax": self.tax,
            "total": self.total,
            "items": [item.to_dict() for item in self.items],
        }


def _clean_id(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def clamp_quantity(quantity: Any) -> int:
    """Quantity as an int >= 1. Missing, non-numeric, NaN, or < 1 values become 1."""
    try:
        value = float(quantity)
    except (TypeError, ValueError):
        return 1
    if math.isnan(value) or math.isinf(value):
        return 1
    return max(1, int(value))


def _unique(ids: list[str]) -> list[str]:
    return list(dict.fromkeys(i for i in ids if i))


def selection_from_dict(data: dict[str, Any]) -> EstimateSelection:
    """Build a selection from a JSON-like dict (snake_case or camelCase keys)."""
    d = dict(data)

    def pick(name: str) -> str | None:
        if name in d:
            return _clean_id(d.get(name))
        alias = _DICT_ALIASES.get(name)
        return _clean_id(d.get(alias)) if alias else None

    raw_mods = d.get("modifiers") or []
    if isinstance(raw_mods, str):
        raw_mods = [raw_mods]
    modifiers = _unique([m for m in (_clean_id(x) for x in raw_mods) if m])

    return EstimateSelection(
        repair_type=pick("repair_type"),
        size=pick("size"),
        orientation=pick("orientation"),
        access=pick("access"),
        finish=pick("finish"),
        paint_scope=pick("paint_scope"),
        protection=pick("protection"),
        modifiers=modifiers,
        quantity=clamp_quantity(d.get("quantity", 1)),
        notes=str(d.get("notes") or ""),
    )


def build_sku(selection: EstimateSelection) -> str:
    """
    Compose the SKU, e.g. "T8 S2 O2 A2 F5 P6 (W1,W2) H3".

    Unset dimensions render as placeholders ("T?"). Modifiers are sorted so the
    SKU does not depend on click order; the group is omitted when empty.
    """
    tokens = [getattr(selection, attr) or placeholder for attr, placeholder in REQUIRED_DIMENSIONS]
    mods = ",".join(sorted(_unique(list(selection.modifiers))))
    tokens.insert(6, f"({mods})" if mods else "")
    return " ".join(t for t in tokens if t)


def missing_dimensions(selection: EstimateSelection) -> list[str]:
    """Names of required dimensions that are still unset."""
    return [attr for attr, _ in REQUIRED_DIMENSIONS if not getattr(selection, attr)]


def required_missing(selection: EstimateSelection) -> bool:
    """True until every required dimension is chosen; a result is only a final quote when False."""
    return bool(missing_dimensions(selection))


def bundle_steps(bundle_id: str, catalog: DrywallCatalog = DEFAULT_DRYWALL_CATALOG) -> StepBundle | None:
    return catalog.step_bundles.get(bundle_id)


def compute_estimate(
    selection: EstimateSelection,
    catalog: DrywallCatalog = DEFAULT_DRYWALL_CATALOG,
    tax_rate: float | None = None,
) -> EstimateResult:
    """
    Compute a drywall repair estimate. Never raises on partial selections.

    Unset or unknown dimensions contribute neutrally: multiplier 1.0, size base 0,
    repair-type adder 0. Modifier amounts are flat (not multiplied) and scale with
    quantity. Tax defaults to settings.estimate_tax_rate().
    """
    if tax_rate is None:
        tax_rate = settings.estimate_tax_rate()

    qty = clamp_quantity(selection.quantity)

    size = lookup(catalog.size_bands, selection.size)
    repair = lookup(catalog.repair_types, selection.repair_type)
    paint = lookup(catalog.paint_scopes, selection.paint_scope)
    base = size.base if size is not None else 0.0
    repair_adder = repair.amount if repair is not None else 0.0

    multiplier = (
        multiplier_of(catalog.orientations, selection.orientation)
        * multiplier_of(catalog.access_options, selection.access)
        * multiplier_of(catalog.finish_types, selection.finish)
        * multiplier_of(catalog.paint_scopes, selection.paint_scope)
        * multiplier_of(catalog.protection_options, selection.protection)
    )

    labor_subtotal = round_whole((base + repair_adder) * multiplier * qty)

    picked = [m for m in (lookup(catalog.modifiers, i) for i in _unique(list(selection.modifiers))) if m]
    modifiers_total = round_whole(sum(m.amount for m in picked) * qty)

    subtotal = labor_subtotal + modifiers_total
    tax = round_whole(subtotal * tax_rate)
    total = subtotal + tax

    bundle_id = (paint.bundle if paint is not None else None) or catalog.fallback_bundle_id

    items = [
        LineItem(
            title=f"Drywall repair ({qty}x)",
            description=f"Base {selection.size or ''} + {selection.repair_type or ''} with multipliers",
            amount=labor_subtotal,
        )
    ]
    for m in picked:
        items.append(LineItem(
            title=m.label,
            description="Condition modifier / adder",
            amount=round_whole(m.amount * qty),
        ))
    items.append(LineItem(
        title="Estimated tax",
        description=f"Tax rate {tax_rate * 100:.2f}%",
        amount=tax,
    ))

    return EstimateResult(
        sku=build_sku(selection),
        bundle_id=bundle_id,
        labor_subtotal=labor_subtotal,
        modifiers_total=modifiers_total,
        subtotal=subtotal,
        tax=tax,
        total=total,
        items=items,
    )
