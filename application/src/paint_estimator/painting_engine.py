"""Painting SKU estimator: unit base rate times complexity factors, plus flat condition/add-on lines."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

from . import painting_catalog as cat
from .catalog import label_of, lookup, multiplier_of
from .money import round2

# (state attribute, SKU placeholder), in SKU order; all are required for pricing
PAINTING_DIMENSIONS: list[tuple[str, str]] = [
    ("surface", "S?"),
    ("unit", "U?"),
    ("scope", "SC?"),
    ("system", "SYS?"),
    ("prep", "PR?"),
    ("sheen", "F?"),
    ("method", "M?"),
    ("access", "A?"),
    ("occupancy", "H?"),
]


@dataclass
class PaintingState:
    """Painting form state. Quantity is in the selected unit (ft², linear ft, items, ...)."""
    customer_name: str = ""
    address: str = ""
    surface: str | None = None
    unit: str | None = None
    scope: str | None = None
    system: str | None = None
    prep: str | None = None
    sheen: str | None = None
    method: str | None = None
    access: str | None = None
    occupancy: str | None = None
    quantity: float = 1
    conditions: list[str] = field(default_factory=list)
    addons: list[str] = field(default_factory=list)
    notes: str = ""


@dataclass
class PaintingLineItem:
    id: str
    title: str
    qty: float
    unit_price: float
    note: str | None = None

    @property
    def amount(self) -> float:
        return self.qty * self.unit_price

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "qty": self.qty,
            "unit_price": self.unit_price,
            "amount": round2(self.amount),
            "note": self.note,
        }


@dataclass
class PaintingEstimate:
    sku: str
    bundle_id: str
    scope_text: str
    items: list[PaintingLineItem] = field(default_factory=list)
    subtotal: float = 0.0
    total: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "sku": self.sku,
            "bundle_id": self.bundle_id,
            "scope_text": self.scope_text,
            "items": [it.to_dict() for it in self.items],
            "subtotal": self.subtotal,
            "total": self.total,
        }


def _sorted_group(ids: list[str]) -> str:
    return ",".join(sorted(dict.fromkeys(i for i in ids if i)))


def build_painting_sku(state: PaintingState) -> str:
    """E.g. "S1 U1 SC2 SYS2 PR2 F3 M1 A1 H2 (C1,K1) (+AD2)"; unset dimensions render as placeholders."""
    tokens = [getattr(state, attr) or placeholder for attr, placeholder in PAINTING_DIMENSIONS]
    conditions = _sorted_group(state.conditions)
    addons = _sorted_group(state.addons)
    if conditions:
        tokens.append(f"({conditions})")
    if addons:
        tokens.append(f"(+{addons})")
    return " ".join(tokens)


def choose_bundle(state: PaintingState) -> str:
    """Cabinets, or bonding primer sprayed in a booth, get the cabinet bundle; otherwise follow prep."""
    if state.surface == "S6":
        return cat.CABINET_BUNDLE_ID
    if state.system == "SYS5" and state.method == "M4":
        return cat.CABINET_BUNDLE_ID
    prep = lookup(cat.PREP, state.prep)
    return (prep.bundle if prep is not None else None) or cat.FALLBACK_BUNDLE_ID


def build_scope_text(state: PaintingState) -> str:
    surface = label_of(cat.SURFACES, state.surface, "Surface")
    scope = label_of(cat.SCOPES, state.scope, "Scope")
    system = label_of(cat.SYSTEMS, state.system, "System")
    prep = label_of(cat.PREP, state.prep, "Prep")
    method = label_of(cat.METHODS, state.method, "Method")
    sheen = label_of(cat.SHEEN, state.sheen, "Sheen")
    return (
        f"{scope}: {surface}. Paint system: {system}. Prep level: {prep}. "
        f"Application: {method}. Finish: {sheen}."
    )


def painting_quantity(quantity: Any) -> float:
    """Quantity in the selected unit; fractional values are kept, anything below 1 becomes 1."""
    try:
        value = float(quantity)
    except (TypeError, ValueError):
        return 1.0
    if math.isnan(value) or math.isinf(value):
        return 1.0
    return max(1.0, value)


def painting_missing(state: PaintingState) -> list[str]:
    return [attr for attr, _ in PAINTING_DIMENSIONS if not getattr(state, attr)]


def compute_painting_estimate(state: PaintingState) -> PaintingEstimate:
    """
    Price a painting selection.

    Incomplete selections (or an unknown unit) return SKU, bundle and scope text
    with no items and zero totals. Zero-priced lines are hidden unless they carry a
    note ("Included", "Separate line item"). No tax: painting tax rules vary.
    """
    sku = build_painting_sku(state)
    bundle_id = choose_bundle(state)
    scope_text = build_scope_text(state)

    unit = lookup(cat.UNITS, state.unit)
    if painting_missing(state) or unit is None:
        return PaintingEstimate(sku=sku, bundle_id=bundle_id, scope_text=scope_text)

    qty = painting_quantity(state.quantity)

    rate = (
        unit.base
        * multiplier_of(cat.SURFACES, state.surface)
        * multiplier_of(cat.PREP, state.prep)
        * multiplier_of(cat.SYSTEMS, state.system)
        * multiplier_of(cat.METHODS, state.method)
    )
    multiplier = multiplier_of(cat.ACCESS, state.access) * multiplier_of(cat.OCCUPANCY, state.occupancy)

    items = [PaintingLineItem(
        id="base",
        title="Paint scope base",
        qty=qty,
        unit_price=round2(rate * multiplier),
        note=unit.note,
    )]
    for cond_id in dict.fromkeys(state.conditions):
        found = lookup(cat.CONDITIONS, cond_id)
        items.append(PaintingLineItem(
            id=f"cond-{cond_id}",
            title=f"Condition: {cond_id} — {found.label if found else cond_id}",
            qty=1,
            unit_price=found.amount if found else 0.0,
            note=found.note if found else None,
        ))
    for addon_id in dict.fromkeys(state.addons):
        found = lookup(cat.ADDONS, addon_id)
        items.append(PaintingLineItem(
            id=f"add-{addon_id}",
            title=f"Add-on: {addon_id} — {found.label if found else addon_id}",
            qty=1,
            unit_price=found.amount if found else 0.0,
        ))

    items = [it for it in items if it.unit_price > 0 or it.note]
    subtotal = round2(sum(it.amount for it in items))

    return PaintingEstimate(
        sku=sku,
        bundle_id=bundle_id,
        scope_text=scope_text,
        items=items,
        subtotal=subtotal,
        total=subtotal,
    )


def painting_state_from_dict(data: dict[str, Any]) -> PaintingState:
    d = dict(data)

    def ids(key: str) -> list[str]:
        raw = d.get(key) or []
        if isinstance(raw, str):
            raw = [raw]
        return [str(x).strip() for x in raw if str(x).strip()]

    def opt(key: str) -> str | None:
        value = d.get(key)
        if value is None:
            return None
        return str(value).strip() or None

    return PaintingState(
        customer_name=str(d.get("customer_name", d.get("customerName")) or ""),
        address=str(d.get("address") or ""),
        surface=opt("surface"),
        unit=opt("unit"),
        scope=opt("scope"),
        system=opt("system"),
        prep=opt("prep"),
        sheen=opt("sheen"),
        method=opt("method"),
        access=opt("access"),
        occupancy=opt("occupancy"),
        quantity=painting_quantity(d.get("quantity", 1)),
        conditions=ids("conditions"),
        addons=ids("addons"),
        notes=str(d.get("notes") or ""),
    )
