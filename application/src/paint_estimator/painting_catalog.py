"""Interior/exterior painting SKU catalog with pricing knobs (starter rates, tune later)."""

from __future__ import annotations

from typing import Any

from .catalog import CatalogEntry, build_table, table_to_list

FALLBACK_BUNDLE_ID = "P2"
CABINET_BUNDLE_ID = "P5"

SURFACES = build_table([
    CatalogEntry("S1", "Walls", multiplier=1.0, group="interior"),
    CatalogEntry("S2", "Ceiling", multiplier=1.05, group="interior"),
    CatalogEntry("S3", "Trim/Baseboards", multiplier=1.2, group="interior"),
    CatalogEntry("S4", "Doors", multiplier=1.25, group="interior"),
    CatalogEntry("S5", "Door frames / jambs", multiplier=1.2, group="interior"),
    CatalogEntry("S6", "Cabinets (boxes + doors)", multiplier=2.2, group="interior"),
    CatalogEntry("S7", "Built-ins / shelving", multiplier=1.0, group="interior"),
    CatalogEntry("S8", "Stair rails / banisters", multiplier=1.35, group="interior"),
    CatalogEntry("S9", "Accent wall / feature wall", multiplier=1.1, group="interior"),
    CatalogEntry("S10", "Bathroom / high-humidity areas", multiplier=1.15, group="interior"),
    CatalogEntry("S11", "Siding (wood/fiber cement/vinyl)", multiplier=1.25, group="exterior"),
    CatalogEntry("S12", "Brick (painted) / masonry (paintable)", multiplier=1.35, group="exterior"),
    CatalogEntry("S13", "Stucco", multiplier=1.45, group="exterior"),
    CatalogEntry("S14", "Fascia/soffit", multiplier=1.25, group="exterior"),
    CatalogEntry("S15", "Exterior trim", multiplier=1.25, group="exterior"),
    CatalogEntry("S16", "Garage door", multiplier=1.15, group="exterior"),
    CatalogEntry("S17", "Fence / deck staining/painting", multiplier=1.25, group="exterior"),
    CatalogEntry("S18", "Pergola / patio cover", multiplier=1.35, group="exterior"),
])

# base = starter price per unit
UNITS = build_table([
    CatalogEntry("U1", "ft²", base=1.85, note="per ft² baseline"),
    CatalogEntry("U2", "linear ft", base=3.25, note="per linear ft baseline"),
    CatalogEntry("U3", "per item", base=125, note="per item baseline"),
    CatalogEntry("U4", "per set", base=55, note="per set baseline"),
    CatalogEntry("U5", "per elevation", base=850, note="per elevation baseline"),
    CatalogEntry("U6", "package", base=650, note="package baseline"),
])

SCOPES = build_table([
    CatalogEntry("SC1", "One wall", group="interior"),
    CatalogEntry("SC2", "All walls (room)", group="interior"),
    CatalogEntry("SC3", "Walls + ceiling (room)", group="interior"),
    CatalogEntry("SC4", "Trim only (room)", group="interior"),
    CatalogEntry("SC5", "Walls + trim (room)", group="interior"),
    CatalogEntry("SC6", "Full interior (whole house)", group="interior"),
    CatalogEntry("SC7", "Move-in / vacant repaint", group="interior"),
    CatalogEntry("SC8", "Rental turn (fast turnaround)", group="interior"),
    CatalogEntry("SC9", "Full exterior repaint", group="exterior"),
    CatalogEntry("SC10", "Trim only", group="exterior"),
    CatalogEntry("SC11", "Siding only", group="exterior"),
    CatalogEntry("SC12", "1–2 elevations", group="exterior"),
    CatalogEntry("SC13", "Fence/deck only", group="exterior"),
])

SYSTEMS = build_table([
    CatalogEntry("SYS1", "2 coats (no primer included)", multiplier=1.0),
    CatalogEntry("SYS2", "Spot-prime + 2 coats", multiplier=1.08),
    CatalogEntry("SYS3", "Full prime + 2 coats", multiplier=1.22),
    CatalogEntry("SYS4", "Stain-block prime + 2 coats", multiplier=1.28),
    CatalogEntry("SYS5", "Bonding primer + 2 coats (slick surfaces/cabinets)", multiplier=1.35),
    CatalogEntry("SYS6", "Elastomeric system (some exterior stucco/masonry)", multiplier=1.35),
    CatalogEntry("SYS7", "Stain/Sealer system (fence/deck)", multiplier=1.25),
])

PREP = build_table([
    CatalogEntry("PR1", "Light", multiplier=1.0, bundle="P1"),
    CatalogEntry("PR2", "Standard", multiplier=1.15, bundle="P2"),
    CatalogEntry("PR3", "Heavy", multiplier=1.35, bundle="P3"),
    CatalogEntry("PR4", "Restoration", multiplier=1.6, bundle="P4"),
])

SHEEN = build_table([
    CatalogEntry("F1", "Flat"),
    CatalogEntry("F2", "Matte"),
    CatalogEntry("F3", "Eggshell"),
    CatalogEntry("F4", "Satin"),
    CatalogEntry("F5", "Semi-gloss"),
    CatalogEntry("F6", "Gloss"),
    CatalogEntry("F7", "Specialty"),
])

METHODS = build_table([
    CatalogEntry("M1", "Brush & roll", multiplier=1.0),
    CatalogEntry("M2", "Spray + backroll (exterior)", multiplier=1.15),
    CatalogEntry("M3", "Spray only", multiplier=1.05),
    CatalogEntry("M4", "Spray cabinets (masking/booth setup)", multiplier=1.35),
    CatalogEntry("M5", "Hybrid (spray trim/doors, roll walls)", multiplier=1.12),
])

ACCESS = build_table([
    CatalogEntry("A1", "0–8 ft", multiplier=1.0),
    CatalogEntry("A2", "9–12 ft", multiplier=1.15),
    CatalogEntry("A3", "13–18 ft / vaulted", multiplier=1.35),
    CatalogEntry("A4", "Stairwell / angled", multiplier=1.45),
    CatalogEntry("A5", "Two-story exterior", multiplier=1.55),
    CatalogEntry("A6", "Difficult access (lot lines/landscaping)", multiplier=1.35),
])

OCCUPANCY = build_table([
    CatalogEntry("H1", "Vacant", multiplier=1.0),
    CatalogEntry("H2", "Furnished", multiplier=1.1),
    CatalogEntry("H3", "Occupied household", multiplier=1.2),
    CatalogEntry("H4", "Dust-sensitive containment", multiplier=1.35),
    CatalogEntry("H5", "Pet-heavy home", multiplier=1.2),
])

CONDITIONS = build_table([
    CatalogEntry("C1", "Glossy surface (degloss/bonding primer)", amount=60),
    CatalogEntry("C2", "Chalky exterior (wash + primer)", amount=120),
    CatalogEntry("C3", "Peeling paint (scrape/sand heavy)", amount=180),
    CatalogEntry("C4", "Previously smoke-damaged", amount=150),
    CatalogEntry("C5", "Heavy grease (kitchen cabinets/walls)", amount=120),
    CatalogEntry("R1", "Minor drywall patching included (up to X)", note="Included"),
    CatalogEntry("R2", "Significant drywall repair needed", note="Separate line item"),
    CatalogEntry("R3", "Wood rot repair", note="Separate line item"),
    CatalogEntry("K1", "Deep reds/yellows (extra coat likely)", amount=90),
    CatalogEntry("K2", "Drastic color change (full prime)", amount=140),
    CatalogEntry("K3", "High-contrast cut-ins (extra labor)", amount=80),
    CatalogEntry("E1", "Pressure wash required", amount=150),
    CatalogEntry("E2", "Caulk windows/trim heavy", amount=140),
    CatalogEntry("E3", "Rusted metal (rust inhibitor system)", amount=160),
])

ADDONS = build_table([
    CatalogEntry("AD1", "Remove/install outlet covers", amount=35),
    CatalogEntry("AD2", "Furniture moving (light)", amount=75),
    CatalogEntry("AD3", "Furniture moving (heavy)", amount=175),
    CatalogEntry("AD4", "Masking plastic full-room tent", amount=220),
    CatalogEntry("AD5", "Popcorn removal coordination", amount=0),  # usually separate project
    CatalogEntry("AD6", "Same-day turnaround premium", amount=150),
    CatalogEntry("AD7", "Pressure wash (add-on)", amount=175),
    CatalogEntry("AD8", "Landscaping protection", amount=120),
    CatalogEntry("AD9", "Minor carpentry touch-ups", amount=90),
    CatalogEntry("AD10", "Gutter whitening/cleanup add-on", amount=120),
])

ALL_TABLES = [
    SURFACES, UNITS, SCOPES, SYSTEMS, PREP, SHEEN, METHODS, ACCESS, OCCUPANCY, CONDITIONS, ADDONS,
]


def catalog_to_dict() -> dict[str, Any]:
    return {
        "surfaces": table_to_list(SURFACES),
        "units": table_to_list(UNITS),
        "scopes": table_to_list(SCOPES),
        "systems": table_to_list(SYSTEMS),
        "prep": table_to_list(PREP),
        "sheen": table_to_list(SHEEN),
        "methods": table_to_list(METHODS),
        "access": table_to_list(ACCESS),
        "occupancy": table_to_list(OCCUPANCY),
        "conditions": table_to_list(CONDITIONS),
        "addons": table_to_list(ADDONS),
    }
