"""Drywall repair SKU catalog: dimension tables, modifiers, base prices, step bundles."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from .catalog import CatalogEntry, build_table, table_to_list

FALLBACK_BUNDLE_ID = "S2"

REPAIR_TYPES = build_table([
    CatalogEntry("T1", "Nail pops / screw pops"),
    CatalogEntry("T2", "Small holes (nails/anchors)"),
    CatalogEntry("T3", "Medium hole (door knob / impact)"),
    CatalogEntry("T4", "Large hole / missing drywall"),
    CatalogEntry("T5", "Crack repair (straight crack)"),
    CatalogEntry("T6", "Crack repair (settlement / recurring risk)"),
    CatalogEntry("T7", "Seam / tape failure (bubble / peeling tape)"),
    CatalogEntry("T8", "Water damage (stain + softened board)", amount=60),
    CatalogEntry("T9", "Water damage (active leak evidence)", amount=0),  # usually "stop & refer"
    CatalogEntry("T10", "Corner bead damage (outside corner)", amount=45),
    CatalogEntry("T11", "Inside corner damage"),
    CatalogEntry("T12", "Popcorn ceiling patch", amount=55),
    CatalogEntry("T13", "Knockdown / orange peel texture patch"),
    CatalogEntry("T14", "Smooth wall level-5 style patch", amount=80),
    CatalogEntry("T15", "Partial panel replacement (between studs)"),
    CatalogEntry("T16", "Full sheet replacement (4x8 / 4x12)", amount=120),
    CatalogEntry("T17", "Ceiling sag / fastener failure (re-screw + patch)"),
    CatalogEntry("T18", "Patch after electrical/plumbing access cut"),
    CatalogEntry("T19", "Patch after cabinet/backsplash/demo"),
    CatalogEntry("T20", "Patch after mold remediation / removed material"),
])

SIZE_BANDS = build_table([
    CatalogEntry("S0", 'Micro (≤ 2")', base=75),
    CatalogEntry("S1", 'Small (2–6")', base=120),
    CatalogEntry("S2", 'Medium (6–18")', base=220),
    CatalogEntry("S3", 'Large (18–36")', base=360),
    CatalogEntry("S4", 'X-Large (36"+ / between studs)', base=520),
    CatalogEntry("S5", "Full sheet (≥ 32 sq ft)", base=880),
    CatalogEntry("S6", "Multi-area (2–5 patches)", base=420),
    CatalogEntry("S7", "Whole-room set (6+ patches)", base=650),
])

ORIENTATIONS = build_table([
    CatalogEntry("O1", "Wall", multiplier=1.0),
    CatalogEntry("O2", "Ceiling", multiplier=1.25),
    CatalogEntry("O3", "Wall + Ceiling (same room)", multiplier=1.45),
])

ACCESS_OPTIONS = build_table([
    CatalogEntry("A1", "0–8 ft (standard)", multiplier=1.0),
    CatalogEntry("A2", "9–12 ft (ladder)", multiplier=1.15),
    CatalogEntry("A3", "13–18 ft (tall ladder/scaffold)", multiplier=1.35),
    CatalogEntry("A4", "Stairwell / difficult angle", multiplier=1.45),
    CatalogEntry("A5", "Tight space", multiplier=1.2),
    CatalogEntry("A6", "Obstructions not moved", multiplier=1.25),
])

FINISH_TYPES = build_table([
    CatalogEntry("F1", "Smooth (Level 4)", multiplier=1.0),
    CatalogEntry("F2", "Smooth (Level 5)", multiplier=1.35),
    CatalogEntry("F3", "Orange peel", multiplier=1.1),
    CatalogEntry("F4", "Knockdown", multiplier=1.15),
    CatalogEntry("F5", "Popcorn", multiplier=1.25),
    CatalogEntry("F6", "Skip trowel / custom", multiplier=1.45),
    CatalogEntry("F7", "Unknown / mixed", multiplier=1.15),
])

PAINT_SCOPES = build_table([
    CatalogEntry("P0", "No paint (drywall only)", multiplier=1.0, bundle="S2"),
    CatalogEntry("P1", "Prime only", multiplier=1.1, bundle="S3"),
    CatalogEntry("P2", "Spot paint (no blend guarantee)", multiplier=1.2, bundle="S4"),
    CatalogEntry("P3", "Spot blend (best-effort)", multiplier=1.3, bundle="S4"),
    CatalogEntry("P4", "Paint 1 wall", multiplier=1.6, bundle="S5"),
    CatalogEntry("P5", "Paint all walls in room", multiplier=2.2, bundle="S5"),
    CatalogEntry("P6", "Paint full ceiling", multiplier=1.9, bundle="S5"),
    CatalogEntry("P7", "Paint wall + ceiling", multiplier=2.6, bundle="S5"),
])

PROTECTION_OPTIONS = build_table([
    CatalogEntry("H1", "Empty room", multiplier=1.0),
    CatalogEntry("H2", "Furnished room", multiplier=1.1),
    CatalogEntry("H3", "Occupied / living household", multiplier=1.2),
    CatalogEntry("H4", "Dust-sensitive environment", multiplier=1.3),
])

MODIFIERS = build_table([
    CatalogEntry("C1", "Stud/backing required", amount=35),
    CatalogEntry("C2", "Insulation replacement", amount=45),
    CatalogEntry("C3", "Vapor barrier present", amount=25),
    CatalogEntry("C5", "Metal framing", amount=40),
    CatalogEntry("W1", "Stain-block primer required", amount=30),
    CatalogEntry("W2", "Soft board removal required", amount=60),
    CatalogEntry("W3", "Suspected mold (scope limits)", amount=0),  # often "refer"
    CatalogEntry("W4", "Smoke/grease contamination prep", amount=50),
    CatalogEntry("R1", "Known settling crack (no guarantee)", amount=0),
    CatalogEntry("R2", "Remove prior bad repair", amount=55),
    CatalogEntry("TEX1", "Heavy texture (multiple passes)", amount=45),
    CatalogEntry("TEX2", "High-visibility match", amount=35),
])


@dataclass(frozen=True)
class StepBundle:
    """Named checklist of work steps attached to a paint scope."""
    id: str
    title: str
    steps: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "title": self.title, "steps": list(self.steps)}


STEP_BUNDLES: Mapping[str, StepBundle] = MappingProxyType({
    "S1": StepBundle("S1", "Patch & Prep", (
        "Protect area",
        "Cut/clean damaged gypsum",
        "Backing (as needed)",
        "Install drywall piece",
        "Tape + coats",
        "Sand flat",
    )),
    "S2": StepBundle("S2", "Finish match", (
        "Everything in Patch & Prep",
        "Feather edges",
        "Texture/smooth match",
        "Final sand / touch-up",
    )),
    "S3": StepBundle("S3", "Paint-ready", (
        "Everything in Finish match",
        "Prime repaired area (appropriate primer)",
    )),
    "S4": StepBundle("S4", "Blend paint", (
        "Everything in Paint-ready",
        "Paint spot blend (best-effort)",
    )),
    "S5": StepBundle("S5", "Repaint section", (
        "Everything in Paint-ready",
        "Repaint full wall/ceiling for uniform finish",
    )),
})


@dataclass(frozen=True)
class DrywallCatalog:
    """All drywall dimension tables. The default instance is built once at import."""
    repair_types: Mapping[str, CatalogEntry] = field(default_factory=lambda: REPAIR_TYPES)
    size_bands: Mapping[str, CatalogEntry] = field(default_factory=lambda: SIZE_BANDS)
    orientations: Mapping[str, CatalogEntry] = field(default_factory=lambda: ORIENTATIONS)
    access_options: Mapping[str, CatalogEntry] = field(default_factory=lambda: ACCESS_OPTIONS)
    finish_types: Mapping[str, CatalogEntry] = field(default_factory=lambda: FINISH_TYPES)
    paint_scopes: Mapping[str, CatalogEntry] = field(default_factory=lambda: PAINT_SCOPES)
    protection_options: Mapping[str, CatalogEntry] = field(default_factory=lambda: PROTECTION_OPTIONS)
    modifiers: Mapping[str, CatalogEntry] = field(default_factory=lambda: MODIFIERS)
    step_bundles: Mapping[str, StepBundle] = field(default_factory=lambda: STEP_BUNDLES)
    fallback_bundle_id: str = FALLBACK_BUNDLE_ID

    def dimensions(self) -> list[Mapping[str, CatalogEntry]]:
        """Every table whose ids can appear in a drywall SKU, in SKU order."""
        return [
            self.repair_types,
            self.size_bands,
            self.orientations,
            self.access_options,
            self.finish_types,
            self.paint_scopes,
            self.modifiers,
            self.protection_options,
        ]

    def to_dict(self) -> dict[str, Any]:
        return {
            "repair_types": table_to_list(self.repair_types),
            "size_bands": table_to_list(self.size_bands),
            "orientations": table_to_list(self.orientations),
            "access_options": table_to_list(self.access_options),
            "finish_types": table_to_list(self.finish_types),
            "paint_scopes": table_to_list(self.paint_scopes),
            "protection_options": table_to_list(self.protection_options),
            "modifiers": table_to_list(self.modifiers),
            "step_bundles": [b.to_dict() for b in self.step_bundles.values()],
        }


DEFAULT_DRYWALL_CATALOG = DrywallCatalog()
