"""Quick-template presets for the SKUs quoted most often. SKUs are derived from the dimensions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .drywall_engine import EstimateSelection, build_sku
from .painting_engine import PaintingState, build_painting_sku


@dataclass(frozen=True)
class DrywallPreset:
    """Read-only preset; selection() hands out an editable copy."""
    id: str
    name: str
    repair_type: str
    size: str
    orientation: str
    access: str
    finish: str
    paint_scope: str
    protection: str
    modifiers: tuple[str, ...] = ()

    def selection(self, quantity: int = 1) -> EstimateSelection:
        return EstimateSelection(
            repair_type=self.repair_type,
            size=self.size,
            orientation=self.orientation,
            access=self.access,
            finish=self.finish,
            paint_scope=self.paint_scope,
            protection=self.protection,
            modifiers=list(self.modifiers),
            quantity=quantity,
        )

    @property
    def sku(self) -> str:
        return build_sku(self.selection())

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "sku": self.sku}


@dataclass(frozen=True)
class PaintingPreset:
    id: str
    name: str
    surface: str
    unit: str
    scope: str
    system: str
    prep: str
    sheen: str
    method: str
    access: str
    occupancy: str
    conditions: tuple[str, ...] = ()
    addons: tuple[str, ...] = ()

    def state(self, quantity: float = 1) -> PaintingState:
        return PaintingState(
            surface=self.surface,
            unit=self.unit,
            scope=self.scope,
            system=self.system,
            prep=self.prep,
            sheen=self.sheen,
            method=self.method,
            access=self.access,
            occupancy=self.occupancy,
            quantity=quantity,
            conditions=list(self.conditions),
            addons=list(self.addons),
        )

    @property
    def sku(self) -> str:
        return build_painting_sku(self.state())

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "sku": self.sku}


DRYWALL_PRESETS: tuple[DrywallPreset, ...] = (
    # Holes (walls)
    DrywallPreset("dw-small-hole-no-paint", "Small hole (anchors) • Wall • No paint (client paints)",
                  "T2", "S1", "O1", "A1", "F1", "P0", "H2"),
    DrywallPreset("dw-small-hole-prime", "Small hole (anchors) • Wall • Prime only",
                  "T2", "S1", "O1", "A1", "F1", "P1", "H2"),
    DrywallPreset("dw-small-hole-spot-blend", "Small hole (anchors) • Wall • Spot blend (most common)",
                  "T2", "S1", "O1", "A1", "F1", "P3", "H2"),
    DrywallPreset("dw-medium-hole-spot-blend-texture", "Medium hole (door knob) • Wall • Orange peel • Spot blend",
                  "T3", "S2", "O1", "A1", "F3", "P3", "H2"),
    DrywallPreset("dw-large-hole-repaint-wall", "Large hole • Wall • Repaint full wall (uniform finish)",
                  "T4", "S3", "O1", "A1", "F3", "P5", "H2"),
    DrywallPreset("dw-access-cut-spot-blend", "Plumbing/Electrical access cut • Wall • Spot blend",
                  "T18", "S2", "O1", "A1", "F3", "P3", "H2"),
    # Cracks & seams
    DrywallPreset("dw-straight-crack-spot-blend", "Straight crack • Wall • Smooth • Spot blend",
                  "T5", "S2", "O1", "A1", "F1", "P3", "H2"),
    DrywallPreset("dw-settling-crack-spot-blend",
                  "Settling crack • Wall • Smooth • Spot blend (no re-crack guarantee)",
                  "T6", "S2", "O1", "A1", "F1", "P3", "H2", ("R1",)),
    DrywallPreset("dw-tape-failure-repaint-wall", "Tape failure • Wall • Smooth • Repaint full wall",
                  "T7", "S3", "O1", "A1", "F1", "P5", "H2"),
    # Corners
    DrywallPreset("dw-outside-corner-spot-blend", "Outside corner bead • Wall • Spot blend",
                  "T10", "S2", "O1", "A1", "F1", "P3", "H2"),
    DrywallPreset("dw-inside-corner-spot-blend", "Inside corner • Wall • Spot blend",
                  "T11", "S2", "O1", "A1", "F1", "P3", "H2"),
    # Water damage
    DrywallPreset("dw-water-wall-spot-blend",
                  "Water damage • Wall • Stain-block + soft board removal • Spot blend",
                  "T8", "S2", "O1", "A1", "F1", "P3", "H3", ("W1", "W2")),
    DrywallPreset("dw-water-popcorn-ceiling",
                  "Water damage • Popcorn ceiling • Stain-block + board replacement • Repaint full ceiling",
                  "T8", "S2", "O2", "A2", "F5", "P6", "H3", ("W1", "W2")),
    DrywallPreset("dw-active-leak-refer", "Active leak evidence • Stop & refer until leak fixed",
                  "T9", "S2", "O2", "A1", "F1", "P0", "H2", ("W2",)),
    # Ceilings & texture
    DrywallPreset("dw-popcorn-patch-ceiling", "Popcorn patch • Ceiling • Repaint full ceiling",
                  "T12", "S2", "O2", "A1", "F5", "P6", "H2"),
    DrywallPreset("dw-knockdown-patch-ceiling", "Knockdown/Orange peel patch • Ceiling • Repaint full ceiling",
                  "T13", "S2", "O2", "A1", "F4", "P6", "H2", ("TEX2",)),
    DrywallPreset("dw-ceiling-sag", "Ceiling sag • Re-screw + patch • Popcorn • Repaint ceiling",
                  "T17", "S3", "O2", "A2", "F5", "P6", "H3", ("C1",)),
    # Panels & sheets
    DrywallPreset("dw-partial-panel", "Partial panel replacement • Between studs • Repaint wall",
                  "T15", "S4", "O1", "A1", "F1", "P5", "H2", ("C1",)),
    DrywallPreset("dw-full-sheet-wall", "Full sheet replacement • Wall • Repaint wall",
                  "T16", "S5", "O1", "A1", "F1", "P5", "H2", ("C1",)),
    DrywallPreset("dw-full-sheet-ceiling", "Full sheet replacement • Ceiling • Popcorn • Repaint ceiling",
                  "T16", "S5", "O2", "A2", "F5", "P6", "H3", ("C1", "TEX1")),
    # Packages
    DrywallPreset("dw-multi-area-small-holes", "Multi-area small holes • 2–5 patches • Spot blend",
                  "T2", "S6", "O1", "A1", "F1", "P3", "H2"),
    DrywallPreset("dw-nail-pops-room", "Nail pops package • Whole-room set • Spot blend",
                  "T1", "S7", "O1", "A1", "F1", "P3", "H2"),
    DrywallPreset("dw-level5-high-visibility", "Level-5 smooth patch • High visibility • Spot blend",
                  "T14", "S2", "O1", "A1", "F2", "P3", "H3", ("TEX2",)),
)

PAINTING_PRESETS: tuple[PaintingPreset, ...] = (
    PaintingPreset("int-walls-room-standard", "Interior Walls • Room • Standard (most common)",
                   "S1", "U1", "SC2", "SYS2", "PR2", "F3", "M1", "A1", "H2"),
    PaintingPreset("int-walls-one-wall-standard", "Interior • One Wall • Standard",
                   "S1", "U1", "SC1", "SYS2", "PR2", "F3", "M1", "A1", "H2"),
    PaintingPreset("int-walls-vacant-movein", "Interior Walls • Vacant move-in repaint",
                   "S1", "U6", "SC7", "SYS2", "PR2", "F3", "M1", "A1", "H1"),
    PaintingPreset("int-walls-rental-turn", "Interior Walls • Rental turn (fast turnaround)",
                   "S1", "U6", "SC8", "SYS2", "PR1", "F3", "M1", "A1", "H1", addons=("AD6",)),
    PaintingPreset("int-ceiling-flat-standard", "Ceiling • Flat • Standard",
                   "S2", "U1", "SC3", "SYS2", "PR2", "F1", "M1", "A1", "H2"),
    PaintingPreset("int-ceiling-vaulted-stains", "Ceiling • Vaulted • Stain-block (smoke damage)",
                   "S2", "U1", "SC3", "SYS4", "PR3", "F1", "M1", "A3", "H2", conditions=("C4",)),
    PaintingPreset("int-walls-trim-room", "Interior • Walls + trim • Room package",
                   "S1", "U6", "SC5", "SYS2", "PR2", "F3", "M1", "A1", "H2"),
    PaintingPreset("int-trim-enamel", "Trim/Baseboards • Enamel (semi-gloss)",
                   "S3", "U2", "SC4", "SYS5", "PR2", "F5", "M1", "A1", "H2"),
    PaintingPreset("int-doors-enamel", "Doors • Enamel (semi-gloss)",
                   "S4", "U3", "SC4", "SYS5", "PR2", "F5", "M1", "A1", "H2"),
    PaintingPreset("int-cabinets-standard-occupied", "Cabinets • Sprayed • Occupied home (grease prep)",
                   "S6", "U4", "SC6", "SYS5", "PR3", "F4", "M4", "A1", "H3", conditions=("C5",)),
    PaintingPreset("ext-full-exterior-standard", "Exterior • Full repaint • Two-story • Pressure wash",
                   "S11", "U6", "SC9", "SYS2", "PR2", "F4", "M2", "A5", "H1", conditions=("E1",)),
    PaintingPreset("ext-trim-only", "Exterior trim only • Heavy caulk",
                   "S15", "U2", "SC10", "SYS2", "PR2", "F5", "M1", "A5", "H1", conditions=("E2",)),
    PaintingPreset("ext-fence-stain", "Fence/deck • Stain/sealer • Pressure wash + landscaping protection",
                   "S17", "U1", "SC13", "SYS7", "PR2", "F7", "M2", "A1", "H1",
                   conditions=("E1",), addons=("AD7", "AD8")),
)

_DRYWALL_BY_ID = {p.id: p for p in DRYWALL_PRESETS}
_PAINTING_BY_ID = {p.id: p for p in PAINTING_PRESETS}


def drywall_preset_selection(preset_id: str, quantity: int = 1) -> EstimateSelection | None:
    """A fresh, editable selection for the preset (None for unknown ids)."""
    preset = _DRYWALL_BY_ID.get(preset_id)
    if preset is None:
        return None
    return preset.selection(quantity)


def painting_preset_state(preset_id: str, quantity: float = 1) -> PaintingState | None:
    preset = _PAINTING_BY_ID.get(preset_id)
    if preset is None:
        return None
    return preset.state(quantity)
