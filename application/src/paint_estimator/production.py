"""Production-rate tools: hours from measurements, difficulty modifiers, and labor-based estimates."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

from . import settings
from .money import round2

WALL_SQFT_PER_HOUR = 150.0
CEILING_SQFT_PER_HOUR = 120.0
TRIM_LINEAR_FT_PER_HOUR = 50.0
HOURS_PER_DAY = 8

DEFAULT_OVERHEAD_PERCENT = 15.0
DEFAULT_PROFIT_PERCENT = 50.0


def estimate_painting_hours(
    wall_sqft: float = 0,
    ceiling_sqft: float = 0,
    trim_linear_ft: float = 0,
    wall_coats: int = 2,
    ceiling_coats: int = 1,
    trim_coats: int = 1,
    wall_speed: float = WALL_SQFT_PER_HOUR,
    ceiling_speed: float = CEILING_SQFT_PER_HOUR,
    trim_speed: float = TRIM_LINEAR_FT_PER_HOUR,
    efficiency: float = 1.0,  # <1 = faster crew, >1 = slower
) -> float:
    """Crew hours for walls, ceilings and trim at per-coat production speeds, to 2 decimals."""
    wall_hours = (wall_sqft / wall_speed) * wall_coats if wall_speed > 0 else 0.0
    ceiling_hours = (ceiling_sqft / ceiling_speed) * ceiling_coats if ceiling_speed > 0 else 0.0
    trim_hours = (trim_linear_ft / trim_speed) * trim_coats if trim_speed > 0 else 0.0
    return round2((wall_hours + ceiling_hours + trim_hours) * efficiency)


def convert_hours_to_days(hours: float, hours_per_day: float = HOURS_PER_DAY) -> int:
    if hours_per_day <= 0:
        return 0
    return math.ceil(hours / hours_per_day)


def production_rate(total_output: float, total_hours: float) -> float:
    """Output per hour, e.g. 1,200 ft² in 8 hours -> 150. Zero when no hours were logged."""
    if total_hours <= 0:
        return 0.0
    return total_output / total_hours


@dataclass(frozen=True)
class DifficultyModifier:
    id: str
    name: str
    category: str  # conditions, access, complexity, occupancy
    percent_adjustment: float
    description: str = ""


DEFAULT_DIFFICULTY_MODIFIERS: tuple[DifficultyModifier, ...] = (
    DifficultyModifier("1", "Occupied Home", "conditions", 15, "Furniture in place, careful work required"),
    DifficultyModifier("2", "Heavy Furniture", "conditions", 10, "Significant furniture to move/protect"),
    DifficultyModifier("3", "Poor Surface Condition", "conditions", 25, "Extensive repairs needed"),
    DifficultyModifier("4", "High Ceilings (12-14 ft)", "access", 20, "Need scaffolding/tall ladders"),
    DifficultyModifier("5", "Very High Ceilings (15+ ft)", "access", 35, "Major access challenges"),
    DifficultyModifier("6", "Stairs/Multi-level", "access", 10, "Extra carrying time"),
    DifficultyModifier("7", "Detail Trim Work", "complexity", 25, "Intricate trim, crown molding"),
    DifficultyModifier("8", "Texture Matching", "complexity", 30, "Must match existing texture"),
    DifficultyModifier("9", "Color Change (Dark to Light)", "complexity", 15, "Extra coats required"),
    DifficultyModifier("10", "Wallpaper Removal", "complexity", 40, "Time-consuming prep"),
    DifficultyModifier("11", "Business Open During Work", "occupancy", 20, "Limited work windows"),
    DifficultyModifier("12", "Extreme Care Required", "occupancy", 25, "Expensive items/surfaces"),
)


def total_modifier_percent(
    selected_ids: list[str],
    modifiers: tuple[DifficultyModifier, ...] = DEFAULT_DIFFICULTY_MODIFIERS,
) -> float:
    """Percent adjustments add up (they do not compound)."""
    chosen = set(selected_ids)
    return sum(m.percent_adjustment for m in modifiers if m.id in chosen)


def adjusted_hours(base_hours: float, modifier_percent: float) -> float:
    return base_hours * (1 + modifier_percent / 100)


@dataclass
class ProductionTask:
    name: str
    measurement: float
    unit: str
    rate_per_hour: float
    modifier_percent: float = 0.0

    @property
    def base_hours(self) -> float:
        return production_hours(self.measurement, self.rate_per_hour)

    @property
    def calculated_hours(self) -> float:
        return adjusted_hours(self.base_hours, self.modifier_percent)


def production_hours(measurement: float, rate_per_hour: float) -> float:
    if rate_per_hour <= 0:
        return 0.0
    return measurement / rate_per_hour


@dataclass
class ProductionEstimate:
    """Labor-rate estimate: overhead is on the subtotal, profit on subtotal + overhead."""
    tasks: list[ProductionTask] = field(default_factory=list)
    labor_rate: float | None = None  # $/hour; None -> settings.hourly_labor_rate()
    materials_estimate: float = 0.0
    overhead_percent: float = DEFAULT_OVERHEAD_PERCENT
    profit_percent: float = DEFAULT_PROFIT_PERCENT

    def _rate(self) -> float:
        return self.labor_rate if self.labor_rate is not None else settings.hourly_labor_rate()

    def totals(self) -> dict[str, float]:
        total_labor_hours = sum(t.calculated_hours for t in self.tasks)
        labor_cost = total_labor_hours * self._rate()
        subtotal = labor_cost + self.materials_estimate
        overhead_amount = subtotal * (self.overhead_percent / 100)
        profit_amount = (subtotal + overhead_amount) * (self.profit_percent / 100)
        return {
            "total_labor_hours": total_labor_hours,
            "labor_cost": labor_cost,
            "subtotal": subtotal,
            "overhead_amount": overhead_amount,
            "profit_amount": profit_amount,
            "total": subtotal + overhead_amount + profit_amount,
        }

    def to_dict(self) -> dict[str, Any]:
        return {
            "tasks": [
                {
                    "name": t.name,
                    "measurement": t.measurement,
                    "unit": t.unit,
                    "rate_per_hour": t.rate_per_hour,
                    "modifier_percent": t.modifier_percent,
                    "calculated_hours": round2(t.calculated_hours),
                }
                for t in self.tasks
            ],
            "labor_rate": self._rate(),
            **{k: round2(v) for k, v in self.totals().items()},
        }


def _num(value: Any, default: float) -> float:
    """float(value), or default when it is missing, non-numeric, NaN or infinite."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(number):
        return default
    return number


def production_estimate_from_dict(data: dict[str, Any]) -> ProductionEstimate:
    """Tasks with a non-positive measurement or rate are dropped, as the tracker form does."""
    d = dict(data)
    tasks: list[ProductionTask] = []
    for raw in d.get("tasks") or []:
        t = dict(raw)
        measurement = _num(t.get("measurement"), 0.0)
        rate = _num(t.get("rate_per_hour", t.get("productionRate")), 0.0)
        name = str(t.get("name") or "").strip()
        if not name or measurement <= 0 or rate <= 0:
            continue
        tasks.append(ProductionTask(
            name=name,
            measurement=measurement,
            unit=str(t.get("unit") or "ft²"),
            rate_per_hour=rate,
            modifier_percent=_num(t.get("modifier_percent", t.get("modifierPercent")), 0.0),
        ))
    labor_rate = d.get("labor_rate", d.get("laborRate"))
    return ProductionEstimate(
        tasks=tasks,
        labor_rate=_num(labor_rate, settings.hourly_labor_rate()) if labor_rate is not None else None,
        materials_estimate=_num(d.get("materials_estimate", d.get("materialsEstimate")), 0.0),
        overhead_percent=_num(d.get("overhead_percent", d.get("overhead")), DEFAULT_OVERHEAD_PERCENT),
        profit_percent=_num(d.get("profit_percent", d.get("profit")), DEFAULT_PROFIT_PERCENT),
    )
