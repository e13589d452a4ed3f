"""Customer-expectations sliders: independent multipliers that compound on a base cost."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

DEFAULT_BUDGET_RANGE = (100.0, 30000.0)


@dataclass(frozen=True)
class ExpectationOption:
    label: str
    multiplier: float
    months: int | None = None  # workmanship warranty only


MATERIAL_QUALITY_OPTIONS: tuple[ExpectationOption, ...] = (
    ExpectationOption("Low", 0.8),
    ExpectationOption("Medium", 1.0),
    ExpectationOption("High", 1.4),
)

VELOCITY_OPTIONS: tuple[ExpectationOption, ...] = (
    ExpectationOption("Standard", 1.0),
    ExpectationOption("Fast", 1.25),
    ExpectationOption("Lightning", 1.6),
)

PROJECT_DETAIL_OPTIONS: tuple[ExpectationOption, ...] = (
    ExpectationOption("Low", 0.9),
    ExpectationOption("Medium", 1.0),
    ExpectationOption("High", 1.3),
)

WORKMANSHIP_MONTHS_OPTIONS: tuple[ExpectationOption, ...] = (
    ExpectationOption("No Warranty", 0.95, months=0),
    ExpectationOption("1 Month", 1.0, months=1),
    ExpectationOption("2 Months", 1.02, months=2),
    ExpectationOption("3 Months", 1.05, months=3),
    ExpectationOption("5 Months", 1.08, months=5),
    ExpectationOption("8 Months", 1.12, months=8),
    ExpectationOption("12 Months", 1.15, months=12),
)


@dataclass
class Expectations:
    """Slider positions (indexes into the option lists) plus an advisory budget range."""
    material_quality: int = 1   # Medium
    velocity: int = 0           # Standard
    project_details: int = 1    # Medium
    workmanship_months: int = 2  # 2 Months
    budget_range: tuple[float, float] = DEFAULT_BUDGET_RANGE


def _option(options: tuple[ExpectationOption, ...], index: Any) -> ExpectationOption:
    """Option at index, clamped into range; non-numeric or NaN indexes fall back to the first option."""
    try:
        value = float(index)
    except (TypeError, ValueError):
        return options[0]
    if math.isnan(value):
        return options[0]
    return options[int(min(max(value, 0), len(options) - 1))]


def selected_options(expectations: Expectations) -> dict[str, ExpectationOption]:
    return {
        "material_quality": _option(MATERIAL_QUALITY_OPTIONS, expectations.material_quality),
        "velocity": _option(VELOCITY_OPTIONS, expectations.velocity),
        "project_details": _option(PROJECT_DETAIL_OPTIONS, expectations.project_details),
        "workmanship_months": _option(WORKMANSHIP_MONTHS_OPTIONS, expectations.workmanship_months),
    }


def adjusted_cost(base_cost: float, expectations: Expectations) -> float:
    """base_cost times the product of the four selected multipliers (rush + premium compound)."""
    cost = float(base_cost)
    for option in selected_options(expectations).values():
        cost *= option.multiplier
    return cost


def is_within_budget(cost: float, budget_range: tuple[float, float]) -> bool:
    low, high = budget_range
    return low <= cost <= high


def summarize_expectations(base_cost: float, expectations: Expectations) -> dict[str, Any]:
    """Adjusted cost with its delta against base and the advisory budget flag."""
    adjusted = adjusted_cost(base_cost, expectations)
    difference = adjusted - base_cost
    percentage_change = (difference / base_cost) * 100 if base_cost else 0.0
    options = selected_options(expectations)
    return {
        "base_cost": base_cost,
        "adjusted_cost": adjusted,
        "cost_difference": difference,
        "percentage_change": percentage_change,
        "within_budget": is_within_budget(adjusted, expectations.budget_range),
        "selections": {name: opt.label for name, opt in options.items()},
    }


def expectations_from_dict(data: dict[str, Any]) -> Expectations:
    d = dict(data)
    defaults = Expectations()
    budget = d.get("budget_range") or d.get("budgetRange") or defaults.budget_range
    try:
        low, high = float(budget[0]), float(budget[1])
    except (TypeError, ValueError, IndexError, KeyError):
        low, high = defaults.budget_range
    if low > high:
        low, high = high, low
    return Expectations(
        material_quality=d.get("material_quality", d.get("materialQuality", defaults.material_quality)),
        velocity=d.get("velocity", defaults.velocity),
        project_details=d.get("project_details", d.get("projectDetails", defaults.project_details)),
        workmanship_months=d.get("workmanship_months", d.get("workmanshipMonths", defaults.workmanship_months)),
        budget_range=(low, high),
    )
