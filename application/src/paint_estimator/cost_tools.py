"""Discount, profit margin, tax, and payment/company fee pipeline for estimate work items."""

from __future__ import annotations

import math
from dataclasses import dataclass, asdict
from typing import Any

from . import settings
from .settings import CostConfig

PERCENTAGE = "percentage"
AMOUNT = "amount"
DISCOUNT_TYPES = (PERCENTAGE, AMOUNT)


@dataclass
class WorkItem:
    """One costed block of work (e.g. paint, labor, materials)."""
    label: str
    cost: float = 0.0


@dataclass
class DiscountConfig:
    type: str = PERCENTAGE  # "percentage" or "amount"
    value: float = 0.0
    is_editing: bool = False  # form state only, ignored by pricing


@dataclass
class CostCalculation:
    subtotal: float
    discount_amount: float
    total_after_discount: float
    profit_amount: float
    total_with_profit: float
    taxes_to_pay: float
    payment_system_fee: float
    company_fees_total: float
    total_with_taxes: float

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _as_number(value: Any) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return number


def validate_discount_value(value: Any, discount_type: str, subtotal: float) -> float:
    """
    Clamp a raw discount into its legal range.

    Percentages are clamped to [0, 100]; flat amounts to [0, subtotal]. Unknown
    types are treated as percentages.
    """
    number = _as_number(value)
    if discount_type == AMOUNT:
        return min(max(number, 0.0), max(_as_number(subtotal), 0.0))
    return min(max(number, 0.0), 100.0)


def calculate_discount(subtotal: float, discount: DiscountConfig) -> float:
    value = validate_discount_value(discount.value, discount.type, subtotal)
    if discount.type == AMOUNT:
        return value
    return subtotal * value / 100


def calculate_costs(
    work_items: list[WorkItem] | list[dict[str, Any]],
    discount: DiscountConfig | None = None,
    config: CostConfig | None = None,
) -> CostCalculation:
    """
    Run the pricing pipeline: discount, then profit margin, then tax, then fees.

    Fees are charged on total_with_profit, or on total_with_profit + taxes when
    config.fee_base is "taxes". The fixed payment fee applies only to a positive fee base.
    """
    if discount is None:
        discount = DiscountConfig()
    if config is None:
        config = settings.cost_config()

    items: list[WorkItem] = []
    for it in work_items:
        if isinstance(it, WorkItem):
            items.append(it)
        else:
            d = dict(it)
            items.append(WorkItem(label=str(d.get("label", "Item")), cost=_as_number(d.get("cost", 0))))

    subtotal = sum(_as_number(it.cost) for it in items)
    discount_amount = min(max(calculate_discount(subtotal, discount), 0.0), max(subtotal, 0.0))
    total_after_discount = subtotal - discount_amount

    profit_amount = total_after_discount * config.profit_margin_percent
    total_with_profit = total_after_discount + profit_amount
    taxes_to_pay = total_with_profit * config.tax_rate_percent

    if config.fee_base == settings.FEE_BASE_TAXES:
        fee_base = total_with_profit + taxes_to_pay
    else:
        fee_base = total_with_profit

    payment_system_fee = 0.0
    if fee_base > 0:
        payment_system_fee = fee_base * config.payment_fee_rate + config.payment_fee_fixed
    company_fees_total = max(fee_base, 0.0) * config.company_fee_rate

    total_with_taxes = total_with_profit + taxes_to_pay + payment_system_fee + company_fees_total

    return CostCalculation(
        subtotal=subtotal,
        discount_amount=discount_amount,
        total_after_discount=total_after_discount,
        profit_amount=profit_amount,
        total_with_profit=total_with_profit,
        taxes_to_pay=taxes_to_pay,
        payment_system_fee=payment_system_fee,
        company_fees_total=company_fees_total,
        total_with_taxes=total_with_taxes,
    )


def discount_from_dict(data: dict[str, Any] | None) -> DiscountConfig:
    d = dict(data or {})
    discount_type = str(d.get("type") or PERCENTAGE)
    if discount_type not in DISCOUNT_TYPES:
        discount_type = PERCENTAGE
    return DiscountConfig(
        type=discount_type,
        value=_as_number(d.get("value", 0)),
        is_editing=bool(d.get("is_editing", d.get("isEditing", False))),
    )
