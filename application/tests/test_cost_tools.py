"""Unit tests for cost_tools: discount clamping, profit, tax, fees."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest

from paint_estimator.cost_tools import (
    AMOUNT,
    PERCENTAGE,
    DiscountConfig,
    WorkItem,
    calculate_costs,
    discount_from_dict,
    validate_discount_value,
)
from paint_estimator.settings import CostConfig, cost_config

CONFIG = CostConfig(
    profit_margin_percent=0.20,
    tax_rate_percent=0.0825,
    payment_fee_rate=0.03,
    payment_fee_fixed=2.0,
    company_fee_rate=0.0,
    fee_base="profit",
)

ITEMS = [WorkItem("Walls", 600.0), WorkItem("Ceiling", 400.0)]


def test_validate_percentage_clamped():
    assert validate_discount_value(110, PERCENTAGE, 1000) == 100
    assert validate_discount_value(-5, PERCENTAGE, 1000) == 0
    assert validate_discount_value(15, PERCENTAGE, 1000) == 15


def test_validate_amount_clamped_to_subtotal():
    assert validate_discount_value(1500, AMOUNT, 1000) == 1000
    assert validate_discount_value(-1, AMOUNT, 1000) == 0
    assert validate_discount_value(250, AMOUNT, 1000) == 250
    assert validate_discount_value(10, AMOUNT, -50) == 0


def test_validate_bad_values():
    assert validate_discount_value("abc", PERCENTAGE, 1000) == 0
    assert validate_discount_value(None, AMOUNT, 1000) == 0
    assert validate_discount_value(float("nan"), PERCENTAGE, 1000) == 0


def test_full_percentage_discount_zeroes_everything():
    calc = calculate_costs([WorkItem("Paint", 1000.0)], DiscountConfig(PERCENTAGE, 110), CONFIG)
    assert calc.subtotal == 1000
    assert calc.discount_amount == 1000
    assert calc.total_after_discount == 0
    assert calc.profit_amount == 0
    assert calc.taxes_to_pay == 0
    assert calc.payment_system_fee == 0  # no fixed fee on a zero base
    assert calc.total_with_taxes == 0


def test_pipeline_order():
    calc = calculate_costs(ITEMS, DiscountConfig(PERCENTAGE, 10), CONFIG)
    assert calc.subtotal == pytest.approx(1000)
    assert calc.discount_amount == pytest.approx(100)
    assert calc.total_after_discount == pytest.approx(900)
    assert calc.profit_amount == pytest.approx(180)
    assert calc.total_with_profit == pytest.approx(1080)
    assert calc.taxes_to_pay == pytest.approx(89.1)
    assert calc.payment_system_fee == pytest.approx(1080 * 0.03 + 2)
    assert calc.company_fees_total == 0
    assert calc.total_with_taxes == pytest.approx(1080 + 89.1 + 34.4)


def test_amount_discount_capped():
    calc = calculate_costs(ITEMS, DiscountConfig(AMOUNT, 5000), CONFIG)
    assert calc.discount_amount == 1000
    assert calc.total_after_discount == 0


def test_discount_never_exceeds_subtotal():
    for discount in (DiscountConfig(PERCENTAGE, 250), DiscountConfig(AMOUNT, 10**6), DiscountConfig(AMOUNT, -20)):
        calc = calculate_costs(ITEMS, discount, CONFIG)
        assert 0 <= calc.discount_amount <= calc.subtotal


@pytest.mark.parametrize("cost", [float("inf"), float("-inf"), float("nan")])
def test_non_finite_costs_count_as_zero(cost):
    calc = calculate_costs([WorkItem("Walls", cost), WorkItem("Trim", 100.0)], DiscountConfig(PERCENTAGE, 0), CONFIG)
    assert calc.subtotal == 100
    assert 0 <= calc.discount_amount <= calc.subtotal
    assert calc.total_with_taxes == pytest.approx(120 + 9.9 + 120 * 0.03 + 2)


def test_infinite_discount_value_ignored():
    assert validate_discount_value(float("inf"), AMOUNT, 1000) == 0
    calc = calculate_costs(ITEMS, DiscountConfig(AMOUNT, float("inf")), CONFIG)
    assert calc.discount_amount == 0


def test_fee_base_includes_taxes():
    cfg = CostConfig(fee_base="taxes")
    calc = calculate_costs(ITEMS, DiscountConfig(PERCENTAGE, 10), cfg)
    assert calc.payment_system_fee == pytest.approx((1080 + 89.1) * 0.03 + 2)


def test_company_fees():
    cfg = CostConfig(company_fee_rate=0.05)
    calc = calculate_costs(ITEMS, None, cfg)
    assert calc.discount_amount == 0
    assert calc.company_fees_total == pytest.approx(1200 * 0.05)
    assert calc.total_with_taxes == pytest.approx(
        calc.total_with_profit + calc.taxes_to_pay + calc.payment_system_fee + calc.company_fees_total
    )


def test_no_work_items():
    calc = calculate_costs([], DiscountConfig(AMOUNT, 50), CONFIG)
    assert calc.subtotal == 0
    assert calc.discount_amount == 0
    assert calc.total_with_taxes == 0


def test_dict_items_accepted():
    calc = calculate_costs([{"label": "Doors", "cost": "250"}, {"cost": None}], None, CONFIG)
    assert calc.subtotal == 250


def test_to_dict_keys():
    d = calculate_costs(ITEMS, None, CONFIG).to_dict()
    assert set(d) == {
        "subtotal", "discount_amount", "total_after_discount", "profit_amount", "total_with_profit",
        "taxes_to_pay", "payment_system_fee", "company_fees_total", "total_with_taxes",
    }


def test_discount_from_dict():
    d = discount_from_dict({"type": "amount", "value": "75", "isEditing": True})
    assert d == DiscountConfig(AMOUNT, 75.0, True)
    assert discount_from_dict({"type": "bogus", "value": 5}).type == PERCENTAGE
    assert discount_from_dict(None) == DiscountConfig()


@patch.dict(os.environ, {
    "PROFIT_MARGIN_PERCENT": "0.3",
    "PAYMENT_FEE_FIXED": "not-a-number",
    "FEE_BASE": "Taxes",
})
def test_cost_config_from_environment():
    cfg = cost_config()
    assert cfg.profit_margin_percent == 0.3
    assert cfg.payment_fee_fixed == 2.0
    assert cfg.fee_base == "taxes"


@patch.dict(os.environ, {"COMPANY_FEE_RATE": "-1", "FEE_BASE": "gross"})
def test_cost_config_rejects_bad_values():
    cfg = cost_config()
    assert cfg.company_fee_rate == 0.0
    assert cfg.fee_base == "profit"
