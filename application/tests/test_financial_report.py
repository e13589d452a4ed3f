"""Unit tests for financial_report: summary totals, breakdowns, receipts index, page plan."""

from __future__ import annotations

import pytest

from paint_estimator.financial_report import (
    ReportTransaction,
    build_report,
    calculate_financial_summary,
    operating_expenses_breakdown,
    owner_activity_breakdown,
    paginate,
    report_pages,
    transaction_from_dict,
    transaction_type_label,
    transactions_with_receipts,
    truncate_text,
)


def _ledger() -> list[ReportTransaction]:
    return [
        ReportTransaction("1", "2024-03-10", 500000, "revenue", "Kitchen repaint", "Sales", has_receipt=True),
        ReportTransaction("2", "2024-01-05", -12000, "expense", "Rollers", "Supplies", has_receipt=True),
        ReportTransaction("3", "2024-01-09", -3000, "expense", "Truck", "Fuel"),
        ReportTransaction("4", "2024-02-01T09:00:00Z", -8000, "expense", "Tape", "Supplies", has_receipt=True),
        ReportTransaction("5", "2024-02-03", -100000, "cogs", "Paint", "Materials"),
        ReportTransaction("6", "2024-02-15", -20000, "equity", "Draw", "Owner draw"),
        ReportTransaction("7", "2024-02-16", 50000, "equity", "Capital", "Capital"),
        ReportTransaction("8", "2024-02-20", -2000, "expense", "Misc"),
    ]


def test_summary_totals():
    s = calculate_financial_summary(_ledger())
    assert s.total_revenue == 5000
    assert s.total_operating_expenses == -250
    assert s.total_cogs == -1000
    assert s.net_profit == 3750  # revenue + COGS + expenses, signed
    assert s.owner_contributions == 500
    assert s.owner_draws == -200
    assert s.transaction_count == 8
    assert s.uncategorized_total == 20


def test_uncategorized_label_counts_as_uncategorized():
    s = calculate_financial_summary([ReportTransaction("1", "2024-01-01", -550, "expense", category="UNCATEGORIZED")])
    assert s.uncategorized_total == 5.5


def test_empty_summary():
    s = calculate_financial_summary([])
    assert s.net_profit == 0
    assert s.transaction_count == 0


def test_operating_expenses_breakdown_sorted_by_total():
    rows = operating_expenses_breakdown(_ledger())
    assert [(r.category, r.total, r.count) for r in rows] == [
        ("Supplies", 200, 2),
        ("Fuel", 30, 1),
        ("Uncategorized", 20, 1),
    ]
    assert [r.percentage for r in rows] == pytest.approx([80, 12, 8])


def test_breakdown_with_only_zero_expenses():
    rows = operating_expenses_breakdown([ReportTransaction("1", "2024-01-01", 0, "expense", category="Fees")])
    assert rows[0].percentage == 0


def test_owner_activity():
    activity = owner_activity_breakdown(_ledger())
    assert [(c.category, c.total, c.count) for c in activity.contributions] == [("Capital", 500, 1)]
    assert [(d.category, d.total, d.count) for d in activity.draws] == [("Owner draw", 200, 1)]
    assert activity.draws[0].percentage == 0


def test_receipts_sorted_oldest_first():
    ledger = _ledger() + [ReportTransaction("9", "someday", -100, "expense", has_receipt=True)]
    assert [tx.id for tx in transactions_with_receipts(ledger)] == ["2", "4", "1", "9"]


def test_page_plan_small_report():
    pages = report_pages(_ledger())
    assert pages.transaction_pages == 1
    assert pages.attachment_pages == 1
    assert pages.transactions_start == 6
    assert pages.attachments_start == 7
    assert pages.total_pages == 8


def test_page_plan_without_receipts_keeps_index_page():
    ledger = [ReportTransaction(str(i), "2024-01-01", -100, "expense") for i in range(60)]
    pages = report_pages(ledger)
    assert pages.transaction_pages == 3
    assert pages.attachment_pages == 1
    assert pages.attachments_start == 9
    assert pages.to_dict()["cpa_notes_page"] == 10


def test_page_plan_many_receipts():
    ledger = [ReportTransaction(str(i), "2024-01-01", -100, "expense", has_receipt=True) for i in range(61)]
    assert report_pages(ledger).attachment_pages == 3


def test_paginate():
    assert paginate(list(range(7)), 3) == [[0, 1, 2], [3, 4, 5], [6]]
    assert paginate([], 3) == []


def test_labels_and_truncation():
    assert transaction_type_label("cogs") == "Cost of Goods Sold"
    assert transaction_type_label("transfer") == "transfer"
    assert truncate_text("Pressure washing", 10) == "Pressur..."
    assert truncate_text("Tape", 10) == "Tape"


def test_transaction_from_dict():
    tx = transaction_from_dict({
        "id": 9,
        "date": "2024-04-01",
        "amount": "1234.6",
        "type": " Expense ",
        "category": "  ",
        "hasReceipt": True,
        "attachmentName": "receipt.pdf",
    })
    assert tx.id == "9"
    assert tx.amount == 1235
    assert tx.type == "expense"
    assert tx.category is None
    assert tx.has_receipt is True
    assert tx.attachment_name == "receipt.pdf"


@pytest.mark.parametrize("amount", [float("inf"), float("nan"), "lots", None])
def test_transaction_bad_amount_is_zero(amount):
    assert transaction_from_dict({"amount": amount, "type": "revenue"}).amount == 0


def test_build_report():
    report = build_report(_ledger())
    assert report["summary"]["net_profit"] == 3750
    assert report["operating_expenses"][0]["category"] == "Supplies"
    assert len(report["transaction_pages"]) == 1
    assert [tx["id"] for tx in report["attachment_pages"][0]] == ["2", "4", "1"]
    assert report["pages"]["total_pages"] == 8
