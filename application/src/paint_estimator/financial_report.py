"""Financial report data: summary totals, category breakdowns, receipts index, and page plan. No rendering."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Sequence, TypeVar

from .money import round_whole

REVENUE = "revenue"
EXPENSE = "expense"
COGS = "cogs"
EQUITY = "equity"
ASSET = "asset"
LIABILITY = "liability"
TRANSACTION_TYPES = (REVENUE, EXPENSE, COGS, EQUITY, ASSET, LIABILITY)

UNCATEGORIZED = "Uncategorized"

TRANSACTIONS_PER_PAGE = 25
ATTACHMENTS_PER_PAGE = 30
# cover, financial summary, owner activity, operating expenses, net profit
LEADING_PAGES = 5

_TYPE_LABELS = {
    REVENUE: "Income",
    EXPENSE: "Expense",
    COGS: "Cost of Goods Sold",
    EQUITY: "Owner Activity",
    ASSET: "Asset",
    LIABILITY: "Liability",
}

T = TypeVar("T")


@dataclass
class ReportTransaction:
    """One ledger line. amount is in cents: revenue and contributions positive, costs and draws negative."""
    id: str
    date: str
    amount: int
    type: str
    description: str = ""
    category: str | None = None
    vendor: str | None = None
    memo: str | None = None
    has_receipt: bool = False
    attachment_name: str | None = None

    @property
    def dollars(self) -> float:
        return self.amount / 100

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "date": self.date,
            "amount": self.amount,
            "type": self.type,
            "type_label": transaction_type_label(self.type),
            "description": self.description,
            "category": self.category,
            "vendor": self.vendor,
            "memo": self.memo,
            "has_receipt": self.has_receipt,
            "attachment_name": self.attachment_name,
        }


@dataclass
class FinancialSummary:
    """Totals in dollars, signed as stored (expenses, COGS and draws are negative)."""
    total_revenue: float
    total_operating_expenses: float
    total_cogs: float
    net_profit: float
    owner_contributions: float
    owner_draws: float
    transaction_count: int
    uncategorized_total: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_revenue": self.total_revenue,
            "total_operating_expenses": self.total_operating_expenses,
            "total_cogs": self.total_cogs,
            "net_profit": self.net_profit,
            "owner_contributions": self.owner_contributions,
            "owner_draws": self.owner_draws,
            "transaction_count": self.transaction_count,
            "uncategorized_total": self.uncategorized_total,
        }


@dataclass
class CategoryBreakdown:
    category: str
    total: float  # dollars, always positive
    count: int
    percentage: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "category": self.category,
            "total": self.total,
            "count": self.count,
            "percentage": self.percentage,
        }


@dataclass
class OwnerActivity:
    contributions: list[CategoryBreakdown] = field(default_factory=list)
    draws: list[CategoryBreakdown] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "contributions": [c.to_dict() for c in self.contributions],
            "draws": [d.to_dict() for d in self.draws],
        }


@dataclass
class ReportPages:
    """Page plan for the report; numbers are 1-based and the cover is page 1."""
    transaction_pages: int
    attachment_pages: int

    @property
    def total_pages(self) -> int:
        return LEADING_PAGES + self.transaction_pages + self.attachment_pages + 1  # CPA notes last

    @property
    def transactions_start(self) -> int:
        return LEADING_PAGES + 1

    @property
    def attachments_start(self) -> int:
        return self.transactions_start + self.transaction_pages

    def to_dict(self) -> dict[str, int]:
        return {
            "transaction_pages": self.transaction_pages,
            "attachment_pages": self.attachment_pages,
            "transactions_start": self.transactions_start,
            "attachments_start": self.attachments_start,
            "cpa_notes_page": self.total_pages,
            "total_pages": self.total_pages,
        }


def transaction_type_label(tx_type: str) -> str:
    return _TYPE_LABELS.get(tx_type, tx_type)


def truncate_text(text: str, max_length: int) -> str:
    """Cut text to max_length characters, ending in '...' when shortened."""
    if len(text) <= max_length:
        return text
    return text[: max(max_length - 3, 0)] + "..."


def _is_uncategorized(category: str | None) -> bool:
    return not category or category.lower() == UNCATEGORIZED.lower()


def calculate_financial_summary(transactions: Sequence[ReportTransaction]) -> FinancialSummary:
    """
    Revenue, COGS and operating-expense totals plus owner activity.

    Net profit is revenue + COGS + expenses with their stored signs. Equity lines
    split into draws (negative) and contributions. Uncategorized lines are summed
    by absolute value regardless of type.
    """
    revenue = cogs = expenses = contributions = draws = uncategorized = 0
    for tx in transactions:
        if _is_uncategorized(tx.category):
            uncategorized += abs(tx.amount)
        if tx.type == REVENUE:
            revenue += tx.amount
        elif tx.type == COGS:
            cogs += tx.amount
        elif tx.type == EXPENSE:
            expenses += tx.amount
        elif tx.type == EQUITY:
            if tx.amount < 0:
                draws += tx.amount
            else:
                contributions += tx.amount

    return FinancialSummary(
        total_revenue=revenue / 100,
        total_operating_expenses=expenses / 100,
        total_cogs=cogs / 100,
        net_profit=(revenue + cogs + expenses) / 100,
        owner_contributions=contributions / 100,
        owner_draws=draws / 100,
        transaction_count=len(transactions),
        uncategorized_total=uncategorized / 100,
    )


def _group(transactions: Sequence[ReportTransaction]) -> dict[str, list[int]]:
    groups: dict[str, list[int]] = {}
    for tx in transactions:
        groups.setdefault(tx.category or UNCATEGORIZED, []).append(abs(tx.amount))
    return groups


def operating_expenses_breakdown(transactions: Sequence[ReportTransaction]) -> list[CategoryBreakdown]:
    """Expense totals per category with their share of all expenses, largest first."""
    groups = _group([tx for tx in transactions if tx.type == EXPENSE])
    grand_total = sum(sum(cents) for cents in groups.values())
    rows = [
        CategoryBreakdown(
            category=category,
            total=sum(cents) / 100,
            count=len(cents),
            percentage=(sum(cents) / grand_total) * 100 if grand_total > 0 else 0.0,
        )
        for category, cents in groups.items()
    ]
    return sorted(rows, key=lambda row: row.total, reverse=True)


def owner_activity_breakdown(transactions: Sequence[ReportTransaction]) -> OwnerActivity:
    """Equity lines per category; positive amounts are contributions, the rest draws."""
    equity = [tx for tx in transactions if tx.type == EQUITY]
    contributions = _group([tx for tx in equity if tx.amount > 0])
    draws = _group([tx for tx in equity if tx.amount <= 0])
    return OwnerActivity(
        contributions=[CategoryBreakdown(c, sum(v) / 100, len(v)) for c, v in contributions.items()],
        draws=[CategoryBreakdown(c, sum(v) / 100, len(v)) for c, v in draws.items()],
    )


def _date_key(tx: ReportTransaction) -> tuple[int, datetime]:
    # Unparseable dates sort after every real date.
    try:
        parsed = datetime.fromisoformat(tx.date.strip().replace("Z", "+00:00"))
    except (AttributeError, ValueError):
        return (1, datetime.min)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return (0, parsed)


def transactions_with_receipts(transactions: Sequence[ReportTransaction]) -> list[ReportTransaction]:
    """Transactions that carry a receipt, oldest first."""
    return sorted((tx for tx in transactions if tx.has_receipt), key=_date_key)


def page_count(item_count: int, per_page: int) -> int:
    if item_count <= 0 or per_page <= 0:
        return 0
    return math.ceil(item_count / per_page)


def paginate(items: Sequence[T], per_page: int) -> list[list[T]]:
    """Split items into consecutive pages of per_page; the last page may be short."""
    return [list(items[i * per_page:(i + 1) * per_page]) for i in range(page_count(len(items), per_page))]


def report_pages(transactions: Sequence[ReportTransaction]) -> ReportPages:
    """The attachments index always takes at least one page, even with no receipts."""
    receipts = sum(1 for tx in transactions if tx.has_receipt)
    return ReportPages(
        transaction_pages=page_count(len(transactions), TRANSACTIONS_PER_PAGE),
        attachment_pages=max(page_count(receipts, ATTACHMENTS_PER_PAGE), 1),
    )


def _cents(value: Any) -> int:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0
    if not math.isfinite(number):
        return 0
    return round_whole(number)


def _opt_str(value: Any) -> str | None:
    if value is None:
        return None
    return str(value).strip() or None


def transaction_from_dict(data: dict[str, Any]) -> ReportTransaction:
    """Build a transaction from a JSON-like dict (snake_case or camelCase keys)."""
    d = dict(data)
    return ReportTransaction(
        id=str(d.get("id") or ""),
        date=str(d.get("date") or ""),
        amount=_cents(d.get("amount")),
        type=str(d.get("type") or "").strip().lower(),
        description=str(d.get("description") or ""),
        category=_opt_str(d.get("category")),
        vendor=_opt_str(d.get("vendor")),
        memo=_opt_str(d.get("memo")),
        has_receipt=bool(d.get("has_receipt", d.get("hasReceipt", False))),
        attachment_name=_opt_str(d.get("attachment_name", d.get("attachmentName"))),
    )


def build_report(transactions: Sequence[ReportTransaction]) -> dict[str, Any]:
    """Every pre-aggregated record a report renderer needs, as plain dicts."""
    receipts = transactions_with_receipts(transactions)
    return {
        "summary": calculate_financial_summary(transactions).to_dict(),
        "operating_expenses": [row.to_dict() for row in operating_expenses_breakdown(transactions)],
        "owner_activity": owner_activity_breakdown(transactions).to_dict(),
        "transaction_pages": [
            [tx.to_dict() for tx in page] for page in paginate(transactions, TRANSACTIONS_PER_PAGE)
        ],
        "attachment_pages": [
            [tx.to_dict() for tx in page] for page in paginate(receipts, ATTACHMENTS_PER_PAGE)
        ],
        "pages": report_pages(transactions).to_dict(),
    }
