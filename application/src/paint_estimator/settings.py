"""Environment-driven pricing configuration (tax rates, profit margin, fees)."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env when running locally (application/.env or repo root .env / .env.local)
_app_dir = Path(__file__).resolve().parent.parent.parent  # application/
_repo_root = _app_dir.parent
load_dotenv(_app_dir / ".env")
load_dotenv(_app_dir / ".env.local")
load_dotenv(_repo_root / ".env")
load_dotenv(_repo_root / ".env.local")

# Placeholder "estimate tax" rule, not a jurisdictional computation.
DEFAULT_ESTIMATE_TAX_RATE = 0.0825
DEFAULT_PROFIT_MARGIN_PERCENT = 0.20
DEFAULT_COST_TAX_RATE_PERCENT = 0.0825
DEFAULT_PAYMENT_FEE_RATE = 0.03
DEFAULT_PAYMENT_FEE_FIXED = 2.0
DEFAULT_COMPANY_FEE_RATE = 0.0
DEFAULT_HOURLY_LABOR_RATE = 45.0

FEE_BASE_PROFIT = "profit"
FEE_BASE_TAXES = "taxes"


def _env_float(name: str, default: float) -> float:
    raw = (os.environ.get(name) or "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        print(f"[settings] {name}={raw!r} is not a number; using {default}", file=sys.stderr)
        return default
    if value < 0:
        print(f"[settings] {name}={raw!r} is negative; using {default}", file=sys.stderr)
        return default
    return value


def estimate_tax_rate() -> float:
    """Flat tax rate applied by the drywall SKU estimator."""
    return _env_float("ESTIMATE_TAX_RATE", DEFAULT_ESTIMATE_TAX_RATE)


def hourly_labor_rate() -> float:
    return _env_float("HOURLY_LABOR_RATE", DEFAULT_HOURLY_LABOR_RATE)


def _fee_base() -> str:
    value = (os.environ.get("FEE_BASE") or FEE_BASE_PROFIT).strip().lower()
    if value not in (FEE_BASE_PROFIT, FEE_BASE_TAXES):
        print(f"[settings] FEE_BASE={value!r} is not supported; using {FEE_BASE_PROFIT!r}", file=sys.stderr)
        return FEE_BASE_PROFIT
    return value


@dataclass(frozen=True)
class CostConfig:
    """Fixed percentages used by the discount / profit / tax / fee pipeline."""
    profit_margin_percent: float = DEFAULT_PROFIT_MARGIN_PERCENT
    tax_rate_percent: float = DEFAULT_COST_TAX_RATE_PERCENT
    payment_fee_rate: float = DEFAULT_PAYMENT_FEE_RATE
    payment_fee_fixed: float = DEFAULT_PAYMENT_FEE_FIXED
    company_fee_rate: float = DEFAULT_COMPANY_FEE_RATE
    fee_base: str = FEE_BASE_PROFIT  # "profit" or "taxes"


def cost_config() -> CostConfig:
    """Build a CostConfig from the environment; unset variables keep their defaults."""
    return CostConfig(
        profit_margin_percent=_env_float("PROFIT_MARGIN_PERCENT", DEFAULT_PROFIT_MARGIN_PERCENT),
        tax_rate_percent=_env_float("COST_TAX_RATE_PERCENT", DEFAULT_COST_TAX_RATE_PERCENT),
        payment_fee_rate=_env_float("PAYMENT_FEE_RATE", DEFAULT_PAYMENT_FEE_RATE),
        payment_fee_fixed=_env_float("PAYMENT_FEE_FIXED", DEFAULT_PAYMENT_FEE_FIXED),
        company_fee_rate=_env_float("COMPANY_FEE_RATE", DEFAULT_COMPANY_FEE_RATE),
        fee_base=_fee_base(),
    )
