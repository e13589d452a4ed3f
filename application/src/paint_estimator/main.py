"""FastAPI app: JSON endpoints over the estimate, cost, production and financial report calculators."""

from __future__ import annotations

import json
import math
import sys
import traceback
from typing import Any, Callable

from fastapi import FastAPI, Request, Response

from . import (
    cost_tools,
    drywall_engine,
    expectations,
    financial_report,
    painting_engine,
    production,
    settings,
    sku_lookup,
)
from .drywall_catalog import DEFAULT_DRYWALL_CATALOG
from .painting_catalog import catalog_to_dict
from .presets import DRYWALL_PRESETS, PAINTING_PRESETS

app = FastAPI(title="Paint & Drywall Estimator", version="0.1.0")


async def _json_body(request: Request) -> dict[str, Any] | None:
    """Parsed JSON object body, or None if the body is not a JSON object."""
    raw = await request.body()
    try:
        payload = json.loads(raw or b"{}")
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None
    if not isinstance(payload, dict):
        return None
    return payload


def _bad_request(message: str) -> Response:
    return Response(status_code=400, content=message, media_type="text/plain")


def _run(label: str, fn: Callable[[], dict[str, Any]]) -> dict[str, Any] | Response:
    """Run a calculator; unexpected failures are printed and reported as 500."""
    try:
        return fn()
    except Exception:
        print(f"[main] {label} failed", file=sys.stderr)
        traceback.print_exc(file=sys.stderr)
        return Response(status_code=500, content="Estimate failed", media_type="text/plain")


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/api/catalogs/drywall")
async def drywall_catalog() -> dict[str, Any]:
    out = DEFAULT_DRYWALL_CATALOG.to_dict()
    out["presets"] = [p.to_dict() for p in DRYWALL_PRESETS]
    out["tax_rate"] = settings.estimate_tax_rate()
    return out


@app.get("/api/catalogs/painting")
async def painting_catalog() -> dict[str, Any]:
    out = catalog_to_dict()
    out["presets"] = [p.to_dict() for p in PAINTING_PRESETS]
    return out


@app.post("/api/estimates/drywall")
async def drywall_estimate(request: Request) -> Any:
    """Live drywall estimate. Partial selections are priced; required_missing says whether it is final."""
    payload = await _json_body(request)
    if payload is None:
        return _bad_request("Expected a JSON object")

    def compute() -> dict[str, Any]:
        selection = drywall_engine.selection_from_dict(payload)
        result = drywall_engine.compute_estimate(selection)
        out = result.to_dict()
        out["required_missing"] = drywall_engine.required_missing(selection)
        out["missing"] = drywall_engine.missing_dimensions(selection)
        bundle = drywall_engine.bundle_steps(result.bundle_id)
        out["bundle"] = bundle.to_dict() if bundle else None
        return out

    return _run("drywall estimate", compute)


@app.post("/api/estimates/painting")
async def painting_estimate(request: Request) -> Any:
    payload = await _json_body(request)
    if payload is None:
        return _bad_request("Expected a JSON object")

    def compute() -> dict[str, Any]:
        state = painting_engine.painting_state_from_dict(payload)
        out = painting_engine.compute_painting_estimate(state).to_dict()
        out["missing"] = painting_engine.painting_missing(state)
        return out

    return _run("painting estimate", compute)


@app.post("/api/estimates/adjusted-cost")
async def adjusted_cost(request: Request) -> Any:
    payload = await _json_body(request)
    if payload is None:
        return _bad_request("Expected a JSON object")
    try:
        base_cost = float(payload.get("base_cost", payload.get("baseCost", 0)) or 0)
    except (TypeError, ValueError):
        return _bad_request("base_cost must be a number")
    if not math.isfinite(base_cost):
        return _bad_request("base_cost must be a finite number")

    def compute() -> dict[str, Any]:
        exp = expectations.expectations_from_dict(payload.get("expectations") or {})
        return expectations.summarize_expectations(base_cost, exp)

    return _run("adjusted cost", compute)


@app.post("/api/costs")
async def costs(request: Request) -> Any:
    """Discount / profit / tax / fee pipeline over {"work_items": [...], "discount": {...}}."""
    payload = await _json_body(request)
    if payload is None:
        return _bad_request("Expected a JSON object")
    work_items = payload.get("work_items", payload.get("workItems")) or []
    if not isinstance(work_items, list) or not all(isinstance(it, dict) for it in work_items):
        return _bad_request("work_items must be a list of objects")

    def compute() -> dict[str, Any]:
        discount = cost_tools.discount_from_dict(payload.get("discount"))
        calc = cost_tools.calculate_costs(work_items, discount)
        out = calc.to_dict()
        out["discount"] = {
            "type": discount.type,
            "value": cost_tools.validate_discount_value(discount.value, discount.type, calc.subtotal),
        }
        return out

    return _run("cost calculation", compute)


@app.post("/api/production/estimate")
async def production_estimate(request: Request) -> Any:
    payload = await _json_body(request)
    if payload is None:
        return _bad_request("Expected a JSON object")
    tasks = payload.get("tasks") or []
    if not isinstance(tasks, list) or not all(isinstance(t, dict) for t in tasks):
        return _bad_request("tasks must be a list of objects")
    return _run("production estimate", lambda: production.production_estimate_from_dict(payload).to_dict())


@app.post("/api/reports/financial")
async def financial_report_data(request: Request) -> Any:
    """Pre-aggregated report records (summary, breakdowns, pages) over {"transactions": [...]}."""
    payload = await _json_body(request)
    if payload is None:
        return _bad_request("Expected a JSON object")
    transactions = payload.get("transactions") or []
    if not isinstance(transactions, list) or not all(isinstance(t, dict) for t in transactions):
        return _bad_request("transactions must be a list of objects")

    def compute() -> dict[str, Any]:
        return financial_report.build_report([financial_report.transaction_from_dict(t) for t in transactions])

    return _run("financial report", compute)


@app.get("/api/sku/labels")
async def sku_labels(sku: str, kind: str = sku_lookup.DRYWALL) -> Any:
    if kind not in (sku_lookup.DRYWALL, sku_lookup.PAINTING):
        return _bad_request("kind must be 'drywall' or 'painting'")
    return {"sku": sku, "kind": kind, "labels": sku_lookup.get_sku_labels(sku, kind)}
