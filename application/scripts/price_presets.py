#!/usr/bin/env python3
"""Print every drywall and painting preset with its SKU and current price. Set ESTIMATE_TAX_RATE to override tax."""

import sys
from pathlib import Path

from dotenv import load_dotenv

# Load .env from application/ or repo root so pricing overrides are set
_app_dir = Path(__file__).resolve().parent.parent
_repo_root = _app_dir.parent
load_dotenv(_app_dir / ".env")
load_dotenv(_repo_root / ".env")
load_dotenv(_repo_root / ".env.local")

sys.path.insert(0, str(_app_dir / "src"))

from paint_estimator.drywall_engine import compute_estimate  # noqa: E402
from paint_estimator.money import format_currency  # noqa: E402
from paint_estimator.painting_engine import compute_painting_estimate  # noqa: E402
from paint_estimator.presets import (  # noqa: E402
    DRYWALL_PRESETS,
    PAINTING_PRESETS,
    drywall_preset_selection,
    painting_preset_state,
)


def main():
    quantity = 1
    if len(sys.argv) > 1:
        try:
            quantity = max(1, int(sys.argv[1]))
        except ValueError:
            print(f"Error: quantity must be an integer, got {sys.argv[1]!r}", file=sys.stderr)
            sys.exit(1)

    print(f"Drywall presets (quantity {quantity})")
    for preset in DRYWALL_PRESETS:
        result = compute_estimate(drywall_preset_selection(preset.id, quantity))
        print(f"  {result.sku:<36} {format_currency(result.total, 0):>10}  {preset.name}")

    print(f"Painting presets (quantity {quantity})")
    for preset in PAINTING_PRESETS:
        estimate = compute_painting_estimate(painting_preset_state(preset.id, quantity))
        print(f"  {estimate.sku:<48} {format_currency(estimate.total):>12}  {preset.name}")


if __name__ == "__main__":
    main()
