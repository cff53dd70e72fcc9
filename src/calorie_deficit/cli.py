"""Command-line driver for a single nutrition lookup.

Usage:
    calorie-deficit chicken 200 --unit grams --condition "With Skin"
"""

from __future__ import annotations

import argparse
import asyncio

from calorie_deficit.adapters.relay_client import HttpxRelayClient
from calorie_deficit.app_logging import configure_logging
from calorie_deficit.config import Settings
from calorie_deficit.domain.adjustments import DEFAULT_UNIT, Unit, conditions_for
from calorie_deficit.services.form import NutritionForm, render_nutrition


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="calorie-deficit",
        description="Look up nutrition facts through the relay.",
    )
    parser.add_argument("ingredient", help="Ingredient, e.g. egg, chicken, rice")
    parser.add_argument("quantity", help="Quantity, e.g. 100")
    parser.add_argument(
        "--unit",
        default=DEFAULT_UNIT.value,
        choices=[unit.value for unit in Unit],
        help="Quantity unit (default: grams)",
    )
    parser.add_argument("--condition", default="", help="Ingredient type")
    parser.add_argument("--relay-url", default=None, help="Relay base URL")
    return parser


async def run_lookup(form: NutritionForm) -> int:
    """Submit the form and print the outcome."""
    await form.submit()
    if form.error:
        print(form.error)
        return 1
    if form.result is not None:
        print(render_nutrition(form.result))
    return 0


async def _run(args: argparse.Namespace) -> int:
    base_url = args.relay_url or Settings().relay_base_url
    relay_client = HttpxRelayClient.create(base_url)
    try:
        form = NutritionForm(
            relay_client=relay_client,
            ingredient=args.ingredient,
            quantity=args.quantity,
            unit=Unit(args.unit),
            condition=args.condition,
        )
        return await run_lookup(form)
    finally:
        await relay_client.close()


def main(argv: list[str] | None = None) -> int:
    """Console entry point."""
    configure_logging()
    args = build_parser().parse_args(argv)
    options = conditions_for(args.ingredient)
    if args.condition and options and args.condition not in options:
        print(f"Known types for {args.ingredient}: {', '.join(options)}")
    return asyncio.run(_run(args))


if __name__ == "__main__":
    raise SystemExit(main())
