"""Command-line interface for tea-lens."""

import argparse
import logging
import sys

from tea_lens import __version__, analyze_tea
from tea_lens.config import EngineConfig
from tea_lens.core import load_tea
from tea_lens.exceptions import TeaLensError
from tea_lens.matchers.brewing import summarize
from tea_lens.scoring.cyclic import format_ranges


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="tea-lens",
        description="Derive season, time, activity, food and brewing recommendations for a tea",
    )
    parser.add_argument("tea", help="Path to a JSON file holding one tea record")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log scoring details to stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"tea-lens {__version__}",
    )

    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        tea = load_tea(args.tea)
        result = analyze_tea(tea, EngineConfig.from_env())
    except TeaLensError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(result.model_dump_json(indent=2, exclude_none=True))
    else:
        _print_formatted(result)

    return 0


def _print_formatted(result) -> None:
    """Print result in human-readable format."""
    print()
    print("  tea-lens")
    print()

    fields = [
        ("Name", result.name),
        ("Type", result.type),
        ("Profile", result.compounds.compound_profile),
        ("Roast", result.processing.roast_level),
        ("Region", result.geography.location.region),
        ("Flavors", _format_list(result.flavor.dominant_categories)),
        ("Seasons", format_ranges(result.season.ideal_ranges, empty="-")),
        ("Time of Day", format_ranges(result.time_of_day.ideal_ranges, empty="-")),
        ("Activities", _format_scored(result.activity.recommended)),
        ("Foods", _format_scored(result.food.recommended)),
        ("Gongfu", summarize(result.brewing.gongfu) if result.brewing.gongfu else None),
        ("Western", summarize(result.brewing.western) if result.brewing.western else None),
    ]

    for label, value in fields:
        display = value if value else "-"
        print(f"  {label + ':':<14} {display}")

    print()


def _format_scored(items) -> str | None:
    """Format scored candidates as "name (score)" pairs."""
    if not items:
        return None
    return ", ".join(f"{item.name} ({item.score})" for item in items)


def _format_list(items: list[str] | None) -> str | None:
    """Format list as comma-separated string."""
    if not items:
        return None
    return ", ".join(items)


if __name__ == "__main__":
    sys.exit(main())
