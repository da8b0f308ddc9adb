#!/usr/bin/env python3
"""
Carbon Footprint Survey Report Example.

Builds a set of survey answers from command-line flags (or a JSON file),
runs them through the engine, and prints the results summary.

Pipeline:
1. Start from the session defaults (or load answers from JSON)
2. Apply flag overrides, selecting transport modes one toggle at a time
3. Optionally set one mode's percentage with the rebalancer
4. Classify tiers, compute the score, and print the summary

Usage:
    # Defaults only
    python examples/survey_report.py

    # Commuter by train and walking, 60% train
    python examples/survey_report.py --mode train --mode walk --share train=60 --daily-km 25

    # Solar at 50%, JSON output
    python examples/survey_report.py --solar 50 --json

    # Load answers saved by a previous run
    python examples/survey_report.py --answers answers.json
"""

import sys
import argparse
import json
import logging
from dataclasses import replace
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from src.config import DEFAULT_LOG_LEVEL
from src.footprint import (
    SurveyAnswers,
    adjust_distribution,
    default_answers,
    score_breakdown,
    set_solar,
    summarize,
    toggle_mode,
)
from src.footprint.answers import CoolingAnswers, HomeAnswers, ShoppingAnswers
from src.footprint.tables import (
    COOLING_EMISSIONS,
    HOME_AREAS,
    SHOPPING_EMISSIONS,
    TRANSPORT_MODES_BY_ID,
)

logger = logging.getLogger(__name__)


def build_answers(args: argparse.Namespace) -> SurveyAnswers:
    """
    Apply command-line overrides to the starting answers.

    Raises:
        ValueError: If saved answers are invalid, or --share names a mode
            that is not selected.
    """
    if args.answers:
        answers = SurveyAnswers.from_dict(json.loads(args.answers.read_text(encoding="utf-8")))
        logger.info(f"Loaded answers from {args.answers}")
    else:
        answers = default_answers()

    transport = answers.transport
    if args.daily_km is not None:
        transport = replace(transport, daily_km=args.daily_km)

    modes, distribution = transport.selected_modes, transport.mode_distribution
    for mode_id in args.mode:
        modes, distribution = toggle_mode(distribution, modes, mode_id)
        logger.debug(f"Selected modes: {modes}, distribution: {distribution}")

    for mode_id, value in args.share:
        if mode_id not in modes:
            raise ValueError(
                f"--share {mode_id}={value}: mode '{mode_id}' is not selected "
                f"(selected: {', '.join(modes) or 'none'})"
            )
        distribution = adjust_distribution(distribution, modes, mode_id, value)
        logger.debug(f"Set {mode_id} to {value}%: {distribution}")

    answers = replace(
        answers,
        transport=replace(transport, selected_modes=modes, mode_distribution=distribution),
    )

    if args.home is not None or args.occupants is not None:
        answers = replace(
            answers,
            home=HomeAnswers(
                type=args.home if args.home is not None else answers.home.type,
                occupants=args.occupants if args.occupants is not None else answers.home.occupants,
            ),
        )

    if args.solar is not None:
        answers = set_solar(answers, args.solar > 0, args.solar)

    if args.cooling is not None:
        answers = replace(answers, cooling=CoolingAnswers(type=args.cooling))

    if args.shopping is not None or args.reusable_bags:
        answers = replace(
            answers,
            shopping=ShoppingAnswers(
                source=args.shopping if args.shopping is not None else answers.shopping.source,
                reusable_bags=args.reusable_bags or answers.shopping.reusable_bags,
            ),
        )

    return answers


def parse_share(text: str) -> tuple[str, float]:
    """Parse a MODE=PERCENT flag value."""
    mode_id, sep, value = text.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected MODE=PERCENT, got '{text}'")
    try:
        return mode_id, float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid percentage in '{text}'")


def print_report(answers: SurveyAnswers) -> None:
    result = summarize(answers)
    terms = score_breakdown(answers)

    print("=" * 60)
    print("Carbon Footprint Results")
    print("=" * 60)
    print(f"Score: {result.score:.1f} kg CO2/day ({result.rating.rating})")
    print(f"  {result.rating.description}")
    direction = "above" if result.comparison.above_average else "at or below"
    print(
        f"  {abs(result.comparison.difference):.1f} kg {direction} the "
        f"average of {result.comparison.average} kg CO2/day"
    )

    print("\nBreakdown:")
    for name, value in terms.items():
        print(f"  {name:<15} {value:8.2f}")

    print("\nCategory tiers:")
    for category, tier in result.tiers.to_dict().items():
        print(f"  {category:<10} {tier}")

    if answers.transport.mode_distribution:
        print("\nTransport split:")
        for mode_id, share in answers.transport.mode_distribution.items():
            mode = TRANSPORT_MODES_BY_ID.get(mode_id)
            name = mode.name if mode else mode_id
            factor = f"{mode.emission_factor:.2f} kg/km" if mode else "unknown"
            print(f"  {name:<22} {round(share):3d}%  ({factor})")

    if result.recommendations:
        print("\nRecommendations:")
        for tip in result.recommendations:
            print(f"  - {tip}")


def build_parser() -> argparse.ArgumentParser:
    """Create the command-line parser."""
    parser = argparse.ArgumentParser(
        description="Carbon Footprint Survey Report",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python examples/survey_report.py --mode car --mode bus --share car=70
  python examples/survey_report.py --home villa --occupants 2 --cooling ac-most --json
        """,
    )

    parser.add_argument("--answers", type=Path, help="JSON file with saved answers")
    parser.add_argument("--daily-km", type=float, help="Total daily travel distance (km)")
    parser.add_argument(
        "--mode",
        action="append",
        default=[],
        help=f"Toggle a transport mode (repeatable). Known: {', '.join(TRANSPORT_MODES_BY_ID)}",
    )
    parser.add_argument(
        "--share",
        action="append",
        default=[],
        type=parse_share,
        help="Set a selected mode's percentage as MODE=PERCENT (repeatable)",
    )
    parser.add_argument("--home", help=f"Home type. Known: {', '.join(HOME_AREAS)}")
    parser.add_argument("--occupants", type=int, help="People living in the home")
    parser.add_argument("--solar", type=float, help="Solar coverage percentage (0 disables)")
    parser.add_argument("--cooling", help=f"Cooling type. Known: {', '.join(COOLING_EMISSIONS)}")
    parser.add_argument("--shopping", help=f"Shopping source. Known: {', '.join(SHOPPING_EMISSIONS)}")
    parser.add_argument("--reusable-bags", action="store_true", help="Shop with reusable bags")
    parser.add_argument("--json", action="store_true", help="Print answers and results as JSON")
    parser.add_argument("--save", type=Path, help="Write the final answers to a JSON file")
    parser.add_argument("--log-level", default=DEFAULT_LOG_LEVEL, help="Logging level")
    return parser


def main(argv=None):
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s: %(message)s",
    )

    try:
        answers = build_answers(args)
    except (OSError, ValueError) as e:
        parser.error(str(e))

    if args.save:
        args.save.write_text(json.dumps(answers.to_dict(), indent=2), encoding="utf-8")
        logger.info(f"Saved answers to {args.save}")

    if args.json:
        print(json.dumps({"answers": answers.to_dict(), "results": summarize(answers).to_dict()}, indent=2))
    else:
        print_report(answers)

    return 0


if __name__ == "__main__":
    sys.exit(main())
