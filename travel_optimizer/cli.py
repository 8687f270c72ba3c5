"""Command-line interface for the travel optimizer."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from travel_optimizer import VERSION
from travel_optimizer.config import get_config
from travel_optimizer.domain.errors import TravelOptimizerError
from travel_optimizer.domain.models import PruningPolicy
from travel_optimizer.pipeline import build_service


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    observability = get_config().observability
    level = logging.DEBUG if verbose else observability.level.upper()
    logging.basicConfig(
        level=level,
        format=observability.format,
        datefmt=observability.datefmt,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="travel-optimizer",
        description="Find the best itinerary for each customer request",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument(
        "--schedules",
        type=Path,
        default=None,
        help="Path to the schedule CSV (default: from configuration)",
    )
    parser.add_argument(
        "--requests",
        type=Path,
        default=None,
        help="Path to the customer request CSV (default: from configuration)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write the result mapping as JSON to this path",
    )
    parser.add_argument(
        "--pruning",
        choices=[policy.value for policy in PruningPolicy],
        default=None,
        help="State pruning policy (default: from configuration)",
    )
    parser.add_argument(
        "--fail-fast",
        action="store_true",
        default=None,
        help="Abort on the first request that cannot be solved",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        service = build_service(
            pruning=PruningPolicy(args.pruning) if args.pruning else None,
            fail_fast=args.fail_fast,
        )
        plan = service.get_optimal_travel_options(
            args.schedules,
            args.requests,
            output_path=args.output,
        )
    except TravelOptimizerError as e:
        print(f"Error: {e}", file=sys.stderr)
        logging.getLogger(__name__).debug("Travel optimization failed", exc_info=True)
        return 1

    print(service.format_plan(plan))
    if args.output is not None:
        print(f"\nResults written to: {args.output}")

    return 1 if plan.has_failures else 0


if __name__ == "__main__":
    sys.exit(main())
