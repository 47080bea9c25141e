"""
Survivor Counter Demonstration

Evaluates a fixed sample ring (or one given on the command line) and prints
how many lights can remain working.
"""

import sys
import json
import logging
import argparse
from typing import List, Optional, Sequence

from .core.cells import parse_cells
from .core.survivors import DEFAULT_SPREAD_RATE, SurvivorCounter, DefensePlan

logger = logging.getLogger(__name__)

SAMPLE_CELLS: List[int] = [1, 1, 0, 1, 1, 1, 0, 1, 1, 1]
RESULT_LABEL = "Maximum lights that can remain working"


def run_demo(cells: Sequence[int] = SAMPLE_CELLS,
             spread_rate: int = DEFAULT_SPREAD_RATE,
             show_plan: bool = False) -> DefensePlan:
    """Compute the defense plan for a ring and log a summary."""
    counter = SurvivorCounter(spread_rate=spread_rate)
    plan = counter.plan(cells)

    logger.debug(f"Ring size: {plan.size}, infected: {plan.infected}, {counter!r}")
    if show_plan:
        logger.info(f"Gaps (largest first): {list(plan.gaps)}")
        for step in plan.steps:
            logger.info(f"  gap {step.gap}: remaining={step.remaining} -> {step.action.value}, "
                        f"saved {step.saved}, day {step.days_elapsed}")
        logger.info(f"Days elapsed: {plan.days_elapsed}")

    return plan


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Ring survivor count demonstration")
    parser.add_argument("--cells", type=str, default=None,
                        help="Cell sequence, e.g. 1101110111 or 1,1,0,1 (default: built-in sample)")
    parser.add_argument("--spread-rate", type=int, default=DEFAULT_SPREAD_RATE,
                        help="Cells an untouched gap loses per day")
    parser.add_argument("--plan", action="store_true", help="Log each defense step")
    parser.add_argument("--json", action="store_true", help="Print the full plan as JSON")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(asctime)s - %(levelname)s - %(message)s')

    try:
        cells = parse_cells(args.cells) if args.cells is not None else SAMPLE_CELLS
        plan = run_demo(cells, spread_rate=args.spread_rate, show_plan=args.plan)
    except ValueError as e:
        logger.error(f"Demonstration failed: {e}")
        return 1

    if args.json:
        print(json.dumps(plan.to_dict(), indent=2))
    else:
        print(f"{RESULT_LABEL}: {plan.survivors}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
