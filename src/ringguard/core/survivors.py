"""Greedy survivor counter for a ring under spreading infection.

Every day each untouched safe zone (gap) loses `spread_rate` cells from its
infected boundaries while the defender acts once. Zones are handled largest
first: a larger zone leaves more time before it is consumed, so patching a
smaller one earlier never helps.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Tuple
import logging

from .cells import CellInput, as_cell_array, infected_indices
from .ring import circular_gaps

logger = logging.getLogger(__name__)

DEFAULT_SPREAD_RATE: int = 2  # One cell eaten from each side per day


class DefenseAction(Enum):
    """What the defender does with a gap."""

    SKIPPED = "skipped"        # Already consumed, no day spent
    PATCHED = "patched"        # Single cell left, patched in one day
    SPLIT = "split"            # Two cells left, one saved in one day
    STABILIZED = "stabilized"  # Front neutralized over two days


@dataclass(frozen=True)
class DefenseStep:
    """Outcome of handling one gap during the greedy pass."""

    gap: int
    remaining: int
    action: DefenseAction
    saved: int
    days_spent: int
    days_elapsed: int  # Running total after this step


@dataclass(frozen=True)
class DefensePlan:
    """Full record of a greedy pass over one ring."""

    size: int
    infected: int
    gaps: Tuple[int, ...]
    steps: Tuple[DefenseStep, ...] = field(default_factory=tuple)
    survivors: int = 0
    days_elapsed: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Serialize plan for JSON output."""
        return {
            "size": self.size,
            "infected": self.infected,
            "gaps": list(self.gaps),
            "survivors": self.survivors,
            "days_elapsed": self.days_elapsed,
            "steps": [
                {
                    "gap": s.gap,
                    "remaining": s.remaining,
                    "action": s.action.value,
                    "saved": s.saved,
                    "days_spent": s.days_spent,
                    "days_elapsed": s.days_elapsed,
                }
                for s in self.steps
            ],
        }


class SurvivorCounter:
    """Computes the maximum number of safe cells left on a ring.

    Holds configuration only; every call keeps its own simulation state,
    so one instance can serve independent inputs concurrently.
    """

    def __init__(self, spread_rate: int = DEFAULT_SPREAD_RATE):
        """Initialize counter.

        Args:
            spread_rate: Cells an untouched gap loses per elapsed day

        Raises:
            ValueError: If spread_rate is not a non-negative integer
        """
        if isinstance(spread_rate, bool) or not isinstance(spread_rate, int):
            raise ValueError(f"Spread rate must be an integer, got {spread_rate!r}")
        if spread_rate < 0:
            raise ValueError(f"Spread rate must be non-negative, got {spread_rate}")

        self.spread_rate = spread_rate

    def _defend(self, gap: int, days_elapsed: int) -> DefenseStep:
        """Decide how to handle one gap given the days already spent."""
        remaining = gap - self.spread_rate * days_elapsed

        if remaining <= 0:
            action, saved, days_spent = DefenseAction.SKIPPED, 0, 0
        elif remaining == 1:
            action, saved, days_spent = DefenseAction.PATCHED, 1, 1
        elif remaining == 2:
            # Both cells would fall within the day; only one can be patched
            action, saved, days_spent = DefenseAction.SPLIT, 1, 1
        else:
            action, saved, days_spent = DefenseAction.STABILIZED, remaining - 1, 2

        return DefenseStep(
            gap=gap,
            remaining=remaining,
            action=action,
            saved=saved,
            days_spent=days_spent,
            days_elapsed=days_elapsed + days_spent,
        )

    def _walk(self, gaps: Iterable[int]) -> List[DefenseStep]:
        steps = []
        days_elapsed = 0
        for gap in gaps:
            step = self._defend(gap, days_elapsed)
            days_elapsed = step.days_elapsed
            steps.append(step)
        return steps

    def count_gaps(self, gaps: Iterable[int]) -> int:
        """Run the greedy pass over precomputed gap lengths.

        Args:
            gaps: Gap lengths in any order; zeros are ignored

        Returns:
            Total survivors across all gaps
        """
        ordered = sorted((int(g) for g in gaps if g > 0), reverse=True)
        return sum(step.saved for step in self._walk(ordered))

    def plan(self, cells: CellInput) -> DefensePlan:
        """Run the greedy pass and keep the per-gap decisions.

        Args:
            cells: Cell sequence (0=infected, 1=safe)

        Returns:
            DefensePlan with one step per non-zero gap

        Raises:
            ValueError: If cells holds a value outside {0, 1}
        """
        arr = as_cell_array(cells)
        n = int(arr.size)
        infected = [int(i) for i in infected_indices(arr)]

        if not infected:
            logger.debug(f"No infected cells among {n}; all survive")
            return DefensePlan(size=n, infected=0, gaps=(), survivors=n)

        gaps = circular_gaps(infected, n)
        steps = self._walk(gaps)

        for step in steps:
            logger.debug(f"gap={step.gap} remaining={step.remaining} "
                         f"{step.action.value}: saved={step.saved} days={step.days_elapsed}")

        return DefensePlan(
            size=n,
            infected=len(infected),
            gaps=tuple(gaps),
            steps=tuple(steps),
            survivors=sum(step.saved for step in steps),
            days_elapsed=steps[-1].days_elapsed if steps else 0,
        )

    def count(self, cells: CellInput) -> int:
        """Get the maximum number of cells that stay safe."""
        return self.plan(cells).survivors

    def __repr__(self) -> str:
        return f"SurvivorCounter(spread_rate={self.spread_rate})"


# Singleton instance for convenience
default_counter = SurvivorCounter()


def max_survivors(cells: CellInput) -> int:
    """Maximum number of cells that can remain safe on the ring.

    Args:
        cells: Cell sequence (0=infected, 1=safe), treated as circular

    Returns:
        Survivor count in [0, len(cells)]

    Raises:
        ValueError: If cells holds a value outside {0, 1}
    """
    return default_counter.count(cells)
