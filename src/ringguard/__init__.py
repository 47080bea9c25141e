"""
ringguard: survivor counting on a ring of infected and safe cells

Infection spreads inward from every infected cell each day while a single
defender acts once per day. The core answers how many cells can still be
working when the spread has run its course.
"""

from .core.cells import INFECTED, SAFE, as_cell_array, infected_indices, parse_cells
from .core.ring import ring_gap, circular_gaps
from .core.survivors import (
    DefenseAction,
    DefensePlan,
    DefenseStep,
    SurvivorCounter,
    default_counter,
    max_survivors,
)

__version__ = "0.1.0"

__all__ = [
    'INFECTED',
    'SAFE',
    'as_cell_array',
    'infected_indices',
    'parse_cells',
    'ring_gap',
    'circular_gaps',
    'DefenseAction',
    'DefensePlan',
    'DefenseStep',
    'SurvivorCounter',
    'default_counter',
    'max_survivors',
]
