"""Selection of repeated declaration values worth turning into custom properties."""

import logging
from dataclasses import dataclass
from typing import Dict, List

from .parser import iter_rules
from ..utils.config import HOIST_DECLARATION_OVERHEAD, HOIST_MIN_COUNT, HOIST_MIN_LENGTH

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HoistCandidate:
    value: str
    occurrence_count: int
    generated_name: str

    @property
    def savings(self) -> int:
        return estimate_savings(self.value, self.occurrence_count, self.generated_name)


def is_hoistable(value: str, min_length: int = HOIST_MIN_LENGTH) -> bool:
    """Long enough, not already a variable and not an oklch() color.

    Values carrying ``!important`` stay inline: inside a custom property the
    priority belongs to the variable declaration, not to its value.
    """
    return (len(value) > min_length
            and not value.startswith('var(')
            and 'oklch' not in value
            and '!' not in value)


def estimate_savings(value: str, count: int, name: str) -> int:
    """Bytes saved by declaring ``value`` once and referencing it ``count`` times."""
    return len(value) * count - (len(name) + len(value) + HOIST_DECLARATION_OVERHEAD)


def count_values(groups, min_length: int = HOIST_MIN_LENGTH) -> Dict[str, int]:
    """Count hoistable values in first-occurrence order."""
    counts: Dict[str, int] = {}
    for rule in iter_rules(groups):
        for declaration in rule.declarations:
            value = declaration.value
            if is_hoistable(value, min_length):
                counts[value] = counts.get(value, 0) + 1
    return counts


def find_hoist_candidates(groups, min_count: int = HOIST_MIN_COUNT,
                          min_length: int = HOIST_MIN_LENGTH) -> List[HoistCandidate]:
    """Pick the values to hoist and name them "0", "1", ... by first occurrence.

    Args:
        groups: Grouped rules (at-rule children are included)
        min_count: Minimum number of occurrences
        min_length: Values must be longer than this

    Returns:
        Accepted candidates in name order
    """
    candidates: List[HoistCandidate] = []
    for value, count in count_values(groups, min_length).items():
        if count < min_count:
            continue
        name = str(len(candidates))
        if estimate_savings(value, count, name) > 0:
            candidates.append(HoistCandidate(value, count, name))

    if candidates:
        logger.debug("Hoisting %d repeated values", len(candidates))
    return candidates


def select_hoist_candidates(groups, min_count: int = HOIST_MIN_COUNT,
                            min_length: int = HOIST_MIN_LENGTH) -> Dict[str, str]:
    """Map each hoisted value to its generated variable name."""
    return {c.value: c.generated_name
            for c in find_hoist_candidates(groups, min_count, min_length)}


__all__ = [
    'HoistCandidate',
    'is_hoistable',
    'estimate_savings',
    'count_values',
    'find_hoist_candidates',
    'select_hoist_candidates',
]
