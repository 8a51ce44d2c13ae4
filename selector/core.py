"""Core value selection: filter available values, then resolve preferences.

The available values are first narrowed to the ones permitted by the allowed
entries (the "present" values). Each preferred entry is then resolved against
the present values on its own:

- an exact match is taken as is
- otherwise the first present value greater than the target is taken
- otherwise the last present value is taken

Results are unioned and returned in ascending order. A wildcard in the allowed
entries permits every available value; a wildcard in the preferred entries
returns the present values untouched.
"""

from enum import Enum
from typing import List, Sequence, Set

from .base import SelectionError
from .entry import Entry, Specific, Wildcard, contains_wildcard


class Strategy(Enum):
    """How the fallback scan walks the present values."""
    POSITIONAL = "positional"  # Scan present values in available order
    SORTED = "sorted"          # Scan present values in ascending order


def resolve_present(available: Sequence[int], allowed: Sequence[Entry]) -> List[int]:
    """Return the available values permitted by the allowed entries.

    Keeps the order and multiplicity of ``available``.
    """
    for entry in allowed:
        if not isinstance(entry, (Specific, Wildcard)):
            raise SelectionError(f"Unknown entry type: {type(entry).__name__}")

    if contains_wildcard(allowed):
        return list(available)

    allowed_values = {e.value for e in allowed if isinstance(e, Specific)}
    return [v for v in available if v in allowed_values]


def nearest(present: Sequence[int], target: int) -> int:
    """First value greater than target, falling back to the last value.

    ``present`` must not be empty.
    """
    for value in present:
        if value > target:
            return value
    return present[-1]


def select(
    available: Sequence[int],
    allowed: Sequence[Entry],
    preferred: Sequence[Entry],
    strategy: Strategy = Strategy.POSITIONAL
) -> List[int]:
    """Select the values that best satisfy the preferred entries.

    With Strategy.POSITIONAL the fallback is only the numerically nearest
    value when ``available`` is ascending. Strategy.SORTED drops that
    requirement.

    Args:
        available: Values currently on offer
        allowed: Entries restricting which available values may be picked
        preferred: Entries describing the wanted values, in priority order
        strategy: Ordering used by the fallback scan

    Returns:
        Selected values. Sorted and deduplicated, except when the preferred
        entries hold a wildcard or nothing is present, where the present
        values are returned as they are.
    """
    present = resolve_present(available, allowed)
    if not present:
        return present

    if contains_wildcard(preferred):
        return present

    members = set(present)
    scan_order = sorted(present) if strategy == Strategy.SORTED else present

    result: Set[int] = set()
    for entry in preferred:
        if isinstance(entry, Specific):
            if entry.value in members:
                result.add(entry.value)
            else:
                result.add(nearest(scan_order, entry.value))
        elif isinstance(entry, Wildcard):
            raise SelectionError("Wildcard reached preference resolution")
        else:
            raise SelectionError(f"Unknown entry type: {type(entry).__name__}")

    return sorted(result)
