"""Selection request - the three inputs of a single selection."""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List

from .core import resolve_present
from .entry import Entry, Specific, contains_wildcard, parse_entries


@dataclass
class SelectionRequest:
    """Values on offer plus the entries that constrain the choice.

    available should be ascending for the default strategy to pick
    numerically nearest fallbacks.
    """
    available: List[int] = field(default_factory=list)
    allowed: List[Entry] = field(default_factory=list)
    preferred: List[Entry] = field(default_factory=list)

    def allows_any(self) -> bool:
        return contains_wildcard(self.allowed)

    def prefers_any(self) -> bool:
        return contains_wildcard(self.preferred)

    def permits(self, value: int) -> bool:
        """Check if a value passes the allowed entries."""
        if self.allows_any():
            return True
        return value in {e.value for e in self.allowed if isinstance(e, Specific)}

    def present(self) -> List[int]:
        """Available values that pass the allowed entries."""
        return resolve_present(self.available, self.allowed)

    def get_violations(self, values: Iterable[int]) -> list:
        """Get list of values that could not have been selected."""
        violations = []
        for value in values:
            if value not in self.available:
                violations.append(f"{value} not available")
            elif not self.permits(value):
                violations.append(f"{value} not allowed")
        return violations

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SelectionRequest':
        available = data.get('available') or []
        if not isinstance(available, list):
            raise TypeError("available must be a list")
        for value in available:
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"available value {value!r} is not an integer")

        return cls(
            available=list(available),
            allowed=parse_entries(data.get('allowed') or []),
            preferred=parse_entries(data.get('preferred') or [])
        )
