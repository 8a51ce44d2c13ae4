"""Entry specifications for allowed and preferred value lists."""

from dataclasses import dataclass
from typing import Any, Iterable, List, Union


@dataclass(frozen=True)
class Specific:
    """Matches exactly one integer value."""
    value: int

    def __post_init__(self):
        # bool is an int subclass but never a meaningful value here
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"Specific entry needs an int, got {self.value!r}")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Wildcard:
    """Matches any value.

    All instances compare equal; use the module-level WILDCARD.
    """

    def __str__(self) -> str:
        return "any"


WILDCARD = Wildcard()

Entry = Union[Specific, Wildcard]

WILDCARD_TOKENS = ("any", "*")


def contains_wildcard(entries: Iterable[Entry]) -> bool:
    """Check if a collection of entries holds the wildcard."""
    return any(isinstance(e, Wildcard) for e in entries)


def parse_entry(raw: Any) -> Entry:
    """Convert a config scalar into an Entry.

    Args:
        raw: An int, a numeric string, "any"/"*", or an existing Entry

    Returns:
        Parsed entry
    """
    if isinstance(raw, (Specific, Wildcard)):
        return raw
    if isinstance(raw, bool):
        raise ValueError(f"Cannot parse entry from {raw!r}")
    if isinstance(raw, int):
        return Specific(raw)
    if isinstance(raw, str):
        token = raw.strip().lower()
        if token in WILDCARD_TOKENS:
            return WILDCARD
        try:
            return Specific(int(token))
        except ValueError:
            raise ValueError(f"Cannot parse entry from {raw!r}") from None
    raise ValueError(f"Cannot parse entry from {raw!r}")


def parse_entries(raw_entries: Iterable[Any]) -> List[Entry]:
    return [parse_entry(raw) for raw in raw_entries]
