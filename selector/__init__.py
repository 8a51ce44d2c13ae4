"""Selector module for preference-driven value selection."""

from .base import Selector, SelectionError
from .entry import Entry, Specific, Wildcard, WILDCARD, parse_entry, parse_entries
from .core import Strategy, select, resolve_present
from .request import SelectionRequest
from .nearest import NearestSelector

__all__ = [
    'Selector',
    'SelectionError',
    'Entry',
    'Specific',
    'Wildcard',
    'WILDCARD',
    'parse_entry',
    'parse_entries',
    'Strategy',
    'select',
    'resolve_present',
    'SelectionRequest',
    'NearestSelector',
]
