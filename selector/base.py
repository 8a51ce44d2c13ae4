"""Base selector interface and selection errors."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .request import SelectionRequest


class SelectionError(Exception):
    """Internal selection invariant was broken."""
    pass


class Selector(ABC):
    """Abstract base class for value selectors.

    Selectors pick values for a task from a SelectionRequest and
    remember the last selection made for each task.
    """

    _verbose: bool = False  # Set to True to print selection decisions

    def __init__(self, name: str):
        self.name = name
        self._selections: Dict[str, List[int]] = {}

    @abstractmethod
    def select(
        self,
        task_id: str,
        request: 'SelectionRequest'
    ) -> List[int]:
        """Select values for a task.

        Args:
            task_id: Unique identifier for the task
            request: Available values with allowed and preferred entries

        Returns:
            Selected values
        """
        pass

    def get_current(self, task_id: str) -> Optional[List[int]]:
        """Get current selection for a task."""
        selected = self._selections.get(task_id)
        return list(selected) if selected is not None else None

    def reset(self) -> None:
        """Reset selector state."""
        self._selections.clear()
