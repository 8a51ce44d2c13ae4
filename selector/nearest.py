"""Nearest selector - exact preferred values, else their nearest neighbours."""

from typing import Dict, List

from .base import Selector
from .core import Strategy, select
from .request import SelectionRequest


class NearestSelector(Selector):
    """Selector that resolves each task request with the core algorithm.

    Exact preferred values win; a missing one is replaced by the
    nearest greater present value, or the last present value when
    nothing greater exists.
    """

    def __init__(self, strategy: Strategy = Strategy.POSITIONAL):
        super().__init__(name=f"nearest-{strategy.value}")
        self.strategy = strategy

    def select(
        self,
        task_id: str,
        request: SelectionRequest
    ) -> List[int]:
        """Select values for a task, reusing a previous selection."""
        if task_id in self._selections:
            return list(self._selections[task_id])

        selected = select(
            request.available,
            request.allowed,
            request.preferred,
            strategy=self.strategy
        )

        self._selections[task_id] = selected
        self._log_selection(task_id, selected, request)
        return list(selected)

    def _log_selection(
        self,
        task_id: str,
        selected: List[int],
        request: SelectionRequest
    ):
        """Log selection decision."""
        if not self._verbose:
            return
        if not selected:
            print(f"[{self.name}] {task_id}: Nothing selected (present: {request.present()})")
        elif request.prefers_any():
            print(f"[{self.name}] {task_id}: Selected {selected} (wildcard preference)")
        else:
            wanted = [str(e) for e in request.preferred]
            print(f"[{self.name}] {task_id}: Selected {selected} (preferred: {wanted})")

    def get_summary(self) -> Dict:
        return {
            "strategy": self.strategy.value,
            "selections": {k: list(v) for k, v in self._selections.items()},
            "empty_tasks": [k for k, v in self._selections.items() if not v]
        }
