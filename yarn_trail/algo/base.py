from abc import ABC, abstractmethod
from typing import Iterator
from yarn_trail.core.grid import Grid

# Step Outcomes
ADVANCE = "Advance"
RETREAT = "Retreat"
DONE = "Done"

class Stepper(ABC):
    def __init__(self, grid: Grid):
        self.grid = grid
        self.step_count = 0

    @abstractmethod
    def step(self) -> str:
        """
        Applies one change to self.grid in place and returns ADVANCE, RETREAT
        or DONE. Once DONE is returned the grid no longer changes.
        """
        pass

    def run(self) -> Iterator[str]:
        """Yields the outcome of every step, the last one being DONE."""
        while True:
            outcome = self.step()
            yield outcome
            if outcome == DONE:
                return

    def run_all(self):
        """Helper to run the walk to completion."""
        for _ in self.run():
            pass
