import logging
from typing import Callable, List, Optional, Sequence, Tuple
from yarn_trail.core.grid import Grid, Position, relative_to
from yarn_trail.algo.base import Stepper, ADVANCE, RETREAT, DONE
from yarn_trail.algo.chooser import UniformChooser
from yarn_trail.algo.glyphs import resolve_step
from yarn_trail.algo.neighbors import find_neighbors

logger = logging.getLogger(__name__)

Chooser = Callable[[Sequence[Position]], Optional[Position]]
GlyphRule = Callable[[Optional[Position], Position, Position], int]

class TrailWalker(Stepper):
    """
    Randomized depth-first walk that lays a yarn trail behind the head.

    The trail holds (position, glyph) for every cell between the start and
    the head (the head itself is not on it), so retreating is a pop.
    """

    def __init__(self, grid: Grid, start: Position = (0, 0), seed: int = None,
                 chooser: Chooser = None, glyphs: GlyphRule = resolve_step,
                 event_writer=None):
        super().__init__(grid)
        if not grid.in_bounds(*start):
            raise ValueError(f"Start {start} is outside the {grid.width}x{grid.height} grid")
        if not grid.is_unvisited(*start):
            raise ValueError(f"Start {start} is not an unvisited cell")

        self.seed = seed
        self.chooser = chooser if chooser is not None else UniformChooser(seed)
        self.glyphs = glyphs
        self.event_writer = event_writer

        self.head: Position = start
        self.trail: List[Tuple[Position, int]] = []
        self.advance_count = 0
        self.retreat_count = 0
        self.max_depth = 0
        self.finished = False

        if self.event_writer:
            self.event_writer.write_header(grid.width, grid.height, start[0], start[1])

        self.grid.set_occupied(*start)

    def step(self) -> str:
        if self.finished:
            return DONE

        neighbors = find_neighbors(self.grid, self.head)
        next_pos = self.chooser(neighbors)

        if next_pos is not None:
            self.advance(next_pos)
            outcome = ADVANCE
        elif self.trail:
            self.retreat()
            outcome = RETREAT
        else:
            self.finished = True
            logger.debug(f"Done at {self.head} after {self.step_count} steps")
            return DONE

        self.step_count += 1
        return outcome

    def advance(self, next_pos: Position):
        previous = self.trail[-1][0] if self.trail else None
        current = self.head

        glyph = self.glyphs(previous, current, next_pos)
        logger.debug(
            f"Advance: back={previous} head={current} next={next_pos} "
            f"going {Grid.NAMES[relative_to(current, next_pos)]}"
        )

        # Yarn on the current position
        self.trail.append((current, glyph))
        self.grid.set_path(current[0], current[1], glyph)

        # Move the head on
        self.head = next_pos
        self.grid.set_occupied(*next_pos)

        self.advance_count += 1
        self.max_depth = max(self.max_depth, len(self.trail))

        if self.event_writer:
            self.event_writer.log_advance(next_pos[0], next_pos[1], glyph)

    def retreat(self):
        back_pos, _ = self.trail.pop()
        logger.debug(f"Retreat: {self.head} -> {back_pos} (trail {len(self.trail)})")

        self.grid.set_consumed(*self.head)
        # Reactivate the junction so its skipped branches can still be explored
        self.head = back_pos
        self.grid.set_occupied(*back_pos)

        self.retreat_count += 1

        if self.event_writer:
            self.event_writer.log_retreat(back_pos[0], back_pos[1])
