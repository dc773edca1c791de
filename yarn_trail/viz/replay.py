from yarn_trail.core.grid import Grid
from yarn_trail.core.events import EventReader, EVT_ADVANCE, EVT_RETREAT
from yarn_trail.algo.base import Stepper, ADVANCE, RETREAT, DONE

class EventAdapter(Stepper):
    """
    Adapts an EventReader stream to look like a TrailWalker for the renderers.
    Applies changes to the Grid as it iterates.
    """
    def __init__(self, grid: Grid, reader: EventReader):
        super().__init__(grid)
        self.reader = reader
        self.events = reader.stream_events()
        self.head = reader.start
        self.advance_count = 0
        self.retreat_count = 0
        self.trail_depth = 0

        self.grid.set_occupied(*self.head)

    def step(self) -> str:
        event = next(self.events, None)
        if event is None:
            return DONE

        type_code, data = event
        if type_code == EVT_ADVANCE:
            x, y, glyph = data
            self.grid.set_path(self.head[0], self.head[1], glyph)
            self.head = (x, y)
            self.grid.set_occupied(x, y)
            self.advance_count += 1
            self.trail_depth += 1
            outcome = ADVANCE

        elif type_code == EVT_RETREAT:
            x, y = data
            self.grid.set_consumed(*self.head)
            self.head = (x, y)
            self.grid.set_occupied(x, y)
            self.retreat_count += 1
            self.trail_depth -= 1
            outcome = RETREAT

        self.step_count += 1
        return outcome
