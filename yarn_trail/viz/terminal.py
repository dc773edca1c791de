import sys
import time
from typing import List
from yarn_trail.core.grid import Grid
from yarn_trail.algo.glyphs import GLYPH_CHARS

# Clear screen, then put the cursor on the first row/column
CLEAR_HOME = "\x1b[2J\x1b[1;1H"

DISPLAY_CHARS = {
    Grid.OCCUPIED: '@',
    Grid.UNVISITED: '.',
    Grid.CONSUMED: '&',
}

def cell_char(value: int) -> str:
    state = value & Grid.STATE_MASK
    if state == Grid.PATH:
        return GLYPH_CHARS[value & Grid.GLYPH_MASK]
    return DISPLAY_CHARS[state]


class TerminalRenderer:
    """Paints the grid as text. Only reads from the grid."""

    def __init__(self, grid: Grid, stream=None, clear: bool = True):
        self.grid = grid
        self.stream = stream if stream is not None else sys.stdout
        self.clear = clear
        self.frame_count = 0

    def render_rows(self) -> List[str]:
        rows = []
        for y in range(self.grid.height):
            start = y * self.grid.width
            row = self.grid.cells[start:start + self.grid.width]
            rows.append("".join(cell_char(v) for v in row))
        return rows

    def draw(self):
        parts = []
        if self.clear:
            parts.append(CLEAR_HOME)
        for row in self.render_rows():
            parts.append(row + "\n")
        parts.append("\n")
        self.stream.write("".join(parts))
        self.stream.flush()
        self.frame_count += 1


class Pauser:
    """
    Paces the walk between frames. With no delay it blocks on a line of input;
    a failed read counts as a key press.
    """

    PROMPT = "press enter to continue"

    def __init__(self, delay: float = None, stream=None, input_stream=None):
        self.delay = delay
        self.stream = stream if stream is not None else sys.stdout
        self.input_stream = input_stream if input_stream is not None else sys.stdin

    def wait(self):
        if self.delay is not None:
            time.sleep(self.delay)
            return

        self.stream.write(self.PROMPT + "\n")
        self.stream.flush()
        try:
            self.input_stream.readline()
        except (EOFError, OSError, ValueError):
            pass
