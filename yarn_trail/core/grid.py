from array import array
from typing import Iterator, Tuple

Position = Tuple[int, int]

class Grid:
    # Direction Bits (scan order is Left, Up, Right, Down)
    LEFT  = 0b0001
    UP    = 0b0010
    RIGHT = 0b0100
    DOWN  = 0b1000

    SCAN_ORDER = (LEFT, UP, RIGHT, DOWN)

    # Direction Helpers
    DX = {LEFT: -1, UP: 0, RIGHT: 1, DOWN: 0}
    DY = {LEFT: 0, UP: -1, RIGHT: 0, DOWN: 1}
    OPPOSITE = {LEFT: RIGHT, RIGHT: LEFT, UP: DOWN, DOWN: UP}
    NAMES = {LEFT: "LEFT", UP: "UP", RIGHT: "RIGHT", DOWN: "DOWN"}

    # Cell States (high nibble). Trail cells keep their glyph code in the low nibble.
    UNVISITED = 0x00
    OCCUPIED  = 0x10
    CONSUMED  = 0x20
    PATH      = 0x40

    STATE_MASK = 0xF0
    GLYPH_MASK = 0x0F

    __slots__ = ('width', 'height', 'cells')

    def __init__(self, width: int, height: int):
        if width < 1 or height < 1:
            raise ValueError(f"Grid must be at least 1x1, got {width}x{height}")
        self.width = width
        self.height = height
        # 'B' (unsigned char) -> 1 byte per cell, all Unvisited
        self.cells = array('B', [self.UNVISITED] * (width * height))

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_index(self, x: int, y: int) -> int:
        if 0 <= x < self.width and 0 <= y < self.height:
            return y * self.width + x
        raise IndexError(f"Coordinate ({x}, {y}) out of bounds")

    def get_state(self, x: int, y: int) -> int:
        return self.cells[self.get_index(x, y)] & self.STATE_MASK

    def get_glyph(self, x: int, y: int) -> int:
        """Glyph code of a trail cell. Raises ValueError for any other state."""
        val = self.cells[self.get_index(x, y)]
        if val & self.STATE_MASK != self.PATH:
            raise ValueError(f"Cell ({x}, {y}) is not a trail cell")
        return val & self.GLYPH_MASK

    def is_unvisited(self, x: int, y: int) -> bool:
        return self.cells[self.get_index(x, y)] == self.UNVISITED

    def set_unvisited(self, x: int, y: int):
        self.cells[self.get_index(x, y)] = self.UNVISITED

    def set_occupied(self, x: int, y: int):
        self.cells[self.get_index(x, y)] = self.OCCUPIED

    def set_consumed(self, x: int, y: int):
        self.cells[self.get_index(x, y)] = self.CONSUMED

    def set_path(self, x: int, y: int, glyph: int):
        if not 0 <= glyph <= self.GLYPH_MASK:
            raise ValueError(f"Glyph code {glyph} does not fit in a cell")
        self.cells[self.get_index(x, y)] = self.PATH | glyph

    def get_neighbors(self, x: int, y: int) -> Iterator[Tuple[int, int, int]]:
        """
        Yields (nx, ny, direction_to_neighbor) for all in-bounds neighbors,
        in scan order Left, Up, Right, Down. Does NOT check cell states.
        """
        # Left
        if x > 0:
            yield (x - 1, y, self.LEFT)
        # Up
        if y > 0:
            yield (x, y - 1, self.UP)
        # Right
        if x < self.width - 1:
            yield (x + 1, y, self.RIGHT)
        # Down
        if y < self.height - 1:
            yield (x, y + 1, self.DOWN)

    def iter_cells(self) -> Iterator[Tuple[int, int, int]]:
        """Yields (x, y, raw_value) row-major by increasing y."""
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y, self.cells[y * self.width + x])


def step(position: Position, direction: int) -> Position:
    """One cell over in 'direction'. No clamping; check bounds first."""
    x, y = position
    return (x + Grid.DX[direction], y + Grid.DY[direction])


def relative_to(a: Position, b: Position) -> int:
    """Direction of travel from 'a' to the adjacent position 'b'."""
    dx = b[0] - a[0]
    dy = b[1] - a[1]
    if (dx, dy) == (-1, 0):
        return Grid.LEFT
    if (dx, dy) == (0, -1):
        return Grid.UP
    if (dx, dy) == (1, 0):
        return Grid.RIGHT
    if (dx, dy) == (0, 1):
        return Grid.DOWN
    raise ValueError(f"Positions {a} and {b} are not adjacent (dx={dx}, dy={dy})")
