from typing import Dict, Optional, Tuple
from yarn_trail.core.grid import Grid, Position, relative_to

# Glyph Codes (stored in the low nibble of a trail cell)
VERTICAL   = 0
HORIZONTAL = 1
DOWN_RIGHT = 2
DOWN_LEFT  = 3
UP_RIGHT   = 4
UP_LEFT    = 5
YARN       = 6 # Undistinguished marker for the plain variant

GLYPH_CHARS = {
    VERTICAL:   '\u2502', # │
    HORIZONTAL: '\u2500', # ─
    DOWN_RIGHT: '\u250c', # ┌
    DOWN_LEFT:  '\u2510', # ┐
    UP_RIGHT:   '\u2514', # └
    UP_LEFT:    '\u2518', # ┘
    YARN:       '#',
}

# Which sides of the cell each glyph connects to (for the window renderer)
GLYPH_LINKS = {
    VERTICAL:   (Grid.UP, Grid.DOWN),
    HORIZONTAL: (Grid.LEFT, Grid.RIGHT),
    DOWN_RIGHT: (Grid.DOWN, Grid.RIGHT),
    DOWN_LEFT:  (Grid.DOWN, Grid.LEFT),
    UP_RIGHT:   (Grid.UP, Grid.RIGHT),
    UP_LEFT:    (Grid.UP, Grid.LEFT),
    YARN:       (),
}

class InvariantViolation(RuntimeError):
    """The walk tried to leave a cell the way it came in."""


# (arrival, departure) -> glyph, None marks a reversal.
# Every pair is listed; there is no fallback entry.
GLYPH_TABLE: Dict[Tuple[int, int], Optional[int]] = {
    (Grid.DOWN, Grid.DOWN):   VERTICAL,
    (Grid.DOWN, Grid.RIGHT):  UP_RIGHT,
    (Grid.DOWN, Grid.LEFT):   UP_LEFT,
    (Grid.DOWN, Grid.UP):     None,

    (Grid.UP, Grid.UP):       VERTICAL,
    (Grid.UP, Grid.RIGHT):    DOWN_RIGHT,
    (Grid.UP, Grid.LEFT):     DOWN_LEFT,
    (Grid.UP, Grid.DOWN):     None,

    (Grid.LEFT, Grid.LEFT):   HORIZONTAL,
    (Grid.LEFT, Grid.UP):     UP_RIGHT,
    (Grid.LEFT, Grid.DOWN):   DOWN_RIGHT,
    (Grid.LEFT, Grid.RIGHT):  None,

    (Grid.RIGHT, Grid.RIGHT): HORIZONTAL,
    (Grid.RIGHT, Grid.UP):    UP_LEFT,
    (Grid.RIGHT, Grid.DOWN):  DOWN_LEFT,
    (Grid.RIGHT, Grid.LEFT):  None,
}


def resolve(arrival: int, departure: int) -> int:
    """
    Glyph for a cell entered travelling 'arrival' and left travelling 'departure'.
    Raises InvariantViolation on a reversal and KeyError on an unknown direction.
    """
    glyph = GLYPH_TABLE[(arrival, departure)]
    if glyph is None:
        raise InvariantViolation(
            f"illegal reversal: arrived {Grid.NAMES[arrival]}, departing {Grid.NAMES[departure]}"
        )
    return glyph


def first_move_glyph(direction: int) -> int:
    # No arrival yet: draw a straight line along the axis of the move
    if direction in (Grid.LEFT, Grid.RIGHT):
        return HORIZONTAL
    if direction in (Grid.UP, Grid.DOWN):
        return VERTICAL
    raise KeyError(direction)


def resolve_step(previous: Optional[Position], current: Position, following: Position) -> int:
    """
    Glyph left on 'current' when the head moves on to 'following'.
    'previous' is None on the very first move of a run.
    """
    departure = relative_to(current, following)
    if previous is None:
        return first_move_glyph(departure)

    arrival = relative_to(previous, current)
    try:
        return resolve(arrival, departure)
    except InvariantViolation as e:
        raise InvariantViolation(
            f"{e} (previous={previous}, current={current}, next={following})"
        ) from e


def plain_glyph(previous: Optional[Position], current: Position, following: Position) -> int:
    """Drop-in for resolve_step that marks every trail cell the same way."""
    relative_to(current, following)
    return YARN
