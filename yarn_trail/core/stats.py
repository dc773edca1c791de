from yarn_trail.core.grid import Grid
from yarn_trail.algo.glyphs import DOWN_RIGHT, DOWN_LEFT, UP_RIGHT, UP_LEFT

CORNER_GLYPHS = (DOWN_RIGHT, DOWN_LEFT, UP_RIGHT, UP_LEFT)

def calculate_stats(grid: Grid):
    unvisited = 0
    occupied = 0
    consumed = 0
    trail = 0
    corners = 0 # turning trail cells
    straights = 0 # straight runs and plain markers

    for i in range(grid.width * grid.height):
        val = grid.cells[i]
        state = val & Grid.STATE_MASK
        if state == Grid.UNVISITED: unvisited += 1
        elif state == Grid.OCCUPIED: occupied += 1
        elif state == Grid.CONSUMED: consumed += 1
        elif state == Grid.PATH:
            trail += 1
            if (val & Grid.GLYPH_MASK) in CORNER_GLYPHS: corners += 1
            else: straights += 1

    total = grid.width * grid.height
    visited = total - unvisited
    return {
        "unvisited": unvisited,
        "occupied": occupied,
        "consumed": consumed,
        "trail": trail,
        "corners": corners,
        "straights": straights,
        "coverage_percent": (visited / total) * 100 if total > 0 else 0
    }
