from typing import List
from yarn_trail.core.grid import Grid, Position

def find_neighbors(grid: Grid, position: Position) -> List[Position]:
    """
    Unvisited orthogonal neighbors of 'position', scanned Left, Up, Right, Down.
    Cells in any other state (head, trail, consumed) are skipped.
    """
    x, y = position
    return [
        (nx, ny)
        for nx, ny, _ in grid.get_neighbors(x, y)
        if grid.is_unvisited(nx, ny)
    ]
