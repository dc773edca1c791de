import unittest
import sys
import os

# Add project root to path so we can import yarn_trail
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from yarn_trail.core.grid import Grid, step, relative_to

class TestGrid(unittest.TestCase):
    def test_initialization(self):
        w, h = 20, 10
        grid = Grid(w, h)
        self.assertEqual(len(grid.cells), w * h)
        for val in grid.cells:
            self.assertEqual(val, Grid.UNVISITED)

    def test_rejects_empty_grid(self):
        with self.assertRaises(ValueError):
            Grid(0, 5)

    def test_coordinates(self):
        grid = Grid(5, 4)
        self.assertEqual(grid.get_index(2, 3), 17) # 3 * 5 + 2

        with self.assertRaises(IndexError):
            grid.get_index(-1, 0)
        with self.assertRaises(IndexError):
            grid.get_index(5, 0)
        with self.assertRaises(IndexError):
            grid.get_index(0, 4)

    def test_states(self):
        grid = Grid(3, 3)
        grid.set_occupied(1, 1)
        self.assertEqual(grid.get_state(1, 1), Grid.OCCUPIED)
        self.assertFalse(grid.is_unvisited(1, 1))

        grid.set_path(1, 1, 5)
        self.assertEqual(grid.get_state(1, 1), Grid.PATH)
        self.assertEqual(grid.get_glyph(1, 1), 5)

        grid.set_consumed(1, 1)
        self.assertEqual(grid.get_state(1, 1), Grid.CONSUMED)
        with self.assertRaises(ValueError):
            grid.get_glyph(1, 1)

        grid.set_unvisited(1, 1)
        self.assertTrue(grid.is_unvisited(1, 1))

    def test_neighbors_scan_order(self):
        grid = Grid(3, 3)
        neighbors = list(grid.get_neighbors(1, 1))
        self.assertEqual(neighbors, [
            (0, 1, Grid.LEFT),
            (1, 0, Grid.UP),
            (2, 1, Grid.RIGHT),
            (1, 2, Grid.DOWN),
        ])

        # Corner cell (0,0) only has Right and Down
        self.assertEqual(list(grid.get_neighbors(0, 0)), [(1, 0, Grid.RIGHT), (0, 1, Grid.DOWN)])
        self.assertEqual(list(Grid(1, 1).get_neighbors(0, 0)), [])

    def test_opposite(self):
        for d in Grid.SCAN_ORDER:
            self.assertNotEqual(Grid.OPPOSITE[d], d)
            self.assertEqual(Grid.OPPOSITE[Grid.OPPOSITE[d]], d)
        self.assertEqual(Grid.OPPOSITE[Grid.LEFT], Grid.RIGHT)
        self.assertEqual(Grid.OPPOSITE[Grid.UP], Grid.DOWN)

    def test_step_and_relative_to(self):
        origin = (4, 4)
        for d in Grid.SCAN_ORDER:
            moved = step(origin, d)
            self.assertEqual(relative_to(origin, moved), d)
            self.assertEqual(relative_to(moved, origin), Grid.OPPOSITE[d])

        self.assertEqual(step((0, 0), Grid.LEFT), (-1, 0)) # no clamping

    def test_relative_to_non_adjacent(self):
        with self.assertRaises(ValueError):
            relative_to((0, 0), (1, 1))
        with self.assertRaises(ValueError):
            relative_to((0, 0), (0, 2))
        with self.assertRaises(ValueError):
            relative_to((3, 3), (3, 3))

if __name__ == '__main__':
    unittest.main()
