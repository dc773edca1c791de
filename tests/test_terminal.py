import io
import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from yarn_trail.core.grid import Grid
from yarn_trail.algo.trail import TrailWalker
from yarn_trail.algo.glyphs import HORIZONTAL, DOWN_LEFT
from yarn_trail.viz.terminal import TerminalRenderer, Pauser, CLEAR_HOME
from yarn_trail.main import play_in_terminal

def first_choice(candidates):
    return candidates[0] if candidates else None

class FailingInput:
    def readline(self):
        raise OSError("stdin is gone")

class TestTerminalRenderer(unittest.TestCase):
    def test_fresh_grid(self):
        grid = Grid(4, 2)
        grid.set_occupied(0, 0)
        renderer = TerminalRenderer(grid)
        self.assertEqual(renderer.render_rows(), ["@...", "...."])

    def test_display_table(self):
        grid = Grid(4, 1)
        grid.set_path(0, 0, HORIZONTAL)
        grid.set_path(1, 0, DOWN_LEFT)
        grid.set_consumed(2, 0)
        grid.set_occupied(3, 0)
        self.assertEqual(TerminalRenderer(grid).render_rows(), ["─┐&@"])

    def test_draw_frame(self):
        grid = Grid(3, 2)
        out = io.StringIO()
        TerminalRenderer(grid, stream=out).draw()
        self.assertEqual(out.getvalue(), CLEAR_HOME + "...\n...\n\n")

        out = io.StringIO()
        renderer = TerminalRenderer(grid, stream=out, clear=False)
        renderer.draw()
        self.assertEqual(out.getvalue(), "...\n...\n\n")
        self.assertEqual(renderer.frame_count, 1)

    def test_walk_frames(self):
        grid = Grid(2, 2)
        walker = TrailWalker(grid, chooser=first_choice)
        renderer = TerminalRenderer(grid, stream=io.StringIO())

        walker.step()
        self.assertEqual(renderer.render_rows(), ["─@", ".."])
        walker.step()
        self.assertEqual(renderer.render_rows(), ["─┐", ".@"])
        walker.step()
        self.assertEqual(renderer.render_rows(), ["─┐", "@┘"])
        walker.step()
        self.assertEqual(renderer.render_rows(), ["─┐", "&@"])
        walker.run_all()
        self.assertEqual(renderer.render_rows(), ["@&", "&&"])

class TestPauser(unittest.TestCase):
    def test_reads_a_line(self):
        out = io.StringIO()
        pauser = Pauser(stream=out, input_stream=io.StringIO("\n"))
        pauser.wait()
        self.assertEqual(out.getvalue(), Pauser.PROMPT + "\n")

    def test_read_failure_is_ignored(self):
        pauser = Pauser(stream=io.StringIO(), input_stream=FailingInput())
        pauser.wait()

    def test_end_of_input_is_ignored(self):
        pauser = Pauser(stream=io.StringIO(), input_stream=io.StringIO(""))
        pauser.wait()
        pauser.wait()

class TestPlayInTerminal(unittest.TestCase):
    def test_renders_every_step(self):
        grid = Grid(2, 2)
        walker = TrailWalker(grid, chooser=first_choice)

        out = io.StringIO()
        saved = sys.stdout
        sys.stdout = out
        try:
            play_in_terminal(grid, walker, delay=0, clear=False)
        finally:
            sys.stdout = saved

        # 6 changing steps plus the final Done check, one frame before each
        self.assertEqual(out.getvalue().count("\n\n"), 7)
        self.assertTrue(out.getvalue().endswith("@&\n&&\n\n"))

if __name__ == '__main__':
    unittest.main()
