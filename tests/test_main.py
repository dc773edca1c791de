import io
import unittest
import sys
import os
import shutil

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from yarn_trail.main import main, DEFAULT_WIDTH, DEFAULT_HEIGHT
from yarn_trail.viz.terminal import CLEAR_HOME, Pauser

class TestMain(unittest.TestCase):
    def setUp(self):
        os.makedirs("test_out", exist_ok=True)
        self.saved = (sys.stdin, sys.stdout, sys.stderr)
        sys.stdin = io.StringIO("") # every pause reads end of input
        sys.stdout = io.StringIO()
        sys.stderr = io.StringIO()

    def tearDown(self):
        sys.stdin, sys.stdout, sys.stderr = self.saved
        shutil.rmtree("test_out", ignore_errors=True)

    def test_no_arguments_walks_default_grid(self):
        main([])
        output = sys.stdout.getvalue()

        self.assertTrue(output.startswith(CLEAR_HOME))
        self.assertIn(Pauser.PROMPT, output)

        # First frame: head on the start cell, everything else unvisited
        first = output[len(CLEAR_HOME):].split("\n")[:DEFAULT_HEIGHT]
        self.assertEqual(first[0], "@" + "." * (DEFAULT_WIDTH - 1))
        self.assertEqual(first[1:], ["." * DEFAULT_WIDTH] * (DEFAULT_HEIGHT - 1))

        # Last frame: the head is back on the start with the grid covered
        last = output.split(CLEAR_HOME)[-1].split("\n")[:DEFAULT_HEIGHT]
        self.assertEqual(last[0], "@" + "&" * (DEFAULT_WIDTH - 1))
        self.assertEqual(last[1:], ["&" * DEFAULT_WIDTH] * (DEFAULT_HEIGHT - 1))

    def test_walk_subcommand(self):
        main(["walk", "--width", "3", "--height", "2", "--delay", "0", "--no-clear", "--seed", "4"])
        self.assertTrue(sys.stdout.getvalue().endswith("@&&\n&&&\n\n"))

    def test_negative_delay_rejected(self):
        with self.assertRaises(SystemExit) as ctx:
            main(["walk", "--width", "2", "--height", "1", "--delay", "-1"])
        self.assertEqual(ctx.exception.code, 2)

        with self.assertRaises(SystemExit) as ctx:
            main(["replay", "test_out/missing.events", "--delay", "-0.5"])
        self.assertEqual(ctx.exception.code, 2)
        self.assertIn("--delay", sys.stderr.getvalue())

    def test_start_outside_grid_rejected(self):
        with self.assertRaises(SystemExit):
            main(["walk", "--width", "2", "--height", "2", "--start-x", "2"])

    def test_oversized_event_log_rejected(self):
        path = "test_out/wide.events"
        with self.assertRaises(SystemExit) as ctx:
            main(["walk", "--width", "70000", "--height", "1", "--start-x", "65535",
                  "--record-events", path])
        self.assertEqual(ctx.exception.code, 2)
        self.assertFalse(os.path.exists(path))

    def test_record_and_replay(self):
        path = "test_out/small.events"
        main(["walk", "--width", "4", "--height", "3", "--delay", "0", "--no-clear",
              "--seed", "6", "--record-events", path])
        walked = sys.stdout.getvalue().split("\n\n")[-2]

        sys.stdout = io.StringIO()
        main(["replay", path, "--delay", "0", "--no-clear"])
        replayed = sys.stdout.getvalue().split("\n\n")[-2]

        self.assertEqual(replayed, walked)

if __name__ == '__main__':
    unittest.main()
