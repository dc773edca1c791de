import argparse
import sys
import os
import logging

# Ensure project root is in path so we can import 'yarn_trail' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

DEFAULT_WIDTH = 20
DEFAULT_HEIGHT = 10
DEFAULT_START = (0, 0)

logger = logging.getLogger("yarn_trail")

def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

def build_parser():
    parser = argparse.ArgumentParser(description="Yarn Trail: step-by-step depth-first walk drawn with box glyphs")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Walk Command
    walk_parser = subparsers.add_parser("walk", help="Walk a fresh grid")
    walk_parser.add_argument("--width", type=int, default=DEFAULT_WIDTH, help="Grid Width")
    walk_parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT, help="Grid Height")
    walk_parser.add_argument("--start-x", type=int, default=DEFAULT_START[0], help="Start column")
    walk_parser.add_argument("--start-y", type=int, default=DEFAULT_START[1], help="Start row")
    walk_parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    walk_parser.add_argument("--plain", action="store_true", help="Mark the trail with a single yarn glyph")
    walk_parser.add_argument("--delay", type=float, default=None, help="Seconds between frames instead of waiting for enter")
    walk_parser.add_argument("--no-clear", action="store_true", help="Do not clear the terminal between frames")
    walk_parser.add_argument("--visual", action="store_true", help="Show the walk in a window")
    walk_parser.add_argument("--record", action="store_true", help="Record the window to video")
    walk_parser.add_argument("--record-events", type=str, help="Save walk events to binary file")

    # Replay Command
    replay_parser = subparsers.add_parser("replay", help="Replay an event log")
    replay_parser.add_argument("event_file", help="Path to event log file")
    replay_parser.add_argument("--delay", type=float, default=None, help="Seconds between frames instead of waiting for enter")
    replay_parser.add_argument("--no-clear", action="store_true", help="Do not clear the terminal between frames")
    replay_parser.add_argument("--visual", action="store_true", help="Show the replay in a window")
    replay_parser.add_argument("--record", action="store_true", help="Record the window to video")

    # No subcommand: walk the built-in grid
    parser.set_defaults(command="walk", width=DEFAULT_WIDTH, height=DEFAULT_HEIGHT,
                        start_x=DEFAULT_START[0], start_y=DEFAULT_START[1], seed=None,
                        plain=False, delay=None, no_clear=False, visual=False,
                        record=False, record_events=None)

    return parser

def play_in_terminal(grid, stepper, delay=None, clear=True):
    """Render, wait, step; the frame after the last change is the final one."""
    from yarn_trail.algo.base import DONE
    from yarn_trail.viz.terminal import TerminalRenderer, Pauser

    renderer = TerminalRenderer(grid, clear=clear)
    pauser = Pauser(delay=delay)

    steps = stepper.run()
    while True:
        renderer.draw()
        pauser.wait()
        if next(steps) == DONE:
            break

def play_in_window(grid, stepper, record=False, prefix="walk"):
    from yarn_trail.viz.renderer import Renderer
    renderer = Renderer(grid, walker=stepper, record=record, close_when_done=record)

    if record:
        from yarn_trail.viz.recorder import default_output_file
        renderer.recorder.output_file = default_output_file(f"{prefix}_{grid.width}x{grid.height}")
        logger.info(f"Recording video to {renderer.recorder.output_file}")

    renderer.init_window()
    renderer.run_loop()

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    if args.delay is not None and args.delay < 0:
        parser.error("--delay must not be negative")

    logger.info(f"Running command: {args.command}")

    if args.command == "walk":
        from yarn_trail.core.events import EventWriter, MAX_DIMENSION

        if args.width < 1 or args.height < 1:
            parser.error("--width and --height must be positive")
        if not (0 <= args.start_x < args.width and 0 <= args.start_y < args.height):
            parser.error(f"start ({args.start_x}, {args.start_y}) is outside the {args.width}x{args.height} grid")
        if args.record_events and max(args.width, args.height) > MAX_DIMENSION:
            parser.error(f"--record-events supports grids up to {MAX_DIMENSION} cells per side")

        from yarn_trail.core.grid import Grid
        from yarn_trail.algo.trail import TrailWalker
        from yarn_trail.algo.glyphs import resolve_step, plain_glyph, InvariantViolation
        from yarn_trail.core.stats import calculate_stats

        evt_writer = None
        if args.record_events:
            evt_writer = EventWriter(args.record_events)
            logger.info(f"Recording events to {args.record_events}...")

        start = (args.start_x, args.start_y)
        logger.info(f"Walking {args.width}x{args.height} grid from {start} (seed={args.seed})...")

        grid = Grid(args.width, args.height)
        walker = TrailWalker(grid, start=start, seed=args.seed,
                             glyphs=plain_glyph if args.plain else resolve_step,
                             event_writer=evt_writer)

        try:
            if args.visual or args.record:
                play_in_window(grid, walker, record=args.record)
            else:
                play_in_terminal(grid, walker, delay=args.delay, clear=not args.no_clear)
        except InvariantViolation as e:
            logger.critical(f"Walk aborted: {e}")
            raise
        finally:
            if evt_writer:
                evt_writer.close()

        logger.info(f"Advances: {walker.advance_count}, Retreats: {walker.retreat_count}, Max trail: {walker.max_depth}")
        logger.info(f"Stats: {calculate_stats(grid)}")

    elif args.command == "replay":
        logger.info(f"Replaying {args.event_file}...")
        from yarn_trail.core.grid import Grid
        from yarn_trail.core.events import EventReader
        from yarn_trail.viz.replay import EventAdapter

        reader = EventReader(args.event_file)
        try:
            w, h, sx, sy = reader.read_header()
            logger.info(f"Log Header: {w}x{h}, start ({sx}, {sy})")

            grid = Grid(w, h)
            adapter = EventAdapter(grid, reader)

            if args.visual or args.record:
                base_name = os.path.basename(args.event_file).replace(".events", "")
                play_in_window(grid, adapter, record=args.record, prefix=f"replay_{base_name}")
            else:
                play_in_terminal(grid, adapter, delay=args.delay, clear=not args.no_clear)
        finally:
            reader.close()

        logger.info(f"Replayed {adapter.step_count} events")

if __name__ == "__main__":
    main()
