"""Command-line terminal host for the life-game session."""

import argparse
import logging
import random
import sys
import time
from typing import Dict, List, Optional, TextIO, Tuple

from ..core.session import Session, SessionConfig
from ..core.snapshot import BoardSnapshot
from .keymap import build_keymap, command_for_key

ANSI_CLEAR = "\x1b[2J\x1b[H"
ANSI_BLUE_ON_BLACK = "\x1b[34;40m"
ANSI_RESET = "\x1b[0m"

# Printable code page 437 glyphs, the character set of classic text terminals
CP437_GLYPHS = [
    ch for ch in (bytes([i]).decode("cp437") for i in range(256)) if ch.isprintable() and not ch.isspace()
]


class CLILifeGame:
    """Run a life-game session in the terminal with a fixed frame time."""

    def __init__(
        self,
        config: SessionConfig,
        glyphs: str = "plain",
        out: Optional[TextIO] = None,
        glyph_seed: Optional[int] = None,
    ) -> None:
        """Initialize the terminal host.

        Args:
            config: Session configuration
            glyphs: "plain" draws '*' and '.', "random" draws a random coloured glyph per live cell
            out: Stream to draw on (defaults to stdout)
            glyph_seed: Optional seed for the random glyph picker
        """
        if glyphs not in ("plain", "random"):
            raise ValueError(f"Unknown glyph mode '{glyphs}'")

        self.session = Session(config)
        self.glyphs = glyphs
        self.out = out if out is not None else sys.stdout
        self.keymap = build_keymap(config.randomize_probability)
        self._glyph_rng = random.Random(glyph_seed)

    def render(self, snapshot: BoardSnapshot) -> str:
        """Format a snapshot as text.

        Args:
            snapshot: Generation to draw

        Returns:
            One line per board row
        """
        if self.glyphs == "plain":
            return str(snapshot)

        lines = []
        for row in snapshot.rows():
            line = []
            for alive in row:
                if alive:
                    line.append(f"{ANSI_BLUE_ON_BLACK}{self._glyph_rng.choice(CP437_GLYPHS)}{ANSI_RESET}")
                else:
                    line.append(" ")
            lines.append("".join(line))
        return "\n".join(lines)

    def draw(self, snapshot: BoardSnapshot) -> None:
        """Redraw the whole terminal with a snapshot and a status line."""
        state = "running" if snapshot.running else "paused"
        self.out.write(ANSI_CLEAR)
        self.out.write(self.render(snapshot))
        self.out.write(f"\ngeneration {snapshot.generation}  population {snapshot.population}  [{state}]\n")
        self.out.flush()

    def run(
        self,
        frames: int,
        frame_time: float,
        headless: bool = False,
        script: Optional[Dict[int, List[str]]] = None,
    ) -> Dict:
        """Drive the session for a number of frames.

        Args:
            frames: Number of host frames to simulate
            frame_time: Elapsed time fed to the session each frame
            headless: Skip drawing and don't sleep between frames
            script: Optional mapping of frame number to keys pressed on that frame

        Returns:
            Session statistics plus duration and draw counts
        """
        script = script or {}
        draws = 0
        start_time = time.time()

        for frame in range(frames):
            for key in script.get(frame, []):
                command = command_for_key(key, self.keymap)
                if command is not None:
                    self.session.command(command)

            self.session.update(frame_time)
            snapshot = self.session.draw_due(frame_time)
            if snapshot is not None:
                draws += 1
                if not headless:
                    self.draw(snapshot)

            if not headless:
                time.sleep(frame_time)

        stats = self.session.statistics()
        stats["frames"] = frames
        stats["draws"] = draws
        stats["duration_seconds"] = time.time() - start_time
        return stats


def parse_script(script: str) -> Dict[int, List[str]]:
    """Parse scripted key presses.

    Args:
        script: Comma separated "frame:key" pairs, e.g. "0:space,3:s"

    Returns:
        Mapping of frame number to the keys pressed on that frame

    Raises:
        ValueError: If an entry is malformed
    """
    presses: Dict[int, List[str]] = {}
    if not script.strip():
        return presses

    for entry in script.split(","):
        frame_str, sep, key = entry.strip().partition(":")
        if not sep or not key:
            raise ValueError(f"Invalid key press '{entry}'. Expected 'frame:key'")
        try:
            frame = int(frame_str)
        except ValueError:
            raise ValueError(f"Invalid frame number in key press: '{entry}'")
        if frame < 0:
            raise ValueError(f"Frame number must be non-negative: '{entry}'")
        presses.setdefault(frame, []).append(key)
    return presses


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Run a toroidal Game of Life in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Animate the default 80x40 board for 20 seconds
  lifegame-cli --frames 1200

  # Random coloured glyphs, faster steps
  lifegame-cli --glyphs random --period 0.1

  # Headless run: pause on frame 10, single-step on frame 20, print the result
  lifegame-cli --headless --frames 100 --keys "10:space,20:s" --show-grid

Keys (for --keys):
  space  toggle run/pause
  s      step once (paused only)
  r      randomize
  c      clear
        """,
    )

    parser.add_argument("-W", "--width", type=int, default=80, help="Grid width (default: 80)")
    parser.add_argument("-H", "--height", type=int, default=40, help="Grid height (default: 40)")
    parser.add_argument(
        "-p",
        "--population",
        type=float,
        default=0.25,
        help="Initial random population rate 0.0-1.0 (default: 0.25)",
    )
    parser.add_argument(
        "--randomize-population",
        type=float,
        default=0.25,
        help="Population rate used by the randomize key (default: 0.25)",
    )
    parser.add_argument("--period", type=float, default=0.25, help="Seconds between generations (default: 0.25)")
    parser.add_argument(
        "--draw-period",
        type=float,
        default=None,
        help="Seconds between redraws (default: same as --period)",
    )
    parser.add_argument("--seed", type=int, help="Random seed for reproducible runs")

    parser.add_argument("--frames", type=int, default=600, help="Number of frames to run (default: 600)")
    parser.add_argument(
        "--frame-time",
        type=float,
        default=1 / 60,
        help="Seconds per frame (default: 1/60)",
    )
    parser.add_argument("--headless", action="store_true", help="Don't draw or sleep; just simulate")
    parser.add_argument("--keys", default="", help="Scripted key presses as 'frame:key' pairs")
    parser.add_argument(
        "--glyphs",
        choices=["plain", "random"],
        default="plain",
        help="How live cells are drawn (default: plain)",
    )
    parser.add_argument("--show-grid", action="store_true", help="Print the final grid")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output and debug logging")

    return parser


def config_from_args(args: argparse.Namespace) -> SessionConfig:
    draw_period = args.draw_period if args.draw_period is not None else args.period
    return SessionConfig(
        width=args.width,
        height=args.height,
        initial_probability=args.population,
        step_period=args.period,
        draw_period=draw_period,
        randomize_probability=args.randomize_population,
        seed=args.seed,
    )


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid, False otherwise
    """
    errors = config_from_args(args).validate()

    if args.frames < 0:
        errors.append("Frames must be non-negative")
    if args.frame_time < 0:
        errors.append("Frame time must be non-negative")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def print_results(stats: Dict, grid: Optional[Tuple[str, int, int]] = None, verbose: bool = False) -> None:
    """Print session results.

    Args:
        stats: Statistics from CLILifeGame.run
        grid: Optional (text, width, height) of the final grid
        verbose: Whether to show detailed statistics
    """
    print(f"\nRan {stats['frames']} frames, reached generation {stats['generation']}")
    print(f"Final population: {stats['population']} ({stats['population_density']:.2%}), {stats['state']}")

    if verbose:
        print("\nDetailed Statistics:")
        print(f"  Grid size: {stats['grid_size'][0]}x{stats['grid_size'][1]}")
        print(f"  Draw passes: {stats['draws']}")
        print(f"  Duration: {stats['duration_seconds']:.3f} seconds")

    if grid is not None:
        text, width, height = grid
        if width > 100 or height > 100:
            print(f"\nGrid too large to display ({width}x{height})")
        else:
            print("\nFinal grid:")
            print(text)


def main() -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if not validate_args(args):
        return 1

    try:
        script = parse_script(args.keys)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    try:
        cli = CLILifeGame(config_from_args(args), glyphs=args.glyphs, glyph_seed=args.seed)
        stats = cli.run(args.frames, args.frame_time, headless=args.headless, script=script)

        grid = None
        if args.show_grid:
            board = cli.session.board
            grid = (str(board), board.width, board.height)
        print_results(stats, grid, args.verbose)
        return 0

    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1
    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
