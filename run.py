"""mazegen demo CLI entry point.

Generates one maze and prints it to the terminal together with any input
corrections and the seed that was used (pass it back with --seed to replay).
Settings come from CLI flags, then MAZEGEN_* environment variables (optionally
loaded from a .env file), then the library defaults.

Run `python run.py --help` for details.
"""

import argparse
import os
import sys
from textwrap import dedent

from colorama import Fore, Style
from colorama import init as _color_init
from dotenv import load_dotenv

from mazegen import Generator, MazeConfig, __version__
from mazegen.logging_utils import log
from mazegen.render import CONSTRAINT_GLYPH, DOOR_GLYPH, WALL_GLYPH, render_rows
from mazegen.tiles import MAX_ROOMS, NOTHING_ID, is_door_id, is_room_id

DEFAULT_WIDTH = 43
DEFAULT_HEIGHT = 27

# env var -> (MazeConfig field, parser)
ENV_CONFIG = {
    "MAZEGEN_DEADEND_CHANCE": ("deadend_chance", float),
    "MAZEGEN_RECONNECT_DEADENDS_CHANCE": ("reconnect_deadends_chance", float),
    "MAZEGEN_WIGGLE_CHANCE": ("wiggle_chance", float),
    "MAZEGEN_EXTRA_CONNECTION_CHANCE": ("extra_connection_chance", float),
    "MAZEGEN_ROOM_BASE_NUMBER": ("room_base_number", int),
    "MAZEGEN_ROOM_SIZE_MIN": ("room_size_min", int),
    "MAZEGEN_ROOM_SIZE_MAX": ("room_size_max", int),
    "MAZEGEN_CONSTRAIN_HALL_ONLY": ("constrain_hall_only", lambda v: v.lower() not in {"0", "false", "no", ""}),
}


def _constraint(text: str):
    try:
        x, y = (int(part) for part in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"constraint must look like X,Y (got {text!r})")
    return (x, y)


def parse_args(argv: list[str]) -> argparse.Namespace:
    epilog = dedent(
        """
        Environment variables (used when the matching flag is absent):
          MAZEGEN_WIDTH, MAZEGEN_HEIGHT, MAZEGEN_SEED
          MAZEGEN_DEADEND_CHANCE, MAZEGEN_RECONNECT_DEADENDS_CHANCE,
          MAZEGEN_WIGGLE_CHANCE, MAZEGEN_EXTRA_CONNECTION_CHANCE,
          MAZEGEN_ROOM_BASE_NUMBER, MAZEGEN_ROOM_SIZE_MIN, MAZEGEN_ROOM_SIZE_MAX,
          MAZEGEN_CONSTRAIN_HALL_ONLY
          MAZEGEN_LOG_LEVEL, MAZEGEN_LOG_JSON

        Examples:
          # Default 43x27 maze with the corners pinned open
          python run.py --constraint 1,1 --constraint 41,25

          # Replay a previous run
          python run.py --seed 1234567

          # Sparse, straight corridors with no extra loops
          python run.py --wiggle-chance 0 --extra-connection-chance 0 --deadend-chance 0
        """
    )
    parser = argparse.ArgumentParser(
        prog="mazegen",
        description="Generate a dungeon maze of rooms and winding halls and print it.",
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument("--env-file", dest="env_file", help="Path to a .env file to load before processing flags")
    parser.add_argument("--version", action="version", version=f"mazegen {__version__}")
    parser.add_argument("--width", type=int, default=None, help=f"Maze width (default: env MAZEGEN_WIDTH or {DEFAULT_WIDTH})")
    parser.add_argument("--height", type=int, default=None, help=f"Maze height (default: env MAZEGEN_HEIGHT or {DEFAULT_HEIGHT})")
    parser.add_argument("--seed", type=int, default=None, help="Pin the RNG seed (default: env MAZEGEN_SEED or random)")
    parser.add_argument(
        "--constraint",
        dest="constraints",
        action="append",
        type=_constraint,
        default=[],
        metavar="X,Y",
        help="Cell that must stay open; repeatable",
    )
    parser.add_argument("--room-base-number", type=int, default=None, help="Room placement attempts")
    parser.add_argument("--room-size-min", type=int, default=None, help="Minimum room side (odd)")
    parser.add_argument("--room-size-max", type=int, default=None, help="Maximum room side (odd)")
    parser.add_argument("--deadend-chance", type=float, default=None, help="Probability to keep a dead end")
    parser.add_argument("--reconnect-deadends-chance", type=float, default=None, help="Probability to reconnect a dead end")
    parser.add_argument("--wiggle-chance", type=float, default=None, help="Probability for a hall to change direction")
    parser.add_argument("--extra-connection-chance", type=float, default=None, help="Probability to keep a redundant door")
    parser.add_argument(
        "--allow-room-constraints",
        action="store_true",
        help="Let rooms cover constraint cells (clears constrain_hall_only)",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    return parser.parse_args(argv)


def config_from_env(environ=None) -> MazeConfig:
    environ = os.environ if environ is None else environ
    cfg = MazeConfig()
    for env_key, (attr, parse) in ENV_CONFIG.items():
        if env_key in environ:
            setattr(cfg, attr, parse(environ[env_key]))
    return cfg


def build_config(args: argparse.Namespace, environ=None) -> MazeConfig:
    cfg = config_from_env(environ)
    for attr in (
        "room_base_number",
        "room_size_min",
        "room_size_max",
        "deadend_chance",
        "reconnect_deadends_chance",
        "wiggle_chance",
        "extra_connection_chance",
    ):
        value = getattr(args, attr)
        if value is not None:
            setattr(cfg, attr, value)
    if args.allow_room_constraints:
        cfg.constrain_hall_only = False
    return cfg


def colorize(grid, backend, constraints) -> list[str]:
    marked = {tuple(c) for c in constraints}
    rows = []
    for y in range(backend.height(grid)):
        line = []
        for x in range(backend.width(grid)):
            region = backend.get_region(grid, x, y)
            if region == NOTHING_ID:
                line.append(f"{Style.DIM}{WALL_GLYPH}{Style.RESET_ALL}")
            elif (x, y) in marked:
                line.append(f"{Fore.RED}{Style.BRIGHT}{CONSTRAINT_GLYPH}{Style.RESET_ALL}")
            elif is_door_id(region):
                line.append(f"{Fore.YELLOW}{DOOR_GLYPH}{Style.RESET_ALL}")
            elif is_room_id(region):
                line.append(f"{Fore.CYAN}{region % MAX_ROOMS % 100:2d}{Style.RESET_ALL}")
            else:
                line.append(f"{Fore.GREEN}{region % 100:2d}{Style.RESET_ALL}")
        rows.append("".join(line))
    return rows


def main(argv: list[str]) -> int:
    args = parse_args(argv)
    if args.env_file:
        load_dotenv(args.env_file)
    else:
        # Load default .env if present (no error if missing)
        load_dotenv()

    width = args.width if args.width is not None else int(os.getenv("MAZEGEN_WIDTH", DEFAULT_WIDTH))
    height = args.height if args.height is not None else int(os.getenv("MAZEGEN_HEIGHT", DEFAULT_HEIGHT))
    seed = args.seed
    if seed is None and os.getenv("MAZEGEN_SEED"):
        seed = int(os.environ["MAZEGEN_SEED"])
    cfg = build_config(args)

    gen = Generator()
    if seed is not None:
        gen.set_seed(seed)
    grid = gen.generate(width, height, cfg, args.constraints)

    use_color = not args.no_color and sys.stdout.isatty()
    if use_color:
        _color_init()
    for message in gen.warnings:
        print(f"{Fore.YELLOW}{message}{Style.RESET_ALL}" if use_color else message)
    rows = colorize(grid, gen.backend, gen.constraints) if use_color else render_rows(grid, gen.backend, gen.constraints)
    print("\n".join(rows))
    print(f"Generated maze with seed {gen.seed}")
    log.info(
        event="maze_generated",
        seed=gen.seed,
        width=gen.width,
        height=gen.height,
        rooms=len(gen.rooms),
        doors=sum(1 for d in gen.doors if not d.is_hidden),
        warnings=len(gen.warnings),
    )
    return 0


def cli() -> int:
    return main(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(cli())
