#!/usr/bin/env python3
"""
Command line front end.

    lifeanim gif pattern.json -o out.gif
    lifeanim terminal pattern.txt --marker x --generations 100
"""

import sys
import argparse
import logging
from pathlib import Path
from typing import List, Optional

from .animation import AnimationGenerator, write_gif
from .config import AnimationConfig, UPDATES_PER_MINUTE
from .core.errors import LifeError
from .core.grid import Grid
from .loaders import DEFAULT_MARKER, load_from_image_file, load_from_json, load_from_text
from .terminal import run_terminal

logger = logging.getLogger(__name__)

IMAGE_SUFFIXES = {'.png', '.jpg', '.jpeg', '.gif', '.bmp'}


def guess_format(path: Path) -> str:
    """Pick a loader from the file suffix."""
    suffix = path.suffix.lower()
    if suffix == '.json':
        return 'json'
    if suffix in IMAGE_SUFFIXES:
        return 'image'
    return 'text'


def load_grid(path: Path, fmt: Optional[str] = None, marker: str = DEFAULT_MARKER) -> Grid:
    """Load the initial grid from ``path`` using the named (or guessed) format."""
    fmt = fmt or guess_format(path)
    logger.info(f"Loading {path} as {fmt}")

    if fmt == 'json':
        return load_from_json(path)
    if fmt == 'image':
        return load_from_image_file(path)
    return load_from_text(path.read_text(encoding='utf-8'), key=marker)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='lifeanim', description="Conway's Game of Life animations.")
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging.')

    subparsers = parser.add_subparsers(dest='command', required=True)

    def add_source(sub):
        sub.add_argument('source', type=Path, help='Initial state file (JSON, text or image).')
        sub.add_argument('-f', '--format', choices=['json', 'text', 'image'],
                         help='Input format (guessed from suffix by default).')
        sub.add_argument('-m', '--marker', default=DEFAULT_MARKER,
                         help='Alive-cell marker for text input.')

    gif = subparsers.add_parser('gif', help='Render an animated GIF until the pattern cycles.')
    add_source(gif)
    gif.add_argument('-o', '--output', type=Path, required=True, help='Output GIF path.')
    gif.add_argument('-s', '--scale', type=int, help='Pixels per cell edge.')
    gif.add_argument('-n', '--max-iterations', type=int, help='Maximum number of frames.')

    terminal = subparsers.add_parser('terminal', help='Print generations to the terminal.')
    add_source(terminal)
    terminal.add_argument('-g', '--generations', type=int, help='Stop after N generations.')
    terminal.add_argument('-u', '--updates-per-minute', type=int, default=UPDATES_PER_MINUTE,
                          help='Display pace.')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(asctime)s - %(levelname)s - %(message)s')

    try:
        grid = load_grid(args.source, args.format, args.marker)

        if args.command == 'gif':
            config = AnimationConfig.from_env()
            animation = AnimationGenerator(config).generate(
                grid, scale=args.scale, max_iterations=args.max_iterations)
            write_gif(animation, args.output)
            logger.info(f"Wrote {len(animation)} frames to {args.output} ({animation.reason.value})")
        else:
            run_terminal(grid, updates_per_minute=args.updates_per_minute,
                         generations=args.generations)
    except (LifeError, ValueError, OSError) as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1
    except KeyboardInterrupt:
        return 130

    return 0


if __name__ == "__main__":
    sys.exit(main())
