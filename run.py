#!/usr/bin/env python3
"""
Terminal Game of Life: seed a bounded board, then print and step it every
`--delay` seconds until no cell is alive (or `--max_generations` is reached).
"""
import argparse
import time
from collections import deque

import numpy as np

from gol.board import Board
from gol.metrics import classify_history
from gol.patterns import PATTERNS, get_pattern, offset, random_coordinates
from gol.simulator import generations

# --- CONFIGURATION ---
DEFAULT_WIDTH = 100
DEFAULT_HEIGHT = 90
DEFAULT_ORIGIN = (45, 65)   # where the named pattern's top-left corner lands
DEFAULT_DELAY = 0.2         # seconds between generations
SEPARATOR = '---------------'
HISTORY_WINDOW = 64         # frames kept for the summary when nothing is saved


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Run Conway's Game of Life in the terminal")
    parser.add_argument('--width', type=int, default=DEFAULT_WIDTH, help='board width (columns)')
    parser.add_argument('--height', type=int, default=DEFAULT_HEIGHT, help='board height (rows)')
    parser.add_argument('--pattern', type=str, default='default', choices=sorted(PATTERNS),
                        help='named seed pattern')
    parser.add_argument('--origin_x', type=int, default=DEFAULT_ORIGIN[0], help='x of the pattern origin')
    parser.add_argument('--origin_y', type=int, default=DEFAULT_ORIGIN[1], help='y of the pattern origin')
    parser.add_argument('--random', action='store_true', help='seed with a random soup instead of a pattern')
    parser.add_argument('--threshold', type=float, default=0.5, help='random fill threshold (higher = sparser)')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for --random')
    parser.add_argument('--delay', type=float, default=DEFAULT_DELAY, help='seconds to sleep between generations')
    parser.add_argument('--separator', type=str, default=SEPARATOR, help='line printed after each generation')
    parser.add_argument('--max_generations', type=int, default=0,
                        help='stop after this many generations; 0 runs until the board is empty')
    parser.add_argument('--save_plot', type=str, default=None, help='PNG path for a grid of the generations')
    parser.add_argument('--save_gif', type=str, default=None, help='GIF path for an animation of the generations')
    args = parser.parse_args(argv)

    if args.width < 0 or args.height < 0:
        parser.error('--width and --height must be non-negative')
    if args.delay < 0:
        parser.error('--delay must be non-negative')
    if args.max_generations < 0:
        parser.error('--max_generations must be non-negative')
    if not 0.0 <= args.threshold <= 1.0:
        parser.error('--threshold must be within [0, 1]')
    return args


def build_board(args):
    if args.random:
        rng = np.random.default_rng(args.seed)
        live = random_coordinates(args.width, args.height, threshold=args.threshold, rng=rng)
    else:
        live = offset(get_pattern(args.pattern), args.origin_x, args.origin_y)
    return Board.new_with(args.width, args.height, live)


def main(argv=None):
    args = parse_args(argv)
    board = build_board(args)
    limit = args.max_generations or None

    # full history only when it is going to be plotted
    if args.save_plot or args.save_gif:
        history = []
    else:
        history = deque(maxlen=HISTORY_WINDOW)
    count = 0
    for b in generations(board, max_generations=limit):
        history.append(b.to_array())
        print(b.formatted())
        print(args.separator)
        count += 1
        if args.delay:
            time.sleep(args.delay)
    history.append(board.to_array())

    print(f"Ran {count} generations: {classify_history(history)}")

    if args.save_plot or args.save_gif:
        from gol import plotting
        if args.save_plot:
            plotting.save_history_grid(history, args.save_plot)
            print(f"Saved plot: {args.save_plot}")
        if args.save_gif:
            plotting.save_animation(history, args.save_gif)
            print(f"Saved animation: {args.save_gif}")
    return list(history)


if __name__ == '__main__':
    main()
