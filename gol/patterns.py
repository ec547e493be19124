"""
Seed patterns for Board.new_with(): named shapes as (x, y) offsets, text
parsing and random soups.
"""
import numpy as np

# (x, y) offsets from the top-left corner of each shape
PATTERNS = {
    'blinker': [(1, 0), (1, 1), (1, 2)],
    'block': [(0, 0), (1, 0), (0, 1), (1, 1)],
    'glider': [(1, 0), (2, 1), (0, 2), (1, 2), (2, 2)],
    'beehive': [(1, 0), (2, 0), (0, 1), (3, 1), (1, 2), (2, 2)],
    # nine-cell seed of the original terminal demo
    'default': [(0, 0), (1, 0), (3, 0), (4, 0),
                (0, 1), (4, 1),
                (1, 2), (2, 2), (3, 2)],
}


def get_pattern(name):
    try:
        return list(PATTERNS[name])
    except KeyError:
        raise KeyError(f"Unknown pattern {name!r}; choose from {sorted(PATTERNS)}") from None


def offset(coords, dx, dy):
    """Translate every (x, y) in `coords` by (dx, dy)."""
    return [(x + dx, y + dy) for x, y in coords]


def parse_pattern(text, alive='#'):
    """
    Turn rows of text into live coordinates, e.g. ".#.\\n.#.\\n.#." for a
    vertical blinker. Any character other than `alive` is a dead cell.
    """
    if len(alive) != 1:
        raise ValueError(f"alive marker must be a single character, got {alive!r}")
    return [(x, y)
            for y, line in enumerate(text.splitlines())
            for x, ch in enumerate(line) if ch == alive]


def random_coordinates(width, height, threshold=0.5, rng=None):
    """
    Random soup: each cell is alive where a uniform draw exceeds `threshold`.

    Args:
        width, height (int): board size
        threshold (float): initial random fill threshold in [0, 1]
        rng (np.random.Generator, optional): source of randomness
    """
    if not 0.0 <= threshold <= 1.0:
        raise ValueError(f"threshold must be within [0, 1], got {threshold}")
    rng = rng if rng is not None else np.random.default_rng()
    x0 = rng.random((height, width)) > threshold
    ys, xs = np.nonzero(x0)
    return [(int(x), int(y)) for y, x in zip(ys, xs)]
