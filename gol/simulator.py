"""
Game of Life simulation helpers: a numpy reference step for bounded grids and
generation histories of a Board.
"""
import numpy as np


def step_grid(grid):
    """Perform one GoL update on a bounded grid (cells past the edge are dead)."""
    g = (np.asarray(grid) != 0).astype(np.uint8)
    H, W = g.shape
    padded = np.pad(g, 1)
    # Count neighbors
    neighbors = sum(padded[1 + i:1 + i + H, 1 + j:1 + j + W]
                    for i in (-1, 0, 1) for j in (-1, 0, 1)
                    if not (i == 0 and j == 0))
    # Apply rules
    birth = (neighbors == 3) & (g == 0)
    survive = ((neighbors == 2) | (neighbors == 3)) & (g == 1)
    return (birth | survive).astype(np.uint8)


def simulate(board, steps=50):
    """
    Step a copy of `board` for up to `steps` generations, stopping once a state
    repeats or the board dies out. Returns the history as uint8 arrays,
    starting with the initial state.
    """
    seen = set()
    history = []
    b = board.copy()
    for _ in range(steps):
        g = b.to_array()
        key = g.tobytes()
        if key in seen:
            break
        seen.add(key)
        history.append(g)
        if b.is_empty():
            break
        b.step()
    return history


def generations(board, max_generations=None):
    """
    Yield `board` at each generation, stepping it in place between yields,
    until it is empty or `max_generations` boards have been yielded.
    """
    count = 0
    while not board.is_empty():
        if max_generations is not None and count >= max_generations:
            return
        yield board
        count += 1
        board.step()
