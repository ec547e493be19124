"""
Single Game of Life cell and the B3/S23 transition rule.
"""

ALIVE_GLYPH = '#'
DEAD_GLYPH = ' '

# (dx, dy) of the 8 neighbours: above, below, before, next, then the diagonals
# above-before, above-next, below-before, below-next. y grows downwards.
NEIGHBOR_OFFSETS = (
    (0, -1), (0, 1), (-1, 0), (1, 0),
    (-1, -1), (1, -1), (-1, 1), (1, 1),
)

SURVIVE_COUNTS = (2, 3)
BIRTH_COUNTS = (3,)


def count_alive(neighbors):
    """Number of present and alive cells among `neighbors` (None counts as dead)."""
    return sum(1 for c in neighbors if c is not None and c.is_alive())


def next_state(alive, neighbors):
    """
    Next state of a cell from its current state and its neighbours.

    Args:
        alive (bool): whether the cell is alive now
        neighbors: the 8 neighbour cells in NEIGHBOR_OFFSETS order; an
            off-grid neighbour is None
    Returns:
        bool: True if the cell is alive in the next generation
    """
    n = count_alive(neighbors)
    if alive:
        return n in SURVIVE_COUNTS
    return n in BIRTH_COUNTS


class Cell:
    __slots__ = ('alive',)

    def __init__(self, alive=False):
        self.alive = bool(alive)

    @classmethod
    def new_alive(cls):
        return cls(True)

    @classmethod
    def new_dead(cls):
        return cls(False)

    @classmethod
    def new_with(cls, alive, neighbors):
        """Fresh cell holding the next-generation state; inputs are left untouched."""
        return cls(next_state(alive, neighbors))

    def is_alive(self):
        return self.alive

    def invert(self):
        self.alive = not self.alive

    def formatted(self):
        return ALIVE_GLYPH if self.alive else DEAD_GLYPH

    def __str__(self):
        return self.formatted()

    def __repr__(self):
        return f"Cell(alive={self.alive})"

    def __eq__(self, other):
        if not isinstance(other, Cell):
            return NotImplemented
        return self.alive == other.alive
