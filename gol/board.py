"""
Bounded, non-wrapping Game of Life board made of Cell objects.
Off-grid coordinates never raise: reads give None and writes are ignored.
"""
import numpy as np

from .cell import Cell, NEIGHBOR_OFFSETS


class Board:
    def __init__(self, width, height):
        """
        Args:
            width (int): number of columns (x)
            height (int): number of rows (y); either may be 0
        """
        self.width = max(0, int(width))
        self.height = max(0, int(height))
        # rows[y][x]
        self.rows = [[Cell.new_dead() for _ in range(self.width)]
                     for _ in range(self.height)]

    @classmethod
    def new_with(cls, width, height, live):
        """Board with every in-bounds (x, y) of `live` alive; others are skipped."""
        board = cls(width, height)
        for x, y in live:
            board.insert(x, y, Cell.new_alive())
        return board

    @classmethod
    def from_array(cls, grid):
        """Build a board from a (height, width) array; nonzero entries are alive."""
        arr = np.asarray(grid)
        if arr.ndim != 2:
            raise ValueError(f"Expected 2D array, got shape {arr.shape}")
        H, W = arr.shape
        board = cls(W, H)
        for y, x in zip(*np.nonzero(arr)):
            board.insert(int(x), int(y), Cell.new_alive())
        return board

    def to_array(self):
        """(height, width) uint8 array, 1 for alive cells."""
        grid = np.zeros((self.height, self.width), dtype=np.uint8)
        for y, row in enumerate(self.rows):
            for x, cell in enumerate(row):
                if cell.is_alive():
                    grid[y, x] = 1
        return grid

    def in_bounds(self, x, y):
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x, y):
        # explicit bounds check: negative indices would wrap on a list
        if not self.in_bounds(x, y):
            return None
        return self.rows[y][x]

    def insert(self, x, y, cell):
        if not self.in_bounds(x, y):
            return
        self.rows[y][x] = cell

    def neighbors(self, x, y):
        """The 8 neighbours of (x, y) in NEIGHBOR_OFFSETS order, None past the edges."""
        return tuple(self.get(x + dx, y + dy) for dx, dy in NEIGHBOR_OFFSETS)

    def step(self):
        """Advance one generation. All new states are read from the current grid."""
        board = Board(self.width, self.height)
        for y, row in enumerate(self.rows):
            for x, cell in enumerate(row):
                board.insert(x, y, Cell.new_with(cell.is_alive(), self.neighbors(x, y)))
        self.rows = board.rows

    def is_empty(self):
        return not any(cell.is_alive() for row in self.rows for cell in row)

    def count_alive(self):
        return sum(1 for row in self.rows for cell in row if cell.is_alive())

    def live_cells(self):
        """(x, y) of live cells, row by row."""
        return [(x, y) for y, row in enumerate(self.rows)
                for x, cell in enumerate(row) if cell.is_alive()]

    def copy(self):
        return Board.new_with(self.width, self.height, self.live_cells())

    def formatted(self):
        return ''.join(''.join(cell.formatted() for cell in row) + '\n'
                       for row in self.rows)

    def __str__(self):
        return self.formatted()

    def __repr__(self):
        return f"Board(width={self.width}, height={self.height}, alive={self.count_alive()})"

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return (self.width, self.height) == (other.width, other.height) \
            and self.live_cells() == other.live_cells()
