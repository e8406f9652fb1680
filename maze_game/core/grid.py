from array import array
from typing import Iterator, List, Optional, Tuple

class Grid:
    # Cell kinds (1 byte per cell)
    WALL  = 0
    OPEN  = 1
    START = 2
    END   = 3

    KINDS = (WALL, OPEN, START, END)

    # Direction Helpers: (d_row, d_col)
    UP    = (-1, 0)
    DOWN  = (1, 0)
    LEFT  = (0, -1)
    RIGHT = (0, 1)
    DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

    __slots__ = ('width', 'height', 'cells')

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        # Single contiguous buffer, row-major, every cell starts as WALL
        self.cells = array('B', [self.WALL]) * (width * height)

    def get_index(self, row: int, col: int) -> int:
        if 0 <= row < self.height and 0 <= col < self.width:
            return row * self.width + col
        raise IndexError(f"Coordinate ({row}, {col}) out of bounds")

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def get(self, row: int, col: int) -> int:
        return self.cells[self.get_index(row, col)]

    def set(self, row: int, col: int, kind: int):
        self.cells[self.get_index(row, col)] = kind

    def is_wall(self, row: int, col: int) -> bool:
        return self.cells[row * self.width + col] == self.WALL

    def get_neighbors(self, row: int, col: int) -> Iterator[Tuple[int, int]]:
        """
        Yields (nrow, ncol) for all cardinal neighbors inside the grid.
        Does NOT check walls.
        """
        for d_row, d_col in self.DIRECTIONS:
            nr, nc = row + d_row, col + d_col
            if 0 <= nr < self.height and 0 <= nc < self.width:
                yield (nr, nc)

    def get_open_neighbors(self, row: int, col: int) -> Iterator[Tuple[int, int]]:
        """
        Yields (nrow, ncol) for cardinal neighbors that are not WALL.
        """
        for nr, nc in self.get_neighbors(row, col):
            if self.cells[nr * self.width + nc] != self.WALL:
                yield (nr, nc)

    def count(self, kind: int) -> int:
        return self.cells.count(kind)

    def find(self, kind: int) -> Optional[Tuple[int, int]]:
        try:
            idx = self.cells.index(kind)
        except ValueError:
            return None
        return divmod(idx, self.width)

    def rows(self) -> Iterator[List[int]]:
        for row in range(self.height):
            start = row * self.width
            yield self.cells[start:start + self.width].tolist()
