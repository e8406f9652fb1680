import logging
import random
from typing import Optional, Tuple
from maze_game.core.grid import Grid
from maze_game.algo.dfs import RecursiveBacktracker

logger = logging.getLogger(__name__)

class MazeBuilder:
    """
    Produces a ready-to-play square maze: all-wall allocation, carving from
    (1, 1), then Start at (1, 1) and End at the opposite interior corner.
    """

    # Accepted user requests; validated by the caller before build()
    MIN_SIZE = 10
    MAX_SIZE = 50

    START = (1, 1)

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self.rng = random.Random(seed)

    @staticmethod
    def effective_size(size: int) -> int:
        # Carving needs odd dimensions for the wall/passage parity
        return size if size % 2 == 1 else size + 1

    @staticmethod
    def end_for(grid: Grid) -> Tuple[int, int]:
        return (grid.height - 2, grid.width - 2)

    def build(self, size: int) -> Grid:
        n = self.effective_size(size)
        logger.debug(f"Building {n}x{n} maze (requested {size}, seed={self.seed})")

        grid = Grid(n, n)
        generator = RecursiveBacktracker(grid, origin=self.START, rng=self.rng)
        generator.run_all()

        grid.set(*self.START, Grid.START)
        grid.set(*self.end_for(grid), Grid.END)

        logger.debug(f"Carved {generator.step_count} passages")
        return grid
