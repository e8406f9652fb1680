from typing import Iterator, List, Optional, Tuple
import random
from maze_game.core.grid import Grid
from maze_game.algo.base import Generator

class RecursiveBacktracker(Generator):
    """
    Randomized depth-first carver over the odd-coordinate lattice.

    Cells two steps apart are joined by opening the single cell between them,
    so walls stay one cell thick. The recursion is unrolled onto an explicit
    stack: each frame holds its own shuffled offsets and resumes at the next
    untried one after a child is exhausted, which reproduces the visiting order
    of the recursive version exactly.
    """

    OFFSETS = ((-2, 0), (2, 0), (0, -2), (0, 2))

    def __init__(self, grid: Grid, seed: Optional[int] = None, origin: Tuple[int, int] = (1, 1),
                 rng: Optional[random.Random] = None):
        super().__init__(grid, seed=seed, rng=rng)
        self.origin = origin

    def _enter(self, row: int, col: int) -> list:
        self.grid.cells[row * self.grid.width + col] = Grid.OPEN
        offsets = list(self.OFFSETS)
        self.rng.shuffle(offsets)
        return [row, col, offsets, 0]

    def run(self) -> Iterator[str]:
        grid = self.grid
        width = grid.width
        max_row = grid.height - 2
        max_col = grid.width - 2

        # Stack of [row, col, shuffled_offsets, next_offset_index]
        stack: List[list] = [self._enter(*self.origin)]

        while stack:
            frame = stack[-1]
            row, col, offsets, i = frame

            if i == len(offsets):
                # Backtrack
                stack.pop()
                continue

            frame[3] = i + 1
            d_row, d_col = offsets[i]
            nr, nc = row + d_row, col + d_col

            # Interior only, and only into cells nobody has entered yet
            if not (1 <= nr <= max_row and 1 <= nc <= max_col):
                continue
            if grid.cells[nr * width + nc] != Grid.WALL:
                continue

            # Carve the connecting cell
            grid.cells[(row + d_row // 2) * width + (col + d_col // 2)] = Grid.OPEN
            stack.append(self._enter(nr, nc))
            self.step_count += 1

            # Yield every N steps to keep callers responsive without spamming
            if self.step_count % 100 == 0:
                yield f"Carving... Stack: {len(stack)}"

        yield "Done"
