from collections import deque
from typing import Dict, Set, Tuple
from maze_game.core.grid import Grid

class MazeAnalyzer:
    @staticmethod
    def reachable_cells(grid: Grid, start: Tuple[int, int]) -> Set[Tuple[int, int]]:
        """Breadth-first flood over non-wall cells starting at `start`."""
        seen = {start}
        queue = deque([start])
        while queue:
            row, col = queue.popleft()
            for nxt in grid.get_open_neighbors(row, col):
                if nxt not in seen:
                    seen.add(nxt)
                    queue.append(nxt)
        return seen

    @staticmethod
    def passage_count(grid: Grid) -> int:
        """
        Number of adjacent non-wall pairs (each counted once).
        A perfect maze has exactly open_cells - 1 of them.
        """
        edges = 0
        w = grid.width
        cells = grid.cells
        for row in range(grid.height):
            for col in range(w):
                if cells[row * w + col] == Grid.WALL:
                    continue
                # Only look right and down so each pair is seen once
                if col + 1 < w and cells[row * w + col + 1] != Grid.WALL:
                    edges += 1
                if row + 1 < grid.height and cells[(row + 1) * w + col] != Grid.WALL:
                    edges += 1
        return edges

    @staticmethod
    def open_cells(grid: Grid) -> int:
        return len(grid.cells) - grid.count(Grid.WALL)

    @staticmethod
    def calculate_stats(grid: Grid) -> Dict[str, float]:
        dead_ends = 0
        corridors = 0 # 2 exits
        intersections = 0 # 3+ exits

        for row in range(grid.height):
            for col in range(grid.width):
                if grid.is_wall(row, col):
                    continue
                exits = sum(1 for _ in grid.get_open_neighbors(row, col))
                if exits <= 1: dead_ends += 1
                elif exits == 2: corridors += 1
                else: intersections += 1

        total = dead_ends + corridors + intersections
        return {
            "open_cells": total,
            "dead_ends": dead_ends,
            "corridors": corridors,
            "intersections": intersections,
            "dead_end_percent": (dead_ends / total) * 100 if total > 0 else 0
        }
