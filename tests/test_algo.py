import random
import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_game.core.grid import Grid
from maze_game.core.complexity import MazeAnalyzer
from maze_game.algo.dfs import RecursiveBacktracker
from maze_game.algo.builder import MazeBuilder

def recursive_carve(grid, rng, row, col):
    # Straightforward recursive formulation, used as the reference order
    grid.set(row, col, Grid.OPEN)
    offsets = list(RecursiveBacktracker.OFFSETS)
    rng.shuffle(offsets)
    for d_row, d_col in offsets:
        nr, nc = row + d_row, col + d_col
        if 1 <= nr <= grid.height - 2 and 1 <= nc <= grid.width - 2 and grid.is_wall(nr, nc):
            grid.set(row + d_row // 2, col + d_col // 2, Grid.OPEN)
            recursive_carve(grid, rng, nr, nc)

class TestGenerators(unittest.TestCase):
    def test_dfs_coverage(self):
        n = 21
        grid = Grid(n, n)
        RecursiveBacktracker(grid, seed=42).run_all()

        # Every odd/odd lattice cell gets carved
        for row in range(1, n - 1, 2):
            for col in range(1, n - 1, 2):
                self.assertFalse(grid.is_wall(row, col), f"({row}, {col}) was never visited")

        lattice = ((n - 1) // 2) ** 2
        self.assertEqual(MazeAnalyzer.open_cells(grid), 2 * lattice - 1)

    def test_even_coordinates_stay_walls(self):
        grid = Grid(15, 15)
        RecursiveBacktracker(grid, seed=3).run_all()
        for row in range(0, 15, 2):
            for col in range(0, 15, 2):
                self.assertTrue(grid.is_wall(row, col))

    def test_step_count(self):
        grid = Grid(11, 11)
        algo = RecursiveBacktracker(grid, seed=1)
        statuses = list(algo.run())
        self.assertEqual(statuses[-1], "Done")
        # One carved passage per lattice cell except the origin
        self.assertEqual(algo.step_count, 25 - 1)

    def test_determinism(self):
        grid1 = Grid(21, 21)
        RecursiveBacktracker(grid1, seed=12345).run_all()

        grid2 = Grid(21, 21)
        rec = RecursiveBacktracker(grid2, seed=12345)
        for _ in rec.run(): pass

        self.assertEqual(grid1.cells.tobytes(), grid2.cells.tobytes())

    def test_injected_rng_takes_precedence(self):
        grid1 = Grid(21, 21)
        algo = RecursiveBacktracker(grid1, seed=1, rng=random.Random(2))
        algo.run_all()
        self.assertIsNone(algo.seed)

        grid2 = Grid(21, 21)
        RecursiveBacktracker(grid2, seed=2).run_all()
        self.assertEqual(grid1.cells.tobytes(), grid2.cells.tobytes())

    def test_matches_recursive_order(self):
        for seed in range(10):
            iterative = Grid(21, 21)
            RecursiveBacktracker(iterative, seed=seed).run_all()

            reference = Grid(21, 21)
            recursive_carve(reference, random.Random(seed), 1, 1)

            self.assertEqual(iterative.cells.tobytes(), reference.cells.tobytes(), f"seed {seed}")

    def test_large_grid_no_recursion_limit(self):
        # Far deeper than the default recursion limit would allow
        grid = Grid(301, 301)
        RecursiveBacktracker(grid, seed=7).run_all()
        self.assertEqual(MazeAnalyzer.open_cells(grid), 2 * 150 * 150 - 1)

class TestMazeBuilder(unittest.TestCase):
    def test_effective_size(self):
        self.assertEqual(MazeBuilder.effective_size(10), 11)
        self.assertEqual(MazeBuilder.effective_size(11), 11)
        self.assertEqual(MazeBuilder.effective_size(50), 51)
        self.assertEqual(MazeBuilder.effective_size(49), 49)

    def test_size_ten_scenario(self):
        grid = MazeBuilder(seed=5).build(10)
        self.assertEqual((grid.height, grid.width), (11, 11))
        self.assertEqual(grid.get(1, 1), Grid.START)
        self.assertEqual(grid.get(9, 9), Grid.END)

    def test_single_start_and_end(self):
        grid = MazeBuilder(seed=8).build(25)
        self.assertEqual(grid.count(Grid.START), 1)
        self.assertEqual(grid.count(Grid.END), 1)
        self.assertEqual(grid.find(Grid.START), (1, 1))
        self.assertEqual(grid.find(Grid.END), (23, 23))

    def test_properties_every_size(self):
        builder = MazeBuilder()
        for size in range(MazeBuilder.MIN_SIZE, MazeBuilder.MAX_SIZE + 1):
            for _ in range(3):
                grid = builder.build(size)
                n = MazeBuilder.effective_size(size)
                self.assertEqual((grid.width, grid.height), (n, n))
                self.assert_perfect_maze(grid)

    def test_properties_many_shuffles(self):
        builder = MazeBuilder()
        for _ in range(200):
            self.assert_perfect_maze(builder.build(11))

    def test_same_seed_same_maze(self):
        a = MazeBuilder(seed=99).build(30)
        b = MazeBuilder(seed=99).build(30)
        self.assertEqual(a.cells.tobytes(), b.cells.tobytes())

    def test_successive_builds_differ(self):
        builder = MazeBuilder()
        layouts = {builder.build(50).cells.tobytes() for _ in range(5)}
        self.assertGreater(len(layouts), 1)

    def assert_perfect_maze(self, grid):
        n = grid.height

        # Boundary ring is solid
        for i in range(n):
            self.assertTrue(grid.is_wall(0, i))
            self.assertTrue(grid.is_wall(n - 1, i))
            self.assertTrue(grid.is_wall(i, 0))
            self.assertTrue(grid.is_wall(i, n - 1))

        # Connectivity: every non-wall cell reachable from Start
        open_count = MazeAnalyzer.open_cells(grid)
        reached = MazeAnalyzer.reachable_cells(grid, (1, 1))
        self.assertEqual(len(reached), open_count)
        self.assertIn((n - 2, n - 2), reached)
        for row, col in reached:
            self.assertFalse(grid.is_wall(row, col))

        # Spanning tree: exactly open - 1 passages
        self.assertEqual(MazeAnalyzer.passage_count(grid), open_count - 1)

if __name__ == '__main__':
    unittest.main()
