import random
import unittest

from maze.errors import InvalidDimension, MazeError
from maze.generator import gen_dfs_backtracker, generate_maze, check_dimensions
from maze.maze_core import is_perfect, walls_symmetric, borders_closed, reachable_cells


SIZES = [(1, 1), (1, 6), (6, 1), (2, 1), (2, 2), (3, 3), (7, 4), (12, 9), (20, 20)]


class GenerateMazeTests(unittest.TestCase):
    def test_every_size_is_a_perfect_maze(self):
        for width, height in SIZES:
            for seed in range(5):
                with self.subTest(width=width, height=height, seed=seed):
                    maze = generate_maze(width, height, rng=random.Random(seed))
                    self.assertEqual((maze.cols, maze.rows), (width, height))
                    self.assertEqual(len(maze.passages()), width * height - 1)
                    self.assertEqual(len(reachable_cells(maze, (0, 0))), width * height)
                    self.assertTrue(is_perfect(maze))

    def test_walls_symmetric_and_borders_closed(self):
        for seed in range(10):
            maze = generate_maze(9, 6, seed=seed)
            self.assertTrue(walls_symmetric(maze))
            self.assertTrue(borders_closed(maze))

    def test_two_by_one_opens_only_the_inner_wall(self):
        maze = generate_maze(2, 1, rng=random.Random(3))
        left_cell = maze.cell(0, 0)
        right_cell = maze.cell(1, 0)
        self.assertFalse(left_cell.right)
        self.assertFalse(right_cell.left)
        self.assertTrue(left_cell.top and left_cell.bottom and left_cell.left)
        self.assertTrue(right_cell.top and right_cell.bottom and right_cell.right)

    def test_single_cell_keeps_all_walls(self):
        maze = generate_maze(1, 1)
        self.assertEqual(tuple(maze.cell(0, 0)), (True, True, True, True))
        self.assertEqual(maze.passages(), [])

    def test_same_seed_same_maze(self):
        a = generate_maze(15, 11, rng=random.Random(1234))
        b = generate_maze(15, 11, rng=random.Random(1234))
        c = generate_maze(15, 11, seed=1234)
        self.assertEqual(a, b)
        self.assertEqual(a, c)

    def test_different_seeds_differ(self):
        mazes = {generate_maze(10, 10, seed=seed) for seed in range(5)}
        self.assertGreater(len(mazes), 1)

    def test_seed_does_not_touch_global_random(self):
        random.seed(99)
        expected = random.random()
        random.seed(99)
        generate_maze(8, 8, seed=1)
        self.assertEqual(random.random(), expected)


class DimensionTests(unittest.TestCase):
    def test_non_positive_dimensions_rejected(self):
        for width, height in [(0, 5), (5, 0), (-1, 3), (3, -2), (0, 0)]:
            with self.subTest(width=width, height=height):
                with self.assertRaises(InvalidDimension):
                    generate_maze(width, height)

    def test_non_integer_dimensions_rejected(self):
        for bad in [2.5, "3", None, True]:
            with self.subTest(value=bad):
                with self.assertRaises(InvalidDimension):
                    check_dimensions(bad, 3)

    def test_step_generator_fails_before_iteration(self):
        with self.assertRaises(InvalidDimension):
            gen_dfs_backtracker(0, 4)

    def test_invalid_dimension_is_a_value_error(self):
        self.assertTrue(issubclass(InvalidDimension, MazeError))
        self.assertTrue(issubclass(InvalidDimension, ValueError))


class StepGeneratorTests(unittest.TestCase):
    def test_starts_on_random_cell(self):
        twin = random.Random(5)
        expected = (twin.randrange(6), twin.randrange(4))
        first = next(gen_dfs_backtracker(6, 4, rng=random.Random(5)))
        self.assertEqual(first["current"], expected)
        self.assertIsNone(first["carved"])
        self.assertEqual(sum(first["visited"]), 1)

    def test_stream_carves_one_edge_per_new_cell(self):
        states = list(gen_dfs_backtracker(8, 5, seed=11))
        carved = [s["carved"] for s in states if s["carved"] is not None]
        self.assertEqual(len(carved), 8 * 5 - 1)
        self.assertTrue(states[-1]["done"])
        self.assertTrue(all(states[-1]["visited"]))
        self.assertFalse(any(s["done"] for s in states[:-1]))

    def test_carved_edges_are_adjacent(self):
        for state in gen_dfs_backtracker(6, 6, seed=2):
            if state["carved"] is None:
                continue
            (ax, ay), (bx, by) = state["carved"]
            self.assertEqual(abs(ax - bx) + abs(ay - by), 1)

    def test_result_has_no_visited_flags(self):
        maze = generate_maze(3, 3, seed=0)
        self.assertEqual(maze.cell(1, 1)._fields, ('top', 'right', 'bottom', 'left'))
        self.assertEqual(len(maze.walls), 9)


if __name__ == "__main__":
    unittest.main()
