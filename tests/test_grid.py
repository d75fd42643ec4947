import unittest

from puzzlegen.errors import PreconditionError
from puzzlegen.grid import Direction, GridModel, Position


class DirectionTests(unittest.TestCase):
    def test_opposites_round_trip(self) -> None:
        for direction in Direction:
            self.assertIs(direction.opposite().opposite(), direction)
            self.assertEqual(direction.dx + direction.opposite().dx, 0)
            self.assertEqual(direction.dy + direction.opposite().dy, 0)

    def test_parse_accepts_names_and_members(self) -> None:
        self.assertIs(Direction.parse("up"), Direction.UP)
        self.assertIs(Direction.parse("LEFT"), Direction.LEFT)
        self.assertIs(Direction.parse(Direction.DOWN), Direction.DOWN)
        with self.assertRaises(PreconditionError):
            Direction.parse("diagonal")

    def test_wall_bits_are_distinct(self) -> None:
        bits = {direction.bit for direction in Direction}
        self.assertEqual(len(bits), 4)
        self.assertEqual(sum(bits), 0b1111)


class GridModelTests(unittest.TestCase):
    def test_rejects_empty_grid(self) -> None:
        with self.assertRaises(PreconditionError):
            GridModel(0)
        with self.assertRaises(ValueError):
            GridModel(-3)

    def test_in_bounds(self) -> None:
        grid = GridModel(4)
        self.assertTrue(grid.in_bounds((0, 0)))
        self.assertTrue(grid.in_bounds((3, 3)))
        self.assertFalse(grid.in_bounds((4, 0)))
        self.assertFalse(grid.in_bounds((0, -1)))

    def test_corner_has_two_neighbors(self) -> None:
        grid = GridModel(4)
        neighbors = dict(grid.neighbors((0, 0)))
        self.assertEqual(neighbors, {Direction.RIGHT: Position(1, 0), Direction.DOWN: Position(0, 1)})

    def test_interior_has_four_neighbors(self) -> None:
        grid = GridModel(3)
        neighbors = grid.neighbors((1, 1))
        self.assertEqual(len(neighbors), 4)
        for direction, pos in neighbors:
            self.assertEqual(Position(1, 1).step(direction), pos)

    def test_single_cell_grid_has_no_neighbors(self) -> None:
        self.assertEqual(GridModel(1).neighbors((0, 0)), [])

    def test_row_major_indexing(self) -> None:
        grid = GridModel(3)
        self.assertEqual(grid.index_of((2, 1)), 5)
        self.assertEqual(grid.position_of(5), Position(2, 1))
        self.assertEqual([grid.index_of(pos) for pos in grid.positions()], list(range(9)))
        with self.assertRaises(PreconditionError):
            grid.position_of(9)

    def test_adjacency_excludes_diagonals(self) -> None:
        grid = GridModel(3)
        self.assertTrue(grid.is_adjacent((1, 1), (1, 2)))
        self.assertTrue(grid.is_adjacent((1, 1), (0, 1)))
        self.assertFalse(grid.is_adjacent((1, 1), (2, 2)))
        self.assertFalse(grid.is_adjacent((1, 1), (1, 1)))


if __name__ == "__main__":
    unittest.main()
