import random
import unittest
from collections import deque
from typing import List

from puzzlegen.errors import PreconditionError
from puzzlegen.grid import Direction, Position
from puzzlegen.maze import Maze, MazeGenerator, MazePuzzleRecord, MazeState, generate_maze
from puzzlegen.moves import attempt_move, is_solved


def _route_to_goal(maze: Maze) -> List[Direction]:
    """Breadth-first route over open walls from start to goal."""

    parents = {maze.start: None}
    queue = deque([maze.start])
    while queue:
        current = queue.popleft()
        if current == maze.goal:
            break
        for direction in maze.open_directions(current):
            nxt = current.step(direction)
            if nxt not in parents:
                parents[nxt] = (current, direction)
                queue.append(nxt)
    route: List[Direction] = []
    node = maze.goal
    while parents[node] is not None:
        node, direction = parents[node]
        route.append(direction)
    route.reverse()
    return route


class _FirstChoiceRandom:
    """Random source that always picks the first candidate."""

    def choice(self, seq):
        return seq[0]


class MazeGenerationTests(unittest.TestCase):
    def test_generated_mazes_are_spanning_trees(self) -> None:
        for size in range(1, 11):
            for seed in range(5):
                with self.subTest(size=size, seed=seed):
                    maze = generate_maze(size, random.Random(seed))
                    self.assertEqual(maze.edge_count(), size * size - 1)
                    self.assertEqual(len(maze.reachable_from(maze.start)), size * size)
                    self.assertTrue(maze.is_symmetric())
                    self.assertTrue(maze.is_perfect())

    def test_two_by_two_maze_has_three_passages(self) -> None:
        maze = generate_maze(2, random.Random(7))
        self.assertEqual(maze.edge_count(), 3)
        self.assertIn(Position(1, 1), maze.reachable_from((0, 0)))
        self.assertTrue(_route_to_goal(maze))

    def test_boundary_walls_stay_closed(self) -> None:
        size = 6
        maze = generate_maze(size, random.Random(3))
        for i in range(size):
            self.assertTrue(maze.cell((i, 0)).top)
            self.assertTrue(maze.cell((i, size - 1)).bottom)
            self.assertTrue(maze.cell((0, i)).left)
            self.assertTrue(maze.cell((size - 1, i)).right)

    def test_visited_flags_are_reset(self) -> None:
        maze = generate_maze(5, random.Random(11))
        self.assertFalse(any(cell.visited for row in maze.cells for cell in row))

    def test_seeded_generation_is_reproducible(self) -> None:
        first = generate_maze(9, random.Random(1234))
        second = generate_maze(9, random.Random(1234))
        self.assertEqual(first.to_masks(), second.to_masks())

    def test_accepts_injected_random_source(self) -> None:
        maze = generate_maze(4, _FirstChoiceRandom())
        self.assertTrue(maze.is_perfect())

    def test_rejects_non_positive_size(self) -> None:
        for size in (0, -1):
            with self.assertRaises(PreconditionError):
                generate_maze(size, random.Random(0))

    def test_single_cell_maze(self) -> None:
        maze = generate_maze(1, random.Random(0))
        self.assertEqual(maze.edge_count(), 0)
        self.assertEqual(maze.start, maze.goal)
        self.assertTrue(maze.is_perfect())

    def test_fully_walled_grid_is_not_perfect(self) -> None:
        self.assertFalse(Maze(3).is_perfect())

    def test_carve_off_the_grid_fails(self) -> None:
        maze = Maze(2)
        with self.assertRaises(ValueError):
            maze.carve((0, 0), Direction.UP)


class MazeRecordTests(unittest.TestCase):
    def test_record_rebuilds_the_same_maze(self) -> None:
        generator = MazeGenerator("unused", size=6, seed=5)
        record = generator.create_puzzle(puzzle_id="maze-record")
        rebuilt = MazePuzzleRecord.from_dict(record.to_dict())
        self.assertEqual(rebuilt.to_maze().to_masks(), record.walls)
        self.assertEqual(rebuilt.start, (0, 0))
        self.assertEqual(rebuilt.goal, (5, 5))
        self.assertTrue(rebuilt.to_maze().is_perfect())

    def test_generator_rejects_invalid_size(self) -> None:
        with self.assertRaises(PreconditionError):
            MazeGenerator("unused", size=0)

    def test_masks_with_open_boundary_are_rejected(self) -> None:
        # (0, 0) has no top wall, which would let the player step to y = -1.
        with self.assertRaises(PreconditionError):
            Maze.from_masks([[0b1000, 0b0011], [0b1100, 0b0110]])

    def test_masks_with_one_sided_wall_are_rejected(self) -> None:
        # (0, 0) opens to the right but (1, 0) keeps its left wall.
        with self.assertRaises(PreconditionError):
            Maze.from_masks([[0b1101, 0b1111], [0b1111, 0b1111]])

    def test_rejected_masks_never_reach_traversal(self) -> None:
        record = MazePuzzleRecord(
            id="broken",
            size=2,
            walls=[[0b1000, 0b0011], [0b1100, 0b0110]],
            start=(0, 0),
            goal=(1, 1),
        )
        with self.assertRaises(PreconditionError):
            MazeState.start(record.to_maze())

    def test_fully_walled_masks_load(self) -> None:
        maze = Maze.from_masks([[0b1111] * 3 for _ in range(3)])
        self.assertTrue(maze.has_closed_boundary())
        self.assertEqual(maze.edge_count(), 0)


class MazeTraversalTests(unittest.TestCase):
    def setUp(self) -> None:
        self.maze = generate_maze(8, random.Random(42))
        self.state = MazeState.start(self.maze)

    def test_boundary_move_is_blocked(self) -> None:
        result = attempt_move(self.state, "up")
        self.assertFalse(result.accepted)
        self.assertIs(result.state, self.state)
        self.assertEqual(result.state.position, (0, 0))

    def test_walking_the_route_solves_the_maze(self) -> None:
        state = self.state
        self.assertFalse(is_solved(state))
        for direction in _route_to_goal(self.maze):
            result = attempt_move(state, direction)
            self.assertTrue(result.accepted)
            state = result.state
        self.assertTrue(is_solved(state))
        self.assertIn(Position(0, 0), state.hint_cells())
        self.assertNotIn(self.maze.goal, state.hint_cells())

    def test_moves_do_not_mutate_previous_state(self) -> None:
        direction = self.maze.open_directions(self.maze.start)[0]
        result = self.state.attempt_move(direction)
        self.assertEqual(self.state.position, (0, 0))
        self.assertEqual(self.state.trail, frozenset())
        self.assertNotEqual(result.state.position, self.state.position)

    def test_inverse_move_restores_position(self) -> None:
        for pos in self.maze.grid.positions():
            state = MazeState(maze=self.maze, position=pos)
            for direction in self.maze.open_directions(pos):
                forward = state.attempt_move(direction)
                self.assertTrue(forward.accepted)
                back = forward.state.attempt_move(direction.opposite())
                self.assertTrue(back.accepted)
                self.assertEqual(back.state.position, pos)

    def test_walled_directions_are_rejected(self) -> None:
        walled = [d for d in Direction if d not in self.maze.open_directions(self.maze.start)]
        for direction in walled:
            self.assertFalse(self.state.attempt_move(direction).accepted)


if __name__ == "__main__":
    unittest.main()
