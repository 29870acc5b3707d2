"""Tests for the wall follower and recursive backtracker exploration strategies.

Each strategy is driven directly against a simulated robot; internal
positions are relative to the robot's spawn.
"""

from __future__ import annotations

from collections import deque

import pytest
from mazes import (
    BRANCHED_CORRIDOR,
    CORRIDORS,
    DEAD_END,
    DETOUR,
    LOOPS,
    OPEN_ROOM,
    RING_WITH_BRANCH,
    UNWALLED_ROOM,
    WALLED_TARGET,
    make_maze,
    make_robot,
)

from maze_solver.algorithms.exploration import RecursiveBacktracker, WallFollower, find_route
from maze_solver.maze.cell import CellType
from maze_solver.maze.geometry import Move, step
from maze_solver.maze.unbounded import ORIGIN, UnboundedMaze

STRATEGIES = [WallFollower, RecursiveBacktracker]
MAPS = [OPEN_ROOM, CORRIDORS, LOOPS, DEAD_END, RING_WITH_BRANCH, DETOUR, WALLED_TARGET, BRANCHED_CORRIDOR, UNWALLED_ROOM]


def explore(strategy, robot, limit=10_000):
    """Run ``strategy`` to completion. Returns the discovered maze and the number of moves."""
    maze = UnboundedMaze()
    position = ORIGIN
    moves = 0
    while True:
        move = strategy.step(position, robot.sense(), maze)
        if move is None:
            return maze, moves
        robot.move(move)
        position = step(position, move)
        moves += 1
        assert (robot.position[0] - robot.spawn[0], robot.position[1] - robot.spawn[1]) == position
        assert moves < limit, "exploration did not terminate"


def reachable_open_cells(text):
    """Free cells reachable from the spawn without stepping on the target, relative to the spawn."""
    maze = make_maze(text)
    seen = {maze.start}
    queue = deque([maze.start])
    while queue:
        current = queue.popleft()
        for neighbor, _ in maze.neighbors(current):
            if neighbor not in seen and maze.get(neighbor) is CellType.FREE:
                seen.add(neighbor)
                queue.append(neighbor)
    return {(r - maze.start[0], c - maze.start[1]) for r, c in seen}


def relative_target(text):
    maze = make_maze(text)
    return (maze.target[0] - maze.start[0], maze.target[1] - maze.start[1])


class TestCoverage:
    @pytest.mark.parametrize("strategy_cls", STRATEGIES)
    @pytest.mark.parametrize("text", MAPS)
    def test_discovers_every_reachable_cell(self, strategy_cls, text):
        strategy = strategy_cls()
        maze, _ = explore(strategy, make_robot(text))

        assert strategy.complete
        for pos in reachable_open_cells(text):
            assert maze.get(pos) is CellType.FREE, f"{pos} was not discovered"

    @pytest.mark.parametrize("strategy_cls", STRATEGIES)
    @pytest.mark.parametrize("text", [OPEN_ROOM, CORRIDORS, LOOPS, DEAD_END, RING_WITH_BRANCH, DETOUR])
    def test_records_target_without_entering_it(self, strategy_cls, text):
        robot = make_robot(text)
        maze, _ = explore(strategy_cls(), robot)

        target = relative_target(text)
        assert maze.target == target
        assert maze.get(target) is CellType.TARGET
        absolute = (target[0] + robot.spawn[0], target[1] + robot.spawn[1])
        assert absolute not in robot.trail

    @pytest.mark.parametrize("strategy_cls", STRATEGIES)
    def test_sealed_target_is_never_seen(self, strategy_cls):
        maze, _ = explore(strategy_cls(), make_robot(WALLED_TARGET))
        assert maze.target is None

    def test_backtracker_visits_every_reachable_cell(self):
        strategy = RecursiveBacktracker()
        explore(strategy, make_robot(LOOPS))
        assert strategy.visited == reachable_open_cells(LOOPS)

    @pytest.mark.parametrize("strategy_cls", STRATEGIES)
    def test_boxed_in_robot_completes_immediately(self, strategy_cls):
        robot = make_robot("###\n#R#\n###")
        strategy = strategy_cls()
        maze, moves = explore(strategy, robot)
        assert moves == 0
        assert strategy.complete
        assert len(maze) == 9


class TestWallFollower:
    def test_turns_around_at_a_dead_end(self):
        """The target caps the corridor, so the follower reverses there and walks back."""
        robot = make_robot(DEAD_END)
        strategy = WallFollower()
        maze, moves = explore(strategy, robot)

        assert moves == 14
        assert strategy.circuits == 1
        assert robot.trail[5:10] == [(3, 4), (3, 3), (3, 2), (3, 3), (3, 4)]
        assert robot.position == robot.spawn
        assert maze.target == (2, 0)

    def test_enters_side_branch_after_seeing_the_target(self):
        """The spur hangs off the right-hand wall, so it is taken on the way back."""
        robot = make_robot(BRANCHED_CORRIDOR)
        strategy = WallFollower()
        maze = UnboundedMaze()
        position = ORIGIN
        moves = 0
        target_seen_at = None
        while True:
            move = strategy.step(position, robot.sense(), maze)
            if target_seen_at is None and maze.target is not None:
                target_seen_at = moves
            if move is None:
                break
            robot.move(move)
            position = step(position, move)
            moves += 1

        assert target_seen_at == 4
        assert maze.target == (0, 5)
        assert {(1, 2), (2, 2)} <= strategy.visited
        assert moves == 12
        assert strategy.circuits == 1
        assert position == ORIGIN

    def test_first_move_keeps_left_wall(self):
        robot = make_robot(OPEN_ROOM)
        strategy = WallFollower()
        maze = UnboundedMaze()
        # Heading UP with walls left and ahead: turn right
        assert strategy.step(ORIGIN, robot.sense(), maze) is Move.RIGHT
        assert strategy.heading is Move.RIGHT

    def test_step_after_completion_returns_none(self):
        strategy = WallFollower()
        maze, _ = explore(strategy, make_robot(DEAD_END))
        assert strategy.step(ORIGIN, make_robot(DEAD_END).sense(), maze) is None

    def test_reset_clears_state(self):
        strategy = WallFollower(initial_heading=Move.DOWN)
        explore(strategy, make_robot(DEAD_END))
        strategy.reset()
        assert not strategy.complete
        assert strategy.visited == set()
        assert strategy.circuits == 0
        assert strategy.heading is Move.DOWN


class TestRecursiveBacktracker:
    def test_backtracks_by_shortest_route(self):
        """Stuck after circling the ring, the robot steps straight back to the spawn's branch."""
        robot = make_robot(RING_WITH_BRANCH)
        strategy = RecursiveBacktracker()
        maze, moves = explore(strategy, robot)

        assert moves == 9
        assert strategy.backtracks == 1
        assert strategy.last_backtrack == [Move.UP]
        assert robot.trail[-3:] == [(2, 3), (1, 3), (1, 2)]
        assert strategy.stack == []
        assert maze.target == (0, -2)

    def test_no_backtracking_in_a_single_corridor(self):
        strategy = RecursiveBacktracker()
        explore(strategy, make_robot(CORRIDORS))
        assert strategy.backtracks == 0

    def test_prefers_unvisited_neighbors_in_priority_order(self):
        robot = make_robot(OPEN_ROOM)
        strategy = RecursiveBacktracker()
        maze = UnboundedMaze()
        assert strategy.step(ORIGIN, robot.sense(), maze) is Move.RIGHT
        assert strategy.stack == [ORIGIN]

    def test_reset_clears_state(self):
        strategy = RecursiveBacktracker()
        explore(strategy, make_robot(RING_WITH_BRANCH))
        strategy.reset()
        assert not strategy.complete
        assert strategy.backtracks == 0
        assert strategy.visited == set()


class TestFindRoute:
    def _maze(self):
        maze = UnboundedMaze()
        for pos in [(0, 0), (0, 1), (0, 2), (1, 2)]:
            maze.record(pos, CellType.FREE)
        maze.record((1, 0), CellType.TARGET)
        return maze

    def test_nearest_goal(self):
        route = find_route(self._maze(), (0, 0), lambda pos: pos[0] == 1)
        assert route == ((1, 2), [Move.RIGHT, Move.RIGHT, Move.DOWN])

    def test_start_is_not_a_goal(self):
        assert find_route(self._maze(), (0, 0), lambda pos: pos == (0, 0)) is None

    def test_target_only_when_allowed(self):
        maze = self._maze()
        assert find_route(maze, (0, 0), lambda pos: pos == (1, 0)) is None
        assert find_route(maze, (0, 0), lambda pos: pos == (1, 0), allow_target=True) == ((1, 0), [Move.DOWN])
