"""Tests for A*, Dijkstra and depth-first search over bounded mazes."""

from __future__ import annotations

import pytest
from mazes import CORRIDORS, DETOUR, LOOPS, OPEN_ROOM, WALLED_TARGET, follow, make_maze

from maze_solver.algorithms.pathfinding import AStar, DepthFirstSearch, Dijkstra
from maze_solver.errors import NoPathExists
from maze_solver.maze.geometry import Move

ALL_PLANNERS = [AStar, Dijkstra, DepthFirstSearch]
SHORTEST_PLANNERS = [AStar, Dijkstra]


def assert_valid_path(maze, path):
    positions = follow(maze.start, path)
    assert all(maze.is_walkable(pos) for pos in positions)
    if path:
        assert positions[-1] == maze.target


class TestShortestPaths:
    @pytest.mark.parametrize("planner_cls", SHORTEST_PLANNERS)
    def test_open_room(self, planner_cls):
        maze = make_maze(OPEN_ROOM)
        path = planner_cls().find_path(maze, maze.start, maze.target)
        assert len(path) == 8
        assert_valid_path(maze, path)

    @pytest.mark.parametrize("text,expected", [(OPEN_ROOM, 8), (LOOPS, 12), (CORRIDORS, 28), (DETOUR, 2)])
    def test_astar_and_dijkstra_agree(self, text, expected):
        maze = make_maze(text)
        astar = AStar().find_path(maze, maze.start, maze.target)
        dijkstra = Dijkstra().find_path(maze, maze.start, maze.target)
        assert len(astar) == len(dijkstra) == expected

    def test_astar_takes_the_short_way(self):
        maze = make_maze(DETOUR)
        assert AStar().find_path(maze, maze.start, maze.target) == [Move.DOWN, Move.DOWN]


class TestDepthFirstSearch:
    @pytest.mark.parametrize("text", [OPEN_ROOM, LOOPS, CORRIDORS, DETOUR])
    def test_never_shorter_than_optimal(self, text):
        maze = make_maze(text)
        dfs = DepthFirstSearch().find_path(maze, maze.start, maze.target)
        optimal = AStar().find_path(maze, maze.start, maze.target)
        assert len(dfs) >= len(optimal)
        assert_valid_path(maze, dfs)

    def test_follows_priority_order(self):
        """RIGHT is tried before DOWN, so DFS commits to the long way round."""
        maze = make_maze(DETOUR)
        path = DepthFirstSearch().find_path(maze, maze.start, maze.target)
        assert path == [Move.RIGHT, Move.RIGHT, Move.DOWN, Move.DOWN, Move.LEFT, Move.LEFT]

    def test_single_corridor_is_optimal(self):
        maze = make_maze(CORRIDORS)
        assert len(DepthFirstSearch().find_path(maze, maze.start, maze.target)) == 28


class TestEdgeCases:
    @pytest.mark.parametrize("planner_cls", ALL_PLANNERS)
    def test_unreachable_target(self, planner_cls):
        maze = make_maze(WALLED_TARGET)
        with pytest.raises(NoPathExists):
            planner_cls().find_path(maze, maze.start, maze.target)

    @pytest.mark.parametrize("planner_cls", ALL_PLANNERS)
    def test_start_is_target(self, planner_cls):
        maze = make_maze(OPEN_ROOM)
        assert planner_cls().find_path(maze, maze.target, maze.target) == []

    @pytest.mark.parametrize("planner_cls", ALL_PLANNERS)
    def test_out_of_bounds(self, planner_cls):
        maze = make_maze(OPEN_ROOM)
        with pytest.raises(ValueError, match="outside"):
            planner_cls().find_path(maze, (-1, 0), maze.target)
        with pytest.raises(ValueError, match="outside"):
            planner_cls().find_path(maze, maze.start, (9, 9))

    @pytest.mark.parametrize("planner_cls", ALL_PLANNERS)
    def test_blocked_target(self, planner_cls):
        maze = make_maze(OPEN_ROOM)
        with pytest.raises(NoPathExists, match="blocked"):
            planner_cls().find_path(maze, maze.start, (0, 0))

    @pytest.mark.parametrize("planner_cls", ALL_PLANNERS)
    def test_deterministic(self, planner_cls):
        maze = make_maze(LOOPS)
        planner = planner_cls()
        assert planner.find_path(maze, maze.start, maze.target) == planner.find_path(maze, maze.start, maze.target)

    def test_names(self):
        assert AStar.name == "A*"
        assert Dijkstra.name == "Dijkstra"
        assert DepthFirstSearch.name == "DFS"
