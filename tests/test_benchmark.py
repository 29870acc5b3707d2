"""Tests for running every algorithm of a mode against one robot."""

from __future__ import annotations

from mazes import OPEN_ROOM, WALLED_TARGET, make_robot

from maze_solver.benchmark import (
    BenchmarkEntry,
    benchmark_blind,
    benchmark_omniscient,
    best_entry,
    fastest_entry,
    format_benchmark_table,
)
from maze_solver.config import SolverConfig
from maze_solver.errors import MapUnavailable, NoPathExists
from maze_solver.ports import MapDescription
from maze_solver.registry import PathfindingAlgorithm
from maze_solver.sim import SimulatedRobot, parse_ascii_map
from maze_solver.solvers import SolveResult


class FlakyMapRobot(SimulatedRobot):
    """Map service that fails on the first request only."""

    def __init__(self, description, **kwargs):
        super().__init__(description, **kwargs)
        self.fetches = 0

    def fetch_full_map(self) -> MapDescription:
        self.fetches += 1
        if self.fetches == 1:
            raise MapUnavailable("map service warming up")
        return super().fetch_full_map()


def make_entry(name, steps, seconds):
    return BenchmarkEntry(
        name=name,
        result=SolveResult(mode="omniscient", pathfinding=name, execution_steps=steps, execution_time=seconds),
    )


class TestOmniscientBenchmark:
    def test_runs_every_pathfinder(self):
        robot = make_robot(OPEN_ROOM)
        entries = benchmark_omniscient(robot)

        assert [entry.name for entry in entries] == ["A*", "Dijkstra", "DFS"]
        assert all(entry.ok for entry in entries)
        assert entries[0].result.total_steps == 8
        assert entries[1].result.total_steps == 8
        assert entries[2].result.total_steps >= 8
        assert robot.resets == 2
        assert robot.at_target

    def test_failed_run_is_recorded_and_skipped(self):
        robot = FlakyMapRobot(parse_ascii_map(OPEN_ROOM))
        entries = benchmark_omniscient(robot)

        assert not entries[0].ok
        assert isinstance(entries[0].error, MapUnavailable)
        assert entries[0].error.phase == "fetch_map"
        assert best_entry(entries).name == "Dijkstra"
        assert "failed" in format_benchmark_table(entries)

    def test_subset_of_algorithms(self):
        entries = benchmark_omniscient(make_robot(OPEN_ROOM), algorithms=[PathfindingAlgorithm.DFS])
        assert [entry.name for entry in entries] == ["DFS"]

    def test_all_runs_fail(self):
        entries = benchmark_omniscient(make_robot(WALLED_TARGET))
        assert all(isinstance(entry.error, NoPathExists) for entry in entries)
        assert best_entry(entries) is None
        assert fastest_entry(entries) is None
        assert "best:" not in format_benchmark_table(entries)


class TestBlindBenchmark:
    def test_runs_every_explorer(self):
        robot = make_robot(OPEN_ROOM)
        entries = benchmark_blind(robot, SolverConfig(pathfinding="dijkstra"))

        assert [entry.name for entry in entries] == ["Wall Follower", "Recursive Backtracker"]
        assert all(entry.ok for entry in entries)
        assert all(entry.result.execution_steps == 8 for entry in entries)
        assert all(entry.result.pathfinding == "Dijkstra" for entry in entries)
        # One reset between runs plus one inside each run
        assert robot.resets == 3

    def test_stale_readings_across_runs(self):
        robot = make_robot(OPEN_ROOM, stale_readings=2)
        entries = benchmark_blind(robot)
        assert all(entry.ok for entry in entries)
        assert all(entry.result.execution_steps == 8 for entry in entries)


class TestTable:
    def test_best_and_fastest(self):
        entries = [make_entry("slow", 10, 0.5), make_entry("quick", 12, 0.1), make_entry("also-slow", 10, 0.9)]
        assert best_entry(entries).name == "slow"
        assert fastest_entry(entries).name == "quick"

        table = format_benchmark_table(entries)
        lines = table.splitlines()
        assert lines[0].split() == ["algorithm", "steps", "plan", "(ms)", "total", "(ms)"]
        assert "best: slow (10 steps)" in table
        assert "fastest: quick (100.000 ms)" in table
