"""Tests for debug output of solve runs."""

from __future__ import annotations

import io
import json

from mazes import OPEN_ROOM, RING_WITH_BRANCH, make_robot

from maze_solver.config import SolverConfig
from maze_solver.debug_logger import DebugLogger
from maze_solver.errors import SensingFailed
from maze_solver.solvers import BlindSolver, OmniscientSolver


def summary_of(output: str) -> dict:
    lines = [line for line in output.splitlines() if line.startswith(DebugLogger.SUMMARY_PREFIX)]
    assert len(lines) == 1
    return json.loads(lines[0][len(DebugLogger.SUMMARY_PREFIX) :])


class TestLevels:
    def test_level_one_skips_step_lines(self):
        out = io.StringIO()
        OmniscientSolver(make_robot(OPEN_ROOM), logger=DebugLogger(level=1, output=out)).solve()
        text = out.getvalue()
        assert "[maze:debug] phase fetch_map->plan" in text
        assert "act=" not in text

    def test_level_two_logs_every_move(self, debug_logger, log_output):
        OmniscientSolver(make_robot(OPEN_ROOM), logger=debug_logger).solve()
        step_lines = [line for line in log_output.getvalue().splitlines() if "act=" in line]
        assert len(step_lines) == 8
        assert len(debug_logger.steps) == 8

    def test_every_line_is_prefixed(self, debug_logger, log_output):
        BlindSolver(make_robot(OPEN_ROOM), logger=debug_logger).solve()
        lines = log_output.getvalue().splitlines()
        assert lines[-1].startswith("[maze:debug:summary] ")
        for line in lines[:-1]:
            assert line.startswith("[maze:debug] ")

    def test_config_debug_level_creates_a_logger(self):
        solver = OmniscientSolver(make_robot(OPEN_ROOM), SolverConfig(debug=1))
        assert solver.logger is not None
        assert solver.logger.level == 1
        assert OmniscientSolver(make_robot(OPEN_ROOM)).logger is None


class TestSummary:
    def test_blind_summary(self, debug_logger, log_output):
        robot = make_robot(RING_WITH_BRANCH)
        BlindSolver(robot, SolverConfig(spawn_cell=(1, 3)), logger=debug_logger).solve()

        summary = summary_of(log_output.getvalue())
        assert summary["mode"] == "blind"
        assert summary["exploration"] == "Recursive Backtracker"
        assert summary["pathfinding"] == "A*"
        assert summary["exploration_steps"] == 9
        assert summary["execution_steps"] == 2
        assert summary["total_steps"] == 11
        assert summary["backtracks"] == 1
        assert summary["cache_hits"] == 1
        assert summary["target_sightings"] == [{"step": 9, "position": [0, -2]}]
        assert [phase["to"] for phase in summary["phases"]] == ["reset", "convert_and_plan", "execute", "done"]

    def test_failure_is_logged_without_summary(self, debug_logger, log_output):
        solver = BlindSolver(make_robot(OPEN_ROOM, fail_sense_after=2), logger=debug_logger)
        try:
            solver.solve()
        except SensingFailed:
            pass
        text = log_output.getvalue()
        assert "FAILED in explore: SensingFailed" in text
        assert DebugLogger.SUMMARY_PREFIX not in text

    def test_reset_run(self, debug_logger):
        OmniscientSolver(make_robot(OPEN_ROOM), logger=debug_logger).solve()
        debug_logger.reset_run()
        assert debug_logger.steps == []
        assert debug_logger.phases == []
        assert debug_logger.counters.cache_hits == 0
