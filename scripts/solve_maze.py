#!/usr/bin/env python3
"""solve_maze.py: solve an ASCII maze with the simulated robot.

Usage:
    python scripts/solve_maze.py omniscient MAP [--algorithm astar]
    python scripts/solve_maze.py blind MAP [--exploration backtracker] [--pathfinding astar]
    python scripts/solve_maze.py benchmark {omniscient,blind} MAP

MAP is a path to an ASCII map (see maps/). Debug output (``-v`` / ``-vv``)
goes to stderr.
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional

from maze_solver import BlindSolver, OmniscientSolver, SolveResult, SolverConfig, SolverError
from maze_solver.benchmark import benchmark_blind, benchmark_omniscient, format_benchmark_table
from maze_solver.registry import list_exploration_names, list_pathfinding_names
from maze_solver.sim import SimulatedRobot, load_map, render


def print_result(result: SolveResult) -> None:
    print(f"{result.algorithm}: finished in {result.total_steps} steps ({result.total_time * 1000:.3f} ms)")
    if result.exploration is not None:
        print(f"  exploration: {result.exploration_steps} steps")
    print(f"  execution:   {result.execution_steps} steps, planning {result.planning_time * 1000:.3f} ms")
    if result.maze is not None:
        print(result.maze.to_ascii())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Debug level (-v phases, -vv every step)")
    parser.add_argument("--delay", type=float, default=0.0, help="Seconds to wait after each move")
    parser.add_argument(
        "--max-exploration-steps", type=int, default=10_000, help="Abort exploration after this many steps"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    omniscient = subparsers.add_parser("omniscient", help="Fetch the full map, then plan and execute")
    omniscient.add_argument("map", help="Path to an ASCII map")
    omniscient.add_argument("--algorithm", default="astar", choices=list_pathfinding_names())

    blind = subparsers.add_parser("blind", help="Explore with sensors only, then plan and execute")
    blind.add_argument("map", help="Path to an ASCII map")
    blind.add_argument("--exploration", default="recursive-backtracker", choices=list_exploration_names())
    blind.add_argument("--pathfinding", default="astar", choices=list_pathfinding_names())

    benchmark = subparsers.add_parser("benchmark", help="Run every algorithm of a mode and compare")
    benchmark.add_argument("mode", choices=["omniscient", "blind"])
    benchmark.add_argument("map", help="Path to an ASCII map")
    benchmark.add_argument("--pathfinding", default="astar", choices=list_pathfinding_names())

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        description = load_map(args.map)
    except (FileNotFoundError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    robot = SimulatedRobot(description, move_delay=args.delay)
    settings = {
        "spawn_cell": robot.spawn,
        "max_exploration_steps": args.max_exploration_steps,
        "debug": min(args.verbose, 2),
    }
    if args.command == "omniscient":
        settings["pathfinding"] = args.algorithm
    else:
        settings["pathfinding"] = args.pathfinding
        if args.command == "blind":
            settings["exploration"] = args.exploration
    config = SolverConfig(**settings)

    print(render(description))
    print()

    if args.command == "benchmark":
        if args.mode == "omniscient":
            entries = benchmark_omniscient(robot, config)
        else:
            entries = benchmark_blind(robot, config)
        print(format_benchmark_table(entries))
        return 0 if any(entry.ok for entry in entries) else 1

    solver = OmniscientSolver(robot, config) if args.command == "omniscient" else BlindSolver(robot, config)
    try:
        result = solver.solve()
    except SolverError as exc:
        print(f"Error: {type(exc).__name__}: {exc}", file=sys.stderr)
        return 1

    print_result(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
