"""Simulated transport and ASCII maps for tests, benchmarks and the CLI."""

from .maps import load_map, parse_ascii_map, render
from .simulated_robot import SimulatedRobot

__all__ = ["SimulatedRobot", "load_map", "parse_ascii_map", "render"]
