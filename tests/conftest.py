"""Shared fixtures for maze-solver tests."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from maze_solver.debug_logger import DebugLogger

MAPS_DIR = Path(__file__).resolve().parent.parent / "maps"


@pytest.fixture
def maps_dir() -> Path:
    return MAPS_DIR


@pytest.fixture
def log_output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def debug_logger(log_output: io.StringIO) -> DebugLogger:
    """Level-2 logger writing into ``log_output`` instead of stderr."""
    return DebugLogger(level=2, output=log_output)
