"""Pathfinding over known maps and exploration of unknown ones."""
