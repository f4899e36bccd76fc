"""Solvers for classic graph problems: connectivity, bipartite teams, grid rooms, mazes, cycles and shortest routes."""

__version__ = "0.1.0"