"""Find a shortest walk from ``A`` to ``B`` through a labyrinth map."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass

_MOVES = (("U", -1, 0), ("R", 0, 1), ("D", 1, 0), ("L", 0, -1))


@dataclass(frozen=True)
class Cell:
    """A position in the map, by row and column."""

    row: int
    col: int


def _locate(grid: Sequence[str]) -> tuple[Cell, Cell]:
    start: Cell | None = None
    goal: Cell | None = None
    for r, row in enumerate(grid):
        for c, ch in enumerate(row):
            if ch == "A":
                start = Cell(r, c)
            if ch == "B":
                goal = Cell(r, c)
    if start is None and goal is None:
        raise ValueError("map has neither a start 'A' nor an end 'B'")
    if start is None:
        raise ValueError("map has no start 'A'")
    if goal is None:
        raise ValueError("map has no end 'B'")
    return start, goal


def find_path(grid: Sequence[str]) -> str | None:
    """Return a shortest path from ``A`` to ``B`` as U/R/D/L moves, or None.

    Walls are ``#``; every other cell can be walked on.  Among shortest paths
    the one found by a breadth-first search trying U, R, D, L in that order
    is returned.
    """
    start, goal = _locate(grid)
    previous: dict[Cell, tuple[Cell, str] | None] = {start: None}
    queue = deque([start])
    while queue:
        cell = queue.popleft()
        if cell == goal:
            moves: list[str] = []
            step = previous[cell]
            while step is not None:
                cell, letter = step
                moves.append(letter)
                step = previous[cell]
            return "".join(reversed(moves))
        for letter, dr, dc in _MOVES:
            nr, nc = cell.row + dr, cell.col + dc
            if 0 <= nr < len(grid) and 0 <= nc < len(grid[nr]) and grid[nr][nc] != "#":
                nxt = Cell(nr, nc)
                if nxt not in previous:
                    previous[nxt] = (cell, letter)
                    queue.append(nxt)
    return None


def main(argv: list[str] | None = None) -> None:
    """Read ``n m`` and ``n`` map rows from standard input and print the path."""
    argparse.ArgumentParser(description=__doc__).parse_args(argv)
    tokens = sys.stdin.read().split()
    if len(tokens) < 2:
        raise ValueError("expected the map height and width")
    try:
        n = int(tokens[0])
        int(tokens[1])
    except ValueError as exc:
        raise ValueError(f"malformed input: {exc}") from None
    rows = tokens[2:2 + n]
    if len(rows) < n:
        raise ValueError(f"expected {n} map rows")
    path = find_path(rows)
    if path is None:
        print("NO")
    else:
        print(f"YES\n{len(path)}\n{path}")