"""Count the rooms in a building map of floor (``.``) and wall (``#``) cells."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

_STEPS = ((-1, 0), (0, 1), (1, 0), (0, -1))


def count_rooms(grid: Sequence[str]) -> int:
    """Return the number of 4-connected regions of floor cells in ``grid``."""
    seen: set[tuple[int, int]] = set()
    rooms = 0
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if cell != "." or (r, c) in seen:
                continue
            rooms += 1
            seen.add((r, c))
            stack = [(r, c)]
            while stack:
                row_i, col_i = stack.pop()
                for dr, dc in _STEPS:
                    nr, nc = row_i + dr, col_i + dc
                    if (
                        0 <= nr < len(grid)
                        and 0 <= nc < len(grid[nr])
                        and grid[nr][nc] == "."
                        and (nr, nc) not in seen
                    ):
                        seen.add((nr, nc))
                        stack.append((nr, nc))
    return rooms


def main(argv: list[str] | None = None) -> None:
    """Read ``n m`` and ``n`` map rows from standard input and print the room count."""
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
    print(count_rooms(rows))