"""Split pupils into two teams so that no two friends share a team."""

from __future__ import annotations

import argparse
import sys
from collections import defaultdict, deque
from collections.abc import Iterable
from enum import Enum


class Color(Enum):
    """A team colour; the value is the printed team number."""

    GREEN = 1
    RED = 2

    @property
    def other(self) -> Color:
        return Color.RED if self is Color.GREEN else Color.GREEN


def assign_teams(n: int, edges: Iterable[tuple[int, int]]) -> list[int] | None:
    """Return a team number (1 or 2) for each pupil, or None if no split exists.

    ``edges`` holds 1-based pairs of friends.  Each component is coloured by a
    breadth-first search that gives its lowest-numbered pupil team 2.
    """
    adj: dict[int, list[int]] = defaultdict(list)
    for u, v in edges:
        for pupil in (u, v):
            if not 1 <= pupil <= n:
                raise ValueError(f"pupil {pupil} out of range 1..{n}")
        adj[u - 1].append(v - 1)
        adj[v - 1].append(u - 1)

    colors: list[Color | None] = [None] * n
    for start in range(n):
        if colors[start] is not None:
            continue
        colors[start] = Color.RED
        queue = deque([start])
        while queue:
            vertex = queue.popleft()
            vertex_color = colors[vertex]
            for neighbor in adj.get(vertex, ()):
                if colors[neighbor] is None:
                    colors[neighbor] = vertex_color.other
                    queue.append(neighbor)
                elif colors[neighbor] is vertex_color:
                    return None
    return [color.value for color in colors]


def main(argv: list[str] | None = None) -> None:
    """Read ``n m`` and ``m`` friendships from standard input and print the teams."""
    argparse.ArgumentParser(description=__doc__).parse_args(argv)
    try:
        numbers = [int(tok) for tok in sys.stdin.read().split()]
    except ValueError as exc:
        raise ValueError(f"malformed input: {exc}") from None
    if len(numbers) < 2:
        raise ValueError("expected the number of pupils and friendships")
    n, m = numbers[0], numbers[1]
    values = numbers[2:2 + 2 * m]
    if len(values) < 2 * m:
        raise ValueError(f"expected {m} friendships")
    teams = assign_teams(n, zip(values[0::2], values[1::2]))
    if teams is None:
        print("IMPOSSIBLE")
    else:
        print(" ".join(map(str, teams)))