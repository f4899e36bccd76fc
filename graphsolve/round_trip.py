"""Find a round trip (a simple cycle) in an undirected road network."""

from __future__ import annotations

import argparse
import sys
from collections import defaultdict
from collections.abc import Iterable


def _search(start: int, adj: dict[int, list[int]], visited: list[bool]) -> list[int] | None:
    visited[start] = True
    path = [start]
    frames = [(start, -1, iter(adj.get(start, ())))]
    while frames:
        vertex, parent, neighbors = frames[-1]
        for nei in neighbors:
            if not visited[nei]:
                visited[nei] = True
                path.append(nei)
                frames.append((nei, vertex, iter(adj.get(nei, ()))))
                break
            if nei != parent:
                try:
                    first = path.index(nei)
                except ValueError:
                    raise ValueError(
                        f"cannot close a round trip at city {nei + 1}: repeated road"
                    ) from None
                return path[first:] + [nei]
        else:
            frames.pop()
            path.pop()
    return None


def find_round_trip(n: int, edges: Iterable[tuple[int, int]]) -> list[int] | None:
    """Return a round trip as 1-based cities, first and last equal, or None.

    ``edges`` holds 1-based pairs of cities joined by a road.  The trip is the
    first cycle met by a depth-first search from the lowest-numbered city.
    """
    adj: dict[int, list[int]] = defaultdict(list)
    for u, v in edges:
        for city in (u, v):
            if not 1 <= city <= n:
                raise ValueError(f"city {city} out of range 1..{n}")
        adj[u - 1].append(v - 1)
        adj[v - 1].append(u - 1)

    visited = [False] * n
    for start in range(n):
        if visited[start]:
            continue
        cycle = _search(start, adj, visited)
        if cycle is not None:
            return [city + 1 for city in cycle]
    return None


def main(argv: list[str] | None = None) -> None:
    """Read ``n m`` and ``m`` roads from standard input and print a round trip."""
    argparse.ArgumentParser(description=__doc__).parse_args(argv)
    try:
        numbers = [int(tok) for tok in sys.stdin.read().split()]
    except ValueError as exc:
        raise ValueError(f"malformed input: {exc}") from None
    if len(numbers) < 2:
        raise ValueError("expected the number of cities and roads")
    n, m = numbers[0], numbers[1]
    values = numbers[2:2 + 2 * m]
    if len(values) < 2 * m:
        raise ValueError(f"expected {m} roads")
    trip = find_round_trip(n, zip(values[0::2], values[1::2]))
    if trip is None:
        print("IMPOSSIBLE")
    else:
        print(f"{len(trip)}\n{' '.join(map(str, trip))}")