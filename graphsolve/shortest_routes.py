"""Shortest flight distances from city 1 over directed, weighted routes."""

from __future__ import annotations

import argparse
import heapq
import sys
from collections import defaultdict
from collections.abc import Iterable

UNREACHABLE = 2**64 - 1
"""Distance printed for a city that cannot be reached."""


def shortest_distances(n: int, edges: Iterable[tuple[int, int, int]]) -> list[int | None]:
    """Return the least total weight from city 1 to every city, None if unreachable.

    ``edges`` holds directed 1-based ``(source, destination, weight)`` routes
    with non-negative weights.
    """
    if n < 1:
        raise ValueError(f"need at least one city, got {n}")
    adj: dict[int, list[tuple[int, int]]] = defaultdict(list)
    for u, v, weight in edges:
        for city in (u, v):
            if not 1 <= city <= n:
                raise ValueError(f"city {city} out of range 1..{n}")
        if weight < 0:
            raise ValueError(f"negative weight {weight}")
        adj[u - 1].append((v - 1, weight))

    dist: list[int | None] = [None] * n
    dist[0] = 0
    heap = [(0, 0)]
    while heap:
        distance, node = heapq.heappop(heap)
        if distance != dist[node]:
            continue
        for target, weight in adj.get(node, ()):
            candidate = distance + weight
            current = dist[target]
            if current is None or candidate < current:
                dist[target] = candidate
                heapq.heappush(heap, (candidate, target))
    return dist


def main(argv: list[str] | None = None) -> None:
    """Read ``n m`` and ``m`` routes ``a b c`` from standard input and print distances."""
    argparse.ArgumentParser(description=__doc__).parse_args(argv)
    try:
        numbers = [int(tok) for tok in sys.stdin.read().split()]
    except ValueError as exc:
        raise ValueError(f"malformed input: {exc}") from None
    if len(numbers) < 2:
        raise ValueError("expected the number of cities and routes")
    n, m = numbers[0], numbers[1]
    values = numbers[2:2 + 3 * m]
    if len(values) < 3 * m:
        raise ValueError(f"expected {m} routes")
    edges = zip(values[0::3], values[1::3], values[2::3])
    dist = shortest_distances(n, edges)
    print(" ".join(str(UNREACHABLE if d is None else d) for d in dist))