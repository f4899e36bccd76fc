"""Connect every city with the fewest new roads, using a disjoint-set forest."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable


class DisjointSet:
    """Union-find over the integers ``0 .. n-1``, with union by size and path compression."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"size must be non-negative, got {n}")
        self._parent = list(range(n))
        self._size = [1] * n

    def __len__(self) -> int:
        return len(self._parent)

    def _check(self, idx: int) -> None:
        if not 0 <= idx < len(self._parent):
            raise IndexError(f"element {idx} out of range for set of size {len(self._parent)}")

    def find(self, idx: int) -> int:
        """Return the representative of the set holding ``idx``."""
        self._check(idx)
        root = idx
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[idx] != root:
            self._parent[idx], idx = root, self._parent[idx]
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the sets of ``x`` and ``y``; return False if they were already one set."""
        root_x = self.find(x)
        root_y = self.find(y)
        if root_x == root_y:
            return False
        if self._size[root_x] < self._size[root_y]:
            root_x, root_y = root_y, root_x
        self._size[root_x] += self._size[root_y]
        self._parent[root_y] = root_x
        return True

    def roots(self) -> list[int]:
        """Return the representative of every set, in increasing order."""
        return [i for i, parent in enumerate(self._parent) if i == parent]


def connect_components(n: int, edges: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Return the roads (1-based city pairs) that join all components of the road network.

    One road is added between the representatives of each pair of consecutive components.
    """
    ds = DisjointSet(n)
    for u, v in edges:
        for city in (u, v):
            if not 1 <= city <= n:
                raise ValueError(f"city {city} out of range 1..{n}")
        ds.union(u - 1, v - 1)
    roots = [r + 1 for r in ds.roots()]
    return list(zip(roots, roots[1:]))


def _read_ints(text: str) -> list[int]:
    try:
        return [int(tok) for tok in text.split()]
    except ValueError as exc:
        raise ValueError(f"malformed input: {exc}") from None


def main(argv: list[str] | None = None) -> None:
    """Read ``n m`` and ``m`` roads from standard input and print the roads to build."""
    argparse.ArgumentParser(description=__doc__).parse_args(argv)
    numbers = _read_ints(sys.stdin.read())
    if len(numbers) < 2:
        raise ValueError("expected the number of cities and roads")
    n, m = numbers[0], numbers[1]
    values = numbers[2:2 + 2 * m]
    if len(values) < 2 * m:
        raise ValueError(f"expected {m} roads")
    edges = list(zip(values[0::2], values[1::2]))
    roads = connect_components(n, edges)
    lines = [str(len(roads))]
    lines.extend(f"{a} {b}" for a, b in roads)
    print("\n".join(lines))