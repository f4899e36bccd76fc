import io
from collections import deque

import pytest

from graphsolve.building_roads import DisjointSet, connect_components, main


def _component_count(n, edges):
    ds = DisjointSet(n)
    for u, v in edges:
        ds.union(u - 1, v - 1)
    return len(ds.roots())


def test_union_merges_and_reports():
    ds = DisjointSet(5)
    assert ds.union(0, 1) is True
    assert ds.union(1, 0) is False
    assert ds.find(0) == ds.find(1)
    assert ds.find(2) != ds.find(0)


def test_roots_shrink_by_one_per_successful_union():
    ds = DisjointSet(6)
    assert ds.roots() == list(range(6))
    ds.union(0, 1)
    ds.union(2, 3)
    ds.union(1, 3)
    assert len(ds.roots()) == 3
    assert all(ds.find(r) == r for r in ds.roots())


def test_larger_set_keeps_its_root():
    ds = DisjointSet(4)
    ds.union(0, 1)
    big_root = ds.find(0)
    ds.union(2, 0)
    assert ds.find(2) == big_root
    assert ds.roots().count(big_root) == 1


def test_find_out_of_range():
    ds = DisjointSet(3)
    with pytest.raises(IndexError):
        ds.find(3)
    with pytest.raises(IndexError):
        ds.find(-1)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        DisjointSet(-1)


def test_worked_example():
    assert connect_components(4, [(1, 2), (3, 4)]) == [(1, 3)]


def test_connected_graph_needs_no_roads():
    assert connect_components(3, [(1, 2), (2, 3)]) == []


@pytest.mark.parametrize(
    "n, edges",
    [
        (1, []),
        (5, []),
        (6, [(1, 2), (4, 5)]),
        (7, [(7, 1), (2, 3), (3, 2), (5, 6), (6, 4)]),
    ],
)
def test_new_roads_connect_everything(n, edges):
    roads = connect_components(n, edges)
    assert len(roads) == _component_count(n, edges) - 1
    adj = {i: [] for i in range(1, n + 1)}
    for a, b in list(edges) + roads:
        adj[a].append(b)
        adj[b].append(a)
    seen = {1}
    queue = deque([1])
    while queue:
        node = queue.popleft()
        for nxt in adj[node]:
            if nxt not in seen:
                seen.add(nxt)
                queue.append(nxt)
    assert len(seen) == n


def test_invalid_city_rejected():
    with pytest.raises(ValueError):
        connect_components(3, [(1, 4)])


def test_main_prints_roads(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4 2\n1 2\n3 4\n"))
    main([])
    out = capsys.readouterr().out.split("\n")
    assert out[0] == "1"
    assert out[1] == "1 3"


def test_main_rejects_missing_roads(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("4 2\n1 2\n"))
    with pytest.raises(ValueError):
        main([])