# graphsolve

A small collection of solvers for classic graph problems. Each solver can be
called as a Python function. Each can also be run as a command that reads the
problem from standard input and writes the answer to standard output.

Vertices are numbered from 1 in the input and output of the commands and of
the functions that take edge lists.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

| Command           | Module                        | Problem                                                      |
|-------------------|-------------------------------|--------------------------------------------------------------|
| `building-roads`  | `graphsolve.building_roads`   | Fewest new roads that connect every city                     |
| `building-teams`  | `graphsolve.building_teams`   | Split pupils into two teams so that no friends share a team  |
| `counting-rooms`  | `graphsolve.counting_rooms`   | Count the rooms (4-connected `.` regions) on a floor map     |
| `labyrinth`       | `graphsolve.labyrinth`        | Shortest path from `A` to `B` in a grid maze                 |
| `round-trip`      | `graphsolve.round_trip`       | Find a cycle in an undirected graph                          |
| `shortest-routes` | `graphsolve.shortest_routes`  | Shortest distances from city 1 over weighted directed routes |

The commands take no options other than `-h`/`--help`.

### Input format

The input is read as whitespace-separated tokens, so line breaks do not matter.

* Graph problems start with `n m`, the number of vertices and edges. `m` pairs
  `a b` follow. For `shortest-routes` there are `m` triples `a b w` instead,
  with a non-negative weight `w`.
* Grid problems start with `n m`, the height and width of the map. `n` rows
  follow. `#` is a wall. In `counting-rooms` only `.` counts as floor. In
  `labyrinth` every cell other than `#` can be walked on. `A` marks the start
  and `B` marks the goal.

### Output

* `building-roads`: the number of roads to build, then one `a b` line per road.
  Each road joins the smallest-numbered cities of two consecutive components.
* `building-teams`: a team number (1 or 2) for each pupil, or `IMPOSSIBLE`.
* `counting-rooms`: the number of rooms.
* `labyrinth`: `YES`, then the path length and the path as `U`/`R`/`D`/`L`
  moves. When no path exists it prints `NO`.
* `round-trip`: the number of cities in the trip, then the trip. The first and
  last cities are the same. When no cycle exists it prints `IMPOSSIBLE`.
* `shortest-routes`: the distance to each city. A city that cannot be reached
  gets `18446744073709551615`.

Malformed or incomplete input raises `ValueError`. This also happens when a
vertex number is out of range, or when a labyrinth map lacks `A` or `B`.

### Examples

```
$ printf '4 2\n1 2\n3 4\n' | building-roads
1
1 3
```

```
$ printf '5 8\n########\n#.A#...#\n#.##.#B#\n#......#\n########\n' | labyrinth
YES
9
LDDRRRRRU
```

## Library use

```python
from graphsolve.building_roads import DisjointSet, connect_components
from graphsolve.building_teams import assign_teams
from graphsolve.counting_rooms import count_rooms
from graphsolve.labyrinth import find_path
from graphsolve.round_trip import find_round_trip
from graphsolve.shortest_routes import shortest_distances

connect_components(4, [(1, 2), (3, 4)])        # [(1, 3)]
assign_teams(3, [(1, 2), (2, 3)])              # [2, 1, 2]
count_rooms(["#..#", "####", "#..#"])          # 2
find_path(["A.#", "..B"])                      # a string of U/R/D/L moves, or None
find_round_trip(3, [(1, 2), (2, 3), (3, 1)])   # e.g. [1, 2, 3, 1], or None
shortest_distances(3, [(1, 2, 3), (2, 3, 4)])  # [0, 3, 7]; None for unreachable cities
```

* `assign_teams` returns `None` when no split into two teams exists. It gives
  the lowest-numbered pupil of each component team 2.
* `find_path` tries moves in the order U, R, D, L. Among the shortest paths,
  it returns the one a breadth-first search reaches first.
* `find_round_trip` returns the first cycle that a depth-first search meets,
  starting from the lowest-numbered city.

`graphsolve.building_roads.DisjointSet(n)` is a union–find structure over
`0 .. n-1`. It uses union by size and path compression, and provides:

* `find(idx)`: the representative of `idx`.
* `union(x, y)`: returns `False` if `x` and `y` were already joined.
* `roots()`: the representatives in increasing order.
* `len()`: the number of elements.

The `labyrinth` module also exports `Cell`, a frozen dataclass with `row` and
`col`.