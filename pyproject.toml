[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphsolve"
version = "0.1.0"
description = "Solvers for classic graph problems: connectivity, bipartite teams, grid rooms, mazes, cycles and shortest routes"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "algorithms", "bfs", "dfs", "dijkstra", "union-find", "competitive-programming"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
building-roads = "graphsolve.building_roads:main"
building-teams = "graphsolve.building_teams:main"
counting-rooms = "graphsolve.counting_rooms:main"
labyrinth = "graphsolve.labyrinth:main"
round-trip = "graphsolve.round_trip:main"
shortest-routes = "graphsolve.shortest_routes:main"

[tool.hatch.build.targets.wheel]
packages = ["graphsolve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
