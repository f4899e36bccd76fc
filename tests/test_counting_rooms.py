import io

import pytest

from graphsolve.counting_rooms import count_rooms, main

SAMPLE = [
    "########",
    "#..#...#",
    "####.#.#",
    "#..#...#",
    "########",
]


def test_worked_example():
    assert count_rooms(SAMPLE) == 3


def test_all_walls_has_no_rooms():
    assert count_rooms(["###", "###"]) == 0


def test_all_floor_is_one_room():
    assert count_rooms(["....", "....", "...."]) == 1


def test_diagonal_cells_are_separate_rooms():
    grid = [".#.", "#.#", ".#."]
    assert count_rooms(grid) == sum(row.count(".") for row in grid)


@pytest.mark.parametrize(
    "top, bottom",
    [
        (["..#", "#.."], [".#.", "..."]),
        (SAMPLE, ["#.#.", "...."]),
        (["#"], ["."]),
    ],
)
def test_wall_row_separates_grids(top, bottom):
    width = max(len(row) for row in top + bottom)
    combined = top + ["#" * width] + bottom
    assert count_rooms(combined) == count_rooms(top) + count_rooms(bottom)


def test_empty_grid():
    assert count_rooms([]) == count_rooms(["#"])


def test_main_prints_count(monkeypatch, capsys):
    text = "5 8\n" + "\n".join(SAMPLE) + "\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    main([])
    assert int(capsys.readouterr().out) == count_rooms(SAMPLE)


def test_main_rejects_missing_rows(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("3 2\n..\n"))
    with pytest.raises(ValueError):
        main([])