import pytest

from oronsay.sudoku import N_CELLS, Puzzle, Sudoku

GRID = (
    "53..7....6..195....98....6.8...6...34..8.3..17...2...6"
    ".6....28....419..5....8..79"
)


def test_puzzle_sudoku_copies_grid():
    raw = GRID.encode()
    sudoku = Puzzle(raw).sudoku()
    assert bytes(sudoku.grid) == raw
    sudoku.grid[0] = ord("9")
    assert raw[0] == ord("5")


def test_puzzle_sudoku_accepts_memoryview():
    raw = (GRID + ",extra").encode()
    view = memoryview(raw)[:N_CELLS]
    assert bytes(Puzzle(view).sudoku().grid) == GRID.encode()


def test_puzzle_wrong_length_raises():
    with pytest.raises(ValueError):
        Puzzle(b"123").sudoku()


def test_sudoku_wrong_length_raises():
    with pytest.raises(ValueError):
        Sudoku(b"1" * 80)


def test_clean_replaces_non_digits():
    raw = GRID.replace(".", "0").encode()
    cleaned = Sudoku(raw).clean()
    assert bytes(cleaned.grid) == GRID.encode()


def test_clean_leaves_original_untouched():
    raw = GRID.replace(".", "0").encode()
    sudoku = Sudoku(raw)
    sudoku.clean()
    assert bytes(sudoku.grid) == raw


def test_str_is_cleaned_grid():
    raw = GRID.replace(".", "x").encode()
    assert str(Sudoku(raw)) == GRID


def test_default_sudoku_is_empty():
    assert str(Sudoku()) == "." * N_CELLS


def test_pretty_layout():
    text = Sudoku(GRID.encode()).pretty()
    lines = text.splitlines()
    assert text.endswith("\n")
    assert len(lines) == 13
    assert lines[0] == "┌───────┬───────┬───────┐"
    assert lines[4] == "├───────┼───────┼───────┤"
    assert lines[8] == "├───────┼───────┼───────┤"
    assert lines[-1] == "└───────┴───────┴───────┘"


def test_pretty_rows_hold_cells():
    text = Sudoku(GRID.replace(".", "0").encode()).pretty()
    rows = [line for line in text.splitlines() if line.startswith("│")]
    assert len(rows) == 9
    digits = "".join(
        ch for row in rows for ch in row if ch.isdigit() or ch == "."
    )
    assert digits == GRID