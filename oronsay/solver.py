"""Backtracking sudoku solvers."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from .sudoku import N_CELLS, Puzzle, Sudoku

log = logging.getLogger(__name__)

ALL = 0x1FF
_ONE = ord("1")
_NINE = ord("9")


class InvalidPuzzleError(ValueError):
    """A clue repeats a digit already given in its row, column or box."""


@dataclass
class SolutionInfo:
    """A solved grid and the number of guesses it took."""

    sudoku: Sudoku
    guesses: int


class Solver(ABC):
    """A solver that keeps reusable scratch state per worker."""

    @abstractmethod
    def make_state(self) -> Any:
        """Create fresh scratch state for this solver."""

    @abstractmethod
    def solve(self, puzzle: Puzzle, state: Any) -> SolutionInfo | None:
        """Solve the puzzle, or return None when it has no solution."""


def _all_units() -> list[int]:
    return [ALL] * 9


@dataclass
class BasicState:
    """Candidate bitmasks per unit and the list of cells still to fill."""

    rows: list[int] = field(default_factory=_all_units)
    cols: list[int] = field(default_factory=_all_units)
    subs: list[int] = field(default_factory=_all_units)
    todo: list[tuple[int, int, int]] = field(default_factory=list)
    num_todo: int = 0
    guesses: int = 0
    num_solutions: int = 0

    def setup(self, puzzle: Puzzle, solution: Sudoku) -> None:
        """Reset the state for a puzzle and copy its clues into the solution.

        Raises InvalidPuzzleError when two clues clash.
        """
        self.rows = _all_units()
        self.cols = _all_units()
        self.subs = _all_units()
        self.guesses = 0
        self.num_solutions = 0
        self.todo = []

        grid = bytes(puzzle.grid)
        if len(grid) != N_CELLS:
            raise ValueError(f"a sudoku grid needs {N_CELLS} cells, got {len(grid)}")
        solution.grid[:] = grid

        for cell, byte in enumerate(grid):
            row, col = divmod(cell, 9)
            sub = (row // 3) * 3 + col // 3
            if _ONE <= byte <= _NINE:
                value = 1 << (byte - _ONE)
                if self.rows[row] & self.cols[col] & self.subs[sub] & value:
                    self.rows[row] ^= value
                    self.cols[col] ^= value
                    self.subs[sub] ^= value
                else:
                    message = (
                        f"Invalid puzzle: row: {row}, col: {col}, "
                        f"sub: {sub}, value: {value}"
                    )
                    log.warning(message)
                    raise InvalidPuzzleError(message)
            else:
                self.todo.append((row, col, sub))
        self.num_todo = len(self.todo) - 1

    def _candidates(self, cell: tuple[int, int, int]) -> int:
        row, col, sub = cell
        return self.rows[row] & self.cols[col] & self.subs[sub]

    def mcv(self, todo_index: int) -> None:
        """Move the remaining cell with the fewest candidates to todo_index."""
        if todo_index >= len(self.todo):
            return
        best = min(
            range(todo_index, len(self.todo)),
            key=lambda i: self._candidates(self.todo[i]).bit_count(),
        )
        self.todo[todo_index], self.todo[best] = self.todo[best], self.todo[todo_index]


@dataclass(frozen=True)
class SolverBasic(Solver):
    """Depth-first search over candidate bitmasks.

    Stops after `limit` solutions; with `min_heuristic` the most constrained
    cell is tried next.
    """

    limit: int = 1
    min_heuristic: bool = True

    def make_state(self) -> BasicState:
        return BasicState()

    def _satisfy(self, todo_index: int, solution: Sudoku, state: BasicState) -> bool:
        if self.min_heuristic:
            state.mcv(todo_index)

        row, col, sub = state.todo[todo_index]
        candidates = state.rows[row] & state.cols[col] & state.subs[sub]

        while candidates:
            candidate = candidates & -candidates
            # Only an assignment with alternatives counts as a guess.
            if candidates ^ candidate:
                state.guesses += 1

            state.rows[row] ^= candidate
            state.cols[col] ^= candidate
            state.subs[sub] ^= candidate

            solution.grid[row * 9 + col] = _ONE + candidate.bit_length() - 1
            if todo_index < state.num_todo:
                self._satisfy(todo_index + 1, solution, state)
            else:
                state.num_solutions += 1

            if state.num_solutions == self.limit:
                return True

            state.rows[row] ^= candidate
            state.cols[col] ^= candidate
            state.subs[sub] ^= candidate

            candidates ^= candidate
        return False

    def solve(self, puzzle: Puzzle, state: BasicState) -> SolutionInfo | None:
        solution = puzzle.sudoku()
        try:
            state.setup(puzzle, solution)
        except InvalidPuzzleError:
            return None
        if not state.todo:
            state.num_solutions = 1
            return SolutionInfo(sudoku=solution, guesses=0)
        if self._satisfy(0, solution, state):
            return SolutionInfo(sudoku=solution, guesses=state.guesses)
        return None