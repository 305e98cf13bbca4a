"""Sudoku grids stored as 81 ASCII bytes."""

from __future__ import annotations

from dataclasses import dataclass, field

N_CELLS = 81

_DIGITS = frozenset(b"123456789")
_EMPTY = ord(".")


def _is_digit(byte: int) -> bool:
    return byte in _DIGITS


@dataclass(frozen=True)
class Puzzle:
    """A read-only view of a puzzle line: the first 81 bytes are the grid."""

    grid: bytes | bytearray | memoryview

    def sudoku(self) -> Sudoku:
        """Return a mutable copy of the grid."""
        return Sudoku(bytes(self.grid))


@dataclass
class Sudoku:
    """A mutable 9x9 grid; digits are ASCII '1'..'9', anything else is empty."""

    grid: bytearray = field(default_factory=lambda: bytearray(b"." * N_CELLS))

    def __post_init__(self) -> None:
        self.grid = bytearray(self.grid)
        if len(self.grid) != N_CELLS:
            raise ValueError(
                f"a sudoku grid needs {N_CELLS} cells, got {len(self.grid)}"
            )

    def clean(self) -> Sudoku:
        """Return a copy in which every non-digit cell is '.'."""
        return Sudoku(bytes(b if _is_digit(b) else _EMPTY for b in self.grid))

    def __str__(self) -> str:
        return self.clean().grid.decode("ascii")

    def pretty(self) -> str:
        """Render the grid as a boxed, multi-line drawing."""
        lines = ["┌───────┬───────┬───────┐"]
        for row in range(9):
            if row and row % 3 == 0:
                lines.append("├───────┼───────┼───────┤")
            cells = self.grid[row * 9 : row * 9 + 9]
            parts = []
            for col, byte in enumerate(cells):
                if col % 3 == 0:
                    parts.append("│ ")
                parts.append(f"{chr(byte) if _is_digit(byte) else '.'} ")
            parts.append("│")
            lines.append("".join(parts))
        lines.append("└───────┴───────┴───────┘")
        return "\n".join(lines) + "\n"