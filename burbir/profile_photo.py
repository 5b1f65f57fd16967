"""Profile photos: small character matrices drawn with terminal colours."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from burbir.reader import BLANK, TapeReader

ROW_CAP = 100
COL_CAP = 100

NORMAL = "\x1b[0m"
RED = "\x1b[31m"
GREEN = "\x1b[32m"
BLUE = "\x1b[34m"

_COLORS = {"R": RED, "G": GREEN, "B": BLUE}


def colorize(color: str, char: str) -> str:
    """Return the character wrapped in the escape codes of 'R', 'G' or 'B'."""
    try:
        code = _COLORS[color]
    except KeyError:
        raise ValueError(f"unknown colour: {color!r}") from None
    return f"{code}{char}{NORMAL}"


def _truncating_mod(value: int, mod: int) -> int:
    """Remainder whose sign follows the dividend."""
    if mod == 0:
        raise ZeroDivisionError("modulo by zero")
    remainder = abs(value) % abs(mod)
    return remainder if value >= 0 else -remainder


class ProfilePhoto:
    """A rows x cols matrix of cells.

    A photo read from input holds characters, laid out as pairs of a colour
    letter and the character drawn in it. The arithmetic operations work on
    numeric cells.
    """

    def __init__(
        self,
        rows: int,
        cols: int,
        cells: Iterable[Sequence[Any]] | None = None,
    ) -> None:
        if not (0 <= rows <= ROW_CAP and 0 <= cols <= COL_CAP):
            raise ValueError(
                f"size {rows}x{cols} exceeds the {ROW_CAP}x{COL_CAP} limit"
            )
        if cells is None:
            grid = [tuple(0 for _ in range(cols)) for _ in range(rows)]
        else:
            grid = [tuple(row) for row in cells]
            if len(grid) != rows or any(len(row) != cols for row in grid):
                raise ValueError(f"cells do not form a {rows}x{cols} matrix")
        self._rows = rows
        self._cols = cols
        self._cells = tuple(grid)

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def cells(self) -> tuple[tuple[Any, ...], ...]:
        return self._cells

    def __repr__(self) -> str:
        return f"ProfilePhoto({self._rows}, {self._cols}, {self._cells!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProfilePhoto):
            return NotImplemented
        return self.same_size(other) and self._cells == other._cells

    __hash__ = None  # type: ignore[assignment]

    @classmethod
    def read(cls, reader: TapeReader, rows: int, cols: int) -> ProfilePhoto:
        """Read rows*cols non-blank characters from the tape, up to the mark."""
        chars = [c for c in reader.read_sentence() if c != BLANK]
        needed = rows * cols
        if len(chars) < needed:
            raise ValueError(
                f"expected {needed} characters, got {len(chars)}"
            )
        grid = [chars[r * cols:(r + 1) * cols] for r in range(rows)]
        return cls(rows, cols, grid)

    def render(self) -> str:
        """Return the photo drawn with colour codes, one line per row."""
        lines = []
        for row in self._cells:
            parts = []
            for j in range(0, self._cols, 2):
                pixel = row[j]
                shown = row[j + 1] if j < self._cols - 1 else " "
                if pixel in _COLORS:
                    parts.append(colorize(pixel, shown))
            lines.append("".join(parts) + "\n")
        return "".join(lines)

    @staticmethod
    def is_index_valid(i: int, j: int) -> bool:
        """Return True if (i, j) lies within the maximum photo size."""
        return 0 <= i < ROW_CAP and 0 <= j < COL_CAP

    def is_index_effective(self, i: int, j: int) -> bool:
        """Return True if (i, j) lies within this photo."""
        return 0 <= i < self._rows and 0 <= j < self._cols

    def diagonal(self, i: int) -> Any:
        """Return the cell at (i, i)."""
        if not self.is_index_effective(i, i):
            raise IndexError(f"diagonal index {i} out of range")
        return self._cells[i][i]

    def copy(self) -> ProfilePhoto:
        return ProfilePhoto(self._rows, self._cols, self._cells)

    def _require_same_size(self, other: ProfilePhoto) -> None:
        if not self.same_size(other):
            raise ValueError("photos differ in size")

    def add(self, other: ProfilePhoto) -> ProfilePhoto:
        self._require_same_size(other)
        return ProfilePhoto(
            self._rows,
            self._cols,
            [
                [a + b for a, b in zip(row_a, row_b)]
                for row_a, row_b in zip(self._cells, other._cells)
            ],
        )

    def subtract(self, other: ProfilePhoto) -> ProfilePhoto:
        self._require_same_size(other)
        return ProfilePhoto(
            self._rows,
            self._cols,
            [
                [a - b for a, b in zip(row_a, row_b)]
                for row_a, row_b in zip(self._cells, other._cells)
            ],
        )

    def _check_product(self, other: ProfilePhoto) -> None:
        if self._cols != other._rows:
            raise ValueError("column count does not match the other's row count")

    def multiply(self, other: ProfilePhoto) -> ProfilePhoto:
        self._check_product(other)
        columns = list(zip(*other._cells)) if other._rows else [()] * other._cols
        return ProfilePhoto(
            self._rows,
            other._cols,
            [
                [sum(a * b for a, b in zip(row, column)) for column in columns]
                for row in self._cells
            ],
        )

    def multiply_mod(self, other: ProfilePhoto, mod: int) -> ProfilePhoto:
        """Matrix product, reducing modulo mod after every added term.

        The remainder takes the sign of the running sum.
        """
        self._check_product(other)
        columns = list(zip(*other._cells)) if other._rows else [()] * other._cols
        result = []
        for row in self._cells:
            out_row = []
            for column in columns:
                acc = 0
                for a, b in zip(row, column):
                    acc = _truncating_mod(acc + a * b, mod)
                out_row.append(acc)
            result.append(out_row)
        return ProfilePhoto(self._rows, other._cols, result)

    def scale(self, factor: int) -> ProfilePhoto:
        return ProfilePhoto(
            self._rows,
            self._cols,
            [[cell * factor for cell in row] for row in self._cells],
        )

    def negation(self) -> ProfilePhoto:
        return self.scale(-1)

    def transpose(self) -> ProfilePhoto:
        return ProfilePhoto(
            self._cols,
            self._rows,
            [list(column) for column in zip(*self._cells)] if self._rows else [],
        )

    def determinant(self) -> float:
        """Cofactor expansion along the first row."""
        if not self.is_square() or self._rows == 0:
            raise ValueError("determinant needs a non-empty square photo")
        return float(self._det(self._cells))

    @classmethod
    def _det(cls, cells: tuple[tuple[Any, ...], ...]) -> Any:
        size = len(cells)
        if size == 1:
            return cells[0][0]
        if size == 2:
            return cells[0][0] * cells[1][1] - cells[1][0] * cells[0][1]
        total = 0
        sign = 1
        for i, pivot in enumerate(cells[0]):
            minor = tuple(row[:i] + row[i + 1:] for row in cells[1:])
            total += sign * pivot * cls._det(minor)
            sign = -sign
        return total

    def same_size(self, other: ProfilePhoto) -> bool:
        return self._rows == other._rows and self._cols == other._cols

    def count(self) -> int:
        return self._rows * self._cols

    def is_square(self) -> bool:
        return self._rows == self._cols

    def is_symmetric(self) -> bool:
        if not self.is_square():
            return False
        return self._cells == tuple(zip(*self._cells))

    def is_identity(self) -> bool:
        if not self.is_square():
            return False
        return all(
            cell == (1 if i == j else 0)
            for i, row in enumerate(self._cells)
            for j, cell in enumerate(row)
        )

    def is_sparse(self) -> bool:
        """Return True if at most 5% of the cells are non-zero."""
        nonzero = sum(1 for row in self._cells for cell in row if cell != 0)
        return nonzero <= 0.05 * self.count()