"""Dense two-dimensional matrix of floats."""

from __future__ import annotations

import math
from numbers import Real


class Matrix:
    """A rows x cols matrix of floats, initialised to zero."""

    def __init__(self, rows: int = 5, cols: int = 5) -> None:
        if rows < 0 or cols < 0:
            raise ValueError(f"invalid dimensions {rows} x {cols}")
        self.rows = rows
        self.cols = cols
        self._data = [[0.0] * cols for _ in range(rows)]

    def copy(self) -> Matrix:
        result = Matrix(self.rows, self.cols)
        result._data = [list(row) for row in self._data]
        return result

    def fill(self, value: float) -> None:
        """Set every cell to the given value."""
        self._data = [[value] * self.cols for _ in range(self.rows)]

    def identity(self) -> None:
        """Turn this square matrix into the identity matrix."""
        if self.rows != self.cols:
            raise ValueError("identity requires a square matrix")
        self.fill(0.0)
        for i in range(self.rows):
            self._data[i][i] = 1.0

    def _check(self, key: tuple[int, int]) -> tuple[int, int]:
        x, y = key
        if not (0 <= x < self.rows and 0 <= y < self.cols):
            raise IndexError(f"Error with index ({x}, {y})")
        return x, y

    def __getitem__(self, key: tuple[int, int]) -> float:
        x, y = self._check(key)
        return self._data[x][y]

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        x, y = self._check(key)
        self._data[x][y] = value

    def pop_min(self) -> tuple[float, int, int]:
        """Return the smallest positive value with its position and zero that cell.

        When no cell is positive, the result is (inf, 0, 0) and cell (0, 0) is zeroed.
        """
        best, bx, by = math.inf, 0, 0
        for i, row in enumerate(self._data):
            for j, value in enumerate(row):
                if 0 < value < best:
                    best, bx, by = value, i, j
        if self.rows and self.cols:
            self._data[bx][by] = 0.0
        return best, bx, by

    def _same_shape(self, other: Matrix) -> None:
        if (self.rows, self.cols) != (other.rows, other.cols):
            raise ValueError(
                f"Error with dimensions: {self.rows} x {self.cols} "
                f"and {other.rows} x {other.cols}"
            )

    def _map(self, fn) -> Matrix:
        result = Matrix(self.rows, self.cols)
        result._data = [[fn(i, j, v) for j, v in enumerate(row)] for i, row in enumerate(self._data)]
        return result

    def __add__(self, other: Matrix | float) -> Matrix:
        if isinstance(other, Matrix):
            self._same_shape(other)
            return self._map(lambda i, j, v: v + other._data[i][j])
        if isinstance(other, Real):
            return self._map(lambda i, j, v: v + other)
        return NotImplemented

    def __sub__(self, other: Matrix | float) -> Matrix:
        if isinstance(other, Matrix):
            self._same_shape(other)
            return self._map(lambda i, j, v: v - other._data[i][j])
        if isinstance(other, Real):
            return self._map(lambda i, j, v: v - other)
        return NotImplemented

    def __mul__(self, other: Matrix | float) -> Matrix:
        if isinstance(other, Matrix):
            if self.cols != other.rows:
                raise ValueError("Error with dimensions.")
            result = Matrix(self.rows, other.cols)
            columns = list(zip(*other._data))
            result._data = [
                [sum(a * b for a, b in zip(row, col)) for col in columns]
                if columns
                else [0.0] * other.cols
                for row in self._data
            ]
            return result
        if isinstance(other, Real):
            return self._map(lambda i, j, v: v * other)
        return NotImplemented

    def __rmul__(self, other: float) -> Matrix:
        if isinstance(other, Real):
            return self * other
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (self.rows, self.cols) == (other.rows, other.cols) and self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix({self.rows}, {self.cols}, {self._data!r})"

    def display(self) -> None:
        """Print the dimensions followed by one line per row."""
        print(f"Dimensions: {self.rows} x {self.cols}")
        for row in self._data:
            print("".join(f"{value:g} " for value in row))