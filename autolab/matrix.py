"""A dense matrix of numbers with the usual linear-algebra operations."""

from __future__ import annotations

import math
import numbers
from collections.abc import Callable, Iterable, Iterator
from typing import Any

Number = Any


def _format(value: Number) -> str:
    if isinstance(value, float):
        return format(value, ".6g")
    return str(value)


class Matrix:
    """A rows x cols matrix stored as a list of rows."""

    def __init__(self, rows: int, cols: int, fill: Number = 0.0) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("Matrix dimensions must not be negative")
        self.rows = rows
        self.cols = cols
        self._data = [[fill] * cols for _ in range(rows)]

    @classmethod
    def _wrap(cls, data: list[list[Number]], cols: int | None = None) -> Matrix:
        matrix = cls(0, 0)
        matrix._data = data
        matrix.rows = len(data)
        matrix.cols = len(data[0]) if data else (cols or 0)
        return matrix

    @staticmethod
    def from_rows(rows: Iterable[Iterable[Number]]) -> Matrix:
        """Build a matrix from an iterable of equally long rows."""
        data = [list(row) for row in rows]
        if data and any(len(row) != len(data[0]) for row in data):
            raise ValueError("All rows must have the same length")
        return Matrix._wrap(data)

    @staticmethod
    def from_vector(values: Iterable[Number]) -> Matrix:
        """Build a single-row matrix."""
        return Matrix._wrap([list(values)])

    @staticmethod
    def zeroes(rows: int, cols: int) -> Matrix:
        return Matrix(rows, cols)

    @staticmethod
    def ones(rows: int, cols: int) -> Matrix:
        return Matrix(rows, cols, 1)

    @staticmethod
    def identity(size: int) -> Matrix:
        result = Matrix(size, size)
        for i, row in enumerate(result._data):
            row[i] = 1.0
        return result

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.cols

    def __getitem__(self, key: tuple[int, int]) -> Number:
        i, j = key
        return self._data[i][j]

    def __iter__(self) -> Iterator[list[Number]]:
        for row in self._data:
            yield list(row)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix.from_rows({self._data!r})"

    def __str__(self) -> str:
        if not self._data:
            return "Empty matrix!\n"
        lines = ["["]
        for row in self._data:
            body = ", ".join(_format(v) for v in row)
            lines.append("[" + body + ("]" if row else ""))
        lines.append("]")
        return "\n".join(lines)

    def _require_square(self, what: str) -> None:
        if self.rows != self.cols:
            raise ValueError(f"{what} is only defined for square matrices")

    def _map(self, func: Callable[[Number], Number]) -> Matrix:
        return Matrix._wrap([[func(v) for v in row] for row in self._data], self.cols)

    @staticmethod
    def _combine(a: Matrix, b: Matrix, op: Callable[[Number, Number], Number]) -> Matrix:
        if a.shape != b.shape:
            raise ValueError("Matrices must have same dimensions")
        data = [[op(x, y) for x, y in zip(ra, rb)] for ra, rb in zip(a._data, b._data)]
        return Matrix._wrap(data, a.cols)

    def trace(self) -> Number:
        self._require_square("Trace")
        return sum((row[i] for i, row in enumerate(self._data)), 0.0)

    def determinant(self) -> Number:
        self._require_square("Determinant")
        d = self._data
        if self.rows == 0:
            return 0.0
        if self.rows == 1:
            return d[0][0]
        if self.rows == 2:
            return d[0][0] * d[1][1] - d[0][1] * d[1][0]
        return sum(
            (-1) ** i * value * self.minor(0, i).determinant()
            for i, value in enumerate(d[0])
        )

    def minor(self, row: int, col: int) -> Matrix:
        """The matrix with the given row and column removed."""
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError("Minor position out of range")
        data = [
            [v for j, v in enumerate(values) if j != col]
            for i, values in enumerate(self._data)
            if i != row
        ]
        return Matrix._wrap(data, self.cols - 1)

    def transpose(self) -> Matrix:
        if self.rows == 0 or self.cols == 0:
            return Matrix(self.cols, self.rows)
        return Matrix._wrap([list(col) for col in zip(*self._data)])

    def inverse(self) -> Matrix:
        self._require_square("Inverse")
        det = self.determinant()
        if det == 0:
            raise ValueError("Determinant is zero, inverse does not exist")
        d = self._data
        n = self.rows
        if n == 1:
            return Matrix._wrap([[1 / d[0][0]]])
        if n == 2:
            return Matrix._wrap([
                [d[1][1] / det, -d[0][1] / det],
                [-d[1][0] / det, d[0][0] / det],
            ])
        cofactors = [
            [(-1) ** (i + j) * self.minor(i, j).determinant() / det for j in range(n)]
            for i in range(n)
        ]
        return Matrix._wrap(cofactors).transpose()

    @staticmethod
    def add(a: Matrix, b: Matrix) -> Matrix:
        return Matrix._combine(a, b, lambda x, y: x + y)

    @staticmethod
    def subtract(a: Matrix, b: Matrix) -> Matrix:
        return Matrix._combine(a, b, lambda x, y: x - y)

    @staticmethod
    def dot(a: Matrix, b: Matrix) -> Matrix:
        """Matrix product of ``a`` and ``b``."""
        if a.cols != b.rows:
            raise ValueError("Matrices must have compatible dimensions")
        columns = list(zip(*b._data)) if b.rows else [()] * b.cols
        data = [[sum(x * y for x, y in zip(row, col)) for col in columns] for row in a._data]
        return Matrix._wrap(data, b.cols)

    def magnitude(self) -> float:
        return math.sqrt(sum(v * v for row in self._data for v in row))

    def normalize(self) -> Matrix:
        mag = self.magnitude()
        if mag == 0:
            raise ValueError("Cannot normalize a zero matrix")
        return self._map(lambda v: v / mag)

    def __add__(self, other: object) -> Matrix:
        if isinstance(other, Matrix):
            return Matrix.add(self, other)
        if isinstance(other, numbers.Number):
            return self._map(lambda v: v + other)
        return NotImplemented

    def __sub__(self, other: object) -> Matrix:
        if isinstance(other, Matrix):
            return Matrix.subtract(self, other)
        if isinstance(other, numbers.Number):
            return self._map(lambda v: v - other)
        return NotImplemented

    def __neg__(self) -> Matrix:
        return self._map(lambda v: -v)

    def __mul__(self, other: object) -> Matrix:
        if isinstance(other, Matrix):
            return Matrix._combine(self, other, lambda x, y: x * y)
        return NotImplemented


def main(argv: Iterable[str] | None = None) -> int:
    """Print a demonstration of the matrix operations."""
    mat1 = Matrix(3, 3, 1)
    mat2 = Matrix.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
    mat3 = Matrix.from_vector([1, 2, 3])
    mat31 = Matrix.identity(5)
    mat32 = Matrix.from_rows([[0.0, 1.0, 2.0], [1.0, 2.0, 3.0], [3.0, 1.0, 1.0]])
    mat4 = Matrix.from_rows(mat2)

    inv = mat31.inverse()
    sections = [
        ("Matrix 1:\n", mat1),
        ("Matrix 2:\n", mat2),
        ("Matrix 3:\n", mat3),
        ("Matrix 4 (Copy of Matrix 2):\n", mat4),
        ("Matrix 5 (Matrix 2 + Matrix 1):\n", mat2 + mat1),
        ("Matrix 6 (Matrix 2 - Matrix 1):\n", mat2 - mat1),
        ("Matrix 7 (Negation of Matrix 2):\n", -mat2),
        ("Matrix 8 (Matrix 2 * Matrix 3 - Element-wise):\n", mat2 * mat2),
        ("Matrix 9 (Matrix 2 * Matrix 2 - Matrix multiplication):\n", Matrix.dot(mat2, mat2)),
        ("Matrix 10 (Matrix 2 + 5 - Scalar addition):\n", mat2 + 5),
        ("Matrix 11 (Matrix 2 - 2 - Scalar subtraction):\n", mat2 - 2),
        ("Matrix 12 (Matrix 2 - Matrix 1 - Static addition):\n", Matrix.add(mat2, mat1)),
        ("Matrix 13 (Matrix 2 - Matrix 1 - Static  subtraction):\n", Matrix.subtract(mat2, mat1)),
    ]
    for label, matrix in sections:
        print(label + str(matrix))
    print("Determinant of Matrix 31: " + _format(float(mat31.determinant())))
    print("Inverse of Matrix 31:\n" + str(inv))
    print("Inverse of Matrix 32:\n" + str(mat32.inverse()))
    print("Inverse of Matrix 31 * Matrix 31:\n" + str(Matrix.dot(mat31, inv)))
    print("Trace of Matrix 2: " + _format(float(mat31.trace())))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())