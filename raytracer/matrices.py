"""Square matrices and the 4x4 transformations built from them."""

from __future__ import annotations

import math
from typing import Iterable, Optional

from raytracer.tuples import Point, Vec, cross, unit_vector
from raytracer.utils import compare_doubles


class Matrix:
    """A square matrix stored in row-major order."""

    __slots__ = ("size", "_data")

    def __init__(self, size: int, data: Optional[Iterable[float]] = None):
        if size < 1:
            raise ValueError("matrix size must be positive")
        self.size = size
        if data is None:
            self._data = [0.0] * (size * size)
        else:
            values = [float(v) for v in data]
            if len(values) != size * size:
                raise ValueError(f"a {size}x{size} matrix needs {size * size} values, got {len(values)}")
            self._data = values

    def get(self, row: int, col: int) -> float:
        return self._data[row * self.size + col]

    def set(self, value: float, row: int, col: int) -> None:
        self._data[row * self.size + col] = value

    def _transform_point(self, point: Point) -> Point:
        self._require_affine()
        g = self.get
        return Point(
            g(0, 0) * point.x + g(0, 1) * point.y + g(0, 2) * point.z + g(0, 3),
            g(1, 0) * point.x + g(1, 1) * point.y + g(1, 2) * point.z + g(1, 3),
            g(2, 0) * point.x + g(2, 1) * point.y + g(2, 2) * point.z + g(2, 3),
        )

    def _transform_vec(self, vec: Vec) -> Vec:
        self._require_affine()
        g = self.get
        return Vec(
            g(0, 0) * vec.x + g(0, 1) * vec.y + g(0, 2) * vec.z,
            g(1, 0) * vec.x + g(1, 1) * vec.y + g(1, 2) * vec.z,
            g(2, 0) * vec.x + g(2, 1) * vec.y + g(2, 2) * vec.z,
        )

    def _require_affine(self) -> None:
        if self.size != 4:
            raise ValueError("only 4x4 matrices transform points and vectors")

    def __mul__(self, other):
        if isinstance(other, Matrix):
            if other.size != self.size:
                raise ValueError("cannot multiply matrices of different sizes")
            n = self.size
            return Matrix(
                n,
                (
                    sum(self.get(row, k) * other.get(k, col) for k in range(n))
                    for row in range(n)
                    for col in range(n)
                ),
            )
        if isinstance(other, Point):
            return self._transform_point(other)
        if isinstance(other, Vec):
            return self._transform_vec(other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Point):
            return self._transform_point(other)
        if isinstance(other, Vec):
            return self._transform_vec(other)
        return NotImplemented

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        if other.size != self.size:
            return False
        return all(compare_doubles(a, b) for a, b in zip(self._data, other._data))

    def __repr__(self) -> str:
        rows = (
            " ".join(f"{self.get(row, col):g}" for col in range(self.size))
            for row in range(self.size)
        )
        return f"Matrix({self.size}, [{'; '.join(rows)}])"


def transpose(matrix: Matrix) -> Matrix:
    """Matrix with rows and columns swapped."""
    n = matrix.size
    return Matrix(n, (matrix.get(col, row) for row in range(n) for col in range(n)))


def submatrix(matrix: Matrix, delete_row: int, delete_col: int) -> Matrix:
    """Matrix one size smaller with the given row and column removed."""
    n = matrix.size
    if n < 2:
        raise ValueError("cannot take a submatrix of a 1x1 matrix")
    return Matrix(
        n - 1,
        (
            matrix.get(row, col)
            for row in range(n)
            if row != delete_row
            for col in range(n)
            if col != delete_col
        ),
    )


def determinant(matrix: Matrix) -> float:
    n = matrix.size
    if n == 1:
        return matrix.get(0, 0)
    if n == 2:
        return matrix.get(0, 0) * matrix.get(1, 1) - matrix.get(0, 1) * matrix.get(1, 0)
    return sum(matrix.get(0, col) * cofactor(matrix, 0, col) for col in range(n))


def minor(matrix: Matrix, delete_row: int, delete_col: int) -> float:
    return determinant(submatrix(matrix, delete_row, delete_col))


def cofactor(matrix: Matrix, row: int, col: int) -> float:
    sign = 1 if (row + col) % 2 == 0 else -1
    return sign * minor(matrix, row, col)


def is_invertable(matrix: Matrix) -> bool:
    return determinant(matrix) != 0


def inverse(matrix: Matrix) -> Matrix:
    """Inverse of the matrix; raises ValueError when it has none."""
    det = determinant(matrix)
    if det == 0:
        raise ValueError("matrix is not invertible")
    n = matrix.size
    result = Matrix(n)
    for row in range(n):
        for col in range(n):
            result.set(cofactor(matrix, row, col) / det, col, row)
    return result


def identity() -> Matrix:
    return Matrix(4, [1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1])


def translation(x: float, y: float, z: float) -> Matrix:
    return Matrix(4, [1, 0, 0, x, 0, 1, 0, y, 0, 0, 1, z, 0, 0, 0, 1])


def scaling(x: float, y: float, z: float) -> Matrix:
    return Matrix(4, [x, 0, 0, 0, 0, y, 0, 0, 0, 0, z, 0, 0, 0, 0, 1])


def rotation_x(radians: float) -> Matrix:
    c, s = math.cos(radians), math.sin(radians)
    return Matrix(4, [1, 0, 0, 0, 0, c, -s, 0, 0, s, c, 0, 0, 0, 0, 1])


def rotation_y(radians: float) -> Matrix:
    c, s = math.cos(radians), math.sin(radians)
    return Matrix(4, [c, 0, s, 0, 0, 1, 0, 0, -s, 0, c, 0, 0, 0, 0, 1])


def rotation_z(radians: float) -> Matrix:
    c, s = math.cos(radians), math.sin(radians)
    return Matrix(4, [c, -s, 0, 0, s, c, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1])


def shearing(x_y: float, x_z: float, y_x: float, y_z: float, z_x: float, z_y: float) -> Matrix:
    """Shear where, for example, x_y moves x in proportion to y."""
    return Matrix(4, [1, x_y, x_z, 0, y_x, 1, y_z, 0, z_x, z_y, 1, 0, 0, 0, 0, 1])


def view_transform(from_point: Point, to_point: Point, up: Vec) -> Matrix:
    """Transformation placing the eye at from_point looking towards to_point."""
    forward = unit_vector(to_point - from_point)
    left = cross(forward, unit_vector(up))
    true_up = cross(left, forward)
    orientation = Matrix(
        4,
        [
            left.x, left.y, left.z, 0,
            true_up.x, true_up.y, true_up.z, 0,
            -forward.x, -forward.y, -forward.z, 0,
            0, 0, 0, 1,
        ],
    )
    return orientation * translation(-from_point.x, -from_point.y, -from_point.z)