"""Dense matrices and the 4x4 affine transformations built from them."""

from __future__ import annotations

import math

from raytracer.tuples import Tuple, almost_equals


class Matrix:
    """A rectangular matrix of floats."""

    __slots__ = ("_data", "_columns", "_inverse")

    def __init__(self, rows):
        data = [[float(value) for value in row] for row in rows]
        widths = {len(row) for row in data}
        if len(widths) > 1:
            raise ValueError("all matrix rows must have the same length")
        self._data = data
        self._columns = widths.pop() if widths else 0
        self._inverse = None

    @classmethod
    def _wrap(cls, data, columns):
        matrix = object.__new__(cls)
        matrix._data = data
        matrix._columns = columns
        matrix._inverse = None
        return matrix

    @classmethod
    def zeros(cls, rows, columns):
        """Return a ``rows`` x ``columns`` matrix filled with zeros."""
        if rows < 0 or columns < 0:
            raise ValueError("matrix dimensions must not be negative")
        return cls._wrap([[0.0] * columns for _ in range(rows)], columns)

    @property
    def rows(self):
        return len(self._data)

    @property
    def columns(self):
        return self._columns

    def tolist(self):
        return [row[:] for row in self._data]

    def _check_index(self, row, column):
        if not 0 <= row < self.rows or not 0 <= column < self._columns:
            raise IndexError(f"matrix index ({row}, {column}) out of range")

    def _require_square(self):
        if self.rows != self._columns:
            raise ValueError("operation requires a square matrix")

    def __getitem__(self, index):
        row, column = index
        self._check_index(row, column)
        return self._data[row][column]

    def __setitem__(self, index, value):
        row, column = index
        self._check_index(row, column)
        self._data[row][column] = float(value)
        self._inverse = None

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.rows != other.rows or self._columns != other._columns:
            return False
        return all(
            almost_equals(a, b)
            for row_a, row_b in zip(self._data, other._data)
            for a, b in zip(row_a, row_b)
        )

    __hash__ = None

    def __mul__(self, other):
        if isinstance(other, Matrix):
            if self._columns != other.rows:
                raise ValueError("matrix dimensions do not agree for multiplication")
            columns = list(zip(*other._data))
            data = [
                [sum(a * b for a, b in zip(row, column)) for column in columns]
                for row in self._data
            ]
            return Matrix._wrap(data, other._columns)
        if isinstance(other, Tuple):
            if self.rows != 4 or self._columns != 4:
                raise ValueError("only a 4x4 matrix can transform a tuple")
            x, y, z, w = other
            values = [r[0] * x + r[1] * y + r[2] * z + r[3] * w for r in self._data]
            return type(other)._build(*values)
        return NotImplemented

    def __str__(self):
        return "".join(
            " ".join(f"{value:g}" for value in row) + "\n" for row in self._data
        )

    def __repr__(self):
        return f"Matrix({self._data!r})"

    def transpose(self):
        return Matrix._wrap([list(column) for column in zip(*self._data)], self.rows)

    def determinant(self):
        self._require_square()
        data = self._data
        size = self.rows
        if size == 0:
            return 1.0
        if size == 1:
            return data[0][0]
        if size == 2:
            return data[0][0] * data[1][1] - data[1][0] * data[0][1]
        return sum(value * self.cofactor(0, column) for column, value in enumerate(data[0]))

    def submatrix(self, row, column):
        """Return a copy with the given row and column removed."""
        self._check_index(row, column)
        data = [
            [value for c, value in enumerate(values) if c != column]
            for r, values in enumerate(self._data)
            if r != row
        ]
        return Matrix._wrap(data, self._columns - 1)

    def minor(self, row, column):
        return self.submatrix(row, column).determinant()

    def cofactor(self, row, column):
        minor = self.minor(row, column)
        return -minor if (row + column) % 2 else minor

    def is_invertible(self):
        return not almost_equals(0, self.determinant())

    def inverse(self):
        """Return the inverse; raise ValueError when the matrix is singular."""
        if self._inverse is None:
            determinant = self.determinant()
            if almost_equals(0, determinant):
                raise ValueError("matrix is not invertible")
            size = self.rows
            cofactors = [
                [self.cofactor(row, column) / determinant for column in range(size)]
                for row in range(size)
            ]
            self._inverse = [list(column) for column in zip(*cofactors)]
        return Matrix._wrap([row[:] for row in self._inverse], self._columns)

    def translate(self, x, y, z):
        return translation(x, y, z) * self

    def scale(self, x, y, z):
        return scaling(x, y, z) * self

    def rotate_x(self, radians):
        return rotation_x(radians) * self

    def rotate_y(self, radians):
        return rotation_y(radians) * self

    def rotate_z(self, radians):
        return rotation_z(radians) * self

    def shear(self, x_y, x_z, y_x, y_z, z_x, z_y):
        return shearing(x_y, x_z, y_x, y_z, z_x, z_y) * self


def identity():
    return Matrix([[1.0 if r == c else 0.0 for c in range(4)] for r in range(4)])


def translation(x, y, z):
    return Matrix([[1, 0, 0, x], [0, 1, 0, y], [0, 0, 1, z], [0, 0, 0, 1]])


def scaling(x, y, z):
    return Matrix([[x, 0, 0, 0], [0, y, 0, 0], [0, 0, z, 0], [0, 0, 0, 1]])


def rotation_x(radians):
    c, s = math.cos(radians), math.sin(radians)
    return Matrix([[1, 0, 0, 0], [0, c, -s, 0], [0, s, c, 0], [0, 0, 0, 1]])


def rotation_y(radians):
    c, s = math.cos(radians), math.sin(radians)
    return Matrix([[c, 0, s, 0], [0, 1, 0, 0], [-s, 0, c, 0], [0, 0, 0, 1]])


def rotation_z(radians):
    c, s = math.cos(radians), math.sin(radians)
    return Matrix([[c, -s, 0, 0], [s, c, 0, 0], [0, 0, 1, 0], [0, 0, 0, 1]])


def shearing(x_y, x_z, y_x, y_z, z_x, z_y):
    return Matrix([[1, x_y, x_z, 0], [y_x, 1, y_z, 0], [z_x, z_y, 1, 0], [0, 0, 0, 1]])


def view_transform(from_point, to_point, up):
    """Return the matrix that orients the world relative to an eye."""
    forward = (to_point - from_point).normalize()
    left = forward.cross(up.normalize())
    true_up = left.cross(forward)
    orientation = Matrix(
        [
            [left.x, left.y, left.z, 0],
            [true_up.x, true_up.y, true_up.z, 0],
            [-forward.x, -forward.y, -forward.z, 0],
            [0, 0, 0, 1],
        ]
    )
    return orientation * translation(-from_point.x, -from_point.y, -from_point.z)