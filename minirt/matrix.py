"""3x3 matrices for rotations and their inverses."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple, Union, overload

from minirt.vector import Vec, double_equals

Row = Tuple[float, float, float]

_COFACTOR_SIGNS = ((1, -1, 1), (-1, 1, -1), (1, -1, 1))


@dataclass(frozen=True)
class Mat3:
    """An immutable 3x3 matrix stored row by row."""

    rows: Tuple[Row, Row, Row]

    def __post_init__(self) -> None:
        rows = tuple(tuple(float(x) for x in row) for row in self.rows)
        if len(rows) != 3 or any(len(row) != 3 for row in rows):
            raise ValueError("Mat3 needs exactly 3 rows of 3 values")
        object.__setattr__(self, "rows", rows)

    @classmethod
    def _from(cls, rows: Iterable[Iterable[float]]) -> Mat3:
        return cls(tuple(tuple(r) for r in rows))  # type: ignore[arg-type]

    @staticmethod
    def identity() -> Mat3:
        return Mat3(((1, 0, 0), (0, 1, 0), (0, 0, 1)))

    @staticmethod
    def zero() -> Mat3:
        return Mat3(((0, 0, 0), (0, 0, 0), (0, 0, 0)))

    def __iter__(self) -> Iterator[Row]:
        return iter(self.rows)

    def _values(self) -> Iterator[float]:
        return (x for row in self.rows for x in row)

    def approx_eq(self, other: Mat3) -> bool:
        return all(double_equals(a, b) for a, b in zip(self._values(), other._values()))

    def add(self, other: Mat3) -> Mat3:
        return Mat3._from(
            (a + b for a, b in zip(ra, rb)) for ra, rb in zip(self.rows, other.rows)
        )

    def subtract(self, other: Mat3) -> Mat3:
        return Mat3._from(
            (a - b for a, b in zip(ra, rb)) for ra, rb in zip(self.rows, other.rows)
        )

    def scale(self, a: float) -> Mat3:
        return Mat3._from((a * x for x in row) for row in self.rows)

    def prod(self, other: Mat3) -> Mat3:
        cols = list(zip(*other.rows))
        return Mat3._from(
            (sum(a * b for a, b in zip(row, col)) for col in cols) for row in self.rows
        )

    def apply(self, v: Vec) -> Vec:
        """Matrix-vector product."""
        return Vec(*(sum(a * b for a, b in zip(row, v)) for row in self.rows))

    @overload
    def __matmul__(self, other: Mat3) -> Mat3: ...

    @overload
    def __matmul__(self, other: Vec) -> Vec: ...

    def __matmul__(self, other: Union[Mat3, Vec]) -> Union[Mat3, Vec]:
        if isinstance(other, Vec):
            return self.apply(other)
        return self.prod(other)

    def transpose(self) -> Mat3:
        return Mat3._from(zip(*self.rows))

    def determinant(self) -> float:
        m = self.rows
        return (
            m[0][0] * m[1][1] * m[2][2]
            + m[1][0] * m[2][1] * m[0][2]
            + m[2][0] * m[0][1] * m[1][2]
            - m[0][0] * m[2][1] * m[1][2]
            - m[1][0] * m[0][1] * m[2][2]
            - m[2][0] * m[1][1] * m[0][2]
        )

    def cofactor(self) -> Mat3:
        """Apply the checkerboard cofactor signs element-wise."""
        return Mat3._from(
            (s * x for s, x in zip(signs, row))
            for signs, row in zip(_COFACTOR_SIGNS, self.rows)
        )

    def _minor_at(self, row: int, col: int) -> float:
        m = self.rows
        i0, i1 = (row + 1) % 3, (row + 2) % 3
        j0, j1 = (col + 1) % 3, (col + 2) % 3
        return m[i0][j0] * m[i1][j1] - m[i0][j1] * m[i1][j0]

    def minor(self) -> Mat3:
        """Matrix of signed 2x2 minors taken with cyclic indexing."""
        return Mat3._from((self._minor_at(r, c) for c in range(3)) for r in range(3))

    def adjoint(self) -> Mat3:
        return self.minor().transpose()

    def inverse(self) -> Mat3:
        """Inverse matrix; a singular matrix gives the zero matrix."""
        det = self.determinant()
        if double_equals(det, 0):
            return Mat3.zero()
        return self.adjoint().scale(1 / det)

    def rotate_euler(self, euler: Vec) -> Mat3:
        """Post-multiply by rotations about x, then y, then z."""
        cx, sx = math.cos(euler.x), math.sin(euler.x)
        cy, sy = math.cos(euler.y), math.sin(euler.y)
        cz, sz = math.cos(euler.z), math.sin(euler.z)
        rx = Mat3(((1, 0, 0), (0, cx, -sx), (0, sx, cx)))
        ry = Mat3(((cy, 0, sy), (0, 1, 0), (-sy, 0, cy)))
        rz = Mat3(((cz, -sz, 0), (sz, cz, 0), (0, 0, 1)))
        return self.prod(rx).prod(ry).prod(rz)


def rotation_between(u: Vec, v: Vec) -> Mat3:
    """Rotation taking unit vector u onto unit vector v.

    Exactly opposite vectors give the identity.
    """
    identity = Mat3.identity()
    cp = u.cross(v)
    c = u.dot(v)
    if c == -1:
        return identity
    skew = Mat3(((0, -cp.z, cp.y), (cp.z, 0, -cp.x), (-cp.y, cp.x, 0)))
    squared = skew.prod(skew).scale(1 / (1 + c))
    return identity.add(skew).add(squared)