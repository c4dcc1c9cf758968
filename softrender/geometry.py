"""Small vector and matrix types used by the renderer."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, List, Union

Number = Union[int, float]


def _component(vector, index: int) -> float:
    components = tuple(vector)
    if not isinstance(index, int) or not 0 <= index < len(components):
        raise IndexError(f"vector index out of range: {index!r}")
    return components[index]


def _add(lhs, rhs):
    if type(rhs) is not type(lhs):
        return NotImplemented
    return type(lhs)(*(a + b for a, b in zip(lhs, rhs)))


def _sub(lhs, rhs):
    if type(rhs) is not type(lhs):
        return NotImplemented
    return type(lhs)(*(a - b for a, b in zip(lhs, rhs)))


def _mul(vector, scalar):
    if not isinstance(scalar, (int, float)):
        return NotImplemented
    return type(vector)(*(a * scalar for a in vector))


def _truediv(vector, scalar):
    if not isinstance(scalar, (int, float)):
        return NotImplemented
    return type(vector)(*(a / scalar for a in vector))


@dataclass(frozen=True)
class Vec2:
    """A two-component vector."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __len__(self) -> int:
        return 2

    def __getitem__(self, index: int) -> float:
        return _component(self, index)

    def __add__(self, other: "Vec2") -> "Vec2":
        return _add(self, other)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return _sub(self, other)

    def __mul__(self, scalar: Number) -> "Vec2":
        return _mul(self, scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: Number) -> "Vec2":
        return _truediv(self, scalar)

    def __neg__(self) -> "Vec2":
        return Vec2(-self.x, -self.y)


@dataclass(frozen=True)
class Vec3:
    """A three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __len__(self) -> int:
        return 3

    def __getitem__(self, index: int) -> float:
        return _component(self, index)

    def __add__(self, other: "Vec3") -> "Vec3":
        return _add(self, other)

    def __sub__(self, other: "Vec3") -> "Vec3":
        return _sub(self, other)

    def __mul__(self, scalar: Number) -> "Vec3":
        return _mul(self, scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: Number) -> "Vec3":
        return _truediv(self, scalar)

    def __neg__(self) -> "Vec3":
        return Vec3(-self.x, -self.y, -self.z)

    def norm(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self, length: float = 1) -> "Vec3":
        """Return a vector in the same direction with the given length."""
        current = self.norm()
        if current == 0:
            raise ValueError("cannot normalize a zero-length vector")
        return self * (length / current)


def dot(a, b) -> float:
    """Dot product of two vectors of the same kind."""
    if type(a) is not type(b):
        raise TypeError("dot product needs two vectors of the same kind")
    return sum(p * q for p, q in zip(a, b))


def cross(a: Vec3, b: Vec3) -> Vec3:
    """Cross product of two 3D vectors."""
    return Vec3(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


class Matrix:
    """A dense row-major matrix of floats, zero-filled on creation."""

    def __init__(self, rows: int = 4, cols: int = 4) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("matrix dimensions must not be negative")
        self.rows = rows
        self.cols = cols
        self._m: List[List[float]] = [[0.0] * cols for _ in range(rows)]

    def __getitem__(self, index: int) -> List[float]:
        return self._m[index]

    def __iter__(self) -> Iterator[List[float]]:
        return iter(self._m)

    def __len__(self) -> int:
        return self.rows

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._m == other._m

    def __repr__(self) -> str:
        return f"Matrix({self._m!r})"

    @staticmethod
    def orthographic(
        left: float, right: float, bottom: float, top: float, near: float, far: float
    ) -> "Matrix":
        """Orthographic projection mapping the given box onto [-1, 1]^3."""
        result = Matrix(4, 4)
        result[0][0] = 2.0 / (right - left)
        result[1][1] = 2.0 / (top - bottom)
        result[2][2] = -2.0 / (far - near)
        result[0][3] = -(right + left) / (right - left)
        result[1][3] = -(top + bottom) / (top - bottom)
        result[2][3] = -(far + near) / (far - near)
        result[3][3] = 1.0
        return result