"""Column-major 4x4 and 3x3 matrices and the graphics transforms built from them."""

from __future__ import annotations

import math
from typing import Iterable, Iterator

from ghostchase.vector import VERY_SMALL, Vec3, Vec4, cross, dot, normalize

DEGREES_TO_RADIANS = math.pi / 180.0


class Matrix4:
    """A 4x4 matrix stored as 16 floats in column-major order.

    Index layout::

        0  4  8  12
        1  5  9  13
        2  6  10 14
        3  7  11 15
    """

    __slots__ = ("_m",)

    def __init__(self, values: Iterable[float] | None = None) -> None:
        if values is None:
            self._m = [0.0] * 16
            for i in (0, 5, 10, 15):
                self._m[i] = 1.0
            return
        m = [float(v) for v in values]
        if len(m) != 16:
            raise ValueError(f"Matrix4 needs 16 values, got {len(m)}")
        self._m = m

    @classmethod
    def identity(cls) -> Matrix4:
        """The identity matrix."""
        return cls()

    @classmethod
    def filled(cls, value: float) -> Matrix4:
        """Every entry set to value; a value of 1.0 gives the identity."""
        if value == 1.0:
            return cls.identity()
        return cls([value] * 16)

    def __mul__(self, other):
        m = self._m
        if isinstance(other, Matrix4):
            n = other._m
            return Matrix4(
                sum(m[k * 4 + j] * n[i * 4 + k] for k in range(4))
                for i in range(4)
                for j in range(4)
            )
        if isinstance(other, Vec4):
            v = other
            return Vec4(
                v.x * m[0] + v.y * m[4] + v.z * m[8] + v.w * m[12],
                v.x * m[1] + v.y * m[5] + v.z * m[9] + v.w * m[13],
                v.x * m[2] + v.y * m[6] + v.z * m[10] + v.w * m[14],
                v.x * m[3] + v.y * m[7] + v.z * m[11] + v.w * m[15],
            )
        if isinstance(other, Vec3):
            v = other
            return Vec3(
                v.x * m[0] + v.y * m[4] + v.z * m[8] + m[12],
                v.x * m[1] + v.y * m[5] + v.z * m[9] + m[13],
                v.x * m[2] + v.y * m[6] + v.z * m[10] + m[14],
            )
        return NotImplemented

    def __getitem__(self, index: int) -> float:
        return self._m[index]

    def __setitem__(self, index: int, value: float) -> None:
        self._m[index] = float(value)

    def __iter__(self) -> Iterator[float]:
        return iter(self._m)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix4):
            return NotImplemented
        return self._m == other._m

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix4({self._m!r})"

    def column(self, index: int) -> Vec4:
        """The given column as a Vec4."""
        m = self._m
        return Vec4(m[4 * index], m[4 * index + 1], m[4 * index + 2], m[4 * index + 3])

    def row(self, index: int) -> Vec4:
        """The given row as a Vec4."""
        m = self._m
        return Vec4(m[index], m[4 + index], m[8 + index], m[12 + index])

    def __str__(self) -> str:
        return "\n".join(
            " ".join(f"{c:1.8f}" for c in self.row(r)) for r in range(4)
        )


class Matrix3:
    """A 3x3 matrix stored as 9 floats in column-major order."""

    __slots__ = ("_m",)

    def __init__(self, values: Iterable[float] | None = None) -> None:
        if values is None:
            self._m = [1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0]
            return
        m = [float(v) for v in values]
        if len(m) != 9:
            raise ValueError(f"Matrix3 needs 9 values, got {len(m)}")
        self._m = m

    @classmethod
    def identity(cls) -> Matrix3:
        """The identity matrix."""
        return cls()

    @classmethod
    def filled(cls, value: float) -> Matrix3:
        """Every entry set to value; a value of 1.0 gives the identity."""
        if value == 1.0:
            return cls.identity()
        return cls([value] * 9)

    @classmethod
    def from_matrix4(cls, m: Matrix4) -> Matrix3:
        """The upper-left 3x3 block of a Matrix4."""
        return cls([m[0], m[1], m[2], m[4], m[5], m[6], m[8], m[9], m[10]])

    def __mul__(self, other):
        if not isinstance(other, Matrix3):
            return NotImplemented
        m, n = self._m, other._m
        return Matrix3(
            sum(m[k * 3 + j] * n[i * 3 + k] for k in range(3))
            for i in range(3)
            for j in range(3)
        )

    def __getitem__(self, index: int) -> float:
        return self._m[index]

    def __setitem__(self, index: int, value: float) -> None:
        self._m[index] = float(value)

    def __iter__(self) -> Iterator[float]:
        return iter(self._m)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix3):
            return NotImplemented
        return self._m == other._m

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix3({self._m!r})"

    def __str__(self) -> str:
        m = self._m
        return "\n".join(
            " ".join(f"{m[c * 3 + r]:1.8f}" for c in range(3)) for r in range(3)
        )


def rotate(degrees: float, axis: Vec3) -> Matrix4:
    """Rotation by degrees about axis (right-hand rule)."""
    a = normalize(axis)
    rad = degrees * DEGREES_TO_RADIANS
    c = math.cos(rad)
    s = math.sin(rad)
    cm = 1.0 - c
    return Matrix4([
        a.x * a.x * cm + c,
        a.x * a.y * cm + a.z * s,
        a.x * a.z * cm - a.y * s,
        0.0,
        a.x * a.y * cm - a.z * s,
        a.y * a.y * cm + c,
        a.y * a.z * cm + a.x * s,
        0.0,
        a.x * a.z * cm + a.y * s,
        a.y * a.z * cm - a.x * s,
        a.z * a.z * cm + c,
        0.0,
        0.0, 0.0, 0.0, 1.0,
    ])


def translate(x: float, y: float, z: float) -> Matrix4:
    """Translation by (x, y, z)."""
    return Matrix4([
        1.0, 0.0, 0.0, 0.0,
        0.0, 1.0, 0.0, 0.0,
        0.0, 0.0, 1.0, 0.0,
        x, y, z, 1.0,
    ])


def scale(x: float, y: float, z: float) -> Matrix4:
    """Scaling by (x, y, z)."""
    return Matrix4([
        x, 0.0, 0.0, 0.0,
        0.0, y, 0.0, 0.0,
        0.0, 0.0, z, 0.0,
        0.0, 0.0, 0.0, 1.0,
    ])


def perspective(fovy: float, aspect: float, z_near: float, z_far: float) -> Matrix4:
    """Perspective projection; fovy is in degrees."""
    cot = 1.0 / math.tan(fovy * 0.5 * DEGREES_TO_RADIANS)
    return Matrix4([
        cot / aspect, 0.0, 0.0, 0.0,
        0.0, cot, 0.0, 0.0,
        0.0, 0.0, (z_near + z_far) / (z_near - z_far), -1.0,
        0.0, 0.0, (2.0 * z_near * z_far) / (z_near - z_far), 0.0,
    ])


def viewport_ndc(width: int, height: int) -> Matrix4:
    """Map normalized device coordinates to screen pixels (y pointing down)."""
    min_z, max_z = 0.0, 1.0
    m1 = scale(1.0, -1.0, 1.0)
    m2 = scale(width / 2.0, height / 2.0, max_z - min_z)
    m3 = translate(width / 2.0, height / 2.0, min_z)
    return m3 * m2 * m1


def orthographic(
    x_min: float, x_max: float, y_min: float, y_max: float, z_min: float, z_max: float
) -> Matrix4:
    """Orthographic projection of the given box onto the NDC cube."""
    m1 = scale(2.0 / (x_max - x_min), 2.0 / (y_max - y_min), -2.0 / (z_max - z_min))
    m2 = translate(
        -(x_max + x_min) / (x_max - x_min),
        -(y_max + y_min) / (y_max - y_min),
        -(z_max + z_min) / (z_max - z_min),
    )
    return m2 * m1


def un_ortho(ortho: Matrix4) -> Matrix4:
    """Undo the scale-and-translate of an orthographic matrix."""
    m = Matrix4()
    m[0] = 1.0 / ortho[0]
    m[5] = 1.0 / ortho[5]
    m[10] = 1.0 / ortho[10]
    m[12] = -ortho[12] * m[0]
    m[13] = -ortho[13] * m[5]
    m[14] = -ortho[14] * m[10]
    m[15] = 1.0
    return m


def look_at(eye: Vec3, at: Vec3, up: Vec3) -> Matrix4:
    """View matrix for a camera at eye looking toward at."""
    forward = normalize(at - eye)
    up = normalize(up)
    side = normalize(cross(forward, up))
    up = cross(side, forward)
    return Matrix4([
        side.x, up.x, -forward.x, 0.0,
        side.y, up.y, -forward.y, 0.0,
        side.z, up.z, -forward.z, 0.0,
        -dot(side, eye), -dot(up, eye), dot(forward, eye), 1.0,
    ])


def transpose(m: Matrix4) -> Matrix4:
    """Swap rows and columns."""
    return Matrix4(m[r * 4 + c] for c in range(4) for r in range(4))


def inverse(m: Matrix4) -> Matrix4:
    """Inverse of a 4x4 matrix; raises ZeroDivisionError if it is singular."""
    inv = [0.0] * 16
    inv[0] = (m[5] * m[10] * m[15] - m[5] * m[11] * m[14] - m[9] * m[6] * m[15]
              + m[9] * m[7] * m[14] + m[13] * m[6] * m[11] - m[13] * m[7] * m[10])
    inv[1] = (-m[1] * m[10] * m[15] + m[1] * m[11] * m[14] + m[9] * m[2] * m[15]
              - m[9] * m[3] * m[14] - m[13] * m[2] * m[11] + m[13] * m[3] * m[10])
    inv[2] = (m[1] * m[6] * m[15] - m[1] * m[7] * m[14] - m[5] * m[2] * m[15]
              + m[5] * m[3] * m[14] + m[13] * m[2] * m[7] - m[13] * m[3] * m[6])
    inv[3] = (-m[1] * m[6] * m[11] + m[1] * m[7] * m[10] + m[5] * m[2] * m[11]
              - m[5] * m[3] * m[10] - m[9] * m[2] * m[7] + m[9] * m[3] * m[6])
    inv[4] = (-m[4] * m[10] * m[15] + m[4] * m[11] * m[14] + m[8] * m[6] * m[15]
              - m[8] * m[7] * m[14] - m[12] * m[6] * m[11] + m[12] * m[7] * m[10])
    inv[5] = (m[0] * m[10] * m[15] - m[0] * m[11] * m[14] - m[8] * m[2] * m[15]
              + m[8] * m[3] * m[14] + m[12] * m[2] * m[11] - m[12] * m[3] * m[10])
    inv[6] = (-m[0] * m[6] * m[15] + m[0] * m[7] * m[14] + m[4] * m[2] * m[15]
              - m[4] * m[3] * m[14] - m[12] * m[2] * m[7] + m[12] * m[3] * m[6])
    inv[7] = (m[0] * m[6] * m[11] - m[0] * m[7] * m[10] - m[4] * m[2] * m[11]
              + m[4] * m[3] * m[10] + m[8] * m[2] * m[7] - m[8] * m[3] * m[6])
    inv[8] = (m[4] * m[9] * m[15] - m[4] * m[11] * m[13] - m[8] * m[5] * m[15]
              + m[8] * m[7] * m[13] + m[12] * m[5] * m[11] - m[12] * m[7] * m[9])
    inv[9] = (-m[0] * m[9] * m[15] + m[0] * m[11] * m[13] + m[8] * m[1] * m[15]
              - m[8] * m[3] * m[13] - m[12] * m[1] * m[11] + m[12] * m[3] * m[9])
    inv[10] = (m[0] * m[5] * m[15] - m[0] * m[7] * m[13] - m[4] * m[1] * m[15]
               + m[4] * m[3] * m[13] + m[12] * m[1] * m[7] - m[12] * m[3] * m[5])
    inv[11] = (-m[0] * m[5] * m[11] + m[0] * m[7] * m[9] + m[4] * m[1] * m[11]
               - m[4] * m[3] * m[9] - m[8] * m[1] * m[7] + m[8] * m[3] * m[5])
    inv[12] = (-m[4] * m[9] * m[14] + m[4] * m[10] * m[13] + m[8] * m[5] * m[14]
               - m[8] * m[6] * m[13] - m[12] * m[5] * m[10] + m[12] * m[6] * m[9])
    inv[13] = (m[0] * m[9] * m[14] - m[0] * m[10] * m[13] - m[8] * m[1] * m[14]
               + m[8] * m[2] * m[13] + m[12] * m[1] * m[10] - m[12] * m[2] * m[9])
    inv[14] = (-m[0] * m[5] * m[14] + m[0] * m[6] * m[13] + m[4] * m[1] * m[14]
               - m[4] * m[2] * m[13] - m[12] * m[1] * m[6] + m[12] * m[2] * m[5])
    inv[15] = (m[0] * m[5] * m[10] - m[0] * m[6] * m[9] - m[4] * m[1] * m[10]
               + m[4] * m[2] * m[9] + m[8] * m[1] * m[6] - m[8] * m[2] * m[5])

    determinant = m[0] * inv[0] + m[1] * inv[4] + m[2] * inv[8] + m[3] * inv[12]
    if abs(determinant) < VERY_SMALL:
        raise ZeroDivisionError("Divide by nearly zero in matrix inverse")
    factor = 1.0 / determinant
    return Matrix4(v * factor for v in inv)