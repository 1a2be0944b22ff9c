"""Three- and four-component vectors and the vector math used by the game."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator

VERY_SMALL = 1.0e-7
"""Magnitudes below this are treated as zero when dividing."""


def _check_divisor(s: float) -> None:
    if abs(s) < VERY_SMALL:
        raise ZeroDivisionError("Divide by nearly zero")


@dataclass(slots=True)
class Vec3:
    """A mutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: float) -> Vec3:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vec3(scalar * self.x, scalar * self.y, scalar * self.z)

    def __rmul__(self, scalar: float) -> Vec3:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vec3:
        if not isinstance(scalar, Real):
            return NotImplemented
        _check_divisor(scalar)
        return self * (1.0 / scalar)

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __str__(self) -> str:
        return " ".join(f"{c:1.8f}" for c in self)


@dataclass(slots=True)
class Vec4(Vec3):
    """A mutable 4D vector; usable wherever a Vec3 is expected."""

    w: float = 0.0

    @classmethod
    def from_vec3(cls, v: Vec3) -> Vec4:
        """Extend a Vec3 to a point with w = 1."""
        return cls(v.x, v.y, v.z, 1.0)

    def __add__(self, other: Vec4) -> Vec4:
        if not isinstance(other, Vec4):
            return NotImplemented
        return Vec4(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: Vec4) -> Vec4:
        if not isinstance(other, Vec4):
            return NotImplemented
        # The w component is taken as other.w - self.w, as the engine defines it.
        return Vec4(self.x - other.x, self.y - other.y, self.z - other.z, other.w - self.w)

    def __neg__(self) -> Vec4:
        return Vec4(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, scalar: float) -> Vec4:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vec4(scalar * self.x, scalar * self.y, scalar * self.z, scalar * self.w)

    def __rmul__(self, scalar: float) -> Vec4:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vec4:
        if not isinstance(scalar, Real):
            return NotImplemented
        _check_divisor(scalar)
        return self * (1.0 / scalar)

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z, self.w)[index]

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w


def dot(a: Vec3, b: Vec3) -> float:
    """Dot product of the x, y, z components."""
    return a.x * b.x + a.y * b.y + a.z * b.z


def cross(a: Vec3, b: Vec3) -> Vec3:
    """Cross product."""
    return Vec3(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def mag(a: Vec3) -> float:
    """Length of the x, y, z part of a vector."""
    return math.sqrt(a.x * a.x + a.y * a.y + a.z * a.z)


def rotate(n: Vec3, theta: float, v: Vec3) -> Vec3:
    """Rotate v by theta radians about the unit axis n."""
    c = math.cos(theta)
    return v * c + dot(v, n) * n * (1.0 - c) + cross(n, v) * math.sin(theta)


def normalize(a: Vec3) -> Vec3:
    """Return a unit vector in the direction of a."""
    magnitude = mag(a)
    _check_divisor(magnitude)
    return Vec3(a.x / magnitude, a.y / magnitude, a.z / magnitude)


def reflect(v: Vec3, n: Vec3) -> Vec3:
    """Reflect v about the normal n."""
    return n * (2.0 * dot(v, n)) - v


def distance(a: Vec3, b: Vec3) -> float:
    """Distance between two points."""
    return mag(a - b)


def lerp(v1: Vec3, v2: Vec3, t: float) -> Vec3:
    """Linear interpolation from v1 (t = 0) to v2 (t = 1)."""
    return v1 + t * (v2 - v1)