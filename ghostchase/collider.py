"""Planes and sphere collision detection and response."""

from __future__ import annotations

from ghostchase.body import Body
from ghostchase.vector import Vec3, Vec4, cross, distance, dot, normalize


class Plane(Vec4):
    """A plane n.p + d = 0 stored as (n.x, n.y, n.z, d)."""

    __slots__ = ()

    @classmethod
    def from_normal(cls, normal: Vec3, d: float) -> Plane:
        """Plane with the given normal and offset."""
        return cls(normal.x, normal.y, normal.z, d)

    @classmethod
    def from_points(cls, v0: Vec3, v1: Vec3, v2: Vec3) -> Plane:
        """Plane through three points, with a unit normal."""
        normal = normalize(cross(v1 - v0, v2 - v0))
        return cls(normal.x, normal.y, normal.z, -dot(normal, v0))

    @property
    def normal(self) -> Vec3:
        return Vec3(self.x, self.y, self.z)

    @property
    def d(self) -> float:
        return self.w

    def distance(self, body: Body) -> float:
        """Distance from the plane to the surface of a spherical body."""
        return dot(self.normal, body.pos) + self.w - body.radius


def sphere_sphere_collision_detected(body1: Body, body2: Body) -> bool:
    """True if two spheres overlap."""
    return distance(body1.pos, body2.pos) < body1.radius + body2.radius


def sphere_plane_collision_detected(body: Body, plane: Plane) -> bool:
    """True if a sphere touches or crosses the plane."""
    return plane.distance(body) <= body.radius


def sphere_sphere_collision_response(body1: Body, body2: Body, elasticity: float) -> None:
    """Exchange momentum along the line of centres of two colliding spheres."""
    n = normalize(body1.pos - body2.pos)
    v1in = dot(body1.vel, n)
    v2in = dot(body2.vel, n)

    v2fn = v1in * (1.0 + elasticity) / 2.0
    v1fn = v1in - v2fn

    body1.vel = body1.vel + (v1fn - v1in) * n
    body2.vel = body2.vel + (v2fn - v2in) * n


def _bounce(vel: Vec3, normal: Vec3) -> Vec3:
    n = normalize(normal)
    projection = dot(-vel, n) * n
    return vel + projection * 2.0


def sphere_static_sphere_collision_response(body: Body, static_sphere: Body) -> None:
    """Reflect a sphere's velocity off a sphere that does not move."""
    body.vel = _bounce(body.vel, body.pos - static_sphere.pos)


def sphere_plane_collision_response(body: Body, plane: Plane) -> None:
    """Reflect a sphere's velocity off a plane."""
    body.vel = _bounce(body.vel, plane.normal)