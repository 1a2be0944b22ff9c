import pytest

from ghostchase.body import Body
from ghostchase.collider import (
    Plane,
    sphere_plane_collision_detected,
    sphere_plane_collision_response,
    sphere_sphere_collision_detected,
    sphere_sphere_collision_response,
    sphere_static_sphere_collision_response,
)
from ghostchase.vector import Vec3, dot, mag


def test_plane_from_normal_keeps_components():
    plane = Plane.from_normal(Vec3(0.0, 1.0, 0.0), 3.0)
    assert plane.normal == Vec3(0.0, 1.0, 0.0)
    assert plane.d == 3.0
    assert plane.w == 3.0


def test_plane_from_points_has_unit_normal_perpendicular_to_edges():
    v0, v1, v2 = Vec3(1.0, 2.0, 3.0), Vec3(4.0, 0.0, 1.0), Vec3(-2.0, 5.0, 0.5)
    plane = Plane.from_points(v0, v1, v2)
    assert mag(plane.normal) == pytest.approx(1.0)
    assert dot(plane.normal, v1 - v0) == pytest.approx(0.0, abs=1e-9)
    assert dot(plane.normal, v2 - v0) == pytest.approx(0.0, abs=1e-9)


def test_points_lie_on_plane_from_points():
    v0, v1, v2 = Vec3(1.0, 2.0, 3.0), Vec3(4.0, 0.0, 1.0), Vec3(-2.0, 5.0, 0.5)
    plane = Plane.from_points(v0, v1, v2)
    for v in (v0, v1, v2):
        assert dot(plane.normal, v) + plane.d == pytest.approx(0.0, abs=1e-9)


def test_plane_distance_subtracts_radius():
    plane = Plane.from_normal(Vec3(0.0, 0.0, 1.0), 0.0)
    body = Body(pos=Vec3(2.0, 3.0, 5.0), radius=1.0)
    assert plane.distance(body) == pytest.approx(body.pos.z - body.radius)


def test_sphere_sphere_detection():
    a = Body(pos=Vec3(0.0, 0.0, 0.0), radius=1.0)
    near = Body(pos=Vec3(1.5, 0.0, 0.0), radius=1.0)
    far = Body(pos=Vec3(5.0, 0.0, 0.0), radius=1.0)
    assert sphere_sphere_collision_detected(a, near) is True
    assert sphere_sphere_collision_detected(a, far) is False


def test_sphere_plane_detection():
    plane = Plane.from_normal(Vec3(0.0, 1.0, 0.0), 0.0)
    touching = Body(pos=Vec3(0.0, 1.5, 0.0), radius=1.0)
    away = Body(pos=Vec3(0.0, 10.0, 0.0), radius=1.0)
    assert sphere_plane_collision_detected(touching, plane) is True
    assert sphere_plane_collision_detected(away, plane) is False


def test_elastic_head_on_collision_swaps_velocities():
    v = Vec3(1.0, 0.0, 0.0)
    body1 = Body(pos=Vec3(0.0, 0.0, 0.0), vel=Vec3(*v), radius=1.0)
    body2 = Body(pos=Vec3(2.0, 0.0, 0.0), vel=Vec3(), radius=1.0)
    sphere_sphere_collision_response(body1, body2, 1.0)
    assert mag(body1.vel) == pytest.approx(0.0)
    assert list(body2.vel) == pytest.approx(list(v))


def test_static_sphere_reverses_normal_component():
    body = Body(pos=Vec3(0.0, 2.0, 0.0), vel=Vec3(3.0, -4.0, 0.0))
    obstacle = Body(pos=Vec3(0.0, 0.0, 0.0))
    sphere_static_sphere_collision_response(body, obstacle)
    assert list(body.vel) == pytest.approx([3.0, 4.0, 0.0])


def test_plane_response_reflects_velocity():
    plane = Plane.from_normal(Vec3(0.0, 2.0, 0.0), 0.0)
    body = Body(pos=Vec3(0.0, 0.5, 0.0), vel=Vec3(1.0, -1.0, 0.0))
    speed = mag(body.vel)
    sphere_plane_collision_response(body, plane)
    assert list(body.vel) == pytest.approx([1.0, 1.0, 0.0])
    assert mag(body.vel) == pytest.approx(speed)