import math

import pytest

from ghostchase.body import (
    Body,
    KinematicBody,
    KinematicSteeringOutput,
    StaticBody,
    SteeringOutput,
)
from ghostchase.vector import Vec3, mag, normalize


def test_steering_output_defaults_to_zero():
    s = SteeringOutput()
    assert s.linear == Vec3()
    assert s.angular == 0.0


def test_steering_output_add_zero_is_identity():
    a = SteeringOutput(Vec3(1.0, 2.0, 3.0), 0.5)
    assert a + SteeringOutput() == a


def test_steering_output_add_is_commutative():
    a = SteeringOutput(Vec3(1.0, 2.0, 3.0), 0.5)
    b = SteeringOutput(Vec3(-4.0, 0.5, 2.0), 0.25)
    assert a + b == b + a


def test_steering_output_iadd_mutates_in_place():
    a = SteeringOutput(Vec3(1.0, 2.0, 3.0), 0.5)
    b = SteeringOutput(Vec3(-4.0, 0.5, 2.0), 0.25)
    expected = a + b
    original = a
    a += b
    assert a is original
    assert a == expected


def test_kinematic_steering_output_defaults():
    k = KinematicSteeringOutput()
    assert k.velocity == Vec3()
    assert k.rotation == 0.0


def test_body_defaults():
    b = Body()
    assert b.mass == 1.0
    assert b.max_speed == 0.0
    assert b.pos == Vec3()


def test_apply_force_divides_by_mass():
    b = Body(mass=2.0)
    force = Vec3(4.0, -2.0, 0.0)
    b.apply_force(force)
    assert b.accel * 2.0 == force


def test_apply_force_zero_mass_raises():
    b = Body(mass=0.0)
    with pytest.raises(ZeroDivisionError):
        b.apply_force(Vec3(1.0, 0.0, 0.0))


def test_update_without_acceleration_is_linear_in_time():
    one = Body(vel=Vec3(1.0, 2.0, 0.0), max_speed=5.0)
    two = Body(vel=Vec3(1.0, 2.0, 0.0), max_speed=5.0)
    one.update(0.5)
    one.update(0.5)
    two.update(1.0)
    assert one.pos.x == pytest.approx(two.pos.x)
    assert one.pos.y == pytest.approx(two.pos.y)


def test_update_clips_speed():
    b = Body(vel=Vec3(10.0, 0.0, 0.0), max_speed=5.0)
    b.update(0.1)
    assert mag(b.vel) == pytest.approx(5.0)


def test_update_clips_rotation_and_uses_old_rotation():
    b = Body(angular=10.0, max_rotation=1.0, max_speed=5.0)
    b.update(1.0)
    assert b.rotation == 1.0
    assert b.orientation == 0.0


def test_kinematic_body_takes_steering():
    b = KinematicBody()
    steering = SteeringOutput(Vec3(0.5, 0.0, 0.0), 0.5)
    b.update(0.1, steering)
    assert b.accel == steering.linear
    assert b.angular == 0.5


def test_kinematic_body_clips_acceleration():
    b = KinematicBody(max_acceleration=1.0)
    linear = Vec3(3.0, 4.0, 0.0)
    b.update(0.1, SteeringOutput(linear, 0.0))
    assert mag(b.accel) == pytest.approx(1.0)
    direction = normalize(b.accel)
    expected = normalize(linear)
    assert direction.x == pytest.approx(expected.x)
    assert direction.y == pytest.approx(expected.y)


def test_kinematic_body_clips_angular():
    b = KinematicBody(max_angular=1.0)
    b.update(0.1, SteeringOutput(Vec3(), 7.0))
    assert b.angular == 1.0


def test_kinematic_body_without_steering_keeps_acceleration():
    accel = Vec3(0.5, 0.0, 0.0)
    b = KinematicBody(accel=accel, max_speed=100.0)
    b.update(0.1, None)
    assert b.accel == accel


def test_static_body_defaults():
    b = StaticBody()
    assert b.radius == 1.0
    assert b.mass == 1.0


def test_static_body_without_steering_stops():
    b = StaticBody(vel=Vec3(1.0, 1.0, 0.0), rotation=0.5, max_speed=5.0, max_rotation=3.0)
    b.update(0.1, None)
    assert b.vel == Vec3()
    assert b.rotation == 0.0


def test_static_body_clips_steering():
    b = StaticBody(max_speed=5.0, max_rotation=3.0)
    b.update(0.1, KinematicSteeringOutput(Vec3(6.0, 8.0, 0.0), 9.0))
    assert mag(b.vel) == pytest.approx(5.0)
    assert b.rotation == 3.0


def test_static_body_copies_steering_velocity():
    b = StaticBody(max_speed=5.0, max_rotation=3.0)
    steering = KinematicSteeringOutput(Vec3(1.0, 0.0, 0.0), 0.0)
    b.update(0.1, steering)
    steering.velocity.x = 4.0
    assert b.vel == Vec3(1.0, 0.0, 0.0)


def test_new_orientation_faces_velocity():
    b = StaticBody(vel=Vec3(0.0, -1.0, 0.0))
    b.new_orientation()
    assert b.orientation == pytest.approx(math.pi / 2)


def test_new_orientation_ignores_zero_velocity():
    b = StaticBody(orientation=0.7)
    b.new_orientation()
    assert b.orientation == 0.7