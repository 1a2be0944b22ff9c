"""Moving bodies and the steering outputs that drive them."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from ghostchase.vector import Vec3, mag


def _clip_length(v: Vec3, limit: float) -> Vec3:
    """Return v shortened to limit if it is longer than that."""
    length = mag(v)
    if length > limit:
        return v * (limit / length)
    return v


@dataclass
class SteeringOutput:
    """Linear and angular acceleration requested by a dynamic steering behaviour."""

    linear: Vec3 = field(default_factory=Vec3)
    angular: float = 0.0

    def __add__(self, other: SteeringOutput) -> SteeringOutput:
        if not isinstance(other, SteeringOutput):
            return NotImplemented
        return SteeringOutput(self.linear + other.linear, self.angular + other.angular)

    def __iadd__(self, other: SteeringOutput) -> SteeringOutput:
        if not isinstance(other, SteeringOutput):
            return NotImplemented
        self.linear = self.linear + other.linear
        self.angular += other.angular
        return self


@dataclass
class KinematicSteeringOutput:
    """Velocity and rotation requested by a kinematic steering behaviour."""

    velocity: Vec3 = field(default_factory=Vec3)
    rotation: float = 0.0


@dataclass
class Body:
    """A point mass with position, velocity, orientation and their limits."""

    pos: Vec3 = field(default_factory=Vec3)
    vel: Vec3 = field(default_factory=Vec3)
    accel: Vec3 = field(default_factory=Vec3)
    mass: float = 1.0
    radius: float = 0.0
    orientation: float = 0.0
    rotation: float = 0.0
    angular: float = 0.0
    max_speed: float = 0.0
    max_acceleration: float = 0.0
    max_rotation: float = 0.0
    max_angular: float = 0.0

    def apply_force(self, force: Vec3) -> None:
        """Set the acceleration produced by force on this body's mass."""
        self.accel = force / self.mass

    def update(self, delta_time: float) -> None:
        """Advance the equations of motion by delta_time seconds."""
        self.pos = self.pos + self.vel * delta_time + self.accel * (0.5 * delta_time * delta_time)
        self.vel = self.vel + self.accel * delta_time
        self.orientation += self.rotation * delta_time
        self.rotation += self.angular * delta_time

        self.vel = _clip_length(self.vel, self.max_speed)
        if self.rotation > self.max_rotation:
            self.rotation = self.max_rotation


@dataclass
class KinematicBody(Body):
    """A body steered by linear and angular acceleration."""

    max_speed: float = 1.0
    max_acceleration: float = 1.0
    max_rotation: float = 1.0
    max_angular: float = 1.0

    def update(self, delta_time: float, steering: SteeringOutput | None = None) -> None:
        """Move, then take the steering's accelerations, clipped to the limits."""
        super().update(delta_time)

        if steering is not None:
            self.accel = Vec3(*steering.linear)
            self.angular = steering.angular

        self.accel = _clip_length(self.accel, self.max_acceleration)
        self.angular = min(self.angular, self.max_angular)


@dataclass
class StaticBody(Body):
    """A body steered directly by velocity and rotation."""

    radius: float = 1.0

    def update(self, delta_time: float, steering: KinematicSteeringOutput | None = None) -> None:
        """Move, then take the steering's velocity and rotation, clipped to the limits."""
        super().update(delta_time)

        if steering is None:
            self.vel = Vec3()
            self.rotation = 0.0
            return

        self.vel = _clip_length(Vec3(*steering.velocity), self.max_speed)
        self.rotation = min(steering.rotation, self.max_rotation)

    def new_orientation(self) -> None:
        """Face the direction of travel, if moving."""
        if mag(self.vel) > 0.0:
            self.orientation = math.atan2(-self.vel.y, self.vel.x)