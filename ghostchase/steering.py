"""Dynamic and kinematic steering behaviours."""

from __future__ import annotations

import math
import random as _random
from abc import ABC, abstractmethod

from ghostchase.body import Body, KinematicSteeringOutput, SteeringOutput
from ghostchase.path import Path
from ghostchase.vector import Vec3, distance, mag, normalize


class SteeringBehaviour(ABC):
    """A behaviour that computes a steering output for a character."""

    def __init__(self, character: Body) -> None:
        self.character = character

    @abstractmethod
    def get_steering(self) -> SteeringOutput | None:
        """The steering to apply now, or None for none."""


class Seek(SteeringBehaviour):
    """Accelerate at full rate toward the target."""

    def __init__(self, character: Body, target: Body) -> None:
        super().__init__(character)
        self.target = target

    def get_steering(self) -> SteeringOutput:
        direction = normalize(self.target.pos - self.character.pos)
        return SteeringOutput(direction * self.character.max_acceleration, 0.0)


class Flee(SteeringBehaviour):
    """Accelerate at full rate away from the target."""

    def __init__(self, character: Body, target: Body) -> None:
        super().__init__(character)
        self.target = target

    def get_steering(self) -> SteeringOutput:
        direction = normalize(self.character.pos - self.target.pos)
        return SteeringOutput(direction * self.character.max_acceleration, 0.0)


class Arrive(SteeringBehaviour):
    """Approach the target and slow down to stop at it."""

    def __init__(
        self,
        character: Body,
        target: Body,
        max_acceleration: float = 3.0,
        max_speed: float = 2.0,
        slow_radius: float = 2.0,
        target_radius: float = 0.2,
        time_to_target: float = 0.1,
    ) -> None:
        super().__init__(character)
        self.target = target
        self.max_acceleration = max_acceleration
        self.max_speed = max_speed
        self.slow_radius = slow_radius
        self.target_radius = target_radius
        self.time_to_target = time_to_target

    def get_steering(self) -> SteeringOutput | None:
        direction = self.target.pos - self.character.pos
        dist = mag(direction)
        if dist < self.target_radius:
            return None

        if dist > self.slow_radius:
            target_speed = self.max_speed
        else:
            target_speed = self.max_speed * dist / self.slow_radius

        target_velocity = normalize(direction) * target_speed
        linear = (target_velocity - self.character.vel) / self.time_to_target
        if mag(linear) > self.max_acceleration:
            linear = normalize(linear) * self.max_acceleration
        return SteeringOutput(linear, 0.0)


class FollowAPath(Arrive):
    """Arrive at each node of a path in turn."""

    def __init__(self, character: Body, target: Body | None, path: Path | None) -> None:
        super().__init__(character, target if target is not None else Body())
        self.path = path

    def get_steering(self) -> SteeringOutput | None:
        if self.path is None:
            return None
        target_position = self.path.current_node_position()
        if distance(self.character.pos, target_position) <= self.slow_radius:
            self.path.increment_current_node()
        self.target.pos = target_position
        return super().get_steering()


class KinematicSeek:
    """Move at full speed toward the target."""

    def __init__(self, character: Body, target: Body) -> None:
        self.character = character
        self.target = target

    def get_steering(self) -> KinematicSteeringOutput:
        direction = normalize(self.target.pos - self.character.pos)
        return KinematicSteeringOutput(direction * self.character.max_speed, 0.0)


class KinematicArrive:
    """Move toward the target, stopping inside a satisfaction radius."""

    def __init__(
        self,
        character: Body,
        target: Body,
        max_speed: float = 2.0,
        radius: float = 2.0,
        time_to_target: float = 0.25,
    ) -> None:
        self.character = character
        self.target = target
        self.max_speed = max_speed
        self.radius = radius
        self.time_to_target = time_to_target

    def get_steering(self) -> KinematicSteeringOutput | None:
        velocity = self.target.pos - self.character.pos
        length = mag(velocity)
        if length < self.radius:
            return None
        velocity = velocity / self.time_to_target
        if length > self.max_speed:
            velocity = normalize(velocity) * self.max_speed
        return KinematicSteeringOutput(velocity, 0.0)


class KinematicWander:
    """Move forward along the current orientation while turning at random."""

    def __init__(
        self,
        character: Body,
        max_speed: float = 2.5,
        max_rotation_speed: float = 3.5,
        rng: _random.Random | None = None,
    ) -> None:
        self.character = character
        self.max_speed = max_speed
        self.max_rotation_speed = max_rotation_speed
        self._rng = rng if rng is not None else _random.Random()

    def get_steering(self) -> KinematicSteeringOutput:
        o = self.character.orientation
        velocity = self.max_speed * Vec3(math.cos(o), math.sin(o), 0.0)
        return KinematicSteeringOutput(velocity, self.random_binomial() * self.max_rotation_speed)

    def random_binomial(self) -> float:
        """A value in (-1, 1), more likely near zero."""
        return self.random() - self.random()

    def random(self) -> float:
        """A uniform value in [0, 1)."""
        return self._rng.random()