"""The player-controlled body."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from ghostchase.body import Body
from ghostchase.matrix import Matrix4, inverse
from ghostchase.particles import Pool
from ghostchase.vector import VERY_SMALL, Vec3, mag, normalize

FPS = 60
SHOT_SPEED = 5.0
SHOT_LIFETIME = 2 * FPS


class Key(Enum):
    """Keys the player responds to."""

    W = auto()
    A = auto()
    S = auto()
    D = auto()
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    SPACE = auto()


@dataclass
class PlayerBody(Body):
    """A body moved by keys, kept inside the scene, that can fire particles."""

    radius: float = 0.5
    max_speed: float = 5.0
    max_acceleration: float = 10.0
    max_rotation: float = 1.0
    max_angular: float = 1.0
    scene_width: float = 25.0
    scene_height: float = 15.0
    particles: Pool = field(default_factory=Pool)

    def _renormalize(self) -> None:
        if mag(self.vel) > VERY_SMALL:
            self.vel = normalize(self.vel) * self.max_speed

    def key_down(self, key: Key, mouse_position: Vec3 | None = None) -> None:
        """Start moving, accelerating or firing toward mouse_position."""
        v, a = self.vel, self.accel
        if key is Key.W:
            self.vel = Vec3(v.x, self.max_speed, v.z)
        elif key is Key.A:
            self.vel = Vec3(-self.max_speed, v.y, v.z)
        elif key is Key.S:
            self.vel = Vec3(v.x, -self.max_speed, v.z)
        elif key is Key.D:
            self.vel = Vec3(self.max_speed, v.y, v.z)
        elif key is Key.DOWN:
            self.accel = Vec3(a.x, -self.max_acceleration, a.z)
        elif key is Key.UP:
            self.accel = Vec3(a.x, self.max_acceleration, a.z)
        elif key is Key.LEFT:
            self.accel = Vec3(-self.max_acceleration, a.y, a.z)
        elif key is Key.RIGHT:
            self.accel = Vec3(self.max_acceleration, a.y, a.z)
        elif key is Key.SPACE:
            if mouse_position is None:
                raise ValueError("firing needs a mouse position")
            direction = normalize(mouse_position - self.pos) * SHOT_SPEED
            self.particles.create_particle(Vec3(*self.pos), direction, SHOT_LIFETIME)

    def key_up(self, key: Key) -> None:
        """Stop the movement or acceleration the key started."""
        v, a = self.vel, self.accel
        if key in (Key.W, Key.S):
            self.vel = Vec3(v.x, 0.0, v.z)
            self._renormalize()
        elif key in (Key.A, Key.D):
            self.vel = Vec3(0.0, v.y, v.z)
            self._renormalize()
        elif key in (Key.UP, Key.DOWN):
            self.accel = Vec3(a.x, 0.0, a.z)
        elif key in (Key.LEFT, Key.RIGHT):
            self.accel = Vec3(0.0, a.y, a.z)

    def update(self, delta_time: float) -> None:
        """Move, stop at the scene edges, and advance the particles."""
        super().update(delta_time)
        x, y, z = self.pos
        vx, vy, vz = self.vel
        r = self.radius
        if x < r:
            x, vx = r, 0.0
        if y < r:
            y, vy = r, 0.0
        if x > self.scene_width - r:
            x, vx = self.scene_width - r, 0.0
        if y > self.scene_height - r:
            y, vy = self.scene_height - r, 0.0
        self.pos = Vec3(x, y, z)
        self.vel = Vec3(vx, vy, vz)
        self.particles.update(delta_time)

    def reset_to_origin(self) -> None:
        """Put the player in the bottom-left corner, touching both edges."""
        self.pos = Vec3(self.radius, self.radius, 0.0)

    def screen_to_world(self, projection: Matrix4, x: float, y: float) -> Vec3:
        """Convert screen pixel coordinates to world coordinates."""
        return inverse(projection) * Vec3(float(x), float(y), 0.0)