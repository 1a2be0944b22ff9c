"""Short-lived particles drawn from a fixed-size pool."""

from __future__ import annotations

from dataclasses import dataclass, field

from ghostchase.vector import Vec3

POOL_SIZE = 5


@dataclass
class Particle:
    """A moving particle that lives for a number of frames."""

    pos: Vec3 = field(default_factory=Vec3)
    vel: Vec3 = field(default_factory=Vec3)
    orientation: float = 0.0
    frames_left: int = 0

    def spawn(self, pos: Vec3, vel: Vec3, lifetime: int, orientation: float = 0.0) -> None:
        """Bring the particle to life for lifetime frames."""
        self.frames_left = lifetime
        self.pos = Vec3(*pos)
        self.vel = Vec3(*vel)
        self.orientation = orientation

    def update(self, delta_time: float) -> bool:
        """Advance one frame; True exactly when the particle has just expired."""
        if not self.in_use():
            return False
        self.frames_left -= 1
        self.pos = self.pos + self.vel * delta_time
        return self.frames_left == 0

    def in_use(self) -> bool:
        """True while the particle has frames left to live."""
        return self.frames_left > 0


class Pool:
    """A fixed set of particles reused through a free list."""

    def __init__(self, size: int = POOL_SIZE) -> None:
        self.particles: list[Particle] = [Particle() for _ in range(size)]
        # The end of the list is the next particle handed out.
        self._free: list[Particle] = list(reversed(self.particles))

    def create_particle(
        self, pos: Vec3, vel: Vec3, lifetime: int, orientation: float = 0.0
    ) -> Particle | None:
        """Spawn the next free particle; None when the pool is exhausted."""
        if not self._free:
            return None
        particle = self._free.pop()
        particle.spawn(pos, vel, lifetime, orientation)
        return particle

    def update(self, delta_time: float) -> None:
        """Advance every particle, returning expired ones to the free list."""
        for particle in self.particles:
            if particle.update(delta_time):
                self._free.append(particle)

    def active(self) -> list[Particle]:
        """Particles currently in use."""
        return [p for p in self.particles if p.in_use()]