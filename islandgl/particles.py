"""A field of falling rain particles."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from .mesh import Mesh, PrimitiveType
from .vectors import Vector3, Vector4

PARTICLE_AMOUNT = 10000


def approx_equal(a: float, b: float, tolerance: float) -> bool:
    """True when a and b differ by strictly less than `tolerance`."""
    return abs(a - b) < tolerance


@dataclass
class Particle:
    position: Vector3 = field(default_factory=Vector3)
    colour: Vector4 = field(default_factory=Vector4)


class ParticleControl(Mesh):
    """Point mesh of particles that fall and respawn above the ground."""

    def __init__(self, heightmap_size: Vector3 | None = None,
                 amount: int = PARTICLE_AMOUNT, rng: random.Random | None = None):
        super().__init__()
        if amount < 0:
            raise ValueError("particle amount must not be negative")
        self.type = PrimitiveType.POINTS
        self.heightmap_size = heightmap_size
        self._rng = rng if rng is not None else random.Random()
        self.particle_speed = Vector3(0.0, -400.0, 0.0)
        self.particle_colour = Vector4(0.8, 0.7, 0.5, 1.0)
        self.texture = 0
        self.particles = [
            Particle(
                Vector3(
                    float(self._rng.randrange(7000) + 500),
                    float(self._rng.randrange(2000)),
                    float(self._rng.randrange(7000) + 500),
                ),
                Vector4(1.0, 0.0, 0.0, 1.0),
            )
            for _ in range(amount)
        ]

    @property
    def amount(self) -> int:
        return len(self.particles)

    @property
    def colour(self) -> Vector4:
        return self.particle_colour

    def update(self, dt: float) -> None:
        """Move every particle down; those near the ground respawn higher up."""
        step = self.particle_speed * dt
        for index, particle in enumerate(self.particles):
            if approx_equal(particle.position.y, 0.0, 5.0):
                self.reset_particle(index)
            else:
                particle.position = particle.position + step

    def reset_particle(self, index: int) -> None:
        particle = self.particles[index]
        height = float(self._rng.randrange(1000) + 1000)
        particle.position = Vector3(particle.position.x, height, particle.position.z)

    def vertex_data(self) -> tuple[list[Vector3], list[Vector4]]:
        """Current particle positions and colours, also stored on the mesh."""
        self.vertices = [p.position for p in self.particles]
        self.colours = [p.colour for p in self.particles]
        return self.vertices, self.colours