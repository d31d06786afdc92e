"""Particles, a universal emitter and a particle system that animates them."""

from __future__ import annotations

import itertools
import math
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, List, Optional, Tuple, Union

from thorkit.connection import Connection, id_connection
from thorkit.graphics import Color, IntRect, Vector2


@dataclass
class Particle:
    """A single particle with its transform, color and lifetime (in seconds)."""

    total_lifetime: float
    position: Vector2 = field(default_factory=Vector2)
    velocity: Vector2 = field(default_factory=Vector2)
    rotation: float = 0.0
    rotation_speed: float = 0.0
    scale: Vector2 = field(default_factory=lambda: Vector2(1.0, 1.0))
    color: Color = field(default_factory=lambda: Color.WHITE)
    texture_index: int = 0
    passed_lifetime: float = 0.0


def elapsed_lifetime(particle: Particle) -> float:
    """Time the particle has already lived."""
    return particle.passed_lifetime


def total_lifetime(particle: Particle) -> float:
    """Total time the particle lives."""
    return particle.total_lifetime


def remaining_lifetime(particle: Particle) -> float:
    """Time the particle still has to live."""
    return total_lifetime(particle) - elapsed_lifetime(particle)


def elapsed_ratio(particle: Particle) -> float:
    """Fraction of the lifetime that has passed."""
    return elapsed_lifetime(particle) / total_lifetime(particle)


def remaining_ratio(particle: Particle) -> float:
    """Fraction of the lifetime that is left."""
    return remaining_lifetime(particle) / total_lifetime(particle)


def abandon_particle(particle: Particle) -> None:
    """Mark the particle as dead; it is removed at the next update."""
    particle.passed_lifetime = particle.total_lifetime


Distribution = Union[Callable[[], Any], Any]


def _sample(distribution: Distribution) -> Any:
    return distribution() if callable(distribution) else distribution


class UniversalEmitter:
    """Emits particles at a steady rate with properties drawn from distributions.

    Every ``particle_*`` attribute holds either a constant or a callable taking
    no arguments that returns a fresh value for each emitted particle.
    """

    def __init__(self) -> None:
        self.emission_rate: float = 1.0
        self.particle_lifetime: Distribution = 1.0
        self.particle_position: Distribution = Vector2(0.0, 0.0)
        self.particle_velocity: Distribution = Vector2(0.0, 0.0)
        self.particle_rotation: Distribution = 0.0
        self.particle_rotation_speed: Distribution = 0.0
        self.particle_scale: Distribution = Vector2(1.0, 1.0)
        self.particle_color: Distribution = Color.WHITE
        self.particle_texture_index: Distribution = 0
        self._emission_difference = 0.0

    def __call__(self, system: Any, dt: float) -> None:
        """Emit the particles due in a frame of length dt into system."""
        for _ in range(self._particle_count(dt)):
            particle = Particle(
                _sample(self.particle_lifetime),
                position=_sample(self.particle_position),
                velocity=_sample(self.particle_velocity),
                rotation=_sample(self.particle_rotation),
                rotation_speed=_sample(self.particle_rotation_speed),
                scale=_sample(self.particle_scale),
                color=_sample(self.particle_color),
                texture_index=_sample(self.particle_texture_index),
            )
            system.emit_particle(particle)

    def _particle_count(self, dt: float) -> int:
        # Carry the fractional part over so the long-run rate is exact.
        amount = self.emission_rate * dt + self._emission_difference
        count = int(amount)
        self._emission_difference = amount - count
        return count


@dataclass(frozen=True)
class Vertex:
    """A drawable corner of a particle quad."""

    position: Vector2
    tex_coords: Vector2
    color: Color


@dataclass(eq=False)
class _Timed:
    id: int
    function: Callable[..., Any]
    time_until_removal: float

    def expires_after(self, dt: float) -> bool:
        # Zero means the entry lives forever.
        if self.time_until_removal == 0:
            return False
        self.time_until_removal -= dt
        return self.time_until_removal <= 0


_Quad = Tuple[Tuple[Vector2, Vector2], ...]


def _compute_quad(rect: IntRect) -> _Quad:
    left, top = float(rect.left), float(rect.top)
    width, height = float(rect.width), float(rect.height)
    tex = (
        Vector2(left, top),
        Vector2(left + width, top),
        Vector2(left + width, top + height),
        Vector2(left, top + height),
    )
    pos = (
        Vector2(-width, -height) / 2.0,
        Vector2(width, -height) / 2.0,
        Vector2(width, height) / 2.0,
        Vector2(-width, height) / 2.0,
    )
    return tuple(zip(pos, tex))


class ParticleSystem:
    """Holds particles, emitters creating them and affectors changing them."""

    def __init__(self) -> None:
        self._particles: List[Particle] = []
        self._affectors: List[_Timed] = []
        self._emitters: List[_Timed] = []
        self._ids = itertools.count(1)
        self._texture_size: Optional[Tuple[int, int]] = None
        self._texture_rects: List[IntRect] = []
        self._quads: List[_Quad] = []
        self._needs_quad_update = True
        self._vertices: List[Vertex] = []
        self._needs_vertex_update = True

    def set_texture(self, size: Iterable[int]) -> None:
        """Use a texture of the given (width, height)."""
        width, height = size
        self._texture_size = (int(width), int(height))
        self._needs_quad_update = True

    def add_texture_rect(self, rect: IntRect) -> int:
        """Add a texture rectangle and return the index particles use to select it."""
        self._texture_rects.append(rect)
        self._needs_quad_update = True
        return len(self._texture_rects) - 1

    def add_affector(
        self, affector: Callable[[Particle, float], Any], time_until_removal: float = 0.0
    ) -> Connection:
        """Add an affector called for every living particle; zero time means forever."""
        entry = _Timed(next(self._ids), affector, time_until_removal)
        self._affectors.append(entry)
        return id_connection(self._affectors, entry.id)

    def clear_affectors(self) -> None:
        self._affectors.clear()

    def add_emitter(
        self, emitter: Callable[["ParticleSystem", float], Any], time_until_removal: float = 0.0
    ) -> Connection:
        """Add an emitter called once per update; zero time means forever."""
        entry = _Timed(next(self._ids), emitter, time_until_removal)
        self._emitters.append(entry)
        return id_connection(self._emitters, entry.id)

    def clear_emitters(self) -> None:
        self._emitters.clear()

    def update(self, dt: float) -> None:
        """Advance the system by dt seconds."""
        self._needs_vertex_update = True

        expired = set()
        for entry in list(self._emitters):
            entry.function(self, dt)
            if entry.expires_after(dt):
                expired.add(entry.id)
        self._emitters[:] = [e for e in self._emitters if e.id not in expired]

        survivors = []
        for particle in self._particles:
            self._advance(particle, dt)
            if particle.passed_lifetime < particle.total_lifetime:
                for affector in self._affectors:
                    affector.function(particle, dt)
                survivors.append(particle)
        self._particles[:] = survivors

        expired = {entry.id for entry in list(self._affectors) if entry.expires_after(dt)}
        self._affectors[:] = [e for e in self._affectors if e.id not in expired]

    @staticmethod
    def _advance(particle: Particle, dt: float) -> None:
        particle.passed_lifetime += dt
        particle.position = particle.position + particle.velocity * dt
        particle.rotation += particle.rotation_speed * dt

    def clear_particles(self) -> None:
        self._particles.clear()

    def emit_particle(self, particle: Particle) -> None:
        """Add a particle to the system."""
        self._particles.append(particle)
        self._needs_vertex_update = True

    def particles(self) -> Tuple[Particle, ...]:
        """The living particles."""
        return tuple(self._particles)

    def vertices(self) -> Tuple[Vertex, ...]:
        """Four vertices per particle, ready to be drawn as quads."""
        if self._needs_quad_update:
            self._compute_quads()
            self._needs_quad_update = False
        if self._needs_vertex_update:
            self._compute_vertices()
            self._needs_vertex_update = False
        return tuple(self._vertices)

    def _compute_quads(self) -> None:
        if self._texture_size is None:
            raise RuntimeError("set_texture() must be called before drawing")
        if self._texture_rects:
            self._quads = [_compute_quad(rect) for rect in self._texture_rects]
        else:
            width, height = self._texture_size
            self._quads = [_compute_quad(IntRect(0, 0, width, height))]

    def _compute_vertices(self) -> None:
        vertices = []
        for p in self._particles:
            if not (p.texture_index == 0 or p.texture_index < len(self._texture_rects)):
                raise IndexError(f"invalid texture index {p.texture_index}")
            angle = math.radians(p.rotation)
            cos, sin = math.cos(angle), math.sin(angle)
            for corner, tex in self._quads[p.texture_index]:
                sx, sy = corner.x * p.scale.x, corner.y * p.scale.y
                position = Vector2(
                    cos * sx - sin * sy + p.position.x,
                    sin * sx + cos * sy + p.position.y,
                )
                vertices.append(Vertex(position, tex, p.color))
        self._vertices = vertices