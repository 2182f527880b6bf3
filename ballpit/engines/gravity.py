"""
N-body attraction.

Every unordered pair pulls on each other with an inverse-square force. Pairs
whose discs touch or overlap sit in a dead zone and exert no force, which keeps
close encounters from blowing up. The engine also tracks the centre of mass and
can shift the whole view so the system stays centred on screen.
"""
import logging
import math

import numpy as np

from ..Particle import Particle
from ..Vector2 import Vector2
from ..constants import PARTICLE_COLOR
from ..errors import CapacityError
from .engine import InteractionEngine

logger = logging.getLogger(__name__)


def calculate_force(p1, p2, g):
    """
    Force of p2 on p1 (Vector2).

    The force on p2 is the negation. Zero when the centres are within the sum
    of the radii (including the coincident case) or the distance is not finite.
    """
    v12 = p2.pos - p1.pos  # vector from p1 to p2
    dist = v12.magnitude()
    # a non-finite position must not leak into the other particle
    if not math.isfinite(dist) or dist <= p1.radius + p2.radius:
        return Vector2(0.0, 0.0)
    force = g * p1.mass * p2.mass / (dist * dist)
    return (v12 / dist) * force


def center_of_mass(particles, default=None):
    """Mass-weighted mean position of the finite particles; `default` (or the origin) when none."""
    particles = [p for p in particles if p.pos.is_finite()]
    if not particles:
        return default.copy() if default is not None else Vector2(0.0, 0.0)
    masses = np.fromiter((p.mass for p in particles), dtype=np.float64, count=len(particles))
    positions = np.array([(p.pos.x, p.pos.y) for p in particles], dtype=np.float64)
    x, y = np.average(positions, axis=0, weights=masses)
    return Vector2(float(x), float(y))


class GravityEngine(InteractionEngine):
    mass_model = "square"

    def accumulate_accelerations(self, particles):
        for p in particles:
            p.acceleration = Vector2(0.0, 0.0)

        n = len(particles)
        for i in range(n):
            p1 = particles[i]
            for j in range(i + 1, n):
                p2 = particles[j]
                f12 = calculate_force(p1, p2, self.config.g)
                # A = f1/m + f2/m + ... + fn/m
                p1.acceleration = p1.acceleration + f12 / p1.mass
                p2.acceleration = p2.acceleration - f12 / p2.mass

    def step(self, simulation):
        cfg = self.config
        particles = simulation.particles

        held = simulation.held
        pointer_pos = simulation.pointer.position
        if held is not None and simulation.pointer.pressed and pointer_pos is not None:
            held.grow(cfg.growth_increment)
            held.pos = pointer_pos.copy()
            held.vel = Vector2(0.0, 0.0)

        self.accumulate_accelerations(particles)

        for p in particles:
            p.update(cfg.max_velocity)

        simulation.center_of_mass = center_of_mass(particles, simulation.view_center)
        if simulation.toggles.recentre:
            self.recentre(simulation)

    def recentre(self, simulation):
        """Shift every particle so the centre of mass lands on the view centre."""
        com = center_of_mass(simulation.particles, simulation.view_center)
        simulation.translate_view(simulation.view_center - com)

    def on_pointer_press(self, simulation):
        pointer_pos = simulation.pointer.position
        if pointer_pos is None:
            return
        particle = Particle(pointer_pos, radius=self.config.initial_radius,
                            fill=PARTICLE_COLOR, stroke=PARTICLE_COLOR, mass_model=self.mass_model)
        # pinned to the pointer until release
        particle.fixed = True
        try:
            simulation.add_particle(particle)
        except CapacityError as e:
            logger.warning("ignoring press: %s", e)
            return
        simulation.held = particle
        logger.debug("new particle at %s", pointer_pos)

    def on_pointer_release(self, simulation):
        held = simulation.held
        if held is None:
            return
        held.fixed = False
        simulation.held = None
        logger.debug("released particle radius=%.2f mass=%.2f", held.radius, held.mass)

    def reinitialize(self, simulation, particle):
        particle.pos = simulation.view_center.copy()
        particle.vel = Vector2(0.0, 0.0)
        particle.acceleration = Vector2(0.0, 0.0)
