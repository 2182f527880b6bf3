import logging

import numpy as np

from ..Particle import Particle
from ..Vector2 import Vector2
from ..collision import (
    apply_boundary_constraints,
    detect_particle_collision,
    handle_edge_collisions,
    resolve_particle_collision,
)
from ..forcefield import apply_pointer_field
from .engine import InteractionEngine

logger = logging.getLogger(__name__)


class ElasticEngine(InteractionEngine):
    """
    Pretty balls: a fixed pool of discs bouncing off the walls and each other,
    pulled toward (or pushed from) the pointer.

    Step: pointer field -> damped velocity -> position -> walls -> pairs.
    """
    mass_model = "area"

    def __init__(self, config):
        super().__init__(config)
        self.rng = np.random.default_rng(config.seed)

    def random_color(self):
        return tuple(int(c) for c in self.rng.integers(0, 256, size=3))

    def randomize(self, particle, width, height):
        r = particle.radius
        s_min, s_max = self.config.speed_range
        particle.pos = Vector2(self.rng.uniform(r, width - r), self.rng.uniform(r, height - r))
        particle.vel = Vector2(self.rng.uniform(s_min, s_max), self.rng.uniform(s_min, s_max))
        particle.acceleration = Vector2(0.0, 0.0)

    def spawn(self, width, height):
        r_min, r_max = self.config.radius_range
        particle = Particle(Vector2(0.0, 0.0), radius=self.rng.uniform(r_min, r_max),
                            fill=self.random_color(), stroke=self.random_color(),
                            mass_model=self.mass_model)
        self.randomize(particle, width, height)
        return particle

    def populate(self, simulation):
        for _ in range(self.config.num_particles):
            simulation.add_particle(self.spawn(simulation.width, simulation.height))
        logger.info("created %d particles in %dx%d", len(simulation.particles),
                    simulation.width, simulation.height)

    def on_resize(self, simulation):
        simulation.mouse_threshold = simulation.width / self.config.threshold_divisor

    def resolve_collisions(self, particles):
        n = len(particles)
        for i in range(n):
            p1 = particles[i]
            for j in range(i + 1, n):
                p2 = particles[j]
                if detect_particle_collision(p1, p2):
                    resolve_particle_collision(p1, p2)

    def step(self, simulation):
        cfg = self.config
        toggles = simulation.toggles
        particles = simulation.particles
        width, height = simulation.width, simulation.height

        pointer_pos = simulation.pointer.position
        damping = cfg.damping_factor if toggles.damping else None

        for p in particles:
            apply_pointer_field(p, pointer_pos, simulation.mouse_threshold,
                                cfg.acceleration_factor, attract=toggles.use_color)
            p.update(cfg.max_velocity, damping)
            handle_edge_collisions(p, width, height)

        if toggles.collisions:
            self.resolve_collisions(particles)
            # Final boundary check after collisions
            for p in particles:
                apply_boundary_constraints(p, width, height)

    def reinitialize(self, simulation, particle):
        self.randomize(particle, simulation.width, simulation.height)
