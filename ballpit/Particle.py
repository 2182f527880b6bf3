import math

from .Vector2 import Vector2
from .errors import ConfigurationError

MASS_MODELS = {
    # gravity mode: mass grows with the square of the radius
    "square": lambda r: r * r,
    # pretty balls: mass is the disc area
    "area": lambda r: math.pi * r * r,
}


class Particle:
    def __init__(self, pos, vel=None, radius=1.0, fill=(255, 255, 255), stroke=(255, 255, 255), mass_model="square"):
        if mass_model not in MASS_MODELS:
            raise ConfigurationError(f"unknown mass model {mass_model!r}")
        self.pos = pos.copy() if isinstance(pos, Vector2) else Vector2(pos[0], pos[1])
        if vel is None:
            self.vel = Vector2(0.0, 0.0)
        else:
            self.vel = vel.copy() if isinstance(vel, Vector2) else Vector2(vel[0], vel[1])
        self.acceleration = Vector2(0.0, 0.0)

        self.fill = tuple(fill)
        self.stroke = tuple(stroke)
        self.is_colliding = False
        self.tether_alpha = 0.0

        # Internal state for properties
        self._mass_model = mass_model
        self._radius = 1.0
        self.fixed = False
        self.mass = 1.0
        self.shown_colliding = False

        # Use setters to validate radius and derive mass
        self.radius = radius

    @property
    def radius(self):
        return self._radius

    @radius.setter
    def radius(self, value):
        value = float(value)
        if not math.isfinite(value) or value <= 0.0:
            raise ConfigurationError(f"particle radius must be positive, got {value!r}")
        self._radius = value
        self.mass = MASS_MODELS[self._mass_model](value)

    def grow(self, increment):
        self.radius = self._radius + increment

    def update(self, max_velocity, damping_factor=None):
        """
        Semi-implicit Euler step: velocity from the accumulated acceleration,
        then position from the new velocity. Speed is clamped to max_velocity.
        """
        if self.fixed:
            return
        self.vel = self.vel + self.acceleration
        if damping_factor is not None:
            self.vel = self.vel * damping_factor
        speed = self.vel.magnitude()
        if speed > max_velocity:
            x = self.vel.x * (max_velocity / speed)
            y = self.vel.y * (max_velocity / speed)
            # rounding can leave the scaled vector an ulp too long
            while math.hypot(x, y) > max_velocity:
                x = math.nextafter(x, 0.0)
                y = math.nextafter(y, 0.0)
            self.vel = Vector2(x, y)
        self.pos = self.pos + self.vel

    def consume_collision_flag(self):
        colliding = self.is_colliding
        self.is_colliding = False
        return colliding

    def is_valid(self):
        return self.pos.is_finite() and self.vel.is_finite() and self.acceleration.is_finite()

    def __repr__(self):
        return f"Particle(pos=({self.pos.x:.2f}, {self.pos.y:.2f}), vel=({self.vel.x:.2f}, {self.vel.y:.2f}), radius={self.radius}, mass={self.mass:.2f}, fixed={self.fixed})"

    def __str__(self):
        return self.__repr__()
