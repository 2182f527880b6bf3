"""
Per-mode simulation settings.

Values default to the compile-time constants in ``ballpit.constants`` and are
checked once, when the config is built, so the step functions never have to.
"""
import math
from dataclasses import dataclass
from typing import Optional, Tuple

from . import constants as C
from .errors import ConfigurationError


def _require_positive(name, value):
    if not isinstance(value, (int, float)) or not math.isfinite(value) or value <= 0:
        raise ConfigurationError(f"{name} must be a positive number, got {value!r}")


@dataclass
class Toggles:
    """Ambient flags flipped by the front end between ticks."""
    use_color: bool = True
    damping: bool = True
    draw_collisions: bool = True
    collisions: bool = True
    recentre: bool = False
    show_center_of_mass: bool = True
    trails: bool = True


@dataclass
class GravityConfig:
    g: float = C.G
    max_velocity: float = C.GRAVITY_MAX_VELOCITY
    growth_increment: float = C.GROWTH_INCREMENT
    initial_radius: float = C.INITIAL_RADIUS
    mass_model: str = "square"

    def __post_init__(self):
        _require_positive("g", self.g)
        _require_positive("max_velocity", self.max_velocity)
        _require_positive("growth_increment", self.growth_increment)
        _require_positive("initial_radius", self.initial_radius)
        if self.mass_model not in ("square", "area"):
            raise ConfigurationError(f"unknown mass model {self.mass_model!r}")


@dataclass
class ElasticConfig:
    num_particles: int = C.NUM_PARTICLES
    max_velocity: float = C.ELASTIC_MAX_VELOCITY
    acceleration_factor: float = C.ACCELERATION_FACTOR
    damping_factor: float = C.DAMPING_FACTOR
    radius_range: Tuple[float, float] = C.RADIUS_RANGE
    speed_range: Tuple[float, float] = C.SPEED_RANGE
    threshold_divisor: float = C.MOUSE_THRESHOLD_DIVISOR
    mass_model: str = "area"
    seed: Optional[int] = None

    def __post_init__(self):
        if not isinstance(self.num_particles, int) or self.num_particles < 0:
            raise ConfigurationError(f"num_particles must be a non-negative int, got {self.num_particles!r}")
        _require_positive("max_velocity", self.max_velocity)
        _require_positive("acceleration_factor", self.acceleration_factor)
        _require_positive("damping_factor", self.damping_factor)
        if self.damping_factor > 1.0:
            raise ConfigurationError(f"damping_factor must be <= 1, got {self.damping_factor!r}")
        _require_positive("threshold_divisor", self.threshold_divisor)

        r_min, r_max = self.radius_range
        _require_positive("radius_range[0]", r_min)
        if r_max < r_min:
            raise ConfigurationError(f"radius_range is inverted: {self.radius_range!r}")
        s_min, s_max = self.speed_range
        if s_max < s_min:
            raise ConfigurationError(f"speed_range is inverted: {self.speed_range!r}")
        if self.mass_model not in ("square", "area"):
            raise ConfigurationError(f"unknown mass model {self.mass_model!r}")
