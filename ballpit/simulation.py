import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from . import constants
from .Vector2 import Vector2
from .config import ElasticConfig, GravityConfig, Toggles
from .engines.elastic import ElasticEngine
from .engines.gravity import GravityEngine
from .pointer import Pointer
from .errors import CapacityError, ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParticleView:
    """What the renderer needs to draw one particle for one frame."""
    x: float
    y: float
    radius: float
    fill: Tuple[int, int, int]
    stroke: Tuple[int, int, int]
    colliding: bool
    tether_alpha: float


def make_engine(config):
    """Pick the interaction strategy for a config."""
    if isinstance(config, GravityConfig):
        return GravityEngine(config)
    if isinstance(config, ElasticConfig):
        return ElasticEngine(config)
    raise ConfigurationError(f"no interaction engine for {type(config).__name__}")


class Simulation:
    """
    Owns everything one running playground needs: the particles, the pointer
    slot, the viewport, the ambient toggles and the interaction engine.

    The front end calls update() once per frame and snapshot() to draw.
    """

    def __init__(self, config, width=constants.WIDTH, height=constants.HEIGHT, toggles=None,
                 capacity: Optional[int] = None, reinitialize_invalid=True):
        if capacity is not None and capacity < 0:
            raise ConfigurationError(f"capacity must be non-negative, got {capacity!r}")
        self.config = config
        self.engine = make_engine(config)
        self.toggles = toggles if toggles is not None else Toggles()
        self.capacity = capacity
        self.reinitialize_invalid = reinitialize_invalid

        self.particles = []
        self.pointer = Pointer()
        self.held = None
        self.mouse_threshold = 0.0
        self.width = 0
        self.height = 0
        self.view_center = Vector2(0.0, 0.0)
        self.resize(width, height)
        self.center_of_mass = self.view_center.copy()

        self.paused = False
        self.stopped = False
        self.ticks = 0
        self._snapshot_tick = None

        self.engine.populate(self)

    # --- particle collection ---

    def add_particle(self, particle):
        if self.capacity is not None and len(self.particles) >= self.capacity:
            raise CapacityError(f"simulation is full ({self.capacity} particles)")
        self.particles.append(particle)
        return len(self.particles) - 1

    def remove_particle(self, particle):
        if particle in self.particles:
            self.particles.remove(particle)
            if self.held is particle:
                self.held = None

    # --- input from the front end ---

    def move_pointer(self, x, y):
        self.pointer.move(x, y)

    def leave_pointer(self):
        self.pointer.leave()
        self.engine.on_pointer_release(self)

    def press_pointer(self):
        self.pointer.press()
        self.engine.on_pointer_press(self)

    def release_pointer(self):
        self.pointer.release()
        self.engine.on_pointer_release(self)

    def resize(self, width, height):
        if width <= 0 or height <= 0:
            raise ConfigurationError(f"viewport must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.view_center.set(width / 2, height / 2)
        self.engine.on_resize(self)

    def translate_view(self, offset):
        """Shift every particle; relative positions and velocities are kept."""
        for p in self.particles:
            p.pos = p.pos + offset
        self.center_of_mass = self.center_of_mass + offset

    def recentre_view(self):
        if isinstance(self.engine, GravityEngine):
            self.engine.recentre(self)

    # --- loop control ---

    @property
    def running(self):
        return not self.stopped

    def pause(self):
        self.paused = True

    def resume(self):
        self.paused = False

    def toggle_pause(self):
        self.paused = not self.paused
        logger.debug("paused=%s", self.paused)

    def stop(self):
        self.stopped = True

    def update(self):
        """Advance one frame. Does nothing while paused or after stop()."""
        if self.paused or self.stopped:
            return False
        self.engine.step(self)
        self.ticks += 1
        self.check_integrity()
        return True

    on_tick = update

    def check_integrity(self):
        """Find particles whose state went NaN/inf and optionally restore them."""
        bad = [p for p in self.particles if not p.is_valid()]
        for p in bad:
            logger.warning("non-finite particle state at tick %d: %r", self.ticks, p)
            if self.reinitialize_invalid:
                self.engine.reinitialize(self, p)
        return bad

    def reset(self):
        """Drop all particles and rebuild the initial set."""
        self.particles = []
        self.held = None
        self.center_of_mass = self.view_center.copy()
        self.engine.populate(self)

    # --- output to the renderer ---

    def snapshot(self):
        """
        Per-particle render data.

        The first snapshot after a tick reads and clears the collision flags;
        later snapshots before the next tick (e.g. while paused) repeat them.
        """
        fresh = self._snapshot_tick != self.ticks
        self._snapshot_tick = self.ticks
        views = []
        for p in self.particles:
            if fresh:
                p.shown_colliding = p.consume_collision_flag()
            views.append(ParticleView(p.pos.x, p.pos.y, p.radius, p.fill, p.stroke,
                                      p.shown_colliding, p.tether_alpha))
        return views

    def __repr__(self):
        return f"<Simulation {type(self.engine).__name__} particles={len(self.particles)} {self.width}x{self.height}>"
