"""
Pointer force field for the pretty-balls mode.

Each particle feels a pull (or push) toward the pointer that fades out
quadratically with distance. The same falloff value drives the opacity of the
tether line drawn from the particle to the pointer.
"""
from .Vector2 import Vector2


def mouse_distance_function(distance, radius, threshold):
    """
    Quadratic falloff of pointer influence.

    Returns 1 inside the particle (distance <= radius), 0 at or beyond the
    threshold, and 1 - (distance / threshold)**2 in between.
    """
    if distance <= radius:
        return 1.0
    if distance >= threshold:
        return 0.0
    return 1.0 - (distance / threshold) ** 2


def apply_pointer_field(particle, pointer_pos, threshold, acceleration_factor, attract=True):
    """
    Set particle.acceleration and particle.tether_alpha from the pointer.

    pointer_pos is None when the pointer is outside the viewport, in which
    case both are zero. Returns the falloff value.
    """
    if pointer_pos is None:
        particle.acceleration = Vector2(0.0, 0.0)
        particle.tether_alpha = 0.0
        return 0.0

    to_pointer = pointer_pos - particle.pos
    falloff = mouse_distance_function(to_pointer.magnitude(), particle.radius, threshold)
    particle.tether_alpha = falloff
    if falloff == 0.0:
        particle.acceleration = Vector2(0.0, 0.0)
        return falloff

    acceleration = to_pointer * (falloff * acceleration_factor)
    particle.acceleration = acceleration if attract else -acceleration
    return falloff
