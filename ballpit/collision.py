from .Vector2 import Vector2

# used when two centres coincide and the line of centres is undefined
FALLBACK_NORMAL = Vector2(1.0, 0.0)


def detect_particle_collision(p1, p2):
    """
    Detect collision between two particles.
    Touching counts: returns True when the centre distance <= sum of radii.
    """
    # use squared distance to avoid unnecessary sqrt for simple test
    dist_sq = (p1.pos - p2.pos).magnitude_sq()
    rsum = p1.radius + p2.radius
    return dist_sq <= (rsum * rsum)


def resolve_particle_collision(p1, p2):
    """
    Resolve an elastic collision along the line of centres.

    The normal component of the relative velocity is exchanged as an equal and
    opposite impulse (masses are not weighted), then the pair is pushed apart
    by half the overlap each so the centres end exactly min_dist apart.
    Returns the impulse added to p1's velocity.
    """
    delta = p2.pos - p1.pos
    dist = delta.magnitude()
    min_dist = p1.radius + p2.radius

    # handle coincident centers
    if dist <= 1e-9:
        normal = FALLBACK_NORMAL.copy()
    else:
        normal = delta / dist

    rv = p2.vel - p1.vel
    impulse = normal * normal.dot(rv)
    p1.vel = p1.vel + impulse
    p2.vel = p2.vel - impulse

    overlap = min_dist - dist
    if overlap > 0.0:
        half = normal * (overlap * 0.5)
        p1.pos = p1.pos - half
        p2.pos = p2.pos + half

    p1.is_colliding = True
    p2.is_colliding = True
    return impulse


def handle_edge_collisions(particle, width, height):
    """
    Reflect a particle off the viewport walls.

    A centre within its radius of a wall is clamped to the inset value and the
    velocity component normal to that wall is negated. Returns True on contact.
    """
    r = particle.radius
    hit = False

    if particle.pos.x <= r:
        particle.pos = Vector2(r, particle.pos.y)
        particle.vel = Vector2(-particle.vel.x, particle.vel.y)
        hit = True
    elif particle.pos.x >= width - r:
        particle.pos = Vector2(width - r, particle.pos.y)
        particle.vel = Vector2(-particle.vel.x, particle.vel.y)
        hit = True

    if particle.pos.y <= r:
        particle.pos = Vector2(particle.pos.x, r)
        particle.vel = Vector2(particle.vel.x, -particle.vel.y)
        hit = True
    elif particle.pos.y >= height - r:
        particle.pos = Vector2(particle.pos.x, height - r)
        particle.vel = Vector2(particle.vel.x, -particle.vel.y)
        hit = True

    if hit:
        particle.is_colliding = True
    return hit


def apply_boundary_constraints(particle, width, height):
    # Positional clamp only; the velocity-based bounce is handle_edge_collisions.
    r = particle.radius
    x = min(max(particle.pos.x, r), width - r)
    y = min(max(particle.pos.y, r), height - r)
    if x != particle.pos.x or y != particle.pos.y:
        particle.pos = Vector2(x, y)
