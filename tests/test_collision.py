import pytest

from ballpit.Particle import Particle
from ballpit.Vector2 import Vector2
from ballpit.collision import (
    apply_boundary_constraints,
    detect_particle_collision,
    handle_edge_collisions,
    resolve_particle_collision,
)


def ball(x, y, vx=0.0, vy=0.0, radius=5.0):
    return Particle(Vector2(x, y), vel=Vector2(vx, vy), radius=radius, mass_model="area")


def test_detect_includes_touching():
    assert detect_particle_collision(ball(0, 0), ball(10, 0))
    assert detect_particle_collision(ball(0, 0), ball(9, 0))
    assert not detect_particle_collision(ball(0, 0), ball(10.01, 0))


def test_head_on_collision_scenario():
    a = ball(10, 10, vx=1)
    b = ball(19, 10, vx=-1)
    resolve_particle_collision(a, b)

    assert a.vel == Vector2(-1, 0)
    assert b.vel == Vector2(1, 0)
    assert (b.pos - a.pos).magnitude() == pytest.approx(10.0)
    assert a.pos == Vector2(9.5, 10)
    assert b.pos == Vector2(19.5, 10)
    assert a.is_colliding and b.is_colliding


@pytest.mark.parametrize("pa,pb,va,vb", [
    ((0, 0), (6, 8), (3, -1), (-2, 4)),
    ((50, 50), (52, 45), (0, 0), (7, 7)),
    ((-3, 4), (1, 1), (0.5, 0.25), (-1.5, 2)),
])
def test_momentum_along_normal_is_conserved(pa, pb, va, vb):
    a = Particle(Vector2(*pa), vel=Vector2(*va), radius=5)
    b = Particle(Vector2(*pb), vel=Vector2(*vb), radius=6)
    normal = (b.pos - a.pos).normalize()
    before = a.vel + b.vel

    resolve_particle_collision(a, b)

    after = a.vel + b.vel
    assert after.dot(normal) == pytest.approx(before.dot(normal))
    assert after.x == pytest.approx(before.x)
    assert after.y == pytest.approx(before.y)


def test_impulse_ignores_mass_difference():
    # Known deviation from real elastic collisions: the normal components are
    # swapped as if both discs had equal mass, whatever their radii.
    small = Particle(Vector2(0, 0), vel=Vector2(2, 0), radius=1, mass_model="area")
    big = Particle(Vector2(10, 0), vel=Vector2(0, 0), radius=9.5, mass_model="area")
    resolve_particle_collision(small, big)
    assert small.vel == Vector2(0, 0)
    assert big.vel == Vector2(2, 0)
    assert small.mass < big.mass


def test_coincident_centres_do_not_produce_nan():
    a = ball(5, 5, vx=1)
    b = ball(5, 5, vx=-1)
    resolve_particle_collision(a, b)
    assert a.is_valid() and b.is_valid()
    assert (b.pos - a.pos).magnitude() == pytest.approx(10.0)


@pytest.mark.parametrize("x,y,vx,vy,expected_pos,expected_vel", [
    (2, 50, -3, 1, (5, 50), (3, 1)),
    (98, 50, 3, 1, (95, 50), (-3, 1)),
    (50, 1, 1, -4, (50, 5), (1, 4)),
    (50, 99, 1, 4, (50, 95), (1, -4)),
    (0, 0, -1, -1, (5, 5), (1, 1)),
])
def test_edge_reflection(x, y, vx, vy, expected_pos, expected_vel):
    p = ball(x, y, vx, vy)
    assert handle_edge_collisions(p, 100, 100)
    assert p.pos == Vector2(*expected_pos)
    assert p.vel == Vector2(*expected_vel)
    assert p.is_colliding


def test_edge_no_contact_leaves_particle_alone():
    p = ball(50, 50, 1, 1)
    assert not handle_edge_collisions(p, 100, 100)
    assert p.pos == Vector2(50, 50)
    assert p.vel == Vector2(1, 1)
    assert not p.is_colliding


def test_boundary_constraint_is_positional_only():
    p = ball(-10, 120, 3, 3)
    apply_boundary_constraints(p, 100, 100)
    assert p.pos == Vector2(5, 95)
    assert p.vel == Vector2(3, 3)


def test_detection_uses_squared_distance_boundary():
    a = Particle(Vector2(0, 0), radius=3)
    b = Particle(Vector2(3, 4), radius=2)
    assert detect_particle_collision(a, b)
    b.pos = Vector2(3, 4.0001)
    assert not detect_particle_collision(a, b)
    b.pos = Vector2(float("nan"), 0)
    assert not detect_particle_collision(a, b)
