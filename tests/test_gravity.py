import pytest

from ballpit.Particle import Particle
from ballpit.Vector2 import Vector2
from ballpit.config import GravityConfig, Toggles
from ballpit.engines.gravity import calculate_force, center_of_mass
from ballpit.errors import ConfigurationError
from ballpit.simulation import Simulation


def make_sim(**toggles):
    return Simulation(GravityConfig(g=0.2), width=800, height=600, toggles=Toggles(**toggles))


def test_newtons_third_law():
    p1 = Particle(Vector2(10, 20), radius=2)
    p2 = Particle(Vector2(-35, 70), radius=4)
    f12 = calculate_force(p1, p2, 0.2)
    f21 = calculate_force(p2, p1, 0.2)
    assert f12.x == pytest.approx(-f21.x)
    assert f12.y == pytest.approx(-f21.y)


def test_accumulated_accelerations_are_equal_and_opposite_forces():
    sim = make_sim()
    a = Particle(Vector2(100, 100), radius=3)
    b = Particle(Vector2(160, 180), radius=6)
    sim.add_particle(a)
    sim.add_particle(b)
    sim.engine.accumulate_accelerations(sim.particles)
    fa = a.acceleration * a.mass
    fb = b.acceleration * b.mass
    assert fa.x == pytest.approx(-fb.x)
    assert fa.y == pytest.approx(-fb.y)


@pytest.mark.parametrize("distance", [0.0, 4.0, 9.99, 10.0])
def test_dead_zone_gives_exact_zero(distance):
    p1 = Particle(Vector2(0, 0), radius=5)
    p2 = Particle(Vector2(distance, 0), radius=5)
    assert calculate_force(p1, p2, 0.2) == Vector2(0.0, 0.0)


def test_inverse_square_outside_dead_zone():
    p1 = Particle(Vector2(0, 0), radius=1)
    p2 = Particle(Vector2(0, 30), radius=1)
    f = calculate_force(p1, p2, 0.2)
    assert f.x == 0.0
    assert f.y == pytest.approx(0.2 * 1 * 1 / 900)


def test_two_body_single_tick():
    sim = make_sim()
    p1 = Particle(Vector2(0, 0), radius=5)
    p2 = Particle(Vector2(20, 0), radius=5)
    sim.add_particle(p1)
    sim.add_particle(p2)

    sim.update()

    force = 0.2 * p1.mass * p2.mass / 400
    assert p1.vel.x == pytest.approx(force / p1.mass)
    assert p2.vel.x == pytest.approx(-force / p2.mass)
    assert p1.vel.y == 0.0 and p2.vel.y == 0.0
    # semi-implicit: position moved by the new velocity
    assert p1.pos.x == pytest.approx(force / p1.mass)
    assert p2.pos.x == pytest.approx(20 - force / p2.mass)


def test_center_of_mass_is_mass_weighted():
    light = Particle(Vector2(0, 0), radius=1)
    heavy = Particle(Vector2(10, 0), radius=3)
    com = center_of_mass([light, heavy])
    assert com.x == pytest.approx(90 / 10)
    assert com.y == pytest.approx(0)


def test_center_of_mass_of_nothing_is_default():
    assert center_of_mass([], Vector2(4, 5)) == Vector2(4, 5)


def test_recentre_shifts_positions_only():
    sim = make_sim(recentre=True)
    a = Particle(Vector2(10, 10), vel=Vector2(0.5, 0), radius=1)
    b = Particle(Vector2(100, 50), vel=Vector2(0, -0.5), radius=2)
    sim.add_particle(a)
    sim.add_particle(b)

    sim.update()

    assert sim.center_of_mass.x == pytest.approx(400)
    assert sim.center_of_mass.y == pytest.approx(300)
    recomputed = center_of_mass(sim.particles)
    assert recomputed.x == pytest.approx(400)
    assert recomputed.y == pytest.approx(300)
    # relative geometry unchanged by the view shift
    gap = b.pos - a.pos
    assert gap.x == pytest.approx(90 + b.vel.x - a.vel.x)
    assert gap.y == pytest.approx(40 + b.vel.y - a.vel.y)


def test_press_creates_particle_that_grows_while_held():
    sim = make_sim()
    sim.move_pointer(200, 150)
    sim.press_pointer()
    assert len(sim.particles) == 1
    held = sim.held
    assert held.radius == pytest.approx(1.0)

    sim.move_pointer(210, 160)
    sim.update()
    sim.update()
    assert held.radius == pytest.approx(1.6)
    assert held.mass == pytest.approx(1.6 ** 2)
    assert held.pos == Vector2(210, 160)

    sim.release_pointer()
    assert sim.held is None
    assert not held.fixed
    sim.update()
    assert held.radius == pytest.approx(1.6)


def test_pointer_leave_releases_held_particle():
    sim = make_sim()
    sim.move_pointer(50, 50)
    sim.press_pointer()
    sim.leave_pointer()
    assert sim.held is None
    assert not sim.pointer.pressed


def test_press_outside_viewport_creates_nothing():
    sim = make_sim()
    sim.press_pointer()
    assert sim.particles == []


def test_translate_view():
    sim = make_sim()
    p = Particle(Vector2(1, 1), vel=Vector2(2, 2))
    sim.add_particle(p)
    sim.translate_view(Vector2(15, 0))
    assert p.pos == Vector2(16, 1)
    assert p.vel == Vector2(2, 2)


@pytest.mark.parametrize("kwargs", [
    {"g": 0}, {"g": -0.2}, {"max_velocity": 0}, {"growth_increment": -1}, {"initial_radius": 0},
])
def test_config_rejects_non_positive_constants(kwargs):
    with pytest.raises(ConfigurationError):
        GravityConfig(**kwargs)


def test_non_finite_particle_does_not_poison_others():
    sim = Simulation(GravityConfig(g=0.2), width=800, height=600,
                     toggles=Toggles(recentre=True), reinitialize_invalid=False)
    a = Particle(Vector2(100, 100), radius=2)
    b = Particle(Vector2(200, 150), radius=3)
    bad = Particle(Vector2(0, 0), radius=1)
    bad.pos = Vector2(float("nan"), 0)
    for p in (a, b, bad):
        sim.add_particle(p)

    sim.update()

    assert a.is_valid() and b.is_valid()
    assert sim.center_of_mass.is_finite()
    assert calculate_force(a, bad, 0.2) == Vector2(0.0, 0.0)
    assert calculate_force(Particle(Vector2(float("inf"), 0)), a, 0.2) == Vector2(0.0, 0.0)
