import math

import pytest

from gravitysim.body import Body
from gravitysim.physics import (
    MAX_DELTA_SPEED,
    Physics,
    delta_velocities,
    update_positions,
)
from gravitysim.vector import Vec2


def _body(x, y, mass, vx=0.0, vy=0.0):
    return Body(position=Vec2(x, y), radius=1.0, mass=mass, velocity=Vec2(vx, vy))


def test_equal_masses_pull_symmetrically():
    a = _body(0.0, 0.0, 50.0)
    b = _body(30.0, 40.0, 50.0)
    d1, d2 = delta_velocities(a, b, 0.1)
    assert d1 == -d2
    direction = (b.position - a.position).normalize_or_zero()
    assert d1.x * direction.x + d1.y * direction.y > 0


def test_momentum_conserved_without_clamping():
    a = _body(-10.0, 5.0, 20.0)
    b = _body(15.0, -3.0, 70.0)
    d1, d2 = delta_velocities(a, b, 0.05)
    total = d1 * a.mass + d2 * b.mass
    assert total.x == pytest.approx(0.0, abs=1e-9)
    assert total.y == pytest.approx(0.0, abs=1e-9)


def test_delta_speed_is_clamped():
    light = _body(0.0, 0.0, 1.0)
    heavy = _body(1.0, 0.0, 1e12)
    d1, _ = delta_velocities(light, heavy, 1.0)
    assert d1.length() == pytest.approx(MAX_DELTA_SPEED)


def test_coincident_bodies_no_delta():
    a = _body(2.0, 2.0, 10.0)
    b = _body(2.0, 2.0, 10.0)
    assert delta_velocities(a, b, 1.0) == (Vec2(), Vec2())


def test_zero_mass_gives_nan():
    a = _body(0.0, 0.0, 0.0)
    b = _body(5.0, 0.0, 10.0)
    d1, d2 = delta_velocities(a, b, 1.0)
    assert (math.isnan(d1.x), math.isnan(d1.y)) == (True, True)
    assert d2 == Vec2(0.0, 0.0)


def test_closer_bodies_pull_harder():
    a = _body(0.0, 0.0, 10.0)
    near, _ = delta_velocities(a, _body(10.0, 0.0, 10.0), 0.01)
    far, _ = delta_velocities(a, _body(100.0, 0.0, 10.0), 0.01)
    assert near.length() > far.length()


def test_update_positions_moves_along_velocity():
    body = _body(0.0, 0.0, 1.0, vx=2.0, vy=0.0)
    update_positions([body], 0.5)
    assert body.position == Vec2(1.0, 0.0)


def test_disabled_gravity_keeps_velocity():
    bodies = [_body(0.0, 0.0, 100.0, vx=1.0), _body(10.0, 0.0, 100.0, vy=-1.0)]
    Physics(gravity_enabled=False).update(bodies, 1.0)
    assert bodies[0].velocity == Vec2(1.0, 0.0)
    assert bodies[1].velocity == Vec2(0.0, -1.0)
    assert bodies[0].position == Vec2(1.0, 0.0)
    assert bodies[1].position == Vec2(10.0, -1.0)


def test_default_physics_has_gravity_off():
    bodies = [_body(0.0, 0.0, 100.0), _body(10.0, 0.0, 100.0)]
    Physics().update(bodies, 1.0)
    assert bodies[0].position == Vec2(0.0, 0.0)


def test_enabled_gravity_attracts():
    bodies = [_body(0.0, 0.0, 100.0), _body(10.0, 0.0, 100.0)]
    Physics(gravity_enabled=True).update(bodies, 0.1)
    assert bodies[0].velocity.x > 0
    assert bodies[1].velocity.x < 0
    assert bodies[0].velocity == -bodies[1].velocity
    assert bodies[1].position.x - bodies[0].position.x < 10.0


def test_enabled_gravity_three_bodies_middle_balanced():
    bodies = [_body(-10.0, 0.0, 50.0), _body(0.0, 0.0, 50.0), _body(10.0, 0.0, 50.0)]
    Physics(gravity_enabled=True).update(bodies, 0.1)
    assert bodies[1].velocity.x == pytest.approx(0.0, abs=1e-12)
    assert bodies[0].velocity.x > 0 > bodies[2].velocity.x


def test_update_empty_list():
    bodies = []
    Physics(gravity_enabled=True).update(bodies, 1.0)
    assert bodies == []