import pytest

from gravitysim.body import Body
from gravitysim.vector import Vec2


def _sample():
    return Body(position=Vec2(1.0, -2.0), radius=5.0, mass=10.0, velocity=Vec2(0.5, 0.25))


def test_default_body_is_all_zero():
    body = Body()
    assert body.position == Vec2()
    assert body.velocity == Vec2()
    assert (body.radius, body.mass) == (0.0, 0.0)


def test_dict_round_trip():
    body = _sample()
    assert Body.from_dict(body.to_dict()) == body


def test_to_dict_layout():
    data = _sample().to_dict()
    assert set(data) == {"position", "radius", "mass", "velocity"}
    assert data["position"] == [1.0, -2.0]
    assert data["velocity"] == [0.5, 0.25]


def test_extra_fields_ignored():
    data = _sample().to_dict()
    data["colour"] = "white"
    assert Body.from_dict(data) == _sample()


@pytest.mark.parametrize("field", ["position", "radius", "mass", "velocity"])
def test_missing_field_rejected(field):
    data = _sample().to_dict()
    del data[field]
    with pytest.raises(ValueError, match=field):
        Body.from_dict(data)


def test_non_numeric_mass_rejected():
    data = _sample().to_dict()
    data["mass"] = "heavy"
    with pytest.raises(ValueError):
        Body.from_dict(data)


def test_bool_radius_rejected():
    data = _sample().to_dict()
    data["radius"] = True
    with pytest.raises(ValueError):
        Body.from_dict(data)


def test_non_object_rejected():
    with pytest.raises(ValueError):
        Body.from_dict([1, 2, 3])


def test_bodies_are_mutable():
    body = _sample()
    body.velocity = Vec2(9.0, 9.0)
    assert body.to_dict()["velocity"] == [9.0, 9.0]