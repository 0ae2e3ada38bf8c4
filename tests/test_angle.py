import copy
import math

import numpy as np
import pytest

from planar_angle import Angle, RADIANS_90_DEGREES, radians, degrees, add, subtract

TOLERANCE = Angle.degrees(0.001)


def test_within():
    a1 = Angle.radians(RADIANS_90_DEGREES)
    a2 = Angle.radians(RADIANS_90_DEGREES)

    assert a1.is_within(a2, TOLERANCE)


def test_deg_to_rad():
    a1 = Angle.radians(RADIANS_90_DEGREES)
    a2 = Angle.degrees(90.0)

    assert a1.is_within(a2, TOLERANCE)


@pytest.mark.parametrize("turns", [-7, -1, 1, 7])
def test_norm_full_turns(turns):
    a1 = Angle.degrees(90.0)
    a2 = Angle.degrees(90.0 + 360.0 * turns)

    assert a1.is_within(a2, TOLERANCE)


def test_add():
    r = Angle.degrees(90.0 + 5.0)

    assert (Angle.degrees(90.0) + Angle.degrees(5.0)).is_within(r, TOLERANCE)


def test_sub():
    r = Angle.degrees(90.0 - 5.0)

    assert (Angle.degrees(90.0) - Angle.degrees(5.0)).is_within(r, TOLERANCE)


def test_add_normalize():
    a1 = Angle.degrees(90.0)
    a2 = Angle.degrees(180.0)
    r = Angle.degrees(-90.0)

    assert (a1 + a2).is_within(r, TOLERANCE)
    assert (a1 + a2 + a2).is_within(a1, TOLERANCE)
    assert (a1 + a2 + a2 + a2).is_within(r, TOLERANCE)


def test_sub_normalize():
    a1 = Angle.degrees(90.0)
    a2 = Angle.degrees(180.0)
    r = Angle.degrees(-90.0)

    assert (a1 - a2).is_within(r, TOLERANCE)
    assert (a1 - a2 - a2).is_within(a1, TOLERANCE)
    assert (a1 - a2 - a2 - a2).is_within(r, TOLERANCE)


@pytest.mark.parametrize(
    "alpha, sin_alpha",
    [
        (0.0, 0.0),
        (15.0, 0.2588),
        (30.0, 0.5),
        (45.0, 0.7071),
        (60.0, 0.8660),
        (80.0, 0.9848),
        (90.0, 1.0),
    ],
)
def test_sin_cos_complementary(alpha, sin_alpha):
    assert abs(Angle.degrees(alpha).sin() - sin_alpha) < 0.001
    assert abs(Angle.degrees(90.0 - alpha).cos() - sin_alpha) < 0.001


def test_within_takes_shortest_path():
    assert Angle.degrees(179.0).is_within(Angle.degrees(-179.0), Angle.degrees(2.5))
    assert not Angle.degrees(179.0).is_within(Angle.degrees(-179.0), Angle.degrees(1.5))


def test_normalized_range_random_inputs():
    rng = np.random.default_rng(0)
    values = np.concatenate([
        rng.uniform(-10.0, 10.0, 500),
        rng.uniform(-1e6, 1e6, 500),
    ])

    for v in values:
        r = Angle.radians(v).as_radians()
        assert -math.pi < r <= math.pi


def test_degree_radian_round_trip_random_inputs():
    rng = np.random.default_rng(1)

    for v in rng.uniform(-5000.0, 5000.0, 200):
        expected = Angle.radians(v * math.pi / 180.0).as_radians()
        assert Angle.degrees(v).as_radians() == pytest.approx(expected, abs=1e-12)


def test_periodicity_random_inputs():
    rng = np.random.default_rng(2)
    values = rng.uniform(-720.0, 720.0, 200)
    turns = rng.integers(-10, 11, 200)

    for v, k in zip(values, turns):
        assert Angle.degrees(v).is_within(Angle.degrees(v + 360.0 * k), TOLERANCE)


def test_half_turn_normalizes_to_positive_pi():
    assert Angle.radians(math.pi).as_radians() == math.pi
    assert Angle.radians(-math.pi).as_radians() == math.pi
    assert Angle.radians(-math.pi - 2 * math.pi).is_within(Angle.radians(math.pi), TOLERANCE)


def test_as_degrees_in_canonical_range():
    assert Angle.degrees(270.0).as_degrees() == pytest.approx(-90.0)
    assert Angle.degrees(-270.0).as_degrees() == pytest.approx(90.0)
    assert Angle.degrees(45.0).as_degrees() == pytest.approx(45.0)


def test_abs():
    assert Angle.degrees(-90.0).abs().is_within(Angle.degrees(90.0), TOLERANCE)
    assert abs(Angle.degrees(-30.0)).as_degrees() == pytest.approx(30.0)
    assert Angle.degrees(60.0).abs().as_degrees() == pytest.approx(60.0)


def test_zero_tolerance_is_never_satisfied():
    a = Angle.radians(1.0)

    assert not a.is_within(a, Angle.radians(0.0))


def test_negative_tolerance_is_never_satisfied():
    a = Angle.degrees(10.0)

    assert not a.is_within(a, Angle.degrees(-5.0))


def test_large_tolerance_is_normalized():
    zero = Angle.degrees(0.0)

    # 400 deg normalizes to 40 deg
    assert zero.is_within(Angle.degrees(30.0), Angle.degrees(400.0))
    assert not zero.is_within(Angle.degrees(50.0), Angle.degrees(400.0))


def test_operands_are_unchanged():
    a1 = Angle.degrees(90.0)
    a2 = Angle.degrees(180.0)

    a1 + a2
    a1 - a2

    assert a1.as_degrees() == pytest.approx(90.0)
    assert a2.as_degrees() == pytest.approx(180.0)


def test_named_functions_match_operators():
    a1 = degrees(170.0)
    a2 = degrees(20.0)

    assert add(a1, a2) == a1 + a2
    assert subtract(a1, a2) == a1 - a2
    assert radians(1.0) == Angle.radians(1.0)


def test_negation():
    assert (-Angle.degrees(30.0)).as_degrees() == pytest.approx(-30.0)
    assert (-Angle.radians(math.pi)).as_radians() == math.pi


def test_nan_propagates():
    a = Angle.radians(float('nan'))

    assert math.isnan(a.as_radians())
    assert a != a
    assert not a.is_within(a, Angle.degrees(10.0))


@pytest.mark.parametrize("value", [float('inf'), float('-inf')])
def test_infinity_gives_nan(value):
    assert math.isnan(Angle.radians(value).as_radians())


def test_equality_and_hash():
    a = Angle.radians(1.0)
    b = Angle.radians(1.0)

    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b, Angle.radians(2.0)}) == 2
    assert a != 1.0


def test_immutable():
    a = Angle.degrees(10.0)

    with pytest.raises(AttributeError):
        a.value = 1.0
    with pytest.raises(AttributeError):
        a._value = 1.0


def test_copy_preserves_value():
    a = Angle.degrees(123.0)

    assert copy.copy(a) == a
    assert copy.deepcopy(a) == a


def test_mixing_with_float_raises():
    with pytest.raises(TypeError):
        Angle.degrees(10.0) + 1.0
    with pytest.raises(TypeError):
        1.0 - Angle.degrees(10.0)
    with pytest.raises(TypeError):
        Angle.degrees(10.0).is_within(10.0, TOLERANCE)


def test_float_conversion():
    assert float(Angle.radians(0.5)) == 0.5


def test_str_renders_degrees():
    assert str(Angle.radians(0.0)) == "0deg"
    assert str(Angle.degrees(-45.5)).endswith("deg")
    assert float(str(Angle.degrees(-45.5))[:-3]) == pytest.approx(-45.5)


def test_repr():
    assert repr(Angle.radians(0.5)) == "Angle.radians(0.5)"
