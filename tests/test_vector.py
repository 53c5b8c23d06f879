import math

import pytest

from raycub.vector import Vec


def test_add_combines_components():
    assert Vec(1.0, 2.0) + Vec(0.5, -3.0) == Vec(1.5, -1.0)


def test_add_with_non_vector_is_rejected():
    with pytest.raises(TypeError):
        Vec(1.0, 2.0) + 3


def test_scaled_multiplies_components():
    assert Vec(2.0, -1.0).scaled(3.0) == Vec(6.0, -3.0)


def test_scaled_by_zero_is_origin():
    assert Vec(7.0, 9.0).scaled(0.0) == Vec(0.0, 0.0)


def test_length_of_axis_vector():
    assert Vec(0.0, -4.0).length() == 4.0


def test_length_three_four():
    assert Vec(3.0, 4.0).length() == pytest.approx(5.0)


@pytest.mark.parametrize("x, y", [(3.0, 4.0), (-2.0, 0.5), (0.001, 100.0)])
def test_normalized_has_unit_length_and_same_direction(x, y):
    v = Vec(x, y)
    n = v.normalized()
    assert n.length() == pytest.approx(1.0)
    assert math.atan2(n.y, n.x) == pytest.approx(math.atan2(y, x))


def test_normalized_zero_vector_unchanged():
    assert Vec(0.0, 0.0).normalized() == Vec(0.0, 0.0)


def test_vec_is_immutable():
    v = Vec(1.0, 1.0)
    with pytest.raises(AttributeError):
        v.x = 2.0
    assert v.x == 1.0
    assert v == Vec(1.0, 1.0)