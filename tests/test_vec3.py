import math

import pytest

from minirt.vec3 import Vec3

A = Vec3(1.5, -2.0, 3.25)
B = Vec3(-0.5, 4.0, 2.0)


def _approx(v):
    return pytest.approx(tuple(v))


def test_default_is_zero_vector():
    assert tuple(Vec3()) == (0.0, 0.0, 0.0)


def test_iter_and_index_give_components():
    v = Vec3(1.0, 2.0, 3.0)
    assert tuple(v) == (1.0, 2.0, 3.0)
    assert [v[0], v[1], v[2]] == [1.0, 2.0, 3.0]


def test_add_then_sub_round_trip():
    assert tuple((A + B) - B) == _approx(A)


def test_add_is_commutative():
    assert A + B == B + A


def test_add_negation_gives_zero():
    assert tuple(A + (-A)) == _approx(Vec3())


def test_neg_equals_mul_minus_one():
    assert -A == A * -1


def test_scalar_mul_matches_repeated_add():
    assert tuple(2 * A) == _approx(A + A)
    assert A * 3.0 == 3.0 * A


def test_mul_then_div_round_trip():
    assert tuple((A * 7.5) / 7.5) == _approx(A)


def test_mul_by_vector_is_rejected():
    v = Vec3(1.0, 2.0, 3.0)
    with pytest.raises(TypeError):
        v * B
    assert tuple(v) == (1.0, 2.0, 3.0)


def test_div_by_zero_raises():
    v = Vec3(1.0, 2.0, 3.0)
    with pytest.raises(ZeroDivisionError):
        v / 0
    assert tuple(v) == (1.0, 2.0, 3.0)


def test_dot_self_is_length_squared():
    assert A.dot(A) == pytest.approx(A.length_squared())


def test_dot_is_commutative():
    assert A.dot(B) == pytest.approx(B.dot(A))


def test_dot_of_axes_is_zero():
    assert Vec3(1, 0, 0).dot(Vec3(0, 1, 0)) == 0


def test_cross_of_axes():
    assert Vec3(1, 0, 0).cross(Vec3(0, 1, 0)) == Vec3(0, 0, 1)


def test_cross_is_anticommutative():
    assert tuple(A.cross(B)) == _approx(-(B.cross(A)))


def test_cross_is_orthogonal_to_both():
    c = A.cross(B)
    assert c.dot(A) == pytest.approx(0.0, abs=1e-9)
    assert c.dot(B) == pytest.approx(0.0, abs=1e-9)


def test_length_of_three_four_triangle():
    assert Vec3(3, 4, 0).length() == pytest.approx(5.0)


def test_length_is_root_of_length_squared():
    assert A.length() == pytest.approx(math.sqrt(A.length_squared()))


def test_unit_has_length_one_and_same_direction():
    u = A.unit()
    assert u.length() == pytest.approx(1.0)
    assert tuple(u.cross(A)) == _approx(Vec3())
    assert u.dot(A) > 0


def test_unit_of_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vec3().unit()


def test_hadamard_with_ones_is_identity():
    assert A.hadamard(Vec3(1, 1, 1)) == A


def test_hadamard_sum_equals_dot():
    assert sum(A.hadamard(B)) == pytest.approx(A.dot(B))
    assert A.hadamard(B) == B.hadamard(A)


def test_add_scalar_matches_vector_add():
    assert A.add_scalar(0.75) == A + Vec3(0.75, 0.75, 0.75)


def test_add_scalar_round_trip():
    assert tuple(A.add_scalar(2.5).add_scalar(-2.5)) == _approx(A)


def test_max_normalized_of_equal_components():
    assert tuple(Vec3(1, 1, 1).max_normalized()) == _approx(Vec3(0.5, 0.5, 0.5))


def test_max_normalized_scales_back():
    v = Vec3(0.2, 0.9, 0.4)
    n = v.max_normalized()
    assert tuple(n * (1 + max(v))) == _approx(v)
    assert max(n) < 1.0


def test_vectors_are_immutable():
    v = Vec3(1.5, -2.0, 3.25)
    with pytest.raises(AttributeError):
        v.x = 0.0  # type: ignore[misc]
    assert v.x == 1.5