import pytest

from isomesh.vector import Vec2, Vec3


A = Vec3(1.0, -2.0, 3.0)
B = Vec3(-4.0, 0.5, 2.0)


def test_zero_equals_scalar_zero():
    assert Vec3.zero() == Vec3.from_scalar(0.0)


def test_from_scalar_sets_all_components():
    assert tuple(Vec3.from_scalar(2.5)) == (2.5, 2.5, 2.5)
    assert tuple(Vec2.from_scalar(-1.5)) == (-1.5, -1.5)


def test_indexing_matches_attributes():
    assert (A[0], A[1], A[2]) == (A.x, A.y, A.z)


def test_add_sub_round_trip():
    assert (A + B) - B == A


def test_scalar_mul_div_round_trip():
    assert (A * 4.0) / 4.0 == A
    assert 2.0 * A == A * 2.0


def test_componentwise_mul_div_round_trip():
    c = Vec3(2.0, 4.0, 8.0)
    assert (A * c) / c == A


def test_negation_sums_to_zero():
    assert A + (-A) == Vec3.zero()


def test_dot_with_self_is_length_squared():
    assert A.dot(A) == A.length_squared()
    assert A.length() == pytest.approx(A.length_squared() ** 0.5)


def test_cross_is_orthogonal_to_operands():
    c = A.cross(B)
    assert c.dot(A) == pytest.approx(0.0)
    assert c.dot(B) == pytest.approx(0.0)


def test_cross_is_anticommutative():
    assert A.cross(B) == -(B.cross(A))


def test_cross_of_unit_axes():
    assert Vec3(1.0, 0.0, 0.0).cross(Vec3(0.0, 1.0, 0.0)) == Vec3(0.0, 0.0, 1.0)


def test_normalised_has_unit_length():
    n = A.normalised()
    assert n.length() == pytest.approx(1.0)
    assert n.dot(A) == pytest.approx(A.length())


def test_normalised_zero_is_none():
    assert Vec3.zero().normalised() is None


def test_abs_is_non_negative_and_sign_independent():
    assert all(c >= 0.0 for c in A.abs())
    assert (-A).abs() == A.abs()


def test_min_plus_max_equals_sum():
    assert A.min(B) + A.max(B) == A + B
    assert A.min(B).max(A) == A


def test_max_component_and_index_agree():
    assert A.max_component() == A[A.max_component_index()]
    assert B.max_component() == max(B)


def test_max_component_index_prefers_first_on_tie():
    assert Vec3.from_scalar(1.0).max_component_index() == 0


def test_lerp_endpoints():
    assert A.lerp(B, 0.0) == A
    assert A.lerp(B, 1.0) == B
    mid = A.lerp(B, 0.5)
    assert mid == (A + B) * 0.5


def test_any_predicate():
    assert A.any(lambda f: f < 0.0)
    assert not A.abs().any(lambda f: f < 0.0)


def test_swizzles_and_extend_round_trip():
    assert A.xy() == Vec2(A.x, A.y)
    assert A.yz() == Vec2(A.y, A.z)
    assert A.xz() == Vec2(A.x, A.z)
    assert A.xy().extend(A.z) == A


def test_clamp_to_cardinal_axis_keeps_dominant_component():
    v = Vec3(1.0, -5.0, 2.0)
    assert v.clamp_to_cardinal_axis() == Vec3(0.0, -5.0, 0.0)
    assert Vec3(0.0, 0.0, 8.0).clamp_to_cardinal_axis().normalised() == Vec3(0.0, 0.0, 1.0)


def test_vec2_length():
    v = Vec2(3.0, 4.0)
    assert v.length() == pytest.approx(5.0)
    assert v.length_squared() == pytest.approx(v.length() ** 2)


def test_vec2_arithmetic_round_trip():
    a = Vec2(1.5, -2.0)
    b = Vec2(0.25, 4.0)
    assert (a - b) + b == a
    assert (a * 2.0) / 2.0 == a


def test_vec2_any():
    assert Vec2(-1.0, 2.0).any(lambda f: f > 0.0)
    assert not Vec2(-1.0, -2.0).any(lambda f: f > 0.0)


def test_vectors_are_hashable():
    assert len({A, Vec3(A.x, A.y, A.z), B}) == 2