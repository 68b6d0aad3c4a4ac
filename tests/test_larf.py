import numpy as np
import pytest

from lapackaux.common import InvalidSizeError, Side
from lapackaux.larf import larf, larf_batched
from lapackaux.larfg import larfg


def _reflector_for(column):
    x = column[1:].astype(float).copy()
    r = larfg(float(column[0]), x)
    v = np.concatenate(([1.0], x))
    return v, r


def test_left_annihilates_first_column():
    a = np.array([[2.0, 1.0, 0.0], [1.0, 3.0, 1.0], [2.0, 0.5, 4.0], [-1.0, 2.0, 1.0]])
    v, r = _reflector_for(a[:, 0])
    larf(Side.LEFT, v, r.tau, a)
    assert a[0, 0] == pytest.approx(r.beta)
    np.testing.assert_allclose(a[1:, 0], 0.0, atol=1e-12)


def test_right_annihilates_first_row():
    a = np.array([[2.0, 1.0, -3.0], [1.0, 3.0, 1.0]])
    v, r = _reflector_for(a[0, :])
    larf("R", v, r.tau, a)
    assert a[0, 0] == pytest.approx(r.beta)
    np.testing.assert_allclose(a[0, 1:], 0.0, atol=1e-12)


@pytest.mark.parametrize("side", [Side.LEFT, Side.RIGHT])
def test_reflector_is_involution(side):
    rng = np.random.default_rng(3)
    a = rng.standard_normal((4, 5))
    original = a.copy()
    order = 4 if side is Side.LEFT else 5
    v, r = _reflector_for(rng.standard_normal(order))
    larf(side, v, r.tau, a)
    assert not np.allclose(a, original)
    larf(side, v, r.tau, a)
    np.testing.assert_allclose(a, original, atol=1e-12)


def test_right_is_transpose_of_left():
    rng = np.random.default_rng(5)
    a = rng.standard_normal((3, 4))
    b = a.T.copy()
    v, r = _reflector_for(rng.standard_normal(3))
    larf(Side.LEFT, v, r.tau, a)
    larf(Side.RIGHT, v, r.tau, b)
    np.testing.assert_allclose(b, a.T, atol=1e-12)


def test_zero_tau_leaves_matrix():
    a = np.arange(6.0).reshape(2, 3)
    larf(Side.LEFT, np.array([1.0, 5.0]), 0.0, a)
    np.testing.assert_array_equal(a, np.arange(6.0).reshape(2, 3))


def test_negative_increment_reverses_vector():
    rng = np.random.default_rng(7)
    a = rng.standard_normal((3, 3))
    b = a.copy()
    v = np.array([1.0, 0.4, -0.7])
    larf(Side.LEFT, v, 1.3, a, incx=1)
    larf(Side.LEFT, v[::-1].copy(), 1.3, b, incx=-1)
    np.testing.assert_allclose(a, b)


def test_strided_vector():
    rng = np.random.default_rng(9)
    a = rng.standard_normal((3, 2))
    b = a.copy()
    v = np.array([1.0, 0.2, -0.5])
    padded = np.array([1.0, 8.0, 0.2, 8.0, -0.5])
    larf(Side.LEFT, v, 0.9, a)
    larf(Side.LEFT, padded, 0.9, b, incx=2)
    np.testing.assert_allclose(a, b)


def test_empty_matrix_returned_unchanged():
    a = np.zeros((0, 3))
    out = larf(Side.LEFT, np.zeros(0), 1.0, a)
    assert out.shape == (0, 3)


def test_zero_increment():
    with pytest.raises(InvalidSizeError):
        larf(Side.LEFT, np.ones(2), 1.0, np.ones((2, 2)), incx=0)


def test_short_vector():
    with pytest.raises(InvalidSizeError):
        larf(Side.LEFT, np.ones(2), 1.0, np.ones((3, 2)))


def test_bad_side():
    with pytest.raises(ValueError):
        larf("X", np.ones(2), 1.0, np.ones((2, 2)))


def test_batched_matches_single():
    rng = np.random.default_rng(11)
    mats = [rng.standard_normal((3, 2)) for _ in range(2)]
    singles = [m.copy() for m in mats]
    vs = [np.array([1.0, 0.1, 0.2]), np.array([1.0, -0.3, 0.5])]
    taus = [1.2, 0.7]
    larf_batched(Side.LEFT, vs, taus, mats)
    for v, tau, m, s in zip(vs, taus, mats, singles):
        larf(Side.LEFT, v, tau, s)
        np.testing.assert_allclose(m, s)


def test_batched_mismatch():
    with pytest.raises(InvalidSizeError):
        larf_batched(Side.LEFT, [np.ones(2)], [1.0, 2.0], [np.ones((2, 2))])