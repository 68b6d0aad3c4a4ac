import numpy as np
import pytest

from lapackaux.common import (
    Direct,
    InvalidSizeError,
    NotImplementedDirectionError,
    Operation,
    Side,
)
from lapackaux.larfb import larfb, larfb_batched
from lapackaux.larft import larft


def _block(order, k, seed=0):
    rng = np.random.default_rng(seed)
    clean = np.tril(rng.uniform(-1, 1, size=(order, k)), -1)
    for i in range(k):
        clean[i, i] = 1.0
    stored = clean + np.triu(rng.uniform(3, 4, size=(order, k)))
    tau = np.array([2.0 / (clean[:, i] @ clean[:, i]) for i in range(k)])
    t = larft(Direct.FORWARD, stored, tau)
    h = np.eye(order) - clean @ t @ clean.T
    return stored, t, h


def _matrix(m, n, seed=1):
    return np.random.default_rng(seed).uniform(-1, 1, size=(m, n))


@pytest.mark.parametrize("m,n,k", [(5, 4, 2), (4, 3, 4), (6, 2, 3)])
@pytest.mark.parametrize("trans", [Operation.NONE, Operation.TRANSPOSE])
def test_left_application(m, n, k, trans):
    v, t, h = _block(m, k, seed=m * n + k)
    a = _matrix(m, n)
    original = a.copy()
    result = larfb(Side.LEFT, trans, Direct.FORWARD, v, t, a)
    op = h if trans is Operation.NONE else h.T
    assert result is a
    assert np.allclose(a, op @ original)


@pytest.mark.parametrize("m,n,k", [(4, 5, 2), (3, 4, 4), (2, 6, 3)])
@pytest.mark.parametrize("trans", [Operation.NONE, Operation.TRANSPOSE])
def test_right_application(m, n, k, trans):
    v, t, h = _block(n, k, seed=m + n * k)
    a = _matrix(m, n)
    original = a.copy()
    larfb(Side.RIGHT, trans, Direct.FORWARD, v, t, a)
    op = h if trans is Operation.NONE else h.T
    assert np.allclose(a, original @ op)


def test_apply_then_transpose_restores_matrix():
    v, t, _ = _block(6, 3, seed=9)
    a = _matrix(6, 4, seed=2)
    original = a.copy()
    larfb(Side.LEFT, Operation.NONE, Direct.FORWARD, v, t, a)
    larfb(Side.LEFT, Operation.TRANSPOSE, Direct.FORWARD, v, t, a)
    assert np.allclose(a, original)


def test_norms_preserved_by_orthogonal_block():
    v, t, _ = _block(5, 2, seed=11)
    a = _matrix(3, 5, seed=5)
    before = np.linalg.norm(a)
    larfb(Side.RIGHT, Operation.NONE, Direct.FORWARD, v, t, a)
    assert np.linalg.norm(a) == pytest.approx(before)


def test_backward_direction_not_supported():
    v, t, _ = _block(4, 2)
    with pytest.raises(NotImplementedDirectionError):
        larfb(Side.LEFT, Operation.NONE, Direct.BACKWARD, v, t, _matrix(4, 3))


def test_empty_matrix_quick_return():
    v, t, _ = _block(4, 2)
    a = np.zeros((4, 0))
    result = larfb(Side.LEFT, Operation.NONE, Direct.BACKWARD, v, t, a)
    assert result.shape == (4, 0)


def test_v_too_short_is_invalid():
    v, t, _ = _block(3, 2)
    with pytest.raises(InvalidSizeError):
        larfb(Side.LEFT, Operation.NONE, Direct.FORWARD, v, t, _matrix(5, 3))


def test_factor_too_small_is_invalid():
    v, _, _ = _block(4, 3)
    with pytest.raises(InvalidSizeError):
        larfb(Side.LEFT, Operation.NONE, Direct.FORWARD, v, np.eye(2), _matrix(4, 3))


def test_no_reflectors_is_invalid():
    with pytest.raises(InvalidSizeError):
        larfb(Side.LEFT, Operation.NONE, Direct.FORWARD, np.zeros((4, 0)), np.eye(1), _matrix(4, 3))


def test_batched_matches_single_calls():
    blocks = [_block(5, 2, seed=s) for s in range(3)]
    matrices = [_matrix(5, 3, seed=s) for s in range(3)]
    expected = [h @ a for (_, _, h), a in zip(blocks, matrices)]
    results = larfb_batched(
        Side.LEFT,
        Operation.NONE,
        Direct.FORWARD,
        [b[0] for b in blocks],
        [b[1] for b in blocks],
        matrices,
    )
    assert len(results) == 3
    for got, want in zip(results, expected):
        assert np.allclose(got, want)


def test_batched_length_mismatch():
    v, t, _ = _block(4, 2)
    with pytest.raises(InvalidSizeError):
        larfb_batched(Side.LEFT, Operation.NONE, Direct.FORWARD, [v], [t, t], [_matrix(4, 2)])