"""Application of a block of elementary reflectors to a general matrix."""

from __future__ import annotations

from typing import Iterable

import numpy as np

from .blas import gemm, trmm
from .common import (
    Diagonal,
    Direct,
    Fill,
    InvalidSizeError,
    NotImplementedDirectionError,
    Operation,
    Side,
)

__all__ = ["larfb", "larfb_batched"]


def larfb(side, trans, direct, v: np.ndarray, t: np.ndarray, a: np.ndarray) -> np.ndarray:
    """Apply ``H = I - V * T * V'`` (or ``H'``) to ``a`` in place.

    From the left ``a`` becomes ``op(H) * a``; from the right, ``a * op(H)``,
    where ``op`` is chosen by ``trans``. ``v`` holds the ``k`` Householder
    vectors as columns (unit diagonal implicit) and ``t`` the upper triangular
    factor computed by :func:`larft`. Only the forward direction is supported.
    """
    side = Side(side)
    trans = Operation(trans)
    direct = Direct(direct)
    for name, arr in (("v", v), ("t", t), ("a", a)):
        if not isinstance(arr, np.ndarray) or arr.ndim != 2:
            raise InvalidSizeError(f"{name} must be a two-dimensional array")

    m, n = a.shape
    k = v.shape[1]
    leftside = side is Side.LEFT
    if k < 1:
        raise InvalidSizeError("at least one reflector is required")
    if t.shape[0] < k or t.shape[1] < k:
        raise InvalidSizeError("triangular factor is too small")
    if v.shape[0] < (m if leftside else n):
        raise InvalidSizeError("v has too few rows for the matrix")

    if m == 0 or n == 0:
        return a
    if direct is Direct.BACKWARD:
        raise NotImplementedDirectionError("backward direction is not supported")

    one = a.dtype.type(1)
    if leftside:
        if k > m:
            raise InvalidSizeError("more reflectors than matrix rows")
        vv = v[:m, :k]
        work = a[:k, :].copy()
        trmm(Side.LEFT, Fill.LOWER, Operation.TRANSPOSE, Diagonal.UNIT, one, vv, work)
        if m > k:
            gemm(Operation.TRANSPOSE, Operation.NONE, one, vv[k:], a[k:, :], one, work)
        trmm(Side.LEFT, Fill.UPPER, trans, Diagonal.NON_UNIT, one, t, work)
        if m > k:
            gemm(Operation.NONE, Operation.NONE, -one, vv[k:], work, one, a[k:, :])
        trmm(Side.LEFT, Fill.LOWER, Operation.NONE, Diagonal.UNIT, one, vv, work)
        a[:k, :] -= work
    else:
        if k > n:
            raise InvalidSizeError("more reflectors than matrix columns")
        vv = v[:n, :k]
        work = a[:, :k].copy()
        trmm(Side.RIGHT, Fill.LOWER, Operation.NONE, Diagonal.UNIT, one, vv, work)
        if n > k:
            gemm(Operation.NONE, Operation.NONE, one, a[:, k:], vv[k:], one, work)
        trmm(Side.RIGHT, Fill.UPPER, trans, Diagonal.NON_UNIT, one, t, work)
        if n > k:
            gemm(Operation.NONE, Operation.TRANSPOSE, -one, work, vv[k:], one, a[:, k:])
        trmm(Side.RIGHT, Fill.LOWER, Operation.TRANSPOSE, Diagonal.UNIT, one, vv, work)
        a[:, :k] -= work
    return a


def larfb_batched(
    side,
    trans,
    direct,
    vs: Iterable[np.ndarray],
    ts: Iterable[np.ndarray],
    matrices: Iterable[np.ndarray],
) -> list[np.ndarray]:
    """Apply :func:`larfb` to each matrix with its own reflectors and factor."""
    vs = list(vs)
    ts = list(ts)
    matrices = list(matrices)
    if not len(vs) == len(ts) == len(matrices):
        raise InvalidSizeError("batch members differ in number")
    return [larfb(side, trans, direct, v, t, a) for v, t, a in zip(vs, ts, matrices)]