"""Application of an elementary reflector to a general matrix."""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np

from .blas import gemv, ger
from .common import InvalidSizeError, Operation, Side

__all__ = ["larf", "larf_batched"]


def _householder_vector(v: np.ndarray, order: int, incx: int) -> np.ndarray:
    if not isinstance(v, np.ndarray) or v.ndim != 1:
        raise InvalidSizeError("v must be a one-dimensional array")
    view = v[:: abs(incx)][:order]
    if view.size < order:
        raise InvalidSizeError("Householder vector is too short")
    return view if incx > 0 else view[::-1]


def larf(side, v: np.ndarray, tau, a: np.ndarray, incx: int = 1) -> np.ndarray:
    """Apply ``H = I - tau * v * v'`` to ``a`` in place, from the given side.

    From the left ``a`` becomes ``H * a``; from the right, ``a * H``.
    """
    side = Side(side)
    if not isinstance(a, np.ndarray) or a.ndim != 2:
        raise InvalidSizeError("a must be a two-dimensional array")
    if incx == 0:
        raise InvalidSizeError("increment must be non-zero")
    m, n = a.shape
    leftside = side is Side.LEFT
    vec = _householder_vector(v, m if leftside else n, incx)
    if m == 0 or n == 0:
        return a

    if leftside:
        work = np.zeros(n, dtype=a.dtype)
        gemv(Operation.TRANSPOSE, tau, a, vec, 0, work)
        ger(-1, vec, work, a)
    else:
        work = np.zeros(m, dtype=a.dtype)
        gemv(Operation.NONE, tau, a, vec, 0, work)
        ger(-1, work, vec, a)
    return a


def larf_batched(
    side,
    vs: Iterable[np.ndarray],
    taus: Sequence,
    matrices: Iterable[np.ndarray],
    incx: int = 1,
) -> list[np.ndarray]:
    """Apply :func:`larf` to each matrix with its own vector and scalar."""
    vs = list(vs)
    taus = list(taus)
    matrices = list(matrices)
    if not len(vs) == len(taus) == len(matrices):
        raise InvalidSizeError("batch members differ in number")
    if incx == 0:
        raise InvalidSizeError("increment must be non-zero")
    return [larf(side, v, tau, a, incx) for v, tau, a in zip(vs, taus, matrices)]