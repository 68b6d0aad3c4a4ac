"""Row interchanges driven by a pivot vector."""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np

from .common import InvalidSizeError

__all__ = ["laswp", "laswp_batched"]


def _check_arguments(k1: int, k2: int, incx: int) -> None:
    if incx == 0 or k1 < 1 or k2 < 1:
        raise InvalidSizeError("invalid pivot range or increment")
    if k2 < k1:
        raise InvalidSizeError("k2 must not be smaller than k1")


def laswp(a: np.ndarray, k1: int, k2: int, ipiv: Sequence[int], incx: int = 1) -> np.ndarray:
    """Interchange rows ``k1..k2`` of ``a`` in place using one-based pivots.

    Row ``i`` is exchanged with row ``ipiv[k1 + (i - k1) * |incx| - 1]``.
    Rows are visited in increasing order for a positive increment and in
    decreasing order for a negative one.
    """
    if not isinstance(a, np.ndarray) or a.ndim != 2:
        raise InvalidSizeError("a must be a two-dimensional array")
    if a.shape[0] < 1:
        raise InvalidSizeError("matrix must have at least one row")
    _check_arguments(k1, k2, incx)
    if a.shape[1] == 0:
        return a

    rows = a.shape[0]
    step = abs(incx)
    order = range(k1, k2 + 1) if incx > 0 else range(k2, k1 - 1, -1)
    for i in order:
        position = k1 + (i - k1) * step - 1
        if position >= len(ipiv):
            raise InvalidSizeError("pivot vector is too short")
        exch = int(ipiv[position])
        if not 1 <= i <= rows or not 1 <= exch <= rows:
            raise InvalidSizeError(f"row index out of range: {i} <-> {exch}")
        if exch != i:
            a[[i - 1, exch - 1]] = a[[exch - 1, i - 1]]
    return a


def laswp_batched(
    matrices: Iterable[np.ndarray],
    k1: int,
    k2: int,
    pivots: Iterable[Sequence[int]],
    incx: int = 1,
) -> list[np.ndarray]:
    """Apply :func:`laswp` to each matrix with its own pivot vector."""
    matrices = list(matrices)
    pivots = list(pivots)
    if len(matrices) != len(pivots):
        raise InvalidSizeError("matrices and pivot vectors differ in number")
    _check_arguments(k1, k2, incx)
    return [laswp(a, k1, k2, ipiv, incx) for a, ipiv in zip(matrices, pivots)]