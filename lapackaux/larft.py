"""Triangular factor of a block of elementary reflectors."""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np

from .common import Direct, InvalidSizeError, NotImplementedDirectionError

__all__ = ["larft", "larft_batched"]


def _working_dtype(v: np.ndarray) -> np.dtype:
    return v.dtype if np.issubdtype(v.dtype, np.floating) else np.dtype(np.float64)


def larft(direct, v: np.ndarray, tau: Sequence[float]) -> np.ndarray:
    """Return the upper triangular ``T`` with ``H1 * ... * Hk = I - V * T * V'``.

    ``v`` is an ``n`` by ``k`` array whose columns hold the Householder
    vectors; the unit diagonal is implicit and the strictly upper part is
    ignored. ``tau`` holds the ``k`` reflector scalars and is left unchanged.
    Only the forward direction is supported.
    """
    direct = Direct(direct)
    if not isinstance(v, np.ndarray) or v.ndim != 2:
        raise InvalidSizeError("v must be a two-dimensional array")
    n, k = v.shape
    if k < 1:
        raise InvalidSizeError("at least one reflector is required")
    dtype = _working_dtype(v)
    taus = np.asarray(tau, dtype=dtype).ravel()
    if taus.size < k:
        raise InvalidSizeError("tau holds fewer scalars than reflectors")

    t = np.zeros((k, k), dtype=dtype)
    if n == 0:
        return t
    if direct is Direct.BACKWARD:
        raise NotImplementedDirectionError("backward direction is not supported")
    if n < k:
        raise InvalidSizeError("v has fewer rows than reflectors")

    vv = v.astype(dtype, copy=False)
    for i in range(k):
        t[i, i] = taus[i]
        if i == 0:
            continue
        # The implicit unit entry of v_i contributes row i of V.
        column = -taus[i] * (vv[i, :i] + vv[i + 1 :, :i].T @ vv[i + 1 :, i])
        t[:i, i] = t[:i, :i] @ column
    return t


def larft_batched(
    direct, vs: Iterable[np.ndarray], taus: Iterable[Sequence[float]]
) -> list[np.ndarray]:
    """Apply :func:`larft` to each block of reflectors with its own scalars."""
    vs = list(vs)
    taus = list(taus)
    if len(vs) != len(taus):
        raise InvalidSizeError("reflector blocks and scalars differ in number")
    return [larft(direct, v, tau) for v, tau in zip(vs, taus)]