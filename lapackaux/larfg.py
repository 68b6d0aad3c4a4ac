"""Generation of elementary (Householder) reflectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Sequence

import numpy as np

from .blas import nrm2, scal
from .common import InvalidSizeError

__all__ = ["Reflector", "larfg", "larfg_batched"]


@dataclass(frozen=True)
class Reflector:
    """Scalars of a reflector ``H = I - tau * v * v'``.

    ``beta`` replaces ``alpha`` as the first entry of ``H * [alpha; x]``.
    """

    beta: float
    tau: float


def larfg(alpha: float, x: np.ndarray, incx: int = 1) -> Reflector:
    """Build the reflector that annihilates the strided vector ``x``.

    The strided elements of ``x`` are overwritten in place by the tail of the
    Householder vector ``v`` (whose first entry is an implicit one).
    """
    if not isinstance(x, np.ndarray) or x.ndim != 1:
        raise InvalidSizeError("x must be a one-dimensional array")
    if incx < 1:
        raise InvalidSizeError("increment must be positive")

    alpha = float(alpha)
    if x[::incx].size == 0:
        return Reflector(beta=alpha, tau=0.0)

    norm = nrm2(x, incx)
    if norm > 0:
        beta = math.hypot(norm, alpha)
        if alpha > 0:
            beta = -beta
        scale = 1.0 / (alpha - beta)
        tau = (beta - alpha) / beta
    else:
        beta = alpha
        scale = 1.0
        tau = 0.0

    scal(x.dtype.type(scale), x, incx)
    return Reflector(beta=beta, tau=tau)


def larfg_batched(
    alphas: Sequence[float], xs: Iterable[np.ndarray], incx: int = 1
) -> list[Reflector]:
    """Apply :func:`larfg` to each pair of ``alphas`` and ``xs``."""
    xs = list(xs)
    alphas = list(alphas)
    if len(alphas) != len(xs):
        raise InvalidSizeError("alphas and vectors differ in number")
    if incx < 1:
        raise InvalidSizeError("increment must be positive")
    return [larfg(alpha, x, incx) for alpha, x in zip(alphas, xs)]