"""Comparison of computed results against reference results."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .common import InvalidSizeError

__all__ = ["max_relative_error", "near_check", "pivot_mismatches"]


def _pair(reference, result) -> tuple[np.ndarray, np.ndarray]:
    ref = np.asarray(reference, dtype=np.float64)
    res = np.asarray(result, dtype=np.float64)
    if ref.shape != res.shape:
        raise InvalidSizeError(
            f"shapes differ: reference {ref.shape}, result {res.shape}"
        )
    return ref, res


def max_relative_error(reference, result) -> float:
    """Largest absolute difference, relative to the largest reference magnitude.

    Both operands may be arrays of any shape, but the shapes must agree.
    An all-zero reference gives 0.0 for an exact match and infinity otherwise.
    """
    ref, res = _pair(reference, result)
    if ref.size == 0:
        return 0.0
    max_err = float(np.max(np.abs(res - ref)))
    max_val = float(np.max(np.abs(ref)))
    if max_val == 0.0:
        return 0.0 if max_err == 0.0 else float("inf")
    return max_err / max_val


def near_check(reference, result, abs_error) -> float:
    """Require every element of ``result`` within ``abs_error`` of ``reference``.

    Returns the largest absolute difference found. Raises ``AssertionError``
    naming the first element, in column-major order, that is too far off.
    """
    if abs_error < 0:
        raise ValueError("abs_error must not be negative")
    ref, res = _pair(reference, result)
    if ref.size == 0:
        return 0.0
    diff = np.abs(res - ref)
    bad = diff > abs_error
    if np.any(bad):
        flat = np.flatnonzero(np.asfortranarray(bad).ravel(order="F"))[0]
        index = np.unravel_index(flat, bad.shape, order="F")
        where = tuple(int(i) for i in index)
        raise AssertionError(
            f"element {where}: reference {ref[index]!r}, result {res[index]!r}, "
            f"difference {diff[index]!r} exceeds {abs_error!r}"
        )
    return float(np.max(diff))


def pivot_mismatches(reference: Sequence[int], result: Sequence[int]) -> list[int]:
    """Zero-based positions at which two pivot vectors disagree."""
    ref = [int(p) for p in reference]
    res = [int(p) for p in result]
    if len(ref) != len(res):
        raise InvalidSizeError(
            f"pivot vectors differ in length: {len(ref)} and {len(res)}"
        )
    return [j for j, (r, g) in enumerate(zip(ref, res)) if r != g]