"""Comparison of batched factorization results against reference results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .checks import max_relative_error, pivot_mismatches
from .common import InvalidSizeError

__all__ = ["BatchReport", "batched_relative_error", "compare_batches"]


@dataclass(frozen=True)
class InfoMismatch:
    """Singularity indicators that disagree for one batch member."""

    batch: int
    reference: int
    result: int


@dataclass(frozen=True)
class PivotMismatch:
    """First pivot that disagrees for one batch member."""

    batch: int
    position: int
    reference: int
    result: int


@dataclass(frozen=True)
class BatchReport:
    """Outcome of comparing a batch of factorizations with a reference batch.

    ``batch_errors`` holds the relative error of each member and
    ``max_error`` the largest of them.
    """

    max_error: float
    batch_errors: tuple[float, ...]
    info_mismatches: tuple[InfoMismatch, ...]
    pivot_mismatches: tuple[PivotMismatch, ...]

    @property
    def consistent(self) -> bool:
        """True when every pivot and singularity indicator agrees."""
        return not self.info_mismatches and not self.pivot_mismatches

    def passes(self, tolerance: float) -> bool:
        """True when the batch is consistent and the error is within ``tolerance``."""
        return self.consistent and self.max_error <= tolerance


def _same_length(*groups: Sequence) -> None:
    lengths = {len(group) for group in groups}
    if len(lengths) > 1:
        raise InvalidSizeError(f"batches differ in size: {sorted(lengths)}")


def _member_errors(references: Sequence, results: Sequence) -> list[float]:
    return [max_relative_error(ref, res) for ref, res in zip(references, results)]


def batched_relative_error(references, results) -> float:
    """Largest per-member relative error over a batch; 0.0 for an empty batch.

    Each member's error is its largest absolute difference divided by its
    largest reference magnitude.
    """
    references = list(references)
    results = list(results)
    _same_length(references, results)
    return max(_member_errors(references, results), default=0.0)


def compare_batches(
    ref_matrices,
    res_matrices,
    ref_pivots,
    res_pivots,
    ref_info,
    res_info,
) -> BatchReport:
    """Compare batched LU results: matrices, pivot vectors and info values."""
    ref_matrices = list(ref_matrices)
    res_matrices = list(res_matrices)
    ref_pivots = list(ref_pivots)
    res_pivots = list(res_pivots)
    ref_info = [int(i) for i in ref_info]
    res_info = [int(i) for i in res_info]
    _same_length(ref_matrices, res_matrices, ref_pivots, res_pivots, ref_info, res_info)

    info_bad = tuple(
        InfoMismatch(b, ref, res)
        for b, (ref, res) in enumerate(zip(ref_info, res_info))
        if ref != res
    )

    pivots_bad = []
    for b, (ref, res) in enumerate(zip(ref_pivots, res_pivots)):
        positions = pivot_mismatches(ref, res)
        if positions:
            j = positions[0]
            pivots_bad.append(PivotMismatch(b, j, int(ref[j]), int(res[j])))

    errors = tuple(_member_errors(ref_matrices, res_matrices))
    return BatchReport(
        max_error=max(errors, default=0.0),
        batch_errors=errors,
        info_mismatches=info_bad,
        pivot_mismatches=tuple(pivots_bad),
    )