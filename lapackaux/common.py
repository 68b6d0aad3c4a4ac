"""Shared enumerations, error types and precision constants."""

from __future__ import annotations

import enum

import numpy as np

__all__ = [
    "Side",
    "Operation",
    "Direct",
    "Fill",
    "Diagonal",
    "SolverError",
    "InvalidSizeError",
    "NotImplementedDirectionError",
    "machine_precision",
]


class Side(str, enum.Enum):
    """Side from which a matrix is applied."""

    LEFT = "L"
    RIGHT = "R"


class Operation(str, enum.Enum):
    """Operation applied to a matrix operand."""

    NONE = "N"
    TRANSPOSE = "T"
    CONJUGATE_TRANSPOSE = "C"


class Direct(str, enum.Enum):
    """Order in which elementary reflectors are combined."""

    FORWARD = "F"
    BACKWARD = "B"


class Fill(str, enum.Enum):
    """Triangle of a matrix that holds the data."""

    UPPER = "U"
    LOWER = "L"


class Diagonal(str, enum.Enum):
    """Whether a triangular matrix has an implicit unit diagonal."""

    NON_UNIT = "N"
    UNIT = "U"


class SolverError(Exception):
    """Base class for errors raised by the solver routines."""


class InvalidSizeError(SolverError, ValueError):
    """A dimension, leading dimension or increment is not valid."""


class NotImplementedDirectionError(SolverError, NotImplementedError):
    """The requested reflector direction is not supported."""


_PRECISION = {
    np.dtype(np.float32): 1.19e-07,
    np.dtype(np.float64): 2.22e-16,
}


def machine_precision(dtype) -> float:
    """Return the machine precision used for single or double precision data."""
    try:
        key = np.dtype(dtype)
    except TypeError as exc:
        raise TypeError(f"unsupported precision type: {dtype!r}") from exc
    try:
        return _PRECISION[key]
    except KeyError:
        raise TypeError(f"unsupported precision type: {key}") from None