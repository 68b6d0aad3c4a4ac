"""Basic linear algebra kernels over NumPy arrays.

Vector routines take a stride (increment) as in BLAS; matrix routines work on
two-dimensional arrays and update their output operand in place.
"""

from __future__ import annotations

import numpy as np

from .common import Diagonal, Fill, InvalidSizeError, Operation, Side, SolverError

__all__ = [
    "nrm2",
    "scal",
    "swap",
    "dot",
    "iamax",
    "ger",
    "gemv",
    "gemm",
    "trsm",
    "trmm",
]


def _vector(x: np.ndarray, name: str = "x") -> np.ndarray:
    if not isinstance(x, np.ndarray) or x.ndim != 1:
        raise InvalidSizeError(f"{name} must be a one-dimensional array")
    return x


def _matrix(a: np.ndarray, name: str = "a") -> np.ndarray:
    if not isinstance(a, np.ndarray) or a.ndim != 2:
        raise InvalidSizeError(f"{name} must be a two-dimensional array")
    return a


def _strided(x: np.ndarray, inc: int) -> np.ndarray:
    """View of the elements a BLAS routine visits for increment ``inc``."""
    if inc == 0:
        raise InvalidSizeError("increment must be non-zero")
    view = x[:: abs(inc)]
    return view if inc > 0 else view[::-1]


def _apply(a: np.ndarray, trans) -> np.ndarray:
    trans = Operation(trans)
    if trans is Operation.NONE:
        return a
    if trans is Operation.TRANSPOSE:
        return a.T
    return a.conj().T


def _triangle(a: np.ndarray, uplo, diag) -> np.ndarray:
    t = np.triu(a) if Fill(uplo) is Fill.UPPER else np.tril(a)
    if Diagonal(diag) is Diagonal.UNIT:
        np.fill_diagonal(t, 1)
    return t


def nrm2(x: np.ndarray, incx: int) -> float:
    """Euclidean norm of the strided vector; zero for a non-positive stride."""
    _vector(x)
    if incx <= 0:
        return 0.0
    return float(np.linalg.norm(x[::incx]))


def scal(alpha, x: np.ndarray, incx: int) -> np.ndarray:
    """Scale the strided elements of ``x`` by ``alpha`` in place."""
    _vector(x)
    if incx > 0:
        x[::incx] *= alpha
    return x


def swap(x: np.ndarray, y: np.ndarray, incx: int, incy: int) -> None:
    """Exchange the strided elements of ``x`` and ``y`` in place."""
    vx = _strided(_vector(x), incx)
    vy = _strided(_vector(y, "y"), incy)
    if vx.shape != vy.shape:
        raise InvalidSizeError("strided vectors differ in length")
    held = vx.copy()
    vx[...] = vy
    vy[...] = held


def dot(x: np.ndarray, y: np.ndarray, incx: int, incy: int) -> float:
    """Dot product of two strided vectors."""
    vx = _strided(_vector(x), incx)
    vy = _strided(_vector(y, "y"), incy)
    if vx.shape != vy.shape:
        raise InvalidSizeError("strided vectors differ in length")
    return float(np.dot(vx, vy))


def iamax(x: np.ndarray, incx: int) -> int:
    """One-based position of the first element of largest magnitude, or 0."""
    _vector(x)
    if incx <= 0:
        return 0
    view = x[::incx]
    if view.size == 0:
        return 0
    return int(np.argmax(np.abs(view))) + 1


def ger(alpha, x: np.ndarray, y: np.ndarray, a: np.ndarray) -> np.ndarray:
    """Rank-one update ``A <- A + alpha * x * y'`` in place."""
    _vector(x)
    _vector(y, "y")
    _matrix(a)
    if a.shape != (x.size, y.size):
        raise InvalidSizeError("matrix shape does not match vector lengths")
    a += alpha * np.outer(x, y)
    return a


def gemv(trans, alpha, a: np.ndarray, x: np.ndarray, beta, y: np.ndarray) -> np.ndarray:
    """``y <- alpha * op(A) * x + beta * y`` in place."""
    op = _apply(_matrix(a), trans)
    _vector(x)
    _vector(y, "y")
    rows, cols = op.shape
    if x.size != cols or y.size != rows:
        raise InvalidSizeError("vector lengths do not match the matrix")
    product = alpha * (op @ x)
    if beta == 0:
        y[...] = product
    else:
        y[...] = product + beta * y
    return y


def gemm(trans_a, trans_b, alpha, a: np.ndarray, b: np.ndarray, beta, c: np.ndarray) -> np.ndarray:
    """``C <- alpha * op(A) * op(B) + beta * C`` in place."""
    op_a = _apply(_matrix(a), trans_a)
    op_b = _apply(_matrix(b, "b"), trans_b)
    _matrix(c, "c")
    if op_a.shape[1] != op_b.shape[0] or c.shape != (op_a.shape[0], op_b.shape[1]):
        raise InvalidSizeError("matrix shapes are not compatible")
    product = alpha * (op_a @ op_b)
    if beta == 0:
        c[...] = product
    else:
        c[...] = product + beta * c
    return c


def _check_triangular(side, a: np.ndarray, b: np.ndarray) -> Side:
    side = Side(side)
    _matrix(a)
    _matrix(b, "b")
    order = b.shape[0] if side is Side.LEFT else b.shape[1]
    if a.shape[0] < order or a.shape[1] < order:
        raise InvalidSizeError("triangular matrix is too small")
    return side


def trsm(side, uplo, trans, diag, alpha, a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Solve ``op(A) X = alpha B`` or ``X op(A) = alpha B``; X overwrites B."""
    side = _check_triangular(side, a, b)
    order = b.shape[0] if side is Side.LEFT else b.shape[1]
    op = _apply(_triangle(a[:order, :order], uplo, diag), trans)
    try:
        if side is Side.LEFT:
            b[...] = np.linalg.solve(op, alpha * b)
        else:
            b[...] = np.linalg.solve(op.T, alpha * b.T).T
    except np.linalg.LinAlgError as exc:
        raise SolverError("triangular matrix is singular") from exc
    return b


def trmm(side, uplo, trans, diag, alpha, a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """``B <- alpha * op(A) * B`` or ``B <- alpha * B * op(A)`` in place."""
    side = _check_triangular(side, a, b)
    order = b.shape[0] if side is Side.LEFT else b.shape[1]
    op = _apply(_triangle(a[:order, :order], uplo, diag), trans)
    if side is Side.LEFT:
        b[...] = alpha * (op @ b)
    else:
        b[...] = alpha * (b @ op)
    return b