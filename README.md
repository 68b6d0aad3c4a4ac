# lapackaux

LAPACK-style auxiliary routines on NumPy arrays: Householder reflectors,
block reflectors and row interchanges, together with a few small BLAS
kernels and helpers for comparing results against a reference.

Matrices are ordinary two-dimensional `numpy` arrays. Routines that update a
matrix or vector do so in place, as LAPACK does, and also return it.
Row and pivot indices taken by `laswp` are one-based.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `lapackaux.common`

- Option enums (string valued, so `"L"`, `"T"` and the like are accepted):
  `Side` (`LEFT`, `RIGHT`), `Operation` (`NONE`, `TRANSPOSE`,
  `CONJUGATE_TRANSPOSE`), `Direct` (`FORWARD`, `BACKWARD`),
  `Fill` (`UPPER`, `LOWER`), `Diagonal` (`NON_UNIT`, `UNIT`).
- Exceptions: `SolverError`, and its subclasses `InvalidSizeError`
  (also a `ValueError`) and `NotImplementedDirectionError` (also a
  `NotImplementedError`).
- `machine_precision(dtype)`: `1.19e-07` for `float32`, `2.22e-16` for
  `float64`; any other type raises `TypeError`.

### `lapackaux.blas`

Vector routines take a stride as in BLAS; matrix routines take whole
two-dimensional arrays and overwrite their output operand.

- `nrm2(x, incx)`, `scal(alpha, x, incx)`, `swap(x, y, incx, incy)`,
  `dot(x, y, incx, incy)`, `iamax(x, incx)` (one-based, `0` when empty).
- `ger(alpha, x, y, a)`: `A <- A + alpha * x * y'`.
- `gemv(trans, alpha, a, x, beta, y)` and
  `gemm(trans_a, trans_b, alpha, a, b, beta, c)`.
- `trmm(side, uplo, trans, diag, alpha, a, b)` and
  `trsm(side, uplo, trans, diag, alpha, a, b)`; `trsm` raises
  `SolverError` for a singular triangle.

### `lapackaux.larfg`

`larfg(alpha, x, incx=1)` builds the reflector `H = I - tau * v * v'` that
annihilates `x`. It overwrites `x` with the tail of `v` (the leading one is
implicit) and returns a `Reflector` with fields `beta` and `tau`.
`larfg_batched(alphas, xs, incx=1)` returns a list of them.

### `lapackaux.larf`

`larf(side, v, tau, a, incx=1)` applies `H` to `a` from the left (`H * a`)
or the right (`a * H`). `larf_batched(side, vs, taus, matrices, incx=1)`
does so for each member of a batch.

### `lapackaux.laswp`

`laswp(a, k1, k2, ipiv, incx=1)` exchanges rows `k1..k2` of `a` with the
rows named in `ipiv`, in increasing order for a positive increment and
decreasing order for a negative one. `laswp_batched(matrices, k1, k2,
pivots, incx=1)` applies it to each matrix.

### `lapackaux.larft`

`larft(direct, v, tau)` returns the upper triangular factor `T` for which
`H1 * ... * Hk = I - V * T * V'`, where the columns of `v` hold the
Householder vectors. `larft_batched(direct, vs, taus)` returns a list.

### `lapackaux.larfb`

`larfb(side, trans, direct, v, t, a)` applies the block reflector
`I - V * T * V'` (or its transpose, chosen by `trans`) to `a` from the left
or the right. `larfb_batched(side, trans, direct, vs, ts, matrices)` does so
for a batch.

### `lapackaux.checks`

- `max_relative_error(reference, result)`: largest absolute difference
  divided by the largest reference magnitude.
- `near_check(reference, result, abs_error)`: returns the largest absolute
  difference, or raises `AssertionError` naming the first element (in
  column-major order) that is off by more than `abs_error`.
- `pivot_mismatches(reference, result)`: zero-based positions where two
  pivot vectors differ.

### `lapackaux.batch_checks`

- `batched_relative_error(references, results)`: the largest per-member
  relative error of a batch.
- `compare_batches(ref_matrices, res_matrices, ref_pivots, res_pivots,
  ref_info, res_info)` returns a `BatchReport` with `max_error`,
  `batch_errors`, `info_mismatches`, `pivot_mismatches`, the property
  `consistent` and the method `passes(tolerance)`.

Mismatched dimensions, increments or batch sizes raise `InvalidSizeError`
throughout.

## Example

```python
import numpy as np
from lapackaux.common import Side
from lapackaux.larfg import larfg
from lapackaux.larf import larf

x = np.array([3.0, 4.0, 0.0])
reflector = larfg(x[0], x[1:], 1)          # x[1:] now holds the tail of v

a = np.arange(9.0).reshape(3, 3)
v = np.concatenate(([1.0], x[1:]))
larf(Side.LEFT, v, reflector.tau, a, 1)    # a <- H * a
```

## What it does not do

- The backward direction (`Direct.BACKWARD`) is not supported by `larft` or
  `larfb`; asking for it raises `NotImplementedDirectionError`.
- The package holds the building blocks only: it has no complete LU or QR
  factorization routines and no command-line program or benchmark driver.