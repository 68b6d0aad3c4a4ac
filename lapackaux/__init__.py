"""LAPACK-style auxiliary routines on NumPy arrays: reflectors, row interchanges, BLAS kernels and result checks."""

__version__ = "0.1.0"
__all__ = ["common", "blas", "larfg", "larf", "laswp", "larft", "larfb", "checks", "batch_checks"]