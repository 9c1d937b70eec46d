"""
cachematrix: cached matrix inversion.

A CacheMatrix bundles a matrix with its inverse so that repeated requests for
the inverse of the same matrix are computed only once:

- CacheMatrix: holds the matrix and, lazily, its inverse
- cache_solve: returns the cached inverse or computes and stores it

Storing a new matrix with `CacheMatrix.set` drops the cached inverse.
"""

__version__ = "0.1.0"

from cachematrix.matrix import CacheMatrix
from cachematrix.solve import cache_solve, invert, InversionError
from cachematrix.logging_config import setup_logging

__all__ = ["CacheMatrix", "cache_solve", "invert", "InversionError", "setup_logging"]
