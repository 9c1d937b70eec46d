"""
Cached inversion of CacheMatrix contents.

`cache_solve` returns the inverse held by a CacheMatrix when one is cached,
and otherwise computes it with a solver, stores it and returns it. The
default solver, `invert`, solves data @ X = b (b defaults to the identity)
with numpy.
"""

import logging
import numpy as np
from typing import Callable, Optional

from cachematrix.matrix import CacheMatrix

logger = logging.getLogger(__name__)

CACHE_HIT_MESSAGE = "getting cached data"


class InversionError(ValueError):
    """Raised when a matrix cannot be inverted (non-square, singular, non-finite)."""


def invert(matrix: np.ndarray, b: Optional[np.ndarray] = None,
           check_finite: bool = True) -> np.ndarray:
    """
    Solve matrix @ X = b for X.
    
    With `b` omitted the right-hand side is the identity, so X is the
    inverse of `matrix`.
    
    Args:
        matrix: Shape (n, n) - coefficient matrix
        b: Optional shape (n,) or (n, k) right-hand side
        check_finite: Reject inputs containing NaN or inf
        
    Returns:
        np.ndarray: Solution X, shape (n, n) when b is omitted
        
    Raises:
        InversionError: If the system cannot be solved
    """
    a = np.asarray(matrix, dtype=float)
    if a.ndim != 2 or a.shape[0] != a.shape[1]:
        raise InversionError(f"Matrix must be square, got shape {a.shape}")
    
    n = a.shape[0]
    rhs = np.eye(n) if b is None else np.asarray(b, dtype=float)
    if rhs.ndim not in (1, 2) or rhs.shape[0] != n:
        raise InversionError(
            f"Right-hand side shape {rhs.shape} does not match matrix shape {a.shape}"
        )
    
    if check_finite and not (np.all(np.isfinite(a)) and np.all(np.isfinite(rhs))):
        raise InversionError("Matrix contains non-finite values")
    
    try:
        return np.linalg.solve(a, rhs)
    except np.linalg.LinAlgError as e:
        raise InversionError(f"Matrix is not invertible: {e}") from e


def cache_solve(x: CacheMatrix, *args,
                solver: Optional[Callable[..., np.ndarray]] = None,
                **kwargs) -> np.ndarray:
    """
    Return the inverse of the matrix stored in `x`, computing it at most once.
    
    A cached inverse is returned as is and the cache hit is logged at INFO.
    The returned array is read-only, since the same object is handed out on
    every cache hit.
    Otherwise the solver runs on `x.get()` with any extra arguments passed
    through, and the result is cached in `x` before being returned. Solver
    errors propagate and leave the cache empty.
    
    Args:
        x: CacheMatrix holding the matrix to invert
        *args: Extra positional arguments for the solver
        solver: Inversion routine, defaults to `invert`
        **kwargs: Extra keyword arguments for the solver
        
    Returns:
        np.ndarray: Inverse of the stored matrix
    """
    inv = x.get_inverse()
    if inv is not None:
        logger.info(CACHE_HIT_MESSAGE)
        return inv
    
    data = x.get()
    logger.debug(f"computing inverse for matrix of shape {data.shape}")
    inv = (solver or invert)(data, *args, **kwargs)
    # Cached result is shared with every caller
    if isinstance(inv, np.ndarray):
        inv.setflags(write=False)
    x.set_inverse(inv)
    return inv
