"""
Cache Matrix: a matrix bundled with its lazily computed inverse.

The container holds the matrix data and, once computed, the inverse of that
data. Storing new data always drops the cached inverse, so code holding a
CacheMatrix never has to track whether the inverse belongs to the current
matrix. The inverse itself is computed by `cachematrix.solve.cache_solve`.
"""

import numpy as np
from typing import Optional, Tuple


class CacheMatrix:
    """
    Single-slot cache for the inverse of a stored matrix.
    
    The cache is either INVALID (no inverse stored) or VALID (inverse stored
    for the current data). `set` moves it to INVALID, a successful
    `cache_solve` moves it to VALID.
    
    Attributes:
        _data (np.ndarray): Shape (n, m) - stored matrix
        _inverse (Optional[np.ndarray]): Cached inverse, None when absent
    """
    
    def __init__(self, data=None):
        """
        Initialize with a matrix and an empty inverse cache.
        
        Args:
            data: Array-like 2-D matrix. Defaults to a 1x1 NaN matrix, which
                cannot be inverted until real data is stored with `set`.
        """
        if data is None:
            data = np.full((1, 1), np.nan)
        self._data = _as_matrix(data)
        self._inverse: Optional[np.ndarray] = None
    
    def set(self, data):
        """
        Store a new matrix and invalidate the cached inverse.
        
        The inverse is dropped even when `data` equals the previous matrix.
        A 2-D float array is held by reference, not copied: changing it in
        place afterwards is not detected, so call `set` again after editing.
        
        Args:
            data: Array-like 2-D matrix
        """
        self._data = _as_matrix(data)
        self._inverse = None
    
    def get(self) -> np.ndarray:
        """
        Get the stored matrix.
        
        Returns:
            np.ndarray: The matrix passed to the constructor or last `set`,
                the same object when it was already a 2-D float array
        """
        return self._data
    
    def set_inverse(self, inverse: np.ndarray):
        """
        Store the inverse of the current matrix.
        
        No check is made that `inverse` actually inverts the stored data.
        
        Args:
            inverse: Inverse of the matrix returned by `get`
        """
        self._inverse = inverse
    
    def get_inverse(self) -> Optional[np.ndarray]:
        """
        Get the cached inverse.
        
        Returns:
            Optional[np.ndarray]: Cached inverse, or None if it has not been
                computed since the last `set`
        """
        return self._inverse
    
    def has_inverse(self) -> bool:
        """Check if an inverse is cached for the current matrix."""
        return self._inverse is not None
    
    @property
    def shape(self) -> Tuple[int, ...]:
        return self._data.shape
    
    def __repr__(self):
        return f"CacheMatrix(shape={self._data.shape}, cached={self.has_inverse()})"


def _as_matrix(data) -> np.ndarray:
    """Coerce array-like input to a 2-D float array."""
    matrix = np.atleast_2d(np.asarray(data, dtype=float))
    if matrix.ndim != 2:
        raise ValueError(f"Expected a 2-D matrix, got {matrix.ndim} dimensions")
    return matrix
