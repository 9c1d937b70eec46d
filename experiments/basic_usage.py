"""
Basic usage of the cached matrix inverse.

Walks through the lifecycle of a CacheMatrix:
- a fresh instance has no inverse
- the first cache_solve computes and stores the inverse
- later calls return the cached inverse ("getting cached data")
- storing new data invalidates the cache

Settings are read from the environment (or a .env file at the repository
root) and can be overridden on the command line:
    CACHEMATRIX_SIZE       matrix size n (default 4)
    CACHEMATRIX_SEED       random seed (default 42)
    CACHEMATRIX_LOG_LEVEL  logging level (default INFO)
"""

import os
import numpy as np
from pathlib import Path

# Add parent directory to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from dotenv import load_dotenv
load_dotenv(Path(__file__).parent.parent / '.env')

from cachematrix import CacheMatrix, cache_solve, InversionError, setup_logging


def run_basic_usage(n: int = 4, random_seed: int = 42, verbose: bool = True):
    """
    Run the usage walk-through.
    
    Args:
        n: Size of the random square matrix
        random_seed: Random seed for reproducibility
        verbose: Whether to print progress
        
    Returns:
        dict: The CacheMatrix, its inverse and the rounded product M @ M^-1
    """
    rng = np.random.RandomState(random_seed)
    
    m = CacheMatrix()
    if verbose:
        print("="*70)
        print("CACHE MATRIX - Basic Usage")
        print("="*70)
        print(f"Fresh instance:       {m!r}")
        print(f"Inverse before solve: {m.get_inverse()}")
    
    # The default matrix is a placeholder and cannot be inverted
    try:
        cache_solve(m)
    except InversionError as e:
        if verbose:
            print(f"Default matrix:       {e}")
    
    m.set(rng.randn(n, n))
    inverse = cache_solve(m)
    if verbose:
        print(f"\nAfter first solve:    {m!r}")
        print(inverse)
    
    # Second call hits the cache and logs "getting cached data"
    product = np.round(m.get() @ cache_solve(m), 3)
    if verbose:
        print("\nM @ M^-1 (rounded to 3 decimals):")
        print(product)
    
    m.set(rng.randn(n, n))
    if verbose:
        print(f"\nAfter set:            {m!r}")
    
    return {
        'matrix': m,
        'inverse': inverse,
        'product': product,
    }


if __name__ == "__main__":
    import argparse
    
    parser = argparse.ArgumentParser(description='Cached matrix inverse walk-through')
    parser.add_argument('--n', type=int, default=int(os.getenv('CACHEMATRIX_SIZE', '4')),
                        help='Matrix size')
    parser.add_argument('--seed', type=int, default=int(os.getenv('CACHEMATRIX_SEED', '42')),
                        help='Random seed')
    parser.add_argument('--log-level', type=str, default=None,
                        help='Logging level (default: CACHEMATRIX_LOG_LEVEL or INFO)')
    parser.add_argument('--quiet', action='store_true', help='Suppress output')
    
    args = parser.parse_args()
    
    setup_logging(args.log_level)
    run_basic_usage(n=args.n, random_seed=args.seed, verbose=not args.quiet)
