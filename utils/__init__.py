"""
Pyraminx Engine - Utilities Package
Permutation parity and cyclic orientation helpers.
"""
from .permutation import (
    normalize,
    is_permutation,
    inversion_count,
    is_even_permutation,
    rotate_cycle,
)

__all__ = ['normalize', 'is_permutation', 'inversion_count', 'is_even_permutation', 'rotate_cycle']
