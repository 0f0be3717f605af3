# utils/permutation.py
"""
Permutation and cyclic-group helpers for small fixed-size piece arrays.

Conventions:
- A permutation of size n is a sequence holding each of 0..n-1 exactly once.
- Parity is taken from the inversion count: even count == even permutation.
- Orientations live in Z/m; normalisation always returns a value in [0, m).
"""

from __future__ import annotations
from typing import List, Sequence, Tuple


def normalize(value: int, modulus: int) -> int:
    """Reduce value into [0, modulus), negatives included."""
    return value % modulus


def is_permutation(values: Sequence[int], n: int) -> bool:
    """
    Check that values is a bijection on 0..n-1.

    Args:
        values: Candidate permutation
        n: Expected size

    Returns:
        True iff every id in 0..n-1 appears exactly once as a plain int
    """
    if len(values) != n:
        return False
    seen = [False] * n
    for v in values:
        if not isinstance(v, int) or isinstance(v, bool):
            return False
        if v < 0 or v >= n or seen[v]:
            return False
        seen[v] = True
    return True


def inversion_count(values: Sequence[int]) -> int:
    """Number of pairs i < j with values[i] > values[j]. O(n^2); n is tiny."""
    count = 0
    n = len(values)
    for i in range(n):
        for j in range(i + 1, n):
            if values[i] > values[j]:
                count += 1
    return count


def is_even_permutation(values: Sequence[int]) -> bool:
    return inversion_count(values) % 2 == 0


def rotate_cycle(
    ids: List[int],
    oris: List[int],
    cycle: Sequence[int],
    deltas: Sequence[int],
    modulus: int,
) -> None:
    """
    One simultaneous step around a cycle of slots, in place.

    Slot cycle[i] receives the (id, ori) previously held by cycle[i-1];
    cycle[0] receives from the last slot. deltas[i] is added to the
    orientation landing in cycle[i] (mod modulus).

    Raises:
        AssertionError: If cycle and deltas lengths differ
    """
    assert len(cycle) == len(deltas), f"cycle/delta mismatch: {len(cycle)} vs {len(deltas)}"

    # Read every slot before writing any of them
    held: List[Tuple[int, int]] = [(ids[slot], oris[slot]) for slot in cycle]

    k = len(cycle)
    for i, slot in enumerate(cycle):
        src_id, src_ori = held[(i - 1) % k]
        ids[slot] = src_id
        oris[slot] = (src_ori + deltas[i]) % modulus
