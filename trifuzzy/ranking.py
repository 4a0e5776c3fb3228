from __future__ import annotations
import math
import numpy as np
from typing import TYPE_CHECKING, Iterable, List, Tuple

if TYPE_CHECKING:
    from .types import FuzzyNumber


RankKey = Tuple[float, float, float]


# ==============================================================================
# 1. THE RANKING INDEX
# ==============================================================================

def rank_key(l: float, m: float, u: float) -> RankKey:
    """
    Computes the ranking key of the triangular fuzzy number (l, m, u).

    The key is the triple (x - y/2, 1 - y, m) where

        d1 = sqrt(1 + (u - m)^2),  d2 = sqrt(1 + (m - l)^2)
        z  = (u - l) + d1 + d2
        y  = (u - l) / z
        x  = ((u - l) * m + d1 * l + d2 * u) / z

    Keys are compared lexicographically. The components must be sorted
    (l <= m <= u); then z >= 2 and the division is always defined, even for
    crisp numbers where u == l.

    .. note::
        The evaluation order of every sum is part of the contract: reordering
        the terms changes the rounding and therefore the order of numbers
        that rank within one ulp of each other.
    """
    d1 = math.sqrt(1 + (u - m) * (u - m))
    d2 = math.sqrt(1 + (m - l) * (m - l))
    z = (u - l) + d1 + d2
    y = (u - l) / z
    x = ((u - l) * m + d1 * l + d2 * u) / z
    return (x - y / 2, 1 - y, m)


def rank_keys(numbers: Iterable[FuzzyNumber]) -> np.ndarray:
    """
    Vectorised version of :func:`rank_key`.

    Args:
        numbers: Any iterable of FuzzyNumber objects.

    Returns:
        An (n, 3) float array whose i-th row is the rank key of the i-th number.
    """
    components = np.array([n.to_tuple() for n in numbers], dtype=float).reshape(-1, 3)
    l, m, u = components[:, 0], components[:, 1], components[:, 2]

    d1 = np.sqrt(1 + (u - m) * (u - m))
    d2 = np.sqrt(1 + (m - l) * (m - l))
    z = (u - l) + d1 + d2
    y = (u - l) / z
    x = ((u - l) * m + d1 * l + d2 * u) / z
    return np.column_stack((x - y / 2, 1 - y, m))


def rank_order(numbers: Iterable[FuzzyNumber]) -> List[int]:
    """
    Returns the indices that sort ``numbers`` from least to most preferred.

    The sort is stable: rank-equivalent numbers keep their input order.
    """
    keys = rank_keys(numbers)
    if keys.shape[0] == 0:
        return []
    # np.lexsort treats the last key as the primary one
    return np.lexsort((keys[:, 2], keys[:, 1], keys[:, 0])).tolist()


# ==============================================================================
# 2. COMPARISON BY RANK
# ==============================================================================

def rank_compare(a: FuzzyNumber, b: FuzzyNumber) -> int:
    """
    Three-way comparison of two fuzzy numbers by rank.

    Returns -1 if ``a`` ranks below ``b``, 1 if above and 0 if they are
    rank-equivalent. Populates the rank cache of both operands.
    """
    ka, kb = a.rank_key(), b.rank_key()
    return (ka > kb) - (ka < kb)


def rank_equivalent(a: FuzzyNumber, b: FuzzyNumber, approximate: bool = False,
                    tolerance: float | None = None) -> bool:
    """
    Whether ``a`` and ``b`` occupy the same position in the rank order.

    This is a coarser relation than ``a == b``: two numbers with different
    components can be rank-equivalent.

    Args:
        approximate: Compare the keys component-wise within ``tolerance``
                     instead of exactly.
        tolerance: Absolute tolerance for the approximate comparison.
                   Defaults to ``configure_parameters.FLOAT_TOLERANCE``.
    """
    if not approximate:
        return a.rank_key() == b.rank_key()

    from .config import configure_parameters
    final_tolerance = tolerance if tolerance is not None else configure_parameters.FLOAT_TOLERANCE
    return all(abs(p - q) <= final_tolerance for p, q in zip(a.rank_key(), b.rank_key()))
