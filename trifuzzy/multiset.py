from __future__ import annotations
import bisect
import numpy as np
from typing import Iterable, Iterator, List, Tuple

from .exceptions import EmptyCollectionError
from .ranking import RankKey
from .types import FuzzyNumber


class FuzzyNumberMultiset:
    """
    A sorted multiset of FuzzyNumbers with a running component-wise sum.

    Elements are kept in ascending rank order (duplicates allowed, later
    insertions placed after rank-equivalent ones), so iteration goes from the
    least to the most preferred number. The sums of the lower, modal and upper
    components are updated on every insert and remove, which makes
    :meth:`arithmetic_mean` O(1).

    Membership (``in``, :meth:`count`, :meth:`remove`) uses value equality
    (identical components), not rank equivalence: two numbers that rank equal
    but differ in their components are different elements.

    The multiset stores copies of the inserted numbers and hands out copies,
    so mutating a number after insertion never desynchronises the sums.
    """

    def __init__(self, values: Iterable[FuzzyNumber] | None = None):
        self._items: List[FuzzyNumber] = []
        self._keys: List[RankKey] = []
        self._sums = np.zeros(3)
        if values is not None:
            for value in values:
                self.insert(value)

    def __repr__(self) -> str:
        return f"FuzzyNumberMultiset([{', '.join(str(item) for item in self._items)}])"

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[FuzzyNumber]:
        for item in self._items:
            yield item.copy()

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [item.copy() for item in self._items[index]]
        return self._items[index].copy()

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, FuzzyNumber):
            return False
        return self.count(value) > 0

    # --- Aggregate ---

    @property
    def sum_lower(self) -> float:
        return float(self._sums[0])

    @property
    def sum_modal(self) -> float:
        return float(self._sums[1])

    @property
    def sum_upper(self) -> float:
        return float(self._sums[2])

    def sums(self) -> Tuple[float, float, float]:
        return (self.sum_lower, self.sum_modal, self.sum_upper)

    # --- Structural changes ---

    def _rank_range(self, key: RankKey) -> Tuple[int, int]:
        """Slice bounds of the elements whose rank key equals ``key``."""
        return bisect.bisect_left(self._keys, key), bisect.bisect_right(self._keys, key)

    def insert(self, value: FuzzyNumber):
        """Adds one occurrence of ``value`` and its components to the sums."""
        item = value.copy()
        key = item.rank_key()
        index = bisect.bisect_right(self._keys, key)
        self._items.insert(index, item)
        self._keys.insert(index, key)
        self._sums += item.to_array()

    def remove(self, value: FuzzyNumber) -> int:
        """
        Removes every occurrence equal to ``value`` (same components).

        Removing a value that is not present is a no-op.

        Returns:
            The number of removed occurrences.
        """
        lo, hi = self._rank_range(value.rank_key())
        kept = [item for item in self._items[lo:hi] if item != value]
        removed = (hi - lo) - len(kept)
        if removed == 0:
            return 0

        self._items[lo:hi] = kept
        self._keys[lo:hi] = self._keys[lo:lo + len(kept)]
        self._sums -= removed * value.to_array()
        return removed

    def clear(self):
        self._items.clear()
        self._keys.clear()
        self._sums = np.zeros(3)

    def copy(self) -> FuzzyNumberMultiset:
        """Returns an independent multiset with the same elements and sums."""
        result = FuzzyNumberMultiset()
        result._items = [item.copy() for item in self._items]
        result._keys = list(self._keys)
        result._sums = self._sums.copy()
        return result

    __copy__ = copy

    # --- Queries ---

    def count(self, value: FuzzyNumber) -> int:
        """Number of occurrences equal to ``value`` (same components)."""
        lo, hi = self._rank_range(value.rank_key())
        return sum(1 for item in self._items[lo:hi] if item == value)

    def least(self) -> FuzzyNumber:
        """The lowest-ranked element."""
        if not self._items:
            raise EmptyCollectionError("FuzzyNumberMultiset.least - the multiset is empty.")
        return self._items[0].copy()

    def most(self) -> FuzzyNumber:
        """The highest-ranked element."""
        if not self._items:
            raise EmptyCollectionError("FuzzyNumberMultiset.most - the multiset is empty.")
        return self._items[-1].copy()

    def arithmetic_mean(self) -> FuzzyNumber:
        """
        Component-wise arithmetic mean of all elements, duplicates included.

        Computed from the running sums, without traversing the elements.

        Raises:
            EmptyCollectionError: If the multiset is empty.
        """
        n = len(self._items)
        if n == 0:
            raise EmptyCollectionError("FuzzyNumberMultiset.arithmetic_mean - the multiset is empty.")
        mean = self._sums / n
        return FuzzyNumber(mean[0], mean[1], mean[2])
