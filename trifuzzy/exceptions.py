"""Custom exceptions for trifuzzy.

Exception Hierarchy:
    TriFuzzyError (ValueError)
    └── EmptyCollectionError
"""

from __future__ import annotations


class TriFuzzyError(ValueError):
    """Base exception for all trifuzzy errors.

    Inherits from ValueError so that code catching ValueError keeps working.
    """

    pass


class EmptyCollectionError(TriFuzzyError):
    """Raised when an aggregate is requested from an empty collection.

    The arithmetic mean of zero elements is undefined, so it is signalled
    instead of being returned as a zero or NaN fuzzy number.

    Example:
        >>> try:
        ...     FuzzyNumberMultiset().arithmetic_mean()
        ... except EmptyCollectionError as e:
        ...     print(e)
    """

    pass
