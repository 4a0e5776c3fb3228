from __future__ import annotations
import numpy as np
from typing import Union, Dict, List, Callable, Optional

from .ranking import RankKey, rank_key


Number = Union[int, float]


class FuzzyNumber:
    """
    Triangular Fuzzy Number.

    A FuzzyNumber is represented as (l, m, u) with l <= m <= u.
    l: lower bound, m: modal value, u: upper bound

    The constructor accepts the three values in any order and sorts them,
    so FuzzyNumber(3, 1, 2) is the same number as FuzzyNumber(1, 2, 3).

    Two relations coexist on fuzzy numbers:

    - ``==`` / ``!=`` compare the raw components exactly.
    - ``<``, ``<=``, ``>``, ``>=`` compare the rank keys (see
      :func:`trifuzzy.ranking.rank_key`). Two numbers with different
      components may rank equal, so ``a <= b and b <= a`` does not imply
      ``a == b``; use :func:`trifuzzy.ranking.rank_equivalent` for that.

    The rank key is computed on the first comparison and cached until the
    number is mutated by ``+=``, ``-=`` or ``*=``. Comparing is therefore
    not free of side effects: it writes the cache of both operands, and an
    instance shared between threads needs external locking.
    """
    _defuzzify_methods: Dict[str, Callable] = {}

    __slots__ = ("_l", "_m", "_u", "_rank")

    def __init__(self, l: Number, m: Number, u: Number):
        """Initialize a triangular fuzzy number from three reals in any order."""
        self._l, self._m, self._u = sorted((float(l), float(m), float(u)))
        self._rank: Optional[RankKey] = None

    def __repr__(self) -> str:
        from .config import configure_parameters
        p = configure_parameters.REPR_PRECISION
        return f"FuzzyNumber({self._l:.{p}f}, {self._m:.{p}f}, {self._u:.{p}f})"

    def __str__(self) -> str:
        return f"({self._l}, {self._m}, {self._u})"

    # --- Accessors ---

    def lower_value(self) -> float:
        return self._l

    def modal_value(self) -> float:
        return self._m

    def upper_value(self) -> float:
        return self._u

    @property
    def l(self) -> float:
        return self._l

    @property
    def m(self) -> float:
        return self._m

    @property
    def u(self) -> float:
        return self._u

    def to_tuple(self) -> tuple[float, float, float]:
        return (self._l, self._m, self._u)

    def to_array(self) -> np.ndarray:
        """Convert to NumPy array."""
        return np.array([self._l, self._m, self._u])

    def copy(self) -> FuzzyNumber:
        """Returns an independent FuzzyNumber with the same components."""
        result = FuzzyNumber.__new__(FuzzyNumber)
        result._l, result._m, result._u = self._l, self._m, self._u
        result._rank = self._rank
        return result

    __copy__ = copy

    def __deepcopy__(self, memo) -> FuzzyNumber:
        return self.copy()

    def _invalidate_rank(self):
        self._rank = None

    def _normalize(self):
        self._l, self._m, self._u = sorted((self._l, self._m, self._u))

    @staticmethod
    def _get_other_as_fuzzy(other: Union[FuzzyNumber, Number]) -> Optional[FuzzyNumber]:
        if isinstance(other, FuzzyNumber):
            return other
        if isinstance(other, (int, float, np.integer, np.floating)) and not isinstance(other, bool):
            return crisp_number(other)
        return None

    # --- In-place arithmetic ---

    def __iadd__(self, other: Union[FuzzyNumber, Number]) -> FuzzyNumber:
        o = self._get_other_as_fuzzy(other)
        if o is None:
            return NotImplemented
        self._l += o._l
        self._m += o._m
        self._u += o._u
        self._invalidate_rank()
        return self

    def __isub__(self, other: Union[FuzzyNumber, Number]) -> FuzzyNumber:
        """Fuzzy difference: (l1 - u2, m1 - m2, u1 - l2). Stays sorted without re-sorting."""
        o = self._get_other_as_fuzzy(other)
        if o is None:
            return NotImplemented
        # read o first: ``x -= x`` must use the original bounds
        ol, om, ou = o._l, o._m, o._u
        self._l -= ou
        self._m -= om
        self._u -= ol
        self._invalidate_rank()
        return self

    def __imul__(self, other: Union[FuzzyNumber, Number]) -> FuzzyNumber:
        """Component-wise product, re-sorted: negative components can invert the order."""
        o = self._get_other_as_fuzzy(other)
        if o is None:
            return NotImplemented
        ol, om, ou = o._l, o._m, o._u
        self._l *= ol
        self._m *= om
        self._u *= ou
        self._normalize()
        self._invalidate_rank()
        return self

    # --- Binary arithmetic ---

    def __add__(self, other: Union[FuzzyNumber, Number]) -> FuzzyNumber:
        o = self._get_other_as_fuzzy(other)
        if o is None:
            return NotImplemented
        result = self.copy()
        result += o
        return result

    def __radd__(self, other: Number) -> FuzzyNumber:
        return self.__add__(other)

    def __sub__(self, other: Union[FuzzyNumber, Number]) -> FuzzyNumber:
        o = self._get_other_as_fuzzy(other)
        if o is None:
            return NotImplemented
        result = self.copy()
        result -= o
        return result

    def __rsub__(self, other: Number) -> FuzzyNumber:
        o = self._get_other_as_fuzzy(other)
        if o is None:
            return NotImplemented
        return o - self

    def __mul__(self, other: Union[FuzzyNumber, Number]) -> FuzzyNumber:
        o = self._get_other_as_fuzzy(other)
        if o is None:
            return NotImplemented
        result = self.copy()
        result *= o
        return result

    def __rmul__(self, other: Number) -> FuzzyNumber:
        return self.__mul__(other)

    # --- Value equality ---

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FuzzyNumber):
            return self._l == other._l and self._m == other._m and self._u == other._u
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    # Mutable with value equality.
    __hash__ = None

    def is_close(self, other: FuzzyNumber, tolerance: float | None = None) -> bool:
        """Approximate component-wise equality within an absolute tolerance."""
        from .config import configure_parameters
        final_tolerance = tolerance if tolerance is not None else configure_parameters.FLOAT_TOLERANCE
        return (abs(self._l - other._l) <= final_tolerance
                and abs(self._m - other._m) <= final_tolerance
                and abs(self._u - other._u) <= final_tolerance)

    def is_crisp(self) -> bool:
        return self._l == self._m == self._u

    # --- Rank order ---

    def rank_key(self) -> RankKey:
        """Returns the cached rank key, computing it if the cache is empty."""
        if self._rank is None:
            self._rank = rank_key(self._l, self._m, self._u)
        return self._rank

    def __lt__(self, other: FuzzyNumber) -> bool:
        if not isinstance(other, FuzzyNumber):
            return NotImplemented
        return self.rank_key() < other.rank_key()

    def __le__(self, other: FuzzyNumber) -> bool:
        if not isinstance(other, FuzzyNumber):
            return NotImplemented
        return self.rank_key() <= other.rank_key()

    def __gt__(self, other: FuzzyNumber) -> bool:
        if not isinstance(other, FuzzyNumber):
            return NotImplemented
        return self.rank_key() > other.rank_key()

    def __ge__(self, other: FuzzyNumber) -> bool:
        if not isinstance(other, FuzzyNumber):
            return NotImplemented
        return self.rank_key() >= other.rank_key()

    # --- Defuzzification ---

    def defuzzify(self, method: str | None = None, **kwargs) -> float:
        """
        Defuzzifies the number by dispatching to a registered method.

        .. note::
            'rank' returns the primary component of the rank key, so sorting
            by it agrees with the rank order except where ties are broken by
            the secondary components.
        """
        if method is None:
            from .config import configure_parameters
            method = configure_parameters.DEFAULT_DEFUZZIFY_METHOD
        func = self.__class__._defuzzify_methods.get(method)
        if func is None:
            available = list(self.__class__._defuzzify_methods.keys())
            raise ValueError(f"Method '{method}' not implemented for FuzzyNumber. Available: {available}")
        return func(self, **kwargs)

    @classmethod
    def get_available_defuzzify_methods(cls) -> List[str]:
        return list(cls._defuzzify_methods.keys())

    @classmethod
    def register_defuzzify_method(cls, name: str, func: Callable):
        """Registers a new defuzzification function for this number type."""
        if name in cls._defuzzify_methods:
            print(f"Warning: Overwriting defuzzify method '{name}' for {cls.__name__}")
        cls._defuzzify_methods[name] = func


class _CrispConstant(FuzzyNumber):
    """
    A FuzzyNumber that cannot be mutated.

    Compound assignment falls back to the binary operators, so
    ``x = crisp_zero; x += y`` rebinds ``x`` and leaves the constant alone.
    """
    __slots__ = ()

    def __iadd__(self, other):
        return NotImplemented

    def __isub__(self, other):
        return NotImplemented

    def __imul__(self, other):
        return NotImplemented


def crisp_number(value: Number) -> FuzzyNumber:
    """Embeds a real number as the degenerate fuzzy number (v, v, v)."""
    return FuzzyNumber(value, value, value)


crisp_zero: FuzzyNumber = _CrispConstant(0, 0, 0)
