__version__ = "0.1.0"

from .config import configure_parameters, ConfigurationContextManager
from .exceptions import TriFuzzyError, EmptyCollectionError
from .types import FuzzyNumber, crisp_number, crisp_zero
from .ranking import rank_key, rank_keys, rank_order, rank_compare, rank_equivalent
from .multiset import FuzzyNumberMultiset
from trifuzzy import defuzzification
