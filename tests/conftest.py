import pytest
import numpy as np
from trifuzzy.types import FuzzyNumber


def random_fuzzy_numbers(rng: np.random.Generator, count: int, low: float = -10.0, high: float = 10.0) -> list:
    """Draws ``count`` fuzzy numbers with components uniform in [low, high)."""
    return [FuzzyNumber(*rng.uniform(low, high, size=3)) for _ in range(count)]

def random_integer_fuzzy_numbers(rng: np.random.Generator, count: int, bound: int = 20) -> list:
    """Fuzzy numbers with small integer components, so sums stay exact."""
    return [FuzzyNumber(*rng.integers(-bound, bound, size=3).tolist()) for _ in range(count)]

@pytest.fixture
def rng() -> np.random.Generator:
    """A seeded generator so randomised checks are reproducible."""
    return np.random.default_rng(20240611)

@pytest.fixture
def tfn1() -> FuzzyNumber:
    return FuzzyNumber(1, 2, 3)

@pytest.fixture
def tfn2() -> FuzzyNumber:
    return FuzzyNumber(2, 4, 6)

@pytest.fixture
def rank_twins() -> tuple:
    """
    Two numbers with different components but identical rank keys.

    With l = 1 - 2**-53 the spread is a single ulp, so every term of the
    ranking formula rounds back to the values of the crisp number 1.
    """
    return FuzzyNumber(1 - 2**-53, 1, 1), FuzzyNumber(1, 1, 1)
