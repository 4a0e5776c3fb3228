"""
===================================================================
Tests for the Ranking Module
===================================================================

Checks the ranking index against hand-computed values and the vectorised
helpers against the scalar formula.
"""

import math

import pytest

from trifuzzy.ranking import rank_key, rank_keys, rank_order, rank_compare, rank_equivalent
from trifuzzy.types import FuzzyNumber, crisp_number
from trifuzzy.config import ConfigurationContextManager
from conftest import random_fuzzy_numbers

# ==============================================================================
# The ranking index
# ==============================================================================

def test_rank_key_symmetric_number():
    # l, m, u = 1, 2, 3 -> d1 = d2 = sqrt(2), z = 2 + 2*sqrt(2)
    d = math.sqrt(2)
    z = 2 + 2 * d
    y = 2 / z
    x = (2 * 2 + d * 1 + d * 3) / z
    key = rank_key(1, 2, 3)
    assert key[0] == pytest.approx(x - y / 2)
    assert key[1] == pytest.approx(1 - y)
    assert key[2] == 2
    # x is the modal value for a symmetric number
    assert x == pytest.approx(2.0)

def test_rank_key_asymmetric_number():
    # l, m, u = 0, 1, 4 -> d1 = sqrt(10), d2 = sqrt(2)
    d1, d2 = math.sqrt(10), math.sqrt(2)
    z = 4 + d1 + d2
    y = 4 / z
    x = (4 * 1 + d1 * 0 + d2 * 4) / z
    assert rank_key(0, 1, 4) == pytest.approx((x - y / 2, 1 - y, 1))

def test_rank_key_uses_unit_offset_in_distances():
    # Without the "1 +" term the crisp number would divide by zero.
    assert rank_key(3, 3, 3) == (3.0, 1.0, 3.0)

def test_method_and_function_agree(rng):
    for fn in random_fuzzy_numbers(rng, 20):
        assert fn.rank_key() == rank_key(fn.l, fn.m, fn.u)

# ==============================================================================
# Vectorised helpers
# ==============================================================================

def test_rank_keys_matches_scalar_formula(rng):
    numbers = random_fuzzy_numbers(rng, 50)
    keys = rank_keys(numbers)
    assert keys.shape == (50, 3)
    for row, fn in zip(keys, numbers):
        assert tuple(row.tolist()) == fn.rank_key()

def test_rank_keys_empty():
    assert rank_keys([]).shape == (0, 3)
    assert rank_order([]) == []

def test_rank_order_sorts_like_sorted(rng):
    numbers = random_fuzzy_numbers(rng, 40)
    order = rank_order(numbers)
    assert sorted(order) == list(range(40))
    assert [numbers[i] for i in order] == sorted(numbers)

def test_rank_order_is_stable(rank_twins):
    a, b = rank_twins
    assert rank_order([a, b]) == [0, 1]
    assert rank_order([b, a]) == [0, 1]
    assert rank_order([crisp_number(5), a, crisp_number(-5), b]) == [2, 1, 3, 0]

# ==============================================================================
# Comparators
# ==============================================================================

def test_rank_compare():
    low, high = FuzzyNumber(0, 1, 2), FuzzyNumber(5, 6, 7)
    assert rank_compare(low, high) == -1
    assert rank_compare(high, low) == 1
    assert rank_compare(low, FuzzyNumber(2, 1, 0)) == 0

def test_rank_compare_agrees_with_operators(rng):
    numbers = random_fuzzy_numbers(rng, 15)
    for a in numbers:
        for b in numbers:
            result = rank_compare(a, b)
            assert (result < 0) == (a < b)
            assert (result > 0) == (a > b)

def test_rank_equivalent_is_coarser_than_equality(rank_twins):
    a, b = rank_twins
    assert rank_equivalent(a, b)
    assert a != b
    assert not rank_equivalent(FuzzyNumber(1, 2, 3), FuzzyNumber(1, 2, 4))

def test_rank_equivalent_approximate():
    a = FuzzyNumber(1, 2, 3)
    b = FuzzyNumber(1, 2, 3 + 1e-12)
    assert not rank_equivalent(a, b)
    assert rank_equivalent(a, b, approximate=True)
    assert not rank_equivalent(a, FuzzyNumber(1, 2, 3.5), approximate=True)
    assert rank_equivalent(a, FuzzyNumber(1, 2, 3.5), approximate=True, tolerance=1.0)
    with ConfigurationContextManager(FLOAT_TOLERANCE=1.0):
        assert rank_equivalent(a, FuzzyNumber(1, 2, 3.5), approximate=True)
