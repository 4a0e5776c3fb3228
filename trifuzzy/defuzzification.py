from __future__ import annotations
from .types import FuzzyNumber


def available_methods() -> dict:
    """
    Get a dictionary containing list of available defuzzification methods.

    Returns:
    --------
    dict
        List of method names for each number type
    """
    return {
        "FuzzyNumber": FuzzyNumber.get_available_defuzzify_methods(),
    }

def rank_method(fuzzy_number: FuzzyNumber) -> float:
    """
    Defuzzify a triangular fuzzy number to the primary component of its
    rank key, x - y/2.

    This is the centroid-like point of the ranking index, shifted towards
    the lower bound by half of the relative spread y.

    Parameters:
    -----------
    fuzzy_number : FuzzyNumber
        The triangular fuzzy number

    Returns:
    --------
    float
        The defuzzified value
    """
    return fuzzy_number.rank_key()[0]

def centroid_method(fuzzy_number: FuzzyNumber) -> float:
    """
    Defuzzify a triangular fuzzy number using the centroid method.
    This method returns the x-coordinate of the center of gravity of the fuzzy number.

    Parameters:
    -----------
    fuzzy_number : FuzzyNumber
        The triangular fuzzy number

    Returns:
    --------
    float
        The defuzzified value
    """
    return (fuzzy_number.l + fuzzy_number.m + fuzzy_number.u) / 3.0

def graded_mean_integration(fuzzy_number: FuzzyNumber) -> float:
    """
    Defuzzify a triangular fuzzy number using the graded mean integration method.
    This method gives more weight to the modal value compared to the lower and upper bounds.

    Parameters:
    -----------
    fuzzy_number : FuzzyNumber
        The triangular fuzzy number

    Returns:
    --------
    float
        The defuzzified value
    """
    # (l + 4m + u) / 6
    return (fuzzy_number.l + 4 * fuzzy_number.m + fuzzy_number.u) / 6.0

# ==============================================================================
# REGISTRATION
# ==============================================================================

FuzzyNumber.register_defuzzify_method('rank', rank_method)
FuzzyNumber.register_defuzzify_method('centroid', centroid_method)
FuzzyNumber.register_defuzzify_method('graded_mean', graded_mean_integration)
FuzzyNumber.register_defuzzify_method('pessimistic', lambda fn: fn.l)
FuzzyNumber.register_defuzzify_method('optimistic', lambda fn: fn.u)
