class Configuration:
    """
    A central container for the tunable parameters of the library.

    Parameters are plain upper-case attributes so they can be read and
    overridden directly, e.g. ``configure_parameters.REPR_PRECISION = 6``,
    or temporarily through :class:`ConfigurationContextManager`.
    """
    def __init__(self):
        # --- General Numerical Parameters ---

        # Absolute tolerance for approximate comparisons (is_close, rank_equivalent).
        self.FLOAT_TOLERANCE: float = 1e-9

        # --- Display ---

        # Digits after the decimal point in repr() of a FuzzyNumber.
        # str() always uses the default float formatting.
        self.REPR_PRECISION: int = 4

        # --- Defuzzification ---

        # Method used by FuzzyNumber.defuzzify() when no method is given.
        self.DEFAULT_DEFUZZIFY_METHOD: str = "rank"

    def reset(self):
        """Restores every parameter to its default value."""
        self.__init__()

configure_parameters = Configuration()



class ConfigurationContextManager:
    """
    A context manager to temporarily change configuration parameters.

    Usage:
    >>> with ConfigurationContextManager(REPR_PRECISION=2):
    >>>     # repr() of fuzzy numbers uses two decimals here
    >>>     ...
    >>> # REPR_PRECISION reverts to its original value outside the block
    """
    def __init__(self, **kwargs):
        self.changes = kwargs
        self.original_values = {}

    def __enter__(self):
        for key, value in self.changes.items():
            if not hasattr(configure_parameters, key):
                raise AttributeError(f"Configuration object has no attribute '{key}'")
            self.original_values[key] = getattr(configure_parameters, key)
            setattr(configure_parameters, key, value)
        return configure_parameters

    def __exit__(self, exc_type, exc_val, exc_tb):
        for key, value in self.original_values.items():
            setattr(configure_parameters, key, value)
