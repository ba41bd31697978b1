class InvalidParameterError(ValueError):
    """Raised when an optimizer parameter or input vector is invalid."""


class DegenerateFitnessError(ArithmeticError):
    """Raised when the fitness of a population cannot be standardized.

    This happens when all candidates have the same fitness, so the sample
    standard deviation is zero, or when a fitness value is NaN or infinite.
    """
