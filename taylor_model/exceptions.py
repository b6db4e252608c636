"""
Error types raised by the scenario analysis core.

All errors subclass ValueError so callers that already guard numeric
inputs with ``except ValueError`` keep working.
"""


class TaylorModelError(ValueError):
    """Base class for invalid inputs to the simulation core."""


class PanelFormatError(TaylorModelError):
    """Historical panel is missing columns, has gaps or unordered dates."""


class InsufficientDataError(TaylorModelError):
    """Panel too short for a standard deviation, or GDP not strictly positive."""


class InvalidIterationCountError(TaylorModelError):
    """Monte Carlo iteration count must be a positive integer."""


class InvalidConfidenceLevelError(TaylorModelError):
    """Confidence level must lie strictly between 0 and 1."""


class EmptyDistributionError(TaylorModelError):
    """Tail analysis requires at least one simulated value."""
