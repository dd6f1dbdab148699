"""Exceptions and warnings raised while generating curves and curve models.

All of the errors are caller-correctable usage errors: they are raised before
any output geometry is built, so a failed call never leaves a partial result.
"""

class CurveGenerationError(ValueError):
    """Base class for errors raised while generating a curve or its mesh."""

class NullInputError(CurveGenerationError):
    """A required geometry argument was None."""

class InsufficientPointsError(CurveGenerationError):
    """Too few points were provided for the requested operation."""

class ParameterCountMismatchError(CurveGenerationError):
    """A precomputed parameter array does not have one value per point."""

class DegenerateInputError(CurveGenerationError):
    """The input points do not span any distance (e.g. all points coincide)."""

class UnsupportedOrderWarning(UserWarning):
    """A polynomial order above the supported maximum was requested and clamped."""
