"""
Input-validation errors raised by the resolver and the prediction engine.

All are recoverable: they are raised synchronously to the immediate caller
with a descriptive message, and no partial result is produced.
"""

from __future__ import annotations


def _format_sum(weight_sum: float) -> str:
    """Full-precision sum; integral values drop the trailing ``.0``."""
    if float(weight_sum).is_integer():
        return str(int(weight_sum))
    return str(weight_sum)


class BlendError(ValueError):
    """Base class for invalid blend input."""


class EmptyBlendError(BlendError):
    """Raised when a prediction is requested for a blend with no strains."""

    def __init__(self) -> None:
        super().__init__("At least one strain is required.")


class WeightSumMismatchError(BlendError):
    """Raised when blend weights do not sum to 100 (within tolerance).

    Attributes:
        weight_sum: The actual computed sum of weights.
    """

    def __init__(self, weight_sum: float) -> None:
        self.weight_sum = weight_sum
        super().__init__(f"Weights must sum to 100 (got {_format_sum(weight_sum)}).")


class StrainNotFoundError(BlendError):
    """Raised by the resolver when a blend entry references an unknown strain.

    Attributes:
        strain_id: The identifier that is missing from the catalog.
    """

    def __init__(self, strain_id: str) -> None:
        self.strain_id = strain_id
        super().__init__(f"Strain not found: {strain_id}")
