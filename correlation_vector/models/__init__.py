"""Models package - settings, exceptions and format definitions."""

from .spin_parameters import (
    SpinCounterInterval,
    SpinCounterPeriodicity,
    SpinEntropy,
    SpinParameters,
)
from .version import HEADER_NAME, MAX_EXTENSION, CorrelationVectorVersion

__all__ = [
    "CorrelationVectorVersion",
    "HEADER_NAME",
    "MAX_EXTENSION",
    "SpinCounterInterval",
    "SpinCounterPeriodicity",
    "SpinEntropy",
    "SpinParameters",
]
