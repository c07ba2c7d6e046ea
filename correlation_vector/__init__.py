"""
Correlation vectors for tracing causally related events across services.

Callers attach ``vector.value`` to outbound calls; receivers ``extend`` or
``parse`` it, ``increment`` it and pass the result on.
"""

from loguru import logger

from correlation_vector.core import (
    configure_logging,
    get_current_vector,
    reset_current_vector,
    set_current_vector,
)
from correlation_vector.models import (
    HEADER_NAME,
    MAX_EXTENSION,
    CorrelationVectorVersion,
    SpinCounterInterval,
    SpinCounterPeriodicity,
    SpinEntropy,
    SpinParameters,
)
from correlation_vector.models.config import Settings, get_settings
from correlation_vector.models.exceptions import (
    CorrelationVectorException,
    UnsupportedOperationException,
    ValidationException,
)
from correlation_vector.services import (
    CorrelationVector,
    CorrelationVectorService,
    CorrelationVectorV1,
    CorrelationVectorV2,
    CorrelationVectorV3,
)

# Library logs stay silent until the application opts in via configure_logging()
logger.disable("correlation_vector")

__all__ = [
    "HEADER_NAME",
    "MAX_EXTENSION",
    "CorrelationVector",
    "CorrelationVectorException",
    "CorrelationVectorService",
    "CorrelationVectorV1",
    "CorrelationVectorV2",
    "CorrelationVectorV3",
    "CorrelationVectorVersion",
    "Settings",
    "SpinCounterInterval",
    "SpinCounterPeriodicity",
    "SpinEntropy",
    "SpinParameters",
    "UnsupportedOperationException",
    "ValidationException",
    "configure_logging",
    "get_current_vector",
    "get_settings",
    "reset_current_vector",
    "set_current_vector",
]
