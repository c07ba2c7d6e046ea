"""
Services layer for correlation vector logic.

Contains the vector versions and the service dispatching string values to them.
"""

from .base_vector import CorrelationVector, TerminatingCorrelationVector
from .correlation_vector_service import CorrelationVectorService
from .correlation_vector_v1 import CorrelationVectorV1
from .correlation_vector_v2 import CorrelationVectorV2
from .correlation_vector_v3 import CorrelationVectorV3

__all__ = [
    "CorrelationVector",
    "TerminatingCorrelationVector",
    "CorrelationVectorService",
    "CorrelationVectorV1",
    "CorrelationVectorV2",
    "CorrelationVectorV3",
]
