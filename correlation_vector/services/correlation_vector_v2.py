"""Version 2 correlation vectors."""

from correlation_vector.models.version import CorrelationVectorVersion
from correlation_vector.services.base_vector import TerminatingCorrelationVector


class CorrelationVectorV2(TerminatingCorrelationVector):
    """
    Version 2 of the correlation vector.

    Uses a 22-character base that encodes a full GUID, a 127-character budget,
    and supports Spin. Spin tokens are rendered in decimal so spun vectors stay
    valid V2 values.
    """

    VERSION = CorrelationVectorVersion.V2
