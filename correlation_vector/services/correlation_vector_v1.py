"""Version 1 correlation vectors."""

import uuid

from correlation_vector.models.exceptions import UnsupportedOperationException
from correlation_vector.models.version import CorrelationVectorVersion
from correlation_vector.services.base_vector import TerminatingCorrelationVector


class CorrelationVectorV1(TerminatingCorrelationVector):
    """
    Version 1 of the correlation vector.

    Uses a 16-character base, a 63-character budget, and can only be
    incremented and extended.
    """

    VERSION = CorrelationVectorVersion.V1

    def get_base_as_guid(self) -> uuid.UUID:
        raise UnsupportedOperationException(
            "Cannot convert a V1 correlation vector base to a guid.", self.value
        )
