"""
Version inference and dispatch.

Receivers usually get a bare string in a header. These entry points infer the
version from it and route to the matching vector class. Inference never fails:
anything unrecognized is treated as V1.
"""

import uuid

from correlation_vector.models.config import Settings
from correlation_vector.models.spin_parameters import SpinParameters
from correlation_vector.models.version import CorrelationVectorVersion
from correlation_vector.services.base_vector import STANDARD_DELIMITER, CorrelationVector
from correlation_vector.services.correlation_vector_v1 import CorrelationVectorV1
from correlation_vector.services.correlation_vector_v2 import CorrelationVectorV2
from correlation_vector.services.correlation_vector_v3 import (
    VERSION_PREFIX,
    CorrelationVectorV3,
)

_VECTOR_CLASSES: dict[CorrelationVectorVersion, type[CorrelationVector]] = {
    CorrelationVectorVersion.V1: CorrelationVectorV1,
    CorrelationVectorVersion.V2: CorrelationVectorV2,
    CorrelationVectorVersion.V3: CorrelationVectorV3,
}


class CorrelationVectorService:
    """Entry points operating on correlation vector strings of any version."""

    @staticmethod
    def infer_version(value: str | None) -> CorrelationVectorVersion:
        """
        Identify which version a correlation vector string uses.

        The position of the first delimiter gives V1 (16) or V2 (22); a
        leading ``A.`` gives V3. Anything else defaults to V1.

        Args:
            value: A correlation vector string, possibly None.

        Returns:
            The inferred version.
        """
        index = value.find(STANDARD_DELIMITER) if value else -1

        if index == CorrelationVectorVersion.V1.base_length:
            return CorrelationVectorVersion.V1
        if index == CorrelationVectorVersion.V2.base_length:
            return CorrelationVectorVersion.V2
        if value and value.startswith(VERSION_PREFIX):
            return CorrelationVectorVersion.V3

        # By default not reporting error, just return V1
        return CorrelationVectorVersion.V1

    @staticmethod
    def get_vector_class(
        version: CorrelationVectorVersion,
    ) -> type[CorrelationVector]:
        """Get the vector class implementing a version."""
        return _VECTOR_CLASSES[version]

    @staticmethod
    def create(
        version: CorrelationVectorVersion = CorrelationVectorVersion.V1,
        guid: uuid.UUID | None = None,
        settings: Settings | None = None,
    ) -> CorrelationVector:
        """
        Create a new root vector.

        Args:
            version: Version of the new vector.
            guid: Optional GUID to derive the base from; random otherwise.
            settings: Settings carrying the validation switch.

        Returns:
            A vector with extension 0.
        """
        vector_class = _VECTOR_CLASSES[version]
        if guid is not None:
            return vector_class.from_guid(guid, settings=settings)
        return vector_class(settings=settings)  # type: ignore[call-arg]

    @staticmethod
    def parse(value: str | None, settings: Settings | None = None) -> CorrelationVector:
        """
        Convert a string representation into a correlation vector.

        Never raises: unparseable input yields a brand-new vector.
        """
        version = CorrelationVectorService.infer_version(value)
        return _VECTOR_CLASSES[version].parse(value, settings)

    @staticmethod
    def extend(value: str | None, settings: Settings | None = None) -> CorrelationVector:
        """
        Create a new vector by extending an existing value.

        This should be done at the entry point of an operation.

        Raises:
            ValidationException: If validation is enabled and the value is invalid.
        """
        version = CorrelationVectorService.infer_version(value)
        return _VECTOR_CLASSES[version].extend(value, settings)

    @staticmethod
    def spin(
        value: str | None,
        parameters: SpinParameters | None = None,
        settings: Settings | None = None,
    ) -> CorrelationVector:
        """
        Create a new vector by applying the Spin operator to an existing value.

        Raises:
            UnsupportedOperationException: If the value is a V1 vector.
            ValidationException: If validation is enabled and the value is invalid.
        """
        version = CorrelationVectorService.infer_version(value)
        return _VECTOR_CLASSES[version].spin(value, parameters, settings)

    @staticmethod
    def reset(value: str | None, settings: Settings | None = None) -> tuple[str, str]:
        """
        Reset a vector value.

        V3 values are reset from the literal string, so the superseded half
        is always ``value`` itself.

        Returns:
            The new vector value and the value it continues from.

        Raises:
            UnsupportedOperationException: If the value is not a V3 vector.
        """
        version = CorrelationVectorService.infer_version(value)
        if version == CorrelationVectorVersion.V3 and value:
            return CorrelationVectorV3.reset_value(value, settings)
        return CorrelationVectorService.parse(value, settings).reset()

    @staticmethod
    def span(traceparent: str, settings: Settings | None = None) -> CorrelationVectorV3:
        """Create a V3 vector from a W3C traceparent."""
        return CorrelationVectorV3.span(traceparent, settings)
