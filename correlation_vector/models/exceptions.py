"""
Exceptions raised by correlation vector operations.

Only two kinds of failure ever reach the caller:

- validation failures, raised when validation during creation is enabled
  (or by explicit interop entry points such as traceparent conversion);
- unsupported operations, raised when a version does not implement an operator.

Overflow is never an error: it is absorbed by the terminate/reset policy of
each version. Parsing is never an error either: unparseable input yields a
brand-new vector.
"""


class CorrelationVectorException(Exception):
    """
    Base class for all correlation vector exceptions.

    Attributes:
        message: Human-readable error message.
        correlation_vector: The offending correlation vector value, if any.
    """

    def __init__(self, message: str, correlation_vector: str | None = None):
        self.message = message
        self.correlation_vector = correlation_vector
        super().__init__(self.message)


class ValidationException(CorrelationVectorException):
    """Raised when a correlation vector fails validation."""

    pass


class UnsupportedOperationException(CorrelationVectorException):
    """Raised when an operator is not supported by the vector's version."""

    pass


# Specific validation failures


class InvalidBaseException(ValidationException):
    """The vector base has the wrong length or characters."""

    pass


class InvalidExtensionException(ValidationException):
    """An extension segment is not a non-negative integer in the version's radix."""

    pass


class OversizedVectorException(ValidationException):
    """The vector is longer than its version allows."""

    pass


class LossyGuidConversionException(ValidationException):
    """The vector base cannot be converted to a GUID without losing bits."""

    pass


class InvalidTraceparentException(ValidationException):
    """The W3C traceparent header is malformed."""

    pass
