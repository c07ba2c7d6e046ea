"""
W3C trace context helpers.

Parses the ``traceparent`` header: ``<version>-<trace-id>-<parent-id>-<flags>``.
"""

import re
from typing import NamedTuple

from correlation_vector.models.exceptions import InvalidTraceparentException

_TRACEPARENT_PATTERN = re.compile(
    r"^([0-9a-f]{2})-([0-9a-f]{32})-([0-9a-f]{16})-([0-9a-f]{2})$",
    re.IGNORECASE,
)

_INVALID_VERSION = "ff"


class Traceparent(NamedTuple):
    """Components of a W3C traceparent header."""

    version: str
    trace_id: str
    parent_id: str
    flags: str

    @property
    def trace_id_bytes(self) -> bytes:
        """The 16-byte trace id."""
        return bytes.fromhex(self.trace_id)


def parse_traceparent(header: str | None) -> Traceparent:
    """
    Parse a traceparent header.

    Args:
        header: Raw header value.

    Returns:
        The parsed Traceparent.

    Raises:
        InvalidTraceparentException: If the header is missing or malformed.
    """
    if not header:
        raise InvalidTraceparentException("The traceparent header can not be empty")

    match = _TRACEPARENT_PATTERN.match(header.strip())
    if not match:
        raise InvalidTraceparentException(
            f"Invalid traceparent {header!r}", correlation_vector=header
        )

    version, trace_id, parent_id, flags = match.groups()

    if version.lower() == _INVALID_VERSION:
        raise InvalidTraceparentException(
            f"Invalid traceparent version {version!r}", correlation_vector=header
        )
    if int(trace_id, 16) == 0 or int(parent_id, 16) == 0:
        raise InvalidTraceparentException(
            "Traceparent trace-id and parent-id must not be all zeros",
            correlation_vector=header,
        )

    return Traceparent(version, trace_id, parent_id, flags)
