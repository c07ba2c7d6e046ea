"""
Conversions between GUIDs and correlation vector bases.

A base is the standard base64 encoding of a 16-byte GUID with the padding
removed, truncated to the version's base length. Bytes are taken in the
mixed-endian GUID layout (``uuid.UUID.bytes_le``) so bases built from the same
GUID match across implementations.
"""

import base64
import binascii
import re
import uuid

from correlation_vector.models.exceptions import (
    InvalidBaseException,
    LossyGuidConversionException,
)

GUID_BASE_LENGTH = 22

# The last content-bearing base64 character of a 22-char base carries four
# bits that do not fit in 16 bytes. Only these characters have them zeroed:
#   A - 00 0000
#   Q - 01 0000
#   g - 10 0000
#   w - 11 0000
GUID_SAFE_LAST_CHARACTERS = frozenset("AQgw")

_BASE64_PATTERN = re.compile(r"^[A-Za-z0-9+/]*$")


def encode_base(raw: bytes, base_length: int = GUID_BASE_LENGTH) -> str:
    """Base64-encode ``raw`` and truncate to ``base_length``, dropping the padding."""
    return base64.b64encode(raw).decode("ascii")[:base_length]


def get_base_from_guid(guid: uuid.UUID, base_length: int = GUID_BASE_LENGTH) -> str:
    """
    Encode a GUID as a correlation vector base.

    Args:
        guid: The GUID to encode.
        base_length: Number of base64 characters to keep (16 for V1, 22 otherwise).

    Returns:
        The unpadded, truncated base64 encoding of the GUID.
    """
    return encode_base(guid.bytes_le, base_length)


def generate_base(base_length: int = GUID_BASE_LENGTH) -> str:
    """Generate a random base of the given length."""
    return get_base_from_guid(uuid.uuid4(), base_length)


def is_guid_convertible(vector_base: str) -> bool:
    """Check whether a base round-trips through a GUID without losing bits."""
    return (
        len(vector_base) == GUID_BASE_LENGTH
        and vector_base[-1] in GUID_SAFE_LAST_CHARACTERS
    )


def get_guid_from_base(vector_base: str, strict: bool = False) -> uuid.UUID:
    """
    Decode a correlation vector base back into a GUID.

    Args:
        vector_base: A 22-character base64 base.
        strict: Reject bases whose last character would lose information.

    Returns:
        The decoded GUID.

    Raises:
        InvalidBaseException: If the base is not 22 base64 characters.
        LossyGuidConversionException: If strict and the conversion is lossy.
    """
    if len(vector_base) != GUID_BASE_LENGTH or not _BASE64_PATTERN.match(vector_base):
        raise InvalidBaseException(
            f"Invalid vector base {vector_base!r}: expected "
            f"{GUID_BASE_LENGTH} base64 characters"
        )

    if strict and not is_guid_convertible(vector_base):
        raise LossyGuidConversionException(
            "The four least significant bits of the base64 encoded vector base "
            "must be zeros to reliably convert to a guid."
        )

    try:
        raw = base64.b64decode(vector_base + "==")
    except binascii.Error as e:
        raise InvalidBaseException(f"Invalid vector base {vector_base!r}: {e}") from e

    return uuid.UUID(bytes_le=raw)
