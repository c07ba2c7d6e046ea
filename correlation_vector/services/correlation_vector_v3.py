"""
Version 3 correlation vectors.

Wire format::

    A.<base>[.<ext>]*[#<reset>.<ext>]*[_<spin>][-<span-id>].<ext>

Extensions are hexadecimal. A V3 vector never terminates: when it would grow
past 127 characters it resets onto ``A.<base>#<reset-token>``, keeping its base
and remembering the value it supersedes.
"""

import re
import uuid

from loguru import logger

from correlation_vector.helpers.guid_codec import (
    encode_base,
    generate_base,
    get_base_from_guid,
)
from correlation_vector.helpers.spin import (
    format_spin_hex,
    generate_reset_token,
    generate_spin_value,
)
from correlation_vector.helpers.traceparent import parse_traceparent
from correlation_vector.models.config import Settings, get_settings
from correlation_vector.models.exceptions import (
    InvalidBaseException,
    InvalidExtensionException,
    ValidationException,
)
from correlation_vector.models.spin_parameters import (
    DEFAULT_SPIN_PARAMETERS,
    SpinParameters,
)
from correlation_vector.models.version import CorrelationVectorVersion
from correlation_vector.services.base_vector import (
    STANDARD_DELIMITER,
    CorrelationVector,
    parse_extension,
)

VERSION_CHAR = "A"
VERSION_PREFIX = VERSION_CHAR + STANDARD_DELIMITER
RESET_DELIMITER = "#"
SPAN_DELIMITER = "-"
SPIN_DELIMITER = "_"

_DELIMITER_PATTERN = re.compile(r"[.#_-]")
_SEGMENT_PATTERN = re.compile(r"([.#_-])([^.#_-]*)")
_BASE64_PATTERN = re.compile(r"[A-Za-z0-9+/]+")
_HEX_PATTERN = re.compile(r"[0-9A-Fa-f]+")

# Allowed token lengths after each non-standard delimiter
_TOKEN_LENGTHS = {
    RESET_DELIMITER: (16,),
    SPIN_DELIMITER: (8, 16),
    SPAN_DELIMITER: (16,),
}

_SEGMENT_NAMES = {
    STANDARD_DELIMITER: "extension",
    RESET_DELIMITER: "reset",
    SPIN_DELIMITER: "spin",
    SPAN_DELIMITER: "span",
}


def _find_delimiter(value: str, start: int) -> int:
    match = _DELIMITER_PATTERN.search(value, start)
    return match.start() if match else len(value)


def _extract_base(value: str) -> str:
    start = len(VERSION_PREFIX)
    return value[start : _find_delimiter(value, start)]


def _is_valid_segment(delimiter: str, segment: str) -> bool:
    if delimiter == STANDARD_DELIMITER:
        return parse_extension(segment, 16) is not None
    return len(segment) in _TOKEN_LENGTHS[delimiter] and bool(
        _HEX_PATTERN.fullmatch(segment)
    )


class CorrelationVectorV3(CorrelationVector):
    """
    Version 3 of the correlation vector.

    Adds the ``A.`` version prefix, hexadecimal extensions, W3C traceparent
    interop and the Reset operator.

    An increment that would overflow returns the value of a reset vector and
    leaves this instance unchanged. Callers sharing one instance past that
    point get a new reset branch, carrying the same extension, per call.
    """

    VERSION = CorrelationVectorVersion.V3

    def __init__(
        self,
        base_vector: str | None = None,
        extension: int = 0,
        settings: Settings | None = None,
        superseded: str | None = None,
    ):
        if base_vector is None:
            base_vector = VERSION_PREFIX + generate_base(self.VERSION.base_length)
        super().__init__(base_vector, extension, settings)
        self._superseded = superseded

    @classmethod
    def from_guid(
        cls, guid: uuid.UUID, settings: Settings | None = None
    ) -> "CorrelationVectorV3":
        """Create a vector whose base encodes ``guid``."""
        return cls(
            VERSION_PREFIX + get_base_from_guid(guid, cls.VERSION.base_length),
            settings=settings,
        )

    @property
    def base(self) -> str:
        """
        The base, without the version prefix.

        Example: ``A.e8iECJiOvUGPvOVtchxG9g.F.A.23`` has base ``e8iECJiOvUGPvOVtchxG9g``.
        """
        return _extract_base(self.value)

    @property
    def superseded(self) -> str | None:
        """The value this vector replaced through a reset, if any."""
        return self._superseded

    def _reset(self) -> tuple[str, str]:
        value = self.value
        reset_vector = self._build_reset(
            self.base, value, self.extension, self._settings
        )
        return reset_vector.value, value

    def _on_overflow(self, next_extension: int) -> str:
        # The instance keeps its extension: every later increment branches
        # off another reset vector carrying the same extension.
        return self._build_reset(
            self.base, self.value, next_extension, self._settings
        ).value

    @classmethod
    def _build_reset(
        cls,
        vector_base: str,
        superseded: str,
        extension: int,
        settings: Settings | None,
    ) -> "CorrelationVectorV3":
        base_vector = (
            f"{VERSION_PREFIX}{vector_base}{RESET_DELIMITER}{generate_reset_token()}"
        )
        logger.info(f"Correlation vector {superseded} reset to {base_vector}")
        return cls(base_vector, extension, settings=settings, superseded=superseded)

    @classmethod
    def _reset_from(
        cls, value: str, settings: Settings | None, extension: int = 0
    ) -> "CorrelationVectorV3":
        return cls._build_reset(_extract_base(value), value, extension, settings)

    @classmethod
    def reset_value(
        cls, value: str, settings: Settings | None = None
    ) -> tuple[str, str]:
        """
        Reset a V3 value string without parsing it into a vector first.

        The base is read straight from ``value``, so values ending in a spin
        or span token keep their lineage. A trailing extension is carried
        over when there is one.

        Returns:
            The new vector value, and ``value`` itself.
        """
        position = value.rfind(STANDARD_DELIMITER)
        extension = None
        if position >= _find_delimiter(value, len(VERSION_PREFIX)):
            extension = parse_extension(value[position + 1 :], cls.VERSION.radix)

        reset_vector = cls._reset_from(value, settings, extension or 0)
        return reset_vector.value, value

    @classmethod
    def parse(
        cls, value: str | None, settings: Settings | None = None
    ) -> "CorrelationVectorV3":
        """
        Create a vector by parsing its string representation.

        The value must include the ``A.`` prefix.
        """
        if value:
            position = value.rfind(STANDARD_DELIMITER)
            if position > 0:
                extension = parse_extension(value[position + 1 :], cls.VERSION.radix)
                if extension is not None:
                    return cls(value[:position], extension, settings=settings)

        logger.debug(
            f"Could not parse {cls.VERSION} correlation vector {value!r}, "
            "creating a new one"
        )
        return cls(settings=settings)

    @classmethod
    def extend(
        cls, value: str | None, settings: Settings | None = None
    ) -> "CorrelationVectorV3":
        settings = settings or get_settings()

        if settings.VALIDATE_DURING_CREATION:
            cls.validate(value)

        if cls.is_oversized(value, 0):
            return cls._reset_from(value, settings)

        return cls(value or "", 0, settings=settings)

    @classmethod
    def spin(
        cls,
        value: str | None,
        parameters: SpinParameters | None = None,
        settings: Settings | None = None,
    ) -> "CorrelationVectorV3":
        settings = settings or get_settings()
        parameters = parameters or DEFAULT_SPIN_PARAMETERS

        if settings.VALIDATE_DURING_CREATION:
            cls.validate(value)

        token = format_spin_hex(generate_spin_value(parameters), parameters.total_bits)
        base_vector = f"{value or ''}{SPIN_DELIMITER}{token}"
        if cls.is_oversized(base_vector, 0):
            return cls._reset_from(value, settings)

        return cls(base_vector, 0, settings=settings)

    @classmethod
    def span(
        cls, traceparent: str, settings: Settings | None = None
    ) -> "CorrelationVectorV3":
        """
        Create a vector from a W3C traceparent.

        The trace-id becomes the base and the parent-id is appended after the
        span delimiter.

        Raises:
            InvalidTraceparentException: If the traceparent is malformed.
        """
        parsed = parse_traceparent(traceparent)
        vector_base = encode_base(parsed.trace_id_bytes, cls.VERSION.base_length)
        return cls(
            f"{VERSION_PREFIX}{vector_base}{SPAN_DELIMITER}{parsed.parent_id.upper()}",
            settings=settings,
        )

    @classmethod
    def validate(cls, value: str | None) -> None:
        """
        Validate a vector value against the V3 format.

        Length is not validated: oversized V3 vectors reset instead.
        """
        if not value or not value.strip():
            raise ValidationException(
                f"The {cls.VERSION} correlation vector can not be null or empty", value
            )
        if not value.startswith(VERSION_PREFIX):
            raise InvalidBaseException(
                f"Invalid correlation vector {value}. Missing version prefix "
                f"{VERSION_PREFIX}",
                value,
            )

        start = len(VERSION_PREFIX)
        end = _find_delimiter(value, start)
        vector_base = value[start:end]
        if len(vector_base) != cls.VERSION.base_length or not _BASE64_PATTERN.fullmatch(
            vector_base
        ):
            raise InvalidBaseException(
                f"Invalid correlation vector {value}. Invalid base value {vector_base}",
                value,
            )
        if end == len(value):
            raise InvalidExtensionException(
                f"Invalid correlation vector {value}. Missing extension", value
            )

        for match in _SEGMENT_PATTERN.finditer(value, end):
            delimiter, segment = match.groups()
            if not _is_valid_segment(delimiter, segment):
                raise InvalidExtensionException(
                    f"Invalid correlation vector {value}. Invalid "
                    f"{_SEGMENT_NAMES[delimiter]} value {segment}",
                    value,
                )
