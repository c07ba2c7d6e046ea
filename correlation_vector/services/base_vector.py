"""
Shared contract and mutation engine of correlation vectors.

A vector is an immutable ``base_vector`` (everything before the last
extension) plus a single mutable extension counter. ``Increment`` advances the
counter with a compare-and-set retry loop, so one instance may be shared by
concurrent callers without losing or duplicating an extension.
"""

import re
import uuid
from abc import ABC, abstractmethod
from typing import ClassVar

from loguru import logger

from correlation_vector.helpers.atomic import AtomicInteger
from correlation_vector.helpers.guid_codec import (
    generate_base,
    get_base_from_guid,
    get_guid_from_base,
    is_guid_convertible,
)
from correlation_vector.helpers.spin import format_spin_decimal, generate_spin_value
from correlation_vector.models.config import Settings, get_settings
from correlation_vector.models.exceptions import (
    InvalidBaseException,
    InvalidExtensionException,
    OversizedVectorException,
    UnsupportedOperationException,
    ValidationException,
)
from correlation_vector.models.spin_parameters import (
    DEFAULT_SPIN_PARAMETERS,
    SpinParameters,
)
from correlation_vector.models.version import MAX_EXTENSION, CorrelationVectorVersion

STANDARD_DELIMITER = "."

_DECIMAL_PATTERN = re.compile(r"[0-9]+")
_HEX_PATTERN = re.compile(r"[0-9A-Fa-f]+")


def parse_extension(text: str, radix: int) -> int | None:
    """
    Parse an extension segment.

    Args:
        text: The segment, without delimiters.
        radix: 10 or 16.

    Returns:
        The extension, or None if it is not a non-negative 32-bit integer.
    """
    pattern = _HEX_PATTERN if radix == 16 else _DECIMAL_PATTERN
    if not pattern.fullmatch(text):
        return None
    extension = int(text, radix)
    if extension > MAX_EXTENSION:
        return None
    return extension


class CorrelationVector(ABC):
    """
    A lightweight vector for identifying and measuring causality.

    Subclasses fix ``VERSION`` and decide what happens when an increment
    would push the value past the version's maximum length.
    """

    VERSION: ClassVar[CorrelationVectorVersion]

    def __init__(
        self, base_vector: str, extension: int = 0, settings: Settings | None = None
    ):
        self._base_vector = base_vector
        self._extension = AtomicInteger(extension)
        self._settings = settings or get_settings()

    @property
    def version(self) -> CorrelationVectorVersion:
        return self.VERSION

    @property
    def extension(self) -> int:
        return self._extension.get()

    @property
    def value(self) -> str:
        """The full string representation of the vector."""
        return self._join(self.extension)

    @property
    @abstractmethod
    def base(self) -> str:
        """The encoded root segment shared by every vector of a causal chain."""

    def _join(self, extension: int) -> str:
        return (
            f"{self._base_vector}{STANDARD_DELIMITER}"
            f"{self.VERSION.format_extension(extension)}"
        )

    @classmethod
    def is_oversized(cls, base_vector: str | None, extension: int) -> bool:
        """Check whether ``base_vector`` plus ``extension`` exceeds the maximum length."""
        if not base_vector:
            return False
        size = (
            len(base_vector)
            + len(STANDARD_DELIMITER)
            + len(cls.VERSION.format_extension(extension))
        )
        return size > cls.VERSION.max_length

    def increment(self) -> str:
        """
        Increment the extension by one.

        Do this before passing the value to an outbound message header.

        Returns:
            The new value. When the extension is saturated the current value is
            returned unchanged; when the new value would be too long the
            version's overflow policy decides what is returned.
        """
        if self._is_frozen():
            return self.value

        while True:
            snapshot = self._extension.get()
            if snapshot == MAX_EXTENSION:
                return self.value

            next_extension = snapshot + 1
            if self.is_oversized(self._base_vector, next_extension):
                return self._on_overflow(next_extension)

            if self._extension.compare_and_set(snapshot, next_extension):
                return self._join(next_extension)

    def _is_frozen(self) -> bool:
        return False

    @abstractmethod
    def _on_overflow(self, next_extension: int) -> str:
        """Handle an increment that would exceed the maximum length."""

    def reset(self) -> tuple[str, str]:
        """
        Replace an oversized vector with a fresh one.

        Returns:
            A pair of the new vector value and the value it continues from.

        Raises:
            UnsupportedOperationException: If the version does not support Reset.
        """
        if not self.VERSION.supports_reset:
            raise UnsupportedOperationException(
                f"Reset is not supported in Correlation Vector {self.VERSION}",
                self.value,
            )
        return self._reset()

    def _reset(self) -> tuple[str, str]:
        raise NotImplementedError

    def get_base_as_guid(self) -> uuid.UUID:
        """
        Get the value of the vector base encoded as a GUID.

        Raises:
            LossyGuidConversionException: If validation is enabled and the base
                cannot be converted without losing its last four bits.
        """
        vector_base = self.base
        strict = self._settings.VALIDATE_DURING_CREATION
        if not strict and not is_guid_convertible(vector_base):
            logger.warning(
                f"Vector base {vector_base} does not round-trip through a guid"
            )
        return get_guid_from_base(vector_base, strict=strict)

    @classmethod
    @abstractmethod
    def from_guid(
        cls, guid: uuid.UUID, settings: Settings | None = None
    ) -> "CorrelationVector":
        """Create a vector whose base encodes ``guid``."""

    @classmethod
    @abstractmethod
    def parse(
        cls, value: str | None, settings: Settings | None = None
    ) -> "CorrelationVector":
        """Create a vector from its string representation, never raising."""

    @classmethod
    @abstractmethod
    def extend(
        cls, value: str | None, settings: Settings | None = None
    ) -> "CorrelationVector":
        """Create a vector extending ``value`` with a new zero extension."""

    @classmethod
    @abstractmethod
    def spin(
        cls,
        value: str | None,
        parameters: SpinParameters | None = None,
        settings: Settings | None = None,
    ) -> "CorrelationVector":
        """Create a vector by appending a spin token to ``value``."""

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CorrelationVector):
            return NotImplemented
        return self.value == other.value


class TerminatingCorrelationVector(CorrelationVector):
    """
    A vector that becomes immutable once it reaches its maximum length.

    The termination sign is appended to the value and every later
    Increment, Extend or Spin returns it unchanged. Used by V1 and V2.
    """

    def __init__(
        self,
        base_vector: str | None = None,
        extension: int = 0,
        immutable: bool = False,
        settings: Settings | None = None,
    ):
        if base_vector is None:
            base_vector = generate_base(self.VERSION.base_length)
        super().__init__(base_vector, extension, settings)
        self._immutable = immutable or self.is_oversized(base_vector, extension)

    @classmethod
    def from_guid(
        cls, guid: uuid.UUID, settings: Settings | None = None
    ) -> "TerminatingCorrelationVector":
        """Create a vector whose base encodes ``guid``."""
        return cls(get_base_from_guid(guid, cls.VERSION.base_length), settings=settings)

    @classmethod
    def termination_sign(cls) -> str:
        return cls.VERSION.termination_sign or ""

    @classmethod
    def is_immutable_value(cls, value: str | None) -> bool:
        """Check whether a value carries the termination sign."""
        return bool(value) and value.endswith(cls.termination_sign())

    @property
    def is_immutable(self) -> bool:
        return self._immutable

    @property
    def value(self) -> str:
        suffix = self.termination_sign() if self._immutable else ""
        return self._join(self.extension) + suffix

    @property
    def base(self) -> str:
        return self.value.partition(STANDARD_DELIMITER)[0]

    def _is_frozen(self) -> bool:
        return self._immutable

    def _on_overflow(self, next_extension: int) -> str:
        self._immutable = True
        logger.debug(
            f"Correlation vector {self.value} reached {self.VERSION.max_length} "
            "characters and is now immutable"
        )
        return self.value

    @classmethod
    def parse(
        cls, value: str | None, settings: Settings | None = None
    ) -> "TerminatingCorrelationVector":
        if value:
            immutable = cls.is_immutable_value(value)
            position = value.rfind(STANDARD_DELIMITER)
            if position > 0:
                end = len(value) - len(cls.termination_sign()) if immutable else len(value)
                extension = parse_extension(value[position + 1 : end], cls.VERSION.radix)
                if extension is not None:
                    return cls(value[:position], extension, immutable, settings=settings)

        logger.debug(
            f"Could not parse {cls.VERSION} correlation vector {value!r}, "
            "creating a new one"
        )
        return cls(settings=settings)

    @classmethod
    def extend(
        cls, value: str | None, settings: Settings | None = None
    ) -> "TerminatingCorrelationVector":
        settings = settings or get_settings()

        if cls.is_immutable_value(value):
            return cls.parse(value, settings)

        if settings.VALIDATE_DURING_CREATION:
            cls.validate(value)

        if cls.is_oversized(value, 0):
            return cls.parse(value + cls.termination_sign(), settings)

        return cls(value or "", 0, settings=settings)

    @classmethod
    def spin(
        cls,
        value: str | None,
        parameters: SpinParameters | None = None,
        settings: Settings | None = None,
    ) -> "TerminatingCorrelationVector":
        if not cls.VERSION.supports_spin:
            raise UnsupportedOperationException(
                f"Spin is not supported in Correlation Vector {cls.VERSION}", value
            )

        settings = settings or get_settings()
        parameters = parameters or DEFAULT_SPIN_PARAMETERS

        if cls.is_immutable_value(value):
            return cls.parse(value, settings)

        if settings.VALIDATE_DURING_CREATION:
            cls.validate(value)

        token = format_spin_decimal(
            generate_spin_value(parameters), parameters.total_bits
        )
        base_vector = f"{value or ''}{STANDARD_DELIMITER}{token}"
        if cls.is_oversized(base_vector, 0):
            return cls.parse(value + cls.termination_sign(), settings)

        return cls(base_vector, 0, settings=settings)

    @classmethod
    def validate(cls, value: str | None) -> None:
        """
        Validate a vector value against this version's format.

        Raises:
            ValidationException: If the value is empty.
            OversizedVectorException: If the value is longer than allowed.
            InvalidBaseException: If the base has the wrong length.
            InvalidExtensionException: If an extension is not a non-negative int32.
        """
        version = cls.VERSION

        if not value or not value.strip():
            raise ValidationException(
                f"The {version} correlation vector can not be null or empty", value
            )
        if len(value) > version.max_length:
            raise OversizedVectorException(
                f"The {version} correlation vector can not be bigger than "
                f"{version.max_length} characters",
                value,
            )

        parts = value.split(STANDARD_DELIMITER)
        if len(parts) < 2 or len(parts[0]) != version.base_length:
            raise InvalidBaseException(
                f"Invalid correlation vector {value}. Invalid base value {parts[0]}",
                value,
            )

        for part in parts[1:]:
            if parse_extension(part, version.radix) is None:
                raise InvalidExtensionException(
                    f"Invalid correlation vector {value}. Invalid extension value {part}",
                    value,
                )
