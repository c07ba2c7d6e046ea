"""Correlation vector version definitions."""

from enum import Enum
from typing import NamedTuple

# Extensions are signed 32-bit counters; Increment saturates here.
MAX_EXTENSION = 2**31 - 1

# Header conventionally carrying the vector between services.
HEADER_NAME = "MS-CV"


class VersionConfig(NamedTuple):
    """Format constants for one correlation vector version."""

    base_length: int
    max_length: int
    radix: int  # 10 for decimal extensions, 16 for hexadecimal
    termination_sign: str | None  # None when the version resets instead
    supports_spin: bool
    supports_reset: bool


class CorrelationVectorVersion(Enum):
    """
    Correlation vector wire format versions.

    V1 and V2 terminate with a sentinel once they reach their maximum length.
    V3 never terminates; it resets onto a fresh suffix instead.
    """

    V1 = VersionConfig(16, 63, 10, "!", False, False)
    V2 = VersionConfig(22, 127, 10, "!", True, False)
    V3 = VersionConfig(22, 127, 16, None, True, True)

    @property
    def base_length(self) -> int:
        """Length of the encoded base, excluding any version prefix."""
        return self.value.base_length

    @property
    def max_length(self) -> int:
        """Maximum length of the vector value before terminate/reset."""
        return self.value.max_length

    @property
    def radix(self) -> int:
        """Radix used to render extensions."""
        return self.value.radix

    @property
    def termination_sign(self) -> str | None:
        """Sentinel appended to a terminated vector, if the version has one."""
        return self.value.termination_sign

    @property
    def supports_spin(self) -> bool:
        """Whether the Spin operator is available."""
        return self.value.supports_spin

    @property
    def supports_reset(self) -> bool:
        """Whether the Reset operator is available."""
        return self.value.supports_reset

    def format_extension(self, extension: int) -> str:
        """Render an extension in this version's radix."""
        if self.radix == 16:
            return format(extension, "X")
        return str(extension)

    def __str__(self) -> str:
        return self.name
