"""
Spin and reset token generation.

A spin value is a coarse time counter with random bytes shifted in below it,
masked to ``periodicity + entropy * 8`` bits. Consecutive spins from the same
vector therefore sort roughly by time while staying distinct.
"""

import secrets
import time

from correlation_vector.models.spin_parameters import (
    RESET_SPIN_PARAMETERS,
    SpinParameters,
)

# 100ns ticks between 0001-01-01 and 1970-01-01 (UTC).
_UNIX_EPOCH_TICKS = 621_355_968_000_000_000

_LOW_32_BITS = 0xFFFFFFFF


def utc_ticks() -> int:
    """Current UTC time in 100ns ticks since 0001-01-01."""
    return time.time_ns() // 100 + _UNIX_EPOCH_TICKS


def entropy_bytes(count: int) -> bytes:
    """Random bytes mixed into spin values."""
    return secrets.token_bytes(count)


def bit_mask(bits: int) -> int:
    """Mask selecting the lowest ``bits`` bits."""
    # Unbounded ints: bits == 64 yields the full 64-bit mask, no wraparound.
    return (1 << bits) - 1


def generate_spin_value(parameters: SpinParameters) -> int:
    """
    Compute a spin value.

    Args:
        parameters: Interval, periodicity and entropy of the spin.

    Returns:
        An integer of at most ``parameters.total_bits`` bits.
    """
    value = utc_ticks() >> parameters.ticks_bits_to_drop
    for byte in entropy_bytes(parameters.entropy_bytes):
        value = (value << 8) | byte

    return value & bit_mask(parameters.total_bits)


def format_spin_hex(value: int, total_bits: int) -> str:
    """Render a spin value as 8 hex digits, or 16 when wider than 32 bits."""
    token = format(value & _LOW_32_BITS, "08X")
    if total_bits > 32:
        token = format(value >> 32, "08X") + token
    return token


def format_spin_decimal(value: int, total_bits: int) -> str:
    """Render a spin value as decimal segments joined by '.'."""
    token = str(value & _LOW_32_BITS)
    if total_bits > 32:
        token = f"{value >> 32}.{token}"
    return token


def generate_reset_token() -> str:
    """16 hex digits: a long time counter over 32 bits of entropy."""
    value = generate_spin_value(RESET_SPIN_PARAMETERS)
    return format_spin_hex(value, RESET_SPIN_PARAMETERS.total_bits)
