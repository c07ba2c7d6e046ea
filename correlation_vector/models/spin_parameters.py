"""Parameters of the Spin operator."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class SpinCounterInterval(str, Enum):
    """Granularity of the time-derived spin counter."""

    # Drops the 24 least significant bits of the tick count: ~1.67 seconds.
    COARSE = "coarse"
    # Drops the 16 least significant bits of the tick count: ~6.5 milliseconds.
    FINE = "fine"


class SpinCounterPeriodicity(str, Enum):
    """How many bits the time-derived counter keeps before wrapping."""

    NONE = "none"
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"


class SpinEntropy(int, Enum):
    """Number of random bytes mixed into the spin value."""

    NONE = 0
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4


_TICKS_BITS_TO_DROP = {
    SpinCounterInterval.COARSE: 24,
    SpinCounterInterval.FINE: 16,
}

_COUNTER_BITS = {
    SpinCounterPeriodicity.NONE: 0,
    SpinCounterPeriodicity.SHORT: 16,
    SpinCounterPeriodicity.MEDIUM: 24,
    SpinCounterPeriodicity.LONG: 32,
}


class SpinParameters(BaseModel):
    """Configuration of a single Spin operation."""

    model_config = ConfigDict(frozen=True)

    interval: SpinCounterInterval = SpinCounterInterval.COARSE
    periodicity: SpinCounterPeriodicity = SpinCounterPeriodicity.SHORT
    entropy: SpinEntropy = SpinEntropy.TWO

    @property
    def ticks_bits_to_drop(self) -> int:
        """Number of least significant tick bits dropped from the counter."""
        return _TICKS_BITS_TO_DROP[self.interval]

    @property
    def entropy_bytes(self) -> int:
        return int(self.entropy)

    @property
    def counter_bits(self) -> int:
        return _COUNTER_BITS[self.periodicity]

    @property
    def total_bits(self) -> int:
        """Width of the spin value: counter bits plus entropy bits."""
        return self.counter_bits + self.entropy_bytes * 8


DEFAULT_SPIN_PARAMETERS = SpinParameters()

# Reset tokens: a long counter over 32 bits of entropy, 64 bits in total.
RESET_SPIN_PARAMETERS = SpinParameters(
    interval=SpinCounterInterval.COARSE,
    periodicity=SpinCounterPeriodicity.LONG,
    entropy=SpinEntropy.FOUR,
)
