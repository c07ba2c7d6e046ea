"""Tests for spin parameters."""

import pydantic
import pytest

from correlation_vector.models.spin_parameters import (
    DEFAULT_SPIN_PARAMETERS,
    RESET_SPIN_PARAMETERS,
    SpinCounterInterval,
    SpinCounterPeriodicity,
    SpinEntropy,
    SpinParameters,
)


class TestSpinParameters:
    """Tests for SpinParameters."""

    def test_defaults(self) -> None:
        """Default spin is coarse, short, two bytes of entropy."""
        assert DEFAULT_SPIN_PARAMETERS.interval == SpinCounterInterval.COARSE
        assert DEFAULT_SPIN_PARAMETERS.periodicity == SpinCounterPeriodicity.SHORT
        assert DEFAULT_SPIN_PARAMETERS.entropy == SpinEntropy.TWO
        assert DEFAULT_SPIN_PARAMETERS.total_bits == 32

    @pytest.mark.parametrize(
        "interval,expected",
        [(SpinCounterInterval.COARSE, 24), (SpinCounterInterval.FINE, 16)],
    )
    def test_ticks_bits_to_drop(self, interval: SpinCounterInterval, expected: int) -> None:
        assert SpinParameters(interval=interval).ticks_bits_to_drop == expected

    @pytest.mark.parametrize(
        "periodicity,expected",
        [
            (SpinCounterPeriodicity.NONE, 0),
            (SpinCounterPeriodicity.SHORT, 16),
            (SpinCounterPeriodicity.MEDIUM, 24),
            (SpinCounterPeriodicity.LONG, 32),
        ],
    )
    def test_counter_bits(self, periodicity: SpinCounterPeriodicity, expected: int) -> None:
        assert SpinParameters(periodicity=periodicity).counter_bits == expected

    def test_total_bits(self) -> None:
        """Total width is counter bits plus eight bits per entropy byte."""
        parameters = SpinParameters(
            periodicity=SpinCounterPeriodicity.MEDIUM, entropy=SpinEntropy.THREE
        )
        assert parameters.entropy_bytes == 3
        assert parameters.total_bits == 48

    def test_reset_parameters_are_64_bits(self) -> None:
        assert RESET_SPIN_PARAMETERS.total_bits == 64

    def test_coerces_raw_values(self) -> None:
        """Plain strings and ints are accepted for the enum fields."""
        parameters = SpinParameters(interval="fine", periodicity="long", entropy=4)
        assert parameters.interval == SpinCounterInterval.FINE
        assert parameters.periodicity == SpinCounterPeriodicity.LONG
        assert parameters.entropy == SpinEntropy.FOUR

    def test_rejects_unknown_entropy(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            SpinParameters(entropy=5)

    def test_is_frozen(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            DEFAULT_SPIN_PARAMETERS.entropy = SpinEntropy.ONE
