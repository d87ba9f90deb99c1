"""Tests for decimal-string <-> atomic-integer conversion."""

import pytest

from ammkit.constants import U128_MAX
from ammkit.errors import AmmError, InvalidAmount
from ammkit.math.fixed_point import (
    from_atomic,
    scale_factor,
    to_atomic,
    validate_decimals,
    whole_units,
)


class TestToAtomic:
    """Tests for to_atomic."""

    def test_whole_amount(self):
        """Whole display amounts scale by 10^decimals."""
        assert to_atomic("2", 6) == 2_000_000

    def test_fractional_amount(self):
        """Fractional digits are placed exactly."""
        assert to_atomic("1.5", 6) == 1_500_000
        assert to_atomic("0.000001", 6) == 1

    def test_leading_point(self):
        """'.5' is accepted as 0.5."""
        assert to_atomic(".5", 6) == 500_000

    def test_trailing_point(self):
        """'12.' is accepted as 12."""
        assert to_atomic("12.", 6) == 12_000_000

    def test_excess_digits_truncated(self):
        """Digits beyond the token precision are dropped, not rounded."""
        assert to_atomic("1.1234569", 6) == 1_123_456
        assert to_atomic("0.0000009", 6) == 0

    def test_zero_decimals(self):
        """Zero-decimal tokens drop the whole fraction."""
        assert to_atomic("7.99", 0) == 7

    def test_eighteen_decimals(self):
        """Large precision keeps every digit exact."""
        assert to_atomic("1.000000000000000001", 18) == 10**18 + 1

    def test_surrounding_whitespace(self):
        """Whitespace around the literal is ignored."""
        assert to_atomic("  3.25 ", 2) == 325

    def test_zero(self):
        assert to_atomic("0", 6) == 0
        assert to_atomic("0.0", 6) == 0

    @pytest.mark.parametrize(
        "amount",
        ["", ".", "-1", "+1", "1e5", "abc", "1.2.3", "1,5", "0x10", "1 000", "١٢", "１２.5"],
    )
    def test_malformed_string_raises(self, amount: str):
        """Anything but a plain non-negative decimal literal is rejected."""
        with pytest.raises(InvalidAmount):
            to_atomic(amount, 6)

    def test_missing_amount_raises(self):
        """None is rejected."""
        with pytest.raises(InvalidAmount, match="required"):
            to_atomic(None, 6)

    def test_float_amount_raises(self):
        """Binary floats are never accepted as amounts."""
        with pytest.raises(InvalidAmount):
            to_atomic(1.5, 6)  # type: ignore

    def test_invalid_amount_is_value_error(self):
        """InvalidAmount can be caught as ValueError."""
        with pytest.raises(ValueError):
            to_atomic("nope", 6)

    def test_u128_max_accepted(self):
        assert to_atomic(str(U128_MAX), 0) == U128_MAX

    def test_above_u128_raises(self):
        """Scaling past u128 is rejected, including via the decimals shift."""
        with pytest.raises(InvalidAmount, match="exceeds u128"):
            to_atomic(str(U128_MAX + 1), 0)
        with pytest.raises(InvalidAmount, match="exceeds u128"):
            to_atomic(str(U128_MAX // 10**6 + 1), 6)

    def test_very_long_literal_raises_typed_error(self):
        """Literals past the int conversion digit limit still fail as AmmError."""
        with pytest.raises(AmmError):
            to_atomic("9" * 5000, 6)

    def test_leading_zeros_do_not_count_toward_limit(self):
        assert to_atomic("0" * 5000 + "1.5", 6) == 1_500_000


class TestFromAtomic:
    """Tests for from_atomic."""

    def test_trailing_zeros_stripped(self):
        assert from_atomic(1_500_000, 6) == "1.5"

    def test_whole_value_has_no_point(self):
        assert from_atomic(2_000_000, 6) == "2"

    def test_smallest_unit(self):
        assert from_atomic(1, 6) == "0.000001"

    def test_zero(self):
        assert from_atomic(0, 6) == "0"

    def test_zero_decimals(self):
        assert from_atomic(123, 0) == "123"

    def test_negative(self):
        """Signed amounts keep their sign."""
        assert from_atomic(-1_500_000, 6) == "-1.5"

    def test_round_trip_of_representative_values(self):
        """Formatting then parsing yields the same atomic amount."""
        for amount in (0, 1, 999_999, 1_000_000, 123_456_789):
            assert to_atomic(from_atomic(amount, 6), 6) == amount

    def test_non_int_raises(self):
        with pytest.raises(InvalidAmount):
            from_atomic("100", 6)  # type: ignore

    def test_u128_max(self):
        assert from_atomic(U128_MAX, 0) == str(U128_MAX)

    @pytest.mark.parametrize(
        "amount",
        [U128_MAX + 1, -(U128_MAX + 1), 10**5000],
        ids=["above_max", "below_negative_max", "past_digit_limit"],
    )
    def test_beyond_u128_raises(self, amount: int):
        with pytest.raises(InvalidAmount):
            from_atomic(amount, 6)


class TestDecimals:
    """Tests for decimals validation and scaling."""

    def test_scale_factor(self):
        assert scale_factor(0) == 1
        assert scale_factor(6) == 10**6
        assert scale_factor(18) == 10**18

    @pytest.mark.parametrize("decimals", [-1, 19, 100])
    def test_out_of_range_raises(self, decimals: int):
        with pytest.raises(InvalidAmount):
            validate_decimals(decimals)

    def test_bool_decimals_raises(self):
        """True is an int subclass but never a valid precision."""
        with pytest.raises(InvalidAmount):
            validate_decimals(True)

    def test_conversion_validates_decimals(self):
        with pytest.raises(InvalidAmount):
            to_atomic("1", 19)

    def test_whole_units_floors(self):
        assert whole_units(2_999_999, 6) == 2
        assert whole_units(999_999, 6) == 0
