"""Decimal-string <-> atomic-integer conversion.

Display amounts ("1.25") are converted to atomic units (1250000 for a
6-decimal token) by string manipulation only, so no binary floating point
ever touches an amount. Excess fractional digits are truncated, never
rounded.
"""

from __future__ import annotations

import re
from typing import Any

from ammkit.constants import MAX_DECIMALS, MIN_DECIMALS, U128_MAX
from ammkit.errors import InvalidAmount

__all__ = [
    "to_atomic",
    "from_atomic",
    "scale_factor",
    "whole_units",
    "validate_decimals",
]

# Unsigned ASCII decimal literal: "12", "12.5", ".5", "12." (at least one digit)
_DECIMAL_RE = re.compile(r"^(?=\.?[0-9])([0-9]*)(?:\.([0-9]*))?$")

# Digit count of U128_MAX; longer literals are rejected before int() conversion
_U128_DIGITS = len(str(U128_MAX))


def validate_decimals(decimals: Any) -> int:
    """Check that decimals is an int in [MIN_DECIMALS, MAX_DECIMALS].

    Raises:
        InvalidAmount: If decimals is not an int or is out of range
    """
    if not isinstance(decimals, int) or isinstance(decimals, bool):
        raise InvalidAmount(f"Decimals must be int, got {type(decimals).__name__}")
    if not MIN_DECIMALS <= decimals <= MAX_DECIMALS:
        raise InvalidAmount(
            f"Decimals must be in [{MIN_DECIMALS}, {MAX_DECIMALS}], got {decimals}"
        )
    return decimals


def scale_factor(decimals: int) -> int:
    """Conversion factor between display and atomic units (10^decimals)."""
    return 10 ** validate_decimals(decimals)


def to_atomic(amount: Any, decimals: int) -> int:
    """Convert a display-unit decimal string to atomic units.

    Args:
        amount: Non-negative decimal string, e.g. "1.5" or "0.000001"
        decimals: Token decimals

    Returns:
        Amount in atomic units (fractional digits beyond decimals truncated)

    Raises:
        InvalidAmount: If amount is missing, not a string, not a plain
            non-negative decimal literal, or above the u128 range
    """
    validate_decimals(decimals)
    if amount is None:
        raise InvalidAmount("Amount is required")
    if not isinstance(amount, str):
        raise InvalidAmount(f"Amount must be a decimal string, got {type(amount).__name__}")

    match = _DECIMAL_RE.match(amount.strip())
    if match is None:
        raise InvalidAmount(f"Not a decimal amount: {amount!r}")

    int_part = match.group(1) or "0"
    frac_part = (match.group(2) or "")[:decimals].ljust(decimals, "0")
    digits = (int_part + frac_part).lstrip("0") or "0"
    if len(digits) > _U128_DIGITS or int(digits) > U128_MAX:
        raise InvalidAmount(f"Amount {amount.strip()[:50]!r} exceeds u128 at {decimals} decimals")
    return int(digits)


def from_atomic(amount: int, decimals: int) -> str:
    """Convert atomic units back to a display-unit decimal string.

    Trailing zeros in the fraction and a bare trailing point are dropped:
    from_atomic(1500000, 6) == "1.5", from_atomic(2000000, 6) == "2".

    Raises:
        InvalidAmount: If amount is not an int or its magnitude exceeds u128
    """
    validate_decimals(decimals)
    if not isinstance(amount, int) or isinstance(amount, bool):
        raise InvalidAmount(f"Atomic amount must be int, got {type(amount).__name__}")
    if abs(amount) > U128_MAX:
        raise InvalidAmount(f"Atomic amount exceeds u128 ({amount.bit_length()} bits)")

    sign = "-" if amount < 0 else ""
    digits = str(abs(amount)).rjust(decimals + 1, "0")
    if decimals == 0:
        return sign + digits

    int_part = digits[:-decimals]
    frac_part = digits[-decimals:].rstrip("0")
    if frac_part:
        return f"{sign}{int_part}.{frac_part}"
    return sign + int_part


def whole_units(amount: int, decimals: int) -> int:
    """Number of whole display units in an atomic amount (floored)."""
    return amount // scale_factor(decimals)
