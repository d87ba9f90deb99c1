"""Shared type definitions for boundary models.

Values coming from the on-chain reader or token catalog are validated once
here; the math modules below trust plain ints.
"""

from typing import Annotated, Any

from pydantic import BeforeValidator, Field

from ammkit.constants import BPS_DENOMINATOR, MAX_DECIMALS, MIN_DECIMALS, U128_MAX


def validate_u128(value: Any) -> int:
    """Validate that a value is a non-negative integer that fits in u128.

    Args:
        value: int, or decimal-integer string as returned by chain readers
            (an Aleo-style "u128" suffix is accepted, e.g. "1000u128")

    Returns:
        The value as int

    Raises:
        ValueError: If value is not a valid non-negative integer within u128 range
    """
    if isinstance(value, bool):
        raise ValueError("U128 must be an integer, got bool")

    if isinstance(value, str):
        text = value.strip()
        if text.endswith("u128"):
            text = text[: -len("u128")]
        if not (text.isascii() and text.isdigit()):
            raise ValueError(f"U128 must be a decimal integer string: '{value}'")
        value = int(text)

    if not isinstance(value, int):
        raise ValueError(f"U128 must be string or int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"U128 cannot be negative: {value}")
    if value > U128_MAX:
        raise ValueError(f"U128 overflow: {value} > 2^128-1")
    return value


# Atomic token amount (u128)
AtomicAmount = Annotated[
    int,
    BeforeValidator(validate_u128),
    Field(description="Token amount in atomic units (u128)"),
]

# Basis points in [0, 10000]
Bps = Annotated[int, Field(ge=0, le=BPS_DENOMINATOR, strict=True)]

# Token decimals in [0, 18]
Decimals = Annotated[int, Field(ge=MIN_DECIMALS, le=MAX_DECIMALS, strict=True)]

# Token identifier (field element string such as "0field")
TokenId = Annotated[str, Field(min_length=1)]


__all__ = ["AtomicAmount", "Bps", "Decimals", "TokenId", "validate_u128"]
