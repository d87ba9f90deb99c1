"""Exact integer helpers shared by the pricing and LP modules."""

from __future__ import annotations


def isqrt(x: int) -> int:
    """Floor square root by integer Newton iteration.

    Deterministic and monotonic; no floating point is involved, so results
    are exact for arbitrarily large inputs.

    Raises:
        ValueError: If x is negative
    """
    if x < 0:
        raise ValueError(f"Square root of negative number: {x}")
    if x < 2:
        return x

    # Start above the root; the sequence then decreases monotonically
    y = x
    z = (x + 1) // 2
    while z < y:
        y = z
        z = (x // z + z) // 2
    return y


__all__ = ["isqrt"]
