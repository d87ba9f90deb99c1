"""Mathematical utilities for the AMM engine.

This package provides exact primitives for pricing and LP accounting:
- to_atomic / from_atomic: decimal-string <-> atomic-integer conversion
- isqrt: integer square root for initial LP minting
"""

from ammkit.math.fixed_point import from_atomic, scale_factor, to_atomic, whole_units
from ammkit.math.integer import isqrt

__all__ = ["to_atomic", "from_atomic", "scale_factor", "whole_units", "isqrt"]
