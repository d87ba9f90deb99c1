"""Boundary models: tokens and pool reserve snapshots."""

from ammkit.models.pool import ReserveSnapshot, Token, canonical_pair
from ammkit.models.types import AtomicAmount, Bps, Decimals, TokenId, validate_u128

__all__ = [
    "ReserveSnapshot",
    "Token",
    "canonical_pair",
    "AtomicAmount",
    "Bps",
    "Decimals",
    "TokenId",
    "validate_u128",
]
