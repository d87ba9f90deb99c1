"""Liquidity check result types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ammkit.errors import AmmError, ExceedsReserves, PoolDrainRejected, ZeroReserves


class GuardError(Enum):
    """Reasons a swap is rejected before quoting."""

    ZERO_RESERVES = "pool empty"
    EXCEEDS_RESERVES = "exceeds available reserves"
    POOL_DRAIN = "would drain pool"


_ERROR_TYPES: dict[GuardError, type[AmmError]] = {
    GuardError.ZERO_RESERVES: ZeroReserves,
    GuardError.EXCEEDS_RESERVES: ExceedsReserves,
    GuardError.POOL_DRAIN: PoolDrainRejected,
}


@dataclass(frozen=True)
class LiquidityCheck:
    """Outcome of a pre-trade liquidity check.

    Attributes:
        error: Why the swap was rejected, or None if it is safe
        amount_out: Fee-adjusted output computed during the check (0 when
            the check stopped before computing it)

    Examples:
        check = check_liquidity(amount_in, reserve_in, reserve_out)
        if not check.is_valid:
            log(check.reason)
    """

    error: GuardError | None = None
    amount_out: int = 0

    @property
    def is_valid(self) -> bool:
        return self.error is None

    @property
    def reason(self) -> str | None:
        """Human-readable rejection reason."""
        return self.error.value if self.error is not None else None

    def raise_for_invalid(self) -> None:
        """Raise the matching AmmError if the check failed."""
        if self.error is not None:
            raise _ERROR_TYPES[self.error](self.error.value)

    @classmethod
    def valid(cls, amount_out: int) -> LiquidityCheck:
        return cls(error=None, amount_out=amount_out)

    @classmethod
    def invalid(cls, error: GuardError, amount_out: int = 0) -> LiquidityCheck:
        return cls(error=error, amount_out=amount_out)
