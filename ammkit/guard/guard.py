"""Pre-trade safety checks against pool drain and fat-finger inputs."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from ammkit.amm.constant_product import constant_product
from ammkit.constants import BPS_DENOMINATOR, DEFAULT_SWAP_FEE_BPS
from ammkit.guard.config import DEFAULT_GUARD_CONFIG, GuardConfig
from ammkit.guard.result import GuardError, LiquidityCheck
from ammkit.safe_int import S

if TYPE_CHECKING:
    from ammkit.models.pool import ReserveSnapshot

logger = structlog.get_logger()


def check_liquidity(
    amount_in: int,
    reserve_in: int,
    reserve_out: int,
    fee_bps: int = DEFAULT_SWAP_FEE_BPS,
    config: GuardConfig = DEFAULT_GUARD_CONFIG,
) -> LiquidityCheck:
    """Check that a swap is safe to quote against the given reserves.

    Rules, in order:
    1. Both reserves must be non-zero ("pool empty")
    2. amount_in <= max_input_multiple * reserve_in ("exceeds available reserves")
    3. Fee-adjusted amount_out < drain_threshold of reserve_out ("would drain pool")

    Args:
        amount_in: Input token amount
        reserve_in: Reserve of input token in pool
        reserve_out: Reserve of output token in pool
        fee_bps: Swap fee in basis points
        config: Guard thresholds

    Returns:
        LiquidityCheck carrying the rejection reason or the computed output
    """
    if reserve_in <= 0 or reserve_out <= 0:
        return LiquidityCheck.invalid(GuardError.ZERO_RESERVES)

    if S(amount_in) > S(reserve_in) * config.max_input_multiple:
        return LiquidityCheck.invalid(GuardError.EXCEEDS_RESERVES)

    amount_out = constant_product.get_amount_out(amount_in, reserve_in, reserve_out, fee_bps)

    # amount_out / reserve_out >= threshold / 10000, cross-multiplied
    if S(amount_out) * BPS_DENOMINATOR >= S(reserve_out) * config.drain_threshold_bps:
        return LiquidityCheck.invalid(GuardError.POOL_DRAIN, amount_out)

    return LiquidityCheck.valid(amount_out)


class LiquidityGuard:
    """Liquidity checks bound to a configuration.

    Attributes:
        config: Guard thresholds
    """

    def __init__(self, config: GuardConfig | None = None):
        self.config = config or DEFAULT_GUARD_CONFIG

    def check_reserves(
        self,
        amount_in: int,
        reserve_in: int,
        reserve_out: int,
        fee_bps: int = DEFAULT_SWAP_FEE_BPS,
    ) -> LiquidityCheck:
        return check_liquidity(amount_in, reserve_in, reserve_out, fee_bps, self.config)

    def check(self, pool: ReserveSnapshot, token_in: str, amount_in: int) -> LiquidityCheck:
        """Check a swap of amount_in of token_in against a pool snapshot."""
        reserve_in, reserve_out = pool.get_reserves(token_in)
        result = self.check_reserves(amount_in, reserve_in, reserve_out, pool.swap_fee_bps)
        if not result.is_valid:
            logger.debug(
                "liquidity_check_failed",
                pool=pool.pair,
                token_in=token_in,
                amount_in=amount_in,
                reason=result.reason,
            )
        return result

    def enforce(self, pool: ReserveSnapshot, token_in: str, amount_in: int) -> int:
        """Like check(), but raise on rejection and return the output amount.

        Raises:
            ZeroReserves, ExceedsReserves, PoolDrainRejected
        """
        result = self.check(pool, token_in, amount_in)
        result.raise_for_invalid()
        return result.amount_out


# Default guard instance
DEFAULT_GUARD = LiquidityGuard()
