"""Swap quotes against pool reserve snapshots."""

from __future__ import annotations

from dataclasses import dataclass, field
from fractions import Fraction

import structlog

from ammkit.amm.constant_product import constant_product
from ammkit.guard.guard import DEFAULT_GUARD, LiquidityGuard
from ammkit.models.pool import ReserveSnapshot

logger = structlog.get_logger()


@dataclass(frozen=True)
class Quote:
    """Result of quoting a swap. Recomputed per call, never persisted.

    For a multi-hop quote, hops holds the per-leg quotes; fee_atomic and
    protocol_fee_atomic are those of the first leg (input token units) and
    price_impact_pct is the sum of the leg impacts.
    """

    token_in: str
    token_out: str
    amount_in: int
    amount_out: int
    price_impact_pct: Fraction
    fee_atomic: int
    protocol_fee_atomic: int = 0
    route: tuple[str, ...] = ()
    hops: tuple[Quote, ...] = field(default=())

    @property
    def is_multihop(self) -> bool:
        return len(self.route) > 2

    def min_output(self, slippage_bps: int) -> int:
        """Minimum output to submit with this quote under a slippage tolerance."""
        return constant_product.min_output(self.amount_out, slippage_bps)


def get_swap_quote(
    pool: ReserveSnapshot,
    token_in: str,
    amount_in: int,
    guard: LiquidityGuard | None = None,
) -> Quote | None:
    """Quote an exact-input swap through a single pool.

    Direction is resolved against the pool's canonical token ordering, so the
    snapshot may list its tokens in either order.

    Args:
        pool: Reserve snapshot of the pool
        token_in: Input token id
        amount_in: Input amount in atomic units
        guard: Liquidity guard to apply (default thresholds if omitted)

    Returns:
        Quote, or None for a non-positive input, an empty pool, or a swap
        rejected by the liquidity guard

    Raises:
        ValueError: If token_in is not in the pool
    """
    guard = guard or DEFAULT_GUARD
    pool = pool.canonical()
    token_out = pool.get_token_out(token_in)

    if amount_in <= 0:
        return None

    if pool.is_empty:
        logger.debug("swap_quote_empty_pool", pool=pool.pair, token_in=token_in)
        return None

    # Rejections are logged by the guard
    check = guard.check(pool, token_in, amount_in)
    if not check.is_valid:
        return None

    reserve_in, reserve_out = pool.get_reserves(token_in)
    amount_out = check.amount_out
    fee = constant_product.swap_fee(amount_in, pool.swap_fee_bps)

    return Quote(
        token_in=token_in,
        token_out=token_out,
        amount_in=amount_in,
        amount_out=amount_out,
        price_impact_pct=constant_product.price_impact_pct(amount_in, reserve_in, reserve_out),
        fee_atomic=fee,
        protocol_fee_atomic=constant_product.protocol_fee(fee, pool.protocol_fee_bps),
        route=(token_in, token_out),
    )


__all__ = ["Quote", "get_swap_quote"]
