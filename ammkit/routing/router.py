"""Best-route quoting over direct and two-hop paths.

A swap A -> C is quoted through the direct A/C pool when one exists, and
through A -> B -> C for every configured intermediate token B. The route
with the largest output (in C atomic units) wins.
"""

from __future__ import annotations

from collections.abc import Iterable

import structlog

from ammkit.amm.quote import Quote, get_swap_quote
from ammkit.guard.guard import DEFAULT_GUARD, LiquidityGuard
from ammkit.pools.registry import PoolRegistry

logger = structlog.get_logger()


class QuoteRouter:
    """Find the best exact-input quote across the pools of a registry.

    Attributes:
        registry: Pool snapshots to route through
        guard: Liquidity guard applied to every hop
        via_tokens: Intermediate tokens tried for two-hop routes
    """

    def __init__(
        self,
        registry: PoolRegistry,
        guard: LiquidityGuard | None = None,
        via_tokens: Iterable[str] = (),
    ) -> None:
        self.registry = registry
        self.guard = guard or DEFAULT_GUARD
        self.via_tokens = tuple(via_tokens)

    def direct_quote(self, token_in: str, token_out: str, amount_in: int) -> Quote | None:
        """Quote through the direct pool, or None if there is none."""
        pool = self.registry.get_pool(token_in, token_out)
        if pool is None:
            return None
        return get_swap_quote(pool, token_in, amount_in, self.guard)

    def two_hop_quote(
        self,
        token_in: str,
        via: str,
        token_out: str,
        amount_in: int,
    ) -> Quote | None:
        """Quote token_in -> via -> token_out, or None if either leg fails."""
        first = self.direct_quote(token_in, via, amount_in)
        if first is None:
            return None
        second = self.direct_quote(via, token_out, first.amount_out)
        if second is None:
            return None

        return Quote(
            token_in=token_in,
            token_out=token_out,
            amount_in=amount_in,
            amount_out=second.amount_out,
            price_impact_pct=first.price_impact_pct + second.price_impact_pct,
            fee_atomic=first.fee_atomic,
            protocol_fee_atomic=first.protocol_fee_atomic,
            route=(token_in, via, token_out),
            hops=(first, second),
        )

    def best_quote(self, token_in: str, token_out: str, amount_in: int) -> Quote | None:
        """Best quote over the direct pool and all two-hop routes.

        Returns:
            The quote with the largest amount_out, or None if no route works.
            Ties keep the direct route.
        """
        if token_in == token_out:
            raise ValueError(f"Cannot route {token_in} to itself")

        candidates: list[Quote] = []
        direct = self.direct_quote(token_in, token_out, amount_in)
        if direct is not None:
            candidates.append(direct)

        for via in self.via_tokens:
            if via in (token_in, token_out):
                continue
            quote = self.two_hop_quote(token_in, via, token_out, amount_in)
            if quote is not None:
                candidates.append(quote)

        if not candidates:
            logger.debug(
                "no_route_found",
                token_in=token_in,
                token_out=token_out,
                amount_in=amount_in,
            )
            return None

        # max() keeps the first of equal elements, so the direct route wins ties
        best = max(candidates, key=lambda q: q.amount_out)
        logger.debug(
            "best_route_selected",
            route=best.route,
            amount_out=best.amount_out,
            price_impact_pct=str(best.price_impact_pct.limit_denominator(10**6)),
            candidates=len(candidates),
        )
        return best


__all__ = ["QuoteRouter"]
