"""Adaptive slippage recommendations.

The advisor turns quote data into a slippage tolerance likely to survive
pool movement between quoting and settlement. It is a pure function of its
inputs: recommending never changes any setting. Applying a recommendation is
a separate, explicit step (see SlippageSettings.apply).

Steps, all in exact integer/rational arithmetic:
1. base = max(floor, ceil(impact% * 100) + buffer)
2. scale by 1 + min(3, severity / 400), severity = larger of the trade's
   share of reserve_in and the output's share of reserve_out (bps)
3. tiered severity surcharge
4. absolute trade size surcharge
5. shallow output reserve surcharge
6. large price impact surcharge
7. clamp(max(result, pair floor), global min, global max)
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from typing import TYPE_CHECKING

import structlog

from ammkit.constants import BPS_DENOMINATOR
from ammkit.errors import ZeroReserves
from ammkit.math.fixed_point import whole_units
from ammkit.slippage.config import DEFAULT_SLIPPAGE_CONFIG, SlippageConfig

if TYPE_CHECKING:
    from ammkit.amm.quote import Quote
    from ammkit.models.pool import ReserveSnapshot

logger = structlog.get_logger()


@dataclass(frozen=True)
class SlippageRecommendation:
    """A recommended slippage tolerance and how it was reached.

    Attributes:
        slippage_bps: Final clamped recommendation
        base_bps: Impact plus buffer (or the floor) before scaling
        severity_bps: Larger of the trade/output reserve shares, in bps
        surcharges: (name, bps) pairs added after scaling, in order
    """

    slippage_bps: int
    base_bps: int
    severity_bps: Fraction
    surcharges: tuple[tuple[str, int], ...] = ()


def _as_fraction(value: Fraction | Decimal | int) -> Fraction:
    if isinstance(value, float):
        raise TypeError("price_impact_pct must be exact (Fraction, Decimal or int), got float")
    return Fraction(value)


class AdaptiveSlippageAdvisor:
    """Recommend slippage tolerances from quote data.

    Attributes:
        config: Surcharge constants and global bounds
    """

    def __init__(self, config: SlippageConfig | None = None):
        self.config = config or DEFAULT_SLIPPAGE_CONFIG

    def recommend(
        self,
        price_impact_pct: Fraction | Decimal | int,
        amount_in: int,
        amount_out: int,
        reserve_in: int,
        reserve_out: int,
        output_decimals: int,
        pair_floor_bps: int | None = None,
        input_decimals: int | None = None,
    ) -> SlippageRecommendation:
        """Recommend a slippage tolerance for a quoted swap.

        Args:
            price_impact_pct: Quote price impact in percent
            amount_in: Input amount (atomic)
            amount_out: Quoted output amount (atomic)
            reserve_in: Reserve of input token
            reserve_out: Reserve of output token
            output_decimals: Decimals of the output token
            pair_floor_bps: Optional per-pair minimum tolerance
            input_decimals: Decimals of the input token; defaults to
                output_decimals when the caller does not know them

        Returns:
            SlippageRecommendation with the clamped tolerance in bps

        Raises:
            ZeroReserves: If either reserve is zero
        """
        if reserve_in <= 0 or reserve_out <= 0:
            raise ZeroReserves("Cannot recommend slippage for an empty pool")

        cfg = self.config
        impact = _as_fraction(price_impact_pct)
        if input_decimals is None:
            input_decimals = output_decimals
        floor_bps = pair_floor_bps if pair_floor_bps is not None else cfg.global_min_bps

        # 1. impact + buffer
        impact_bps = math.ceil(impact * 100)
        base = max(floor_bps, impact_bps + cfg.buffer_bps)

        # 2. severity scaling
        trade_share = Fraction(amount_in * BPS_DENOMINATOR, reserve_in)
        out_share = Fraction(amount_out * BPS_DENOMINATOR, reserve_out)
        severity = max(trade_share, out_share)
        multiplier = 1 + min(Fraction(cfg.max_severity_boost), severity / cfg.severity_divisor_bps)
        dynamic = math.ceil(base * multiplier)

        surcharges: list[tuple[str, int]] = []

        # 3. severity tiers
        for threshold, bps in cfg.severity_surcharges:
            if severity > threshold:
                surcharges.append(("severity", bps))
                break

        # 4. absolute size
        units_in = whole_units(amount_in, input_decimals)
        if units_in >= 1:
            surcharges.append(("trade_size", cfg.per_unit_surcharge_bps * units_in))
        if units_in >= cfg.large_trade_units:
            surcharges.append(("large_trade", cfg.large_trade_surcharge_bps))

        # 5. pool depth
        depth_units = whole_units(reserve_out, output_decimals)
        for threshold, bps in cfg.depth_surcharges:
            if depth_units < threshold:
                surcharges.append(("shallow_pool", bps))
                break

        # 6. large impact
        for threshold, bps in cfg.impact_surcharges:
            if impact > threshold:
                surcharges.append(("price_impact", bps))
                break

        dynamic += sum(bps for _, bps in surcharges)

        # 7. clamp
        if pair_floor_bps is not None:
            dynamic = max(dynamic, pair_floor_bps)
        result = max(cfg.global_min_bps, min(dynamic, cfg.global_max_bps))

        logger.debug(
            "slippage_recommended",
            slippage_bps=result,
            base_bps=base,
            severity_bps=str(severity),
            surcharges=surcharges,
        )

        return SlippageRecommendation(
            slippage_bps=result,
            base_bps=base,
            severity_bps=severity,
            surcharges=tuple(surcharges),
        )

    def recommend_for_quote(
        self,
        quote: Quote,
        pool: ReserveSnapshot,
        output_decimals: int,
        pair_floor_bps: int | None = None,
        input_decimals: int | None = None,
    ) -> SlippageRecommendation:
        """Recommend a tolerance for a single-hop quote against its pool.

        Raises:
            ValueError: If the quote is multi-hop (recommend per hop instead)
        """
        if quote.is_multihop:
            raise ValueError("recommend_for_quote expects a single-hop quote")
        reserve_in, reserve_out = pool.get_reserves(quote.token_in)
        return self.recommend(
            price_impact_pct=quote.price_impact_pct,
            amount_in=quote.amount_in,
            amount_out=quote.amount_out,
            reserve_in=reserve_in,
            reserve_out=reserve_out,
            output_decimals=output_decimals,
            pair_floor_bps=pair_floor_bps,
            input_decimals=input_decimals,
        )


# Default advisor instance
DEFAULT_ADVISOR = AdaptiveSlippageAdvisor()


__all__ = ["AdaptiveSlippageAdvisor", "SlippageRecommendation", "DEFAULT_ADVISOR"]
