"""Caller-owned slippage setting.

Recommendations never change the active tolerance by themselves; the caller
decides when to adopt one by calling apply(), which returns a new settings
value and leaves the old one untouched.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

import structlog

from ammkit.constants import BPS_DENOMINATOR, DEFAULT_SLIPPAGE_BPS
from ammkit.slippage.config import MIN_SLIPPAGE_BPS

if TYPE_CHECKING:
    from ammkit.slippage.advisor import SlippageRecommendation

logger = structlog.get_logger()


@dataclass(frozen=True)
class SlippageSettings:
    """Active slippage tolerance for a trading session.

    Attributes:
        slippage_bps: Tolerance used to derive min_out for submitted swaps
    """

    slippage_bps: int = DEFAULT_SLIPPAGE_BPS

    def __post_init__(self) -> None:
        if not MIN_SLIPPAGE_BPS <= self.slippage_bps <= BPS_DENOMINATOR:
            raise ValueError(
                f"slippage_bps must be in [{MIN_SLIPPAGE_BPS}, {BPS_DENOMINATOR}], "
                f"got {self.slippage_bps}"
            )

    def with_slippage_bps(self, slippage_bps: int) -> SlippageSettings:
        """Return settings with a manually chosen tolerance."""
        return replace(self, slippage_bps=slippage_bps)

    def apply(self, recommendation: SlippageRecommendation) -> SlippageSettings:
        """Adopt a recommendation. Must be invoked explicitly by the caller."""
        logger.info(
            "slippage_recommendation_applied",
            previous_bps=self.slippage_bps,
            slippage_bps=recommendation.slippage_bps,
        )
        return replace(self, slippage_bps=recommendation.slippage_bps)
