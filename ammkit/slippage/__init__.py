"""Adaptive slippage recommendation.

Usage:
    from ammkit.slippage import AdaptiveSlippageAdvisor, SlippageSettings

    advisor = AdaptiveSlippageAdvisor()
    recommendation = advisor.recommend_for_quote(quote, pool, output_decimals=6)

    # Adopting it is an explicit caller decision
    settings = settings.apply(recommendation)
    min_out = quote.min_output(settings.slippage_bps)
"""

from ammkit.slippage.advisor import DEFAULT_ADVISOR, AdaptiveSlippageAdvisor, SlippageRecommendation
from ammkit.slippage.config import (
    DEFAULT_SLIPPAGE_CONFIG,
    MAX_SLIPPAGE_BPS,
    MIN_SLIPPAGE_BPS,
    SLIPPAGE_BUFFER_BPS,
    SlippageConfig,
)
from ammkit.slippage.settings import SlippageSettings

__all__ = [
    # Advisor
    "AdaptiveSlippageAdvisor",
    "SlippageRecommendation",
    "DEFAULT_ADVISOR",
    # Config
    "SlippageConfig",
    "DEFAULT_SLIPPAGE_CONFIG",
    "MIN_SLIPPAGE_BPS",
    "MAX_SLIPPAGE_BPS",
    "SLIPPAGE_BUFFER_BPS",
    # Settings
    "SlippageSettings",
]
