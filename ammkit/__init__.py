"""Fixed-point AMM pricing and slippage engine."""

from ammkit.amm import ConstantProduct, constant_product
from ammkit.guard import GuardConfig, LiquidityCheck, LiquidityGuard
from ammkit.amm.quote import Quote, get_swap_quote
from ammkit.lp import LPShare, mint_lp, redeem, validate_pool_ratio
from ammkit.math import from_atomic, isqrt, to_atomic
from ammkit.models import ReserveSnapshot, Token
from ammkit.pools import PoolRegistry
from ammkit.routing import QuoteRouter
from ammkit.slippage import AdaptiveSlippageAdvisor, SlippageRecommendation, SlippageSettings

__version__ = "0.1.0"
__all__ = [
    "ConstantProduct",
    "constant_product",
    "GuardConfig",
    "LiquidityCheck",
    "LiquidityGuard",
    "Quote",
    "get_swap_quote",
    "LPShare",
    "mint_lp",
    "redeem",
    "validate_pool_ratio",
    "to_atomic",
    "from_atomic",
    "isqrt",
    "ReserveSnapshot",
    "Token",
    "PoolRegistry",
    "QuoteRouter",
    "AdaptiveSlippageAdvisor",
    "SlippageRecommendation",
    "SlippageSettings",
    "__version__",
]
