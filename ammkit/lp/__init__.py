"""LP token accounting: minting, redemption and deposit ratios."""

from ammkit.lp.accounting import (
    LPShare,
    min_lp_tokens,
    mint_lp,
    optimal_deposit,
    pool_share_bps,
    redeem,
    validate_pool_ratio,
)

__all__ = [
    "LPShare",
    "mint_lp",
    "optimal_deposit",
    "redeem",
    "validate_pool_ratio",
    "min_lp_tokens",
    "pool_share_bps",
]
