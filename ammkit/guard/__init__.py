"""Pre-trade liquidity safety checks.

Usage:
    from ammkit.guard import LiquidityGuard, GuardConfig

    guard = LiquidityGuard(GuardConfig(max_input_multiple=5))
    result = guard.check(pool, token_in, amount_in)

    if not result.is_valid:
        handle_rejection(result.reason)
"""

from ammkit.guard.config import (
    DEFAULT_GUARD_CONFIG,
    DRAIN_THRESHOLD_BPS,
    MAX_INPUT_RESERVE_MULTIPLE,
    GuardConfig,
)
from ammkit.guard.guard import DEFAULT_GUARD, LiquidityGuard, check_liquidity
from ammkit.guard.result import GuardError, LiquidityCheck

__all__ = [
    # Guard
    "LiquidityGuard",
    "check_liquidity",
    "DEFAULT_GUARD",
    # Config
    "GuardConfig",
    "DEFAULT_GUARD_CONFIG",
    "MAX_INPUT_RESERVE_MULTIPLE",
    "DRAIN_THRESHOLD_BPS",
    # Result
    "LiquidityCheck",
    "GuardError",
]
