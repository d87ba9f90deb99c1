"""LP token mint/redemption math.

Every division floors, which always favors the pool: a depositor never
receives more LP than their contribution justifies, and the sum of all
holders' redemptions never exceeds the actual reserves.
"""

from __future__ import annotations

from dataclasses import dataclass

from ammkit.constants import BPS_DENOMINATOR, DEFAULT_MAX_POOL_RATIO
from ammkit.errors import ExceedsReserves, RatioOutOfBounds, ZeroReserves
from ammkit.math.integer import isqrt
from ammkit.safe_int import S


def validate_pool_ratio(
    amount1: int,
    amount2: int,
    max_ratio: int = DEFAULT_MAX_POOL_RATIO,
) -> bool:
    """Check that an initial deposit is not priced absurdly.

    The larger amount may be at most max_ratio times the smaller one.
    Compared by cross-multiplication, so the check is exact.
    """
    if amount1 <= 0 or amount2 <= 0:
        return False
    larger, smaller = max(amount1, amount2), min(amount1, amount2)
    return S(larger) <= S(smaller) * max_ratio


def mint_lp(
    amount1: int,
    amount2: int,
    reserve1: int,
    reserve2: int,
    total_supply: int,
    max_ratio: int | None = None,
) -> int:
    """Calculate LP tokens minted for a deposit.

    First deposit (total_supply == 0): geometric mean isqrt(amount1 * amount2).
    Later deposits: the smaller of the two proportional shares, so a deposit
    off the pool ratio cannot dilute existing holders.

    Args:
        amount1: Amount of token1 deposited
        amount2: Amount of token2 deposited
        reserve1: Current reserve of token1
        reserve2: Current reserve of token2
        total_supply: Current LP token supply
        max_ratio: If set, validate the first deposit's ratio against it

    Returns:
        LP tokens to mint (0 for non-positive amounts)

    Raises:
        RatioOutOfBounds: First deposit fails the max_ratio check
        ZeroReserves: Pool has LP supply but an empty reserve
        U128Overflow: Minted amount does not fit in u128
    """
    if amount1 <= 0 or amount2 <= 0:
        return 0

    if total_supply == 0:
        if max_ratio is not None and not validate_pool_ratio(amount1, amount2, max_ratio):
            raise RatioOutOfBounds(
                f"Initial deposit ratio {amount1}:{amount2} exceeds {max_ratio}:1"
            )
        return S(isqrt(amount1 * amount2)).to_u128()

    if reserve1 <= 0 or reserve2 <= 0:
        raise ZeroReserves("Pool has LP supply but an empty reserve")

    from_token1 = S(amount1) * S(total_supply) // S(reserve1)
    from_token2 = S(amount2) * S(total_supply) // S(reserve2)
    return from_token1.min(from_token2).to_u128()


def optimal_deposit(amount1: int, reserve1: int, reserve2: int) -> int:
    """Amount of token2 that matches amount1 at the current pool ratio."""
    if amount1 <= 0 or reserve1 <= 0 or reserve2 <= 0:
        return 0
    return (S(amount1) * S(reserve2) // S(reserve1)).to_u128()


def redeem(
    lp_tokens: int,
    total_supply: int,
    reserve1: int,
    reserve2: int,
) -> tuple[int, int]:
    """Token amounts returned for burning lp_tokens.

    Returns:
        (out1, out2), each floor(lp_tokens * reserve / total_supply)

    Raises:
        ExceedsReserves: If lp_tokens > total_supply
    """
    if lp_tokens <= 0 or total_supply <= 0:
        return 0, 0
    if lp_tokens > total_supply:
        raise ExceedsReserves(f"Cannot redeem {lp_tokens} LP of total supply {total_supply}")

    out1 = S(lp_tokens) * S(reserve1) // S(total_supply)
    out2 = S(lp_tokens) * S(reserve2) // S(total_supply)
    return out1.to_u128(), out2.to_u128()


def _slippage_floor(amount: int, slippage_bps: int) -> int:
    if not 0 <= slippage_bps <= BPS_DENOMINATOR:
        raise ValueError(f"slippage_bps must be in [0, {BPS_DENOMINATOR}], got {slippage_bps}")
    if amount <= 0:
        return 0
    return (S(amount) * (BPS_DENOMINATOR - slippage_bps) // BPS_DENOMINATOR).to_u128()


def min_lp_tokens(expected_lp: int, slippage_bps: int) -> int:
    """Slippage-adjusted minimum LP to accept when adding liquidity."""
    return _slippage_floor(expected_lp, slippage_bps)


def pool_share_bps(lp_tokens: int, total_supply: int) -> int:
    """Holder's share of the pool in basis points, floored."""
    if lp_tokens <= 0 or total_supply <= 0:
        return 0
    return (S(min(lp_tokens, total_supply)) * BPS_DENOMINATOR // S(total_supply)).value


@dataclass(frozen=True)
class LPShare:
    """An LP position: lp_tokens out of total_supply."""

    lp_tokens: int
    total_supply: int

    def __post_init__(self) -> None:
        if self.lp_tokens < 0 or self.total_supply < 0:
            raise ValueError("LP amounts must be non-negative")
        if self.lp_tokens > self.total_supply:
            raise ExceedsReserves(
                f"LP tokens {self.lp_tokens} exceed total supply {self.total_supply}"
            )

    @property
    def share_bps(self) -> int:
        return pool_share_bps(self.lp_tokens, self.total_supply)

    def redeem(self, reserve1: int, reserve2: int) -> tuple[int, int]:
        return redeem(self.lp_tokens, self.total_supply, reserve1, reserve2)

    def min_redeem(self, reserve1: int, reserve2: int, slippage_bps: int) -> tuple[int, int]:
        """Slippage-adjusted minimum amounts to accept when removing liquidity."""
        out1, out2 = self.redeem(reserve1, reserve2)
        return _slippage_floor(out1, slippage_bps), _slippage_floor(out2, slippage_bps)


__all__ = [
    "mint_lp",
    "optimal_deposit",
    "redeem",
    "validate_pool_ratio",
    "min_lp_tokens",
    "pool_share_bps",
    "LPShare",
]
