"""Constant-product AMM math.

The pool holds reserves x and y with x * y = k. The swap fee is skimmed from
the input before it enters the curve, so k grows with every fee-paying swap.

All functions take and return plain ints (atomic units); price impact is an
exact Fraction. Floating point is never used.
"""

from __future__ import annotations

from fractions import Fraction

from ammkit.constants import BPS_DENOMINATOR, DEFAULT_PROTOCOL_FEE_BPS, DEFAULT_SWAP_FEE_BPS
from ammkit.errors import BelowMinimumOutput, ExceedsReserves, ZeroReserves
from ammkit.safe_int import S


def _check_bps(name: str, bps: int) -> None:
    if not 0 <= bps <= BPS_DENOMINATOR:
        raise ValueError(f"{name} must be in [0, {BPS_DENOMINATOR}], got {bps}")


class ConstantProduct:
    """Constant-product (x * y = k) pricing.

    Formula:
        net_in = floor(amount_in * (10000 - fee_bps) / 10000)
        amount_out = floor(net_in * reserve_out / (reserve_in + net_in))

    Note the fee is applied with its own floor division before the curve,
    matching the pool program (two floor divisions, nothing else rounded).
    """

    def get_amount_out(
        self,
        amount_in: int,
        reserve_in: int,
        reserve_out: int,
        fee_bps: int = DEFAULT_SWAP_FEE_BPS,
    ) -> int:
        """Calculate output amount for an exact input.

        Args:
            amount_in: Input token amount
            reserve_in: Reserve of input token in pool
            reserve_out: Reserve of output token in pool
            fee_bps: Swap fee in basis points (default 30 = 0.3%)

        Returns:
            Output token amount, 0 if any operand is zero

        Raises:
            ValueError: If fee_bps is outside [0, 10000]
            U128Overflow: If the output does not fit in u128
        """
        _check_bps("fee_bps", fee_bps)
        if amount_in <= 0 or reserve_in <= 0 or reserve_out <= 0:
            return 0

        net_in = S(amount_in) * (BPS_DENOMINATOR - fee_bps) // BPS_DENOMINATOR
        if not net_in:
            return 0
        numerator = net_in * S(reserve_out)
        denominator = S(reserve_in) + net_in

        return (numerator // denominator).to_u128()

    def get_required_input(
        self,
        desired_out: int,
        reserve_in: int,
        reserve_out: int,
    ) -> int:
        """Calculate input needed for a desired output, ignoring the fee.

        Inverts the zero-fee curve and rounds up:
            amount_in = ceil(desired_out * reserve_in / (reserve_out - desired_out))

        This is an approximation: feeding the result into get_amount_out with
        a non-zero fee yields slightly less than desired_out. Callers rely on
        the current behavior, so it is kept as is.

        Raises:
            ZeroReserves: If either reserve is zero
            ExceedsReserves: If desired_out >= reserve_out
            U128Overflow: If the required input does not fit in u128
        """
        if reserve_in <= 0 or reserve_out <= 0:
            raise ZeroReserves("Reserves must be greater than 0")
        if desired_out <= 0:
            return 0
        if desired_out >= reserve_out:
            raise ExceedsReserves(
                f"Desired output {desired_out} exceeds available reserves {reserve_out}"
            )

        numerator = S(desired_out) * S(reserve_in)
        denominator = S(reserve_out) - S(desired_out)
        return numerator.ceiling_div(denominator).to_u128()

    def price_impact_pct(
        self,
        amount_in: int,
        reserve_in: int,
        reserve_out: int,
    ) -> Fraction:
        """Relative move of the spot price caused by a trade, in percent.

        Compares the pre-trade spot price reserve_out/reserve_in with the
        post-trade spot price after a zero-fee swap of amount_in.

        Returns:
            abs((new_price - price) / price) * 100 as an exact Fraction
        """
        if amount_in <= 0 or reserve_in <= 0 or reserve_out <= 0:
            return Fraction(0)

        price = Fraction(reserve_out, reserve_in)
        out_no_fee = self.get_amount_out(amount_in, reserve_in, reserve_out, 0)
        new_price = Fraction(reserve_out - out_no_fee, reserve_in + amount_in)

        return abs((new_price - price) / price) * 100

    def swap_fee(self, amount_in: int, fee_bps: int = DEFAULT_SWAP_FEE_BPS) -> int:
        """Swap fee charged on an input amount, floored."""
        _check_bps("fee_bps", fee_bps)
        if amount_in <= 0:
            return 0
        return (S(amount_in) * fee_bps // BPS_DENOMINATOR).value

    def protocol_fee(
        self, swap_fee_amount: int, protocol_fee_bps: int = DEFAULT_PROTOCOL_FEE_BPS
    ) -> int:
        """Protocol share of a swap fee amount, floored."""
        _check_bps("protocol_fee_bps", protocol_fee_bps)
        if swap_fee_amount <= 0:
            return 0
        return (S(swap_fee_amount) * protocol_fee_bps // BPS_DENOMINATOR).value

    def min_output(self, expected_out: int, slippage_bps: int) -> int:
        """Minimum acceptable output under a slippage tolerance.

        min_out = floor(expected_out * (10000 - slippage_bps) / 10000)
        """
        _check_bps("slippage_bps", slippage_bps)
        if expected_out <= 0:
            return 0
        return (S(expected_out) * (BPS_DENOMINATOR - slippage_bps) // BPS_DENOMINATOR).to_u128()

    def ensure_min_output(self, amount_out: int, min_out: int) -> int:
        """Return amount_out if it satisfies min_out.

        Raises:
            BelowMinimumOutput: If amount_out < min_out
        """
        if amount_out < min_out:
            raise BelowMinimumOutput(amount_out, min_out)
        return amount_out


# Singleton instance
constant_product = ConstantProduct()


__all__ = ["ConstantProduct", "constant_product"]
