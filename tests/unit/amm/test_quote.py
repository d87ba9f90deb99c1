"""Tests for swap quotes against reserve snapshots."""

from fractions import Fraction

import pytest
from structlog.testing import capture_logs

from ammkit.amm import constant_product
from ammkit.amm.quote import Quote, get_swap_quote
from ammkit.guard import LiquidityGuard
from ammkit.models import ReserveSnapshot
from tests.helpers import ALEO, UNKNOWN, USDC, make_pool


class TestGetSwapQuote:
    """Tests for single-pool quoting."""

    def test_small_swap_into_shallow_side(self, aleo_usdc_pool: ReserveSnapshot):
        """1 ALEO against 1000 ALEO / 1 USDC."""
        quote = get_swap_quote(aleo_usdc_pool, ALEO, 10**6)

        assert quote is not None
        assert quote.token_in == ALEO
        assert quote.token_out == USDC
        assert quote.amount_in == 10**6
        assert quote.amount_out == 996
        assert quote.fee_atomic == 3000
        assert quote.protocol_fee_atomic == 1
        assert quote.price_impact_pct == Fraction(1999, 10010)
        assert quote.route == (ALEO, USDC)
        assert not quote.is_multihop

    def test_reverse_direction(self, aleo_usdc_pool: ReserveSnapshot):
        quote = get_swap_quote(aleo_usdc_pool, USDC, 1000)

        assert quote is not None
        assert quote.token_out == ALEO
        assert quote.amount_out == constant_product.get_amount_out(1000, 10**6, 10**9, 30)

    def test_snapshot_order_does_not_matter(self):
        """A snapshot listing tokens in reverse order quotes identically."""
        forward = make_pool(ALEO, USDC, reserve1=10**9, reserve2=10**6)
        reverse = make_pool(USDC, ALEO, reserve1=10**6, reserve2=10**9)

        assert get_swap_quote(forward, ALEO, 10**6) == get_swap_quote(reverse, ALEO, 10**6)

    @pytest.mark.parametrize("amount_in", [0, -5])
    def test_non_positive_amount_returns_none(
        self, aleo_usdc_pool: ReserveSnapshot, amount_in: int
    ):
        assert get_swap_quote(aleo_usdc_pool, ALEO, amount_in) is None

    def test_empty_pool_returns_none(self, empty_pool: ReserveSnapshot):
        assert get_swap_quote(empty_pool, ALEO, 10**6) is None

    def test_unknown_token_raises(self, aleo_usdc_pool: ReserveSnapshot):
        with pytest.raises(ValueError, match="not in pool"):
            get_swap_quote(aleo_usdc_pool, UNKNOWN, 10**6)

    def test_oversized_input_returns_none(self, aleo_usdc_pool: ReserveSnapshot):
        """More than 10x the input reserve is rejected by the default guard."""
        assert get_swap_quote(aleo_usdc_pool, USDC, 10 * 10**6 + 1) is None
        assert get_swap_quote(aleo_usdc_pool, USDC, 10 * 10**6) is not None

    def test_rejection_is_logged(self, aleo_usdc_pool: ReserveSnapshot):
        with capture_logs() as logs:
            get_swap_quote(aleo_usdc_pool, USDC, 10 * 10**6 + 1)

        failures = [log for log in logs if log["event"] == "liquidity_check_failed"]
        assert len(failures) == 1
        assert failures[0]["reason"] == "exceeds available reserves"

    def test_drain_rejected(self, permissive_guard: LiquidityGuard):
        """An output of 99% of the output reserve is refused."""
        pool = make_pool(reserve1=1000, reserve2=1_000_000, swap_fee_bps=0, protocol_fee_bps=0)

        assert get_swap_quote(pool, ALEO, 99_000, permissive_guard) is None

    def test_near_drain_accepted(self, permissive_guard: LiquidityGuard):
        """98% of the output reserve is still quotable."""
        pool = make_pool(reserve1=1000, reserve2=1_000_000, swap_fee_bps=0, protocol_fee_bps=0)

        quote = get_swap_quote(pool, ALEO, 49_000, permissive_guard)

        assert quote is not None
        assert quote.amount_out == 980_000
        assert quote.fee_atomic == 0


class TestQuote:
    """Tests for the Quote value object."""

    def test_min_output(self):
        quote = Quote(
            token_in=ALEO,
            token_out=USDC,
            amount_in=10**6,
            amount_out=1000,
            price_impact_pct=Fraction(0),
            fee_atomic=3000,
        )
        assert quote.min_output(50) == 995

    def test_frozen(self, aleo_usdc_pool: ReserveSnapshot):
        quote = get_swap_quote(aleo_usdc_pool, ALEO, 10**6)
        with pytest.raises(AttributeError):
            quote.amount_out = 0  # type: ignore
