"""Tests for pre-trade liquidity checks."""

import pytest

from ammkit.errors import ExceedsReserves, PoolDrainRejected, ZeroReserves
from ammkit.guard import (
    DEFAULT_GUARD_CONFIG,
    GuardConfig,
    GuardError,
    LiquidityCheck,
    LiquidityGuard,
    check_liquidity,
)
from ammkit.models import ReserveSnapshot
from tests.helpers import ALEO, USDC, make_pool

LOOSE = GuardConfig(max_input_multiple=1000)


class TestCheckLiquidity:
    """Tests for check_liquidity rules."""

    def test_zero_reserves(self):
        result = check_liquidity(100, 0, 1000)
        assert not result.is_valid
        assert result.error == GuardError.ZERO_RESERVES
        assert result.reason == "pool empty"

        assert check_liquidity(100, 1000, 0).error == GuardError.ZERO_RESERVES

    def test_input_cap_boundary(self):
        """Exactly 10x the input reserve is allowed, one more is not."""
        assert check_liquidity(10_000, 1000, 10**9).is_valid

        result = check_liquidity(10_001, 1000, 10**9)
        assert result.error == GuardError.EXCEEDS_RESERVES
        assert result.reason == "exceeds available reserves"

    @pytest.mark.parametrize("reserve_out", [1, 10**6, 10**30])
    def test_eleven_times_input_rejected_for_any_output_reserve(self, reserve_out: int):
        result = check_liquidity(11 * 1000, 1000, reserve_out)
        assert result.error == GuardError.EXCEEDS_RESERVES

    def test_drain_threshold_is_inclusive(self):
        """Reaching exactly 99% of the output reserve is rejected."""
        # out = floor(99000 * 1e6 / 100000) = 990000 = 99%
        result = check_liquidity(99_000, 1000, 1_000_000, fee_bps=0, config=LOOSE)
        assert result.error == GuardError.POOL_DRAIN
        assert result.reason == "would drain pool"
        assert result.amount_out == 990_000

    def test_below_drain_threshold(self):
        # out = floor(49000 * 1e6 / 50000) = 980000 = 98%
        result = check_liquidity(49_000, 1000, 1_000_000, fee_bps=0, config=LOOSE)
        assert result.is_valid
        assert result.reason is None
        assert result.amount_out == 980_000

    def test_default_cap_keeps_output_below_drain(self):
        """Under the default 10x cap the output stays below 10/11 of reserve_out."""
        result = check_liquidity(10_000, 1000, 1_000_000, fee_bps=0)
        assert result.is_valid
        assert result.amount_out * 11 <= 10 * 1_000_000

    def test_fee_reduces_output_checked(self):
        """The drain check uses the fee-adjusted output."""
        plain = check_liquidity(49_000, 1000, 1_000_000, fee_bps=0, config=LOOSE)
        with_fee = check_liquidity(49_000, 1000, 1_000_000, fee_bps=30, config=LOOSE)
        assert with_fee.amount_out < plain.amount_out

    def test_valid_result_carries_output(self):
        result = check_liquidity(10**6, 10**9, 10**6)
        assert result == LiquidityCheck.valid(996)


class TestLiquidityCheck:
    """Tests for LiquidityCheck."""

    @pytest.mark.parametrize(
        ("error", "exception"),
        [
            (GuardError.ZERO_RESERVES, ZeroReserves),
            (GuardError.EXCEEDS_RESERVES, ExceedsReserves),
            (GuardError.POOL_DRAIN, PoolDrainRejected),
        ],
    )
    def test_raise_for_invalid(self, error: GuardError, exception: type[Exception]):
        with pytest.raises(exception, match=error.value):
            LiquidityCheck.invalid(error).raise_for_invalid()

    def test_raise_for_valid_is_noop(self):
        LiquidityCheck.valid(10).raise_for_invalid()


class TestLiquidityGuard:
    """Tests for LiquidityGuard against snapshots."""

    def test_default_config(self):
        assert LiquidityGuard().config is DEFAULT_GUARD_CONFIG

    def test_check_uses_pool_direction_and_fee(self, aleo_usdc_pool: ReserveSnapshot):
        result = LiquidityGuard().check(aleo_usdc_pool, ALEO, 10**6)
        assert result.is_valid
        assert result.amount_out == 996

    def test_enforce_returns_output(self, aleo_usdc_pool: ReserveSnapshot):
        assert LiquidityGuard().enforce(aleo_usdc_pool, ALEO, 10**6) == 996

    def test_enforce_raises(self):
        pool = make_pool(reserve1=1000, reserve2=1_000_000, swap_fee_bps=0, protocol_fee_bps=0)
        guard = LiquidityGuard(LOOSE)
        with pytest.raises(PoolDrainRejected):
            guard.enforce(pool, ALEO, 99_000)

    def test_enforce_empty_pool(self, empty_pool: ReserveSnapshot):
        with pytest.raises(ZeroReserves):
            LiquidityGuard().enforce(empty_pool, USDC, 1)


class TestGuardConfig:
    """Tests for GuardConfig validation and environment overrides."""

    def test_defaults(self):
        assert DEFAULT_GUARD_CONFIG.max_input_multiple == 10
        assert DEFAULT_GUARD_CONFIG.drain_threshold_bps == 9_900

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"max_input_multiple": 0},
            {"drain_threshold_bps": 0},
            {"drain_threshold_bps": 10_001},
        ],
    )
    def test_invalid_values_raise(self, kwargs: dict):
        with pytest.raises(ValueError):
            GuardConfig(**kwargs)

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("AMMKIT_GUARD_MAX_INPUT_MULTIPLE", "3")
        monkeypatch.setenv("AMMKIT_GUARD_DRAIN_THRESHOLD_BPS", "9500")

        config = GuardConfig.from_env()

        assert config.max_input_multiple == 3
        assert config.drain_threshold_bps == 9_500

    def test_from_env_defaults(self, monkeypatch):
        monkeypatch.delenv("AMMKIT_GUARD_MAX_INPUT_MULTIPLE", raising=False)
        monkeypatch.delenv("AMMKIT_GUARD_DRAIN_THRESHOLD_BPS", raising=False)

        assert GuardConfig.from_env() == DEFAULT_GUARD_CONFIG
