"""Pytest configuration and fixtures."""

import pytest

from ammkit.guard import GuardConfig, LiquidityGuard
from ammkit.models import ReserveSnapshot
from ammkit.pools import PoolRegistry
from tests.helpers import ALEO, ETH, USDC, make_pool


@pytest.fixture
def aleo_usdc_pool() -> ReserveSnapshot:
    """Shallow USDC side: 1000 ALEO against 1 USDC, 0.3% fee."""
    return make_pool(ALEO, USDC, reserve1=10**9, reserve2=10**6)


@pytest.fixture
def aleo_eth_pool() -> ReserveSnapshot:
    """Deep pool with equal atomic reserves."""
    return make_pool(ALEO, ETH, reserve1=10**12, reserve2=10**12)


@pytest.fixture
def eth_usdc_pool() -> ReserveSnapshot:
    """Deep pool with equal atomic reserves."""
    return make_pool(ETH, USDC, reserve1=10**12, reserve2=10**12)


@pytest.fixture
def empty_pool() -> ReserveSnapshot:
    return make_pool(ALEO, USDC, reserve1=0, reserve2=0)


@pytest.fixture
def registry(
    aleo_usdc_pool: ReserveSnapshot,
    aleo_eth_pool: ReserveSnapshot,
    eth_usdc_pool: ReserveSnapshot,
) -> PoolRegistry:
    return PoolRegistry([aleo_usdc_pool, aleo_eth_pool, eth_usdc_pool])


@pytest.fixture
def permissive_guard() -> LiquidityGuard:
    """Guard whose input cap is loose enough to reach the drain threshold."""
    return LiquidityGuard(GuardConfig(max_input_multiple=1000))
