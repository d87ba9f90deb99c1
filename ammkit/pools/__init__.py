"""Pool snapshot storage."""

from ammkit.pools.registry import PoolRegistry

__all__ = ["PoolRegistry"]
