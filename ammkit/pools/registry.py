"""Pool registry for reserve snapshots.

Holds the latest ReserveSnapshot per token pair. The registry is owned by
the caller: the engine reads from it but never refreshes it. Adding a
snapshot for a pair that is already present replaces the stale one.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

import structlog

from ammkit.models.pool import ReserveSnapshot, canonical_pair

logger = structlog.get_logger()


class PoolRegistry:
    """Registry of pool snapshots keyed by canonical token pair."""

    def __init__(self, pools: Iterable[ReserveSnapshot] | None = None) -> None:
        """Initialize the registry with optional snapshots.

        Args:
            pools: Initial snapshots. If None, starts empty.
        """
        self._pools: dict[tuple[str, str], ReserveSnapshot] = {}
        # Secondary index: token id -> pair keys containing it
        self._pairs_by_token: dict[str, set[tuple[str, str]]] = {}

        if pools:
            for pool in pools:
                self.add_pool(pool)

    def add_pool(self, pool: ReserveSnapshot) -> None:
        """Add a snapshot, replacing any existing snapshot for the same pair."""
        pool = pool.canonical()
        pair_key = pool.pair
        if pair_key in self._pools:
            logger.debug(
                "pool_snapshot_replaced",
                pair=pair_key,
                reserve1=pool.reserve1,
                reserve2=pool.reserve2,
            )
        self._pools[pair_key] = pool
        for token in pair_key:
            self._pairs_by_token.setdefault(token, set()).add(pair_key)

    def get_pool(self, token_a: str, token_b: str) -> ReserveSnapshot | None:
        """Get the snapshot for a token pair (order independent)."""
        return self._pools.get(canonical_pair(token_a, token_b))

    def pools_for_token(self, token: str) -> list[ReserveSnapshot]:
        """All snapshots that contain token, in canonical pair order."""
        keys = sorted(self._pairs_by_token.get(token, ()))
        return [self._pools[key] for key in keys]

    def remove_pool(self, token_a: str, token_b: str) -> ReserveSnapshot | None:
        """Drop the snapshot for a pair; returns it, or None if absent."""
        pair_key = canonical_pair(token_a, token_b)
        pool = self._pools.pop(pair_key, None)
        if pool is not None:
            for token in pair_key:
                pairs = self._pairs_by_token.get(token)
                if pairs is not None:
                    pairs.discard(pair_key)
                    if not pairs:
                        del self._pairs_by_token[token]
        return pool

    def __contains__(self, pair: object) -> bool:
        if not isinstance(pair, tuple) or len(pair) != 2:
            return False
        return canonical_pair(*pair) in self._pools

    def __iter__(self) -> Iterator[ReserveSnapshot]:
        return iter(self._pools.values())

    def __len__(self) -> int:
        return len(self._pools)


__all__ = ["PoolRegistry"]
