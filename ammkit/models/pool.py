"""Pydantic models for tokens and pool reserve snapshots.

Field aliases follow the camelCase keys produced by the on-chain mapping
reader; population by field name is also allowed.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from ammkit.constants import DEFAULT_PROTOCOL_FEE_BPS, DEFAULT_SWAP_FEE_BPS
from ammkit.models.types import AtomicAmount, Bps, Decimals, TokenId


class Token(BaseModel):
    """Token metadata from the token catalog."""

    model_config = {"frozen": True, "populate_by_name": True}

    id: TokenId
    decimals: Decimals
    symbol: str = Field(min_length=1)


def canonical_pair(token_a: str, token_b: str) -> tuple[str, str]:
    """Order two token ids the way the pool program keys them (smaller first)."""
    return (token_a, token_b) if token_a < token_b else (token_b, token_a)


class ReserveSnapshot(BaseModel):
    """Point-in-time reserves of a two-token pool.

    Each quote call receives a fresh snapshot; nothing here is cached or
    mutated by the engine.
    """

    model_config = {"frozen": True, "populate_by_name": True}

    token1_id: TokenId = Field(alias="token1Id")
    token2_id: TokenId = Field(alias="token2Id")
    reserve1: AtomicAmount
    reserve2: AtomicAmount
    swap_fee_bps: Bps = Field(default=DEFAULT_SWAP_FEE_BPS, alias="swapFeeBps")
    protocol_fee_bps: Bps = Field(default=DEFAULT_PROTOCOL_FEE_BPS, alias="protocolFeeBps")
    lp_total_supply: AtomicAmount = Field(default=0, alias="lpTotalSupply")

    @model_validator(mode="after")
    def _check_pair(self) -> ReserveSnapshot:
        if self.token1_id == self.token2_id:
            raise ValueError(f"Pool tokens must differ, got {self.token1_id} twice")
        if self.protocol_fee_bps > self.swap_fee_bps:
            raise ValueError(
                f"Protocol fee ({self.protocol_fee_bps} bps) exceeds "
                f"swap fee ({self.swap_fee_bps} bps)"
            )
        return self

    @property
    def pair(self) -> tuple[str, str]:
        """Canonical (sorted) token pair key."""
        return canonical_pair(self.token1_id, self.token2_id)

    @property
    def is_empty(self) -> bool:
        """True if either reserve is zero."""
        return self.reserve1 == 0 or self.reserve2 == 0

    def canonical(self) -> ReserveSnapshot:
        """Return this snapshot with token1 as the smaller token id."""
        if self.token1_id < self.token2_id:
            return self
        return self.model_copy(
            update={
                "token1_id": self.token2_id,
                "token2_id": self.token1_id,
                "reserve1": self.reserve2,
                "reserve2": self.reserve1,
            }
        )

    def has_token(self, token_id: str) -> bool:
        return token_id in (self.token1_id, self.token2_id)

    def get_reserves(self, token_in: str) -> tuple[int, int]:
        """Get reserves ordered as (reserve_in, reserve_out)."""
        if token_in == self.token1_id:
            return self.reserve1, self.reserve2
        elif token_in == self.token2_id:
            return self.reserve2, self.reserve1
        else:
            raise ValueError(f"Token {token_in} not in pool")

    def get_token_out(self, token_in: str) -> str:
        """Get the output token for a given input token."""
        if token_in == self.token1_id:
            return self.token2_id
        elif token_in == self.token2_id:
            return self.token1_id
        else:
            raise ValueError(f"Token {token_in} not in pool")
