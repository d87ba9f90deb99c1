"""Liquidity guard configuration."""

from __future__ import annotations

from dataclasses import dataclass

from ammkit.env import env_int

# Reject inputs larger than this multiple of the input reserve (fat-finger check)
MAX_INPUT_RESERVE_MULTIPLE = 10

# Reject swaps whose output reaches this share of the output reserve (9900 = 99%),
# which keeps a 1% reserve floor in the pool
DRAIN_THRESHOLD_BPS = 9_900


@dataclass(frozen=True)
class GuardConfig:
    """Thresholds for pre-trade liquidity checks.

    Attributes:
        max_input_multiple: amount_in may not exceed this multiple of reserve_in
        drain_threshold_bps: amount_out may not reach this share of reserve_out
    """

    max_input_multiple: int = MAX_INPUT_RESERVE_MULTIPLE
    drain_threshold_bps: int = DRAIN_THRESHOLD_BPS

    def __post_init__(self) -> None:
        if self.max_input_multiple <= 0:
            raise ValueError(f"max_input_multiple must be positive, got {self.max_input_multiple}")
        if not 0 < self.drain_threshold_bps <= 10_000:
            raise ValueError(
                f"drain_threshold_bps must be in (0, 10000], got {self.drain_threshold_bps}"
            )

    @classmethod
    def from_env(cls) -> GuardConfig:
        """Build a config from environment overrides.

        Configuration via environment variables:
        - AMMKIT_GUARD_MAX_INPUT_MULTIPLE (default: 10)
        - AMMKIT_GUARD_DRAIN_THRESHOLD_BPS (default: 9900)
        """
        return cls(
            max_input_multiple=env_int(
                "AMMKIT_GUARD_MAX_INPUT_MULTIPLE", MAX_INPUT_RESERVE_MULTIPLE
            ),
            drain_threshold_bps=env_int("AMMKIT_GUARD_DRAIN_THRESHOLD_BPS", DRAIN_THRESHOLD_BPS),
        )


# Default configuration instance
DEFAULT_GUARD_CONFIG = GuardConfig()
