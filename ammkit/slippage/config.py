"""Adaptive slippage configuration.

The surcharge constants below were tuned empirically against live pools;
they are knobs, not derived quantities.
"""

from __future__ import annotations

from dataclasses import dataclass

from ammkit.constants import BPS_DENOMINATOR
from ammkit.env import env_int

# Global bounds on any recommendation (0.01% .. 50%)
MIN_SLIPPAGE_BPS = 1
MAX_SLIPPAGE_BPS = 5_000

# Added on top of the quote's own price impact
SLIPPAGE_BUFFER_BPS = 50

# Severity scaling: multiplier = 1 + min(MAX_SEVERITY_BOOST, severity / SEVERITY_DIVISOR_BPS)
SEVERITY_DIVISOR_BPS = 400
MAX_SEVERITY_BOOST = 3

# (severity threshold bps, surcharge bps), checked highest first
SEVERITY_SURCHARGES: tuple[tuple[int, int], ...] = ((800, 400), (400, 200))

# Absolute trade size surcharges (whole units of the input token)
PER_UNIT_SURCHARGE_BPS = 40
LARGE_TRADE_UNITS = 5
LARGE_TRADE_SURCHARGE_BPS = 250

# (output reserve below this many whole units, surcharge bps), shallowest first
DEPTH_SURCHARGES: tuple[tuple[int, int], ...] = ((250, 350), (500, 250), (1_000, 150))

# (price impact above this percent, surcharge bps), highest first
IMPACT_SURCHARGES: tuple[tuple[int, int], ...] = ((10, 400), (5, 250))


@dataclass(frozen=True)
class SlippageConfig:
    """All tunables of the adaptive slippage advisor.

    Attributes:
        global_min_bps: Lower clamp of every recommendation
        global_max_bps: Upper clamp of every recommendation
        buffer_bps: Fixed buffer added to the price impact
        severity_divisor_bps: Severity that adds +1x to the multiplier
        max_severity_boost: Cap on the severity part of the multiplier
        severity_surcharges: Tiered surcharges on severity
        per_unit_surcharge_bps: Surcharge per whole input unit
        large_trade_units: Whole units at which the flat large-trade surcharge applies
        large_trade_surcharge_bps: Flat large-trade surcharge
        depth_surcharges: Tiered surcharges on shallow output reserves
        impact_surcharges: Tiered surcharges on large price impact
    """

    global_min_bps: int = MIN_SLIPPAGE_BPS
    global_max_bps: int = MAX_SLIPPAGE_BPS
    buffer_bps: int = SLIPPAGE_BUFFER_BPS
    severity_divisor_bps: int = SEVERITY_DIVISOR_BPS
    max_severity_boost: int = MAX_SEVERITY_BOOST
    severity_surcharges: tuple[tuple[int, int], ...] = SEVERITY_SURCHARGES
    per_unit_surcharge_bps: int = PER_UNIT_SURCHARGE_BPS
    large_trade_units: int = LARGE_TRADE_UNITS
    large_trade_surcharge_bps: int = LARGE_TRADE_SURCHARGE_BPS
    depth_surcharges: tuple[tuple[int, int], ...] = DEPTH_SURCHARGES
    impact_surcharges: tuple[tuple[int, int], ...] = IMPACT_SURCHARGES

    def __post_init__(self) -> None:
        # A recommendation must always be adoptable by SlippageSettings
        if not MIN_SLIPPAGE_BPS <= self.global_min_bps <= self.global_max_bps <= BPS_DENOMINATOR:
            raise ValueError(
                f"Slippage bounds must satisfy {MIN_SLIPPAGE_BPS} <= min <= max <= "
                f"{BPS_DENOMINATOR}, got min={self.global_min_bps} max={self.global_max_bps}"
            )
        if self.buffer_bps < 0:
            raise ValueError(f"buffer_bps must be non-negative, got {self.buffer_bps}")
        if self.severity_divisor_bps <= 0:
            raise ValueError(
                f"severity_divisor_bps must be positive, got {self.severity_divisor_bps}"
            )

    @classmethod
    def from_env(cls) -> SlippageConfig:
        """Build a config from environment overrides.

        Configuration via environment variables:
        - AMMKIT_SLIPPAGE_MIN_BPS: Lower clamp (default: 1)
        - AMMKIT_SLIPPAGE_MAX_BPS: Upper clamp (default: 5000)
        - AMMKIT_SLIPPAGE_BUFFER_BPS: Buffer over price impact (default: 50)
        """
        return cls(
            global_min_bps=env_int("AMMKIT_SLIPPAGE_MIN_BPS", MIN_SLIPPAGE_BPS),
            global_max_bps=env_int("AMMKIT_SLIPPAGE_MAX_BPS", MAX_SLIPPAGE_BPS),
            buffer_bps=env_int("AMMKIT_SLIPPAGE_BUFFER_BPS", SLIPPAGE_BUFFER_BPS),
        )


# Default configuration instance
DEFAULT_SLIPPAGE_CONFIG = SlippageConfig()
