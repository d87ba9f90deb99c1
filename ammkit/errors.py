"""AMM engine error classes.

Every error is local and recoverable: the worst outcome for a caller is
"no quote available". Nothing in the engine retries.
"""


class AmmError(Exception):
    """Base error for AMM engine operations."""

    pass


class InvalidAmount(AmmError, ValueError):
    """Amount string or decimals value cannot be converted."""

    pass


class ZeroReserves(AmmError):
    """Pool has an empty reserve on at least one side."""

    pass


class ExceedsReserves(AmmError):
    """Requested amount cannot be served by the pool reserves."""

    pass


class PoolDrainRejected(AmmError):
    """Swap output would take the pool below its reserve floor."""

    pass


class RatioOutOfBounds(AmmError):
    """Initial deposit ratio exceeds the configured maximum."""

    pass


class BelowMinimumOutput(AmmError):
    """Swap output is below the slippage-protected minimum."""

    def __init__(self, amount_out: int, min_out: int) -> None:
        super().__init__(f"Output {amount_out} is below minimum {min_out}")
        self.amount_out = amount_out
        self.min_out = min_out
