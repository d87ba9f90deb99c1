"""Environment variable helpers for configuration overrides."""

import os

import structlog

logger = structlog.get_logger()


def env_int(name: str, default: int) -> int:
    """Read an integer override, falling back to default if unset or unparsable."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(
            "config_env_parse_failed",
            variable=name,
            raw_value=raw,
            using_default=default,
        )
        return default
