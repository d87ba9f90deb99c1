"""Test helpers module for shared test utilities.

- constants: Token ids and decimals
- factories: Reserve snapshot factory
"""

from tests.helpers.constants import ALEO, ETH, TOKEN_DECIMALS, UNKNOWN, USDC
from tests.helpers.factories import make_pool

__all__ = [
    # Constants
    "ALEO",
    "ETH",
    "USDC",
    "UNKNOWN",
    "TOKEN_DECIMALS",
    # Factories
    "make_pool",
]
