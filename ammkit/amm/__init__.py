"""Constant-product AMM pricing.

Quotes against reserve snapshots live in ammkit.amm.quote, which also
depends on the liquidity guard.
"""

from ammkit.amm.constant_product import ConstantProduct, constant_product

__all__ = ["ConstantProduct", "constant_product"]
