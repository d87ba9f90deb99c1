"""Protocol constants for the AMM pricing engine.

Centralizes fee denominators, token precision limits and pool defaults.
"""

# Basis-point denominator (10000 bps = 100%)
BPS_DENOMINATOR = 10_000

# Default pool fees in basis points
# Swap fee: 30 bps = 0.3%, charged on the input amount
DEFAULT_SWAP_FEE_BPS = 30
# Protocol fee: taken as a share of the swap fee amount (5 bps of the fee)
DEFAULT_PROTOCOL_FEE_BPS = 5

# Token precision
MIN_DECIMALS = 0
MAX_DECIMALS = 18

# On-chain amounts are u128
U128_MAX = 2**128 - 1

# Largest allowed larger:smaller ratio for an initial deposit (100000:1)
DEFAULT_MAX_POOL_RATIO = 100_000

# Default slippage tolerance applied when the caller has no preference (0.5%)
DEFAULT_SLIPPAGE_BPS = 50
