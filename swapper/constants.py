"""Routing constants.

Centralizes amount sentinels, source flag bits and sampler defaults.
"""

from decimal import Decimal

from swapper.models.types import ERC20BridgeSource

ZERO_AMOUNT = Decimal(0)

# Default target input: fill as much as the fills offer
POSITIVE_INF = Decimal("Infinity")

# Number of points sampled along each liquidity curve
DEFAULT_LIQUIDITY_SAMPLES = 16

# Bit flags describing fill origins. Native order kinds take the two low
# bits, then one bit per bridge source in declaration order.
SOURCE_FLAGS: dict[str, int] = {
    "RfqOrder": 1 << 0,
    "LimitOrder": 1 << 1,
    **{source.value: 1 << (i + 2) for i, source in enumerate(ERC20BridgeSource)},
}


def source_flag(source: ERC20BridgeSource) -> int:
    """Return the flag bit for a bridge source."""
    return SOURCE_FLAGS[source.value]
