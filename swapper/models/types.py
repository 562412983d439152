"""Shared type definitions for swap routing models."""

from enum import Enum, IntEnum
from typing import Annotated

from pydantic import Field


class MarketOperation(str, Enum):
    """Whether the swap fixes the input (sell) or the output (buy)."""

    SELL = "Sell"
    BUY = "Buy"


class ERC20BridgeSource(str, Enum):
    """Liquidity venues a fill can be drawn from.

    Declaration order matters: each member owns one bit in SOURCE_FLAGS.
    """

    NATIVE = "Native"
    UNISWAP = "Uniswap"
    UNISWAP_V2 = "Uniswap_V2"
    CURVE = "Curve"
    LIQUIDITY_PROVIDER = "LiquidityProvider"
    BALANCER = "Balancer"
    BALANCER_V2 = "Balancer_V2"
    BANCOR = "Bancor"
    MSTABLE = "mStable"
    MOONISWAP = "Mooniswap"
    MULTI_HOP = "MultiHop"
    SHELL = "Shell"
    SUSHISWAP = "SushiSwap"
    DODO = "DODO"
    DODO_V2 = "DODO_V2"
    KYBER_DMM = "KyberDMM"
    SADDLE = "Saddle"
    UNISWAP_V3 = "Uniswap_V3"
    CURVE_V2 = "Curve_V2"
    LIDO = "Lido"
    MAKER_PSM = "MakerPsm"
    SYNAPSE = "Synapse"


class FillType(IntEnum):
    """Order kind tag carried by fills and settlement orders."""

    BRIDGE = 0
    LIMIT = 1
    RFQ = 2
    OTC = 3


# Ethereum address (40 hex chars after 0x prefix)
Address = Annotated[str, Field(pattern=r"^0x[a-fA-F0-9]{40}$")]

# Arbitrary hex bytes
Bytes = Annotated[str, Field(pattern=r"^0x[a-fA-F0-9]*$")]


def normalize_address(address: str) -> str:
    """Normalize an Ethereum address to lowercase with 0x prefix."""
    addr = address.lower()
    if not addr.startswith("0x"):
        addr = "0x" + addr
    return addr
