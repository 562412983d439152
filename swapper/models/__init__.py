"""Data structures for swap routing."""

from swapper.models.fills import CollapsedFill, Fill
from swapper.models.liquidity import (
    DexSample,
    LiquidityCurvePoint,
    LiquidityRequest,
    PriceRequest,
    SourceLiquidity,
    TokenInfo,
)
from swapper.models.native import NativeOrderFields, NativeOrderWithFillableAmounts
from swapper.models.orders import OptimizedMarketOrder
from swapper.models.types import Address, Bytes, ERC20BridgeSource, FillType, MarketOperation

__all__ = [
    # Types
    "Address",
    "Bytes",
    "ERC20BridgeSource",
    "FillType",
    "MarketOperation",
    # Fills
    "Fill",
    "CollapsedFill",
    # Native orders
    "NativeOrderFields",
    "NativeOrderWithFillableAmounts",
    # Sampled liquidity
    "DexSample",
    "LiquidityCurvePoint",
    "LiquidityRequest",
    "PriceRequest",
    "SourceLiquidity",
    "TokenInfo",
    # Settlement
    "OptimizedMarketOrder",
]
