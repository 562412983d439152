"""Pydantic models for sampled liquidity and token metadata.

These mirror what the liquidity sampler service returns. The wire client
itself lives outside this package; see swapper.sampler.
"""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field

from swapper.models.types import Address, Bytes, ERC20BridgeSource


class TokenInfo(BaseModel):
    """Token metadata returned by the sampler."""

    decimals: int = Field(ge=0, le=77)
    address: Address
    gas_cost: int = Field(default=0, alias="gasCost", ge=0)
    symbol: str

    model_config = {"populate_by_name": True}


class LiquidityCurvePoint(BaseModel):
    """One sampled point of a source's liquidity curve."""

    sell_amount: Decimal = Field(alias="sellAmount", ge=0)
    buy_amount: Decimal = Field(alias="buyAmount", ge=0)
    encoded_fill_data: Bytes = Field(default="0x", alias="encodedFillData")
    metadata: Any = None
    gas_cost: int = Field(default=0, alias="gasCost", ge=0)

    model_config = {"populate_by_name": True}


class SourceLiquidity(BaseModel):
    """All curves the sampler found for one source."""

    source: ERC20BridgeSource
    liquidity_curves: list[list[LiquidityCurvePoint]] = Field(
        default_factory=list, alias="liquidityCurves"
    )

    model_config = {"populate_by_name": True}


class LiquidityRequest(BaseModel):
    """Request for the liquidity curves of one source along a token path."""

    num_samples: int = Field(alias="numSamples", gt=0)
    token_path: list[Address] = Field(alias="tokenPath", min_length=2)
    input_amount: Decimal = Field(alias="inputAmount", ge=0)
    source: ERC20BridgeSource
    demand: bool = True

    model_config = {"populate_by_name": True}


class PriceRequest(BaseModel):
    """Request for the spot price along a token path."""

    token_path: list[Address] = Field(alias="tokenPath", min_length=2)
    demand: bool = True
    sources: list[ERC20BridgeSource]

    model_config = {"populate_by_name": True}


class DexSample(BaseModel):
    """A sampled liquidity point oriented by market side.

    ``input`` is the fixed side of the swap: the sell amount for sells and
    the buy amount for buys. ``fill_data`` is the opaque payload handed to
    the fee schedule and, later, to the settlement order.
    """

    source: ERC20BridgeSource
    input: Decimal = Field(ge=0)
    output: Decimal = Field(ge=0)
    encoded_fill_data: Bytes = Field(default="0x", alias="encodedFillData")
    metadata: Any = None
    gas_cost: int = Field(default=0, alias="gasCost", ge=0)
    fill_data: Any = Field(default=None, alias="fillData")

    model_config = {"populate_by_name": True}


__all__ = [
    "DexSample",
    "LiquidityCurvePoint",
    "LiquidityRequest",
    "PriceRequest",
    "SourceLiquidity",
    "TokenInfo",
]
