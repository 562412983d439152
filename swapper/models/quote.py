"""Pydantic models for the best-path quote API."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field

from swapper.models.liquidity import DexSample
from swapper.models.native import NativeOrderWithFillableAmounts
from swapper.models.types import Address, ERC20BridgeSource, FillType, MarketOperation


class QuoteRequest(BaseModel):
    """A swap to route, with the liquidity already fetched."""

    side: MarketOperation
    target_input: Decimal = Field(alias="targetInput", gt=0)
    input_token: Address = Field(alias="inputToken")
    output_token: Address = Field(alias="outputToken")
    output_amount_per_eth: Decimal = Field(default=Decimal(0), alias="outputAmountPerEth", ge=0)
    input_amount_per_eth: Decimal = Field(default=Decimal(0), alias="inputAmountPerEth", ge=0)
    gas_price: Decimal = Field(default=Decimal(0), alias="gasPrice", ge=0)
    exchange_proxy_overhead_gas: int = Field(default=0, alias="exchangeProxyOverheadGas", ge=0)
    native_orders: list[NativeOrderWithFillableAmounts] = Field(
        default_factory=list, alias="nativeOrders"
    )
    liquidity_curves: list[list[DexSample]] = Field(default_factory=list, alias="liquidityCurves")

    model_config = {"populate_by_name": True}


class SizeResponse(BaseModel):
    """Input and output totals."""

    input: Decimal
    output: Decimal


class OrderResponse(BaseModel):
    """One settlement order of the chosen path."""

    source: ERC20BridgeSource
    type: FillType
    maker_token: str = Field(alias="makerToken")
    taker_token: str = Field(alias="takerToken")
    maker_amount: str = Field(alias="makerAmount")
    taker_amount: str = Field(alias="takerAmount")
    fill_count: int = Field(alias="fillCount")

    model_config = {"populate_by_name": True}


class QuoteResponse(BaseModel):
    """The best path found for a quote request, if any."""

    found: bool
    size: SizeResponse | None = None
    adjusted_size: SizeResponse | None = Field(default=None, alias="adjustedSize")
    adjusted_rate: Decimal | None = Field(default=None, alias="adjustedRate")
    candidates: int = 0
    orders: list[OrderResponse] = Field(default_factory=list)

    model_config = {"populate_by_name": True}

    @classmethod
    def empty(cls, candidates: int = 0) -> QuoteResponse:
        """Create a response for a request no path could serve."""
        return cls(found=False, candidates=candidates)


__all__ = ["OrderResponse", "QuoteRequest", "QuoteResponse", "SizeResponse"]
