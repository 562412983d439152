"""Settlement order construction from collapsed fills.

Byte encoding of settlement orders is the job of the settlement layer; the
factories here only decide tokens and integer amounts.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_CEILING, ROUND_FLOOR, Decimal
from typing import Protocol

from swapper.models.fills import CollapsedFill
from swapper.models.native import NativeOrderWithFillableAmounts
from swapper.models.orders import OptimizedMarketOrder
from swapper.models.types import ERC20BridgeSource, FillType, MarketOperation


@dataclass(frozen=True)
class CreateOrderFromPathOpts:
    """Context needed to turn a path into settlement orders."""

    side: MarketOperation
    input_token: str
    output_token: str


def get_maker_taker_tokens(opts: CreateOrderFromPathOpts) -> tuple[str, str]:
    """Return (maker_token, taker_token) for the swap.

    The taker pays the input on sells and receives the input on buys.
    """
    if opts.side == MarketOperation.SELL:
        return opts.output_token, opts.input_token
    return opts.input_token, opts.output_token


def _round_down(amount: Decimal) -> int:
    return int(amount.to_integral_value(rounding=ROUND_FLOOR))


def _round_up(amount: Decimal) -> int:
    return int(amount.to_integral_value(rounding=ROUND_CEILING))


def get_fill_token_amounts(fill: CollapsedFill, side: MarketOperation) -> tuple[int, int]:
    """Return (maker_amount, taker_amount) as integers.

    Sells round the maker amount down and the taker amount up. Buys round
    the maker amount up and the taker amount down.
    """
    if side == MarketOperation.SELL:
        return _round_down(fill.output), _round_up(fill.input)
    return _round_up(fill.input), _round_down(fill.output)


class OrderFactory(Protocol):
    """Protocol for building settlement orders from collapsed fills."""

    def create_native_order(self, fill: CollapsedFill, side: MarketOperation) -> OptimizedMarketOrder:
        """Build the settlement order for one native order."""
        ...

    def create_bridge_order(
        self,
        fill: CollapsedFill,
        maker_token: str,
        taker_token: str,
        side: MarketOperation,
    ) -> OptimizedMarketOrder:
        """Build the settlement order for a run of bridge fills."""
        ...


class DefaultOrderFactory:
    """Builds OptimizedMarketOrder values without encoding them."""

    def create_native_order(self, fill: CollapsedFill, side: MarketOperation) -> OptimizedMarketOrder:
        native: NativeOrderWithFillableAmounts = fill.fill_data
        maker_amount, taker_amount = get_fill_token_amounts(fill, side)
        return OptimizedMarketOrder(
            source=ERC20BridgeSource.NATIVE,
            type=fill.type,
            maker_token=native.order.maker_token,
            taker_token=native.order.taker_token,
            maker_amount=maker_amount,
            taker_amount=taker_amount,
            fill_data=native,
            fills=(fill,),
        )

    def create_bridge_order(
        self,
        fill: CollapsedFill,
        maker_token: str,
        taker_token: str,
        side: MarketOperation,
    ) -> OptimizedMarketOrder:
        maker_amount, taker_amount = get_fill_token_amounts(fill, side)
        return OptimizedMarketOrder(
            source=fill.source,
            type=FillType.BRIDGE,
            maker_token=maker_token,
            taker_token=taker_token,
            maker_amount=maker_amount,
            taker_amount=taker_amount,
            fill_data=fill.fill_data,
            fills=(fill,),
        )


DEFAULT_ORDER_FACTORY = DefaultOrderFactory()


__all__ = [
    "CreateOrderFromPathOpts",
    "DEFAULT_ORDER_FACTORY",
    "DefaultOrderFactory",
    "OrderFactory",
    "get_fill_token_amounts",
    "get_maker_taker_tokens",
]
