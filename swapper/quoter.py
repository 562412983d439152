"""Quoter: routes a fully fetched swap request to its best path.

The Quoter turns native orders and liquidity curves into candidate fill
lists, scores them as paths, and collapses the winner into settlement
orders. It is the entry point used by the API.
"""

from __future__ import annotations

from dataclasses import replace
from decimal import Decimal
from typing import Any

import structlog

from swapper.config import DEFAULT_ROUTER_CONFIG, RouterConfig
from swapper.fees import FeeFunction, build_fee_schedule
from swapper.models.fills import Fill
from swapper.models.liquidity import DexSample
from swapper.models.quote import OrderResponse, QuoteRequest, QuoteResponse, SizeResponse
from swapper.models.types import ERC20BridgeSource, normalize_address
from swapper.routing.fill_adjustor import FillAdjustor, IdentityFillAdjustor
from swapper.routing.fills import dex_samples_to_fills, native_orders_to_fills
from swapper.routing.orders import CreateOrderFromPathOpts
from swapper.routing.path import PathPenaltyOpts
from swapper.routing.selection import build_candidate_paths, select_best_path

logger = structlog.get_logger()


def _gas_cost(sample: Any) -> int:
    return sample.gas_cost if isinstance(sample, DexSample) else 0


class Quoter:
    """Finds the best path for a quote request.

    Args:
        config: Router configuration. Uses DEFAULT_ROUTER_CONFIG if not provided.
        fill_adjustor: Hook run on each candidate fill list. Identity by default.
    """

    def __init__(
        self,
        config: RouterConfig | None = None,
        fill_adjustor: FillAdjustor | None = None,
    ) -> None:
        self.config = config or DEFAULT_ROUTER_CONFIG
        self.fill_adjustor = fill_adjustor or IdentityFillAdjustor()

    def _fee_schedule(self, request: QuoteRequest) -> dict[ERC20BridgeSource, FeeFunction]:
        native_gas = self.config.native_order_gas
        gas_schedule = {source: _gas_cost for source in ERC20BridgeSource}
        gas_schedule[ERC20BridgeSource.NATIVE] = lambda _order: native_gas
        return build_fee_schedule(gas_schedule, request.gas_price)

    def _penalty_opts(self, request: QuoteRequest) -> PathPenaltyOpts:
        overhead = Decimal(request.exchange_proxy_overhead_gas) * request.gas_price

        def exchange_proxy_overhead(source_flags: int) -> Decimal:
            return overhead if source_flags else Decimal(0)

        return PathPenaltyOpts(
            output_amount_per_eth=request.output_amount_per_eth,
            input_amount_per_eth=request.input_amount_per_eth,
            exchange_proxy_overhead=exchange_proxy_overhead,
            gas_price=request.gas_price,
        )

    def candidate_fill_lists(self, request: QuoteRequest) -> list[list[Fill]]:
        """Build the native fill list and one fill list per liquidity curve."""
        fees = self._fee_schedule(request)
        fill_lists: list[list[Fill]] = []
        if request.native_orders:
            fill_lists.append(
                native_orders_to_fills(
                    request.side,
                    request.native_orders,
                    request.target_input,
                    request.output_amount_per_eth,
                    request.input_amount_per_eth,
                    fees,
                    self.config.filter_negative_adjusted_rate_orders,
                )
            )
        for curve in request.liquidity_curves:
            fill_lists.append(_curve_to_fills(request, curve, fees))
        return fill_lists

    def quote(self, request: QuoteRequest) -> QuoteResponse:
        """Route a request and return the collapsed best path.

        Raises:
            SwapperError: On invalid routing input
        """
        paths = build_candidate_paths(
            request.side,
            self.candidate_fill_lists(request),
            request.target_input,
            self._penalty_opts(request),
            self.fill_adjustor,
        )
        best = select_best_path(paths)
        if best is None:
            logger.info("no_path_found", side=request.side.value, candidates=len(paths))
            return QuoteResponse.empty(candidates=len(paths))

        collapsed = best.collapse(
            CreateOrderFromPathOpts(
                side=request.side,
                input_token=normalize_address(request.input_token),
                output_token=normalize_address(request.output_token),
            )
        )
        adjusted = best.adjusted_size()
        logger.info(
            "quote_built",
            side=request.side.value,
            candidates=len(paths),
            orders=len(collapsed.orders),
            input=str(best.size.input),
            output=str(best.size.output),
        )
        return QuoteResponse(
            found=True,
            size=SizeResponse(input=best.size.input, output=best.size.output),
            adjusted_size=SizeResponse(input=adjusted.input, output=adjusted.output),
            adjusted_rate=best.adjusted_rate(),
            candidates=len(paths),
            orders=[
                OrderResponse(
                    source=order.source,
                    type=order.type,
                    maker_token=order.maker_token,
                    taker_token=order.taker_token,
                    maker_amount=str(order.maker_amount),
                    taker_amount=str(order.taker_amount),
                    fill_count=sum(len(f.sub_fills) for f in order.fills),
                )
                for order in collapsed.orders
            ],
        )


def _curve_to_fills(
    request: QuoteRequest, curve: list[DexSample], fees: dict[ERC20BridgeSource, FeeFunction]
) -> list[Fill]:
    """Turn one liquidity curve into fills.

    Fees are priced from each point's own gas cost, so every sample is
    handed to the fee schedule in place of its fill data. The resulting
    fills carry the caller's fill data for settlement, or the sample
    itself when the caller sent none.
    """
    priced = [sample.model_copy(update={"fill_data": sample}) for sample in curve]
    fills = dex_samples_to_fills(
        request.side,
        priced,
        request.output_amount_per_eth,
        request.input_amount_per_eth,
        fees,
    )
    return [replace(fill, fill_data=_settlement_data(fill.fill_data)) for fill in fills]


def _settlement_data(sample: DexSample) -> Any:
    return sample.fill_data if sample.fill_data is not None else sample


def get_default_quoter() -> Quoter:
    """Create a quoter configured from the environment."""
    return Quoter(config=RouterConfig.from_env())


__all__ = ["Quoter", "get_default_quoter"]
