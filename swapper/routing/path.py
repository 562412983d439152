"""Candidate swap paths: sizing, cost adjustment, comparison and collapse.

A Path is built once from an immutable fill list and a target input. Its
size is folded at construction; nothing about it changes afterwards except
the one-time transition from Uncollapsed to Collapsed.
"""

from __future__ import annotations

import decimal
import threading
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from decimal import Decimal

import structlog

from swapper.constants import POSITIVE_INF, ZERO_AMOUNT
from swapper.decimal_utils import DECIMAL_HIGH_PREC_CONTEXT, Amount, to_decimal
from swapper.errors import TargetInputMismatchError
from swapper.models.fills import CollapsedFill, Fill
from swapper.models.orders import OptimizedMarketOrder
from swapper.models.types import ERC20BridgeSource, MarketOperation
from swapper.routing.conversion import eth_to_output_amount
from swapper.routing.orders import (
    DEFAULT_ORDER_FACTORY,
    CreateOrderFromPathOpts,
    OrderFactory,
    get_maker_taker_tokens,
)
from swapper.routing.rate_utils import get_complete_rate, get_rate

logger = structlog.get_logger()

# Maps the OR of a path's source flags to the eth cost of settling it
ExchangeProxyOverhead = Callable[[int], Amount]


def _no_overhead(source_flags: int) -> Decimal:
    return ZERO_AMOUNT


@dataclass(frozen=True)
class PathSize:
    """Input and output totals of a path."""

    input: Decimal
    output: Decimal


@dataclass(frozen=True)
class PathPenaltyOpts:
    """Path-level cost configuration.

    Attributes:
        output_amount_per_eth: Output tokens per eth, 0 if unknown
        input_amount_per_eth: Input tokens per eth
        exchange_proxy_overhead: Eth cost of settling a path, keyed by its
            combined source flags. Charged once per path.
        gas_price: Gas price in wei
    """

    output_amount_per_eth: Decimal = ZERO_AMOUNT
    input_amount_per_eth: Decimal = ZERO_AMOUNT
    exchange_proxy_overhead: ExchangeProxyOverhead = _no_overhead
    gas_price: Decimal = ZERO_AMOUNT


DEFAULT_PATH_PENALTY_OPTS = PathPenaltyOpts()


@dataclass(frozen=True)
class Uncollapsed:
    """Path state before collapse()."""


@dataclass(frozen=True)
class Collapsed:
    """Path state after collapse(): merged fills and their settlement orders."""

    collapsed_fills: tuple[CollapsedFill, ...]
    orders: tuple[OptimizedMarketOrder, ...]


PathState = Uncollapsed | Collapsed

UNCOLLAPSED = Uncollapsed()


def collapse_fills(fills: Sequence[Fill]) -> tuple[CollapsedFill, ...]:
    """Merge maximal contiguous runs of fills sharing a source path id.

    A fill joins the previous run only if it is not a native fill and its
    source path id equals the run's. Native fills always start a new run.
    """
    runs: list[list[Fill]] = []
    for fill in fills:
        if (
            runs
            and fill.source != ERC20BridgeSource.NATIVE
            and runs[-1][0].source_path_id == fill.source_path_id
        ):
            runs[-1].append(fill)
            continue
        runs.append([fill])

    collapsed: list[CollapsedFill] = []
    with decimal.localcontext(DECIMAL_HIGH_PREC_CONTEXT):
        for run in runs:
            first = run[0]
            collapsed.append(
                CollapsedFill(
                    source_path_id=first.source_path_id,
                    source=first.source,
                    type=first.type,
                    input=sum((f.input for f in run), ZERO_AMOUNT),
                    output=sum((f.output for f in run), ZERO_AMOUNT),
                    fill_data=run[-1].fill_data,
                    sub_fills=tuple(run),
                )
            )
    return tuple(collapsed)


class Path:
    """An ordered set of fills forming a candidate route up to a target size.

    Running input never exceeds ``target_input``: the fill that crosses the
    target contributes its output pro rata to the input it can still use,
    but its penalty in full. Cost is modelled per fill, not per unit.

    A Path may be shared between threads; collapse() runs at most once.
    """

    def __init__(
        self,
        side: MarketOperation,
        fills: Sequence[Fill],
        target_input: Amount = POSITIVE_INF,
        penalty_opts: PathPenaltyOpts = DEFAULT_PATH_PENALTY_OPTS,
    ) -> None:
        self.side = side
        self.fills: tuple[Fill, ...] = tuple(fills)
        self.target_input = to_decimal(target_input)
        self.penalty_opts = penalty_opts
        self.source_flags = 0

        self._size = PathSize(ZERO_AMOUNT, ZERO_AMOUNT)
        self._adjusted_size = PathSize(ZERO_AMOUNT, ZERO_AMOUNT)
        for fill in self.fills:
            self.source_flags |= fill.flags
            self._add_fill_size(fill)

        self._state: PathState = UNCOLLAPSED
        self._collapse_lock = threading.Lock()

    @classmethod
    def create(
        cls,
        side: MarketOperation,
        fills: Sequence[Fill],
        target_input: Amount = POSITIVE_INF,
        penalty_opts: PathPenaltyOpts = DEFAULT_PATH_PENALTY_OPTS,
    ) -> Path:
        """Build a path and fold the size of its fills."""
        return cls(side, fills, target_input, penalty_opts)

    @property
    def size(self) -> PathSize:
        """Unadjusted input and output, clipped at the target."""
        return self._size

    @property
    def state(self) -> PathState:
        return self._state

    @property
    def is_collapsed(self) -> bool:
        return isinstance(self._state, Collapsed)

    def _add_fill_size(self, fill: Fill) -> None:
        with decimal.localcontext(DECIMAL_HIGH_PREC_CONTEXT):
            size, adjusted = self._size, self._adjusted_size
            if size.input + fill.input > self.target_input:
                remaining_input = self.target_input - size.input
                scaled_output = fill.output * remaining_input / fill.input
                # Penalty is not interpolated
                penalty = fill.adjusted_output - fill.output
                self._size = PathSize(self.target_input, size.output + scaled_output)
                self._adjusted_size = PathSize(
                    self.target_input, adjusted.output + scaled_output + penalty
                )
            else:
                self._size = PathSize(size.input + fill.input, size.output + fill.output)
                self._adjusted_size = PathSize(
                    adjusted.input + fill.input, adjusted.output + fill.adjusted_output
                )

    def adjusted_size(self) -> PathSize:
        """Size with fill penalties and the path overhead folded into output."""
        input, output = self._adjusted_size.input, self._adjusted_size.output
        opts = self.penalty_opts
        gas_overhead = opts.exchange_proxy_overhead(self.source_flags)
        path_penalty = eth_to_output_amount(
            input,
            output,
            gas_overhead,
            opts.input_amount_per_eth,
            opts.output_amount_per_eth,
        )
        with decimal.localcontext(DECIMAL_HIGH_PREC_CONTEXT):
            if self.side == MarketOperation.SELL:
                return PathSize(input, output - path_penalty)
            return PathSize(input, output + path_penalty)

    def adjusted_rate(self) -> Decimal:
        """Rate of the path after penalties."""
        adjusted = self.adjusted_size()
        return get_rate(self.side, adjusted.input, adjusted.output)

    def adjusted_complete_rate(self) -> Decimal:
        """Adjusted rate, scoring any unfilled part of the target as zero."""
        adjusted = self.adjusted_size()
        return get_complete_rate(self.side, adjusted.input, adjusted.output, self.target_input)

    def best_rate(self) -> Decimal:
        """Best single-fill rate in the path; an optimistic bound."""
        return max(
            (get_rate(self.side, fill.input, fill.output) for fill in self.fills),
            default=ZERO_AMOUNT,
        )

    def is_adjusted_better_than(self, other: Path) -> bool:
        """Return True if this path beats ``other`` after penalties.

        While either path falls short of the target, the one that fills more
        input wins. Once both are complete, the adjusted complete rates are
        compared.

        Raises:
            TargetInputMismatchError: If the paths have different targets
        """
        if self.target_input != other.target_input:
            raise TargetInputMismatchError(
                f"Target input mismatch: {self.target_input} != {other.target_input}"
            )
        target = self.target_input
        input, other_input = self._size.input, other._size.input
        if input < target or other_input < target:
            return input > other_input
        return self.adjusted_complete_rate() > other.adjusted_complete_rate()

    def collapse(
        self,
        opts: CreateOrderFromPathOpts,
        order_factory: OrderFactory = DEFAULT_ORDER_FACTORY,
    ) -> Collapsed:
        """Merge same-origin fills and build one settlement order per run.

        Native runs go through the native order constructor, everything else
        through the bridge order constructor. The result is computed once;
        later calls return the same Collapsed state.
        """
        with self._collapse_lock:
            if isinstance(self._state, Collapsed):
                return self._state

            maker_token, taker_token = get_maker_taker_tokens(opts)
            collapsed_fills = collapse_fills(self.fills)
            orders = tuple(
                order_factory.create_native_order(fill, opts.side)
                if fill.is_native
                else order_factory.create_bridge_order(fill, maker_token, taker_token, opts.side)
                for fill in collapsed_fills
            )
            self._state = Collapsed(collapsed_fills=collapsed_fills, orders=orders)

        logger.debug(
            "path_collapsed",
            side=self.side.value,
            fills=len(self.fills),
            collapsed_fills=len(collapsed_fills),
            orders=len(orders),
        )
        return self._state


__all__ = [
    "Collapsed",
    "DEFAULT_PATH_PENALTY_OPTS",
    "ExchangeProxyOverhead",
    "Path",
    "PathPenaltyOpts",
    "PathSize",
    "PathState",
    "Uncollapsed",
    "collapse_fills",
]
