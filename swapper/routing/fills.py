"""Fill construction from native orders and sampled liquidity.

Every fill carries an ``adjusted_output``: the output with the source's
gas-equivalent cost folded in, priced in output token units via
eth_to_output_amount. Sells lose the penalty, buys pay it on top.
"""

from __future__ import annotations

import decimal
import secrets
from collections.abc import Sequence
from dataclasses import replace
from decimal import Decimal

import structlog

from swapper.constants import POSITIVE_INF, SOURCE_FLAGS, ZERO_AMOUNT, source_flag
from swapper.decimal_utils import DECIMAL_HIGH_PREC_CONTEXT, Amount, safe_div, to_decimal
from swapper.fees import FeeSchedule, resolve_fee
from swapper.models.fills import Fill
from swapper.models.liquidity import DexSample
from swapper.models.native import NativeOrderWithFillableAmounts
from swapper.models.types import ERC20BridgeSource, FillType, MarketOperation
from swapper.routing.conversion import eth_to_output_amount

logger = structlog.get_logger()


def new_source_path_id() -> str:
    """Generate a fresh random source path id (32 random bytes as hex)."""
    return "0x" + secrets.token_hex(32)


def _apply_penalty(side: MarketOperation, output: Decimal, penalty: Decimal) -> Decimal:
    with decimal.localcontext(DECIMAL_HIGH_PREC_CONTEXT):
        return output - penalty if side == MarketOperation.SELL else output + penalty


def native_orders_to_fills(
    side: MarketOperation,
    orders: Sequence[NativeOrderWithFillableAmounts],
    target_input: Amount = POSITIVE_INF,
    output_amount_per_eth: Amount = ZERO_AMOUNT,
    input_amount_per_eth: Amount = ZERO_AMOUNT,
    fees: FeeSchedule | None = None,
    filter_negative_adjusted_rate_orders: bool = True,
) -> list[Fill]:
    """Build one fill per native order, best adjusted rate first.

    Each order is clipped on its own against ``target_input`` (not against
    a running budget) and its output scaled down by the same fraction.
    The fee penalty is charged in full whatever the clipping, so a large
    order and one sized exactly at the target bear the same cost.

    All returned fills share one fresh source path id; after sorting each
    fill's ``index`` is its position and ``parent`` the previous index.

    A buy whose adjusted output is 0 would have an unbounded rate
    (input / 0). It is given rate 0 instead, so it sorts last and is
    dropped when filtering is on.

    Args:
        side: Market side of the swap
        orders: Native orders with their fillable amounts
        target_input: Input size the caller wants filled
        output_amount_per_eth: Output tokens per eth, 0 if unknown
        input_amount_per_eth: Input tokens per eth
        fees: Fee schedule; the Native entry is called with each order
        filter_negative_adjusted_rate_orders: Drop orders whose adjusted
            rate is <= 0

    Returns:
        Fills sorted by descending adjusted rate
    """
    fees = fees or {}
    target = to_decimal(target_input)
    out_per_eth = to_decimal(output_amount_per_eth)
    in_per_eth = to_decimal(input_amount_per_eth)
    source_path_id = new_source_path_id()

    rated: list[tuple[Decimal, Fill]] = []
    with decimal.localcontext(DECIMAL_HIGH_PREC_CONTEXT):
        for order in orders:
            maker_amount = order.fillable_maker_amount
            taker_amount = order.fillable_taker_amount + order.fillable_taker_fee_amount
            if side == MarketOperation.SELL:
                in_amount, out_amount = taker_amount, maker_amount
            else:
                in_amount, out_amount = maker_amount, taker_amount

            fee = resolve_fee(fees, ERC20BridgeSource.NATIVE, order)
            penalty = eth_to_output_amount(in_amount, out_amount, fee, in_per_eth, out_per_eth)

            clipped_input = min(target, in_amount)
            clipped_output = safe_div(clipped_input * out_amount, in_amount)
            adjusted_output = _apply_penalty(side, clipped_output, penalty)
            if side == MarketOperation.SELL:
                adjusted_rate = safe_div(adjusted_output, clipped_input)
            else:
                adjusted_rate = safe_div(clipped_input, adjusted_output)

            if filter_negative_adjusted_rate_orders and adjusted_rate <= 0:
                logger.debug(
                    "native_order_filtered",
                    side=side.value,
                    adjusted_rate=str(adjusted_rate),
                )
                continue

            flag = SOURCE_FLAGS["RfqOrder"] if order.is_rfq else SOURCE_FLAGS["LimitOrder"]
            fill = Fill(
                source=ERC20BridgeSource.NATIVE,
                type=order.type,
                input=clipped_input,
                output=clipped_output,
                adjusted_output=adjusted_output,
                flags=flag,
                source_path_id=source_path_id,
                fill_data=order,
            )
            rated.append((adjusted_rate, fill))

    # Stable sort: equal rates keep their order of arrival
    rated.sort(key=lambda item: item[0], reverse=True)
    fills = [
        replace(fill, index=i, parent=None if i == 0 else i - 1)
        for i, (_, fill) in enumerate(rated)
    ]

    logger.debug(
        "native_fills_built",
        side=side.value,
        orders=len(orders),
        fills=len(fills),
        source_path_id=source_path_id[:10],
    )
    return fills


def dex_sample_to_fill(
    side: MarketOperation,
    sample: DexSample,
    output_amount_per_eth: Amount = ZERO_AMOUNT,
    input_amount_per_eth: Amount = ZERO_AMOUNT,
    fees: FeeSchedule | None = None,
) -> Fill:
    """Build a single fill from one sampled liquidity point.

    Input and output pass through unchanged. The fill gets its own fresh
    source path id, so two points of one curve are never merged when the
    path is collapsed; use dex_samples_to_fills to keep a curve together.
    """
    fee = resolve_fee(fees or {}, sample.source, sample.fill_data)
    penalty = eth_to_output_amount(
        sample.input,
        sample.output,
        fee,
        to_decimal(input_amount_per_eth),
        to_decimal(output_amount_per_eth),
    )
    return Fill(
        source=sample.source,
        type=FillType.BRIDGE,
        input=sample.input,
        output=sample.output,
        adjusted_output=_apply_penalty(side, sample.output, penalty),
        flags=source_flag(sample.source),
        source_path_id=new_source_path_id(),
        fill_data=sample.fill_data,
    )


def dex_samples_to_fills(
    side: MarketOperation,
    samples: Sequence[DexSample],
    output_amount_per_eth: Amount = ZERO_AMOUNT,
    input_amount_per_eth: Amount = ZERO_AMOUNT,
    fees: FeeSchedule | None = None,
) -> list[Fill]:
    """Build incremental fills from one liquidity curve.

    Samples are cumulative and ordered by increasing input. Each fill holds
    the delta against the previous kept sample; zero-output samples are
    skipped. Only the first fill bears the source's fee, and all fills share
    one source path id so the curve collapses into one settlement order.
    """
    fees = fees or {}
    out_per_eth = to_decimal(output_amount_per_eth)
    in_per_eth = to_decimal(input_amount_per_eth)
    source_path_id = new_source_path_id()

    fills: list[Fill] = []
    prev: DexSample | None = None
    with decimal.localcontext(DECIMAL_HIGH_PREC_CONTEXT):
        for sample in samples:
            if sample.output == 0:
                continue
            in_amount = sample.input - (prev.input if prev else ZERO_AMOUNT)
            out_amount = sample.output - (prev.output if prev else ZERO_AMOUNT)
            penalty = ZERO_AMOUNT
            if prev is None:
                fee = resolve_fee(fees, sample.source, sample.fill_data)
                penalty = eth_to_output_amount(in_amount, out_amount, fee, in_per_eth, out_per_eth)
            index = len(fills)
            fills.append(
                Fill(
                    source=sample.source,
                    type=FillType.BRIDGE,
                    input=in_amount,
                    output=out_amount,
                    adjusted_output=_apply_penalty(side, out_amount, penalty),
                    flags=source_flag(sample.source),
                    source_path_id=source_path_id,
                    index=index,
                    parent=None if index == 0 else index - 1,
                    fill_data=sample.fill_data,
                )
            )
            prev = sample
    return fills


__all__ = [
    "dex_sample_to_fill",
    "dex_samples_to_fills",
    "native_orders_to_fills",
    "new_source_path_id",
]
