"""Tests for fill construction from native orders and sampled liquidity."""

from decimal import Decimal

import pytest

from swapper.constants import SOURCE_FLAGS, source_flag
from swapper.models import ERC20BridgeSource, FillType, MarketOperation
from swapper.routing.fills import dex_sample_to_fill, dex_samples_to_fills, native_orders_to_fills
from tests.helpers import make_native_order, make_sample

SELL = MarketOperation.SELL
BUY = MarketOperation.BUY


def adjusted_rate(side: MarketOperation, fill) -> Decimal:
    if side == SELL:
        return fill.adjusted_output / fill.input
    return fill.input / fill.adjusted_output


class TestNativeOrdersToFills:
    def test_sell_amounts_and_penalty(self, native_fee_schedule) -> None:
        order = make_native_order(taker_amount=100, maker_amount=200)
        (fill,) = native_orders_to_fills(
            SELL, [order], output_amount_per_eth=1, fees=native_fee_schedule
        )

        assert fill.source == ERC20BridgeSource.NATIVE
        assert fill.type == FillType.LIMIT
        assert fill.input == 100
        assert fill.output == 200
        assert fill.adjusted_output == 190
        assert fill.flags == SOURCE_FLAGS["LimitOrder"]
        assert fill.fill_data is order

    def test_taker_fee_counts_as_input_on_sell(self) -> None:
        order = make_native_order(taker_amount=100, maker_amount=200, taker_fee_amount=10)
        (fill,) = native_orders_to_fills(SELL, [order])
        assert fill.input == 110
        assert fill.output == 200

    def test_buy_side_swaps_amounts_and_adds_penalty(self, native_fee_schedule) -> None:
        order = make_native_order(taker_amount=100, maker_amount=200, taker_fee_amount=5)
        (fill,) = native_orders_to_fills(
            BUY, [order], output_amount_per_eth=1, fees=native_fee_schedule
        )

        assert fill.input == 200
        assert fill.output == 105
        assert fill.adjusted_output == 115

    def test_missing_fee_entry_costs_nothing(self) -> None:
        (fill,) = native_orders_to_fills(SELL, [make_native_order()], output_amount_per_eth=1)
        assert fill.adjusted_output == fill.output

    def test_rfq_orders_get_rfq_flag(self) -> None:
        order = make_native_order(order_type=FillType.RFQ)
        (fill,) = native_orders_to_fills(SELL, [order])
        assert fill.type == FillType.RFQ
        assert fill.flags == SOURCE_FLAGS["RfqOrder"]

    def test_sorted_by_descending_adjusted_rate(self) -> None:
        orders = [
            make_native_order(taker_amount=100, maker_amount=200),
            make_native_order(taker_amount=100, maker_amount=300),
            make_native_order(taker_amount=100, maker_amount=150),
        ]
        fills = native_orders_to_fills(SELL, orders)

        assert [f.output for f in fills] == [300, 200, 150]
        rates = [adjusted_rate(SELL, f) for f in fills]
        assert rates == sorted(rates, reverse=True)

    def test_buy_sorted_by_descending_adjusted_rate(self) -> None:
        orders = [
            make_native_order(taker_amount=100, maker_amount=200),
            make_native_order(taker_amount=50, maker_amount=200),
            make_native_order(taker_amount=200, maker_amount=200),
        ]
        fills = native_orders_to_fills(BUY, orders)

        assert [f.output for f in fills] == [50, 100, 200]
        rates = [adjusted_rate(BUY, f) for f in fills]
        assert rates == sorted(rates, reverse=True)

    def test_per_order_fee_reorders_by_adjusted_rate(self) -> None:
        orders = [
            make_native_order(taker_amount=100, maker_amount=200),
            make_native_order(taker_amount=100, maker_amount=180),
        ]
        fees = {
            ERC20BridgeSource.NATIVE: lambda o: Decimal(50) if o.fillable_maker_amount == 200 else 0
        }
        fills = native_orders_to_fills(SELL, orders, output_amount_per_eth=1, fees=fees)

        # Raw rates are 2 and 1.8; adjusted rates are 1.5 and 1.8
        assert [f.output for f in fills] == [180, 200]
        assert [f.adjusted_output for f in fills] == [180, 150]

    def test_reindexes_with_shared_source_path_id(self) -> None:
        orders = [
            make_native_order(taker_amount=100, maker_amount=150),
            make_native_order(taker_amount=100, maker_amount=300),
            make_native_order(taker_amount=100, maker_amount=200),
        ]
        fills = native_orders_to_fills(SELL, orders)

        assert [f.index for f in fills] == [0, 1, 2]
        assert [f.parent for f in fills] == [None, 0, 1]
        assert len({f.source_path_id for f in fills}) == 1

    def test_each_call_gets_a_fresh_source_path_id(self) -> None:
        first = native_orders_to_fills(SELL, [make_native_order()])
        second = native_orders_to_fills(SELL, [make_native_order()])
        assert first[0].source_path_id != second[0].source_path_id

    def test_clipping_is_per_order_not_cumulative(self) -> None:
        orders = [
            make_native_order(taker_amount=100, maker_amount=200),
            make_native_order(taker_amount=200, maker_amount=300),
        ]
        fills = native_orders_to_fills(SELL, orders, target_input=150)

        assert [f.input for f in fills] == [100, 150]
        assert fills[1].output == 225
        # Each order is clipped against the full target, so together
        # they exceed it
        assert sum(f.input for f in fills) > 150
        assert all(f.input <= 150 for f in fills)

    def test_clipped_order_bears_full_penalty(self, native_fee_schedule) -> None:
        order = make_native_order(taker_amount=200, maker_amount=400)
        (fill,) = native_orders_to_fills(
            SELL, [order], target_input=100, output_amount_per_eth=1, fees=native_fee_schedule
        )

        assert fill.input == 100
        assert fill.output == 200
        assert fill.adjusted_output == 190

    def test_buy_clips_maker_side_and_scales_output(self, native_fee_schedule) -> None:
        order = make_native_order(taker_amount=100, maker_amount=200)
        (fill,) = native_orders_to_fills(
            BUY, [order], target_input=50, output_amount_per_eth=1, fees=native_fee_schedule
        )

        assert fill.input == 50
        assert fill.output == 25
        assert fill.adjusted_output == 35

    def test_filters_non_positive_adjusted_rates(self, native_fee_schedule) -> None:
        orders = [
            make_native_order(taker_amount=100, maker_amount=5),
            make_native_order(taker_amount=100, maker_amount=10),
            make_native_order(taker_amount=100, maker_amount=200),
        ]
        fills = native_orders_to_fills(
            SELL, orders, output_amount_per_eth=1, fees=native_fee_schedule
        )

        assert len(fills) == 1
        assert all(adjusted_rate(SELL, f) > 0 for f in fills)

    def test_filtering_can_be_disabled(self, native_fee_schedule) -> None:
        orders = [
            make_native_order(taker_amount=100, maker_amount=5),
            make_native_order(taker_amount=100, maker_amount=200),
        ]
        fills = native_orders_to_fills(
            SELL,
            orders,
            output_amount_per_eth=1,
            fees=native_fee_schedule,
            filter_negative_adjusted_rate_orders=False,
        )

        assert len(fills) == 2
        assert fills[-1].adjusted_output == -5

    def test_zero_fillable_order(self) -> None:
        empty = make_native_order(taker_amount=0, maker_amount=0)

        assert native_orders_to_fills(SELL, [empty]) == []

        (fill,) = native_orders_to_fills(
            SELL, [empty], filter_negative_adjusted_rate_orders=False
        )
        assert fill.input == 0
        assert fill.output == 0

    def test_buy_with_zero_adjusted_output_is_rated_zero(self) -> None:
        free = make_native_order(taker_amount=0, maker_amount=200)
        priced = make_native_order(taker_amount=100, maker_amount=200)

        (fill,) = native_orders_to_fills(BUY, [free, priced])
        assert fill.output == 100

        fills = native_orders_to_fills(
            BUY, [free, priced], filter_negative_adjusted_rate_orders=False
        )
        assert [f.output for f in fills] == [100, 0]

    def test_fee_function_receives_the_order(self) -> None:
        seen = []
        order = make_native_order()
        native_orders_to_fills(
            SELL, [order], fees={ERC20BridgeSource.NATIVE: lambda o: seen.append(o) or 0}
        )
        assert seen == [order]


class TestDexSampleToFill:
    @pytest.fixture
    def fees(self):
        return {ERC20BridgeSource.UNISWAP_V2: lambda _fill_data: 5}

    def test_sell_subtracts_penalty(self, fees) -> None:
        fill = dex_sample_to_fill(SELL, make_sample(100, 200), output_amount_per_eth=2, fees=fees)

        assert fill.input == 100
        assert fill.output == 200
        assert fill.adjusted_output == 190
        assert fill.type == FillType.BRIDGE
        assert fill.flags == source_flag(ERC20BridgeSource.UNISWAP_V2)
        assert fill.index == 0
        assert fill.parent is None

    def test_buy_adds_penalty(self, fees) -> None:
        fill = dex_sample_to_fill(BUY, make_sample(100, 200), output_amount_per_eth=2, fees=fees)
        assert fill.adjusted_output == 210

    def test_missing_or_falsy_fee_is_zero(self) -> None:
        sample = make_sample(100, 200)
        no_entry = dex_sample_to_fill(SELL, sample, output_amount_per_eth=2, fees={})
        falsy = dex_sample_to_fill(
            SELL,
            sample,
            output_amount_per_eth=2,
            fees={ERC20BridgeSource.UNISWAP_V2: lambda _fill_data: None},
        )
        assert no_entry.adjusted_output == 200
        assert falsy.adjusted_output == 200

    def test_fee_function_receives_fill_data(self) -> None:
        payload = {"pool": "0xabc"}
        seen = []
        fill = dex_sample_to_fill(
            SELL,
            make_sample(100, 200, fill_data=payload),
            fees={ERC20BridgeSource.UNISWAP_V2: lambda fd: seen.append(fd) or 0},
        )
        assert seen == [payload]
        assert fill.fill_data is payload

    def test_points_of_one_curve_get_distinct_ids(self) -> None:
        first = dex_sample_to_fill(SELL, make_sample(100, 200))
        second = dex_sample_to_fill(SELL, make_sample(200, 390))
        assert first.source_path_id != second.source_path_id


class TestDexSamplesToFills:
    def test_builds_incremental_fills_sharing_one_id(self) -> None:
        curve = [make_sample(0, 0), make_sample(100, 200), make_sample(200, 350)]
        fills = dex_samples_to_fills(
            SELL,
            curve,
            output_amount_per_eth=2,
            fees={ERC20BridgeSource.UNISWAP_V2: lambda _fill_data: 5},
        )

        assert [(f.input, f.output) for f in fills] == [(100, 200), (100, 150)]
        # Only the first fill bears the fee
        assert [f.adjusted_output for f in fills] == [190, 150]
        assert [f.index for f in fills] == [0, 1]
        assert [f.parent for f in fills] == [None, 0]
        assert len({f.source_path_id for f in fills}) == 1

    def test_empty_curve(self) -> None:
        assert dex_samples_to_fills(BUY, []) == []
