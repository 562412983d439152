"""Tests for settlement order construction helpers."""

from decimal import Decimal

from swapper.models import CollapsedFill, ERC20BridgeSource, FillType, MarketOperation
from swapper.routing.orders import (
    CreateOrderFromPathOpts,
    get_fill_token_amounts,
    get_maker_taker_tokens,
)
from tests.helpers import DAI, WETH


def make_collapsed(input: str, output: str) -> CollapsedFill:
    return CollapsedFill(
        source_path_id="0x01",
        source=ERC20BridgeSource.CURVE,
        type=FillType.BRIDGE,
        input=Decimal(input),
        output=Decimal(output),
    )


class TestMakerTakerTokens:
    def test_sell_taker_pays_input(self) -> None:
        opts = CreateOrderFromPathOpts(MarketOperation.SELL, input_token=WETH, output_token=DAI)
        assert get_maker_taker_tokens(opts) == (DAI, WETH)

    def test_buy_taker_receives_input(self) -> None:
        opts = CreateOrderFromPathOpts(MarketOperation.BUY, input_token=WETH, output_token=DAI)
        assert get_maker_taker_tokens(opts) == (WETH, DAI)


class TestFillTokenAmounts:
    def test_sell_rounds_maker_down_taker_up(self) -> None:
        amounts = get_fill_token_amounts(make_collapsed("10.2", "20.7"), MarketOperation.SELL)
        assert amounts == (20, 11)

    def test_buy_rounds_maker_up_taker_down(self) -> None:
        amounts = get_fill_token_amounts(make_collapsed("10.2", "20.7"), MarketOperation.BUY)
        assert amounts == (11, 20)

    def test_integral_amounts_unchanged(self) -> None:
        amounts = get_fill_token_amounts(make_collapsed("10", "20"), MarketOperation.SELL)
        assert amounts == (20, 10)
