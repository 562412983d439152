"""Pytest configuration and fixtures."""

from decimal import Decimal

import pytest

from swapper.fees import FeeSchedule
from swapper.models import ERC20BridgeSource, MarketOperation
from swapper.routing.orders import CreateOrderFromPathOpts
from tests.helpers import DAI, WETH


@pytest.fixture
def sell_opts() -> CreateOrderFromPathOpts:
    """Order options for selling WETH for DAI."""
    return CreateOrderFromPathOpts(side=MarketOperation.SELL, input_token=WETH, output_token=DAI)


@pytest.fixture
def buy_opts() -> CreateOrderFromPathOpts:
    """Order options for buying WETH with DAI."""
    return CreateOrderFromPathOpts(side=MarketOperation.BUY, input_token=WETH, output_token=DAI)


@pytest.fixture
def native_fee_schedule() -> FeeSchedule:
    """A schedule charging 10 eth units per native order."""
    return {ERC20BridgeSource.NATIVE: lambda _order: Decimal(10)}
