"""Fee schedules: per-source gas-equivalent costs of a fill.

A fee schedule maps a liquidity source to a callable that prices the fill
data of that source in eth (wei). Sources without an entry cost nothing.

Usage:
    from swapper.fees import build_fee_schedule

    schedule = build_fee_schedule(
        {ERC20BridgeSource.UNISWAP_V2: lambda fill_data: 90_000},
        gas_price=30 * 10**9,
    )
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from decimal import Decimal
from typing import Any

from swapper.decimal_utils import ZERO, Amount, to_decimal
from swapper.models.types import ERC20BridgeSource

FeeFunction = Callable[[Any], Amount | None]
FeeSchedule = Mapping[ERC20BridgeSource, FeeFunction]
GasSchedule = Mapping[ERC20BridgeSource, Callable[[Any], int | None]]


def resolve_fee(fees: FeeSchedule, source: ERC20BridgeSource, fill_data: Any) -> Decimal:
    """Look up and evaluate the fee for a source.

    Missing entries and falsy results (None, 0) are treated as zero cost.
    Float results are read through their decimal repr, so 1.5 costs exactly
    1.5.
    """
    fee_fn = fees.get(source)
    if fee_fn is None:
        return ZERO
    fee = fee_fn(fill_data)
    if not fee:
        return ZERO
    if isinstance(fee, float):
        return Decimal(str(fee))
    return to_decimal(fee)


def build_fee_schedule(gas_schedule: GasSchedule, gas_price: Amount) -> dict[ERC20BridgeSource, FeeFunction]:
    """Turn a per-source gas estimator into an eth-denominated fee schedule.

    Args:
        gas_schedule: Source -> callable returning the gas used by a fill
        gas_price: Gas price in wei

    Returns:
        Source -> callable returning gas * gas_price
    """
    price = to_decimal(gas_price)

    def _priced(gas_fn: Callable[[Any], int | None]) -> FeeFunction:
        def fee(fill_data: Any) -> Decimal:
            return Decimal(gas_fn(fill_data) or 0) * price

        return fee

    return {source: _priced(gas_fn) for source, gas_fn in gas_schedule.items()}


__all__ = ["FeeFunction", "FeeSchedule", "GasSchedule", "build_fee_schedule", "resolve_fee"]
