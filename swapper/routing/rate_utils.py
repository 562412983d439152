"""Rate computations shared by path scoring.

Rates are oriented so that larger is always better, whatever the side.
Any zero amount yields a zero rate.
"""

from __future__ import annotations

import decimal
from decimal import Decimal

from swapper.constants import ZERO_AMOUNT
from swapper.decimal_utils import DECIMAL_HIGH_PREC_CONTEXT
from swapper.models.types import MarketOperation


def get_rate(side: MarketOperation, input: Decimal, output: Decimal) -> Decimal:
    """Output per input for sells, input per output for buys."""
    if input == 0 or output == 0:
        return ZERO_AMOUNT
    with decimal.localcontext(DECIMAL_HIGH_PREC_CONTEXT):
        return output / input if side == MarketOperation.SELL else input / output


def get_complete_rate(
    side: MarketOperation,
    input: Decimal,
    output: Decimal,
    target_input: Decimal,
) -> Decimal:
    """Rate penalised by the fraction of the target left unfilled.

    The rate is scaled by input / target_input, so the unfilled remainder
    contributes nothing:

        sell: (output / input) * (input / target) = output / target
        buy:  (input / output) * (input / target)
    """
    if input == 0 or output == 0 or target_input == 0:
        return ZERO_AMOUNT
    with decimal.localcontext(DECIMAL_HIGH_PREC_CONTEXT):
        if side == MarketOperation.SELL:
            return output / target_input
        return (input / output) * (input / target_input)


__all__ = ["get_complete_rate", "get_rate"]
