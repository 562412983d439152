"""Conversion of eth-denominated costs into output token units."""

from __future__ import annotations

import decimal
from decimal import Decimal

from swapper.decimal_utils import DECIMAL_HIGH_PREC_CONTEXT, ZERO, Amount, to_decimal


def eth_to_output_amount(
    input: Decimal,
    output: Decimal,
    eth_amount: Amount,
    input_amount_per_eth: Decimal,
    output_amount_per_eth: Decimal,
) -> Decimal:
    """Price an eth-denominated cost in output token units.

    When a direct output/eth rate is known the cost is priced with it.
    Otherwise it is approximated through the input/eth rate scaled by the
    integer part of output / input:

        penalty = output_amount_per_eth * eth_amount
        penalty = input_amount_per_eth * eth_amount * floor(output / input)

    A zero ``input`` makes the integer ratio saturate to 0, so the fallback
    penalty is 0 rather than a division error.

    Args:
        input: Input amount of the fill or path
        output: Output amount of the fill or path
        eth_amount: Cost in eth (wei) units
        input_amount_per_eth: Input tokens per eth
        output_amount_per_eth: Output tokens per eth, 0 if unknown

    Returns:
        The penalty in output token units
    """
    eth = to_decimal(eth_amount)
    with decimal.localcontext(DECIMAL_HIGH_PREC_CONTEXT):
        if output_amount_per_eth != 0:
            return output_amount_per_eth * eth
        if input == 0:
            return ZERO
        return input_amount_per_eth * eth * (output // input)


__all__ = ["eth_to_output_amount"]
