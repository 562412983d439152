"""Test helpers module for shared test utilities.

- constants: Token addresses
- factories: Fill, native order and sample factory functions
"""

from tests.helpers.constants import DAI, MAKER, USDC, WETH
from tests.helpers.factories import make_fill, make_native_order, make_sample

__all__ = [
    # Constants
    "WETH",
    "USDC",
    "DAI",
    "MAKER",
    # Factories
    "make_fill",
    "make_native_order",
    "make_sample",
]
