"""Settlement order values produced by collapsing a path."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from swapper.models.fills import CollapsedFill
from swapper.models.types import ERC20BridgeSource, FillType


@dataclass(frozen=True)
class OptimizedMarketOrder:
    """A settlement-ready order derived from one collapsed fill.

    Amounts are integers. On a sell the maker amount (output) rounds down
    and the taker amount (input) rounds up. On a buy the maker amount
    (the fixed input) rounds up and the taker amount (output) rounds down.
    """

    source: ERC20BridgeSource
    type: FillType
    maker_token: str
    taker_token: str
    maker_amount: int
    taker_amount: int
    fill_data: Any
    fills: tuple[CollapsedFill, ...]

    @property
    def is_native(self) -> bool:
        """Return True if this order settles a native order."""
        return self.source == ERC20BridgeSource.NATIVE


__all__ = ["OptimizedMarketOrder"]
