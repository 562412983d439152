"""Fill adjustment hook applied between fill construction and path scoring."""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
from typing import Protocol, runtime_checkable

from swapper.models.fills import Fill
from swapper.models.types import MarketOperation


@runtime_checkable
class FillAdjustor(Protocol):
    """Protocol for post-processing a fill list before it is scored.

    Implementations may reprice, drop or reorder fills, e.g. to account for
    venue-specific slippage. They must not mutate the fills they receive.
    """

    def adjust_fills(
        self,
        side: MarketOperation,
        fills: Sequence[Fill],
        amount: Decimal,
    ) -> list[Fill]:
        """Return the adjusted fills.

        Args:
            side: Market side of the swap
            fills: Candidate fills, in path order
            amount: Target input of the swap

        Returns:
            The fills to build a path from
        """
        ...


class IdentityFillAdjustor:
    """Fill adjustor that passes fills through unchanged."""

    def adjust_fills(
        self,
        side: MarketOperation,
        fills: Sequence[Fill],
        amount: Decimal,
    ) -> list[Fill]:
        _ = (side, amount)
        return list(fills)


__all__ = ["FillAdjustor", "IdentityFillAdjustor"]
