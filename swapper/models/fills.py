"""Fill data structures.

A Fill is the atomic unit of tradable liquidity. Fills born from the same
construction call share a ``source_path_id``; the ``parent`` of a fill is
the index of its predecessor within that group, never an object reference.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from swapper.models.types import ERC20BridgeSource, FillType


@dataclass(frozen=True)
class Fill:
    """One unit of liquidity from a single source.

    Attributes:
        source: Liquidity venue the fill comes from
        type: Order kind tag (bridge for DEX samples)
        input: Amount of the fixed side consumed by this fill
        output: Amount of the other side produced (sell) or paid (buy)
        adjusted_output: Output after the gas-equivalent penalty
            (reduced on sell, increased on buy)
        flags: Source flag bits (see SOURCE_FLAGS)
        source_path_id: Opaque id shared by fills of one construction call
        index: Position within the source path group
        parent: Index of the previous fill in the group, None for the first
        fill_data: Opaque per-source settlement payload
    """

    source: ERC20BridgeSource
    type: FillType
    input: Decimal
    output: Decimal
    adjusted_output: Decimal
    flags: int
    source_path_id: str
    index: int = 0
    parent: int | None = None
    fill_data: Any = None


@dataclass(frozen=True)
class CollapsedFill:
    """A maximal contiguous run of same-origin fills merged into one unit.

    Native fills are never merged, so a native CollapsedFill always holds
    exactly one sub fill.
    """

    source_path_id: str
    source: ERC20BridgeSource
    type: FillType
    input: Decimal
    output: Decimal
    fill_data: Any = None
    sub_fills: tuple[Fill, ...] = field(default_factory=tuple)

    @property
    def is_native(self) -> bool:
        """Return True if this collapsed fill wraps a native order."""
        return self.source == ERC20BridgeSource.NATIVE


__all__ = ["Fill", "CollapsedFill"]
