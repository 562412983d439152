"""Swap path scoring and settlement order assembly."""

__version__ = "0.1.0"

from swapper.models import CollapsedFill, Fill, MarketOperation  # noqa: E402
from swapper.routing import Path, PathPenaltyOpts, select_best_path  # noqa: E402

__all__ = [
    "CollapsedFill",
    "Fill",
    "MarketOperation",
    "Path",
    "PathPenaltyOpts",
    "select_best_path",
    "__version__",
]
