"""Swap routing core.

Module structure:
- conversion.py: eth cost to output token conversion
- fills.py: Fill construction from native orders and sampled liquidity
- fill_adjustor.py: FillAdjustor hook and its identity implementation
- rate_utils.py: rate and complete-rate computations
- path.py: Path sizing, adjustment, comparison and collapse
- orders.py: settlement order construction
- selection.py: candidate path building and best path selection
"""

from swapper.routing.conversion import eth_to_output_amount
from swapper.routing.fill_adjustor import FillAdjustor, IdentityFillAdjustor
from swapper.routing.fills import dex_sample_to_fill, dex_samples_to_fills, native_orders_to_fills
from swapper.routing.orders import (
    DEFAULT_ORDER_FACTORY,
    CreateOrderFromPathOpts,
    DefaultOrderFactory,
    OrderFactory,
)
from swapper.routing.path import (
    DEFAULT_PATH_PENALTY_OPTS,
    Collapsed,
    Path,
    PathPenaltyOpts,
    PathSize,
    Uncollapsed,
)
from swapper.routing.rate_utils import get_complete_rate, get_rate
from swapper.routing.selection import build_candidate_paths, select_best_path

__all__ = [
    "Collapsed",
    "CreateOrderFromPathOpts",
    "DEFAULT_ORDER_FACTORY",
    "DEFAULT_PATH_PENALTY_OPTS",
    "DefaultOrderFactory",
    "FillAdjustor",
    "IdentityFillAdjustor",
    "OrderFactory",
    "Path",
    "PathPenaltyOpts",
    "PathSize",
    "Uncollapsed",
    "build_candidate_paths",
    "dex_sample_to_fill",
    "dex_samples_to_fills",
    "eth_to_output_amount",
    "get_complete_rate",
    "get_rate",
    "native_orders_to_fills",
    "select_best_path",
]
