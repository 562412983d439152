"""Scoring candidate fill lists and picking the best path.

Which fill lists to try is decided upstream; this module turns each list
into a Path and keeps the one that compares best.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import structlog

from swapper.constants import POSITIVE_INF
from swapper.decimal_utils import Amount, to_decimal
from swapper.models.fills import Fill
from swapper.models.types import MarketOperation
from swapper.routing.fill_adjustor import FillAdjustor, IdentityFillAdjustor
from swapper.routing.path import DEFAULT_PATH_PENALTY_OPTS, Path, PathPenaltyOpts

logger = structlog.get_logger()


def build_candidate_paths(
    side: MarketOperation,
    fill_lists: Iterable[Sequence[Fill]],
    target_input: Amount = POSITIVE_INF,
    penalty_opts: PathPenaltyOpts = DEFAULT_PATH_PENALTY_OPTS,
    fill_adjustor: FillAdjustor | None = None,
) -> list[Path]:
    """Adjust each candidate fill list and build one Path per non-empty list.

    Args:
        side: Market side of the swap
        fill_lists: Candidate fill lists, each in path order
        target_input: Input size the caller wants filled
        penalty_opts: Path-level cost configuration
        fill_adjustor: Hook run on every list; identity by default

    Returns:
        Paths in the order of their fill lists
    """
    adjustor = fill_adjustor if fill_adjustor is not None else IdentityFillAdjustor()
    target = to_decimal(target_input)
    paths: list[Path] = []
    for i, fills in enumerate(fill_lists):
        adjusted = adjustor.adjust_fills(side, fills, target)
        if not adjusted:
            logger.debug("fill_list_dropped", index=i, reason="empty_after_adjustment")
            continue
        paths.append(Path.create(side, adjusted, target, penalty_opts))
    return paths


def select_best_path(paths: Iterable[Path]) -> Path | None:
    """Return the path that wins every is_adjusted_better_than comparison.

    The incumbent is kept on ties, so among equals the earliest path wins.

    Raises:
        TargetInputMismatchError: If the paths have different targets
    """
    best: Path | None = None
    candidates = 0
    for path in paths:
        candidates += 1
        if best is None or path.is_adjusted_better_than(best):
            best = path

    if best is not None:
        logger.debug(
            "best_path_selected",
            candidates=candidates,
            side=best.side.value,
            input=str(best.size.input),
            adjusted_rate=str(best.adjusted_rate()),
        )
    return best


__all__ = ["build_candidate_paths", "select_best_path"]
