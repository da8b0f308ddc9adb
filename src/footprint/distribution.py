"""
Percentage distribution across selected transport modes.

A distribution maps each selected mode id to the share of daily distance
travelled with it. Invariants:
- values are never negative
- values sum to 100 whenever at least one mode is selected
- the mapping is empty when no mode is selected
- only selected modes appear as keys

Two edits keep these invariants:
- toggle_mode: select/deselect a mode, resetting to an even split
- adjust_distribution: set one mode's share, absorbing the change
  proportionally in the other modes

Inputs are never mutated; every operation returns a new dict.
"""

import logging
from typing import Sequence

import numpy as np

from src.config import SUM_TOLERANCE

logger = logging.getLogger(__name__)

Distribution = dict[str, float]


def even_split(modes: Sequence[str]) -> Distribution:
    """
    Split 100% across modes in whole percentages.

    The first N-1 modes get floor(100/N); the last mode takes the remainder.

    Example:
        >>> even_split(["train", "bus", "walk"])
        {'train': 33, 'bus': 33, 'walk': 34}
    """
    if not modes:
        return {}

    share = int(np.floor(100 / len(modes)))
    distribution = {mode: share for mode in modes[:-1]}
    distribution[modes[-1]] = 100 - share * (len(modes) - 1)
    return distribution


def toggle_mode(
    distribution: Distribution,
    selected_modes: Sequence[str],
    mode_id: str,
) -> tuple[tuple[str, ...], Distribution]:
    """
    Select or deselect a transport mode.

    The distribution is rebuilt from scratch as an even split over the new
    selection; any manual adjustment made before the toggle is discarded.

    Args:
        distribution: Current distribution (not reused)
        selected_modes: Currently selected mode ids, in selection order
        mode_id: Mode to add (if unselected) or remove (if selected)

    Returns:
        Tuple of (new_selected_modes, new_distribution)
    """
    if mode_id in selected_modes:
        new_modes = tuple(m for m in selected_modes if m != mode_id)
    else:
        new_modes = tuple(selected_modes) + (mode_id,)

    new_distribution = even_split(new_modes)
    logger.debug(f"Toggled '{mode_id}': {dict(distribution)} -> {new_distribution}")
    return new_modes, new_distribution


def adjust_distribution(
    distribution: Distribution,
    selected_modes: Sequence[str],
    mode_id: str,
    new_value: float,
) -> Distribution:
    """
    Set one mode's percentage and rebalance the others.

    Steps:
    1. Clamp new_value to [0, 100] and assign it to mode_id.
    2. Reduce each other selected mode by its proportional share of the
       change (clamped at 0). Skipped when the other modes total 0.
    3. If the total is not exactly 100, spread the remaining error evenly
       over the other modes (clamped at 0).

    A single selected mode always holds 100, whatever value was requested.
    When every other mode was at 0, step 3 alone restores the total and a
    floating-point residue (within SUM_TOLERANCE) may remain.

    The input distribution must already be balanced (see is_balanced). An
    input that sums above 100 can push the correction below 0 for some
    modes; those are clamped and the output keeps the excess.

    Args:
        distribution: Current distribution, summing to 100
        selected_modes: Currently selected mode ids
        mode_id: Mode whose percentage is being set
        new_value: Requested percentage for mode_id

    Returns:
        New distribution over the selected modes

    Example:
        >>> adjust_distribution({"car": 50, "bus": 50}, ["car", "bus"], "car", 80)
        {'car': 80.0, 'bus': 20.0}
    """
    current = {mode: float(distribution.get(mode, 0.0)) for mode in selected_modes}

    if mode_id not in current:
        logger.debug(f"Mode '{mode_id}' is not selected, distribution unchanged")
        return current

    others = [mode for mode in selected_modes if mode != mode_id]
    if not others:
        current[mode_id] = 100.0
        return current

    value = float(np.clip(new_value, 0.0, 100.0))
    if value != new_value:
        logger.debug(f"Clamped '{mode_id}' percentage {new_value} -> {value}")

    delta = value - current[mode_id]
    current[mode_id] = value

    total_others = sum(current[mode] for mode in others)
    if total_others > 0:
        for mode in others:
            proportion = current[mode] / total_others
            current[mode] = max(0.0, current[mode] - delta * proportion)

    total = sum(current.values())
    if total != 100:
        adjustment = (100 - total) / len(others)
        for mode in others:
            current[mode] = max(0.0, current[mode] + adjustment)

    if not np.isclose(sum(current.values()), 100.0, rtol=0, atol=SUM_TOLERANCE):
        logger.debug(f"Distribution total {sum(current.values())} outside tolerance after rebalance")

    return current


def is_balanced(
    distribution: Distribution,
    selected_modes: Sequence[str],
    tolerance: float = SUM_TOLERANCE,
) -> bool:
    """
    Check the distribution invariants against a selection.

    Returns:
        True if keys match the selection, no value is negative, and values sum
        to 100 (within tolerance), or the mapping is empty with no selection.
    """
    if set(distribution) != set(selected_modes):
        return False
    if not selected_modes:
        return True
    values = np.asarray(list(distribution.values()), dtype=float)
    if np.any(values < 0):
        return False
    return bool(np.isclose(values.sum(), 100.0, rtol=0, atol=tolerance))
