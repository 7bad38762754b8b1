"""Target width generation for fluid-width srcset attributes."""

from __future__ import annotations

import math

from packages.imgix_core.domain.srcset import (
    DEFAULT_WIDTHS,
    MAX_WIDTH,
    MIN_WIDTH,
    TOLERANCE,
    WidthRange,
)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def target_widths(
    min_width: int = MIN_WIDTH,
    max_width: int = MAX_WIDTH,
    tolerance: float = TOLERANCE,
) -> list[int]:
    """Return ascending widths from ``min_width`` to ``max_width``.

    Each step grows the previous width by ``2 * tolerance`` so that any rendered
    width is within ``tolerance`` of the closest candidate. ``max_width`` always
    closes the sequence, even if the last geometric step overshoots it.

    Raises:
        URLBuilderError: If the range or tolerance is invalid.
    """
    return widths_for_range(WidthRange(min_width, max_width, tolerance))


def widths_for_range(width_range: WidthRange) -> list[int]:
    if width_range.is_default:
        return list(DEFAULT_WIDTHS)
    return _geometric_widths(width_range)


def _geometric_widths(width_range: WidthRange) -> list[int]:
    begin, end = width_range.min_width, width_range.max_width
    if begin == end:
        return [begin]

    growth = 1.0 + width_range.tolerance * 2.0
    widths: list[int] = []
    current = float(begin)
    while current < end:
        width = _round_half_up(current)
        # Tiny widths can round onto the previous value.
        if not widths or width > widths[-1]:
            widths.append(width)
        current = current * growth if current > 0 else 1.0

    if widths[-1] < end:
        widths.append(end)
    return widths
