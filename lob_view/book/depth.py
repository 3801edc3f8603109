"""Level store helpers: price lookup, ordering and depth trimming.

The store is a single list holding both sides, kept sorted by price
descending. Lookups match on price alone; a price is expected to host at
most one level at a time.
"""

from __future__ import annotations

from lob_view.book.level import PriceLevel
from lob_view.core.types import Side


def find_price_index(levels: list[PriceLevel], price: float) -> int:
    """Return the index of the first level at `price`, or -1."""
    for idx, level in enumerate(levels):
        if level.price == price:
            return idx
    return -1


def sort_levels(levels: list[PriceLevel]) -> list[PriceLevel]:
    """Sort in place, highest price first, lowest price last."""
    levels.sort(key=lambda level: level.price, reverse=True)
    return levels


def max_per_side(max_depth: int) -> int:
    # half of max_depth, rounding .5 away from zero
    return (max_depth + 1) // 2


def count_sides(levels: list[PriceLevel]) -> tuple[int, int]:
    buys = 0
    sells = 0
    for level in levels:
        if level.side == Side.SELL:
            sells += 1
        else:
            buys += 1
    return buys, sells


def _trim_front(levels: list[PriceLevel], total: int) -> None:
    if total > 0:
        del levels[:total]


def _trim_back(levels: list[PriceLevel], total: int) -> None:
    if total > 0:
        del levels[len(levels) - total :]


def trim_to_max_depth(levels: list[PriceLevel], max_depth: int) -> list[PriceLevel]:
    """Trim in place to `max_depth`, evenly across both sides.

    Per-side excess is computed from the pre-trim counts: sells are removed
    from the front of the sorted list, buys from the back. Anything still
    above `max_depth` afterwards (odd depth with balanced sides, duplicate
    prices) is split between the front and the back.
    """
    if len(levels) <= max_depth:
        return levels

    buys, sells = count_sides(levels)
    per_side = max_per_side(max_depth)
    buys_to_trim = buys - per_side
    sells_to_trim = sells - per_side

    sort_levels(levels)
    _trim_front(levels, sells_to_trim)
    _trim_back(levels, buys_to_trim)

    excess = len(levels) - max_depth
    if excess > 0:
        _trim_front(levels, excess // 2)
        _trim_back(levels, excess - excess // 2)
    return levels
