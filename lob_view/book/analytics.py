"""Read-only analytics over a price-descending level sequence."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from lob_view.book.level import PriceLevel
from lob_view.core.errors import (
    InsufficientLiquidityError,
    InvalidArgumentError,
    NoLiquidityError,
)
from lob_view.core.types import Side, parse_side

_PERCENT = 100
_BPS_SCALE = 10_000


@dataclass(frozen=True, slots=True)
class SlippageEstimate:
    execution_price: float
    slippage_percent: float
    slippage_basis_points: float


def _side_levels(levels: Sequence[PriceLevel], side: Side) -> list[PriceLevel]:
    return [level for level in levels if level.side == side]


def best_ask(levels: Sequence[PriceLevel], offset: int = 0) -> float | None:
    """Lowest sell price, or the one `offset` levels further from the spread."""
    sells = _side_levels(levels, Side.SELL)
    idx = len(sells) - 1 - abs(offset)
    if idx < 0:
        return None
    return sells[idx].price


def best_bid(levels: Sequence[PriceLevel], offset: int = 0) -> float | None:
    """Highest buy price, or the one `offset` levels further from the spread."""
    buys = _side_levels(levels, Side.BUY)
    idx = abs(offset)
    if idx >= len(buys):
        return None
    return buys[idx].price


def _spread_ratio(levels: Sequence[PriceLevel], offset: int) -> float | None:
    ask = best_ask(levels, offset)
    bid = best_bid(levels, offset)
    if not bid or not ask:
        return None
    return 1 - bid / ask


def spread_percent(levels: Sequence[PriceLevel], offset: int = 0) -> float | None:
    ratio = _spread_ratio(levels, offset)
    return None if ratio is None else ratio * _PERCENT


def spread_basis_points(
    levels: Sequence[PriceLevel], offset: int = 0
) -> float | None:
    ratio = _spread_ratio(levels, offset)
    return None if ratio is None else ratio * _BPS_SCALE


def estimate_slippage(
    levels: Sequence[PriceLevel], order_size: float, side: Side | str
) -> SlippageEstimate | None:
    """Simulate a market order walking the opposite side of the book.

    A buy consumes sell levels cheapest first, a sell consumes buy levels
    highest first. Returns None when the reference best price is missing.
    """
    if order_size <= 0:
        raise InvalidArgumentError("order size is not positive")
    side = parse_side(side)

    relevant = _side_levels(levels, side.opposite)
    if not relevant:
        raise NoLiquidityError(f"no {side.opposite.value} levels in book")

    ordered = sorted(
        relevant,
        key=lambda level: level.price,
        reverse=side == Side.SELL,
    )

    remaining = order_size
    total_cost = 0.0
    for level in ordered:
        fill = min(remaining, level.qty)
        total_cost += fill * level.price
        remaining -= fill
        if remaining <= 0:
            break

    if remaining > 0:
        raise InsufficientLiquidityError(
            f"could not fill order: size={order_size} unfilled={remaining}"
        )

    execution_price = total_cost / order_size
    best_price = best_ask(levels) if side == Side.BUY else best_bid(levels)
    if not best_price:
        return None

    if side == Side.BUY:
        slippage_pct = (execution_price / best_price - 1) * _PERCENT
    else:
        slippage_pct = (best_price / execution_price - 1) * _PERCENT

    return SlippageEstimate(
        execution_price=execution_price,
        slippage_percent=slippage_pct,
        slippage_basis_points=slippage_pct * _PERCENT,
    )
