"""Single-symbol order book state.

Applies snapshots and delete/upsert/insert deltas keyed by price, keeps the
store sorted by price descending and bounded by `max_depth`, and answers
best bid/ask, spread and slippage queries against the latest state.
"""

from __future__ import annotations

import copy
import logging
from typing import Callable, Iterable, Sequence

from lob_view.book import analytics
from lob_view.book.analytics import SlippageEstimate
from lob_view.book.depth import find_price_index, sort_levels, trim_to_max_depth
from lob_view.book.level import PriceLevel
from lob_view.core.config import BookOptions
from lob_view.core.errors import StaleUpdateError
from lob_view.core.time import check_timestamp_order, now_ms
from lob_view.core.types import Side

logger = logging.getLogger(__name__)


class OrderBookState:
    def __init__(
        self,
        symbol: str,
        options: BookOptions | None = None,
        *,
        clock: Callable[[], int] = now_ms,
    ) -> None:
        self.symbol = symbol
        self.options = options or BookOptions()
        self._clock = clock
        self._levels: list[PriceLevel] = []
        self.last_update_timestamp = int(clock())

    @property
    def max_depth(self) -> int:
        return self.options.max_depth

    @property
    def check_timestamps(self) -> bool:
        return self.options.check_timestamps

    def __len__(self) -> int:
        return len(self._levels)

    def snapshot_state(self) -> list[PriceLevel]:
        """Return a deep copy of the current levels, safe to retain."""
        return copy.deepcopy(self._levels)

    def reset(self) -> "OrderBookState":
        """Empty the store. The last update timestamp is kept."""
        self._levels = []
        return self

    def check_timestamp(self, timestamp: int) -> None:
        if not self.check_timestamps:
            return
        try:
            check_timestamp_order(self.last_update_timestamp, timestamp)
        except StaleUpdateError:
            logger.warning(
                "rejected stale update for %s: last=%s current=%s",
                self.symbol,
                self.last_update_timestamp,
                timestamp,
            )
            raise

    def apply_snapshot(
        self, levels: Iterable[PriceLevel], timestamp: int | None = None
    ) -> "OrderBookState":
        """Replace the whole book with `levels`."""
        ts = self._resolve_timestamp(timestamp)
        self.check_timestamp(ts)
        self._levels = list(levels)
        return self._finish_update("snapshot", ts)

    def apply_delta(
        self,
        deletes: Sequence[PriceLevel] = (),
        upserts: Sequence[PriceLevel] = (),
        inserts: Sequence[PriceLevel] = (),
        timestamp: int | None = None,
    ) -> "OrderBookState":
        """Apply deletes, then upserts, then inserts, each matched by price.

        An insert hitting an existing price replaces that level and is then
        appended as well, leaving two levels at that price.
        """
        ts = self._resolve_timestamp(timestamp)
        self.check_timestamp(ts)

        book = self._levels
        for level in deletes:
            idx = find_price_index(book, level.price)
            if idx != -1:
                del book[idx]

        for level in upserts:
            idx = find_price_index(book, level.price)
            if idx != -1:
                book[idx] = level
            else:
                book.append(level)

        for level in inserts:
            idx = find_price_index(book, level.price)
            if idx != -1:
                book[idx] = level
            book.append(level)

        return self._finish_update("delta", ts)

    def _resolve_timestamp(self, timestamp: int | None) -> int:
        if timestamp is None:
            return int(self._clock())
        return timestamp

    def _finish_update(self, kind: str, timestamp: int) -> "OrderBookState":
        trim_to_max_depth(self._levels, self.max_depth)
        sort_levels(self._levels)
        self.last_update_timestamp = timestamp
        logger.log(
            logging.INFO if self.options.trace_log else logging.DEBUG,
            "%s applied to %s: depth=%d ts=%s",
            kind,
            self.symbol,
            len(self._levels),
            timestamp,
        )
        return self

    def best_ask(self, offset: int = 0) -> float | None:
        return analytics.best_ask(self._levels, offset)

    def best_bid(self, offset: int = 0) -> float | None:
        return analytics.best_bid(self._levels, offset)

    def spread_percent(self, offset: int = 0) -> float | None:
        return analytics.spread_percent(self._levels, offset)

    def spread_basis_points(self, offset: int = 0) -> float | None:
        return analytics.spread_basis_points(self._levels, offset)

    def estimate_slippage(
        self, order_size: float, side: Side | str
    ) -> SlippageEstimate | None:
        return analytics.estimate_slippage(self._levels, order_size, side)

    def format_table(self) -> str:
        spread = self.spread_basis_points()
        spread_text = "None" if spread is None else f"{spread:.5f}"
        lines = [
            f"---------- {self.symbol} ask:bid "
            f"{self.best_ask()}:{self.best_bid()} & spread: {spread_text} bp",
            f"{'symbol':<12} {'price':>16} {'side':<4} {'qty':>16}",
        ]
        for level in self._levels:
            lines.append(
                f"{level.symbol:<12} {level.price:>16} "
                f"{level.side.value:<4} {level.qty:>16}"
            )
        return "\n".join(lines)

    def dump(self) -> "OrderBookState":
        """Log the current book as a table."""
        logger.info("%s", self.format_table())
        return self
