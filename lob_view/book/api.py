"""Order book API."""

from __future__ import annotations

from typing import Iterable, Protocol, Sequence

from lob_view.book.analytics import SlippageEstimate
from lob_view.book.level import PriceLevel
from lob_view.core.types import Side


class Book(Protocol):
    def reset(self) -> "Book":
        """Reset the book to empty."""

    def apply_snapshot(
        self, levels: Iterable[PriceLevel], timestamp: int | None = None
    ) -> "Book":
        """Replace the book with a full snapshot."""

    def apply_delta(
        self,
        deletes: Sequence[PriceLevel] = (),
        upserts: Sequence[PriceLevel] = (),
        inserts: Sequence[PriceLevel] = (),
        timestamp: int | None = None,
    ) -> "Book":
        """Apply delete/upsert/insert batches."""

    def snapshot_state(self) -> list[PriceLevel]:
        """Return a copy of the current levels."""

    def best_bid(self, offset: int = 0) -> float | None:
        """Return the best bid price at a depth offset."""

    def best_ask(self, offset: int = 0) -> float | None:
        """Return the best ask price at a depth offset."""

    def estimate_slippage(
        self, order_size: float, side: Side | str
    ) -> SlippageEstimate | None:
        """Estimate execution price and slippage for a market order."""
