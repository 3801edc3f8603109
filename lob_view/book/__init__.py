"""Order book state, level store helpers and analytics."""

from __future__ import annotations

from lob_view.book.analytics import SlippageEstimate
from lob_view.book.api import Book
from lob_view.book.level import PriceLevel
from lob_view.book.state import OrderBookState

__all__ = [
    "Book",
    "OrderBookState",
    "PriceLevel",
    "SlippageEstimate",
]
