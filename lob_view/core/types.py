"""Core domain types."""

from __future__ import annotations

from enum import Enum
from typing import NewType

from lob_view.core.errors import SchemaError

TsMs = NewType("TsMs", int)
Symbol = NewType("Symbol", str)


class Side(str, Enum):
    BUY = "Buy"
    SELL = "Sell"

    @property
    def opposite(self) -> "Side":
        return Side.SELL if self is Side.BUY else Side.BUY


def parse_side(value: str | Side) -> Side:
    if isinstance(value, Side):
        return value
    v = str(value).lower()
    if v in ("buy", "bid"):
        return Side.BUY
    if v in ("sell", "ask"):
        return Side.SELL
    raise SchemaError(f"invalid side: {value!r}")
