"""Core primitives for the order book view."""

from __future__ import annotations

from lob_view.core.config import DEFAULT_MAX_DEPTH, BookOptions
from lob_view.core.errors import (
    BookError,
    InsufficientLiquidityError,
    InvalidArgumentError,
    NoLiquidityError,
    SchemaError,
    StaleUpdateError,
)
from lob_view.core.time import check_timestamp_order, now_ms
from lob_view.core.types import Side, Symbol, TsMs, parse_side

__all__ = [
    "BookError",
    "BookOptions",
    "DEFAULT_MAX_DEPTH",
    "InsufficientLiquidityError",
    "InvalidArgumentError",
    "NoLiquidityError",
    "SchemaError",
    "Side",
    "StaleUpdateError",
    "Symbol",
    "TsMs",
    "check_timestamp_order",
    "now_ms",
    "parse_side",
]
