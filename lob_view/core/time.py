"""Timestamp primitives."""

from __future__ import annotations

import time

from lob_view.core.errors import StaleUpdateError
from lob_view.core.types import TsMs


def now_ms() -> TsMs:
    return TsMs(time.time_ns() // 1_000_000)


def check_timestamp_order(last: int, current: int) -> None:
    """Raise if `current` is older than `last`. Equal timestamps are accepted."""
    if last > current:
        raise StaleUpdateError(
            f"received data older than last tick: last_update={last} "
            f"current_update={current}"
        )
