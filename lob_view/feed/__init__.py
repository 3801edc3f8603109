"""Host-side feed adapter: JSONL records to snapshot/delta calls."""

from __future__ import annotations

from lob_view.feed.messages import (
    DeltaRecord,
    FeedRecord,
    SnapshotRecord,
    decode_record,
    iter_feed,
)
from lob_view.feed.replay import apply_record, replay_feed

__all__ = [
    "DeltaRecord",
    "FeedRecord",
    "SnapshotRecord",
    "apply_record",
    "decode_record",
    "iter_feed",
    "replay_feed",
]
