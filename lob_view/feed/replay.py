"""Apply decoded feed records to a book."""

from __future__ import annotations

import logging
from typing import Iterable

from lob_view.book.api import Book
from lob_view.core.errors import SchemaError
from lob_view.feed.messages import DeltaRecord, FeedRecord, SnapshotRecord

logger = logging.getLogger(__name__)


def apply_record(book: Book, record: FeedRecord) -> None:
    if isinstance(record, SnapshotRecord):
        book.apply_snapshot(record.levels, record.ts_ms)
    elif isinstance(record, DeltaRecord):
        book.apply_delta(
            record.deletes,
            record.upserts,
            record.inserts,
            record.ts_ms,
        )
    else:
        raise SchemaError(f"unsupported record: {type(record).__name__}")


def replay_feed(book: Book, records: Iterable[FeedRecord]) -> int:
    """Apply records in order; return how many were applied."""
    count = 0
    for record in records:
        apply_record(book, record)
        count += 1
    logger.debug("replayed %d feed records", count)
    return count
