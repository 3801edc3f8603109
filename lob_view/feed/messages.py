"""JSONL feed records for driving a book from recorded market data."""

from __future__ import annotations

from dataclasses import dataclass
import gzip
import json
from pathlib import Path
from typing import Any, Iterator, Mapping, TextIO

from lob_view.book.level import PriceLevel
from lob_view.core.errors import SchemaError
from lob_view.core.types import TsMs

RECORD_TYPES = ("snapshot", "delta")


@dataclass(frozen=True, slots=True)
class SnapshotRecord:
    ts_ms: TsMs
    levels: tuple[PriceLevel, ...]


@dataclass(frozen=True, slots=True)
class DeltaRecord:
    ts_ms: TsMs
    deletes: tuple[PriceLevel, ...] = ()
    upserts: tuple[PriceLevel, ...] = ()
    inserts: tuple[PriceLevel, ...] = ()


FeedRecord = SnapshotRecord | DeltaRecord


def _parse_ts(value: Any) -> TsMs:
    if isinstance(value, bool) or not isinstance(value, int):
        raise SchemaError(f"ts must be an integer: {value!r}")
    if value < 0:
        raise SchemaError(f"negative ts: {value}")
    return TsMs(value)


def _parse_levels(obj: Mapping[str, Any], key: str) -> tuple[PriceLevel, ...]:
    rows = obj.get(key, [])
    if not isinstance(rows, list):
        raise SchemaError(f"{key} must be a list")
    return tuple(PriceLevel.from_row(row) for row in rows)


def decode_record(obj: Any) -> FeedRecord:
    if not isinstance(obj, dict):
        raise SchemaError("feed record must be an object")
    kind = obj.get("type")
    if kind not in RECORD_TYPES:
        raise SchemaError(f"unknown record type: {kind!r}")
    if "ts" not in obj:
        raise SchemaError("feed record missing ts")
    ts = _parse_ts(obj["ts"])
    if kind == "snapshot":
        return SnapshotRecord(ts_ms=ts, levels=_parse_levels(obj, "levels"))
    return DeltaRecord(
        ts_ms=ts,
        deletes=_parse_levels(obj, "delete"),
        upserts=_parse_levels(obj, "upsert"),
        inserts=_parse_levels(obj, "insert"),
    )


def _open_feed(path: str | Path) -> TextIO:
    p = Path(path)
    if p.suffix == ".gz":
        return gzip.open(p, mode="rt", encoding="utf-8")
    return p.open("rt", encoding="utf-8")


def iter_feed(path: str | Path) -> Iterator[FeedRecord]:
    with _open_feed(path) as f:
        for line_number, line in enumerate(f, start=1):
            line = line.strip()
            if not line:
                continue
            try:
                obj = json.loads(line)
            except json.JSONDecodeError as exc:
                raise SchemaError(f"invalid JSON at line {line_number}") from exc
            try:
                yield decode_record(obj)
            except SchemaError as exc:
                raise SchemaError(f"{exc} at line {line_number}") from exc
