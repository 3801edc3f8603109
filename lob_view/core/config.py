"""Book configuration primitives."""

from __future__ import annotations

from dataclasses import dataclass

from lob_view.core.errors import SchemaError

DEFAULT_MAX_DEPTH = 250


@dataclass(frozen=True, slots=True)
class BookOptions:
    max_depth: int = DEFAULT_MAX_DEPTH
    check_timestamps: bool = False
    # log every applied snapshot/delta at INFO
    trace_log: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
            raise SchemaError("max_depth must be int")
        if self.max_depth <= 0:
            raise SchemaError("max_depth must be positive")
