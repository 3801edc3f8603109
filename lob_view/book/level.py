"""Price level record."""

from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Any, Mapping, Sequence

from lob_view.core.errors import SchemaError
from lob_view.core.types import Side, parse_side


def _as_number(value: Any, field: str) -> float:
    if isinstance(value, bool):
        raise SchemaError(f"{field} must be a number")
    if isinstance(value, str):
        try:
            value = float(value)
        except ValueError as exc:
            raise SchemaError(f"{field} must be a number: {value!r}") from exc
    if not isinstance(value, (int, float)):
        raise SchemaError(f"{field} must be a number")
    if not math.isfinite(value):
        raise SchemaError(f"{field} must be finite")
    return value


@dataclass(frozen=True, slots=True)
class PriceLevel:
    """One row of the book. `extra_state` is carried through untouched."""

    symbol: str
    price: float
    side: Side
    qty: float
    extra_state: object | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "side", parse_side(self.side))
        object.__setattr__(self, "price", _as_number(self.price, "price"))
        qty = _as_number(self.qty, "qty")
        if qty < 0:
            raise SchemaError(f"negative qty: {qty}")
        object.__setattr__(self, "qty", qty)

    @classmethod
    def from_row(cls, row: Sequence[Any] | Mapping[str, Any]) -> "PriceLevel":
        """Build a level from `[symbol, price, side, qty, extra_state?]` or a mapping."""
        if isinstance(row, Mapping):
            try:
                return cls(
                    symbol=str(row["symbol"]),
                    price=row["price"],
                    side=row["side"],
                    qty=row["qty"],
                    extra_state=row.get("extra_state"),
                )
            except KeyError as exc:
                raise SchemaError(f"level missing field: {exc.args[0]}") from exc
        if isinstance(row, (str, bytes)) or len(row) not in (4, 5):
            raise SchemaError(f"level row must have 4 or 5 fields: {row!r}")
        extra = row[4] if len(row) == 5 else None
        return cls(
            symbol=str(row[0]),
            price=row[1],
            side=row[2],
            qty=row[3],
            extra_state=extra,
        )
