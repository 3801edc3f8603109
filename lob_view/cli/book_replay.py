"""Replay a JSONL market-data feed into a book and print analytics."""

from __future__ import annotations

import argparse
import logging

from lob_view.book.state import OrderBookState
from lob_view.core.config import DEFAULT_MAX_DEPTH, BookOptions
from lob_view.core.errors import SchemaError
from lob_view.core.types import parse_side
from lob_view.feed.messages import iter_feed
from lob_view.feed.replay import replay_feed

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Replay a feed into an order book")
    parser.add_argument("--feed", required=True, help="path to JSONL feed (.gz ok)")
    parser.add_argument("--symbol", required=True, help="book symbol")
    parser.add_argument(
        "--max-depth", default=str(DEFAULT_MAX_DEPTH), help="max levels int"
    )
    parser.add_argument(
        "--check-timestamps",
        action="store_true",
        help="reject updates older than the last applied one",
    )
    parser.add_argument("--order-size", help="estimate slippage for this size")
    parser.add_argument("--side", default="buy", help="order side for slippage")
    parser.add_argument("--dump", action="store_true", help="log the final book")
    parser.add_argument("--log-level", default="WARNING", help="logging level")
    return parser.parse_args(argv)


def _parse_int(value: str, field: str) -> int:
    try:
        return int(value)
    except ValueError as exc:
        raise SchemaError(f"{field} must be int") from exc


def _parse_float(value: str, field: str) -> float:
    try:
        return float(value)
    except ValueError as exc:
        raise SchemaError(f"{field} must be float") from exc


def _fmt(value: float | None) -> str:
    return "none" if value is None else f"{value:.6f}"


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    options = BookOptions(
        max_depth=_parse_int(args.max_depth, "max-depth"),
        check_timestamps=args.check_timestamps,
    )
    order_size = None
    if args.order_size is not None:
        order_size = _parse_float(args.order_size, "order-size")
    side = parse_side(args.side)

    # first record decides the starting timestamp; avoid rejecting historical feeds
    book = OrderBookState(args.symbol, options, clock=lambda: 0)
    applied = replay_feed(book, iter_feed(args.feed))
    logger.info("applied %d records to %s", applied, args.symbol)
    if args.dump:
        book.dump()

    line = (
        f"records={applied} depth={len(book)} "
        f"best_bid={_fmt(book.best_bid())} best_ask={_fmt(book.best_ask())} "
        f"spread_bps={_fmt(book.spread_basis_points())}"
    )
    if order_size is not None:
        estimate = book.estimate_slippage(order_size, side)
        if estimate is None:
            line += " slippage=none"
        else:
            line += (
                f" exec_price={estimate.execution_price:.6f}"
                f" slippage_bps={estimate.slippage_basis_points:.6f}"
            )
    print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
