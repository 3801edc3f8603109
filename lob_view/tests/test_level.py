import pytest

from lob_view.book import PriceLevel
from lob_view.core import BookOptions, SchemaError, Side, parse_side


def test_level_parses_side_and_numbers() -> None:
    level = PriceLevel("BTCUSDT", "100.5", "sell", 2)
    assert level.side == Side.SELL
    assert level.price == 100.5
    assert level.qty == 2
    assert level.extra_state is None


def test_level_rejects_negative_qty() -> None:
    with pytest.raises(SchemaError):
        PriceLevel("BTCUSDT", 100, Side.BUY, -1)


def test_level_rejects_non_finite_price() -> None:
    with pytest.raises(SchemaError):
        PriceLevel("BTCUSDT", float("nan"), Side.BUY, 1)
    with pytest.raises(SchemaError):
        PriceLevel("BTCUSDT", "abc", Side.BUY, 1)


def test_level_zero_qty_allowed() -> None:
    assert PriceLevel("BTCUSDT", 100, Side.BUY, 0).qty == 0


def test_from_row_positional() -> None:
    level = PriceLevel.from_row(["BTCUSDT", 100, "Buy", 1])
    assert level == PriceLevel("BTCUSDT", 100, Side.BUY, 1)
    extra = PriceLevel.from_row(["BTCUSDT", 100, "Buy", 1, {"n": 3}])
    assert extra.extra_state == {"n": 3}


def test_from_row_mapping() -> None:
    level = PriceLevel.from_row(
        {"symbol": "BTCUSDT", "price": 101, "side": "ask", "qty": 4}
    )
    assert level.side == Side.SELL
    assert level.qty == 4


def test_from_row_rejects_malformed() -> None:
    with pytest.raises(SchemaError):
        PriceLevel.from_row(["BTCUSDT", 100, "Buy"])
    with pytest.raises(SchemaError):
        PriceLevel.from_row({"symbol": "BTCUSDT", "price": 100, "side": "Buy"})
    with pytest.raises(SchemaError):
        PriceLevel.from_row("BTCUSDT")


def test_parse_side() -> None:
    assert parse_side("Buy") == Side.BUY
    assert parse_side("bid") == Side.BUY
    assert parse_side("ASK") == Side.SELL
    assert parse_side(Side.SELL) is Side.SELL
    assert Side.BUY.opposite == Side.SELL
    with pytest.raises(SchemaError):
        parse_side("hold")


def test_book_options_validation() -> None:
    assert BookOptions().max_depth == 250
    with pytest.raises(SchemaError):
        BookOptions(max_depth=0)
    with pytest.raises(SchemaError):
        BookOptions(max_depth=True)
