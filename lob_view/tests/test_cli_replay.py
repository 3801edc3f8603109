import json

import pytest

from lob_view.cli.book_replay import main
from lob_view.core import SchemaError, StaleUpdateError


def _write_feed(tmp_path, records) -> str:
    path = tmp_path / "feed.jsonl"
    with path.open("w", encoding="utf-8") as f:
        for record in records:
            f.write(json.dumps(record) + "\n")
    return str(path)


def _records() -> list[dict]:
    return [
        {
            "type": "snapshot",
            "ts": 1000,
            "levels": [
                ["BTCUSDT", 99, "Buy", 5],
                ["BTCUSDT", 101, "Sell", 5],
                ["BTCUSDT", 102, "Sell", 5],
            ],
        },
        {"type": "delta", "ts": 2000, "upsert": [["BTCUSDT", 100, "Buy", 2]]},
    ]


def test_replay_prints_analytics(tmp_path, capsys) -> None:
    path = _write_feed(tmp_path, _records())
    code = main(
        [
            "--feed",
            path,
            "--symbol",
            "BTCUSDT",
            "--order-size",
            "10",
            "--side",
            "buy",
        ]
    )
    assert code == 0
    out = capsys.readouterr().out
    assert "records=2 depth=4" in out
    assert "best_bid=100.000000 best_ask=101.000000" in out
    assert "exec_price=101.500000" in out


def test_replay_check_timestamps_rejects_stale(tmp_path) -> None:
    records = _records()
    records[1]["ts"] = 500
    path = _write_feed(tmp_path, records)
    with pytest.raises(StaleUpdateError):
        main(["--feed", path, "--symbol", "BTCUSDT", "--check-timestamps"])


def test_replay_rejects_bad_max_depth(tmp_path) -> None:
    path = _write_feed(tmp_path, _records())
    with pytest.raises(SchemaError):
        main(["--feed", path, "--symbol", "BTCUSDT", "--max-depth", "x"])
