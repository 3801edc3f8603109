import pytest

from lob_view.core import StaleUpdateError, check_timestamp_order, now_ms


def test_check_timestamp_order() -> None:
    check_timestamp_order(10, 10)
    check_timestamp_order(10, 11)
    with pytest.raises(StaleUpdateError):
        check_timestamp_order(10, 9)


def test_now_ms_is_epoch_millis() -> None:
    ts = now_ms()
    assert isinstance(ts, int)
    assert ts > 1_600_000_000_000
