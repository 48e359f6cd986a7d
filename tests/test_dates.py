from datetime import datetime, timedelta

import pytest

from src.utils.dates import MOSCOW, SENTINEL_DATE, parse_date, parse_localized_date


def test_parse_date_reads_moscow_time() -> None:
    parsed = parse_date(["24", "11", "2019", "14", "10"])

    assert parsed == datetime(2019, 11, 24, 14, 10, tzinfo=MOSCOW)
    assert parsed.utcoffset() == timedelta(hours=3)


@pytest.mark.parametrize(
    "fragments",
    [
        [],
        ["24", "11", "2019"],
        ["24", "11", "2019", "14", "xx"],
        ["вчера", "11", "2019", "14", "10"],
        ["24", None, "2019", "14", "10"],
        [" 24", "11", "2019", "14", "10"],
        ["24", "1_1", "2019", "14", "10"],
        ["\u0662\u0664", "11", "2019", "14", "10"],
    ],
)
def test_parse_date_falls_back_to_sentinel(fragments) -> None:
    assert parse_date(fragments) == SENTINEL_DATE


def test_parse_date_rejects_impossible_calendar_values() -> None:
    assert parse_date(["31", "02", "2019", "14", "10"]) == SENTINEL_DATE


def test_parse_date_with_four_fragments_uses_zero_minute() -> None:
    assert parse_date(["1", "1", "2020", "9"]) == datetime(2020, 1, 1, 9, 0, tzinfo=MOSCOW)


def test_sentinel_is_epoch_day_in_moscow() -> None:
    assert SENTINEL_DATE == datetime(1970, 1, 1, tzinfo=MOSCOW)


def test_parse_localized_date_understands_russian_months() -> None:
    assert parse_localized_date(" 24 ноября 2019, 14:10 ") == datetime(
        2019, 11, 24, 14, 10, tzinfo=MOSCOW
    )
    assert parse_localized_date("3 Мая 2021 09:05") == datetime(2021, 5, 3, 9, 5, tzinfo=MOSCOW)


def test_parse_localized_date_without_date_is_sentinel() -> None:
    assert parse_localized_date("") == SENTINEL_DATE
    assert parse_localized_date("скоро в эфире") == SENTINEL_DATE


def test_parse_date_accepts_explicit_sign() -> None:
    assert parse_date(["+24", "11", "2019", "14", "10"]) == datetime(2019, 11, 24, 14, 10, tzinfo=MOSCOW)
