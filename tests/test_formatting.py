from datetime import datetime, timedelta, timezone

import pytest

from core.formatting import (
    format_datetime, format_pdf_date, format_size, format_timestamp, parse_pdf_date
)


@pytest.mark.parametrize("num_bytes, expected", [
    (0, "0 Bytes"),
    (1, "1 Bytes"),
    (1023, "1023 Bytes"),
    (1024, "1 KB"),
    (1536, "1.5 KB"),
    (1048576, "1 MB"),
    (5 * 1024 ** 3, "5 GB"),
])
def test_format_size(num_bytes, expected):
    assert format_size(num_bytes) == expected


def test_format_size_rounds_to_two_decimals():
    assert format_size(1234567) == "1.18 MB"


def test_format_size_clamps_past_gigabytes():
    """Terabyte-sized inputs stay in GB instead of running off the unit table."""
    assert format_size(2 * 1024 ** 4) == "2048 GB"


def test_format_size_rejects_negative():
    with pytest.raises(ValueError):
        format_size(-1)


def test_parse_pdf_date_with_offset():
    parsed = parse_pdf_date("D:20230115103000-05'00'")
    assert parsed == datetime(2023, 1, 15, 10, 30, 0, tzinfo=timezone(timedelta(hours=-5)))
    assert parsed.utcoffset() == timedelta(hours=-5)


def test_parse_pdf_date_defaults_to_utc():
    parsed = parse_pdf_date("D:20230115103000")
    assert parsed == datetime(2023, 1, 15, 10, 30, 0, tzinfo=timezone.utc)


def test_parse_pdf_date_accepts_zulu_and_missing_trailing_quote():
    assert parse_pdf_date("D:20230115103000Z").utcoffset() == timedelta(0)
    assert parse_pdf_date("D:20230115103000+05'30").utcoffset() == timedelta(hours=5, minutes=30)


@pytest.mark.parametrize("raw", [
    "garbage", "", "D:2023", "D:20231315103000",
    "D:20230115103000+99'00'", "D:20230115103000-23'99'",
])
def test_parse_pdf_date_rejects_invalid(raw):
    assert parse_pdf_date(raw) is None


def test_format_pdf_date_renders_local_time():
    expected = format_datetime(datetime(2023, 1, 15, 15, 30, 0, tzinfo=timezone.utc))
    assert format_pdf_date("D:20230115103000-05'00'") == expected


def test_format_pdf_date_returns_unparseable_input_unchanged():
    assert format_pdf_date("garbage") == "garbage"
    assert format_pdf_date("D:20231340103000") == "D:20231340103000"
    assert format_pdf_date("D:20230115103000+99'00'") == "D:20230115103000+99'00'"


def test_format_timestamp_matches_datetime_rendering():
    expected = format_datetime(datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc))
    assert format_timestamp(1700000000.0) == expected
