"""Human-readable formatting of file sizes and PDF date strings."""

import re
from datetime import datetime, timedelta, timezone
from typing import Optional

SIZE_UNITS = ["Bytes", "KB", "MB", "GB"]

# D:YYYYMMDDHHmmSS with an optional +HH'mm' / -HH'mm' / Z suffix
PDF_DATE_PATTERN = re.compile(
    r"D:(\d{4})(\d{2})(\d{2})(\d{2})(\d{2})(\d{2})"
    r"(?:(Z)|([-+])(\d{2})'(\d{2})'?)?"
)

LOCALE_DATETIME_FORMAT = "%c"


def format_size(num_bytes: int) -> str:
    """Format a byte count as e.g. ``"1.5 KB"``; sizes past GB stay in GB."""
    if num_bytes < 0:
        raise ValueError(f"negative size: {num_bytes}")
    if num_bytes == 0:
        return "0 Bytes"
    # floor(log1024(n)) in integer arithmetic
    index = 0
    while index < len(SIZE_UNITS) - 1 and num_bytes >= 1024 ** (index + 1):
        index += 1
    value = num_bytes / 1024 ** index
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{text} {SIZE_UNITS[index]}"


def parse_pdf_date(raw: str) -> Optional[datetime]:
    """
    Parse a PDF date string into an aware datetime.

    Dates without an offset are taken as UTC. Returns None when the string
    does not contain a full ``D:YYYYMMDDHHmmSS`` stamp or its fields are
    out of range.
    """
    match = PDF_DATE_PATTERN.search(raw or "")
    if not match:
        return None
    year, month, day, hour, minute, second = (int(g) for g in match.group(1, 2, 3, 4, 5, 6))
    zulu, sign, tz_hours, tz_minutes = match.group(7, 8, 9, 10)
    try:
        tzinfo = timezone.utc
        if sign and not zulu:
            offset = timedelta(hours=int(tz_hours), minutes=int(tz_minutes))
            # timezone() rejects offsets of 24 hours or more
            tzinfo = timezone(-offset if sign == "-" else offset)
        return datetime(year, month, day, hour, minute, second, tzinfo=tzinfo)
    except ValueError:
        return None


def format_datetime(value: datetime) -> str:
    """Render an aware datetime in local time using the locale's format."""
    return value.astimezone().strftime(LOCALE_DATETIME_FORMAT)


def format_pdf_date(raw: str) -> str:
    """Render a PDF date for display, or return it unchanged if unparseable."""
    parsed = parse_pdf_date(raw)
    if parsed is None:
        return raw
    try:
        return format_datetime(parsed)
    except (OverflowError, OSError, ValueError):
        return raw


def format_timestamp(timestamp: float) -> str:
    """Render a POSIX timestamp (e.g. a file mtime) for display."""
    return format_datetime(datetime.fromtimestamp(timestamp, tz=timezone.utc))
