"""
Wire date formats

The API takes timestamps as UTC ISO-8601 with second precision and no
offset suffix, e.g. ``2018-11-29T10:34:22``.
"""

from datetime import datetime, timezone

DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"


def to_utc(value: datetime) -> datetime:
    """Normalize to naive UTC; naive values are taken as UTC already"""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.replace(microsecond=0)


def format_datetime(value: datetime) -> str:
    return to_utc(value).strftime(DATE_FORMAT)


def parse_datetime(text: str) -> datetime:
    """Parse a wire timestamp into a naive UTC datetime"""
    return to_utc(datetime.fromisoformat(text))
