"""Codec for the fixed creation-date layout: ``YYYY-MM-DDThh:mm:ss.sss`` in UTC.

The layout carries no offset suffix; UTC is implicit. These are plain
functions with no formatter state shared between callers.
"""
import re
from datetime import datetime, timezone

from .errors import DateFormatError

DATE_LAYOUT = "%Y-%m-%dT%H:%M:%S.%f"
_DATE_SHAPE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}:[0-9]{2}\.[0-9]{3}")

def format_timestamp(value: datetime) -> str:
    """Render `value` in the fixed layout, truncated to milliseconds.

    Naive datetimes are taken to be UTC already.

    Raises:
        DateFormatError: if an aware `value` falls outside years 1-9999 once
            converted to UTC.
    """
    if not isinstance(value, datetime):
        raise TypeError(f"expected datetime, got {type(value).__name__}")
    if value.tzinfo is not None:
        try:
            value = value.astimezone(timezone.utc)
        except OverflowError as e:
            raise DateFormatError(value, f"creation date is outside years 1-9999 in UTC - {e}") from e
    # strftime("%Y") does not zero-pad years below 1000 on every platform
    return (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
        f".{value.microsecond // 1000:03d}"
    )

def parse_timestamp(text: str) -> datetime:
    """Parse fixed-layout text into an aware UTC datetime.

    Raises:
        DateFormatError: if `text` is not exactly in the layout or names an
            impossible calendar date or time.
    """
    if not isinstance(text, str):
        raise DateFormatError(text, "creation date must be a string")

    # strptime alone accepts 1-6 fraction digits and non-ASCII digits
    if not _DATE_SHAPE.fullmatch(text):
        raise DateFormatError(text, "creation date must be in YYYY-MM-DDThh:mm:ss.sss format")

    try:
        parsed = datetime.strptime(text, DATE_LAYOUT)
    except ValueError as e:
        raise DateFormatError(text, f"invalid creation date value - {e}") from e

    return parsed.replace(tzinfo=timezone.utc)

def is_valid_timestamp(text: str) -> bool:
    try:
        parse_timestamp(text)
    except DateFormatError:
        return False
    return True
