"""Strict parsing of the numeric and clock strings the sources send."""

import re
from datetime import date, datetime

_HHMM_RE = re.compile(r"[0-9]{4}")
_INT_RE = re.compile(r"[+-]?[0-9]+")

# Source values are 16-bit signed integers
INT16_MIN = -(2**15)
INT16_MAX = 2**15 - 1


class ParserError(ValueError):
    """A decoded response held a value that is not the expected number or time."""

    pass


class MissingDataError(LookupError):
    """A decoded response lacks the day, table or entries being looked up."""

    pass


def parse_int(value: str, field_name: str) -> int:
    """Parse an ASCII base-10 int16 string, rejecting blanks, padding and decimals."""
    if not _INT_RE.fullmatch(value):
        raise ParserError(f"{field_name}: {value!r} is not an integer")
    number = int(value)
    if not INT16_MIN <= number <= INT16_MAX:
        raise ParserError(f"{field_name}: {value!r} is out of range")
    return number


def parse_hhmm(value: str, on: date) -> datetime:
    """Parse a four-digit ``HHMM`` string as a clock time on the given date."""
    if not _HHMM_RE.fullmatch(value):
        raise ParserError(f"{value!r} is not an HHMM time")
    try:
        return datetime(on.year, on.month, on.day, int(value[:2]), int(value[2:]))
    except ValueError as e:
        raise ParserError(f"{value!r} is not a valid time of day") from e
