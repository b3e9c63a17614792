"""
Response-date formatting.

Envelope dates are formatted with a configured pattern. Two pattern
styles are accepted:

- strftime patterns (anything containing ``%``), e.g. ``%Y-%m-%d``
- SimpleDateFormat-style patterns, e.g. ``yyyy-MM-dd'T'HH:mm:ss``

Pattern letters repeat to set the field width; text inside single quotes
is copied literally and ``''`` is a literal quote.
"""

import re
from datetime import datetime

_TOKEN = re.compile(r"'(?:[^']|'')*'|([A-Za-z])\1*|.", re.DOTALL)


def _padded(value: int, width: int) -> str:
    return str(value).zfill(width)


def _offset(moment: datetime, colon: bool) -> str:
    offset = moment.utcoffset()
    if offset is None:
        return ""
    minutes = int(offset.total_seconds() // 60)
    sign = "-" if minutes < 0 else "+"
    hours, minutes = divmod(abs(minutes), 60)
    separator = ":" if colon else ""
    return f"{sign}{hours:02d}{separator}{minutes:02d}"


def _field(letter: str, width: int, moment: datetime) -> str:
    """Render one run of a pattern letter."""
    if letter == "y":
        if width == 2:
            return _padded(moment.year % 100, 2)
        return _padded(moment.year, width)
    if letter == "M":
        if width >= 4:
            return moment.strftime("%B")
        if width == 3:
            return moment.strftime("%b")
        return _padded(moment.month, width)
    if letter == "d":
        return _padded(moment.day, width)
    if letter == "H":
        return _padded(moment.hour, width)
    if letter == "h":
        return _padded(moment.hour % 12 or 12, width)
    if letter == "m":
        return _padded(moment.minute, width)
    if letter == "s":
        return _padded(moment.second, width)
    if letter == "S":
        return _padded(moment.microsecond // 1000, width)
    if letter == "E":
        return moment.strftime("%A" if width >= 4 else "%a")
    if letter == "a":
        return "AM" if moment.hour < 12 else "PM"
    if letter == "Z":
        return _offset(moment, colon=False)
    if letter == "X":
        if width == 1:
            return _offset(moment, colon=False)[:3]
        return _offset(moment, colon=width >= 3)
    if letter == "z":
        return moment.tzname() or ""
    raise ValueError(f"Illegal pattern character '{letter}'")


def format_date(moment: datetime, pattern: str) -> str:
    """Format a datetime with a strftime or SimpleDateFormat-style pattern.

    Args:
        moment: The instant to format.
        pattern: The configured date pattern.

    Returns:
        The formatted date string.

    Raises:
        ValueError: If the pattern uses an unsupported letter or leaves a
            quote unterminated.
    """
    if "%" in pattern:
        return moment.strftime(pattern)

    parts: list[str] = []
    for match in _TOKEN.finditer(pattern):
        token = match.group(0)
        if token == "'":
            raise ValueError(f"Unterminated quote in pattern '{pattern}'")
        if token.startswith("'"):
            parts.append("'" if token == "''" else token[1:-1].replace("''", "'"))
        elif match.group(1):
            parts.append(_field(match.group(1), len(token), moment))
        else:
            parts.append(token)
    return "".join(parts)


def validate_pattern(pattern: str) -> str:
    """Return the pattern unchanged if it formats, else raise ValueError."""
    format_date(datetime(2000, 1, 1), pattern)
    return pattern
