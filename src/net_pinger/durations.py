"""
Parsing and formatting of durations.

Durations are written the way ping-like tools print them: ``0s``, ``850µs``,
``12.5ms``, ``1.2s`` or ``1m30s``. The same compact notation is accepted on
the command line for intervals and timeouts.
"""

import re
from datetime import timedelta

_DURATION_RE = re.compile(r"^\s*([0-9]+(?:\.[0-9]*)?|\.[0-9]+)\s*(us|µs|ms|s|m|h)?\s*$")

_UNIT_SECONDS = {
    "us": 1e-6,
    "µs": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}


def parse_duration(text: str) -> timedelta:
    """
    Parses a duration such as "500ms", "1.5s" or "2m".

    A bare number is read as seconds.

    Args:
        text: The duration text.

    Returns:
        timedelta: The parsed duration.

    Raises:
        ValueError: If the text is not a valid non-negative duration.
    """
    match = _DURATION_RE.match(text)
    if not match:
        raise ValueError(f"Invalid duration: '{text}'")
    value, unit = match.groups()
    return timedelta(seconds=float(value) * _UNIT_SECONDS[unit or "s"])


def _trim(number: str) -> str:
    if "." in number:
        number = number.rstrip("0").rstrip(".")
    return number


def format_duration(duration: timedelta) -> str:
    """
    Formats a duration in the most readable unit.

    Args:
        duration: The duration to format; microsecond precision.

    Returns:
        str: e.g. "0s", "850µs", "12.5ms", "1.2s" or "1h2m3.5s".
    """
    micros = (duration.days * 86400 + duration.seconds) * 1_000_000 + duration.microseconds
    if micros == 0:
        return "0s"

    sign = "-" if micros < 0 else ""
    micros = abs(micros)

    if micros < 1_000:
        return f"{sign}{micros}µs"
    if micros < 1_000_000:
        return f"{sign}{_trim(f'{micros / 1_000:.3f}')}ms"

    seconds, micros = divmod(micros, 1_000_000)
    minutes, seconds = divmod(seconds, 60)
    hours, minutes = divmod(minutes, 60)

    text = _trim(f"{seconds}.{micros:06d}") + "s"
    if hours:
        text = f"{hours}h{minutes}m{text}"
    elif minutes:
        text = f"{minutes}m{text}"
    return sign + text
