"""
Time helpers — parse raw duration cells and format them for display.
"""

import re

_HOURS_SUFFIX = re.compile(r"\s*(hours?)\s*", re.IGNORECASE)
_LEADING_NUMBER = re.compile(r"[-+]?(\d+\.?\d*|\.\d+)")


def parse_time_string(time_str: str) -> float:
    """
    Parse a duration such as "2 hours", "1 hour", "2 hrs" or "2.5" into hours.

    Reads the leading number and ignores trailing text ("1.5h" -> 1.5).
    Returns 0.0 for empty input or input that does not start with a number.
    """
    if not time_str:
        return 0.0
    cleaned = _HOURS_SUFFIX.sub("", str(time_str)).strip()
    match = _LEADING_NUMBER.match(cleaned)
    if not match:
        return 0.0
    return float(match.group(0))


def format_time(time_in_hours: float) -> str:
    """Format hours as "45 mins", "1 hr", "2 hrs 30 mins"."""
    if not time_in_hours or time_in_hours <= 0:
        return "0 mins"

    if time_in_hours < 1:
        return f"{round(time_in_hours * 60)} mins"

    hours = int(time_in_hours)
    minutes = round((time_in_hours - hours) * 60)
    if minutes == 60:
        hours, minutes = hours + 1, 0

    hour_text = f"{hours} hr{'s' if hours > 1 else ''}"
    minute_text = f" {minutes} mins" if minutes > 0 else ""
    return f"{hour_text}{minute_text}"


def hours_to_minutes(time_in_hours: float) -> int:
    """Whole minutes for a duration in hours."""
    return round(time_in_hours * 60) if time_in_hours > 0 else 0
