import logging
import math
import re
from datetime import date, datetime
from typing import Mapping, Optional, Tuple, Union

from timesheet.core.errors import ValidationError

logger = logging.getLogger(__name__)

# Roster columns indexed by date.weekday() (Monday=0); weekends have no target
WEEKDAY_FIELDS = ("mo_hours", "di_hours", "mi_hours", "do_hours", "fr_hours")

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

def parse_time_to_minutes(value: str) -> int:
    """Convert 'HH:MM' (seconds are ignored) to minutes since midnight"""
    parts = str(value).split(":")
    if len(parts) < 2:
        raise ValueError(f"Invalid time '{value}', expected HH:MM")
    hours = int(parts[0], 10)
    minutes = int(parts[1], 10)
    if not (0 <= hours <= 23 and 0 <= minutes <= 59):
        raise ValueError(f"Time '{value}' out of range")
    return hours * 60 + minutes

def format_time(value: Optional[str]) -> Optional[str]:
    """Normalize a stored time to zero-padded HH:MM"""
    if value is None:
        return None
    minutes = parse_time_to_minutes(value)
    return f"{minutes // 60:02d}:{minutes % 60:02d}"

def compute_net_hours(start_time: str, end_time: str) -> float:
    return (parse_time_to_minutes(end_time) - parse_time_to_minutes(start_time)) / 60

def parse_break_minutes(value) -> int:
    """Leading integer of the input; anything unparseable counts as no break"""
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else 0

def derive_hours(start_time: str, end_time: str, break_time) -> Tuple[float, float]:
    """
    Validate a day's times and derive the stored values

    Args:
        start_time: 'HH:MM'
        end_time: 'HH:MM', must be later than start_time
        break_time: break in minutes, as sent by the client

    Returns:
        (net_hours, break_hours)
    """
    try:
        start_minutes = parse_time_to_minutes(start_time)
        end_minutes = parse_time_to_minutes(end_time)
    except ValueError as e:
        logger.info(f"Rejected time input: {e}")
        raise ValidationError("Ungültige Uhrzeit, erwartet wird HH:MM.")

    if start_minutes >= end_minutes:
        raise ValidationError("Arbeitsbeginn darf nicht später als Arbeitsende sein.")

    try:
        break_hours = parse_break_minutes(break_time) / 60
    except (OverflowError, ValueError) as e:
        # int() refuses very long digit strings, float division very large ints
        logger.info(f"Rejected break input: {e}")
        raise ValidationError("Ungültige Pausenzeit.")
    net_hours = compute_net_hours(start_time, end_time) - break_hours
    return net_hours, break_hours

def expected_hours_for_date(roster: Optional[Mapping], day: Union[date, str]) -> float:
    """Target hours for the weekday of `day` from a roster row (0 on weekends)"""
    if roster is None:
        return 0
    if isinstance(day, str):
        day = datetime.strptime(day[:10], "%Y-%m-%d").date()
    weekday = day.weekday()
    if weekday >= len(WEEKDAY_FIELDS):
        return 0
    return roster.get(WEEKDAY_FIELDS[weekday]) or 0
