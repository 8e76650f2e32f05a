"""Formatting helpers for schedule display."""

from datetime import datetime, time


UNKNOWN_TIMESTAMP = "Unknown."


def format_time_of_day(value: time | datetime) -> str:
    """Format a time of day as a 12-hour clock string.
    
    Hours are not zero padded and there is no space before AM/PM.
    
    Examples:
        >>> from datetime import time
        >>> format_time_of_day(time(15, 4))
        '3:04PM'
        >>> format_time_of_day(time(0, 30))
        '12:30AM'
    """
    hour = value.hour % 12 or 12
    meridiem = "AM" if value.hour < 12 else "PM"
    return f"{hour}:{value.minute:02d}{meridiem}"


def format_timestamp(value: datetime) -> str:
    """Format a timestamp as e.g. "3:04PM, Monday January 2 2006".
    
    Examples:
        >>> from datetime import datetime
        >>> format_timestamp(datetime(2006, 1, 2, 15, 4, 5))
        '3:04PM, Monday January 2 2006'
    """
    return (
        f"{format_time_of_day(value)}, "
        f"{value.strftime('%A')} {value.strftime('%B')} {value.day} {value.year}"
    )


def seconds_to_minutes(seconds: int) -> int:
    """Convert seconds to whole minutes, truncating toward zero.
    
    Examples:
        >>> seconds_to_minutes(150)
        2
        >>> seconds_to_minutes(45)
        0
    """
    if seconds < 0:
        return -(-seconds // 60)
    return seconds // 60
