"""Formatting utility functions for togglpy."""
from typing import Tuple

MS_PER_MINUTE = 60_000
MS_PER_HOUR = 3_600_000


def split_duration_ms(milliseconds: int) -> Tuple[int, int]:
    """Split a duration into whole hours and the remaining whole minutes.

    Sub-minute precision is dropped, never rounded.

    Args:
        milliseconds: Duration in milliseconds

    Returns:
        Tuple of (hours, minutes) with 0 <= minutes < 60
    """
    return milliseconds // MS_PER_HOUR, (milliseconds // MS_PER_MINUTE) % 60


def format_hm(hours: int, minutes: int) -> str:
    """Format hours and minutes as H:MM.

    Args:
        hours: Whole hours (not capped at 24)
        minutes: Remaining minutes

    Returns:
        Formatted time string, minutes zero-padded
    """
    return f"{hours}:{minutes:02}"
