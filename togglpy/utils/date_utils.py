"""Date utility functions for togglpy."""
from dataclasses import dataclass
from datetime import datetime, date, timedelta, timezone, tzinfo
from enum import Enum
from typing import Optional, Tuple

from ..errors import InvalidSelector


class PeriodSelector(Enum):
    """Reporting window offered to the user."""

    THIS_WEEK = "This week"
    LAST_WEEK = "Last week"

    @classmethod
    def from_label(cls, label: str) -> "PeriodSelector":
        """Parse a selector from user or CLI input.

        Args:
            label: "This week", "Last week", the member name, or "this"/"last"

        Returns:
            Matching PeriodSelector

        Raises:
            InvalidSelector: If the label names no known period
        """
        key = (label or "").strip().lower().replace("_", " ")
        for selector in cls:
            if key in (selector.value.lower(), selector.value.split()[0].lower()):
                return selector
        raise InvalidSelector(f"Unknown report period: {label!r} (expected 'This week' or 'Last week')")


@dataclass(frozen=True)
class DateRange:
    """Inclusive pair of calendar dates."""

    since: date
    until: date

    @property
    def since_str(self) -> str:
        return iso_date(self.since)

    @property
    def until_str(self) -> str:
        return iso_date(self.until)


def iso_date(dt: date) -> str:
    """Format a date the way the reports API expects it (yyyy-MM-dd)."""
    return dt.strftime("%Y-%m-%d")


def get_week_range(target_date: date, week_start: int = 0) -> Tuple[date, date]:
    """Get the start and end dates of the week containing the target date.

    Args:
        target_date: Date within the week
        week_start: Day of week to start on (0=Monday, 6=Sunday)

    Returns:
        Tuple of (start_date, end_date)
    """
    wd = (target_date.weekday() - week_start) % 7
    start = target_date - timedelta(days=wd)
    end = start + timedelta(days=6)
    return start, end


def local_date(now: Optional[datetime] = None, tz: tzinfo = timezone.utc) -> date:
    """Get the calendar date of an instant as seen in the given timezone.

    Args:
        now: Reference instant; naive values are read as wall-clock time in tz
        tz: Timezone the week boundaries are computed in

    Returns:
        Calendar date in tz
    """
    if now is None:
        return datetime.now(tz).date()
    if now.tzinfo is None:
        return now.date()
    return now.astimezone(tz).date()


def resolve_period(selector: PeriodSelector, now: Optional[datetime] = None,
                   tz: tzinfo = timezone.utc) -> DateRange:
    """Translate a period selector into Monday-to-Sunday date bounds.

    Args:
        selector: Reporting window
        now: Reference instant (defaults to the current time)
        tz: Timezone the week is pinned to

    Returns:
        DateRange covering the selected week

    Raises:
        InvalidSelector: If selector is not a PeriodSelector
    """
    if not isinstance(selector, PeriodSelector):
        raise InvalidSelector(f"Unknown report period: {selector!r}")

    since, until = get_week_range(local_date(now, tz))
    if selector is PeriodSelector.LAST_WEEK:
        since -= timedelta(weeks=1)
        until -= timedelta(weeks=1)
    return DateRange(since, until)


def day_str(dt: date) -> str:
    """Format a date as a string with day of week.

    Args:
        dt: Date to format

    Returns:
        Formatted date string
    """
    return f"({['Mo','Tue','Wed','Thu','Fri','Sat','Sun'][dt.weekday()]}){dt}"
