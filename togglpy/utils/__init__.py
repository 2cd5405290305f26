"""Utility modules for togglpy."""

from .date_utils import PeriodSelector, DateRange, get_week_range, resolve_period, iso_date, day_str
from .format_utils import split_duration_ms, format_hm
from .file_utils import copy_to_clipboard

__all__ = [
    'PeriodSelector', 'DateRange', 'get_week_range', 'resolve_period', 'iso_date', 'day_str',
    'split_duration_ms', 'format_hm',
    'copy_to_clipboard'
]
