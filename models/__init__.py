from models.time_of_day import MINUTES_PER_DAY, format_time, parse_time
from models.interval import Interval
from models.selection import SavedSelection, TimeRange

__all__ = [
    "MINUTES_PER_DAY",
    "format_time",
    "parse_time",
    "Interval",
    "SavedSelection",
    "TimeRange",
]
