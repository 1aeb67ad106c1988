"""Event date windows for playdowns and tournaments.

An event is shown from N months before its first day through M days after
its last day (see league_config.json).
"""

import calendar
import datetime
from typing import Iterable, Optional

from .config import get_visibility_window
from .schemas import GameResult


def shift_months(day: datetime.date, months: int) -> datetime.date:
    """Move a date by whole months, clamping to the last day of the month."""
    month_index = day.year * 12 + (day.month - 1) + months
    year, month = divmod(month_index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return datetime.date(year, month, min(day.day, last_day))


def game_date_range(
    games: Iterable[GameResult],
) -> tuple[Optional[datetime.date], Optional[datetime.date]]:
    """Earliest and latest game dates, or (None, None) if no game has a date."""
    dates = sorted(g.date for g in games if g.date is not None)
    if not dates:
        return None, None
    return dates[0], dates[-1]


def visibility_window(
    start: datetime.date, end: datetime.date
) -> tuple[datetime.date, datetime.date]:
    """First and last day an event between start and end is shown."""
    months_before, days_after = get_visibility_window()
    return shift_months(start, -months_before), end + datetime.timedelta(days=days_after)


def is_within_window(
    start: datetime.date,
    end: datetime.date,
    today: Optional[datetime.date] = None,
) -> bool:
    """True if today falls inside the event's visibility window."""
    today = today or datetime.date.today()
    first, last = visibility_window(start, end)
    return first <= today <= last


def is_past_window(end: datetime.date, today: Optional[datetime.date] = None) -> bool:
    """True once the event's visibility window has closed."""
    today = today or datetime.date.today()
    _, days_after = get_visibility_window()
    return today > end + datetime.timedelta(days=days_after)
