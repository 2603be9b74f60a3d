"""
Deadline arithmetic for quests.

Both helpers are pure and never raise; callers pass "today" explicitly so
results are reproducible.
"""
from __future__ import annotations

import math
from datetime import date
from typing import Optional

_WORKING_DAYS_PER_WEEK = 5


# PUBLIC_INTERFACE
def working_days_until(deadline: date, today: date) -> int:
    """
    Count Monday..Friday days in the inclusive range [today, deadline].

    A deadline in the past yields 0. Whole weeks contribute five days each and
    only the trailing partial week is inspected day by day.
    """
    if deadline < today:
        return 0

    span = (deadline - today).days + 1
    weeks, remainder = divmod(span, 7)
    start = today.weekday()  # Monday == 0
    tail = sum(1 for i in range(remainder) if (start + i) % 7 < _WORKING_DAYS_PER_WEEK)
    return weeks * _WORKING_DAYS_PER_WEEK + tail


# PUBLIC_INTERFACE
def min_hours_per_day(
    days_left: int,
    hours_invested: Optional[float] = None,
    hours_needed: Optional[float] = None,
) -> Optional[float]:
    """
    Hours of work per remaining working day needed to hit the deadline.

    Missing effort figures count as 0. With no working days left the figure is
    undefined and None is returned, as it is when the figures overflow to a
    non-finite value.
    """
    if days_left == 0:
        return None
    needed = hours_needed if hours_needed is not None else 0.0
    invested = hours_invested if hours_invested is not None else 0.0
    hours = (needed - invested) / days_left
    return hours if math.isfinite(hours) else None
