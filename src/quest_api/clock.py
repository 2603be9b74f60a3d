from __future__ import annotations

from datetime import date, datetime, timedelta, tzinfo
from typing import Optional, Protocol


# PUBLIC_INTERFACE
class Clock(Protocol):
    """Source of the current time. Inject a fixed implementation in tests."""

    def now(self) -> datetime: ...

    def today(self) -> date: ...


class SystemClock:
    """
    Wall clock pinned to a single UTC offset.

    The local offset is captured once at construction, so every timestamp
    produced during a process run carries the same offset.
    """

    def __init__(self, tz: Optional[tzinfo] = None) -> None:
        self._tz = tz or datetime.now().astimezone().tzinfo

    def now(self) -> datetime:
        return datetime.now(self._tz)

    def today(self) -> date:
        return self.now().date()


class FixedClock:
    """Clock that only moves when told to."""

    def __init__(self, current: datetime) -> None:
        self._current = current

    def now(self) -> datetime:
        return self._current

    def today(self) -> date:
        return self._current.date()

    def advance(self, delta: timedelta) -> None:
        self._current = self._current + delta
