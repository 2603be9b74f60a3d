from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, TypedDict


# PUBLIC_INTERFACE
class QuestEntity(TypedDict):
    """
    A quest as held by the in-memory store.

    Fields:
    - id: UUID4 string assigned at creation
    - title: Non-empty title, unique among live quests at creation time
    - content: Free text, may be empty
    - deadline: Calendar date the quest is due
    - completed: Completion flag, False at creation
    - created_at: Creation timestamp (never changes)
    - updated_at: Last successful mutation timestamp
    """

    id: str
    title: str
    content: str
    deadline: Optional[date]
    completed: bool
    created_at: datetime
    updated_at: datetime


# PUBLIC_INTERFACE
@dataclass(frozen=True)
class QuestResult:
    """A stored quest together with its derived working-days figure."""

    quest: QuestEntity
    days_left: Optional[int]
