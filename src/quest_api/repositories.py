from __future__ import annotations

import logging
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass
from threading import Lock
from typing import Dict, List, Optional

from .clock import Clock, SystemClock
from .errors import QuestConflictError, QuestNotFoundError
from .models import QuestEntity, QuestResult
from .scheduling import working_days_until
from .schemas import QuestCreate, QuestUpdate

logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


@dataclass(frozen=True)
class ListQuery:
    """
    Page-based query for listing quests. Pages are 1-based.
    """
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


# PUBLIC_INTERFACE
class QuestRepository(ABC):
    """Abstract repository contract for quest storage."""

    @abstractmethod
    def create(self, data: QuestCreate) -> QuestResult:
        """Store a new quest. Raises QuestConflictError on duplicate title or missing deadline."""

    @abstractmethod
    def list(self, query: Optional[ListQuery] = None) -> List[QuestEntity]:
        """Return one page of quests in insertion order; an out-of-range page is empty."""

    @abstractmethod
    def get(self, quest_id: str) -> QuestResult:
        """Return a quest by id. Raises QuestNotFoundError if absent."""

    @abstractmethod
    def update(self, quest_id: str, data: QuestUpdate) -> QuestResult:
        """Merge the supplied fields into a quest. Raises QuestNotFoundError if absent."""

    @abstractmethod
    def delete(self, quest_id: str) -> None:
        """Remove a quest permanently. Raises QuestNotFoundError if absent."""


class InMemoryQuestRepository(QuestRepository):
    """
    Thread-safe in-memory quest store.

    A single lock guards the whole collection and is held for the full
    read-modify-write of every operation, so each call either applies
    completely or fails before touching anything.
    """

    def __init__(self, clock: Optional[Clock] = None) -> None:
        self._lock = Lock()
        self._items: Dict[str, QuestEntity] = {}
        self._clock: Clock = clock or SystemClock()

    def _result(self, entity: QuestEntity) -> QuestResult:
        deadline = entity["deadline"]
        days_left = None if deadline is None else working_days_until(deadline, self._clock.today())
        return QuestResult(quest=entity.copy(), days_left=days_left)

    def _find(self, quest_id: str) -> QuestEntity:
        entity = self._items.get(quest_id)
        if entity is None:
            raise QuestNotFoundError(quest_id)
        return entity

    def create(self, data: QuestCreate) -> QuestResult:
        with self._lock:
            if any(q["title"] == data.title for q in self._items.values()):
                raise QuestConflictError(f"Quest with title: '{data.title}' already exists")
            if data.deadline is None:
                raise QuestConflictError("Deadline is required.")

            now = self._clock.now()
            entity: QuestEntity = {
                "id": str(uuid.uuid4()),
                "title": data.title,
                "content": data.content,
                "deadline": data.deadline,
                "completed": False,
                "created_at": now,
                "updated_at": now,
            }
            self._items[entity["id"]] = entity
            result = self._result(entity)

        logger.info("Created quest %s (%r)", entity["id"], entity["title"])
        return result

    def list(self, query: Optional[ListQuery] = None) -> List[QuestEntity]:
        q = query or ListQuery()
        start = max(q.offset, 0)
        end = start + max(q.limit, 0)
        with self._lock:
            page = list(self._items.values())[start:end]
            # Return copies to avoid external mutation
            return [t.copy() for t in page]

    def get(self, quest_id: str) -> QuestResult:
        with self._lock:
            return self._result(self._find(quest_id))

    def update(self, quest_id: str, data: QuestUpdate) -> QuestResult:
        with self._lock:
            existing = self._find(quest_id)

            updated = existing.copy()
            # Empty strings are a no-op for title and content
            if data.title:
                updated["title"] = data.title
            if data.content:
                updated["content"] = data.content
            if data.deadline is not None:
                updated["deadline"] = data.deadline
            if "completed" in data.model_fields_set and data.completed is not None:
                updated["completed"] = data.completed
            updated["updated_at"] = self._clock.now()

            self._items[quest_id] = updated
            result = self._result(updated)

        logger.info("Updated quest %s", quest_id)
        return result

    def delete(self, quest_id: str) -> None:
        with self._lock:
            self._find(quest_id)
            del self._items[quest_id]
        logger.info("Deleted quest %s", quest_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)
