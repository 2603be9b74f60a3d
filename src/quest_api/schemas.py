from __future__ import annotations

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Wire format uses camelCase (createdAt, daysLeft, ...); Python code keeps snake_case.
_CAMEL = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# PUBLIC_INTERFACE
class QuestCreate(BaseModel):
    """
    Schema for creating a quest.

    id, completed and the timestamps are assigned by the store and cannot be
    supplied. The deadline is optional here so that its absence is reported
    by the store as a conflict rather than as a validation error.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Slay the dragon",
                "content": "Bring a fireproof shield",
                "deadline": "2025-02-07",
            }
        }
    )

    title: str = Field(..., description="Unique quest title", min_length=1)
    content: str = Field(..., description="Free-form quest description; may be empty")
    deadline: Optional[date] = Field(default=None, description="Due date (YYYY-MM-DD), required by the store")


# PUBLIC_INTERFACE
class QuestUpdate(BaseModel):
    """
    Schema for partially updating a quest.

    Every field is optional and only supplied fields are applied. An empty
    string for title or content is a no-op rather than a clear, and a deadline
    cannot be removed once set. completed is applied whenever it is present,
    including an explicit false.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Slay the dragon (again)",
                "completed": True,
            }
        }
    )

    title: Optional[str] = Field(default=None, description="New title; empty string leaves it unchanged")
    content: Optional[str] = Field(default=None, description="New content; empty string leaves it unchanged")
    deadline: Optional[date] = Field(default=None, description="New due date (YYYY-MM-DD)")
    completed: Optional[bool] = Field(default=None, description="Completion status flag")


# PUBLIC_INTERFACE
class QuestOut(BaseModel):
    """
    Schema returned by the API for a quest.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "6f1c2a3e-8a8f-4f43-9d55-0d6f4f7b8c11",
                "title": "Slay the dragon",
                "content": "Bring a fireproof shield",
                "deadline": "2025-02-07",
                "completed": False,
                "createdAt": "2025-01-25T10:15:30.123456+01:00",
                "updatedAt": "2025-01-26T09:00:00.000001+01:00",
            }
        },
    )

    id: str = Field(..., description="Unique identifier of the quest")
    title: str = Field(..., description="Quest title")
    content: str = Field(..., description="Quest description")
    deadline: Optional[date] = Field(default=None, description="Due date")
    completed: bool = Field(..., description="Completion status flag")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")


class QuestData(BaseModel):
    """Payload of a single-quest response."""

    model_config = _CAMEL

    quest: QuestOut
    days_left: Optional[int] = Field(default=None, description="Working days (Mon-Fri) until the deadline, today included")
    min_hours_per_day: Optional[float] = Field(
        default=None,
        description="Hours per remaining working day needed to finish; omitted when no working days are left",
    )


class SingleQuestResponse(BaseModel):
    status: str = "success"
    data: QuestData


class QuestListResponse(BaseModel):
    status: str = "success"
    results: int = Field(..., description="Number of quests in this page")
    quests: List[QuestOut]


class GenericResponse(BaseModel):
    status: str
    message: str
