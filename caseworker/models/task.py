"""Task data models."""
from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class TaskStatus(str, Enum):
    """Lifecycle status of a caseworker task."""

    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class TaskCreateRequest(BaseModel):
    """Request body for creating a new task."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "title": "Review case documents",
                "description": "Review all submitted documents for case ABC123",
                "status": "PENDING",
                "dueDate": "2026-12-31T17:00:00",
            }
        },
    )

    title: str = Field(..., min_length=1, max_length=255, description="The title of the task")
    description: Optional[str] = Field(None, max_length=1000, description="Optional description of the task")
    status: TaskStatus = Field(..., description="The current status of the task")
    due_date: datetime = Field(..., alias="dueDate", description="The due date and time for the task")

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        """Reject whitespace-only titles."""
        if not v.strip():
            raise ValueError("Title is required")
        return v

    @field_validator("due_date")
    @classmethod
    def validate_due_date(cls, v: datetime) -> datetime:
        """Due date must be strictly in the future."""
        now = datetime.now(v.tzinfo) if v.tzinfo else datetime.now()
        if v <= now:
            raise ValueError("Due date must be in the future")
        return v


class Task(BaseModel):
    """
    Task record.

    A draft has no id and no timestamps; the store assigns them on save.
    """

    id: Optional[int] = None
    title: str
    description: Optional[str] = None
    status: TaskStatus
    due_date: datetime
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def draft_from(cls, request: TaskCreateRequest) -> "Task":
        """Build an unsaved task from a creation request."""
        return cls(
            title=request.title,
            description=request.description,
            status=request.status,
            due_date=request.due_date,
        )


class TaskResponse(BaseModel):
    """Response body containing task details."""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., description="Unique identifier of the task")
    title: str
    description: Optional[str] = None
    status: TaskStatus
    due_date: datetime = Field(..., alias="dueDate")
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")

    @classmethod
    def from_task(cls, task: Task) -> "TaskResponse":
        """Create a response from a saved task."""
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            status=task.status,
            due_date=task.due_date,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )
