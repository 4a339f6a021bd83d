from .holiday import (
    HolidayEvent,
    RegionalCalendar,
    HolidaySnapshot,
    HolidayUnavailable,
    HolidayLookup,
    HolidayDatesResponse,
)
from .task import TaskStatus, TaskCreateRequest, Task, TaskResponse
from .error import ErrorResponse

__all__ = [
    "HolidayEvent",
    "RegionalCalendar",
    "HolidaySnapshot",
    "HolidayUnavailable",
    "HolidayLookup",
    "HolidayDatesResponse",
    "TaskStatus",
    "TaskCreateRequest",
    "Task",
    "TaskResponse",
    "ErrorResponse",
]
