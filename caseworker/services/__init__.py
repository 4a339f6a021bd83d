from .holiday_cache import HolidayCache
from .holiday_checker import HolidayChecker
from .task_service import TaskService

__all__ = [
    "HolidayCache",
    "HolidayChecker",
    "TaskService",
]
