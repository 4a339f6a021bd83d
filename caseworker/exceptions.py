"""Service-level exceptions."""


class TaskServiceError(Exception):
    """Base class for errors raised while handling tasks."""


class HolidayConflictError(TaskServiceError):
    """Raised when a task is due on a bank holiday."""

    def __init__(self, holiday_name: str, holiday_date: str):
        super().__init__(f"Cannot create task on bank holiday: {holiday_name} ({holiday_date})")
        self.holiday_name = holiday_name
        self.holiday_date = holiday_date


class TaskNotFoundError(TaskServiceError):
    """Raised when a task id is unknown."""

    def __init__(self, task_id: int):
        super().__init__(f"Task {task_id} not found")
        self.task_id = task_id


class TaskStoreError(TaskServiceError):
    """Raised when the task store fails to read or write."""
