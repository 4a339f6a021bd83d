"""Task creation service."""
import logging
from caseworker.exceptions import HolidayConflictError, TaskNotFoundError
from caseworker.models.task import Task, TaskCreateRequest, TaskResponse
from caseworker.services.holiday_checker import HolidayChecker
from caseworker.storage.database import TaskStore

logger = logging.getLogger(__name__)


class TaskService:
    """Service for task operations."""

    def __init__(self, task_store: TaskStore, holiday_checker: HolidayChecker):
        self.task_store = task_store
        self.holiday_checker = holiday_checker

    async def create_task(self, request: TaskCreateRequest) -> TaskResponse:
        """
        Create a new task.

        The due date is checked against the bank holiday calendar before
        anything is written. A task due on a holiday is rejected and the store
        is never called. Store errors propagate unchanged.

        Args:
            request: Field-validated task creation request

        Returns:
            The created task

        Raises:
            HolidayConflictError: If the due date is a bank holiday
            TaskStoreError: If the task could not be saved
        """
        try:
            await self.holiday_checker.validate_not_holiday(request.due_date)
        except HolidayConflictError as e:
            logger.info(
                "Rejected task due on a bank holiday",
                extra={"holiday_name": e.holiday_name, "holiday_date": e.holiday_date},
            )
            raise

        saved = self.task_store.save(Task.draft_from(request))
        logger.info("Task created", extra={"task_id": saved.id, "status": saved.status.value})
        return TaskResponse.from_task(saved)

    async def get_task(self, task_id: int) -> TaskResponse:
        """Get a task by id."""
        task = self.task_store.get(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return TaskResponse.from_task(task)
