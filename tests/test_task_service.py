"""Tests for task creation with bank holiday validation."""
from datetime import datetime, timezone
from unittest.mock import MagicMock
import pytest
from caseworker.exceptions import HolidayConflictError, TaskNotFoundError, TaskStoreError
from caseworker.models.task import Task, TaskCreateRequest, TaskResponse, TaskStatus
from caseworker.services.holiday_cache import HolidayCache
from caseworker.services.holiday_checker import HolidayChecker
from caseworker.services.task_service import TaskService
from caseworker.storage.database import TaskStore
from conftest import CountingHolidaySource, FakeClock

SAVED_AT = datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc)


def make_request(due_date: datetime, **overrides) -> TaskCreateRequest:
    """Build an already field-validated request (fixed dates may be in the past)."""
    fields = {
        "title": "Review documents",
        "description": "Review all submitted documents for case ABC123",
        "status": TaskStatus.PENDING,
        "due_date": due_date,
    }
    fields.update(overrides)
    return TaskCreateRequest.model_construct(**fields)


def fake_save(task: Task) -> Task:
    return task.model_copy(update={"id": 42, "created_at": SAVED_AT, "updated_at": SAVED_AT})


@pytest.fixture
def task_store():
    store = MagicMock(spec=TaskStore)
    store.save.side_effect = fake_save
    return store


def make_service(task_store, *results):
    source = CountingHolidaySource(list(results))
    checker = HolidayChecker(HolidayCache(source, clock=FakeClock()), region="england-and-wales")
    return TaskService(task_store, checker), source


@pytest.mark.asyncio
async def test_rejects_task_due_on_holiday(task_store, snapshot):
    """Christmas Day is rejected with the holiday details and nothing is saved."""
    service, _ = make_service(task_store, snapshot)

    with pytest.raises(HolidayConflictError) as exc_info:
        await service.create_task(make_request(datetime(2026, 12, 25, 9, 0)))

    assert exc_info.value.holiday_name == "Christmas Day"
    assert exc_info.value.holiday_date == "2026-12-25"
    task_store.save.assert_not_called()


@pytest.mark.asyncio
async def test_rejects_every_holiday_in_region(task_store, snapshot):
    service, _ = make_service(task_store, snapshot)

    for event in snapshot.calendar("england-and-wales").events:
        due = datetime(event.date.year, event.date.month, event.date.day, 17, 30)
        with pytest.raises(HolidayConflictError) as exc_info:
            await service.create_task(make_request(due))
        assert exc_info.value.holiday_name == event.title
        assert exc_info.value.holiday_date == event.date.isoformat()

    assert task_store.save.call_count == 0


@pytest.mark.asyncio
async def test_creates_task_on_working_day(task_store, snapshot):
    """A non-holiday due date is saved exactly once with the request fields."""
    service, _ = make_service(task_store, snapshot)
    request = make_request(datetime(2026, 12, 28, 9, 0))

    response = await service.create_task(request)

    task_store.save.assert_called_once_with(
        Task(
            title="Review documents",
            description="Review all submitted documents for case ABC123",
            status=TaskStatus.PENDING,
            due_date=datetime(2026, 12, 28, 9, 0),
        )
    )
    assert isinstance(response, TaskResponse)
    assert response.id == 42
    assert response.title == request.title
    assert response.description == request.description
    assert response.status == TaskStatus.PENDING
    assert response.due_date == datetime(2026, 12, 28, 9, 0)
    assert response.created_at == response.updated_at == SAVED_AT


@pytest.mark.asyncio
async def test_holiday_in_other_region_is_allowed(task_store, snapshot):
    """St Andrew's Day only applies to Scotland."""
    service, _ = make_service(task_store, snapshot)

    await service.create_task(make_request(datetime(2026, 11, 30, 9, 0)))

    task_store.save.assert_called_once()


@pytest.mark.asyncio
async def test_creates_task_when_calendar_unavailable(task_store, unavailable):
    """An unreachable calendar never blocks task creation."""
    service, _ = make_service(task_store, unavailable)

    response = await service.create_task(make_request(datetime(2026, 12, 25, 9, 0)))

    assert response.id == 42
    task_store.save.assert_called_once()


@pytest.mark.asyncio
async def test_store_failure_propagates_unchanged(task_store, snapshot):
    error = TaskStoreError("Failed to save task")
    task_store.save.side_effect = error
    service, _ = make_service(task_store, snapshot)

    with pytest.raises(TaskStoreError) as exc_info:
        await service.create_task(make_request(datetime(2026, 12, 28, 9, 0)))

    assert exc_info.value is error
    assert not isinstance(exc_info.value, HolidayConflictError)


@pytest.mark.asyncio
async def test_calendar_fetched_once_for_several_tasks(task_store, snapshot):
    service, source = make_service(task_store, snapshot)

    await service.create_task(make_request(datetime(2026, 12, 28, 9, 0)))
    await service.create_task(make_request(datetime(2026, 12, 29, 9, 0)))

    assert source.calls == 1
    assert task_store.save.call_count == 2


@pytest.mark.asyncio
async def test_get_task(task_store, snapshot):
    task_store.get.return_value = fake_save(
        Task(title="Review documents", status=TaskStatus.COMPLETED, due_date=datetime(2026, 12, 28, 9, 0))
    )
    service, _ = make_service(task_store, snapshot)

    response = await service.get_task(42)

    task_store.get.assert_called_once_with(42)
    assert response.status == TaskStatus.COMPLETED


@pytest.mark.asyncio
async def test_get_missing_task(task_store, snapshot):
    task_store.get.return_value = None
    service, _ = make_service(task_store, snapshot)

    with pytest.raises(TaskNotFoundError):
        await service.get_task(7)
