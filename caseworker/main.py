"""FastAPI main application."""
import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from caseworker import __version__
from caseworker.adapters.base import HolidaySource
from caseworker.adapters.factory import get_holiday_source
from caseworker.config import Settings, settings as default_settings
from caseworker.exceptions import HolidayConflictError, TaskNotFoundError, TaskStoreError
from caseworker.logging_config import configure_logging
from caseworker.models.error import ErrorResponse
from caseworker.models.holiday import HolidayDatesResponse
from caseworker.models.task import TaskCreateRequest, TaskResponse
from caseworker.services.holiday_cache import HolidayCache
from caseworker.services.holiday_checker import HolidayChecker
from caseworker.services.task_service import TaskService
from caseworker.storage.database import TaskStore

logger = logging.getLogger(__name__)

router = APIRouter()


def get_task_service(request: Request) -> TaskService:
    return request.app.state.task_service


def get_holiday_checker(request: Request) -> HolidayChecker:
    return request.app.state.holiday_checker


@router.get("/")
async def root():
    """Root endpoint."""
    return {"message": "Caseworker Task API", "version": __version__}


@router.post("/api/tasks", response_model=TaskResponse, status_code=201)
async def create_task(
    task: TaskCreateRequest,
    task_service: TaskService = Depends(get_task_service),
):
    """
    Create a new task.

    Returns 400 if the request is invalid or the due date falls on a bank
    holiday in the configured region.
    """
    return await task_service.create_task(task)


@router.get("/api/tasks/{task_id}", response_model=TaskResponse)
async def get_task(
    task_id: int,
    task_service: TaskService = Depends(get_task_service),
):
    """Get a task by id."""
    return await task_service.get_task(task_id)


@router.get("/api/bank-holidays", response_model=HolidayDatesResponse)
async def list_bank_holidays(checker: HolidayChecker = Depends(get_holiday_checker)):
    """Bank holiday dates for the configured region (empty if the calendar is unavailable)."""
    dates = await checker.all_holiday_dates()
    return HolidayDatesResponse(region=checker.region, dates=sorted(dates))


def _error_response(status: int, message: str, errors: list) -> JSONResponse:
    body = ErrorResponse(status=status, message=message, errors=errors)
    return JSONResponse(status_code=status, content=body.model_dump(mode="json"))


def register_exception_handlers(app: FastAPI) -> None:
    """Map service exceptions to ErrorResponse bodies."""

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        errors = []
        for error in exc.errors():
            loc = [str(part) for part in error.get("loc", ())]
            field = ".".join(loc[1:]) or ".".join(loc)
            errors.append(f"{field}: {error.get('msg')}")
        return _error_response(400, "Validation failed", errors)

    @app.exception_handler(HolidayConflictError)
    async def handle_holiday_conflict(request: Request, exc: HolidayConflictError):
        return _error_response(400, "Task cannot be created on a bank holiday", [str(exc)])

    @app.exception_handler(TaskNotFoundError)
    async def handle_not_found(request: Request, exc: TaskNotFoundError):
        return _error_response(404, "Task not found", [str(exc)])

    @app.exception_handler(TaskStoreError)
    async def handle_store_error(request: Request, exc: TaskStoreError):
        return _error_response(500, "An unexpected error occurred", [str(exc)])

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return _error_response(500, "An unexpected error occurred", [str(exc) or type(exc).__name__])


def create_app(
    settings: Optional[Settings] = None,
    holiday_source: Optional[HolidaySource] = None,
    task_store: Optional[TaskStore] = None,
) -> FastAPI:
    """
    Build the application.

    The holiday cache and task service are created when the app starts and
    kept on ``app.state``; the cache is cleared on shutdown.

    Args:
        settings: Settings to use, defaults to the environment settings
        holiday_source: Override the configured holiday source
        task_store: Override the SQLite store at ``settings.database_path``
    """
    settings = settings or default_settings
    configure_logging(settings.log_level, settings.log_format)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        source = holiday_source if holiday_source is not None else get_holiday_source(settings)
        cache = HolidayCache(
            source,
            ttl_seconds=settings.holiday_cache_ttl_seconds,
            max_stale_seconds=settings.holiday_cache_max_stale_seconds,
        )
        checker = HolidayChecker(cache, region=settings.holiday_region)
        store = task_store if task_store is not None else TaskStore(settings.database_path)

        app.state.holiday_cache = cache
        app.state.holiday_checker = checker
        app.state.task_service = TaskService(store, checker)
        logger.info(
            "Service started",
            extra={"holiday_source": source.name, "holiday_region": settings.holiday_region},
        )
        yield
        cache.clear()
        logger.info("Service stopped")

    app = FastAPI(title=settings.app_name, version=__version__, debug=settings.debug, lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)
    app.include_router(router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
