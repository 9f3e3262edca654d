"""HTTP handler for the task resource.

Each operation runs decode -> invoke -> encode against a TaskServicePort and
maps its outcome to a status code:

    decode failure   -> 400 {"error": "invalid request"}   (service untouched)
    service failure  -> 500 {"error": "<operation> failed"}
    success          -> 201 (create) / 200 (read, update)

Raw error text only ever reaches the logs.
"""

from typing import TypeVar

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError
from pydantic_core import from_json

from todo_api.core.application.ports.task_service_port import TaskServicePort
from todo_api.infrastructure.entrypoints.api.dtos.task_dtos import (
    CreateTaskRequest,
    CreateTaskResponse,
    ErrorResponse,
    ReadTaskResponse,
    UpdateTaskRequest,
    UpdateTaskResponse,
)
from todo_api.infrastructure.entrypoints.api.mappers.task_mapper import TaskMapper
from todo_api.infrastructure.observability.logger_factory_service import get_logger
from todo_api.infrastructure.observability.metrics_service import (
    TASK_REQUEST_DURATION_SECONDS,
    TASK_REQUESTS_TOTAL,
)
from todo_api.infrastructure.observability.tracing_setup import get_tracer

logger = get_logger("task_handler")

RequestT = TypeVar("RequestT", bound=BaseModel)

INVALID_REQUEST = "invalid request"
CREATE_FAILED = "create failed"
FIND_FAILED = "find failed"
UPDATE_FAILED = "update failed"


class InvalidRequestError(Exception):
    """Raised when a request body cannot be decoded into its DTO."""


class TaskHandler:
    """Binds the task operations of a TaskServicePort to HTTP routes."""

    def __init__(self, service: TaskServicePort) -> None:
        self._service = service

    def register(self, router: APIRouter) -> None:
        router.add_api_route(
            "/tasks",
            self.create,
            methods=["POST"],
            status_code=status.HTTP_201_CREATED,
            response_model=None,
        )
        router.add_api_route(
            "/tasks/{task_id}",
            self.read,
            methods=["GET"],
            status_code=status.HTTP_200_OK,
            response_model=None,
        )
        router.add_api_route(
            "/tasks/{task_id}",
            self.update,
            methods=["PUT"],
            status_code=status.HTTP_200_OK,
            response_model=None,
        )

    async def create(self, request: Request) -> JSONResponse:
        with TASK_REQUEST_DURATION_SECONDS.labels(operation="create").time():
            try:
                payload = _decode(CreateTaskRequest, await request.body())
            except InvalidRequestError as exc:
                return _invalid_request("create", exc)

            try:
                with get_tracer().start_as_current_span("task_service.create"):
                    task = await self._service.create(payload.description)
                body = CreateTaskResponse(task=TaskMapper.to_dto(task))
            except Exception as exc:
                return _service_failure("create", CREATE_FAILED, exc)

            return _respond("create", status.HTTP_201_CREATED, body)

    async def read(self, task_id: str) -> JSONResponse:
        with TASK_REQUEST_DURATION_SECONDS.labels(operation="read").time():
            try:
                with get_tracer().start_as_current_span("task_service.read"):
                    task = await self._service.read(task_id)
                body = ReadTaskResponse(task=TaskMapper.to_dto(task))
            except Exception as exc:
                return _service_failure("read", FIND_FAILED, exc, task_id=task_id)

            return _respond("read", status.HTTP_200_OK, body)

    async def update(self, task_id: str, request: Request) -> JSONResponse:
        with TASK_REQUEST_DURATION_SECONDS.labels(operation="update").time():
            try:
                payload = _decode(UpdateTaskRequest, await request.body())
            except InvalidRequestError as exc:
                return _invalid_request("update", exc, task_id=task_id)

            try:
                with get_tracer().start_as_current_span("task_service.update"):
                    await self._service.update(task_id, payload.description)
            except Exception as exc:
                return _service_failure("update", UPDATE_FAILED, exc, task_id=task_id)

            return _respond("update", status.HTTP_200_OK, UpdateTaskResponse())


def _decode(model: type[RequestT], body: bytes) -> RequestT:
    """Parse a raw JSON body into *model*; any parse or shape error is an InvalidRequestError.

    NaN and Infinity are not JSON and are rejected even in fields the model ignores.
    """
    try:
        data = from_json(body, allow_inf_nan=False)
        return model.model_validate(data)
    except (ValueError, ValidationError) as exc:
        raise InvalidRequestError(str(exc)) from exc


def _respond(operation: str, status_code: int, body: BaseModel, outcome: str = "success") -> JSONResponse:
    TASK_REQUESTS_TOTAL.labels(operation=operation, outcome=outcome).inc()
    return JSONResponse(status_code=status_code, content=body.model_dump())


def _invalid_request(operation: str, exc: InvalidRequestError, **context: str) -> JSONResponse:
    logger.warning(
        "Invalid request body",
        operation=operation,
        error_type=type(exc).__name__,
        error_details=str(exc),
        **context,
    )
    return _respond(
        operation,
        status.HTTP_400_BAD_REQUEST,
        ErrorResponse(error=INVALID_REQUEST),
        outcome="invalid_request",
    )


def _service_failure(operation: str, message: str, exc: Exception, **context: str) -> JSONResponse:
    logger.error(
        "Task service call failed",
        operation=operation,
        error_type=type(exc).__name__,
        error_details=str(exc),
        **context,
    )
    return _respond(
        operation,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ErrorResponse(error=message),
        outcome="service_error",
    )
