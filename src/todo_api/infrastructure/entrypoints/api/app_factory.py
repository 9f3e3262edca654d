from fastapi import APIRouter, FastAPI

from todo_api.core.application.ports.task_service_port import TaskServicePort
from todo_api.infrastructure.configuration.main_settings import Settings
from todo_api.infrastructure.entrypoints.api.health_router import router as health_router
from todo_api.infrastructure.entrypoints.api.task_handler import TaskHandler
from todo_api.infrastructure.observability.logger_factory_service import (
    configure_logging,
    get_logger,
)
from todo_api.infrastructure.observability.logging.correlation_middleware import (
    CorrelationMiddleware,
)
from todo_api.infrastructure.observability.tracing_setup import configure_tracing
from todo_api.infrastructure.resolution.container import build_task_service

logger = get_logger("app_factory")


def create_app(settings: Settings, task_service: TaskServicePort | None = None) -> FastAPI:
    configure_logging(settings)
    if settings.tracing_enabled:
        configure_tracing()

    service = task_service if task_service is not None else build_task_service()
    logger.info(
        "Boot diagnostics",
        app_name=settings.app_name,
        app_env=settings.app_env,
        task_service=type(service).__name__,
        api_prefix=settings.api_prefix or "/",
    )

    app = FastAPI(title=settings.app_name)
    app.add_middleware(CorrelationMiddleware)

    task_router = APIRouter(tags=["tasks"])
    TaskHandler(service).register(task_router)

    app.include_router(health_router)
    app.include_router(task_router, prefix=settings.api_prefix)

    return app
