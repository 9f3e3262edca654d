from .app_factory import create_app
from .health_router import router as health_router
from .task_handler import TaskHandler

__all__ = ["TaskHandler", "create_app", "health_router"]
