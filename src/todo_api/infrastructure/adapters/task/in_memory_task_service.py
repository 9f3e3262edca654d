from uuid import uuid4

from todo_api.core.application.ports.task_service_port import TaskServicePort
from todo_api.core.domain.exceptions import InvalidTaskError, TaskNotFoundError
from todo_api.core.domain.task import Task
from todo_api.infrastructure.observability.logger_factory_service import get_logger

logger = get_logger("in_memory_task_service")


class InMemoryTaskService(TaskServicePort):
    """Dict-backed task service. State lives for the lifetime of the process."""

    def __init__(self) -> None:
        self._tasks: dict[str, Task] = {}

    async def create(self, description: str) -> Task:
        self._ensure_description(description)
        task = Task(id=str(uuid4()), description=description)
        self._tasks[task.id] = task
        logger.info("Task created", task_id=task.id)
        return task

    async def read(self, task_id: str) -> Task:
        task = self._tasks.get(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    async def update(self, task_id: str, description: str) -> None:
        task = await self.read(task_id)
        self._ensure_description(description)
        self._tasks[task_id] = task.with_description(description)
        logger.info("Task updated", task_id=task_id)

    @staticmethod
    def _ensure_description(description: str) -> None:
        if not description.strip():
            raise InvalidTaskError("description is required")
