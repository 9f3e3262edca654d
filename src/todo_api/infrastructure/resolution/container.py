from todo_api.core.application.ports.task_service_port import TaskServicePort
from todo_api.infrastructure.adapters.task.in_memory_task_service import InMemoryTaskService


def build_task_service() -> TaskServicePort:
    """Build the task service backing the HTTP layer."""
    return InMemoryTaskService()
