from todo_api.core.domain.exceptions.domain_error import DomainError


class TaskNotFoundError(DomainError):
    """Raised when no task exists for the requested id."""

    def __init__(self, task_id: str) -> None:
        super().__init__(f"task {task_id!r} not found", context={"task_id": task_id})
        self.task_id = task_id
