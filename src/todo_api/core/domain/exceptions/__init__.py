from todo_api.core.domain.exceptions.domain_error import DomainError
from todo_api.core.domain.exceptions.invalid_task_error import InvalidTaskError
from todo_api.core.domain.exceptions.task_not_found_error import TaskNotFoundError

__all__ = ["DomainError", "InvalidTaskError", "TaskNotFoundError"]
