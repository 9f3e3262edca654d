from todo_api.core.domain.task.task import Task

__all__ = ["Task"]
