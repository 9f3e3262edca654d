from todo_api.core.application.ports.task_service_port import TaskServicePort

__all__ = ["TaskServicePort"]
