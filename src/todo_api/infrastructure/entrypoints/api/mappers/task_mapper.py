from todo_api.core.domain.task import Task
from todo_api.infrastructure.entrypoints.api.dtos.task_dtos import TaskDTO


class TaskMapper:
    """Maps the domain Task to its wire projection."""

    @staticmethod
    def to_dto(task: Task) -> TaskDTO:
        return TaskDTO(id=task.id, description=task.description)
