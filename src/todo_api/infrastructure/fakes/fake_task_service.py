from todo_api.core.application.ports.task_service_port import TaskServicePort
from todo_api.core.domain.task import Task


class FakeTaskService(TaskServicePort):
    """
    Scripted implementation for tests.
    Records every call and returns (or raises) whatever was pre-programmed.
    Unscripted operations succeed with an empty Task.
    """

    def __init__(self) -> None:
        self.create_calls: list[str] = []
        self.read_calls: list[str] = []
        self.update_calls: list[tuple[str, str]] = []
        self._create_result: tuple[Task, Exception | None] = (Task(id="", description=""), None)
        self._read_result: tuple[Task, Exception | None] = (Task(id="", description=""), None)
        self._update_error: Exception | None = None

    def create_returns(self, task: Task, error: Exception | None = None) -> None:
        self._create_result = (task, error)

    def read_returns(self, task: Task, error: Exception | None = None) -> None:
        self._read_result = (task, error)

    def update_returns(self, error: Exception | None = None) -> None:
        self._update_error = error

    async def create(self, description: str) -> Task:
        self.create_calls.append(description)
        task, error = self._create_result
        if error is not None:
            raise error
        return task

    async def read(self, task_id: str) -> Task:
        self.read_calls.append(task_id)
        task, error = self._read_result
        if error is not None:
            raise error
        return task

    async def update(self, task_id: str, description: str) -> None:
        self.update_calls.append((task_id, description))
        if self._update_error is not None:
            raise self._update_error
