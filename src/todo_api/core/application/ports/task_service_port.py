from abc import ABC, abstractmethod

from todo_api.core.domain.task import Task


class TaskServicePort(ABC):
    """Port for task management consumed by the HTTP layer.

    Implementations signal failure by raising. Callers treat every exception
    as an opaque failure; the ``DomainError`` hierarchy in
    ``core.domain.exceptions`` exists for implementations and logs only.
    """

    @abstractmethod
    async def create(self, description: str) -> Task:
        """Create a task and return it with its server-assigned id."""

    @abstractmethod
    async def read(self, task_id: str) -> Task:
        """Return the task identified by *task_id*."""

    @abstractmethod
    async def update(self, task_id: str, description: str) -> None:
        """Replace the description of the task identified by *task_id*."""
