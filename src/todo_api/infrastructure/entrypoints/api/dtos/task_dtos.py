from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class TaskDTO(BaseModel):
    id: str
    description: str


class _DescriptionRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    description: str = ""

    @field_validator("description", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        # JSON null decodes to the zero value, like an absent field
        return "" if value is None else value


class CreateTaskRequest(_DescriptionRequest):
    pass


class UpdateTaskRequest(_DescriptionRequest):
    pass


class CreateTaskResponse(BaseModel):
    task: TaskDTO


class ReadTaskResponse(BaseModel):
    task: TaskDTO


class UpdateTaskResponse(BaseModel):
    """A successful update returns an empty object, not the task."""


class ErrorResponse(BaseModel):
    error: str
