from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Task:
    id: str
    description: str

    def with_description(self, description: str) -> "Task":
        """Return a copy carrying the new description; the id is kept."""
        return replace(self, description=description)
