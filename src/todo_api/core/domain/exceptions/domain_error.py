from typing import Any


class DomainError(Exception):
    """Base exception for all errors raised by task service implementations."""

    def __init__(self, message: str = "", *, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.context: dict[str, Any] = context or {}
