from todo_api.core.domain.exceptions.domain_error import DomainError


class InvalidTaskError(DomainError):
    """Raised when a task violates a business rule (e.g. empty description)."""
