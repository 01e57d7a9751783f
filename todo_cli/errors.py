# File Summary: Error types raised by the todo store and reported by the command loop.

"""Structured error types for todo operations."""

from typing import Any, Dict, Mapping, Optional

from .models.validation import ValidationErrors


class TodoError(RuntimeError):
    """Base error carrying a machine-readable code and a user-facing message."""

    code = "TODO_ERROR"

    def __init__(self, message: str, details: Optional[Mapping[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details: Dict[str, Any] = dict(details or {})

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code, "message": self.message, "details": self.details}


class TodoValidationError(TodoError):
    """A candidate record failed field validation; nothing was stored."""

    code = "VALIDATION_ERROR"

    def __init__(self, errors: ValidationErrors) -> None:
        super().__init__(f"Validation error: {errors}")
        self.errors = errors


class DuplicateTitleError(TodoError):
    code = "DUPLICATE_TITLE"

    def __init__(self, title: str) -> None:
        super().__init__(
            f"A todo with the title '{title}' already exists.", {"title": title}
        )


class TodoNotFoundError(TodoError):
    code = "NOT_FOUND"

    @classmethod
    def for_id(cls, todo_id: int) -> "TodoNotFoundError":
        return cls(f"Todo with ID {todo_id} not found.", {"id": todo_id})

    @classmethod
    def for_title(cls, title: str) -> "TodoNotFoundError":
        return cls(f"Todo with title '{title}' not found.", {"title": title})


class StorageError(TodoError):
    """A snapshot file could not be created, opened, read or written."""

    code = "IO_ERROR"


class ParseError(TodoError):
    """A command argument could not be parsed."""

    code = "PARSE_ERROR"


class SnapshotParseError(ParseError):
    """A snapshot file exists but does not hold a valid list of todos."""
