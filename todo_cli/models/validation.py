# File Summary: Field validation for todo records with per-category error collection.

"""
Validation rules for todo records.

Checks run once, when a record is constructed. Errors are collected per
field category so a single pass can report every problem at once.
"""

from dataclasses import dataclass, field
from typing import List

MAX_TITLE_LENGTH = 100


@dataclass
class ValidationErrors:
    """Validation complaints grouped by field."""
    title_errors: List[str] = field(default_factory=list)
    id_errors: List[str] = field(default_factory=list)
    status_errors: List[str] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not (self.title_errors or self.id_errors or self.status_errors)

    def __str__(self) -> str:
        lines: List[str] = []
        for header, messages in (
            ("Title errors:", self.title_errors),
            ("ID errors:", self.id_errors),
            ("Status errors:", self.status_errors),
        ):
            if messages:
                lines.append(header)
                lines.extend(messages)
        return "\n".join(lines)


def validate_todo(todo_id: int, title: str) -> ValidationErrors:
    """Check a candidate record and return every complaint found.

    Status is a plain boolean and has no invalid values, so its category
    is always empty.
    """
    errors = ValidationErrors()

    if not title:
        errors.title_errors.append("Title cannot be empty.")
    if len(title) > MAX_TITLE_LENGTH:
        errors.title_errors.append(f"Title cannot exceed {MAX_TITLE_LENGTH} characters.")

    if todo_id < 0:
        errors.id_errors.append("ID cannot be negative.")

    return errors
