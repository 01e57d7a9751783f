"""
Centralized schemas for todo records and snapshots.

All record shapes are Pydantic models so the same definitions drive
construction, rendering and JSON decoding.
"""

from typing import List

from pydantic import BaseModel, Field, StrictBool, StrictInt, StrictStr, TypeAdapter

from ..errors import TodoValidationError
from .validation import validate_todo


# ============================================================================
# TODO RECORD
# ============================================================================

class TodoRecord(BaseModel):
    """Single todo item. Field order is part of the snapshot format."""
    id: StrictInt = Field(..., description="Identifier assigned by the store")
    title: StrictStr = Field(..., description="The task description")
    status: StrictBool = Field(False, description="True once the task is done")

    @classmethod
    def create(cls, todo_id: int, title: str) -> "TodoRecord":
        """Build a new, incomplete record after running field validation."""
        errors = validate_todo(todo_id, title)
        if not errors.is_empty():
            raise TodoValidationError(errors)
        return cls(id=todo_id, title=title, status=False)

    def toggle(self) -> None:
        self.status = not self.status

    def render(self) -> str:
        status = "true" if self.status else "false"
        return f"ID: {self.id}, Title: {self.title}, Status: {status}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TodoRecord):
            return NotImplemented
        return self.id == other.id


# ============================================================================
# SNAPSHOT
# ============================================================================

SNAPSHOT_ADAPTER: TypeAdapter[List[TodoRecord]] = TypeAdapter(List[TodoRecord])
