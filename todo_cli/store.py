# File Summary: In-memory todo store keeping the record sequence and title index consistent.

"""
Todo store for the CLI.

Records live in insertion order in ``todos``. Two lookups sit beside the
sequence: ids map to records, and titles map to ids. Ids come from a
counter owned by the store and are never handed out twice, so removing a
record never invalidates the lookup entries of the records around it.
"""

import logging
from typing import Callable, Dict, Iterator, List, Optional

from . import output
from .errors import DuplicateTitleError, TodoNotFoundError
from .models.schema import TodoRecord
from .persistence import PathLike, read_snapshot, write_snapshot

logger = logging.getLogger(__name__)


class TodoManager:
    """Owns the todo sequence and its title index."""

    def __init__(self, allow_duplicate_titles: bool = False, json_indent: Optional[int] = None):
        self.allow_duplicate_titles = allow_duplicate_titles
        self.json_indent = json_indent
        self.todos: List[TodoRecord] = []
        self.title_index: Dict[str, int] = {}
        self._by_id: Dict[int, TodoRecord] = {}
        self._next_id = 0

    def __len__(self) -> int:
        return len(self.todos)

    def __iter__(self) -> Iterator[TodoRecord]:
        return iter(list(self.todos))

    def __contains__(self, title: object) -> bool:
        return title in self.title_index

    # ------------------------------------------------------------------
    # Internal bookkeeping
    # ------------------------------------------------------------------

    def _detach(self, todo: TodoRecord) -> None:
        """Remove one record from the sequence and both lookups."""
        self.todos.remove(todo)
        del self._by_id[todo.id]
        if self.title_index.get(todo.title) == todo.id:
            self._reindex_title(todo.title)

    def _reindex_title(self, title: str) -> None:
        # Latest remaining record with the same title wins, matching load order.
        for todo in reversed(self.todos):
            if todo.title == title:
                self.title_index[title] = todo.id
                return
        self.title_index.pop(title, None)

    def _remove_where(self, predicate: Callable[[TodoRecord], bool]) -> int:
        doomed = [todo for todo in self.todos if predicate(todo)]
        for todo in doomed:
            self._detach(todo)
        return len(doomed)

    def _lookup_title(self, title: str) -> TodoRecord:
        todo_id = self.title_index.get(title)
        if todo_id is None:
            raise TodoNotFoundError.for_title(title)
        return self._by_id[todo_id]

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add(self, title: str) -> TodoRecord:
        """Validate and append a new todo, returning it."""
        todo = TodoRecord.create(self._next_id, title)
        if not self.allow_duplicate_titles and title in self.title_index:
            raise DuplicateTitleError(title)
        self._next_id += 1
        self.todos.append(todo)
        self._by_id[todo.id] = todo
        self.title_index[title] = todo.id
        logger.debug("Added todo %d: %r", todo.id, title)
        return todo

    def remove_by_status(self, status: bool) -> int:
        """Remove every todo whose status equals ``status``."""
        removed = self._remove_where(lambda todo: todo.status == status)
        logger.debug("Removed %d todos with status %s", removed, status)
        return removed

    def remove_by_id_range(self, min_id: int, max_id: int) -> int:
        """Remove every todo with ``min_id <= id <= max_id``."""
        removed = self._remove_where(lambda todo: min_id <= todo.id <= max_id)
        logger.debug("Removed %d todos with ids in [%d, %d]", removed, min_id, max_id)
        return removed

    def remove_all_todos(self) -> int:
        removed = len(self.todos)
        self.todos.clear()
        self._by_id.clear()
        self.title_index.clear()
        logger.debug("Removed all %d todos", removed)
        return removed

    def remove_by_id(self, todo_id: int) -> TodoRecord:
        todo = self.find_by_id(todo_id)
        self._detach(todo)
        logger.debug("Removed todo %d", todo_id)
        return todo

    def remove_by_title(self, title: str) -> TodoRecord:
        todo = self._lookup_title(title)
        self._detach(todo)
        logger.debug("Removed todo %d by title %r", todo.id, title)
        return todo

    def toggle_by_id(self, todo_id: int) -> TodoRecord:
        todo = self.find_by_id(todo_id)
        todo.toggle()
        return todo

    def toggle_by_title(self, title: str) -> TodoRecord:
        todo = self._lookup_title(title)
        todo.toggle()
        return todo

    def toggle_by_status(self, status: bool) -> int:
        """Set every todo's status to ``status``; returns how many were touched."""
        for todo in self.todos:
            todo.status = status
        return len(self.todos)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def find_by_id(self, todo_id: int) -> TodoRecord:
        todo = self._by_id.get(todo_id)
        if todo is None:
            raise TodoNotFoundError.for_id(todo_id)
        return todo

    def find_by_title(self, title: str) -> TodoRecord:
        return self._lookup_title(title)

    def find_by_status(self, status: bool) -> List[TodoRecord]:
        return [todo for todo in self.todos if todo.status == status]

    # ------------------------------------------------------------------
    # Printing
    # ------------------------------------------------------------------

    def print_all(self) -> None:
        for todo in self.todos:
            output.print_record(todo.render())

    def print_by_id(self, todo_id: int) -> None:
        try:
            todo = self.find_by_id(todo_id)
        except TodoNotFoundError as e:
            output.print_error(str(e))
            return
        output.print_record(todo.render())

    def print_by_title(self, title: str) -> None:
        try:
            todo = self.find_by_title(title)
        except TodoNotFoundError as e:
            output.print_error(str(e))
            return
        output.print_record(todo.render())

    def print_by_status(self, status: bool) -> None:
        for todo in self.find_by_status(status):
            output.print_record(todo.render())

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def save_to_json(self, path: PathLike) -> int:
        """Overwrite ``path`` with a snapshot; returns the number of todos saved."""
        return write_snapshot(path, self.todos, indent=self.json_indent)

    def load_from_json(self, path: PathLike) -> int:
        """Replace the store's contents with the snapshot at ``path``.

        The store is left untouched if the file cannot be read or parsed.
        """
        todos = read_snapshot(path)

        by_id: Dict[int, TodoRecord] = {}
        title_index: Dict[str, int] = {}
        next_id = max(max((todo.id for todo in todos), default=-1) + 1, 0)
        for todo in todos:
            if todo.id in by_id:
                logger.warning("Snapshot %s repeats id %d; renumbering to %d", path, todo.id, next_id)
                todo.id = next_id
                next_id += 1
            if todo.title in title_index:
                logger.warning("Snapshot %s repeats title %r; indexing the later record", path, todo.title)
            by_id[todo.id] = todo
            title_index[todo.title] = todo.id

        self.todos = todos
        self._by_id = by_id
        self.title_index = title_index
        self._next_id = next_id
        return len(self.todos)
