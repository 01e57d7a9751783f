# File Summary: JSON snapshot reading and writing for the todo store.

"""
Snapshot persistence for todos.

A snapshot is the whole record sequence as a JSON array of
{"id", "title", "status"} objects. Saving overwrites the destination.
"""

import json
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from pydantic import ValidationError

from .errors import SnapshotParseError, StorageError
from .models.schema import SNAPSHOT_ADAPTER, TodoRecord

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def dump_snapshot(todos: Iterable[TodoRecord], indent: Optional[int] = None) -> str:
    """Serialize records to snapshot text, keeping field order."""
    payload = [todo.model_dump() for todo in todos]
    if indent is None:
        return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    return json.dumps(payload, ensure_ascii=False, indent=indent)


def parse_snapshot(text: str) -> List[TodoRecord]:
    """Decode snapshot text into records."""
    try:
        return SNAPSHOT_ADAPTER.validate_json(text)
    except ValidationError as e:
        raise SnapshotParseError(
            f"Invalid todo file: {e.error_count()} problem(s), first: {e.errors()[0]['msg']}",
            {"errors": e.errors(include_url=False)},
        ) from e


def write_snapshot(path: PathLike, todos: Iterable[TodoRecord], indent: Optional[int] = None) -> int:
    """Write a snapshot to path and return the number of records written."""
    records = list(todos)
    # Encode before opening so a bad title never truncates the existing file.
    try:
        data = dump_snapshot(records, indent=indent).encode("utf-8")
    except UnicodeEncodeError as e:
        raise StorageError(
            f"Error writing {path}: a todo title is not valid UTF-8 text", {"path": str(path)}
        ) from e
    try:
        with open(path, "wb") as f:
            f.write(data)
    except OSError as e:
        raise StorageError(f"Error writing {path}: {e.strerror or e}", {"path": str(path)}) from e
    logger.info("Saved %d todos to %s", len(records), path)
    return len(records)


def read_snapshot(path: PathLike) -> List[TodoRecord]:
    """Read and decode a snapshot file."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
    except UnicodeDecodeError as e:
        raise SnapshotParseError(f"Invalid todo file: {path} is not UTF-8 text", {"path": str(path)}) from e
    except OSError as e:
        raise StorageError(f"Error reading {path}: {e.strerror or e}", {"path": str(path)}) from e
    todos = parse_snapshot(content)
    logger.info("Loaded %d todos from %s", len(todos), path)
    return todos
