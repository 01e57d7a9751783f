# File Summary: Command registry mapping command names to store operations.

"""
Command registry for the todo CLI.

Each command handler takes the store and the raw argument string (everything
after the first space). Handlers report their own results through ``output``
and raise ``TodoError`` for anything the user should see as a failure.
"""

import logging
import re
from typing import Callable, Dict, List, Optional, Tuple

from . import output
from .errors import ParseError, TodoError
from .help_text import help_lines
from .store import TodoManager

logger = logging.getLogger(__name__)

Handler = Callable[[TodoManager, str], None]

MISSING_ARGUMENT = {
    "title": "Please provide a title",
    "id": "Please provide an id",
    "status": "Please provide a status",
    "filename": "Please provide a filename",
    "range": "Please provide a minimum and maximum id",
}

EXIT_COMMANDS = {"exit", "quit"}

ID_RE = re.compile(r"[+-]?[0-9]+")


class MissingArgument(Exception):
    """A command was given without its required argument."""

    def __init__(self, kind: str):
        super().__init__(MISSING_ARGUMENT[kind])
        self.kind = kind


# ============================================================================
# ARGUMENT PARSING
# ============================================================================

def split_command(line: str) -> Tuple[str, str]:
    """Split an input line into command and argument string at the first space."""
    cmd, _, args = line.partition(" ")
    return cmd, args


def parse_id(raw: str) -> int:
    value = raw.strip()
    # ASCII digits with an optional sign; int() alone accepts "1_000" and "٣".
    if not ID_RE.fullmatch(value):
        raise ParseError(f"Invalid id: {value}", {"id": value})
    return int(value)


def parse_status(raw: str) -> bool:
    value = raw.strip()
    lowered = value.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    raise ParseError(f"Invalid status: {value} (expected true or false)", {"status": value})


def parse_id_range(raw: str) -> Tuple[int, int]:
    parts = raw.split()
    if len(parts) != 2:
        raise ParseError(f"Invalid id range: {raw.strip()} (expected <min> <max>)", {"range": raw.strip()})
    return parse_id(parts[0]), parse_id(parts[1])


def _require(args: str, kind: str) -> str:
    if not args:
        raise MissingArgument(kind)
    return args


# ============================================================================
# HANDLERS
# ============================================================================

def cmd_add(manager: TodoManager, args: str) -> None:
    manager.add(_require(args, "title"))
    output.print_success("Todo added successfully.")


def cmd_remove_all(manager: TodoManager, args: str) -> None:
    removed = manager.remove_all_todos()
    output.print_success(f"Removed {removed} todo(s).")


def cmd_remove_by_id(manager: TodoManager, args: str) -> None:
    manager.remove_by_id(parse_id(_require(args, "id")))
    output.print_success("Todo removed successfully.")


def cmd_remove_by_title(manager: TodoManager, args: str) -> None:
    manager.remove_by_title(_require(args, "title"))
    output.print_success("Todo removed successfully.")


def cmd_remove_by_status(manager: TodoManager, args: str) -> None:
    removed = manager.remove_by_status(parse_status(_require(args, "status")))
    output.print_success(f"Removed {removed} todo(s).")


def cmd_remove_by_id_range(manager: TodoManager, args: str) -> None:
    min_id, max_id = parse_id_range(_require(args, "range"))
    removed = manager.remove_by_id_range(min_id, max_id)
    output.print_success(f"Removed {removed} todo(s).")


def cmd_toggle_by_id(manager: TodoManager, args: str) -> None:
    manager.toggle_by_id(parse_id(_require(args, "id")))
    output.print_success("Todo toggled successfully.")


def cmd_toggle_by_title(manager: TodoManager, args: str) -> None:
    manager.toggle_by_title(_require(args, "title"))
    output.print_success("Todo toggled successfully.")


def cmd_toggle_by_status(manager: TodoManager, args: str) -> None:
    updated = manager.toggle_by_status(parse_status(_require(args, "status")))
    output.print_success(f"Updated {updated} todo(s).")


def cmd_print_all(manager: TodoManager, args: str) -> None:
    manager.print_all()


def cmd_print_by_status(manager: TodoManager, args: str) -> None:
    manager.print_by_status(parse_status(_require(args, "status")))


def cmd_print_by_id(manager: TodoManager, args: str) -> None:
    manager.print_by_id(parse_id(_require(args, "id")))


def cmd_print_by_title(manager: TodoManager, args: str) -> None:
    manager.print_by_title(_require(args, "title"))


def cmd_save_to_json(manager: TodoManager, args: str) -> None:
    filename = _require(args, "filename")
    saved = manager.save_to_json(filename)
    output.print_success(f"Saved {saved} todo(s) to {filename}.")


def cmd_load_from_json(manager: TodoManager, args: str) -> None:
    filename = _require(args, "filename")
    loaded = manager.load_from_json(filename)
    output.print_success(f"Loaded {loaded} todo(s) from {filename}.")


def cmd_help(manager: TodoManager, args: str) -> None:
    lines = help_lines(args)
    if lines is None:
        output.print_error(f"Invalid argument: {args}")
        return
    for line in lines:
        output.print_line(line)


COMMANDS: Dict[str, Handler] = {
    "add": cmd_add,
    "remove_all": cmd_remove_all,
    "remove_by_id": cmd_remove_by_id,
    "remove_by_title": cmd_remove_by_title,
    "remove_by_status": cmd_remove_by_status,
    "remove_by_id_range": cmd_remove_by_id_range,
    "toggle_by_id": cmd_toggle_by_id,
    "toggle_by_title": cmd_toggle_by_title,
    "toggle_by_status": cmd_toggle_by_status,
    "print_all": cmd_print_all,
    "print_by_status": cmd_print_by_status,
    "print_by_id": cmd_print_by_id,
    "print_by_title": cmd_print_by_title,
    "save_to_json": cmd_save_to_json,
    "load_from_json": cmd_load_from_json,
    "help": cmd_help,
}


def get_handler(cmd: str) -> Optional[Handler]:
    return COMMANDS.get(cmd)


def list_commands() -> List[str]:
    """List all command names, including the exit aliases."""
    return list(COMMANDS) + sorted(EXIT_COMMANDS)


def dispatch(line: str, manager: TodoManager) -> bool:
    """Run one input line against the store.

    Returns False when the line asks the loop to stop, True otherwise.
    Failures are reported and swallowed here so the loop can carry on.
    """
    cmd, args = split_command(line)

    if cmd in EXIT_COMMANDS:
        return False

    handler = get_handler(cmd)
    if handler is None:
        output.print_error("Invalid command")
        return True

    try:
        handler(manager, args)
    except MissingArgument as e:
        output.print_warning(str(e))
    except TodoError as e:
        logger.debug("Command %s failed: %s", cmd, e.to_dict())
        output.print_error(str(e))
    return True
