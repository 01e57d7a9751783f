# File Summary: Usage lines for every command, grouped into help topics.

"""
Help text for the todo CLI.

Each command has one usage line. Topics select which lines ``help <topic>``
prints; ``help`` and ``help all`` print every line under a heading.
"""

from typing import Dict, List, Optional

USAGE: Dict[str, str] = {
    "add": "add <title>: Add a new todo with the given title (error if a todo with the same title already exists)",
    "remove_by_id": "remove_by_id <id>: Remove the todo with the given id (error if no todo with the given id exists)",
    "remove_by_title": "remove_by_title <title>: Remove the todo with the given title (error if no todo with the given title exists)",
    "remove_by_status": "remove_by_status <status>: Remove all todos with the given status",
    "remove_by_id_range": "remove_by_id_range <min> <max>: Remove all todos whose id is between min and max, inclusive",
    "remove_all": "remove_all: Remove every todo",
    "toggle_by_id": "toggle_by_id <id>: Toggle the status of the todo with the given id (error if no todo with the given id exists)",
    "toggle_by_title": "toggle_by_title <title>: Toggle the status of the todo with the given title (error if no todo with the given title exists)",
    "toggle_by_status": "toggle_by_status <status>: Set the status of every todo to the given status",
    "print_all": "print_all: Print all todos",
    "print_by_status": "print_by_status <status>: Print all todos with the given status",
    "print_by_id": "print_by_id <id>: Print the todo with the given id (error if no todo with the given id exists)",
    "print_by_title": "print_by_title <title>: Print the todo with the given title (error if no todo with the given title exists)",
    "save_to_json": "save_to_json <filename>: Save todos to the given json file",
    "load_from_json": "load_from_json <filename>: Load todos from the given json file",
    "help": "help [topic]: Print this help message (topics: all, add, remove, toggle, print, save, load, json, exit)",
    "exit": "exit or quit: Exit the program",
}

HELP_TOPICS: Dict[str, List[str]] = {
    "all": list(USAGE),
    "add": ["add"],
    "remove": ["remove_by_id", "remove_by_title", "remove_by_status", "remove_by_id_range", "remove_all"],
    "toggle": ["toggle_by_id", "toggle_by_title", "toggle_by_status"],
    "print": ["print_all", "print_by_status", "print_by_id", "print_by_title"],
    "save": ["save_to_json"],
    "load": ["load_from_json"],
    "json": ["save_to_json", "load_from_json"],
    "exit": ["exit"],
    "quit": ["exit"],
}

HELP_HEADING = "Available commands:"


def help_lines(topic: Optional[str] = None) -> Optional[List[str]]:
    """Return the lines for a help topic, or None if the topic is unknown."""
    key = (topic or "all").strip() or "all"
    commands = HELP_TOPICS.get(key)
    if commands is None:
        return None
    lines = [USAGE[name] for name in commands]
    if key == "all":
        lines.insert(0, HELP_HEADING)
    return lines
