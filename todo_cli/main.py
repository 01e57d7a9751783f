# File Summary: Application bootstrap handling configuration, logging and REPL startup.

"""
Todo CLI - interactive todo-list manager.

Loads configuration, sets up logging, builds the store and starts the
command loop. A couple of process-level flags are handled before that.
"""

import logging
import sys
from typing import List, Optional

from . import output
from .config import AppConfig, ConfigError, load_config
from .help_text import help_lines
from .store import TodoManager

PACKAGE_NAME = "todo-manager-cli"

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: int) -> None:
    """Send package logs to stderr at ``level``; safe to call more than once."""
    root = logging.getLogger("todo_cli")
    root.setLevel(level)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        root.addHandler(handler)


def get_version() -> str:
    try:
        import importlib.metadata as _m
        return _m.version(PACKAGE_NAME)
    except Exception:
        return "unknown"


def print_usage() -> None:
    color = output.Color
    commands = "\n".join(f"  {line}" for line in help_lines("all")[1:])
    body = f"""{color.ACCENT}Usage:{color.RESET}
  todo                Start the interactive todo shell
  todo --help         Show this message
  todo --version      Show the installed version

{color.ACCENT}Commands (inside the shell):{color.RESET}
{commands}

{color.ACCENT}Environment:{color.RESET}
  TODO_CLI_PROMPT                   Prompt written to stderr (default "> ")
  TODO_CLI_ALLOW_DUPLICATE_TITLES   Allow several todos with one title
  TODO_CLI_JSON_INDENT              Indent saved JSON files
  TODO_CLI_LOG_LEVEL                Log level for stderr diagnostics
  NO_COLOR                          Disable colored output"""
    output.print_boxed("Todo CLI", body, style="banner")


def build_manager(config: AppConfig) -> TodoManager:
    return TodoManager(
        allow_duplicate_titles=config.allow_duplicate_titles,
        json_indent=config.json_indent,
    )


def repl(config: AppConfig) -> None:
    """Start the interactive REPL."""
    from .repl import run_repl

    run_repl(build_manager(config), prompt=config.prompt)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point with command line flag support."""
    args = sys.argv[1:] if argv is None else argv

    if args:
        arg = args[0].lower()
        if arg in ("--version", "-v"):
            output.print_line(f"{PACKAGE_NAME} {get_version()}")
            return 0
        if arg in ("--help", "-h"):
            print_usage()
            return 0
        output.print_warning(f"Unknown option: {args[0]}")
        output.print_info("Use 'todo --help' for usage information")
        return 2

    try:
        config = load_config()
    except ConfigError as e:
        output.print_error(f"Configuration error: {e}")
        return 1

    configure_logging(config.log_level)
    repl(config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
