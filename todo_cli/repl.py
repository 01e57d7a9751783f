# File Summary: Line-oriented read-dispatch loop for the todo CLI.

"""
REPL for the todo CLI.

Reads one command per line from stdin, writes the prompt to stderr and
hands each line to the command registry. The loop ends on ``exit``,
``quit`` or end of input.
"""

import logging
import sys
from typing import Optional, TextIO

from . import output
from .commands import dispatch
from .store import TodoManager

logger = logging.getLogger(__name__)

INVALID_ENCODING = "Invalid input: line is not valid UTF-8 text"


def _tolerate_bad_bytes(stream: TextIO) -> None:
    """Let undecodable bytes through as surrogates instead of raising."""
    reconfigure = getattr(stream, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(errors="surrogateescape")


def _is_valid_text(line: str) -> bool:
    try:
        line.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def _read_line(prompt: str, stream: TextIO) -> Optional[str]:
    """Prompt on stderr and read one line; None means end of input."""
    output.write_prompt(prompt)
    raw = stream.readline()
    if raw == "":
        return None
    return raw.strip()


def run_repl(manager: TodoManager, prompt: str = "> ", stream: Optional[TextIO] = None) -> None:
    """Run commands against ``manager`` until the user exits."""
    stream = stream if stream is not None else sys.stdin
    _tolerate_bad_bytes(stream)

    while True:
        try:
            line = _read_line(prompt, stream)
        except KeyboardInterrupt:
            sys.stderr.write("\n")
            break
        except UnicodeDecodeError as e:
            logger.debug("Could not decode input line: %s", e)
            output.print_error(INVALID_ENCODING)
            continue
        if line is None:
            logger.debug("End of input; leaving the command loop")
            break
        if not line:
            continue
        if not _is_valid_text(line):
            output.print_error(INVALID_ENCODING)
            continue

        if not dispatch(line, manager):
            break
