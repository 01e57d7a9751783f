# File Summary: Console rendering helpers for styled and boxed output.

"""
Output formatting utilities for the todo CLI.

Record lines and command feedback go to stdout. Colors are only applied
when stdout is a terminal and NO_COLOR is unset, so piped output stays plain.
"""

import os
import re
import shutil
import sys
import textwrap
from typing import Dict, List

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-?]*[ -/]*[@-~]")


def _supports_color() -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    try:
        return sys.stdout.isatty()
    except Exception:
        return False


USE_COLOR = _supports_color()


def _color(code: str) -> str:
    return code if USE_COLOR else ""


class Color:
    """ANSI color codes for terminal output."""

    RESET = _color("\033[0m")
    BOLD = _color("\033[1m")
    TITLE = _color("\033[38;5;81m")
    SUCCESS = _color("\033[38;5;82m")
    ERROR = _color("\033[38;5;203m")
    KEYWORD = _color("\033[38;5;208m")
    TEXT = _color("\033[38;5;252m")
    ACCENT = _color("\033[38;5;141m")


MIN_BOX_WIDTH = 48
MAX_BOX_WIDTH = 110


def _visible_len(text: str) -> int:
    return len(ANSI_ESCAPE_RE.sub("", text))


def _contains_ansi(text: str) -> bool:
    return bool(ANSI_ESCAPE_RE.search(text))


def _current_box_width() -> int:
    columns = shutil.get_terminal_size(fallback=(96, 24)).columns
    available = max(columns - 4, 40)
    width = min(max(available, MIN_BOX_WIDTH), MAX_BOX_WIDTH)
    if width % 2:
        width -= 1
    return max(width, 40)


def _wrap_lines(text: str, width: int) -> List[str]:
    if not text:
        return []
    wrapped: List[str] = []
    for raw in text.splitlines():
        if raw == "":
            wrapped.append("")
            continue
        if _contains_ansi(raw) or _visible_len(raw) <= width:
            wrapped.append(raw)
            continue
        segments = textwrap.wrap(raw, width=width, drop_whitespace=False, replace_whitespace=False)
        wrapped.extend(segments if segments else [""])
    return wrapped


BOX_STYLES: Dict[str, Dict[str, str]] = {
    "banner": {"border": Color.ACCENT, "title": Color.ACCENT + Color.BOLD, "text": Color.TEXT},
}


def _render_panel(title: str, lines: List[str], style: str = "banner") -> str:
    width = _current_box_width()
    inner = width - 4
    palette = BOX_STYLES.get(style, BOX_STYLES["banner"])
    border = palette["border"]
    title_color = palette["title"]
    text_color = palette["text"]

    parts: List[str] = []
    parts.append(f"{border}╭{'─' * (width - 2)}╮{Color.RESET}")

    if title:
        header = title.upper().strip()
        centered = header.center(inner)
        parts.append(f"{border}│{Color.RESET} {title_color}{centered}{Color.RESET} {border}│{Color.RESET}")
        parts.append(f"{border}├{'─' * (width - 2)}┤{Color.RESET}")

    if not lines:
        lines = [""]

    for line in lines:
        visible = line
        if _visible_len(line) > inner and not _contains_ansi(line):
            visible = line[:inner]
        pad = max(0, inner - _visible_len(visible))
        if _contains_ansi(visible):
            content = f"{visible}{Color.RESET}{' ' * pad}"
        else:
            content = f"{text_color}{visible}{' ' * pad}{Color.RESET}"
        parts.append(f"{border}│{Color.RESET} {content} {border}│{Color.RESET}")

    parts.append(f"{border}╰{'─' * (width - 2)}╯{Color.RESET}")
    return "\n".join(parts)


def print_boxed(title: str, content: str, *, style: str = "banner"):
    """Display content in a box with title."""
    width = _current_box_width()
    lines = _wrap_lines(content, width - 4)
    print(_render_panel(title, lines, style=style))


def print_record(line: str):
    """Display one rendered todo line."""
    print(line)


def print_line(message: str):
    """Display plain text, such as help usage lines."""
    print(message)


def print_error(message: str):
    print(f"{Color.ERROR}{message}{Color.RESET}")


def print_info(message: str):
    print(f"{Color.TITLE}{message}{Color.RESET}")


def print_success(message: str):
    print(f"{Color.SUCCESS}{message}{Color.RESET}")


def print_warning(message: str):
    print(f"{Color.KEYWORD}{message}{Color.RESET}")


def write_prompt(prompt: str):
    """Write the input prompt to stderr so stdout only carries results."""
    sys.stderr.write(prompt)
    sys.stderr.flush()
