# File Summary: Environment-driven configuration for the todo CLI.

"""Configuration loading for the todo CLI."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


class ConfigError(RuntimeError):
    """Raised when a configuration value is invalid."""


@dataclass(frozen=True)
class AppConfig:
    prompt: str = "> "
    allow_duplicate_titles: bool = False
    json_indent: Optional[int] = None
    log_level: int = logging.WARNING


def _read_bool(raw_value: Optional[str], *, default: bool, key: str) -> bool:
    if raw_value is None:
        return default
    normalized = raw_value.strip().lower()
    if not normalized:
        return default
    if normalized in {"1", "true", "yes", "on"}:
        return True
    if normalized in {"0", "false", "no", "off"}:
        return False
    raise ConfigError(f"{key} must be a boolean value.")


def _read_indent(raw_value: Optional[str], *, key: str) -> Optional[int]:
    if raw_value is None or not raw_value.strip():
        return None
    try:
        indent = int(raw_value.strip())
    except ValueError:
        raise ConfigError(f"{key} must be a non-negative integer.")
    if indent < 0:
        raise ConfigError(f"{key} must be a non-negative integer.")
    return indent


def _read_log_level(raw_value: Optional[str], *, key: str) -> int:
    if raw_value is None or not raw_value.strip():
        return logging.WARNING
    level = logging.getLevelName(raw_value.strip().upper())
    if not isinstance(level, int):
        raise ConfigError(f"{key} must be a logging level name such as DEBUG or INFO.")
    return level


def load_config(dotenv_path: Optional[Path] = None) -> AppConfig:
    """Load configuration from the environment, after merging a .env file.

    Values already present in the process environment win over the file.
    """
    load_dotenv(dotenv_path or Path.cwd() / ".env", override=False)

    prompt = os.environ.get("TODO_CLI_PROMPT")
    if prompt is None:
        prompt = "> "

    duplicates_key = "TODO_CLI_ALLOW_DUPLICATE_TITLES"
    allow_duplicate_titles = _read_bool(
        os.environ.get(duplicates_key), default=False, key=duplicates_key
    )

    indent_key = "TODO_CLI_JSON_INDENT"
    json_indent = _read_indent(os.environ.get(indent_key), key=indent_key)

    level_key = "TODO_CLI_LOG_LEVEL"
    log_level = _read_log_level(os.environ.get(level_key), key=level_key)

    return AppConfig(
        prompt=prompt,
        allow_duplicate_titles=allow_duplicate_titles,
        json_indent=json_indent,
        log_level=log_level,
    )
