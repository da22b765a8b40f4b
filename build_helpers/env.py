"""Environment variable access and boolean flag parsing."""

from __future__ import annotations

import os

from .constants import FALSY_VALUES, TRUTHY_VALUES
from .errors import EnvVarNotFoundError


def env_var(name: str) -> str:
    value = os.environ.get(name)
    if value is None:
        raise EnvVarNotFoundError(name)
    return value


def set_env_var(name: str, value: str) -> None:
    """Set a variable in this process's environment (inherited by child processes)."""
    os.environ[name] = value


def prepend_path(directory: str) -> None:
    """Put `directory` first on PATH."""
    current = os.environ.get("PATH", "")
    os.environ["PATH"] = directory + os.pathsep + current if current else directory


def parse_bool(value: str | bool) -> bool:
    """Parse a boolean from its text form, as found in environment variables.

    Accepts true/t/yes/y/on/1 and false/f/no/n/off/0 (case-insensitive, surrounding
    whitespace ignored); the empty string is false.
    """
    if isinstance(value, bool):
        return value
    if not isinstance(value, str):
        raise TypeError(f"Expected str or bool, got {type(value).__name__}")

    text = value.strip().lower()
    if text in TRUTHY_VALUES:
        return True
    if text in FALSY_VALUES:
        return False
    raise ValueError(f"Invalid boolean value: {value!r}")


def env_flag(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return parse_bool(value)
