"""Directory stack for scoped working-directory changes."""

from __future__ import annotations

import contextlib
import os
from typing import TYPE_CHECKING

from .errors import DirectoryNotFoundError, EmptyStackError
from .logger import logger

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

_dir_stack: list[str] = []


def push_dir(directory: str | Path) -> None:
    """Remember the current directory, then change into `directory`.

    The previous directory is recorded before the change is attempted, so a
    failed push still leaves an entry that `pop_dir` or `restore_dir` returns to.
    """
    _dir_stack.append(os.getcwd())
    try:
        os.chdir(directory)
    except (FileNotFoundError, NotADirectoryError) as err:
        raise DirectoryNotFoundError(str(directory)) from err
    logger.debug("Pushed directory", directory=str(directory), depth=len(_dir_stack))


def pop_dir() -> None:
    """Return to the directory recorded by the most recent push."""
    if not _dir_stack:
        raise EmptyStackError()
    previous = _dir_stack.pop()
    os.chdir(previous)
    logger.debug("Popped directory", directory=previous, depth=len(_dir_stack))


def restore_dir() -> None:
    """Return to the first pushed directory and empty the stack.

    The stack is emptied even when the base directory can no longer be entered;
    the chdir error still propagates.
    """
    try:
        if _dir_stack:
            os.chdir(_dir_stack[0])
            logger.debug("Restored base directory", directory=_dir_stack[0], dropped=len(_dir_stack))
    finally:
        _dir_stack.clear()


def dir_stack() -> list[str]:
    return list(_dir_stack)


@contextlib.contextmanager
def pushd(directory: str | Path) -> Iterator[None]:
    """Change into `directory` for the duration of the block.

    The previous directory is restored on every exit path, including errors.
    """
    try:
        push_dir(directory)
        yield
    finally:
        pop_dir()
