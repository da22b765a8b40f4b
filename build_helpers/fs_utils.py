"""Filesystem utilities for walking and copying build trees."""

from __future__ import annotations

import shutil
import stat
from pathlib import Path
from typing import TYPE_CHECKING

from .logger import logger

if TYPE_CHECKING:
    import os
    from collections.abc import Callable, Iterable

    WalkFilter = Callable[[Path, os.stat_result], bool]
    WalkCallback = Callable[[Path], None]


def walk_dir(root: str | Path, filter: WalkFilter, callback: WalkCallback) -> None:
    """Walk a directory recursively, calling `filter` for each entry.

    `filter` decides both whether a directory is traversed and whether a file is
    reported; `callback` is called with the full path of every accepted file.
    A missing root is not an error. Exceptions from either function propagate
    and stop the walk.
    """
    root = Path(root)
    if not root.exists():
        return

    for entry in root.iterdir():
        stats = entry.stat()

        if not filter(entry, stats):
            continue
        if stat.S_ISDIR(stats.st_mode):
            walk_dir(entry, filter, callback)
        elif stat.S_ISREG(stats.st_mode):
            callback(entry)


def copy_dir(src: str | Path, dest: str | Path, extensions: Iterable[str] = ()) -> None:
    """Copy the files under `src` into `dest`, keeping their relative layout.

    When `extensions` is non-empty only files whose suffix (with the leading dot)
    is listed are copied; a single string counts as one extension. Existing
    destination files are overwritten.
    """
    resolved_src = Path(src).resolve()
    dest = Path(dest)
    if isinstance(extensions, str):
        extensions = (extensions,)
    wanted = frozenset(extensions)

    def include(path: Path, stats: os.stat_result) -> bool:
        # Always traverse directories
        if stat.S_ISDIR(stats.st_mode):
            return True
        if not wanted:
            return True
        return path.suffix in wanted

    def copy_one(path: Path) -> None:
        dest_path = dest / path.relative_to(resolved_src)
        dest_path.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(path, dest_path)

    logger.debug("Copying directory", src=str(resolved_src), dest=str(dest), extensions=sorted(wanted))
    walk_dir(resolved_src, include, copy_one)


def copy_file_to_dir(src: str | Path, dest_dir: str | Path) -> None:
    """Copy `src` into `dest_dir` under its own name. Missing sources are skipped."""
    src = Path(src)
    if not src.exists():
        return

    dest_file = Path(dest_dir) / src.name
    dest_file.parent.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(src, dest_file)
