"""Shared fixtures for build helper tests."""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from build_helpers.dirstack import restore_dir

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator, Sequence


@pytest.fixture()
def build_tmp(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Create a temp directory, chdir into it and leave the directory stack empty afterwards."""
    monkeypatch.chdir(tmp_path)
    yield tmp_path.resolve()
    restore_dir()


def write_tree(root: Path, files: dict[str, str]) -> None:
    """Create files (with parent directories) under root."""
    for rel_path, content in files.items():
        full_path = root / rel_path
        full_path.parent.mkdir(parents=True, exist_ok=True)
        full_path.write_text(content, encoding="utf-8")


def list_files(root: Path) -> set[str]:
    return {p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_file()}


class FakeRun:
    """Stands in for `build_helpers.shell.run`, recording (cwd, argv) for each command."""

    def __init__(self, on_call: Callable[[list[str]], None] | None = None) -> None:
        self.calls: list[tuple[Path, list[str]]] = []
        self.on_call = on_call

    def __call__(self, command: str, args: Sequence[str] = ()) -> None:
        argv = [command, *args]
        self.calls.append((Path(os.getcwd()).resolve(), argv))
        if self.on_call is not None:
            self.on_call(argv)

    @property
    def commands(self) -> list[list[str]]:
        return [argv for _, argv in self.calls]
