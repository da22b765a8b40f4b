"""Command execution and toolchain lookup."""

from __future__ import annotations

import shlex
import shutil
import subprocess
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from .errors import CommandError, CommandNotFoundError, ToolchainNotFoundError
from .env import env_var
from .logger import logger

if TYPE_CHECKING:
    from collections.abc import Sequence


def _is_windows() -> bool:
    return sys.platform == "win32"


def run(command: str, args: Sequence[str] = ()) -> subprocess.CompletedProcess[bytes]:
    """Run a command with the console attached, raising CommandError on failure.

    stdin is closed and output goes straight to this process's stdout/stderr.
    """
    argv = [command, *args]
    command_line = shlex.join(argv)
    logger.info(f"> {command_line}")

    if _is_windows():
        # cmd.exe resolves .bat/.cmd wrappers such as gclient
        result = subprocess.run(subprocess.list2cmdline(argv), shell=True, stdin=subprocess.DEVNULL)
    else:
        result = subprocess.run(argv, stdin=subprocess.DEVNULL)

    if result.returncode != 0:
        logger.error("Command failed", command=command_line, returncode=result.returncode)
        raise CommandError(command_line, result.returncode)

    return result


def which(command: str) -> str:
    """Return the full path of `command` on PATH."""
    found = shutil.which(command)
    if found is None:
        raise CommandNotFoundError(command)
    return found


def python() -> str:
    return "python3"


def gn() -> str:
    return "gn"


def find_system_clang() -> str:
    """Locate the clang installation named by CLANG_BASE_PATH.

    Returns the base directory. On Windows the path uses forward slashes and
    escaped spaces so it can be passed through GN args.
    """
    clang_base_path = Path(env_var("CLANG_BASE_PATH")).resolve()
    clang_path = clang_base_path / "bin" / ("clang.exe" if _is_windows() else "clang")
    if not clang_path.exists():
        raise ToolchainNotFoundError(f"Clang not found at {clang_path}")

    if _is_windows():
        return str(clang_base_path).replace("\\", "/").replace(" ", "\\ ")

    return str(clang_base_path)
