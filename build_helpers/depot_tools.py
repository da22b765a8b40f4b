"""Bootstrap for Chromium's depot_tools."""

from __future__ import annotations

from .constants import DEPOT_TOOLS_DIR, DEPOT_TOOLS_GIT
from .dirstack import pushd
from .env import prepend_path, set_env_var
from .logger import logger
from .shell import run


def maybe_setup_depot_tools() -> None:
    """Clone and initialise depot_tools if needed, then put it on PATH.

    Auto-update and the Google-internal Windows toolchain are disabled.
    """
    if not DEPOT_TOOLS_DIR.exists():
        logger.info("Bootstrapping depot_tools", url=DEPOT_TOOLS_GIT)
        run("git", ["clone", "--depth=1", DEPOT_TOOLS_GIT, str(DEPOT_TOOLS_DIR)])

        with pushd(DEPOT_TOOLS_DIR):
            run("gclient")

    set_env_var("DEPOT_TOOLS_WIN_TOOLCHAIN", "0")
    set_env_var("DEPOT_TOOLS_UPDATE", "0")
    prepend_path(str(DEPOT_TOOLS_DIR.resolve()))
