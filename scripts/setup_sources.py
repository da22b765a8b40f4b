"""Bootstrap depot_tools and check out the pinned source repositories."""

from __future__ import annotations

import contextlib
import sys

from build_helpers.depot_tools import maybe_setup_depot_tools
from build_helpers.dirstack import restore_dir
from build_helpers.logger import logger
from build_helpers.sources import read_versions, setup_source


def main() -> None:
    versions = read_versions()
    names = sys.argv[1:] or versions.names()

    maybe_setup_depot_tools()
    for name in names:
        setup_source(name, versions)


if __name__ == "__main__":
    try:
        main()
    except Exception as err:
        logger.error("Fatal error", error=str(err))
        sys.exit(1)
    finally:
        # A vanished base directory must not mask the original failure
        with contextlib.suppress(FileNotFoundError):
            restore_dir()
