"""Build helper constants."""

from __future__ import annotations

from pathlib import Path

VERSIONS_FILE = Path("build-versions.json")
DEPOT_TOOLS_DIR = Path("depot_tools")
DEPOT_TOOLS_GIT = "https://chromium.googlesource.com/chromium/tools/depot_tools.git"
GCLIENT_FILE = ".gclient"

TRUTHY_VALUES = frozenset({"true", "t", "yes", "y", "on", "1"})
FALSY_VALUES = frozenset({"false", "f", "no", "n", "off", "0", ""})
