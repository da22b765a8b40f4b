"""Source checkout and update against the build version manifest."""

from __future__ import annotations

import json
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from .constants import GCLIENT_FILE, VERSIONS_FILE
from .dirstack import pushd
from .logger import logger
from .shell import run
from .types import BuildVersions

GCLIENT_TEMPLATE = """solutions = [{{
    "name": ".",
    "url": "{url}",
    "deps_file": "DEPS",
    "managed": False,
    "custom_deps": {{}},
}}]
"""


def versions_path() -> Path:
    return Path(os.environ.get("BUILD_VERSIONS_FILE") or VERSIONS_FILE)


def read_versions(path: Path | None = None) -> BuildVersions:
    """Read and validate the version manifest (.json, or .yaml/.yml)."""
    manifest_path = path or versions_path()
    if not manifest_path.exists():
        raise FileNotFoundError(f"Version manifest not found: {manifest_path}")

    content = manifest_path.read_text(encoding="utf-8")
    if manifest_path.suffix in (".yaml", ".yml"):
        raw = yaml.safe_load(content) or {}
    else:
        raw = json.loads(content)
    if not isinstance(raw, dict):
        raise ValueError(f"Version manifest must be a mapping: {manifest_path}")

    try:
        return BuildVersions.model_validate(raw)
    except ValidationError as err:
        raise ValueError(f"Invalid version manifest {manifest_path}: {err}") from err


def maybe_clone_repo(dest: str | Path, repo: str) -> None:
    """Shallow-clone `repo` into `dest` unless it is already there."""
    if Path(dest).exists():
        return

    run("git", ["clone", "--depth=1", repo, str(dest)])


def write_gclient(checkout: Path, url: str) -> None:
    (checkout / GCLIENT_FILE).write_text(GCLIENT_TEMPLATE.format(url=url), encoding="utf-8")


def setup_source(name: str, versions: BuildVersions | None = None) -> None:
    """Clone or update the checkout `name` to the branch pinned in the manifest.

    The checkout lives at `./<name>` and gets a .gclient file for an unmanaged
    solution rooted at the checkout.
    """
    if versions is None:
        versions = read_versions()
    info = versions[name]
    checkout = Path(name)

    if checkout.exists():
        logger.info("Updating source", repo=name, branch=info.branch)
        with pushd(checkout):
            run("git", ["pull"])
            run("git", ["checkout", info.branch])
            run("git", ["submodule", "update", "--init", "--recursive"])
    else:
        logger.info("Cloning source", repo=name, branch=info.branch, url=info.git)
        run("git", ["clone", "--recurse-submodules", "--branch", info.branch, info.git, name])

    write_gclient(checkout, info.git)
