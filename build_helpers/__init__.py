"""Build orchestration helpers: environment, directories, commands and sources."""

from __future__ import annotations

from .depot_tools import maybe_setup_depot_tools
from .dirstack import dir_stack, pop_dir, push_dir, pushd, restore_dir
from .env import env_flag, env_var, parse_bool, prepend_path, set_env_var
from .errors import (
    BuildHelpersError,
    CommandError,
    CommandNotFoundError,
    DirectoryNotFoundError,
    EmptyStackError,
    EnvVarNotFoundError,
    ToolchainNotFoundError,
)
from .fs_utils import copy_dir, copy_file_to_dir, walk_dir
from .shell import find_system_clang, gn, python, run, which
from .sources import maybe_clone_repo, read_versions, setup_source
from .types import BuildVersions, SourceVersion

__all__ = [
    # depot_tools
    "maybe_setup_depot_tools",
    # dirstack
    "dir_stack",
    "pop_dir",
    "push_dir",
    "pushd",
    "restore_dir",
    # env
    "env_flag",
    "env_var",
    "parse_bool",
    "prepend_path",
    "set_env_var",
    # errors
    "BuildHelpersError",
    "CommandError",
    "CommandNotFoundError",
    "DirectoryNotFoundError",
    "EmptyStackError",
    "EnvVarNotFoundError",
    "ToolchainNotFoundError",
    # fs_utils
    "copy_dir",
    "copy_file_to_dir",
    "walk_dir",
    # shell
    "find_system_clang",
    "gn",
    "python",
    "run",
    "which",
    # sources
    "maybe_clone_repo",
    "read_versions",
    "setup_source",
    # types
    "BuildVersions",
    "SourceVersion",
]
