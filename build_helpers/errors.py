"""Error types raised by the build helpers."""

from __future__ import annotations


class BuildHelpersError(Exception):
    pass


class DirectoryNotFoundError(BuildHelpersError, FileNotFoundError):
    def __init__(self, directory: str) -> None:
        super().__init__(f"Directory not found: {directory}")
        self.directory = directory


class EmptyStackError(BuildHelpersError, RuntimeError):
    def __init__(self) -> None:
        super().__init__("Directory stack is empty")


class EnvVarNotFoundError(BuildHelpersError, KeyError):
    def __init__(self, name: str) -> None:
        super().__init__(f'Environment variable "{name}" not found')
        self.name = name

    def __str__(self) -> str:
        # KeyError.__str__ repr()s the message
        return str(self.args[0])


class CommandError(BuildHelpersError, RuntimeError):
    def __init__(self, command_line: str, returncode: int) -> None:
        super().__init__(f"Command exited with code {returncode}: {command_line}")
        self.command_line = command_line
        self.returncode = returncode


class CommandNotFoundError(BuildHelpersError, FileNotFoundError):
    def __init__(self, command: str) -> None:
        super().__init__(f'Command "{command}" not found in PATH')
        self.command = command


class ToolchainNotFoundError(BuildHelpersError, FileNotFoundError):
    pass
