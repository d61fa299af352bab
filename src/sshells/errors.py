"""Error model and exit code contract."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    NOT_A_TERMINAL = 1
    CONFIG_ERROR = 3
    LAUNCH_ERROR = 4


@dataclass
class SshellsError(Exception):
    message: str
    code: ExitCode = ExitCode.CONFIG_ERROR
    hint: str = ""

    def __str__(self) -> str:
        if self.hint:
            return f"{self.message} Hint: {self.hint}"
        return self.message


@dataclass
class ConfigError(SshellsError):
    """The configuration file could not be created, read or parsed."""


@dataclass
class UndefinedVariableError(ConfigError):
    """A `%NAME%` token refers to an environment variable that is not set."""

    variable: str = ""


@dataclass
class LaunchError(SshellsError):
    code: ExitCode = ExitCode.LAUNCH_ERROR


def user_facing_error(error: SshellsError) -> str:
    return f"Error: {error}"
