"""Model package for sshells."""

from sshells.models.shell import Shell
from sshells.models.shell_entry import ShellEntry

__all__ = [
    "Shell",
    "ShellEntry",
]
