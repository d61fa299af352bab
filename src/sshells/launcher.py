"""Hand the terminal over to the chosen shell."""

import logging
import os
import subprocess
import sys
from typing import NoReturn, TextIO

from sshells.constants import CLEAR_SCREEN, CURSOR_HOME, RESET, SHOW_CURSOR
from sshells.errors import ExitCode, LaunchError
from sshells.models import Shell

log = logging.getLogger(__name__)

TERMINAL_RESET = RESET + SHOW_CURSOR + CLEAR_SCREEN + CURSOR_HOME


class ProcessLauncher:
    """Start a shell in place of the picker.

    On POSIX the picker process is replaced with `os.execv`. Elsewhere the
    shell is spawned and the picker exits, leaving the child on the console.
    Either way `launch` never returns: it ends the host with status 0 or
    raises `LaunchError`.
    """

    def __init__(self, stream: TextIO | None = None, replace_process: bool | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout
        self._replace_process = os.name != "nt" if replace_process is None else replace_process

    def reset_terminal(self) -> None:
        self._stream.write(TERMINAL_RESET)
        self._stream.flush()

    def launch(self, shell: Shell) -> NoReturn:
        argv = [shell.resolved_path, *shell.args]
        log.debug("launching %s: %s", shell.name, argv)
        self.reset_terminal()
        try:
            if self._replace_process:
                os.execv(shell.resolved_path, argv)
            else:
                subprocess.Popen(argv)
        except OSError as e:
            raise LaunchError(f"shell {shell.name!r} failed to start: {e}") from e
        raise SystemExit(ExitCode.SUCCESS)
