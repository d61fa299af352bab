"""Shared constants for sshells."""

# Terminal sequences emitted before handing the terminal to a shell.
RESET = "\033[0m"
SHOW_CURSOR = "\033[?25h"
CLEAR_SCREEN = "\033[2J"
CURSOR_HOME = "\033[1;1H"

# Index of the default shell in configuration order.
DEFAULT_SHELL_INDEX = 0

# Seconds before the default shell launches on its own.
DEFAULT_TIMEOUT = 3.0

# Seconds between countdown refreshes in the picker.
REFRESH_INTERVAL = 0.1

QUIT_KEY = "q"
