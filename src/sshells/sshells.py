"""Core logic for sshells."""

import logging
import time
from collections.abc import Callable

from sshells.config import load_shells
from sshells.constants import DEFAULT_TIMEOUT
from sshells.launcher import ProcessLauncher
from sshells.models import Shell
from sshells.paths import PathResolver
from sshells.registry import ShellRegistry
from sshells.ui import ShellPickerApp

log = logging.getLogger("sshells")

NO_SHELLS_MESSAGE = "No shells available."


def build_registry(resolver: PathResolver, config_dir: str | None = None) -> ShellRegistry:
    """Load the configuration and keep the shells installed on this system."""
    shells = load_shells(resolver, config_dir)
    registry = ShellRegistry.build(shells)
    log.debug("%d of %d configured shell(s) available", len(registry), len(shells))
    return registry


def pick_shell(
    registry: ShellRegistry,
    grace_period: float = DEFAULT_TIMEOUT,
    clock: Callable[[], float] = time.monotonic,
) -> Shell | None:
    """Run the picker UI and return the chosen shell, or None if the user quit."""
    app = ShellPickerApp(registry, grace_period=grace_period, clock=clock)
    return app.run()


def run(
    config_dir: str | None = None,
    grace_period: float = DEFAULT_TIMEOUT,
    resolver: PathResolver | None = None,
    launcher: ProcessLauncher | None = None,
) -> int:
    """Run the full pipeline: config, registry, picker, launch."""
    registry = build_registry(resolver or PathResolver(), config_dir)
    if not registry:
        print(NO_SHELLS_MESSAGE)
        return 0
    choice = pick_shell(registry, grace_period)
    if choice is None:
        log.debug("picker closed without a choice")
        return 0
    (launcher or ProcessLauncher()).launch(choice)
