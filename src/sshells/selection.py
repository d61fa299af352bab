"""Routing of picker events between the shell list and the countdown."""

import logging
from typing import Protocol

from sshells.models import Shell
from sshells.registry import ShellRegistry
from sshells.timer import TimerController, TimerState

log = logging.getLogger(__name__)


class SelectionView(Protocol):
    def set_label(self, position: int, label: str) -> None: ...

    def finish(self, shell: Shell | None) -> None: ...


def countdown_label(name: str, seconds: int) -> str:
    return f"{name} ({seconds})"


class SelectionController:
    """Decide what each picker event does.

    The view draws the list and stops the UI loop on `finish`. Pass
    `timer=None` to run without a countdown (no default shell available).
    Once finished, every further event is ignored.
    """

    def __init__(
        self,
        registry: ShellRegistry,
        view: SelectionView,
        timer: TimerController | None = None,
    ) -> None:
        self._registry = registry
        self._view = view
        self._timer = timer if registry.default is not None else None
        self._finished = False
        self.choice: Shell | None = None

    @property
    def timer(self) -> TimerController | None:
        return self._timer

    @property
    def finished(self) -> bool:
        return self._finished

    def labels(self) -> list[str]:
        return [shell.name for shell in self._registry]

    def on_highlight(self, position: int | None) -> None:
        if self._finished or self._timer is None:
            return
        if position is None or position == self._registry.default_position:
            return
        if self._timer.cancel():
            default = self._registry.default
            self._view.set_label(self._registry.default_position, default.name)

    def on_tick(self) -> None:
        if self._finished or self._timer is None:
            return
        tick = self._timer.tick()
        default = self._registry.default
        if tick.state is TimerState.ACTIVE:
            self._view.set_label(
                self._registry.default_position, countdown_label(default.name, tick.remaining)
            )
        elif tick.transitioned:
            log.debug("launching default shell %s", default.name)
            self._finish(default)

    def on_confirm(self, position: int) -> None:
        if self._finished:
            return
        self._finish(self._registry[position])

    def on_quit(self) -> None:
        if self._finished:
            return
        self._finish(None)

    def jump_target(self, character: str, current: int | None) -> int | None:
        """Return the next position whose name starts with `character`."""
        count = len(self._registry)
        if not count or not character:
            return None
        start = 0 if current is None else current + 1
        wanted = character.casefold()
        for offset in range(count):
            position = (start + offset) % count
            if self._registry[position].name.casefold().startswith(wanted):
                return position
        return None

    def _finish(self, shell: Shell | None) -> None:
        self._finished = True
        self.choice = shell
        self._view.finish(shell)
