"""Textual application that hosts the shell picker."""

import time
from collections.abc import Callable

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import OptionList, Static
from textual.widgets.option_list import Option

from sshells import __version__
from sshells.constants import DEFAULT_TIMEOUT, QUIT_KEY, REFRESH_INTERVAL
from sshells.models import Shell
from sshells.registry import ShellRegistry
from sshells.selection import SelectionController
from sshells.timer import TimerController

CSS = """
Screen {
    align: center middle;
}
#banner {
    width: auto;
    padding: 0 2;
    background: $accent;
    color: $text;
    text-style: bold;
}
#shells {
    width: auto;
    min-width: 30;
    max-height: 20;
    border: round $primary;
}
#hint {
    width: auto;
    color: $text-muted;
}
"""


class ShellPickerApp(App[Shell | None]):
    """List the available shells and return the one to launch."""

    CSS = CSS
    BINDINGS = [Binding(QUIT_KEY, "quit_picker", "Quit")]

    def __init__(
        self,
        registry: ShellRegistry,
        *,
        grace_period: float = DEFAULT_TIMEOUT,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        super().__init__()
        self.shell_registry = registry
        self._grace_period = grace_period
        self._clock = clock
        self.controller: SelectionController | None = None

    def compose(self) -> ComposeResult:
        yield Static(f"SSHells {__version__}", id="banner")
        yield OptionList(*[Option(shell.name) for shell in self.shell_registry], id="shells")
        yield Static("arrows move · enter launches · q quits", id="hint")

    def on_mount(self) -> None:
        countdown = None
        if self.shell_registry.default is not None:
            countdown = TimerController(self._grace_period, clock=self._clock)
        self.controller = SelectionController(self.shell_registry, self, countdown)
        shells = self.query_one("#shells", OptionList)
        shells.highlighted = 0
        shells.focus()
        self.controller.on_tick()
        self.set_interval(REFRESH_INTERVAL, self.controller.on_tick)

    def on_option_list_option_highlighted(self, event: OptionList.OptionHighlighted) -> None:
        if self.controller is None:
            return
        self.controller.on_highlight(event.option_index)

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        if self.controller is None:
            return
        self.controller.on_confirm(event.option_index)

    def on_key(self, event: events.Key) -> None:
        character = event.character
        if self.controller is None or not event.is_printable:
            return
        if not character or character == QUIT_KEY:
            return
        shells = self.query_one("#shells", OptionList)
        target = self.controller.jump_target(character, shells.highlighted)
        if target is not None:
            shells.highlighted = target
            event.stop()

    def action_quit_picker(self) -> None:
        if self.controller is None:
            return
        self.controller.on_quit()

    def set_label(self, position: int, label: str) -> None:
        self.query_one("#shells", OptionList).replace_option_prompt_at_index(position, label)

    def finish(self, shell: Shell | None) -> None:
        self.exit(shell)
