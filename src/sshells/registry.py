"""The list of shells that can actually be launched."""

import logging
from collections.abc import Callable, Iterable, Iterator

from sshells.constants import DEFAULT_SHELL_INDEX
from sshells.models import Shell

log = logging.getLogger(__name__)


class ShellRegistry:
    """Configured shells filtered to those present on disk.

    Order follows the configuration file. The default shell is the one at
    configuration index `default_index`; it keeps that role even when shells
    before it were filtered out, and there is no default when it is missing.
    """

    def __init__(self, shells: Iterable[Shell], default_index: int = DEFAULT_SHELL_INDEX) -> None:
        self._shells = tuple(shells)
        self._default_position = next(
            (pos for pos, shell in enumerate(self._shells) if shell.index == default_index),
            None,
        )

    @classmethod
    def build(
        cls,
        shells: Iterable[Shell],
        default_index: int = DEFAULT_SHELL_INDEX,
        exists: Callable[[str], bool] | None = None,
    ) -> "ShellRegistry":
        available = []
        for shell in shells:
            present = shell.exists() if exists is None else exists(shell.resolved_path)
            if present:
                available.append(shell)
            else:
                log.debug("skipping %s: %s does not exist", shell.name, shell.resolved_path)
        registry = cls(available, default_index)
        if registry and registry.default is None:
            log.warning("default shell (index %d) is not installed; countdown disabled", default_index)
        return registry

    @property
    def default_position(self) -> int | None:
        return self._default_position

    @property
    def default(self) -> Shell | None:
        if self._default_position is None:
            return None
        return self._shells[self._default_position]

    def __len__(self) -> int:
        return len(self._shells)

    def __getitem__(self, position: int) -> Shell:
        return self._shells[position]

    def __iter__(self) -> Iterator[Shell]:
        return iter(self._shells)
