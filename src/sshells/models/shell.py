"""Resolved shell model."""

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Shell:
    """A configured shell whose path placeholders have been expanded."""

    name: str
    path_template: str
    resolved_path: str
    args: tuple[str, ...] = ()
    index: int = 0

    def exists(self) -> bool:
        """Return whether the resolved path exists on this system."""
        return os.path.exists(self.resolved_path)
