"""Expand `%NAME%` environment placeholders in configured paths."""

import logging
import os
import re
from collections.abc import Mapping

from sshells.errors import UndefinedVariableError

log = logging.getLogger(__name__)

TOKEN_PATTERN = r"%(\w+)%"


class PathResolver:
    """Substitute `%NAME%` tokens with values from an environment mapping.

    The pattern is compiled once per resolver. Resolution is all-or-nothing:
    a single undefined variable raises `UndefinedVariableError` and no
    partially substituted string is ever returned.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = os.environ if environ is None else environ
        self._pattern = re.compile(TOKEN_PATTERN, re.ASCII)

    @property
    def environ(self) -> Mapping[str, str]:
        return self._environ

    def _lookup(self, match: re.Match[str]) -> str:
        name = match.group(1)
        try:
            return self._environ[name]
        except KeyError:
            raise UndefinedVariableError(
                f"environment variable {name!r} is not defined",
                hint=f"set {name} or remove %{name}% from the configured path",
                variable=name,
            ) from None

    def resolve(self, template: str) -> str:
        resolved = self._pattern.sub(self._lookup, template)
        if resolved != template:
            log.debug("resolved %r -> %r", template, resolved)
        return resolved
