"""Configuration file handling for sshells."""

import logging
import os
from collections.abc import Mapping
from importlib import resources
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from sshells.errors import ConfigError
from sshells.models import Shell, ShellEntry
from sshells.paths import PathResolver

log = logging.getLogger(__name__)

CONFIG_DIR_ENV = "SSHELLS_CONFIG_DIR"
WINDOWS_CONFIG_DIR = "%SystemDrive%\\ProgramData\\SSHells"
POSIX_CONFIG_DIR = "%HOME%/.config/sshells"
CONFIG_FILE_NAME = "config.json"

_ENTRIES = TypeAdapter(list[ShellEntry])


def config_dir_template(
    override: str | None = None,
    environ: Mapping[str, str] | None = None,
    platform: str | None = None,
) -> str:
    """Return the unresolved configuration directory for this platform."""
    if override:
        return override
    environ = os.environ if environ is None else environ
    from_env = environ.get(CONFIG_DIR_ENV, "").strip()
    if from_env:
        return from_env
    platform = os.name if platform is None else platform
    return WINDOWS_CONFIG_DIR if platform == "nt" else POSIX_CONFIG_DIR


def config_path(
    resolver: PathResolver, override: str | None = None, platform: str | None = None
) -> Path:
    """Return the resolved path of config.json."""
    template = config_dir_template(override, resolver.environ, platform)
    return Path(resolver.resolve(template)) / CONFIG_FILE_NAME


def default_config_bytes(platform: str | None = None) -> bytes:
    """Return the bundled default document for the current platform."""
    platform = os.name if platform is None else platform
    name = "windows.json" if platform == "nt" else "posix.json"
    return resources.files("sshells").joinpath("defaults").joinpath(name).read_bytes()


def write_default_config(path: Path) -> None:
    """Create the configuration directory and write the bundled defaults."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        log.debug("could not create %s: %s", path.parent, e)
    try:
        path.write_bytes(default_config_bytes())
    except OSError as e:
        raise ConfigError(
            f"failed to write default config to {path}: {e}",
            hint="create the file by hand or pass --config-dir",
        ) from e
    log.info("wrote default config to %s", path)


def _describe(error: ValidationError) -> str:
    problems = []
    for detail in error.errors():
        loc = ".".join(str(part) for part in detail["loc"]) or "document"
        problems.append(f"{loc}: {detail['msg']}")
    return "; ".join(problems)


def parse_config(raw: bytes | str, source: Path | str = CONFIG_FILE_NAME) -> list[ShellEntry]:
    """Parse a configuration document into shell entries."""
    try:
        return _ENTRIES.validate_json(raw)
    except ValidationError as e:
        raise ConfigError(
            f"failed to parse config file {source}: {_describe(e)}",
            hint='expected a JSON array of {"name", "path", "args"} objects',
        ) from e


def resolve_entries(entries: list[ShellEntry], resolver: PathResolver) -> list[Shell]:
    """Expand placeholders in every entry, in configuration order."""
    return [
        Shell(
            name=entry.name,
            path_template=entry.path,
            resolved_path=resolver.resolve(entry.path),
            args=tuple(entry.args),
            index=index,
        )
        for index, entry in enumerate(entries)
    ]


def load_shells(resolver: PathResolver, config_dir: str | None = None) -> list[Shell]:
    """Read config.json, writing the defaults first when it does not exist."""
    path = config_path(resolver, config_dir)
    if not path.exists():
        log.debug("no config at %s", path)
        write_default_config(path)
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise ConfigError(f"failed to open config file {path}: {e}") from e
    entries = parse_config(raw, path)
    log.debug("loaded %d shell(s) from %s", len(entries), path)
    return resolve_entries(entries, resolver)
