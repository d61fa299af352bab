"""Command-line interface for sshells."""

import argparse
import logging
import sys

from sshells import __version__
from sshells.constants import DEFAULT_TIMEOUT
from sshells.errors import ExitCode, SshellsError, user_facing_error
from sshells.sshells import run


def _positive_seconds(value: str) -> float:
    try:
        seconds = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number of seconds: {value!r}") from None
    if seconds < 0:
        raise argparse.ArgumentTypeError("timeout cannot be negative")
    return seconds


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sshells",
        description="Pick a shell to launch; the default starts after a short countdown",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--log-file",
        help="Write log records to this file instead of stderr",
    )
    parser.add_argument(
        "--config-dir",
        help="Directory holding config.json (may contain %%NAME%% placeholders)",
    )
    parser.add_argument(
        "--timeout",
        type=_positive_seconds,
        default=DEFAULT_TIMEOUT,
        metavar="SECONDS",
        help=f"Seconds before the default shell starts (default: {DEFAULT_TIMEOUT:g})",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
        filename=args.log_file,
    )

    if not sys.stdin.isatty():
        print("Error: stdin must be a terminal", file=sys.stderr)
        return int(ExitCode.NOT_A_TERMINAL)

    try:
        return run(config_dir=args.config_dir, grace_period=args.timeout)
    except SshellsError as e:
        print(user_facing_error(e), file=sys.stderr)
        return int(e.code)


def entrypoint() -> None:
    raise SystemExit(main())
