# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""resolvconf CLI — multi-command entry point.

Subcommands:

* ``path`` — print the resolv.conf path a container should use
* ``show`` — print nameservers, options and hash of a resolv.conf file
* ``hash`` — print the content hash of a resolv.conf file
* ``init`` — create a stub config file
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from resolvconf.config import ConfigError, ResolvConfConfig, get_config_path
from resolvconf.errors import ResolvConfError
from resolvconf.file import ResolvConf, read
from resolvconf.logging import configure_logging
from resolvconf.path import PathResolver


logger = logging.getLogger(__name__)

_USAGE = """\
usage: resolvconf <command> [args]

commands:
  path   Print the resolv.conf path a container should use
  show   Print nameservers, options and hash of a resolv.conf file
  hash   Print the content hash of a resolv.conf file
  init   Create a stub config file

Run 'resolvconf <command> --help' for command-specific help.\
"""


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        metavar="PATH",
        help=(
            "Path to resolvconf.yaml config file"
            " (default: ~/.config/resolvconf/resolvconf.yaml)"
        ),
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )


def _add_file_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "file",
        nargs="?",
        type=Path,
        default=None,
        metavar="FILE",
        help="resolv.conf file to read (default: detected path)",
    )


def _load_config(args: argparse.Namespace) -> ResolvConfConfig | None:
    """Load config and configure logging from it.

    Returns:
        The config, or None after reporting a configuration error.
    """
    try:
        config = ResolvConfConfig.from_yaml(config_path=args.config)
    except ConfigError as e:
        print(f"resolvconf: {e}", file=sys.stderr)
        return None

    configure_logging(level=logging.DEBUG if args.debug else config.log_level)
    return config


def _resolve(config: ResolvConfConfig) -> Path:
    return PathResolver(config.default_path, config.alternate_path).resolve()


def _target(config: ResolvConfConfig, file: Path | None) -> Path:
    return file if file is not None else _resolve(config)


def _read(path: Path) -> ResolvConf | None:
    """Read *path*.

    Returns:
        The snapshot, or None after reporting the error.
    """
    try:
        return read(path)
    except ResolvConfError as e:
        print(f"resolvconf: {e}", file=sys.stderr)
        return None


# ── path subcommand ─────────────────────────────────────────────────


def cmd_path(argv: list[str]) -> int:
    """Print the resolv.conf path a container should use.

    Args:
        argv: Subcommand arguments.

    Returns:
        Exit code (0 on success, 1 on config error).
    """
    parser = argparse.ArgumentParser(
        prog="resolvconf path",
        description="Print the resolv.conf path a container should use.",
    )
    _add_common_arguments(parser)
    args = parser.parse_args(argv)

    config = _load_config(args)
    if config is None:
        return 1

    print(_resolve(config))
    return 0


# ── show subcommand ─────────────────────────────────────────────────


def _format_snapshot(path: Path, snapshot: ResolvConf) -> str:
    lines = [f"file:        {path}"]
    lines.append(f"hash:        {snapshot.hash}")
    if snapshot.nameservers:
        for ns in snapshot.nameservers:
            lines.append(f"nameserver:  {ns}")
    else:
        lines.append("nameserver:  (none)")
    for option in snapshot.options:
        lines.append(f"option:      {option}")
    return "\n".join(lines)


def cmd_show(argv: list[str]) -> int:
    """Print the parsed contents of a resolv.conf file.

    Args:
        argv: Subcommand arguments.

    Returns:
        Exit code (0 on success, 1 on error).
    """
    parser = argparse.ArgumentParser(
        prog="resolvconf show",
        description="Print nameservers, options and hash of a resolv.conf.",
    )
    _add_file_argument(parser)
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the snapshot as JSON",
    )
    _add_common_arguments(parser)
    args = parser.parse_args(argv)

    config = _load_config(args)
    if config is None:
        return 1

    path = _target(config, args.file)
    snapshot = _read(path)
    if snapshot is None:
        return 1

    if args.json:
        data = {"file": str(path), **snapshot.to_dict()}
        print(json.dumps(data, indent=2))
    else:
        print(_format_snapshot(path, snapshot))
    return 0


# ── hash subcommand ─────────────────────────────────────────────────


def cmd_hash(argv: list[str]) -> int:
    """Print the content hash of a resolv.conf file.

    Args:
        argv: Subcommand arguments.

    Returns:
        Exit code (0 on success, 1 on error).
    """
    parser = argparse.ArgumentParser(
        prog="resolvconf hash",
        description="Print the content hash of a resolv.conf file.",
    )
    _add_file_argument(parser)
    _add_common_arguments(parser)
    args = parser.parse_args(argv)

    config = _load_config(args)
    if config is None:
        return 1

    snapshot = _read(_target(config, args.file))
    if snapshot is None:
        return 1

    print(snapshot.hash)
    return 0


# ── init subcommand ─────────────────────────────────────────────────


def cmd_init(argv: list[str]) -> int:
    """Write the stub configuration file.

    The target defaults to ``~/.config/resolvconf/resolvconf.yaml``.  An
    existing file is left alone unless ``--force`` is given.

    Args:
        argv: Subcommand arguments.

    Returns:
        Exit code (always 0).
    """
    parser = argparse.ArgumentParser(
        prog="resolvconf init",
        description="Create a stub resolvconf.yaml config file.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        metavar="PATH",
        help=(
            "Where to write the config file"
            " (default: ~/.config/resolvconf/resolvconf.yaml)"
        ),
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Overwrite an existing config file",
    )
    args = parser.parse_args(argv)

    config_path = args.config if args.config is not None else get_config_path()
    if config_path.exists() and not args.force:
        print(f"Config already exists: {config_path} (use --force)")
        return 0

    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(_STUB_CONFIG)
    print(f"Wrote stub config: {config_path}")
    return 0


_DISPATCH: dict[str, str] = {
    "path": "cmd_path",
    "show": "cmd_show",
    "hash": "cmd_hash",
    "init": "cmd_init",
}


def cli() -> None:
    """Entry point for ``resolvconf``.

    When no arguments are given, prints usage information.
    """
    argv = sys.argv[1:]

    if not argv or argv[0] in ("-h", "--help"):
        print(_USAGE)
        sys.exit(0)

    if argv[0] not in _DISPATCH:
        print(f"resolvconf: unknown command '{argv[0]}'", file=sys.stderr)
        print(_USAGE, file=sys.stderr)
        sys.exit(2)

    # Look up handler by name so tests can mock individual commands.
    import resolvconf.cli as _self

    handler = getattr(_self, _DISPATCH[argv[0]])
    sys.exit(handler(argv[1:]))


#: Stub configuration template written by ``resolvconf init``.
_STUB_CONFIG = """\
# resolvconf configuration

# paths:
#   default: /etc/resolv.conf
#   alternate: /run/systemd/resolve/resolv.conf

# logging:
#   level: INFO
"""
