# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Configuration for the resolvconf CLI.

Configuration is loaded from a YAML file.  The default location follows
the XDG Base Directory Specification:

    ``$XDG_CONFIG_HOME/resolvconf/resolvconf.yaml``
    (typically ``~/.config/resolvconf/resolvconf.yaml``)

``!env VAR`` tags resolve values from environment variables.  When a
config uses them, a ``.env`` file next to the config file is loaded
first; variables already set in the environment win.  Every key is
optional::

    paths:
      default: /etc/resolv.conf
      alternate: /run/systemd/resolve/resolv.conf
    logging:
      level: INFO
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

import yaml
from dotenv import load_dotenv
from platformdirs import user_config_path

from resolvconf.path import ALTERNATE_PATH, DEFAULT_PATH


logger = logging.getLogger(__name__)

#: Application name for XDG path resolution.
_APP_NAME = "resolvconf"

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


def get_config_path() -> Path:
    """Return the default config file path.

    Returns:
        ``$XDG_CONFIG_HOME/resolvconf/resolvconf.yaml``.
    """
    return user_config_path(_APP_NAME) / "resolvconf.yaml"


class ConfigError(Exception):
    """Base exception for configuration errors."""


class _EnvVar:
    """Placeholder for an unresolved ``!env VAR_NAME`` tag."""

    def __init__(self, var_name: str) -> None:
        self.var_name = var_name


def _env_constructor(loader: yaml.SafeLoader, node: yaml.Node) -> _EnvVar:
    """Handle ``!env VAR_NAME`` in YAML."""
    value = loader.construct_scalar(node)
    return _EnvVar(str(value))


def _make_loader() -> type[yaml.SafeLoader]:
    """Create a YAML loader that understands ``!env``."""

    class EnvLoader(yaml.SafeLoader):
        pass

    EnvLoader.add_constructor("!env", _env_constructor)
    return EnvLoader


def _uses_env_tags(value: object) -> bool:
    if isinstance(value, _EnvVar):
        return True
    if isinstance(value, dict):
        return any(_uses_env_tags(v) for v in value.values())
    if isinstance(value, list):
        return any(_uses_env_tags(v) for v in value)
    return False


def _load_env_file(env_path: Path) -> None:
    """Load *env_path* into the environment without overriding it."""
    if env_path.is_file():
        load_dotenv(env_path, override=False)
        logger.debug("Loaded .env from %s", env_path)


def _resolve_str(value: object, default: str) -> str:
    """Resolve a YAML scalar, handling ``!env`` tags.

    Unset environment variables and missing values fall back to
    *default*.
    """
    if isinstance(value, _EnvVar):
        value = os.environ.get(value.var_name)
    if value is None:
        return default
    return str(value)


def _section(raw: dict, name: str) -> dict:
    section = raw.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigError(f"'{name}' must be a YAML mapping")
    return section


@dataclass(frozen=True)
class ResolvConfConfig:
    """resolvconf settings.

    Attributes:
        default_path: resolv.conf normally consulted.
        alternate_path: resolv.conf generated by the local stub resolver.
        log_level: Log level name for the CLI.
    """

    default_path: Path = DEFAULT_PATH
    alternate_path: Path = ALTERNATE_PATH
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        """Validate configuration.

        Raises:
            ConfigError: If the log level is unknown.
        """
        if self.log_level not in _LOG_LEVELS:
            raise ConfigError(f"Unknown log level: {self.log_level!r}")

    @classmethod
    def from_yaml(cls, config_path: Path | None = None) -> "ResolvConfConfig":
        """Load configuration from a YAML file.

        Args:
            config_path: Path to YAML config file.  Defaults to
                ``~/.config/resolvconf/resolvconf.yaml`` (XDG); a missing
                default file yields the built-in defaults.

        Returns:
            ResolvConfConfig instance.

        Raises:
            ConfigError: If an explicitly given file is missing, or the
                file is not a valid YAML mapping.
        """
        if config_path is None:
            config_path = get_config_path()
            if not config_path.exists():
                logger.debug("No config at %s, using defaults", config_path)
                return cls()
        elif not config_path.exists():
            raise ConfigError(f"Config file not found: {config_path}")

        try:
            with open(config_path) as f:
                raw = yaml.load(f, Loader=_make_loader())
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise ConfigError(
                f"Config file must be a YAML mapping: {config_path}"
            )

        if _uses_env_tags(raw):
            _load_env_file(config_path.parent / ".env")

        return cls._from_raw(raw)

    @classmethod
    def _from_raw(cls, raw: dict) -> "ResolvConfConfig":
        """Build config from parsed (but unresolved) YAML dict."""
        paths = _section(raw, "paths")
        logging_section = _section(raw, "logging")

        return cls(
            default_path=Path(
                _resolve_str(paths.get("default"), str(DEFAULT_PATH))
            ),
            alternate_path=Path(
                _resolve_str(paths.get("alternate"), str(ALTERNATE_PATH))
            ),
            log_level=_resolve_str(
                logging_section.get("level"), "INFO"
            ).upper(),
        )
