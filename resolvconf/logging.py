# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Logging configuration for resolvconf entry points.

Usage:
    # In entry points (CLI)
    from resolvconf.logging import configure_logging
    configure_logging(level=logging.INFO)

    # In library modules
    import logging
    log = logging.getLogger(__name__)
    log.info("Using %s", path)
"""

import logging


DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(
    level: int | str = logging.INFO,
    format_string: str | None = None,
) -> None:
    """Configure the root logger.

    Installs a single stderr handler, replacing any handlers already on
    the root logger.

    Args:
        level: The logging level, as a number or a name such as ``"DEBUG"``.
        format_string: Custom format string. If None, uses
            ``DEFAULT_FORMAT``.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    for existing_handler in root_logger.handlers[:]:
        root_logger.removeHandler(existing_handler)

    root_logger.addHandler(handler)
