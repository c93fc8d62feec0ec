# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Exceptions raised while reading resolv.conf files."""

from __future__ import annotations

from pathlib import Path


class ResolvConfError(Exception):
    """Base exception for resolv.conf errors."""


class FileAccessError(ResolvConfError):
    """Raised when a resolv.conf file cannot be opened or read.

    The underlying ``OSError`` is chained as ``__cause__``.

    Attributes:
        path: The file that could not be read.
    """

    def __init__(self, path: Path, reason: object) -> None:
        self.path = path
        super().__init__(f"Could not read {path}: {reason}")


class ParseError(ResolvConfError):
    """Raised when a ``nameserver`` line does not hold a valid IP address.

    Attributes:
        line_number: 1-based line number of the offending line.
        text: The value that failed to parse.
        path: The file being parsed, if known.
    """

    def __init__(
        self, line_number: int, text: str, path: Path | None = None
    ) -> None:
        self.line_number = line_number
        self.text = text
        self.path = path
        message = (
            f"line {line_number}: invalid ip address of nameserver: {text!r}"
        )
        if path is not None:
            message = f"{path}: {message}"
        super().__init__(message)


class HashComputationError(ResolvConfError):
    """Raised when file content cannot be streamed through the hash."""
