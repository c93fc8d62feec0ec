# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Reading resolv.conf snapshots."""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from resolvconf._hash import hash_data
from resolvconf.errors import FileAccessError, ParseError
from resolvconf.parser import IPAddress, get_nameservers, get_options
from resolvconf.path import resolve_path


log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvConf:
    """Contents of a resolv.conf file at the time it was read.

    Attributes:
        content: Raw file bytes.
        hash: ``sha256:<hex>`` digest of ``content``.
        nameservers: Nameserver addresses in file order.
        options: Option values in file order, verbatim.
    """

    content: bytes
    hash: str
    nameservers: tuple[IPAddress, ...]
    options: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dict for JSON export."""
        return {
            "content": self.content.decode("utf-8", errors="replace"),
            "hash": self.hash,
            "nameservers": [str(ns) for ns in self.nameservers],
            "options": list(self.options),
        }


def read(path: str | Path) -> ResolvConf:
    """Read and parse the resolv.conf file at *path*.

    Args:
        path: File to read.

    Returns:
        A new snapshot of the file.

    Raises:
        FileAccessError: If the file cannot be read.
        HashComputationError: If hashing the content fails.
        ParseError: If a ``nameserver`` line holds an invalid address.
    """
    path = Path(path)
    try:
        content = path.read_bytes()
    except OSError as exc:
        raise FileAccessError(path, exc) from exc

    content_hash = hash_data(io.BytesIO(content))

    text = content.decode("utf-8", errors="replace")
    try:
        nameservers = get_nameservers(text)
    except ParseError as exc:
        raise ParseError(exc.line_number, exc.text, path=path) from None

    options = get_options(text)
    log.debug(
        "Read %s: %d nameservers, %d options, %s",
        path,
        len(nameservers),
        len(options),
        content_hash,
    )
    return ResolvConf(
        content=content,
        hash=content_hash,
        nameservers=tuple(nameservers),
        options=tuple(options),
    )


def get_default() -> ResolvConf:
    """Read the resolv.conf file chosen by :func:`resolve_path`."""
    return read(resolve_path())
