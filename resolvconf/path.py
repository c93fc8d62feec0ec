# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Detection of the resolv.conf file a container should use.

When ``/etc/resolv.conf`` lists a loopback address as its only nameserver,
the host delegates DNS to a local stub resolver such as systemd-resolved.
That address is unreachable from inside a container's network namespace,
so the file systemd-resolved generates with the real upstream servers
(``/run/systemd/resolve/resolv.conf``) is used instead.

The decision is made once per process.  Read and parse errors during
detection are not raised: the default path is kept, and the same error
surfaces when the caller actually reads that file.
"""

from __future__ import annotations

import ipaddress
import logging
import threading
from pathlib import Path

from resolvconf.errors import ParseError
from resolvconf.parser import IPAddress, get_nameservers


log = logging.getLogger(__name__)

DEFAULT_PATH = Path("/etc/resolv.conf")
ALTERNATE_PATH = Path("/run/systemd/resolve/resolv.conf")


def _is_loopback(address: IPAddress) -> bool:
    if isinstance(address, ipaddress.IPv6Address):
        mapped = address.ipv4_mapped
        if mapped is not None:
            return mapped.is_loopback
    return address.is_loopback


class PathResolver:
    """Chooses between the default and the alternate resolv.conf.

    ``resolve()`` probes the default file on first use and memoizes the
    result.  Concurrent first callers wait on a lock and all observe the
    same value; later calls return without locking or touching the
    filesystem.

    Args:
        default_path: File normally consulted.
        alternate_path: File generated by the stub resolver.
    """

    def __init__(
        self,
        default_path: Path = DEFAULT_PATH,
        alternate_path: Path = ALTERNATE_PATH,
    ) -> None:
        self._default_path = Path(default_path)
        self._alternate_path = Path(alternate_path)
        self._lock = threading.Lock()
        self._resolved: Path | None = None

    def resolve(self) -> Path:
        """Return the authoritative resolv.conf path for this resolver."""
        resolved = self._resolved
        if resolved is not None:
            return resolved
        with self._lock:
            if self._resolved is None:
                self._resolved = self._detect()
            return self._resolved

    def _detect(self) -> Path:
        try:
            content = self._default_path.read_bytes()
        except OSError as exc:
            log.debug("Keeping %s, probe failed: %s", self._default_path, exc)
            return self._default_path

        try:
            nameservers = get_nameservers(
                content.decode("utf-8", errors="replace")
            )
        except ParseError as exc:
            log.debug("Keeping %s, probe failed: %s", self._default_path, exc)
            return self._default_path

        if len(nameservers) == 1 and _is_loopback(nameservers[0]):
            log.info(
                "Only nameserver in %s is loopback (%s), using %s",
                self._default_path,
                nameservers[0],
                self._alternate_path,
            )
            return self._alternate_path
        return self._default_path


_resolver = PathResolver()


def resolve_path() -> Path:
    """Return the resolv.conf path for this process.

    The first call inspects ``/etc/resolv.conf``; the answer is fixed for
    the rest of the process lifetime.  Never raises.
    """
    return _resolver.resolve()
