# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Host resolv.conf detection and parsing for container networking.

``resolve_path()`` picks the resolv.conf file a container should use
(``/etc/resolv.conf``, or the systemd-resolved upstream file when the host
points at a local stub resolver).  ``read()`` returns a ``ResolvConf``
snapshot with nameservers, options and a content hash for change
detection.
"""

from resolvconf.errors import (
    FileAccessError,
    HashComputationError,
    ParseError,
    ResolvConfError,
)
from resolvconf.file import ResolvConf, get_default, read
from resolvconf.path import (
    ALTERNATE_PATH,
    DEFAULT_PATH,
    PathResolver,
    resolve_path,
)


__all__ = [
    # path
    "ALTERNATE_PATH",
    "DEFAULT_PATH",
    "PathResolver",
    "resolve_path",
    # file
    "ResolvConf",
    "get_default",
    "read",
    # errors
    "FileAccessError",
    "HashComputationError",
    "ParseError",
    "ResolvConfError",
]
