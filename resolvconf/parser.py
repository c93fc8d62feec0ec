# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Line-oriented resolv.conf parsing.

The parser is deliberately tolerant: it splits the text into lines, drops
comments, and picks out the lines that start with a known keyword.  Lines
it does not recognize (``search``, ``domain``, ``sortlist``, ...) are
ignored.  This is not a full resolv.conf(5) grammar.
"""

from __future__ import annotations

import ipaddress

from resolvconf.errors import ParseError


COMMENT_MARKER = "#"

NAMESERVER_KEY = "nameserver"

#: Option keywords, longest first so ``options`` is not read as ``option``.
OPTION_KEYS = ("options", "option")

IPAddress = ipaddress.IPv4Address | ipaddress.IPv6Address


def get_lines(text: str, comment_marker: str = COMMENT_MARKER) -> list[str]:
    """Split *text* into lines with comments and surrounding space removed.

    Every input line yields exactly one output line, in order.  Blank and
    comment-only lines become empty strings.

    Args:
        text: Decoded file content.
        comment_marker: Everything from the first occurrence of this marker
            to the end of the line is discarded.

    Returns:
        The stripped lines.
    """
    lines: list[str] = []
    for line in text.split("\n"):
        comment_index = line.find(comment_marker)
        if comment_index != -1:
            line = line[:comment_index]
        lines.append(line.strip())
    return lines


def _strip_key(line: str, key: str) -> str:
    return line[len(key) :].strip()


def get_nameservers(text: str) -> list[IPAddress]:
    """Return the addresses of all ``nameserver`` lines, in file order.

    Raises:
        ParseError: On the first ``nameserver`` line whose value is not an
            IPv4 or IPv6 address literal.  Scoped IPv6 literals
            (``fe80::1%eth0``) are rejected.
    """
    nameservers: list[IPAddress] = []
    for index, line in enumerate(get_lines(text)):
        if not line.startswith(NAMESERVER_KEY):
            continue
        value = _strip_key(line, NAMESERVER_KEY)
        try:
            address = ipaddress.ip_address(value)
        except ValueError:
            raise ParseError(index + 1, value) from None
        if isinstance(address, ipaddress.IPv6Address) and address.scope_id:
            raise ParseError(index + 1, value)
        nameservers.append(address)
    return nameservers


def get_options(text: str) -> list[str]:
    """Return the value of every option line, in file order.

    Values are returned verbatim.  When the file holds several option
    lines all of them are returned; callers wanting the last one should
    take ``[-1]``.
    """
    options: list[str] = []
    for line in get_lines(text):
        for key in OPTION_KEYS:
            if line.startswith(key):
                options.append(_strip_key(line, key))
                break
    return options
