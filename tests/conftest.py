# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Shared pytest fixtures used across multiple test modules."""

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def write_resolv_conf(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory that writes a resolv.conf file under tmp_path.

    The factory accepts the file content (``str`` or ``bytes``) and an
    optional file name, and returns the path written.
    """

    def _write(content: str | bytes, name: str = "resolv.conf") -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content)
        return path

    return _write
