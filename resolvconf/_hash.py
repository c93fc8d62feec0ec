# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Content hashing for change detection."""

from __future__ import annotations

import hashlib
from typing import BinaryIO

from resolvconf.errors import HashComputationError


#: Read size used when streaming content through the hash.
_CHUNK_SIZE = 64 * 1024


def hash_data(src: BinaryIO) -> str:
    """Hash everything readable from *src*.

    Args:
        src: Binary stream positioned at the start of the data.

    Returns:
        ``"sha256:"`` followed by 64 lowercase hex characters.

    Raises:
        HashComputationError: If reading from *src* fails.
    """
    h = hashlib.sha256()
    try:
        while True:
            chunk = src.read(_CHUNK_SIZE)
            if not chunk:
                break
            h.update(chunk)
    except (OSError, ValueError) as exc:
        raise HashComputationError(f"Could not hash content: {exc}") from exc
    return "sha256:" + h.hexdigest()
