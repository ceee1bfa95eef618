"""Zero-byte counting over binary streams."""

from __future__ import annotations

import logging
from typing import BinaryIO

from .constants import ULONG_MAX

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


def count_zero_bytes(stream: BinaryIO, upper: int = 0, chunk_size: int = CHUNK_SIZE) -> int:
    """Count the zero bytes in an *open* binary stream.

    Reading stops at end of stream, or as soon as ``upper`` zero bytes have
    been seen when ``upper`` is non-zero. The result never exceeds ``upper``
    (or ``ULONG_MAX`` when unlimited). A read error ends the scan and the
    count accumulated so far is returned. The stream is not closed.
    """
    limit = ULONG_MAX if upper == 0 else min(upper, ULONG_MAX)
    zeros = 0

    while zeros < limit:
        try:
            chunk = stream.read(chunk_size)
        except OSError as e:
            logger.debug("read error after %d zero-bytes, treating as end of stream: %s", zeros, e)
            break
        if not chunk:
            logger.debug("end of stream after %d zero-bytes", zeros)
            break
        # Text streams, such as a stdin without a binary buffer, yield str chunks
        zeros += chunk.count("\0" if isinstance(chunk, str) else 0)
    else:
        logger.debug("stopped early, limit of %d zero-bytes reached", limit)

    return min(zeros, limit)


def scan_path(path, upper: int = 0) -> int:
    """Open ``path`` for binary reading, count its zero bytes and close it.

    ``OSError`` from opening the file propagates to the caller.
    """
    with open(path, "rb") as file:
        return count_zero_bytes(file, upper)
