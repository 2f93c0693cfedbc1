"""Fixed-width fingerprint over a byte buffer (SHAKE-128 read to 16 bytes)."""
from __future__ import annotations

import hashlib
from typing import Iterable

from qrstamp.fingerprint.framing import BytesLike, frame

FINGERPRINT_SIZE = 16


def fingerprint(data: BytesLike) -> bytes:
    return hashlib.shake_128(bytes(data)).digest(FINGERPRINT_SIZE)


def fingerprint_contents(contents: Iterable[BytesLike]) -> bytes:
    """Frame an ordered content set and fingerprint the result."""
    return fingerprint(frame(contents))
