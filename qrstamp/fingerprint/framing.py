"""Content framing.

Collapses an ordered sequence of buffers into one buffer so that the
fingerprint depends on how the input was split, not only on the
concatenated bytes.

Layout:
    for each buffer: FRAME_START || raw bytes || FRAME_END
    then:            buffer count, COUNT_WIDTH bytes, big-endian

Known limitation: delimiter bytes occurring inside a buffer are not escaped,
so crafted inputs containing 0x02/0x03 can produce two splits with the same
framed form. The trailing count still separates splits with a different
number of segments.
"""
from __future__ import annotations

from typing import Iterable, Union

FRAME_START = 0x02
FRAME_END = 0x03
COUNT_WIDTH = 8

BytesLike = Union[bytes, bytearray, memoryview]


def frame(contents: Iterable[BytesLike]) -> bytes:
    """Frame an ordered sequence of buffers into a single buffer.

    Args:
        contents: Buffers in order. Consumed once.

    Returns:
        The framed buffer. An empty sequence yields only the zero count.
    """
    out = bytearray()
    count = 0
    for chunk in contents:
        out.append(FRAME_START)
        out += bytes(chunk)
        out.append(FRAME_END)
        count += 1
    out += count.to_bytes(COUNT_WIDTH, "big")
    return bytes(out)
