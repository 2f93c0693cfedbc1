"""Fingerprinting layer

Frames an ordered content set into one buffer and reduces it to a short,
fixed-width digest small enough to fit in a QR payload.
"""

from .framing import frame, FRAME_START, FRAME_END, COUNT_WIDTH  # noqa: F401
from .hashing import fingerprint, fingerprint_contents, FINGERPRINT_SIZE  # noqa: F401
