"""Payload layout

    fingerprint (16 bytes) || set_id (1 byte) || page (1 byte)

No padding, fields left to right. The total is checked against the symbol
capacity before anything is handed to the encoder.
"""
from __future__ import annotations

from typing import Tuple

from qrstamp.capacity import MAX_PAYLOAD_BYTES
from qrstamp.errors import PayloadTooLarge
from qrstamp.fingerprint.hashing import FINGERPRINT_SIZE
from qrstamp.metadata.metadata import Metadata

METADATA_SIZE = 2
PAYLOAD_SIZE = FINGERPRINT_SIZE + METADATA_SIZE


def encode_metadata(m: Metadata) -> bytes:
    return bytes((m.set_id, m.page))


def build_payload(fp: bytes, m: Metadata) -> bytes:
    """Combine a fingerprint with one page's metadata.

    Args:
        fp: 16-byte fingerprint of the content set
        m: Page metadata

    Returns:
        The payload bytes (18 bytes for the current layout)

    Raises:
        ValueError: If fp is not FINGERPRINT_SIZE bytes
        PayloadTooLarge: If the payload exceeds MAX_PAYLOAD_BYTES
    """
    if len(fp) != FINGERPRINT_SIZE:
        raise ValueError(f"fingerprint must be {FINGERPRINT_SIZE} bytes, got {len(fp)}")
    payload = bytes(fp) + encode_metadata(m)
    if len(payload) > MAX_PAYLOAD_BYTES:
        raise PayloadTooLarge(
            f"payload is {len(payload)} bytes; symbol capacity is {MAX_PAYLOAD_BYTES}"
        )
    return payload


def parse_payload(payload: bytes) -> Tuple[bytes, Metadata]:
    """Split a scanned payload back into (fingerprint, Metadata).

    Raises:
        ValueError: If the payload length does not match the layout
        InvalidPageCount: If the page byte is zero
    """
    if len(payload) != PAYLOAD_SIZE:
        raise ValueError(f"payload must be {PAYLOAD_SIZE} bytes, got {len(payload)}")
    fp = bytes(payload[:FINGERPRINT_SIZE])
    set_id, page = payload[FINGERPRINT_SIZE], payload[FINGERPRINT_SIZE + 1]
    return fp, Metadata(set_id, page)
