"""Payload builder: fingerprint + page metadata, bounded by symbol capacity."""

from .payload import (  # noqa: F401
    build_payload,
    parse_payload,
    encode_metadata,
    METADATA_SIZE,
    PAYLOAD_SIZE,
)
