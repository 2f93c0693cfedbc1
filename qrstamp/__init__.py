"""
qrstamp

Fingerprints a set of files and stamps each page of a printed set (an exam,
a form bundle) with a QR code carrying that fingerprint plus the set id and
page number.

Pipeline:
    files -> frame -> fingerprint -> payload per page -> QR symbol -> PNG
"""

from .errors import (
    QRStampError,
    InputUnavailable,
    PayloadTooLarge,
    InvalidPageCount,
    EncodingFailed,
    OutputWriteFailed,
)
from .fingerprint import frame, fingerprint, fingerprint_contents
from .metadata import Metadata, MetadataSequence
from .payload import build_payload, parse_payload
from .orchestration import Orchestrator, emit_set

__version__ = "0.3.0"

__all__ = [
    'QRStampError',
    'InputUnavailable',
    'PayloadTooLarge',
    'InvalidPageCount',
    'EncodingFailed',
    'OutputWriteFailed',
    'frame',
    'fingerprint',
    'fingerprint_contents',
    'Metadata',
    'MetadataSequence',
    'build_payload',
    'parse_payload',
    'Orchestrator',
    'emit_set',
]
