"""Set orchestration

Drives one content set through the pipeline:

    contents -> frame -> fingerprint          (once per set)
    for each page: fingerprint x Metadata -> payload -> encoder -> writer

Pages are processed in increasing order and output names are deterministic
("<prefix>-<set_id>-<page>"). The first failure aborts the remaining pages and
propagates; pages already written are left in place. Wrap the writer with
qrstamp.staging.StagedOutput for all-or-nothing output.
"""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional
import logging

from qrstamp.fingerprint.framing import BytesLike
from qrstamp.fingerprint.hashing import fingerprint_contents
from qrstamp.instrumentation import timed
from qrstamp.metadata.metadata import Metadata, MetadataSequence
from qrstamp.payload.payload import build_payload
from qrstamp.rendering.encoder import QRCodeEncoder
from qrstamp.rendering.interface import SymbolEncoder, SymbolWriter
from qrstamp.rendering.writer import PNGImageWriter

logger = logging.getLogger(__name__)


def output_name(name_prefix: str, m: Metadata) -> str:
    return f"{name_prefix}-{m}"


class Orchestrator:
    """Binds an encoder and a writer; emits one symbol per page of a set."""

    def __init__(self, encoder: Optional[SymbolEncoder] = None, writer: Optional[SymbolWriter] = None):
        self.encoder = encoder or QRCodeEncoder()
        self.writer = writer or PNGImageWriter()

    @timed("emit_set")
    def emit_set(self, contents: Iterable[BytesLike], terminal: Metadata, name_prefix: str) -> List[Path]:
        """Fingerprint a content set and emit a symbol for each of its pages.

        Args:
            contents: Ordered buffers making up the set
            terminal: Metadata of the last page; pages 1..terminal.page are emitted
            name_prefix: Prefix of every output name

        Returns:
            Paths written, in page order

        Raises:
            InvalidPageCount, PayloadTooLarge, EncodingFailed, OutputWriteFailed
        """
        pages = MetadataSequence(terminal)
        fp = fingerprint_contents(contents)
        logger.info("set_id=%d pages=%d fingerprint=%s", terminal.set_id, pages.remaining, fp.hex())

        written: List[Path] = []
        for m in pages:
            payload = build_payload(fp, m)
            symbol = self.encoder.encode(payload)
            written.append(self.writer.write(symbol, output_name(name_prefix, m)))
        return written


def emit_set(
    contents: Iterable[BytesLike],
    terminal: Metadata,
    name_prefix: str,
    encoder: Optional[SymbolEncoder] = None,
    writer: Optional[SymbolWriter] = None,
) -> List[Path]:
    """Module-level shortcut for Orchestrator(encoder, writer).emit_set(...)."""
    return Orchestrator(encoder, writer).emit_set(contents, terminal, name_prefix)
