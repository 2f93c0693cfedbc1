"""Tests for the qrcode encoder and PNG writer."""
import tempfile
from pathlib import Path

import pytest
from PIL import Image

from qrstamp.capacity import MAX_PAYLOAD_BYTES
from qrstamp.errors import EncodingFailed, OutputWriteFailed
from qrstamp.fingerprint import fingerprint
from qrstamp.metadata import Metadata
from qrstamp.payload import build_payload
from qrstamp.rendering import PNGImageWriter, QRCodeEncoder

# version 2 symbol: 25 modules per side
V2_MODULES = 25


def test_encodes_payload_as_grayscale_version2_symbol():
    encoder = QRCodeEncoder(box_size=10, border=4)
    img = encoder.encode(build_payload(fingerprint(b"hello"), Metadata(0, 1)))
    assert img.mode == "L"
    side = (V2_MODULES + 2 * 4) * 10
    assert img.size == (side, side)


def test_capacity_ceiling_matches_encoder():
    encoder = QRCodeEncoder(box_size=1, border=0)
    img = encoder.encode(b"\xff" * MAX_PAYLOAD_BYTES)
    assert img.size == (V2_MODULES, V2_MODULES)
    with pytest.raises(EncodingFailed):
        encoder.encode(b"\xff" * (MAX_PAYLOAD_BYTES + 1))


def test_encoder_rejects_bad_geometry():
    with pytest.raises(ValueError):
        QRCodeEncoder(box_size=0)
    with pytest.raises(ValueError):
        QRCodeEncoder(border=-1)


def test_writer_saves_png_under_name():
    with tempfile.TemporaryDirectory() as tmpdir:
        out = Path(tmpdir) / "codes"
        writer = PNGImageWriter(out)
        path = writer.write(Image.new("L", (10, 10), 0), "qrcode-0-1")
        assert path == out / "qrcode-0-1.png"
        with Image.open(path) as img:
            assert img.format == "PNG"
            assert img.size == (10, 10)


def test_writer_failure_is_output_write_failed():
    with tempfile.TemporaryDirectory() as tmpdir:
        blocker = Path(tmpdir) / "not_a_dir"
        blocker.write_bytes(b"")
        writer = PNGImageWriter(blocker)
        with pytest.raises(OutputWriteFailed):
            writer.write(Image.new("L", (4, 4)), "qrcode-0-1")
