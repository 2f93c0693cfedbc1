"""QR encoder backed by the qrcode library.

The symbol version and error-correction level are fixed (see
qrstamp.capacity); the payload is forced into byte mode.
"""
from __future__ import annotations

import logging

import qrcode
from qrcode.exceptions import DataOverflowError
from qrcode.image.pil import PilImage
from qrcode.util import MODE_8BIT_BYTE, QRData
from PIL import Image

from qrstamp.capacity import ERROR_CORRECTION, QR_VERSION
from qrstamp.errors import EncodingFailed
from qrstamp.rendering.interface import SymbolEncoder

logger = logging.getLogger(__name__)


class QRCodeEncoder(SymbolEncoder):
    """
    Encode payloads as grayscale QR code images.

    Args:
        box_size: Pixels per module
        border: Quiet-zone width in modules (4 is the minimum the standard allows)
    """

    def __init__(self, box_size: int = 10, border: int = 4):
        if box_size < 1:
            raise ValueError(f"box_size must be >= 1, got {box_size}")
        if border < 0:
            raise ValueError(f"border must be >= 0, got {border}")
        self.box_size = box_size
        self.border = border

    def encode(self, payload: bytes) -> Image.Image:
        qr = qrcode.QRCode(
            version=QR_VERSION,
            error_correction=ERROR_CORRECTION,
            box_size=self.box_size,
            border=self.border,
        )
        try:
            qr.add_data(QRData(bytes(payload), mode=MODE_8BIT_BYTE))
            qr.make(fit=False)
        except (DataOverflowError, ValueError) as e:
            raise EncodingFailed(f"cannot encode {len(payload)}-byte payload: {e}") from e
        img = qr.make_image(image_factory=PilImage, fill_color="black", back_color="white")
        logger.debug("encoded payload_bytes=%d modules=%d", len(payload), qr.modules_count)
        # 8-bit grayscale
        return img.get_image().convert("L")
