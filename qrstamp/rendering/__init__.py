"""
Rendering Layer

Encodes payloads as QR symbols (qrcode) and writes them as images (Pillow).
"""

from .interface import SymbolEncoder, SymbolWriter
from .encoder import QRCodeEncoder
from .writer import PNGImageWriter

__all__ = [
    'SymbolEncoder',
    'SymbolWriter',
    'QRCodeEncoder',
    'PNGImageWriter',
]
