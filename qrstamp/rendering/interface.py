"""
Rendering Interface

Abstract collaborators the orchestrator hands payloads to. The concrete
qrcode/Pillow implementations live beside this module; tests substitute
their own.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from PIL import Image


class SymbolEncoder(ABC):
    """Turns a payload into a renderable optical-code symbol."""

    @abstractmethod
    def encode(self, payload: bytes) -> Image.Image:
        """
        Encode a payload.

        Args:
            payload: Payload bytes, already checked against symbol capacity

        Returns:
            Rendered symbol image

        Raises:
            EncodingFailed: Payload cannot be encoded at the configured level
        """
        pass


class SymbolWriter(ABC):
    """Persists a rendered symbol under a name."""

    @abstractmethod
    def write(self, image: Image.Image, name: str) -> Path:
        """
        Persist a symbol.

        Args:
            image: Rendered symbol
            name: Output name without extension (e.g. "qrcode-0-1")

        Returns:
            Path of the written file

        Raises:
            OutputWriteFailed: The symbol could not be written
        """
        pass
