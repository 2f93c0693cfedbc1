"""
PNG Writer - Persist rendered symbols

Writes each symbol as <output_dir>/<name>.png with Pillow.
"""

from pathlib import Path
from typing import Union
import logging

from PIL import Image

from qrstamp.errors import OutputWriteFailed
from qrstamp.rendering.interface import SymbolWriter

logger = logging.getLogger(__name__)


class PNGImageWriter(SymbolWriter):
    """
    Write symbols as PNG files into one directory.

    The directory is created on first write, not on construction.
    """

    def __init__(self, output_dir: Union[str, Path] = "output"):
        self.output_dir = Path(output_dir)

    def path_for(self, name: str) -> Path:
        return self.output_dir / f"{name}.png"

    def write(self, image: Image.Image, name: str) -> Path:
        output_path = self.path_for(name)
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            image.save(output_path, "PNG", optimize=True)
        except (OSError, ValueError) as e:
            raise OutputWriteFailed(f"cannot write {output_path}: {e}") from e
        logger.info("wrote symbol=%s", output_path)
        return output_path
