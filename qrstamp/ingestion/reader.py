"""Input reading.

Loads the raw bytes of each named input in order. The bytes are opaque to the
rest of the pipeline; a missing or unreadable input stops the run with
InputUnavailable.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Union
import hashlib
import logging

from qrstamp.errors import InputUnavailable

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass(frozen=True)
class InputFile:
    path: Path
    content: bytes

    @property
    def sha256(self) -> str:
        return hashlib.sha256(self.content).hexdigest()

    @property
    def size_bytes(self) -> int:
        return len(self.content)


def read_input(path: PathLike) -> InputFile:
    p = Path(path)
    if not p.is_file():
        raise InputUnavailable(f"input not found: {p}")
    try:
        content = p.read_bytes()
    except OSError as e:
        raise InputUnavailable(f"cannot read {p}: {e}") from e
    item = InputFile(path=p, content=content)
    logger.debug("read input=%s size=%d sha256=%s", p, item.size_bytes, item.sha256[:12])
    return item


def read_contents(paths: Iterable[PathLike]) -> List[bytes]:
    """Read every path in order and return the raw buffers.

    Raises:
        InputUnavailable: On the first path that cannot be read
    """
    return [read_input(p).content for p in paths]
