"""Staged Output

Purpose:
    Give callers all-or-nothing publication of a page set. The orchestrator
    itself keeps no transactional state: a failure on page k leaves pages
    1..k-1 on disk. Wrapping a run in StagedOutput writes into a hidden
    staging folder next to the target and only moves files into place once
    every page succeeded.

Design:
    - StagedFile: one symbol written to staging.
    - StagedOutput: context manager owning the staging folder, a writer that
      targets it, and commit/discard.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from types import TracebackType
from typing import Dict, List, Optional, Type, Union
import logging
import shutil
import uuid

from PIL import Image

from qrstamp.errors import OutputWriteFailed
from qrstamp.rendering.writer import PNGImageWriter

logger = logging.getLogger(__name__)


@dataclass
class StagedFile:
    name: str
    staged_path: Path
    added_at: datetime
    published_path: Optional[Path] = None

    @property
    def is_published(self) -> bool:
        return self.published_path is not None


class _StagingWriter(PNGImageWriter):
    def __init__(self, owner: "StagedOutput"):
        super().__init__(owner.staging_dir)
        self._owner = owner

    def write(self, image: Image.Image, name: str) -> Path:
        path = super().write(image, name)
        self._owner._record(name, path)
        return path


class StagedOutput:
    def __init__(self, output_dir: Union[str, Path]):
        self.output_dir = Path(output_dir)
        self.staging_dir = self.output_dir.parent / f".{self.output_dir.name}.staging-{uuid.uuid4().hex[:8]}"
        self.writer = _StagingWriter(self)
        self._files: Dict[str, StagedFile] = {}
        self._closed = False
        self.published: List[Path] = []

    def __enter__(self) -> "StagedOutput":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> bool:
        if exc_type is None:
            self.commit()
        else:
            self.discard()
        return False

    def _record(self, name: str, path: Path) -> None:
        self._files[name] = StagedFile(name=name, staged_path=path, added_at=datetime.utcnow())

    # ---------------- Stats -----------------
    def stats(self) -> Dict[str, int]:
        return {
            'staged_files': len(self._files),
            'published_files': len([f for f in self._files.values() if f.is_published]),
        }

    # ---------------- Lifecycle -----------------
    def commit(self) -> List[Path]:
        """Move every staged file into output_dir and drop the staging folder."""
        if self._closed:
            raise RuntimeError("staged output already closed")
        published: List[Path] = []
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            for staged in self._files.values():
                target = self.output_dir / staged.staged_path.name
                staged.staged_path.replace(target)
                staged.published_path = target
                published.append(target)
        except OSError as e:
            self._unpublish()
            raise OutputWriteFailed(f"cannot publish into {self.output_dir}: {e}") from e
        finally:
            shutil.rmtree(self.staging_dir, ignore_errors=True)
            self._closed = True
        self.published = published
        logger.info("published files=%d output_dir=%s", len(published), self.output_dir)
        return published

    def _unpublish(self) -> None:
        # Roll back a partial commit: output_dir keeps none of this set
        for staged in self._files.values():
            if staged.published_path is None:
                continue
            try:
                staged.published_path.unlink()
            except FileNotFoundError:
                pass
            staged.published_path = None
        logger.warning("rolled back partial publish output_dir=%s", self.output_dir)

    def discard(self) -> None:
        """Remove the staging folder; nothing reaches output_dir."""
        if self._closed:
            return
        shutil.rmtree(self.staging_dir, ignore_errors=True)
        self._closed = True
        logger.warning("discarded staged files=%d", len(self._files))
