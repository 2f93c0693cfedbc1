"""Page metadata

Core Concepts:
- Metadata: (set_id, page) identity of one printed page within a set
- MetadataSequence: the full page run (set_id, 1) .. (set_id, last page),
  derived from the terminal Metadata of a set

Both fields are encoded as single bytes in the payload, so each must fit in
0..255. Page 0 is reserved and never a valid page.
"""
from __future__ import annotations

from dataclasses import dataclass

from qrstamp.errors import InvalidPageCount

BYTE_MAX = 255


@dataclass(frozen=True)
class Metadata:
    """Identity of one page: set (exam) id plus 1-based page number."""
    set_id: int
    page: int

    def __post_init__(self) -> None:
        for field_name in ("set_id", "page"):
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{field_name} must be an int, got {type(value).__name__}")
        if not 0 <= self.set_id <= BYTE_MAX:
            raise ValueError(f"set_id must be in 0..{BYTE_MAX}, got {self.set_id}")
        if self.page == 0:
            raise InvalidPageCount("page 0 is reserved; pages start at 1")
        if not 1 <= self.page <= BYTE_MAX:
            raise ValueError(f"page must be in 1..{BYTE_MAX}, got {self.page}")

    def __str__(self) -> str:
        return f"{self.set_id}-{self.page}"


class MetadataSequence:
    """Lazy, single-pass run of every page of a set.

    Yields Metadata(set_id, 1) through Metadata(set_id, terminal.page) and is
    exhausted afterwards. Build a new sequence from the same terminal value to
    iterate again.
    """

    def __init__(self, terminal: Metadata):
        if terminal.page < 1:
            raise InvalidPageCount(f"terminal page must be >= 1, got {terminal.page}")
        self._set_id = terminal.set_id
        self._stop = terminal.page
        self._cursor = 1

    @property
    def remaining(self) -> int:
        return max(self._stop - self._cursor + 1, 0)

    def __iter__(self) -> "MetadataSequence":
        return self

    def __next__(self) -> Metadata:
        if self._cursor > self._stop:
            raise StopIteration
        current = Metadata(self._set_id, self._cursor)
        self._cursor += 1
        return current

    def __repr__(self) -> str:
        return f"MetadataSequence(set_id={self._set_id}, stop={self._stop}, remaining={self.remaining})"
