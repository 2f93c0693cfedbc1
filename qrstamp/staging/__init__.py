"""Staging: all-or-nothing publication of a page set."""

from .staging import StagedFile, StagedOutput  # noqa: F401
