"""Page metadata: set id + page number, and the per-set page sequence."""

from .metadata import Metadata, MetadataSequence, BYTE_MAX  # noqa: F401
