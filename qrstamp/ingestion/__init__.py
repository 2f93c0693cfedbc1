"""Input layer

Reads the files that make up one content set. Order of the returned buffers
follows the order of the paths and is part of the fingerprinted identity.
"""

from .reader import InputFile, read_input, read_contents  # noqa: F401
