"""Error types raised by the stamping pipeline.

Every failure surfaces to the caller as one of these; nothing is retried or
silently defaulted. The CLI is the only place they are caught.
"""


class QRStampError(Exception):
    """Base class for all pipeline errors."""
    pass


class InputUnavailable(QRStampError):
    """Raised when a source buffer could not be read."""
    pass


class PayloadTooLarge(QRStampError):
    """Raised when a built payload exceeds the symbol capacity."""
    pass


class InvalidPageCount(QRStampError, ValueError):
    """Raised when a page number (or terminal page count) is zero."""
    pass


class EncodingFailed(QRStampError):
    """Raised when the code encoder rejects a payload."""
    pass


class OutputWriteFailed(QRStampError):
    """Raised when a rendered symbol could not be persisted."""
    pass
