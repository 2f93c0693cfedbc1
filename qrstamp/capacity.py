"""Symbol parameters shared by the payload builder and the code encoder.

MAX_PAYLOAD_BYTES is the byte-mode capacity of a version 2 QR symbol at
error-correction level Q (22 data codewords, minus the mode and length
headers). Re-derive it here if the version or level changes.
"""
from typing import Final

from qrcode.constants import ERROR_CORRECT_Q

QR_VERSION: Final[int] = 2
ERROR_CORRECTION: Final[int] = ERROR_CORRECT_Q
MAX_PAYLOAD_BYTES: Final[int] = 20
