from __future__ import annotations
import logging
from typing import List, Sequence, TypeVar

import qrcode
from qrcode.exceptions import DataOverflowError
from qrcode.main import QRCode

from qrterm.exceptions import EncodeError
from qrterm.models import DEFAULT_ERROR_CORRECTION

T = TypeVar("T")

ERROR_CORRECTION_LEVELS = {
    "L": qrcode.constants.ERROR_CORRECT_L,
    "M": qrcode.constants.ERROR_CORRECT_M,
    "Q": qrcode.constants.ERROR_CORRECT_Q,
    "H": qrcode.constants.ERROR_CORRECT_H,
}


logger = logging.getLogger()


def encode(text: str, error_correction: str = DEFAULT_ERROR_CORRECTION) -> List[List[bool]]:
    """Encode text as a QR code and return its modules, dark being True.

    The returned grid has no quiet zone, see surround_quiet().
    """
    if not text:
        raise EncodeError("Cannot encode empty text")

    qr = QRCode(error_correction=ERROR_CORRECTION_LEVELS[error_correction], border=0)
    try:
        qr.add_data(text)
        qr.make(fit=True)
    except DataOverflowError as e:
        raise EncodeError(f"Text too long for a QR code ({len(text)} characters)") from e
    except ValueError as e:
        raise EncodeError(f"Cannot encode text: {e}") from e

    pixels = [[bool(module) for module in row] for row in qr.get_matrix()]
    logger.debug(f"QR code version {qr.version}, {len(pixels)}x{len(pixels)} modules")
    return pixels


def square_width(pixels: Sequence[Sequence[T]]) -> int:
    width = len(pixels)
    for row in pixels:
        if len(row) != width:
            raise ValueError(f"Matrix is not square: row of {len(row)} in {width} rows")
    return width


def surround_quiet(pixels: Sequence[Sequence[T]], thickness: int, quiet: T) -> List[List[T]]:
    """Surround a square matrix with `quiet` cells of the given thickness"""
    width = square_width(pixels)
    out_width = width + thickness * 2

    out = [[quiet] * out_width for _ in range(out_width)]
    for row_index, row in enumerate(pixels):
        out[row_index + thickness][thickness : thickness + width] = row
    return out
