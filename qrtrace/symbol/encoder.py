"""Symbol encoder adapter — builds a ModuleMatrix with the qrcode library."""

from __future__ import annotations

import logging

import numpy as np
import qrcode
from qrcode.constants import ERROR_CORRECT_H, ERROR_CORRECT_L, ERROR_CORRECT_M, ERROR_CORRECT_Q
from qrcode.exceptions import DataOverflowError
from qrcode.util import MODE_8BIT_BYTE, MODE_ALPHA_NUM, MODE_KANJI, MODE_NUMBER, QRData

from qrtrace.outline.grid import ModuleMatrix

logger = logging.getLogger(__name__)

_ECC_MAP = {
    "L": ERROR_CORRECT_L,  # ~7% recovery
    "M": ERROR_CORRECT_M,  # ~15%
    "Q": ERROR_CORRECT_Q,  # ~25%
    "H": ERROR_CORRECT_H,  # ~30%
}

_MODE_MAP = {
    "Numeric": MODE_NUMBER,
    "Alphanumeric": MODE_ALPHA_NUM,
    "Byte": MODE_8BIT_BYTE,
    "Kanji": MODE_KANJI,
}


class EncodingError(ValueError):
    """The payload cannot be encoded with the requested parameters."""


def encode(
    data: str,
    type_number: int = 0,
    error_correction_level: str = "Q",
    mode: str | None = None,
) -> ModuleMatrix:
    """Encode `data` into a QR symbol without quiet zone.

    Args:
        data: payload.
        type_number: symbol version 1-40, or 0 to pick the smallest that fits.
        error_correction_level: one of L, M, Q, H.
        mode: Numeric, Alphanumeric, Byte or Kanji; None lets the encoder choose.
    """
    if not data:
        raise EncodingError("nothing to encode")
    if error_correction_level not in _ECC_MAP:
        raise EncodingError(f"unknown error correction level {error_correction_level!r}")
    if mode is not None and mode not in _MODE_MAP:
        raise EncodingError(f"unknown encoding mode {mode!r}")

    qr = qrcode.QRCode(
        version=type_number or None,
        error_correction=_ECC_MAP[error_correction_level],
        box_size=1,
        border=0,
    )
    if mode:
        try:
            payload = QRData(data, mode=_MODE_MAP[mode])
        except TypeError as e:
            raise EncodingError(f"data cannot be represented in {mode} mode") from e
    else:
        payload = data

    try:
        qr.add_data(payload)
        qr.make(fit=not type_number)
    except DataOverflowError as e:
        raise EncodingError(f"{len(data)} chars do not fit in version {type_number}") from e

    matrix = np.array(qr.get_matrix(), dtype=bool)
    logger.debug("Encoded %d chars as version %d (%d modules)", len(data), qr.version, matrix.shape[0])
    return ModuleMatrix(matrix)
