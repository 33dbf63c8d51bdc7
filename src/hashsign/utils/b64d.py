
from __future__ import annotations

import base64
import binascii

from ..core.exceptions import DecodeError
from .b64e import b64e


def b64d(value: str) -> bytes:
    """Strict standard base64 decode.

    Only the text ``b64e`` produces is accepted: characters outside the
    standard alphabet, missing or misplaced padding, a length that is not a
    multiple of four and non-zero trailing bits all raise ``DecodeError``.
    """
    if not isinstance(value, str):
        raise DecodeError(f"Expected text, got {type(value).__name__}")
    if len(value) % 4:
        raise DecodeError("Length is not a multiple of 4")
    try:
        raw = value.encode("ascii")
    except UnicodeEncodeError:
        raise DecodeError("Non-ASCII character in base64 text") from None
    try:
        data = base64.b64decode(raw, validate=True)
    except binascii.Error as exc:
        raise DecodeError(f"Invalid base64: {exc}") from None
    # a2b_base64 tolerates non-zero pad bits and some stray padding
    if b64e(data) != value:
        raise DecodeError("Non-canonical base64 encoding")
    return data
