
from __future__ import annotations

"""Central exception hierarchy"""
class HashSignError(Exception):
    """Base exception for all failures"""


class CryptoError(HashSignError):
    """Raised for cryptographic misuse"""


class KeyMaterialError(CryptoError, ValueError):
    """Raised when key or digest bytes have the wrong length or shape"""


class EntropyError(CryptoError):
    """Raised when the secure random source cannot supply key material"""


class DecodeError(HashSignError, ValueError):
    """Raised when text is not canonical padded base64"""


class ConfigError(HashSignError):
    """Raised when configuration cannot be loaded or is invalid"""
