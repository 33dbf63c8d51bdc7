"""Core exports."""
from .exceptions import (
    ConfigError,
    CryptoError,
    DecodeError,
    EntropyError,
    HashSignError,
    KeyMaterialError,
)

__all__ = [
    "ConfigError",
    "CryptoError",
    "DecodeError",
    "EntropyError",
    "HashSignError",
    "KeyMaterialError",
]
