"""Hash-then-sign message authentication over Ed25519.

The module-level functions are the boundary consumed by applications; they
delegate to a fixed SHA-256 ``SignEngine``; configuration only affects logging.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from .config import AppConfig, load_config
from .core.exceptions import (
    ConfigError,
    CryptoError,
    DecodeError,
    EntropyError,
    HashSignError,
    KeyMaterialError,
)
from .logging import configure_logging
from .models import Digest, KeyPair, SignResult, VerificationFailure, VerificationOutcome
from .services import SignEngine, default_engine
from .utils import b64d, b64e

__version__ = "0.1.0"


def configure(config_path: Optional[Path] = None) -> AppConfig:
    """Load configuration and apply its logging level.

    Optional; the signing API works unconfigured and then emits no log output.
    Configuration never changes the digest used by the module-level functions.
    """
    config = load_config(config_path)
    configure_logging(config.logging.normalized_level())
    return config


def generate_key_pair() -> KeyPair:
    return default_engine().generate_key_pair()


def hash_message(message: str) -> str:
    return default_engine().hash(message).hex


def hash_and_sign(message: str, private_key: Optional[bytes] = None) -> SignResult:
    """Hash ``message`` and sign the digest.

    A fresh key pair is generated when ``private_key`` is omitted; the public
    key in the result is the only way to recover it.
    """
    return default_engine().hash_and_sign(message, private_key)


def verify_signature(message: str, signature: str, public_key: str) -> bool:
    """Return whether ``signature`` (base64) over ``message`` matches ``public_key`` (base64).

    Never raises; every failure is reported as ``False``.
    """
    return default_engine().verify(message, signature, public_key)


def bytes_to_base64(data: bytes) -> str:
    return b64e(data)


def base64_to_bytes(text: str) -> bytes:
    return b64d(text)


__all__ = [
    "ConfigError",
    "CryptoError",
    "DecodeError",
    "Digest",
    "EntropyError",
    "HashSignError",
    "KeyMaterialError",
    "KeyPair",
    "SignEngine",
    "SignResult",
    "VerificationFailure",
    "VerificationOutcome",
    "base64_to_bytes",
    "bytes_to_base64",
    "configure",
    "configure_logging",
    "generate_key_pair",
    "hash_and_sign",
    "hash_message",
    "verify_signature",
]
