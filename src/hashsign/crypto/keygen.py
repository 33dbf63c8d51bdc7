"""Ed25519 key generation from a secure random source."""
from __future__ import annotations

import os
import threading
from typing import Callable

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey

from ..core.exceptions import EntropyError, KeyMaterialError
from ..logging import get_logger
from ..models import PRIVATE_KEY_SIZE, KeyPair

RandomSource = Callable[[int], bytes]

logger = get_logger(__name__)


def serialized(source: RandomSource) -> RandomSource:
    """Wrap ``source`` so concurrent callers draw from it one at a time.

    ``os.urandom`` does not need this; injected sources that keep internal
    state (test doubles, hardware tokens) do.
    """

    lock = threading.Lock()

    def draw(n: int) -> bytes:
        with lock:
            return source(n)

    return draw


def _draw_seed(random_source: RandomSource) -> bytes:
    try:
        seed = random_source(PRIVATE_KEY_SIZE)
    except (OSError, NotImplementedError) as exc:
        logger.error("entropy_unavailable", error=type(exc).__name__)
        raise EntropyError("Secure random source is unavailable") from exc
    if not isinstance(seed, (bytes, bytearray)) or len(seed) != PRIVATE_KEY_SIZE:
        raise EntropyError(f"Random source did not return {PRIVATE_KEY_SIZE} bytes")
    return bytes(seed)


def derive_public_key(private_key: bytes) -> bytes:
    if not isinstance(private_key, (bytes, bytearray, memoryview)) or len(private_key) != PRIVATE_KEY_SIZE:
        raise KeyMaterialError(f"Private key must be exactly {PRIVATE_KEY_SIZE} bytes")
    priv = Ed25519PrivateKey.from_private_bytes(bytes(private_key))
    return priv.public_key().public_bytes(
        serialization.Encoding.Raw, serialization.PublicFormat.Raw
    )


def key_pair_from_private(private_key: bytes) -> KeyPair:
    return KeyPair(private_key=bytes(private_key), public_key=derive_public_key(private_key))


def generate_key_pair(random_source: RandomSource = os.urandom) -> KeyPair:
    seed = _draw_seed(random_source)
    logger.debug("key_pair_generated", alg="Ed25519")
    return key_pair_from_private(seed)


__all__ = [
    "RandomSource",
    "derive_public_key",
    "generate_key_pair",
    "key_pair_from_private",
    "serialized",
]
