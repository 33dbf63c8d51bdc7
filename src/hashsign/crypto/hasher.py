# Digest functions the engine is constructed with.
from __future__ import annotations

import hashlib
from typing import Protocol

from ..core.exceptions import ConfigError


class Hasher(Protocol):
    name: str
    digest_size: int

    def __call__(self, data: bytes) -> bytes:
        ...


class HashlibHasher:
    """Adapter exposing a fixed-size ``hashlib`` constructor as a ``Hasher``"""

    def __init__(self, name: str) -> None:
        probe = hashlib.new(name)
        self.name = name
        self.digest_size = probe.digest_size

    def __call__(self, data: bytes) -> bytes:
        return hashlib.new(self.name, data).digest()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class Sha256Hasher(HashlibHasher):
    def __init__(self) -> None:
        super().__init__("sha256")

    def __call__(self, data: bytes) -> bytes:
        return hashlib.sha256(data).digest()


SUPPORTED_HASHES = ("sha256", "sha3_256", "blake2s")

_ALIASES = {"sha_256": "sha256", "sha3": "sha3_256"}


def normalise_hash_name(name: str) -> str:
    n = name.strip().lower().replace("-", "_")
    return _ALIASES.get(n, n)


def hasher_for(name: str) -> Hasher:
    n = normalise_hash_name(name)
    if n == "sha256":
        return Sha256Hasher()
    if n in SUPPORTED_HASHES:
        return HashlibHasher(n)
    raise ConfigError(f"Unsupported hash algorithm: {name}")


__all__ = ["Hasher", "HashlibHasher", "Sha256Hasher", "SUPPORTED_HASHES", "hasher_for", "normalise_hash_name"]
