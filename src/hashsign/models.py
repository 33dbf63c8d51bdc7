"""Value types passed across the signing boundary."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional

from .core.exceptions import KeyMaterialError

PRIVATE_KEY_SIZE = 32
PUBLIC_KEY_SIZE = 32
DIGEST_SIZE = 32
SIGNATURE_SIZE = 64


def _require_size(label: str, data: bytes, size: int) -> bytes:
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise KeyMaterialError(f"{label} must be bytes, got {type(data).__name__}")
    data = bytes(data)
    if len(data) != size:
        raise KeyMaterialError(f"{label} must be exactly {size} bytes, got {len(data)}")
    return data


@dataclass(frozen=True, slots=True)
class KeyPair:
    """Raw Ed25519 seed and the public key derived from it.

    Build one with ``generate_key_pair`` or ``key_pair_from_private``; direct
    construction only checks sizes, it does not re-derive the public key.
    """

    private_key: bytes = field(repr=False)
    public_key: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "private_key", _require_size("private key", self.private_key, PRIVATE_KEY_SIZE))
        object.__setattr__(self, "public_key", _require_size("public key", self.public_key, PUBLIC_KEY_SIZE))


@dataclass(frozen=True, slots=True)
class Digest:
    value: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _require_size("digest", self.value, DIGEST_SIZE))

    @property
    def hex(self) -> str:
        return self.value.hex()

    def __bytes__(self) -> bytes:
        return self.value


@dataclass(frozen=True, slots=True)
class SignResult:
    """Text-encoded outcome of ``hash_and_sign``."""

    hash: str
    signature: str
    public_key: str

    def as_dict(self) -> Dict[str, str]:
        return {
            "hash": self.hash,
            "signature": self.signature,
            "publicKey": self.public_key,
        }


class VerificationFailure(str, Enum):
    SIGNATURE_ENCODING = "SIGNATURE_ENCODING"
    PUBLIC_KEY_ENCODING = "PUBLIC_KEY_ENCODING"
    SIGNATURE_LENGTH = "SIGNATURE_LENGTH"
    PUBLIC_KEY_LENGTH = "PUBLIC_KEY_LENGTH"
    INVALID_PUBLIC_KEY = "INVALID_PUBLIC_KEY"
    INVALID_MESSAGE = "INVALID_MESSAGE"
    SIGNATURE_MISMATCH = "SIGNATURE_MISMATCH"
    INTERNAL_ERROR = "INTERNAL_ERROR"


@dataclass(frozen=True, slots=True)
class VerificationOutcome:
    ok: bool
    reason: Optional[VerificationFailure] = None

    def __bool__(self) -> bool:
        return self.ok


__all__ = [
    "DIGEST_SIZE",
    "PRIVATE_KEY_SIZE",
    "PUBLIC_KEY_SIZE",
    "SIGNATURE_SIZE",
    "Digest",
    "KeyPair",
    "SignResult",
    "VerificationFailure",
    "VerificationOutcome",
]
