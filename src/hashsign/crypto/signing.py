
from __future__ import annotations

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey
)

from ..core.exceptions import CryptoError, KeyMaterialError
from ..models import PRIVATE_KEY_SIZE, PUBLIC_KEY_SIZE, SIGNATURE_SIZE


class Ed25519Signer:
    """Thin wrapper around Ed25519 that normalizes error handling"""

    def __init__(self, *, private_key: Ed25519PrivateKey | None = None, public_key: Ed25519PublicKey | None = None) -> None:
        if not private_key and not public_key:
            raise CryptoError("At least one of private_key or public_key is required")
        self._private_key = private_key
        self._public_key = public_key or private_key.public_key()  # type: ignore[union-attr]

    @classmethod
    def from_private_bytes(cls, data: bytes) -> Ed25519Signer:
        if len(data) != PRIVATE_KEY_SIZE:
            raise KeyMaterialError(f"Private key must be exactly {PRIVATE_KEY_SIZE} bytes, got {len(data)}")
        return cls(private_key=Ed25519PrivateKey.from_private_bytes(bytes(data)))

    @classmethod
    def from_public_bytes(cls, data: bytes) -> Ed25519Signer:
        if len(data) != PUBLIC_KEY_SIZE:
            raise KeyMaterialError(f"Public key must be exactly {PUBLIC_KEY_SIZE} bytes, got {len(data)}")
        try:
            return cls(public_key=Ed25519PublicKey.from_public_bytes(bytes(data)))
        except ValueError as exc:
            raise KeyMaterialError("Public key is not a valid Ed25519 point") from exc

    def sign(self, *, message: bytes) -> bytes:
        if not self._private_key:
            raise CryptoError("Signing requested without private key material")
        return self._private_key.sign(message)

    def verify(self, *, message: bytes, signature: bytes) -> None:
        if len(signature) != SIGNATURE_SIZE:
            raise KeyMaterialError(f"Signature must be exactly {SIGNATURE_SIZE} bytes, got {len(signature)}")
        try:
            self._public_key.verify(signature, message)
        except InvalidSignature as exc:
            raise CryptoError("Signature verification failed") from exc
