"""Hash-then-sign engine.

The engine signs a fixed-size digest of the message rather than the message
itself, so signing and verification cost do not depend on message length and
the hex digest can be shown to callers as a separate integrity value.

Verification is total: ``verify`` returns ``False`` for every kind of failure
and never raises. ``verify_detailed`` reports which check failed for callers
that want diagnostics, without changing what ``verify`` returns.
"""
from __future__ import annotations

import os
from typing import Optional, Union

from ..core.exceptions import DecodeError, KeyMaterialError
from ..crypto.hasher import Hasher, Sha256Hasher
from ..crypto.keygen import RandomSource, generate_key_pair, key_pair_from_private
from ..crypto.signing import Ed25519Signer
from ..logging import get_logger
from ..models import (
    DIGEST_SIZE,
    PUBLIC_KEY_SIZE,
    SIGNATURE_SIZE,
    Digest,
    KeyPair,
    SignResult,
    VerificationFailure,
    VerificationOutcome,
)
from ..utils import b64d, b64e

logger = get_logger(__name__)

_OK = VerificationOutcome(ok=True)


def _failed(reason: VerificationFailure) -> VerificationOutcome:
    logger.debug("verification_failed", reason=reason.value)
    return VerificationOutcome(ok=False, reason=reason)


class SignEngine:
    """Stateless sign/verify operations over injected hash and random source."""

    def __init__(self, hasher: Optional[Hasher] = None, *, random_source: RandomSource = os.urandom) -> None:
        self._hasher = hasher or Sha256Hasher()
        if self._hasher.digest_size != DIGEST_SIZE:
            raise KeyMaterialError(
                f"Hasher {self._hasher.name!r} yields {self._hasher.digest_size} bytes, expected {DIGEST_SIZE}"
            )
        self._random_source = random_source

    @property
    def hash_algorithm(self) -> str:
        return self._hasher.name

    def hash(self, message: str) -> Digest:
        return Digest(self._hasher(message.encode("utf-8")))

    def generate_key_pair(self) -> KeyPair:
        return generate_key_pair(self._random_source)

    def sign_with_digest(self, digest: Union[Digest, bytes], private_key: bytes) -> bytes:
        value = digest.value if isinstance(digest, Digest) else Digest(digest).value
        signer = Ed25519Signer.from_private_bytes(_key_bytes(private_key))
        return signer.sign(message=value)

    def hash_and_sign(self, message: str, private_key: Optional[bytes] = None) -> SignResult:
        if private_key is None:
            key_pair = self.generate_key_pair()
        else:
            key_pair = key_pair_from_private(_key_bytes(private_key))

        digest = self.hash(message)
        signature = self.sign_with_digest(digest, key_pair.private_key)
        logger.debug(
            "message_signed",
            hash_alg=self.hash_algorithm,
            message_bytes=len(message.encode("utf-8")),
            generated_key=private_key is None,
        )
        return SignResult(
            hash=digest.hex,
            signature=b64e(signature),
            public_key=b64e(key_pair.public_key),
        )

    def verify(self, message: str, signature: str, public_key: str) -> bool:
        return self.verify_detailed(message, signature, public_key).ok

    def verify_detailed(self, message: str, signature: str, public_key: str) -> VerificationOutcome:
        try:
            return self._verify(message, signature, public_key)
        except Exception as exc:
            logger.debug("verification_error", error=type(exc).__name__)
            return VerificationOutcome(ok=False, reason=VerificationFailure.INTERNAL_ERROR)

    def _verify(self, message: str, signature: str, public_key: str) -> VerificationOutcome:
        try:
            signature_bytes = b64d(signature)
        except DecodeError:
            return _failed(VerificationFailure.SIGNATURE_ENCODING)
        try:
            public_key_bytes = b64d(public_key)
        except DecodeError:
            return _failed(VerificationFailure.PUBLIC_KEY_ENCODING)

        if len(signature_bytes) != SIGNATURE_SIZE:
            return _failed(VerificationFailure.SIGNATURE_LENGTH)
        if len(public_key_bytes) != PUBLIC_KEY_SIZE:
            return _failed(VerificationFailure.PUBLIC_KEY_LENGTH)

        if not isinstance(message, str):
            return _failed(VerificationFailure.INVALID_MESSAGE)
        try:
            digest = self.hash(message)
        except UnicodeEncodeError:
            return _failed(VerificationFailure.INVALID_MESSAGE)

        try:
            verifier = Ed25519Signer.from_public_bytes(public_key_bytes)
        except KeyMaterialError:
            return _failed(VerificationFailure.INVALID_PUBLIC_KEY)

        try:
            verifier.verify(message=digest.value, signature=signature_bytes)
        except Exception:
            return _failed(VerificationFailure.SIGNATURE_MISMATCH)
        return _OK


def _key_bytes(private_key: bytes) -> bytes:
    if not isinstance(private_key, (bytes, bytearray, memoryview)):
        raise KeyMaterialError(f"Private key must be bytes, got {type(private_key).__name__}")
    return bytes(private_key)


__all__ = ["SignEngine"]
