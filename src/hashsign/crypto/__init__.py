"""Cryptographic building blocks: digests, key generation and Ed25519."""
from .hasher import Hasher, HashlibHasher, Sha256Hasher, SUPPORTED_HASHES, hasher_for
from .keygen import derive_public_key, generate_key_pair, key_pair_from_private, serialized
from .signing import Ed25519Signer

__all__ = [
    "Ed25519Signer",
    "Hasher",
    "HashlibHasher",
    "Sha256Hasher",
    "SUPPORTED_HASHES",
    "derive_public_key",
    "generate_key_pair",
    "hasher_for",
    "key_pair_from_private",
    "serialized",
]
