"""Service layer exports."""
from __future__ import annotations

from ..config import AppConfig
from ..crypto.hasher import hasher_for
from .engine import SignEngine

# The module-level API always hashes with SHA-256 so digests and signatures
# do not depend on the working directory or environment.
_DEFAULT = SignEngine()


def engine_from_config(config: AppConfig) -> SignEngine:
    """Build an engine with the configured digest, for callers that opt in."""
    return SignEngine(hasher_for(config.crypto.hash_algorithm))


def default_engine() -> SignEngine:
    return _DEFAULT


__all__ = ["SignEngine", "default_engine", "engine_from_config"]
