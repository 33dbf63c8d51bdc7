from hypothesis import given, settings, strategies as st

from hashsign import SignEngine
from hashsign.crypto import key_pair_from_private
from hashsign.utils import b64d, b64e

_engine = SignEngine()
_seeds = st.binary(min_size=32, max_size=32)


@given(st.binary(max_size=256))
def test_codec_round_trip(data: bytes) -> None:
    assert b64d(b64e(data)) == data


@given(st.text())
def test_hash_is_deterministic(message: str) -> None:
    assert _engine.hash(message) == _engine.hash(message)


@settings(max_examples=50)
@given(st.text(), _seeds)
def test_signature_verifies(message: str, seed: bytes) -> None:
    key_pair = key_pair_from_private(seed)
    result = _engine.hash_and_sign(message, key_pair.private_key)
    assert _engine.verify(message, result.signature, b64e(key_pair.public_key))


@settings(max_examples=50)
@given(st.text(), _seeds, st.integers(min_value=0, max_value=511))
def test_any_bit_flip_is_rejected(message: str, seed: bytes, bit: int) -> None:
    result = _engine.hash_and_sign(message, seed)
    raw = bytearray(b64d(result.signature))
    raw[bit // 8] ^= 1 << (bit % 8)
    assert not _engine.verify(message, b64e(bytes(raw)), result.public_key)


@settings(max_examples=50)
@given(st.text(), st.text(), _seeds)
def test_other_message_is_rejected(message: str, other: str, seed: bytes) -> None:
    if message == other:
        return
    result = _engine.hash_and_sign(message, seed)
    assert not _engine.verify(other, result.signature, result.public_key)


@given(st.text(max_size=64), st.text(max_size=64), st.text(max_size=64))
def test_verify_is_total(message: str, signature: str, public_key: str) -> None:
    assert _engine.verify(message, signature, public_key) in (True, False)
