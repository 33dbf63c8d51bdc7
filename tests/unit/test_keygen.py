import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from hashsign import EntropyError, KeyMaterialError, KeyPair
from hashsign.crypto import derive_public_key, generate_key_pair, key_pair_from_private, serialized

RFC8032_SECRET = bytes.fromhex("9d61b19deffd5a60ba844af492ec2cc44449c5697b326919703bac031cae7f60")
RFC8032_PUBLIC = bytes.fromhex("d75a980182b10ab7d54bfed3c964073a0ee172f3daa62325af021a68f707511a")


def test_generate_key_pair_sizes():
    kp = generate_key_pair()
    assert isinstance(kp.private_key, bytes)
    assert isinstance(kp.public_key, bytes)
    assert len(kp.private_key) == 32
    assert len(kp.public_key) == 32
    assert kp.public_key == derive_public_key(kp.private_key)


def test_generate_key_pair_unique():
    first = generate_key_pair()
    second = generate_key_pair()
    assert first.private_key != second.private_key
    assert first.public_key != second.public_key


def test_derive_public_key_matches_rfc8032_vector():
    assert derive_public_key(RFC8032_SECRET) == RFC8032_PUBLIC


def test_generate_uses_injected_source():
    kp = generate_key_pair(lambda n: RFC8032_SECRET[:n])
    assert kp.private_key == RFC8032_SECRET
    assert kp.public_key == RFC8032_PUBLIC


@pytest.mark.parametrize("exc", [OSError("no entropy"), NotImplementedError()])
def test_unavailable_source_is_fatal(exc: Exception) -> None:
    def broken(_n: int) -> bytes:
        raise exc

    with pytest.raises(EntropyError):
        generate_key_pair(broken)


def test_short_source_is_rejected():
    with pytest.raises(EntropyError):
        generate_key_pair(lambda n: b"\x00" * (n - 1))


@pytest.mark.parametrize("size", [0, 16, 31, 33, 64])
def test_derive_rejects_wrong_length(size: int) -> None:
    with pytest.raises(KeyMaterialError):
        derive_public_key(b"\x01" * size)


def test_key_pair_repr_hides_private_key():
    kp = key_pair_from_private(RFC8032_SECRET)
    assert RFC8032_SECRET.hex() not in repr(kp)
    assert "private_key" not in repr(kp)


def test_key_pair_rejects_bad_sizes():
    with pytest.raises(KeyMaterialError):
        KeyPair(private_key=b"\x00" * 31, public_key=b"\x00" * 32)
    with pytest.raises(KeyMaterialError):
        KeyPair(private_key=b"\x00" * 32, public_key=b"\x00" * 33)


def test_serialized_source_is_called_one_at_a_time():
    active = 0
    peak = 0
    guard = threading.Lock()

    def source(n: int) -> bytes:
        nonlocal active, peak
        with guard:
            active += 1
            peak = max(peak, active)
        seed = bytes(range(n))
        with guard:
            active -= 1
        return seed

    draw = serialized(source)
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda _: draw(32), range(64)))
    assert peak == 1
    assert all(r == bytes(range(32)) for r in results)
