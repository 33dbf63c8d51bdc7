import pytest

from hashsign import DecodeError, base64_to_bytes, bytes_to_base64
from hashsign.utils import b64d, b64e


def test_bytes_round_trip():
    original = bytes([1, 2, 3, 4, 5, 255, 128, 0])
    encoded = bytes_to_base64(original)
    assert encoded == "AQIDBAX/gAA="
    assert base64_to_bytes(encoded) == original


def test_empty_bytes_encode_to_empty_text():
    assert b64e(b"") == ""
    assert b64d("") == b""


@pytest.mark.parametrize(
    "data, text",
    [
        (b"f", "Zg=="),
        (b"fo", "Zm8="),
        (b"foo", "Zm9v"),
        (b"\xfb\xff", "+/8="),
    ],
)
def test_standard_alphabet_with_padding(data: bytes, text: str) -> None:
    assert b64e(data) == text
    assert b64d(text) == data


def test_accepts_bytearray():
    assert b64e(bytearray(b"foo")) == "Zm9v"


@pytest.mark.parametrize(
    "text",
    [
        "invalid-base64!",
        "Zg=",
        "Zg",
        "Zm9v=",
        "-_8=",
        "Zm9v====",
        "Zg=a",
        "=Zm9",
        "Zm 9",
        "Zm9v\n",
        "Zm9é",
        "QR==",
    ],
)
def test_rejects_malformed_text(text: str) -> None:
    with pytest.raises(DecodeError):
        b64d(text)


def test_rejects_non_text():
    with pytest.raises(DecodeError):
        b64d(b"Zm9v")  # type: ignore[arg-type]


def test_decode_error_is_value_error():
    with pytest.raises(ValueError):
        base64_to_bytes("not base64")


def test_oversized_garbage_is_rejected_not_crashing():
    with pytest.raises(DecodeError):
        b64d("!" * 400_000)
