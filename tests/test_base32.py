import base64

import pytest

from gauth.app.security import base32


@pytest.mark.parametrize(
    "encoded, expected",
    [
        ("MY======", b"f"),
        ("MZXQ====", b"fo"),
        ("MZXW6===", b"foo"),
        ("MZXW6YQ=", b"foob"),
        ("MZXW6YTB", b"fooba"),
        ("MZXW6YTBOI======", b"foobar"),
    ],
)
def test_decode_rfc4648_vectors(encoded: str, expected: bytes) -> None:
    assert base32.decode(encoded) == expected


def test_decode_hello_vector() -> None:
    assert base32.decode("JBSWY3DPEHPK3PXP") == b"Hello!\xde\xad\xbe\xef"


def test_decode_matches_stdlib_for_long_secret(rfc_secret: str) -> None:
    assert base32.decode(rfc_secret) == base64.b32decode(rfc_secret)
    assert base32.decode(rfc_secret) == b"12345678901234567890"


def test_decode_unpadded_partial_group_drops_trailing_bits() -> None:
    # "MZXW6YTBOI" is "foobar" without padding
    assert base32.decode("MZXW6YTBOI") == b"foobar"
    # a single character carries only 5 bits, not a full byte
    assert base32.decode("M") == b""


@pytest.mark.parametrize("secret", ["", "MZXW6Y==", "MZXW6=====", "A=======" + "="])
def test_decode_rejects_empty_and_bad_padding(secret: str) -> None:
    assert base32.decode(secret) == b""


@pytest.mark.parametrize("secret", ["mzxw6ytb", "MZXW6YT1", "MZXW 6YTB", "MZXW6YT8", "ÄBCDEFGH"])
def test_decode_rejects_characters_outside_alphabet(secret: str) -> None:
    assert base32.decode(secret) == b""


def test_encode_uses_low_five_bits_one_char_per_byte() -> None:
    assert base32.encode(bytes([0, 1, 31, 32, 255])) == "AB7A7"
    assert base32.encode(b"") == ""


def test_encode_output_stays_in_alphabet() -> None:
    encoded = base32.encode(bytes(range(256)))
    assert len(encoded) == 256
    assert set(encoded) <= set(base32.ALPHABET)
    assert base32.PADDING not in encoded


def test_encode_is_not_inverse_of_decode() -> None:
    raw = bytes(range(16))
    encoded = base32.encode(raw)

    decoded = base32.decode(encoded)

    # 16 characters decode to 10 bytes under canonical packing
    assert len(decoded) == 10
    assert decoded != raw


def test_alphabet_tables_are_read_only() -> None:
    with pytest.raises(TypeError):
        base32._LOOKUP["A"] = 1  # type: ignore[index]
    assert len(base32.ALPHABET) == 32
