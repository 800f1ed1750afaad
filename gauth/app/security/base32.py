# gauth/app/security/base32.py
"""
Base32 codec for authenticator secrets.

Two deliberately different paths live here:

- ``encode`` maps each input byte to ONE alphabet character using its low
  5 bits (``byte & 0x1F``). The top 3 bits are discarded, so this is NOT
  RFC 4648 base32 and it is not reversible. Secrets created by this service
  have always been produced this way and existing stored secrets depend on it.
- ``decode`` is canonical RFC 4648 bit-packing, because secrets handed to
  authenticator apps (and secrets those apps hand back) are canonical base32.

Decoding a string produced by ``encode`` therefore does NOT give back the
original bytes. Both apps and this service decode the same string the same
way, which is all TOTP needs.
"""
import logging
from types import MappingProxyType
from typing import Mapping, Tuple

logger = logging.getLogger(__name__)

ALPHABET: Tuple[str, ...] = tuple("ABCDEFGHIJKLMNOPQRSTUVWXYZ234567")
PADDING = "="

# Padding lengths produced by RFC 4648 for the final 8-character group
ALLOWED_PADDING = frozenset({0, 1, 3, 4, 6})

_LOOKUP: Mapping[str, int] = MappingProxyType(
    {char: index for index, char in enumerate(ALPHABET)}
)


def encode(data: bytes) -> str:
    """
    Encode raw bytes using one alphabet character per byte.

    Args:
        data: Raw random bytes

    Returns:
        String of ``len(data)`` characters from ``ALPHABET``, no padding
    """
    return "".join(ALPHABET[byte & 0x1F] for byte in data)


def decode(secret: str) -> bytes:
    """
    Decode a canonical base32 string into raw bytes.

    Fails soft: malformed input yields ``b""`` instead of raising, so a
    caller can never crash on a user-supplied secret. Treat an empty result
    as "secret unusable".

    Args:
        secret: Upper-case base32 string, optionally padded with '='

    Returns:
        Decoded bytes, or b"" if the input is empty or malformed
    """
    if not secret:
        return b""

    padding_count = secret.count(PADDING)
    if padding_count not in ALLOWED_PADDING:
        logger.debug("base32 decode rejected: padding count %d", padding_count)
        return b""

    chars = secret.replace(PADDING, "")
    if any(char not in _LOOKUP for char in chars):
        logger.debug("base32 decode rejected: character outside alphabet")
        return b""

    decoded = bytearray()
    for start in range(0, len(chars), 8):
        bits = "".join(
            format(_LOOKUP[char], "05b") for char in chars[start:start + 8]
        )
        # Trailing bits that do not fill a byte are dropped
        for pos in range(0, len(bits) - 7, 8):
            decoded.append(int(bits[pos:pos + 8], 2))

    return bytes(decoded)
