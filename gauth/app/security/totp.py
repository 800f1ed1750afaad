# gauth/app/security/totp.py
"""
TOTP (Time-based One-Time Password) implementation
RFC 6238 compliant - Compatible with Google Authenticator, Authy, Aegis

Key points:
- 30-second time step (fixed)
- HMAC-SHA1 (fixed)
- Code length configurable through TOTPConfig (default 6 digits)
- Base32 secrets decoded with the canonical codec in security.base32
"""
import hashlib
import hmac
import logging
import struct
import time
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from gauth.app.security import base32

logger = logging.getLogger(__name__)

TIME_STEP = 30
COUNTER_MASK = 0xFFFFFFFFFFFFFFFF

MIN_CODE_LENGTH = 1
# Truncated values are 31-bit, so more than 10 digits adds nothing
MAX_CODE_LENGTH = 10


class TOTPConfig(BaseModel):
    """Immutable generator/verifier settings."""
    model_config = ConfigDict(frozen=True)

    code_length: int = Field(default=6, ge=MIN_CODE_LENGTH, le=MAX_CODE_LENGTH)


DEFAULT_CONFIG = TOTPConfig()


def current_time_slice(now: Optional[float] = None) -> int:
    """
    Number of 30-second steps since the Unix epoch.

    Args:
        now: Unix timestamp, defaults to the wall clock
    """
    if now is None:
        now = time.time()
    return int(now // TIME_STEP)


def get_code(
    secret: str,
    time_slice: Optional[int] = None,
    config: TOTPConfig = DEFAULT_CONFIG,
) -> str:
    """
    Generate the code for a secret at a time slice.

    An undecodable secret is not an error: it decodes to an empty key and
    HMAC runs against that. Validate secrets before storing them.

    Args:
        secret: Base32 secret string
        time_slice: Counter override, defaults to the current time slice
        config: Code length settings

    Returns:
        Zero-padded decimal code of ``config.code_length`` digits
    """
    if time_slice is None:
        time_slice = current_time_slice()

    key = base32.decode(secret)

    # 8-byte big-endian counter (RFC 4226 §5.2), wrapped to 64 bits
    message = struct.pack(">Q", time_slice & COUNTER_MASK)
    digest = hmac.new(key, message, hashlib.sha1).digest()

    # Dynamic truncation (RFC 4226 §5.3)
    offset = digest[-1] & 0x0F
    value = struct.unpack(">I", digest[offset:offset + 4])[0] & 0x7FFFFFFF

    return str(value % 10 ** config.code_length).zfill(config.code_length)


def verify_code(
    secret: str,
    code: str,
    discrepancy: int = 1,
    time_slice: Optional[int] = None,
    config: TOTPConfig = DEFAULT_CONFIG,
) -> bool:
    """
    Verify a code against the secret with allowed clock drift.

    Every candidate is compared in constant time. Slices before the epoch
    are skipped.

    Args:
        secret: Base32 secret string
        code: Code submitted by the user
        discrepancy: Number of 30s steps tolerated on each side
        time_slice: Counter override, defaults to the current time slice
        config: Code length settings

    Returns:
        True if the code matches any slice in the window, False otherwise
    """
    if len(code) != config.code_length:
        logger.debug(
            "Code rejected: length %d, expected %d", len(code), config.code_length
        )
        return False

    if time_slice is None:
        time_slice = current_time_slice()

    submitted = code.encode("utf-8")
    candidates = (
        get_code(secret, time_slice + offset, config)
        for offset in range(-discrepancy, discrepancy + 1)
        if time_slice + offset >= 0
    )
    return any(
        hmac.compare_digest(candidate.encode("utf-8"), submitted)
        for candidate in candidates
    )
