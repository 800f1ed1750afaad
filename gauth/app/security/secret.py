# gauth/app/security/secret.py
"""
Random secret generation for new authenticator enrollments.

Secrets come from the OS CSPRNG (``secrets``) and are encoded with the
one-character-per-byte scheme of ``security.base32.encode``.
"""
import logging
import secrets

from gauth.app.core.exceptions import InvalidSecretLengthError
from gauth.app.security import base32

logger = logging.getLogger(__name__)

MIN_SECRET_LENGTH = 16
MAX_SECRET_LENGTH = 128
DEFAULT_SECRET_LENGTH = 16


def create_secret(length: int = DEFAULT_SECRET_LENGTH) -> str:
    """
    Create a new random secret.

    Args:
        length: Number of characters, between 16 and 128

    Returns:
        Base32 alphabet string of exactly ``length`` characters

    Raises:
        InvalidSecretLengthError: If length is outside [16, 128]
    """
    if length < MIN_SECRET_LENGTH or length > MAX_SECRET_LENGTH:
        raise InvalidSecretLengthError(
            f"Secret length must be between {MIN_SECRET_LENGTH} and "
            f"{MAX_SECRET_LENGTH} characters, got {length}"
        )

    secret = base32.encode(secrets.token_bytes(length))
    logger.debug("Created secret of length %d", length)
    return secret
