# gauth/app/security/authenticator.py
"""
Google Authenticator style facade over the TOTP core.

Instances are immutable: ``set_code_length`` returns a new authenticator,
so one instance can be shared between threads and requests freely.

    auth = GoogleAuthenticator().set_code_length(8)
    secret = auth.create_secret()
    auth.verify_code(secret, "12345678")
"""
import logging
from typing import Optional

from pydantic import ValidationError

from gauth.app.core.exceptions import InvalidCodeLengthError
from gauth.app.security import otpauth, totp
from gauth.app.security.secret import DEFAULT_SECRET_LENGTH, create_secret

logger = logging.getLogger(__name__)


class GoogleAuthenticator:
    def __init__(
        self,
        config: totp.TOTPConfig = totp.DEFAULT_CONFIG,
        qr_base_url: str = otpauth.DEFAULT_QR_BASE_URL,
    ):
        self._config = config
        self._qr_base_url = qr_base_url

    @property
    def config(self) -> totp.TOTPConfig:
        return self._config

    @property
    def code_length(self) -> int:
        return self._config.code_length

    def set_code_length(self, length: int) -> "GoogleAuthenticator":
        """
        Return an authenticator producing codes of ``length`` digits.

        Lengths of 6 or more are recommended.

        Raises:
            InvalidCodeLengthError: If length is outside 1..10
        """
        try:
            config = totp.TOTPConfig(code_length=length)
        except ValidationError as exc:
            raise InvalidCodeLengthError(
                f"Code length must be between {totp.MIN_CODE_LENGTH} and "
                f"{totp.MAX_CODE_LENGTH}, got {length!r}"
            ) from exc
        if config.code_length < 6:
            logger.warning(
                "Code length %d is below the recommended 6 digits", config.code_length
            )
        return GoogleAuthenticator(config, self._qr_base_url)

    def create_secret(self, length: int = DEFAULT_SECRET_LENGTH) -> str:
        return create_secret(length)

    def get_code(self, secret: str, time_slice: Optional[int] = None) -> str:
        return totp.get_code(secret, time_slice, self._config)

    def verify_code(
        self,
        secret: str,
        code: str,
        discrepancy: int = 1,
        time_slice: Optional[int] = None,
    ) -> bool:
        return totp.verify_code(secret, code, discrepancy, time_slice, self._config)

    def get_qr_code_google_url(
        self,
        name: str,
        secret: str,
        title: Optional[str] = None,
        width: Optional[int] = None,
        height: Optional[int] = None,
        level: Optional[str] = None,
    ) -> str:
        return otpauth.get_qr_code_url(
            name,
            secret,
            title,
            width=width,
            height=height,
            level=level,
            base_url=self._qr_base_url,
        )

    def __repr__(self) -> str:
        return f"GoogleAuthenticator(code_length={self.code_length})"
