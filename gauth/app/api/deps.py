# gauth/app/api/deps.py
from fastapi import Depends

from gauth.app.core.config import Settings, get_settings
from gauth.app.security.authenticator import GoogleAuthenticator
from gauth.app.security.totp import TOTPConfig


def get_authenticator(
        settings: Settings = Depends(get_settings),
) -> GoogleAuthenticator:
    """Authenticator configured from settings. Cheap to build, immutable."""
    return GoogleAuthenticator(
        TOTPConfig(code_length=settings.TOTP_CODE_LENGTH),
        qr_base_url=settings.QR_BASE_URL,
    )
