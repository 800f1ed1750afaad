# gauth/app/security/otpauth.py
"""
otpauth:// URI and QR service URL building.

Format: otpauth://totp/{name}?secret={secret}[&issuer={title}]

This is what gets encoded in the QR code. The QR image itself is rendered
by an external service; this module only builds the link to it.
"""
from typing import Optional
from urllib.parse import quote, quote_plus

DEFAULT_QR_BASE_URL = "https://api.qrserver.com/v1/create-qr-code/"
DEFAULT_QR_SIZE = 200
ERROR_CORRECTION_LEVELS = ("L", "M", "Q", "H")
DEFAULT_ERROR_CORRECTION = "M"


def get_totp_uri(name: str, secret: str, title: Optional[str] = None) -> str:
    """
    Build the otpauth:// URI that authenticator apps scan.

    Args:
        name: Account label shown in the app
        secret: Base32 secret
        title: Optional issuer name
    """
    uri = f"otpauth://totp/{quote_plus(name)}?secret={quote_plus(secret)}"
    if title is not None:
        uri += f"&issuer={quote_plus(title)}"
    return uri


def get_qr_code_url(
    name: str,
    secret: str,
    title: Optional[str] = None,
    width: Optional[int] = None,
    height: Optional[int] = None,
    level: Optional[str] = None,
    base_url: str = DEFAULT_QR_BASE_URL,
) -> str:
    """
    Build the QR rendering service URL for an account.

    Width and height default to 200 and are clamped to at least 1.
    Unknown error correction levels fall back to "M".

    The otpauth URI is percent-encoded as the ``data`` value, otherwise its
    ``&issuer=`` part would be read as a parameter of the outer URL.
    """
    width = max(DEFAULT_QR_SIZE if width is None else int(width), 1)
    height = max(DEFAULT_QR_SIZE if height is None else int(height), 1)
    if level not in ERROR_CORRECTION_LEVELS:
        level = DEFAULT_ERROR_CORRECTION

    data = quote(get_totp_uri(name, secret, title), safe="")
    return f"{base_url}?data={data}&size={width}x{height}&ecc={level}"
