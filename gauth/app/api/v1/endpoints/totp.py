# gauth/app/api/v1/endpoints/totp.py
"""
API endpoints for TOTP enrollment and verification.

Endpoints:
- POST /totp/secret - Create a new random secret
- POST /totp/code - Current (or given time slice) code for a secret
- POST /totp/verify - Verify a submitted code with drift tolerance
- POST /totp/qr-url - otpauth URI and QR service link for enrollment

Security:
- Nothing is persisted, the caller owns secret storage
- Verification uses constant-time comparison
- Secrets and codes are never logged
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status

from gauth.app.api import deps
from gauth.app.core.config import Settings, get_settings
from gauth.app.core.exceptions import InvalidArgumentError
from gauth.app.schemas.totp import (
    CodeRequest,
    CodeResponse,
    QRCodeUrlRequest,
    QRCodeUrlResponse,
    SecretCreateRequest,
    SecretCreateResponse,
    VerifyRequest,
    VerifyResponse,
)
from gauth.app.security import base32, otpauth, totp
from gauth.app.security.authenticator import GoogleAuthenticator

logger = logging.getLogger(__name__)

router = APIRouter()


def _with_code_length(
    authenticator: GoogleAuthenticator, code_length: Optional[int]
) -> GoogleAuthenticator:
    if code_length is None:
        return authenticator
    try:
        return authenticator.set_code_length(code_length)
    except InvalidArgumentError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc)
        )


@router.post("/secret", response_model=SecretCreateResponse)
def create_secret(
    request: SecretCreateRequest,
    authenticator: GoogleAuthenticator = Depends(deps.get_authenticator),
    settings: Settings = Depends(get_settings),
):
    """
    Create a new random secret for enrollment.

    The secret is returned once and not stored anywhere.
    """
    length = request.length if request.length is not None else settings.TOTP_SECRET_LENGTH
    try:
        secret = authenticator.create_secret(length)
    except InvalidArgumentError as exc:
        logger.info("Secret creation rejected: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc)
        )

    return SecretCreateResponse(secret=secret, length=len(secret))


@router.post("/code", response_model=CodeResponse)
def get_code(
    request: CodeRequest,
    authenticator: GoogleAuthenticator = Depends(deps.get_authenticator),
):
    """
    Get the code for a secret.

    Useful for testing and provisioning checks; an unusable secret still
    yields a code (computed with an empty key), so it is rejected here.
    """
    if not base32.decode(request.secret):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Secret is not valid base32"
        )

    authenticator = _with_code_length(authenticator, request.code_length)
    time_slice = (
        request.time_slice
        if request.time_slice is not None
        else totp.current_time_slice()
    )

    return CodeResponse(
        code=authenticator.get_code(request.secret, time_slice),
        time_slice=time_slice
    )


@router.post("/verify", response_model=VerifyResponse)
def verify_code(
    request: VerifyRequest,
    authenticator: GoogleAuthenticator = Depends(deps.get_authenticator),
    settings: Settings = Depends(get_settings),
):
    """
    Verify a submitted code.

    Always answers 200 with valid=true/false; a wrong code is not an
    HTTP error.
    """
    authenticator = _with_code_length(authenticator, request.code_length)
    discrepancy = (
        request.discrepancy
        if request.discrepancy is not None
        else settings.TOTP_DISCREPANCY
    )

    valid = authenticator.verify_code(
        request.secret,
        request.code,
        discrepancy=discrepancy,
        time_slice=request.time_slice
    )
    if not valid:
        logger.info("TOTP verification failed")

    return VerifyResponse(valid=valid)


@router.post("/qr-url", response_model=QRCodeUrlResponse)
def get_qr_code_url(
    request: QRCodeUrlRequest,
    authenticator: GoogleAuthenticator = Depends(deps.get_authenticator),
    settings: Settings = Depends(get_settings),
):
    """
    Build the enrollment links for an account.

    Frontend renders qr_url directly: <img src="{qr_url}">
    """
    width = request.width if request.width is not None else settings.QR_DEFAULT_SIZE
    height = request.height if request.height is not None else settings.QR_DEFAULT_SIZE

    return QRCodeUrlResponse(
        otpauth_url=otpauth.get_totp_uri(request.name, request.secret, request.title),
        qr_url=authenticator.get_qr_code_google_url(
            request.name,
            request.secret,
            request.title,
            width=width,
            height=height,
            level=request.level
        )
    )
