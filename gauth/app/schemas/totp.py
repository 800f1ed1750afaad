# gauth/app/schemas/totp.py
"""
Pydantic schemas for the TOTP endpoints.

Secrets travel in request bodies only, never in paths or query strings,
so they do not end up in access logs.
"""
from pydantic import BaseModel, Field
from typing import Optional

# Counters are packed as unsigned 64-bit values
MAX_TIME_SLICE = 2 ** 64 - 1


class SecretCreateRequest(BaseModel):
    """Request a new random secret. Length defaults to the configured value."""
    length: Optional[int] = Field(
        default=None,
        description="Secret length in characters (16-128)"
    )


class SecretCreateResponse(BaseModel):
    secret: str
    length: int


class CodeRequest(BaseModel):
    """
    Request the current code for a secret.

    time_slice overrides the 30-second counter (testing, drift checks).
    """
    secret: str = Field(..., max_length=1024)
    time_slice: Optional[int] = Field(default=None, ge=0, le=MAX_TIME_SLICE)
    code_length: Optional[int] = Field(default=None, ge=1, le=10)


class CodeResponse(BaseModel):
    code: str
    time_slice: int


class VerifyRequest(BaseModel):
    secret: str = Field(..., max_length=1024)
    code: str = Field(..., max_length=32)
    discrepancy: Optional[int] = Field(
        default=None,
        ge=0,
        le=10,
        description="Accepted 30s steps on each side of the current one"
    )
    time_slice: Optional[int] = Field(default=None, ge=0, le=MAX_TIME_SLICE)
    code_length: Optional[int] = Field(default=None, ge=1, le=10)


class VerifyResponse(BaseModel):
    valid: bool


class QRCodeUrlRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=256)
    secret: str = Field(..., max_length=1024)
    title: Optional[str] = Field(default=None, max_length=256)
    width: Optional[int] = None
    height: Optional[int] = None
    level: Optional[str] = None


class QRCodeUrlResponse(BaseModel):
    otpauth_url: str
    qr_url: str
