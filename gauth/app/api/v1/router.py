# gauth/app/api/v1/router.py
from fastapi import APIRouter
from gauth.app.api.v1.endpoints import totp

api_router = APIRouter()
api_router.include_router(totp.router, prefix="/totp", tags=["totp"])
