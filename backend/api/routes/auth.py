"""
Registration and login endpoints.

Credentials are verified by the identity provider; this service only
issues its own session token after a successful sign-in.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from modules.auth.interfaces import IAuthService
from modules.auth.models import LoginRequest, LoginResponse, RegisterRequest
from ..dependencies import get_auth_service

router = APIRouter()


@router.post("/register", status_code=201, response_class=PlainTextResponse)
async def register(
    request: RegisterRequest,
    service: IAuthService = Depends(get_auth_service),
) -> PlainTextResponse:
    """
    Register a new account on the permitted e-mail domain.

    The provider sends a confirmation e-mail; the account cannot log in
    until it is confirmed.
    """
    await service.register(request.email, request.password, request.name)
    return PlainTextResponse(
        "User registered successfully! Please check your e-mail to confirm the account.",
        status_code=201,
    )


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    service: IAuthService = Depends(get_auth_service),
) -> LoginResponse:
    """
    Log in with e-mail and password.

    Returns a session token valid for 8 hours and the user it describes.
    """
    return await service.login(request.email, request.password)
