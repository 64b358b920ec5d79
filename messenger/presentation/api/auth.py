"""
Auth API Router.

Thin layer: only handles HTTP concerns (request/response) and maps domain
exceptions to status codes; the handlers do the work.

Routes:
  POST /api/auth/login     {username, password}         → token
  POST /api/auth/register  {username, password, email}  → token (201)
  POST /api/auth/verify    Authorization: Bearer <token> → {valid, username}
  POST /api/auth/refresh   {refresh_token}               → new token
  POST /api/auth/logout                                  → {message}
"""

from logging import getLogger
from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from messenger.application.commands.auth import (
    LoginCommand,
    LoginHandler,
    RegisterCommand,
    RegisterHandler,
    RefreshTokenCommand,
    RefreshTokenHandler,
)
from messenger.application.dto.auth import TokenDTO
from messenger.domain.exceptions import (
    AuthenticationError,
    DomainValidationError,
    EntityAlreadyExistsError,
)
from messenger.presentation.dependencies.auth import AuthUser, get_current_user
from messenger.presentation.dependencies.providers import (
    get_login_handler,
    get_register_handler,
    get_refresh_token_handler,
)

logger = getLogger(__name__)


# ==================== REQUEST/RESPONSE MODELS ====================


class LoginRequest(BaseModel):
    username: str
    password: str


class RegisterRequest(BaseModel):
    username: str
    password: str
    email: str
    full_name: str = ""


class RefreshTokenRequest(BaseModel):
    refresh_token: str


class RegisterResponse(TokenDTO):
    email: str
    created: bool = True


class VerifyTokenResponse(BaseModel):
    valid: bool
    username: str
    message: str


class LogoutResponse(BaseModel):
    message: str


# ==================== ROUTER ====================

router = APIRouter(prefix="/api/auth", tags=["auth"])


# ==================== ENDPOINTS ====================


@router.post("/login", response_model=TokenDTO)
def login(
    request: LoginRequest,
    handler: LoginHandler = Depends(get_login_handler),
):
    logger.info("Login attempt for user: %s", request.username)
    try:
        result = handler.execute(
            LoginCommand(username=request.username, password=request.password)
        )
    except AuthenticationError as e:
        logger.warning("Login failed for user: %s", request.username)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e)) from e

    logger.info("Login successful for user: %s", request.username)
    return result


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
)
def register(
    request: RegisterRequest,
    handler: RegisterHandler = Depends(get_register_handler),
):
    logger.info("Registration attempt for user: %s", request.username)
    try:
        result = handler.execute(
            RegisterCommand(
                username=request.username,
                password=request.password,
                email=request.email,
                full_name=request.full_name,
            )
        )
    except DomainValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except EntityAlreadyExistsError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e

    logger.info("Registration successful for user: %s", request.username)
    return RegisterResponse(**result.model_dump(), email=request.email)


@router.post("/verify", response_model=VerifyTokenResponse)
def verify_token(current_user: AuthUser = Depends(get_current_user)):
    logger.info("Token verification successful for user: %s", current_user.username)
    return VerifyTokenResponse(
        valid=True, username=current_user.username, message="Token is valid"
    )


@router.post(
    "/refresh",
    response_model=TokenDTO,
    response_model_exclude_none=True,
)
def refresh_token(
    request: RefreshTokenRequest,
    handler: RefreshTokenHandler = Depends(get_refresh_token_handler),
):
    try:
        result = handler.execute(
            RefreshTokenCommand(refresh_token=request.refresh_token)
        )
    except AuthenticationError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e)) from e

    logger.info("Token refresh successful")
    return result


@router.post("/logout", response_model=LogoutResponse)
def logout():
    logger.info("User logout")
    return LogoutResponse(message="Logout successful")
