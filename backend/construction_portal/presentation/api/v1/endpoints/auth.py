"""Login, registration and account endpoints."""

from fastapi import APIRouter, Depends, status

from construction_portal.application.schemas import (
    LoginRequest,
    LoginResponse,
    MessageResponse,
    PasswordUpdateRequest,
    RegisterRequest,
    UserResponse,
)
from construction_portal.application.services import AuthService
from construction_portal.domain.entities import LoginSession
from construction_portal.infrastructure.dependencies import (
    get_account_service,
    get_auth_service,
    get_current_session,
)

router = APIRouter(prefix="/auth", tags=["Auth"])


def _login_response(login: LoginSession) -> LoginResponse:
    return LoginResponse(
        session_token=login.id,
        user=UserResponse.model_validate(login.user, from_attributes=True),
        redirect_path=AuthService.redirect_path(login.user),
    )


@router.post("/login", response_model=LoginResponse)
async def login(
    data: LoginRequest,
    service: AuthService = Depends(get_auth_service),
) -> LoginResponse:
    """Log in against the upstream API and open a portal session."""
    login = await service.login(data.email, data.password)
    return _login_response(login)


@router.post("/register", response_model=LoginResponse, status_code=status.HTTP_201_CREATED)
async def register(
    data: RegisterRequest,
    service: AuthService = Depends(get_auth_service),
) -> LoginResponse:
    login = await service.register(data)
    return _login_response(login)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    login: LoginSession = Depends(get_current_session),
    service: AuthService = Depends(get_auth_service),
) -> None:
    """Drop the caller's portal session. The upstream token is forgotten with it."""
    await service.logout(login.id)


@router.get("/me", response_model=UserResponse)
async def me(service: AuthService = Depends(get_account_service)) -> UserResponse:
    """The logged-in user as the upstream API currently reports it."""
    user = await service.me()
    return UserResponse.model_validate(user, from_attributes=True)


@router.put("/password", response_model=MessageResponse)
async def update_password(
    data: PasswordUpdateRequest,
    service: AuthService = Depends(get_account_service),
) -> MessageResponse:
    await service.update_password(data.current_password, data.new_password)
    return MessageResponse(message="Password updated successfully")
