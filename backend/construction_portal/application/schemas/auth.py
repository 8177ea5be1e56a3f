"""Pydantic DTOs for login, registration and password changes."""

from typing import Literal

from pydantic import BaseModel, Field

from construction_portal.application.schemas.common import ApiPayload

Role = Literal["employee", "supervisor", "manager"]


class LoginRequest(BaseModel):
    email: str = Field(..., min_length=3, max_length=254)
    password: str = Field(..., min_length=1)


class RegisterRequest(ApiPayload):
    first_name: str = Field(..., min_length=2, max_length=50)
    last_name: str = Field(..., min_length=2, max_length=50)
    email: str = Field(..., min_length=3, max_length=254)
    password: str = Field(..., min_length=6)
    role: Role = "employee"
    department: Literal["construction", "finance", "administration", "procurement"] | None = None
    phone_number: str | None = Field(None, max_length=20)


class PasswordUpdateRequest(BaseModel):
    current_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=6)


class UserResponse(BaseModel):
    id: str
    email: str
    role: str
    name: str
    position: str | None

    model_config = {"from_attributes": True}


class LoginResponse(BaseModel):
    """``session_token`` goes into ``Authorization: Bearer`` on later calls."""

    session_token: str
    user: UserResponse
    redirect_path: str


class MessageResponse(BaseModel):
    message: str
