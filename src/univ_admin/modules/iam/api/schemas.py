"""IAM HTTP contract – request models and response presenters."""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from univ_admin.modules.iam.application import (
    AuthTokens,
    CreateUserCommand,
    CreateUserResponse,
    LoginCommand,
    LoginResponse,
    TokenPayload,
)


class RegisterUserRequest(BaseModel):
    """Body of ``POST /iam/users``; business validation happens in the domain."""

    model_config = ConfigDict(populate_by_name=True)

    username: str
    email: str
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    role: str
    password: str = Field(min_length=1, repr=False)

    def to_command(self) -> CreateUserCommand:
        return CreateUserCommand(
            username=self.username,
            email=self.email,
            first_name=self.first_name,
            last_name=self.last_name,
            role=self.role,
            password=self.password,
        )


class LoginRequest(BaseModel):
    identifier: str = Field(min_length=1, description="Username or e-mail address")
    password: str = Field(min_length=1, repr=False)

    def to_command(self) -> LoginCommand:
        return LoginCommand(identifier=self.identifier, password=self.password)


def present_created_user(response: CreateUserResponse) -> dict[str, Any]:
    return {"id": response.id, "username": response.username}


def present_tokens(tokens: AuthTokens) -> dict[str, Any]:
    return {
        "accessToken": tokens.access_token,
        "refreshToken": tokens.refresh_token,
        "expiresIn": tokens.expires_in,
    }


def present_login(response: LoginResponse) -> dict[str, Any]:
    user = response.user
    return {
        "tokens": present_tokens(response.tokens),
        "user": {
            "id": user.id,
            "username": user.username,
            "email": user.email,
            "fullName": user.full_name,
            "role": user.role,
        },
    }


def present_token_payload(payload: TokenPayload) -> dict[str, Any]:
    return {"userId": payload.user_id, "username": payload.username, "role": payload.role}


__all__ = [
    "LoginRequest",
    "RegisterUserRequest",
    "present_created_user",
    "present_login",
    "present_token_payload",
    "present_tokens",
]
