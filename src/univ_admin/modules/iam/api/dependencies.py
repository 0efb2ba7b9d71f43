"""IAM HTTP – FastAPI dependency providers backed by ``app.state``."""
from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from univ_admin.kernel.ddd import DomainEventBus
from univ_admin.kernel.security import PasswordHasher
from univ_admin.modules.iam.application import TokenService


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_event_bus(request: Request) -> DomainEventBus | None:
    return getattr(request.app.state, "event_bus", None)


PasswordHasherDep = Annotated[PasswordHasher, Depends(get_password_hasher)]
TokenServiceDep = Annotated[TokenService, Depends(get_token_service)]
EventBusDep = Annotated[DomainEventBus | None, Depends(get_event_bus)]

__all__ = [
    "EventBusDep",
    "PasswordHasherDep",
    "TokenServiceDep",
    "get_event_bus",
    "get_password_hasher",
    "get_token_service",
]
