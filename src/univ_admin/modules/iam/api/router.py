"""IAM HTTP – user registration, login and token introspection."""
from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from univ_admin.adapters.fastapi import (
    ApiResponseFactory,
    bearer_token,
    domain_error_response,
    error_responses,
    get_session_factory,
)
from univ_admin.adapters.sqlalchemy import SqlAlchemyUnitOfWork
from univ_admin.kernel.ddd import DeferredEventBus
from univ_admin.modules.iam.api.dependencies import EventBusDep, PasswordHasherDep, TokenServiceDep
from univ_admin.modules.iam.api.schemas import (
    LoginRequest,
    RegisterUserRequest,
    present_created_user,
    present_login,
    present_token_payload,
)
from univ_admin.modules.iam.application import (
    CreateUserService,
    InvalidTokenError,
    LoginService,
    TokenPayload,
)
from univ_admin.modules.iam.infrastructure import SqlAlchemyUserRepository
from univ_admin.observability.correlation import CorrelationContext

router = APIRouter(prefix="/iam", tags=["iam"])


@router.post("/users", status_code=201, responses=error_responses(400, 409, 422, 500))
async def register_user(
    body: RegisterUserRequest,
    request: Request,
    hasher: PasswordHasherDep,
    event_bus: EventBusDep,
) -> JSONResponse:
    outbox = DeferredEventBus(event_bus)
    async with SqlAlchemyUnitOfWork(get_session_factory(request)) as uow:
        service = CreateUserService(SqlAlchemyUserRepository(uow.session), hasher, outbox)
        result = await service.execute(body.to_command())
    await outbox.flush()

    return result.match(
        ok=lambda created: JSONResponse(
            status_code=201,
            content=ApiResponseFactory.success(present_created_user(created), message="User created"),
        ),
        err=domain_error_response,
    )


@router.post("/auth/login", responses=error_responses(400, 401, 403, 500))
async def login(
    body: LoginRequest,
    request: Request,
    hasher: PasswordHasherDep,
    tokens: TokenServiceDep,
) -> JSONResponse:
    async with SqlAlchemyUnitOfWork(get_session_factory(request)) as uow:
        service = LoginService(SqlAlchemyUserRepository(uow.session), hasher, tokens)
        result = await service.execute(body.to_command())

    return result.match(
        ok=lambda response: JSONResponse(
            status_code=200,
            content=ApiResponseFactory.success(present_login(response), message="Login successful"),
        ),
        err=domain_error_response,
    )


@router.get("/auth/me", responses=error_responses(401))
async def current_user(request: Request, tokens: TokenServiceDep) -> JSONResponse:
    return bearer_token(request).and_then(tokens.verify_token).match(
        some=_authenticated,
        none=lambda: domain_error_response(InvalidTokenError()),
    )


def _authenticated(payload: TokenPayload) -> JSONResponse:
    ctx = CorrelationContext.get()
    if ctx is not None:
        CorrelationContext.set(ctx.with_user(payload.user_id))
    return JSONResponse(status_code=200, content=ApiResponseFactory.success(present_token_payload(payload)))


__all__ = ["router"]
