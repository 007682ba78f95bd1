"""Login route."""

from typing import Any

from fastapi import APIRouter, Body, Depends, Request

from libs.auth.accounts import AccountStore
from libs.auth.dependencies import get_account_store, get_app_settings
from libs.auth.models import AccountPublic, LoginRequest, LoginResponse
from libs.auth.tokens import create_access_token
from libs.common.config import Settings
from libs.common.errors import InvalidCredentials
from libs.common.logging import get_logger
from libs.common.rate_limit import auth_limit

logger = get_logger(__name__)

router = APIRouter(tags=["autenticacion"])


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={401: {"description": "Credenciales inválidas"}},
)
@auth_limit
async def login(
    request: Request,
    body: Any = Body(default=None),
    store: AccountStore = Depends(get_account_store),
    settings: Settings = Depends(get_app_settings),
):
    """
    Authenticate a user by username and password.

    Returns the public account fields and a bearer token for protected routes.
    """
    credentials = LoginRequest.from_body(body)
    account = store.authenticate(credentials.username, credentials.password)
    if account is None:
        logger.info("Failed login attempt for username=%r", credentials.username)
        raise InvalidCredentials()

    logger.info("Account %s logged in", account.id)
    return LoginResponse(
        user=AccountPublic(id=account.id, username=account.username, role=account.role),
        token=create_access_token(account, settings),
    )
