from typing import Annotated, Optional

from fastapi import Depends, Request
from fastapi.security import APIKeyHeader, HTTPAuthorizationCredentials, HTTPBearer

from libs.auth.accounts import AccountStore
from libs.auth.guard import authorize
from libs.auth.models import Account, Role
from libs.auth.tokens import decode_access_token
from libs.common.config import Settings
from libs.common.errors import Unauthorized
from libs.common.logging import get_logger

logger = get_logger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)
user_id_header = APIKeyHeader(
    name="user-id",
    auto_error=False,
    description="Trust-on-claim account id. Prefer the bearer token from /login.",
)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_account_store(request: Request) -> AccountStore:
    return request.app.state.account_store


def resolve_account(store: AccountStore, raw_identifier: object) -> Optional[Account]:
    """
    Map a claimed account id to a stored account.

    Absent, malformed or unknown identifiers all resolve to None; the access
    decision is left to the guard.
    """
    if raw_identifier is None or isinstance(raw_identifier, bool):
        return None
    if isinstance(raw_identifier, int):
        account_id = raw_identifier
    else:
        try:
            account_id = int(str(raw_identifier).strip())
        except ValueError:
            return None
    return store.get(account_id)


async def get_current_account(
    settings: Annotated[Settings, Depends(get_app_settings)],
    store: Annotated[AccountStore, Depends(get_account_store)],
    token: Annotated[Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)],
    claimed_id: Annotated[Optional[str], Depends(user_id_header)],
) -> Optional[Account]:
    """
    Resolve the caller from a bearer token, falling back to the user-id header.

    The header fallback only applies while TRUST_USER_ID_HEADER is enabled.
    """
    if token is not None:
        return resolve_account(store, decode_access_token(token.credentials, settings))

    if claimed_id is not None and settings.TRUST_USER_ID_HEADER:
        return resolve_account(store, claimed_id)

    return None


def require_role(required_role: Role):
    """
    Build a dependency that only lets through accounts allowed ``required_role``.

    Raises Unauthorized (403) for missing identities and role mismatches alike.
    """

    async def _require_role(
        account: Annotated[Optional[Account], Depends(get_current_account)]
    ) -> Account:
        if not authorize(account, required_role):
            logger.warning(
                "Access denied: account=%s role=%s required=%s",
                account.id if account else None,
                account.role if account else None,
                required_role.value,
            )
            raise Unauthorized()
        return account

    return _require_role


require_gestor_logistico = require_role(Role.GESTOR_LOGISTICO)
