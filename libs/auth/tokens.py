"""Signed bearer tokens issued at login."""

from datetime import timedelta
from typing import Optional

from jose import JWTError, jwt

from libs.auth.models import Account
from libs.common.config import Settings, get_settings
from libs.common.datetime_utils import utc_now


def create_access_token(account: Account, settings: Optional[Settings] = None) -> str:
    """Issue an HS256 token whose ``sub`` claim is the account id."""
    settings = settings or get_settings()
    now = utc_now()
    payload = {
        "sub": str(account.id),
        "role": account.role,
        "iat": now,
        "exp": now + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str, settings: Optional[Settings] = None) -> Optional[str]:
    """
    Verify a token and return its ``sub`` claim.

    Returns None if the signature, expiry or claims are invalid.
    """
    settings = settings or get_settings()
    try:
        payload = jwt.decode(
            token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM]
        )
    except JWTError:
        return None
    subject = payload.get("sub")
    return subject if isinstance(subject, str) else None
