import enum
from typing import Any

from pydantic import BaseModel, ConfigDict


class Role(str, enum.Enum):
    """Roles a route can require. ADMIN passes every requirement."""

    GESTOR_LOGISTICO = "gestor_logistico"
    ADMIN = "admin"


class Account(BaseModel):
    """
    A seeded user account.

    ``role`` stays a plain string: accounts may carry roles no route requires.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    username: str
    password: str
    role: str

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN.value


class AccountPublic(BaseModel):
    """Account fields that are safe to return to clients."""

    id: int
    username: str
    role: str


class LoginRequest(BaseModel):
    """Submitted credentials. Non-string values simply fail to authenticate."""

    username: Any = None
    password: Any = None

    @classmethod
    def from_body(cls, body: Any) -> "LoginRequest":
        return cls.model_validate(body if isinstance(body, dict) else {})


class LoginResponse(BaseModel):
    success: bool = True
    user: AccountPublic
    token: str
