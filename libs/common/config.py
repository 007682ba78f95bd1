from functools import lru_cache
from typing import List, Literal

from pydantic import BaseModel, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AccountSeed(BaseModel):
    """One account loaded into the in-memory account store at startup."""

    id: int
    username: str
    password: str
    role: str


DEFAULT_SEED_ACCOUNTS = [
    AccountSeed(id=1, username="gestor", password="password123", role="gestor_logistico"),
    AccountSeed(id=2, username="admin", password="admin123", role="admin"),
]


class Settings(BaseSettings):
    """Global application settings."""

    # Application
    ENVIRONMENT: Literal["local", "development", "production"] = "local"
    LOG_LEVEL: str = "INFO"
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    CORS_ORIGINS: List[str] = ["*"]

    # Accounts
    SEED_ACCOUNTS: List[AccountSeed] = DEFAULT_SEED_ACCOUNTS

    # Identity
    # The user-id header is trust-on-claim. Disable it once every client sends
    # the bearer token returned by /login.
    TRUST_USER_ID_HEADER: bool = True
    JWT_SECRET: str = "dev-jwt-secret"
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # Rate limiting
    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT_STORAGE_URI: str = "memory://"
    LOGIN_RATE_LIMIT: str = "5/minute"

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    @field_validator("SEED_ACCOUNTS")
    @classmethod
    def check_unique_accounts(cls, v: List[AccountSeed]) -> List[AccountSeed]:
        ids = [account.id for account in v]
        usernames = [account.username for account in v]
        if len(set(ids)) != len(ids):
            raise ValueError("SEED_ACCOUNTS ids must be unique")
        if len(set(usernames)) != len(usernames):
            raise ValueError("SEED_ACCOUNTS usernames must be unique")
        if any(i <= 0 for i in ids):
            raise ValueError("SEED_ACCOUNTS ids must be positive")
        return v


@lru_cache
def get_settings() -> Settings:
    """
    Return the global settings instance, cached.
    """
    return Settings()
