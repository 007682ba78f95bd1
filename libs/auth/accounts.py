"""In-memory account store seeded from settings."""

from typing import Any, Iterable, List, Optional

from libs.auth.models import Account
from libs.common.config import AccountSeed


class AccountStore:
    """Read-only collection of accounts, fixed at construction."""

    def __init__(self, accounts: Iterable[Account]):
        self._accounts: List[Account] = list(accounts)
        self._by_id = {account.id: account for account in self._accounts}

    @classmethod
    def from_seeds(cls, seeds: Iterable[AccountSeed]) -> "AccountStore":
        return cls(Account(**seed.model_dump()) for seed in seeds)

    def __len__(self) -> int:
        return len(self._accounts)

    def get(self, account_id: int) -> Optional[Account]:
        return self._by_id.get(account_id)

    def authenticate(self, username: Any, password: Any) -> Optional[Account]:
        """
        Return the account matching both username and password exactly.

        Returns None for any mismatch, without saying which field was wrong.
        """
        if not isinstance(username, str) or not isinstance(password, str):
            return None
        if not username or not password:
            return None
        for account in self._accounts:
            if account.username == username and account.password == password:
                return account
        return None
