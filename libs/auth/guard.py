"""Role-based access decisions."""

from typing import Optional

from libs.auth.models import Account, Role


def authorize(account: Optional[Account], required_role: Role) -> bool:
    """
    Decide whether ``account`` may use an operation requiring ``required_role``.

    Admin accounts pass every check. Any other account passes only when its
    role equals the required one exactly. No account never passes.
    """
    if account is None:
        return False
    if account.is_admin:
        return True
    return account.role == required_role.value
