"""Datetime utilities for timezone-aware UTC timestamps.

Usage:
    from libs.common.datetime_utils import utc_now

    expires_at = utc_now() + timedelta(minutes=60)
"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return timezone-aware UTC datetime.

    Token claims are computed from this so expiry never depends on the host
    timezone.
    """
    return datetime.now(timezone.utc)
