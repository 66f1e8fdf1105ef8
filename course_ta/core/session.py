from datetime import datetime, timezone

from fastapi import Request

from course_ta.core.config import get_settings


def mint_session_id() -> str:
    """New session identifier: an ISO-8601 UTC timestamp, e.g. 2026-01-28T10:15:30.123Z."""
    now = datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


def resolve_session_id(
    supplied: str | None,
    cookie: str | None,
    mint: bool = True,
) -> str | None:
    """
    Resolve the session identifier for a request.

    Precedence: supplied value, then cookie, then a newly minted id.
    With mint=False a missing session resolves to None.
    """
    if supplied and supplied.strip():
        return supplied.strip()
    if cookie and cookie.strip():
        return cookie.strip()
    if mint:
        return mint_session_id()
    return None


def session_cookie(request: Request) -> str | None:
    return request.cookies.get(get_settings().session_cookie_name)
