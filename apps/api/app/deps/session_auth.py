from typing import Optional

from fastapi import Request

SESSION_USER_KEY = "user_id"


def get_session_user_id(request: Request) -> Optional[str]:
    """User id bound to the signed session cookie, if any."""
    return request.session.get(SESSION_USER_KEY)


def start_session(request: Request, user_id: str) -> None:
    request.session[SESSION_USER_KEY] = user_id


def end_session(request: Request) -> None:
    request.session.clear()
