from typing import Any, cast

from fastapi import HTTPException, Request, status
from sqlalchemy.orm import sessionmaker


def _get_state_attr(request: Request, name: str, error_detail: str) -> Any:
    value = getattr(request.app.state, name, None)
    if value is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=error_detail,
        )
    return value


def get_settings(request: Request) -> Any:
    return _get_state_attr(request, "settings", "Settings not initialized")


def get_session_factory(request: Request) -> sessionmaker:
    return cast(
        sessionmaker,
        _get_state_attr(request, "session_factory", "Database not initialized"),
    )
