from datetime import datetime

from watchwise_core.schemas import CamelModel


class UserOut(CamelModel):
    """Public view of a user; the password hash is never part of it."""

    id: str
    created_at: datetime | None = None
    onboarding_complete: bool = False
    email: str | None = None
