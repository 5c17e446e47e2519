from watchwise_core.errors import ValidationFailed


def require_text(value: str | None, field: str) -> str:
    """Return ``value`` stripped, or raise if it is missing/blank."""
    value = (value or "").strip()
    if not value:
        raise ValidationFailed(f"{field} is required")
    return value


def check_rating(rating: int) -> None:
    if not 1 <= rating <= 5:
        raise ValidationFailed("Rating must be between 1 and 5")
