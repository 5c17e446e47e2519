from __future__ import annotations

import logging

from watchwise_core.config import MAX_PASSWORD_BYTES, MIN_PASSWORD_LENGTH
from watchwise_core.errors import Conflict, NotFound, Unauthorized, ValidationFailed
from watchwise_store.tables import User

from .passwords import hash_password, verify_password
from .schemas import UserOut
from .user_repo import SqlUserRepo

log = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


def normalize_email(email: str) -> str:
    return email.strip().lower()


def _to_out(user: User) -> UserOut:
    return UserOut.model_validate(user)


class AccountService:
    def __init__(self, repo: SqlUserRepo):
        self.repo = repo

    async def create_anonymous(self) -> UserOut:
        user = await self.repo.create()
        log.info("Created anonymous user %s", user.id)
        return _to_out(user)

    async def get(self, user_id: str) -> UserOut | None:
        user = await self.repo.get(user_id)
        return _to_out(user) if user else None

    async def require(self, user_id: str) -> UserOut:
        user = await self.get(user_id)
        if user is None:
            raise NotFound("User not found")
        return user

    async def complete_onboarding(self, user_id: str) -> UserOut:
        return _to_out(await self.repo.mark_onboarding_complete(user_id))

    async def register(self, email: str, password: str) -> UserOut:
        email = self._check_credentials(email, password)
        if await self.repo.get_by_email(email):
            raise Conflict("Email already registered")
        user = await self.repo.create(email=email, password_hash=hash_password(password))
        log.info("Registered user %s", user.id)
        return _to_out(user)

    async def authenticate(self, email: str, password: str) -> UserOut:
        # Unknown email and wrong password are reported identically
        if not email or not password:
            raise ValidationFailed("Email and password required")
        user = await self.repo.get_by_email(normalize_email(email))
        if user is None or not verify_password(password, user.password_hash):
            raise Unauthorized(INVALID_CREDENTIALS)
        return _to_out(user)

    async def link(self, user_id: str, email: str, password: str) -> UserOut:
        """Attach email credentials to an anonymous user, keeping its id and rows."""
        if not user_id:
            raise ValidationFailed("userId, email, and password required")
        email = self._check_credentials(
            email, password, missing_msg="userId, email, and password required"
        )
        if await self.repo.get_by_email(email):
            raise Conflict("Email already registered")
        user = await self.repo.get(user_id)
        if user is None:
            raise NotFound("User not found")
        if user.email:
            raise Conflict("Account already linked to an email")
        updated = await self.repo.set_credentials(user_id, email, hash_password(password))
        log.info("Linked email credentials to user %s", user_id)
        return _to_out(updated)

    @staticmethod
    def _check_credentials(
        email: str | None,
        password: str | None,
        *,
        missing_msg: str = "Email and password required",
    ) -> str:
        if not email or not email.strip() or not password:
            raise ValidationFailed(missing_msg)
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationFailed(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            )
        if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValidationFailed(
                f"Password must be at most {MAX_PASSWORD_BYTES} bytes"
            )
        return normalize_email(email)
