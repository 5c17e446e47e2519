from __future__ import annotations

from anyio import to_thread
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import sessionmaker

from watchwise_core.errors import Conflict, NotFound
from watchwise_store.tables import User


class SqlUserRepo:
    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    # ---------- Async facade ----------
    async def create(
        self, *, email: str | None = None, password_hash: str | None = None
    ) -> User:
        return await to_thread.run_sync(self._create_sync, email, password_hash)

    async def get(self, user_id: str) -> User | None:
        return await to_thread.run_sync(self._get_sync, user_id)

    async def exists(self, user_id: str) -> bool:
        return await to_thread.run_sync(self._exists_sync, user_id)

    async def get_by_email(self, email: str) -> User | None:
        return await to_thread.run_sync(self._get_by_email_sync, email)

    async def mark_onboarding_complete(self, user_id: str) -> User:
        return await to_thread.run_sync(self._mark_onboarding_complete_sync, user_id)

    async def set_credentials(self, user_id: str, email: str, password_hash: str) -> User:
        return await to_thread.run_sync(
            self._set_credentials_sync, user_id, email, password_hash
        )

    # ---------- Private sync impls ----------
    def _create_sync(self, email: str | None, password_hash: str | None) -> User:
        try:
            with self.session_factory.begin() as s:
                user = User(email=email, password_hash=password_hash)
                s.add(user)
                s.flush()
                return user
        except IntegrityError as e:
            # unique email raced past the service-level check
            raise Conflict("Email already registered") from e

    def _get_sync(self, user_id: str) -> User | None:
        with self.session_factory() as s:
            return s.get(User, user_id)

    def _exists_sync(self, user_id: str) -> bool:
        with self.session_factory() as s:
            return s.scalar(select(User.id).where(User.id == user_id)) is not None

    def _get_by_email_sync(self, email: str) -> User | None:
        with self.session_factory() as s:
            return s.scalars(select(User).where(User.email == email).limit(1)).first()

    def _mark_onboarding_complete_sync(self, user_id: str) -> User:
        with self.session_factory.begin() as s:
            user = s.get(User, user_id)
            if user is None:
                raise NotFound("User not found")
            user.onboarding_complete = True
            return user

    def _set_credentials_sync(self, user_id: str, email: str, password_hash: str) -> User:
        try:
            with self.session_factory.begin() as s:
                user = s.get(User, user_id)
                if user is None:
                    raise NotFound("User not found")
                user.email = email
                user.password_hash = password_hash
                s.flush()
                return user
        except IntegrityError as e:
            raise Conflict("Email already registered") from e
