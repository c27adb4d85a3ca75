"""Access gate — single admin role, bcrypt passwords, signed bearer tokens."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from audit_dashboard.core.config import Settings
from audit_dashboard.core.exceptions import ConflictError, NotFoundError, UnauthorizedError
from audit_dashboard.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)
from audit_dashboard.domain import User
from audit_dashboard.repositories.store import Store

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


@dataclass(frozen=True)
class Principal:
    """The authenticated caller, as carried in the bearer token."""

    id: int
    email: str
    role: str

    @classmethod
    def from_claims(cls, claims: dict) -> "Principal":
        return cls(id=int(claims["sub"]), email=claims["email"], role=claims.get("role", "admin"))


class AuthService:
    def __init__(self, store: Store, settings: Settings):
        self._store = store
        self._settings = settings

    async def login(self, email: str, password: str) -> tuple[str, User]:
        """Return ``(token, user)``. Unknown email and wrong password fail identically."""
        user = await self._store.find_user(email)
        # verify_password still hashes when there is no user
        if not verify_password(password, user.password_hash if user else None) or user is None:
            logger.info("Failed login attempt for %s", email)
            raise UnauthorizedError(INVALID_CREDENTIALS)

        token = create_access_token(
            user_id=user.id, email=user.email, role=user.role, settings=self._settings,
        )
        logger.info("User %s logged in", user.id)
        return token, user

    def verify(self, token: str) -> Principal:
        return self.principal_from_token(token, self._settings)

    @staticmethod
    def principal_from_token(token: str, settings: Settings) -> Principal:
        return Principal.from_claims(decode_access_token(token, settings))

    async def create_admin(self, email: str, password: str) -> User:
        if await self._store.find_user(email):
            raise ConflictError("User already exists")
        user = await self._store.insert_user(
            email=email, password_hash=hash_password(password), role="admin",
        )
        logger.info("Admin user %s created", user.id)
        return user

    async def update_password(self, user_id: int, current_password: str, new_password: str) -> None:
        user = await self._store.get_user(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        if not verify_password(current_password, user.password_hash):
            raise UnauthorizedError("Current password is incorrect")
        await self._store.update_user_password(user_id, hash_password(new_password))
        logger.info("Password updated for user %s", user_id)

    async def ensure_admin(self, email: str, password: str) -> User:
        """Seed the default admin when no user with ``email`` exists."""
        existing = await self._store.find_user(email)
        if existing is not None:
            return existing
        return await self.create_admin(email, password)
