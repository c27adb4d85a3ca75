"""Password hashing (bcrypt) and bearer token signing (PyJWT)."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any

import bcrypt
import jwt

from audit_dashboard.core.config import Settings
from audit_dashboard.core.exceptions import UnauthorizedError

# Checked against when the email is unknown so both login failure paths
# pay for one bcrypt comparison.
_DUMMY_HASH = bcrypt.hashpw(b"not-a-real-password", bcrypt.gensalt()).decode()


# ============================================================
# PASSWORD HASHING
# ============================================================

def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt()).decode()


def verify_password(password: str, hashed: str | None) -> bool:
    if not hashed:
        bcrypt.checkpw(password.encode(), _DUMMY_HASH.encode())
        return False
    try:
        return bcrypt.checkpw(password.encode(), hashed.encode())
    except ValueError:
        # Malformed stored hash
        return False


# ============================================================
# JWT
# ============================================================

def create_access_token(
    *, user_id: int, email: str, role: str, settings: Settings,
    now: datetime | None = None,
) -> str:
    issued = now or datetime.now(timezone.utc)
    payload = {
        "sub": str(user_id),
        "email": email,
        "role": role,
        "iat": issued,
        "exp": issued + timedelta(hours=settings.jwt_expiry_hours),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str, settings: Settings) -> dict[str, Any]:
    """Return the token's claims or raise :class:`UnauthorizedError`."""
    try:
        claims = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except jwt.ExpiredSignatureError as exc:
        raise UnauthorizedError("Token expired") from exc
    except jwt.InvalidTokenError as exc:
        raise UnauthorizedError("Invalid token") from exc

    if not str(claims.get("sub", "")).isdigit() or "email" not in claims:
        raise UnauthorizedError("Invalid token")
    return claims
