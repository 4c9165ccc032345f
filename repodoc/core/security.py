"""Session tokens: create and decode the bearer tokens handed to clients."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt


@dataclass(frozen=True)
class SessionClaims:
    """Decoded session token payload."""
    user_id: str
    email: str
    expires_at: datetime


def create_session_token(
    user_id: str,
    email: str,
    secret: str,
    algorithm: str = "HS256",
    expires_hours: int = 24 * 7,
) -> str:
    """Create a signed session token for ``user_id``."""
    now = datetime.now(timezone.utc)
    payload = {
        "sub": user_id,
        "email": email,
        "iat": now,
        "exp": now + timedelta(hours=expires_hours),
    }
    return jwt.encode(payload, secret, algorithm=algorithm)


def decode_session_token(
    token: str,
    secret: str,
    algorithm: str = "HS256",
) -> Optional[SessionClaims]:
    """Decode and verify a session token.

    Returns None when the signature, expiry or payload shape is invalid.
    """
    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[algorithm],
            options={"require": ["exp", "sub"]},
        )
    except jwt.PyJWTError:
        return None

    return SessionClaims(
        user_id=str(payload["sub"]),
        email=payload.get("email", ""),
        expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
    )
