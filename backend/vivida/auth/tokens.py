"""Bearer token issuance and decoding."""
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt

from vivida.config import settings
from vivida.utils.exceptions import AuthenticationError


def create_access_token(user_id: str, email: str, expires_delta: Optional[timedelta] = None) -> str:
    """
    Issue a signed token for a user.

    Args:
        user_id: ID of the authenticated user
        email: Email of the authenticated user
        expires_delta: Lifetime override; defaults to the configured number of days

    Returns:
        Encoded JWT
    """
    issued_at = int(datetime.now(timezone.utc).timestamp())
    lifetime = expires_delta or timedelta(days=settings.token_expire_days)
    payload: Dict[str, Any] = {
        "userId": user_id,
        "email": email,
        "iat": issued_at,
        "exp": issued_at + int(lifetime.total_seconds()),
    }
    return jwt.encode(payload, settings.secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> Dict[str, Any]:
    """
    Verify signature and expiry of a token and return its claims.

    Raises:
        AuthenticationError: If the token is malformed, forged, expired or
            lacks the user claim
    """
    try:
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", "userId"]},
        )
    except jwt.InvalidTokenError as e:
        raise AuthenticationError(str(e)) from e
    return payload
