"""Bearer token authentication for admin routes."""
from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from vivida.auth.tokens import decode_access_token
from vivida.database import get_db
from vivida.models.user import User
from vivida.utils.db import get_by_id
from vivida.utils.exceptions import AuthenticationError, not_authenticated_error
from vivida.utils.logger import logger

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> User:
    """
    Resolve the bearer token on the request to a live user.

    Every failure (no header, bad signature, expired, user deleted) raises
    the same 401 so callers cannot tell them apart.

    Args:
        credentials: Parsed Authorization header, if any
        db: Database session

    Returns:
        The authenticated User
    """
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise not_authenticated_error()

    try:
        payload = decode_access_token(credentials.credentials)
    except AuthenticationError as e:
        logger.debug(f"Rejected bearer token: {e}")
        raise not_authenticated_error()

    user = get_by_id(db, User, str(payload["userId"]))
    if not user:
        logger.debug(f"Rejected bearer token for missing user {payload['userId']}")
        raise not_authenticated_error()

    return user
