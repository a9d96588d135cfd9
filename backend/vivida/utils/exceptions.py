"""Custom exceptions and error handling utilities."""
from fastapi import HTTPException, status
from typing import Optional

from vivida.constants import INTERNAL_ERROR, INVALID_CREDENTIALS, NOT_AUTHENTICATED
from vivida.utils.logger import logger


class AppException(Exception):
    """Base exception for application errors."""
    pass


class AuthenticationError(AppException):
    """Raised when a credential or token is rejected."""
    pass


def handle_database_error(error: Exception, operation: str) -> HTTPException:
    """
    Convert an unexpected storage failure into a generic 500.

    The error text stays in the server log; callers only ever see the
    generic message.

    Args:
        error: The database error
        operation: Description of the operation that failed

    Returns:
        HTTPException with status 500
    """
    logger.debug(f"{operation} failed with {type(error).__name__}")
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=INTERNAL_ERROR,
    )


def not_found_error(resource: str, identifier: Optional[str] = None) -> HTTPException:
    """
    Create a standardized 404 error.

    Args:
        resource: Name of the resource (e.g., "Milestone", "Service")
        identifier: Optional identifier that was not found

    Returns:
        HTTPException with 404 status
    """
    message = f"{resource} not found"
    if identifier:
        message += f": {identifier}"
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=message)


def validation_error(message: str) -> HTTPException:
    """
    Create a standardized 400 validation error.

    Args:
        message: Validation error message

    Returns:
        HTTPException with 400 status
    """
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message)


def authentication_error(message: str = INVALID_CREDENTIALS) -> HTTPException:
    """
    Create a standardized 401 authentication error.

    Args:
        message: Authentication error message

    Returns:
        HTTPException with 401 status
    """
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=message)


def not_authenticated_error() -> HTTPException:
    """The one 401 every bearer-token failure maps to."""
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=NOT_AUTHENTICATED,
        headers={"WWW-Authenticate": "Bearer"},
    )
