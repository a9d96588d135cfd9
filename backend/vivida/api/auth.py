"""Authentication API endpoints."""
from fastapi import APIRouter, Depends, HTTPException, status

from vivida.auth.bearer import get_current_user
from vivida.auth.tokens import create_access_token
from vivida.models import User
from vivida.schemas.auth import AuthResponse, AuthUser, FirebaseLoginRequest, LoginRequest
from vivida.services.storage import Storage, get_storage
from vivida.utils.exceptions import authentication_error, handle_database_error, validation_error
from vivida.utils.hashing import hash_password, verify_password
from vivida.utils.logger import logger

router = APIRouter(prefix="/api/auth", tags=["auth"])


def issue_token(user: User) -> AuthResponse:
    """Build the token response shared by every login path."""
    return AuthResponse(
        token=create_access_token(user.id, user.email),
        user=AuthUser(id=user.id, email=user.email),
    )


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginRequest,
    storage: Storage = Depends(get_storage),
) -> AuthResponse:
    """
    Password login.

    Unknown email, an account without a password and a wrong password all
    get the same 401 so the response does not reveal which accounts exist.

    Args:
        request: Login credentials
        storage: Request-scoped storage

    Returns:
        Token and user
    """
    try:
        user = storage.get_user_by_email(request.email)

        if not user or not user.password_hash:
            raise authentication_error()

        if not verify_password(request.password, user.password_hash):
            raise authentication_error()

        logger.info(f"User {user.id} logged in with password")
        return issue_token(user)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Login error for {request.email}: {e}", exc_info=True)
        raise handle_database_error(e, "login")


@router.post("/firebase-login", response_model=AuthResponse)
async def firebase_login(
    request: FirebaseLoginRequest,
    storage: Storage = Depends(get_storage),
) -> AuthResponse:
    """
    Exchange an identity-provider assertion for a local token.

    The client completes the provider's redirect flow and posts the resulting
    uid and email. The assertion is trusted as sent; it is not re-verified
    against the provider here.

    Args:
        request: Provider uid and email
        storage: Request-scoped storage

    Returns:
        Token and user; the user is created on first login
    """
    try:
        user = storage.get_user_by_firebase_uid(request.firebase_uid)

        if not user:
            existing = storage.get_user_by_email(request.email)
            if existing and not existing.firebase_uid:
                user = storage.link_firebase_uid(existing, request.firebase_uid)
                logger.info(f"Linked federated identity to existing user {user.id}")
            elif existing:
                # Email already bound to a different external identity
                raise authentication_error()
            else:
                user = storage.create_user(request.email, firebase_uid=request.firebase_uid)
                logger.info(f"Created federated user {user.id}")

        return issue_token(user)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Federated login error for {request.email}: {e}", exc_info=True)
        raise handle_database_error(e, "firebase_login")


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    request: LoginRequest,
    storage: Storage = Depends(get_storage),
) -> AuthResponse:
    """
    Create a password account and log it in.

    Args:
        request: Email and password for the new account
        storage: Request-scoped storage

    Returns:
        Token and the created user
    """
    try:
        if storage.get_user_by_email(request.email):
            raise validation_error("User already exists")

        user = storage.create_user(request.email, password_hash=hash_password(request.password))
        logger.info(f"Registered user {user.id}")
        return issue_token(user)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Registration error for {request.email}: {e}", exc_info=True)
        raise handle_database_error(e, "register")


@router.get("/me", response_model=AuthUser)
async def me(user: User = Depends(get_current_user)) -> AuthUser:
    """Return the user the bearer token belongs to."""
    return AuthUser(id=user.id, email=user.email)
