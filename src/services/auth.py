"""Authentication service for JWT and password handling."""

from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.orm import Session

from src.config import get_settings
from src.exceptions import (
    ConfigurationError,
    InvalidCredentialsError,
    InvalidTokenError,
    MissingTokenError,
)
from src.models.user import User
from src.schemas.auth import UserClaims

settings = get_settings()

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=10)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def _signing_secret() -> str:
    if not settings.jwt_secret:
        raise ConfigurationError("JWT_SECRET is not configured")
    return settings.jwt_secret


def create_access_token(user: User, now: datetime | None = None) -> str:
    """Create a JWT access token carrying the user's id, username and email."""
    secret = _signing_secret()
    issued_at = now or datetime.now(UTC)
    expire = issued_at + timedelta(minutes=settings.jwt_expiration_minutes)
    to_encode = {
        "id": user.id,
        "username": user.username,
        "email": user.email,
        "iat": issued_at,
        "exp": expire,
    }
    return jwt.encode(to_encode, secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> UserClaims:
    """Decode and validate a JWT token.

    Raises:
        InvalidTokenError: bad signature, expired, or missing identity claims.
    """
    secret = _signing_secret()
    try:
        payload = jwt.decode(token, secret, algorithms=[settings.jwt_algorithm])
    except JWTError as e:
        raise InvalidTokenError() from e

    try:
        return UserClaims.model_validate(payload)
    except PydanticValidationError as e:
        raise InvalidTokenError() from e


def extract_bearer_token(authorization: str | None) -> str:
    """Return the token part of a ``Bearer <token>`` header value."""
    if not authorization:
        raise MissingTokenError()

    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise MissingTokenError()
    return parts[1]


def authenticate(authorization: str | None) -> UserClaims:
    """Validate a raw Authorization header and return the caller's claims."""
    token = extract_bearer_token(authorization)
    return decode_access_token(token)


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by email."""
    return db.query(User).filter(User.email == email).first()


def get_user_by_username(db: Session, username: str) -> User | None:
    """Get a user by username."""
    return db.query(User).filter(User.username == username).first()


def authenticate_user(db: Session, email: str, password: str) -> User:
    """Authenticate a user by email and password.

    Unknown email and wrong password raise the same error so callers cannot
    tell which one failed.
    """
    user = get_user_by_email(db, email)
    if not user:
        raise InvalidCredentialsError()
    if not verify_password(password, user.password_hash):
        raise InvalidCredentialsError()
    return user


def issue_session(db: Session, email: str, password: str) -> tuple[str, User]:
    """Check credentials and sign a session token for the user.

    Verification state is not checked; unverified users may log in.
    """
    # Fail on configuration before touching credentials
    _signing_secret()
    user = authenticate_user(db, email, password)
    return create_access_token(user), user
