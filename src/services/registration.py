"""Account registration and email verification."""

import logging
import secrets

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.exceptions import DuplicateIdentityError, InvalidVerificationTokenError, ValidationError
from src.models.user import User
from src.services.auth import get_password_hash
from src.tasks.email_delivery import send_verification_email

logger = logging.getLogger(__name__)


def generate_verification_token() -> str:
    """Random single-use token, 256 bits of entropy."""
    return secrets.token_urlsafe(32)


def dispatch_verification_email(email: str, token: str) -> None:
    """Queue the verification email without waiting for delivery.

    A failure to enqueue is logged and never propagated to the caller.
    """
    try:
        send_verification_email.delay(email, token)
    except Exception:
        logger.exception(f"Failed to queue verification email for {email}")


def register_user(db: Session, fullname: str, username: str, email: str, password: str) -> User:
    """Create an unverified account and send its verification email.

    Raises:
        DuplicateIdentityError: username or email already taken.
    """
    existing = (
        db.query(User.id).filter((User.email == email) | (User.username == username)).first()
    )
    if existing:
        raise DuplicateIdentityError()

    token = generate_verification_token()
    user = User(
        fullname=fullname,
        username=username,
        email=email,
        password_hash=get_password_hash(password),
        is_verified=False,
        verification_token=token,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        # Lost a race with a concurrent registration
        db.rollback()
        raise DuplicateIdentityError() from e
    db.refresh(user)

    logger.info(f"Registered user {user.id} ({username})")

    # The account exists from here on regardless of email delivery
    dispatch_verification_email(email, token)
    return user


def verify_email(db: Session, token: str) -> dict:
    """Mark the account owning ``token`` as verified and consume the token.

    Match and clear happen in one UPDATE so a token can succeed only once,
    even under concurrent attempts.

    Raises:
        ValidationError: empty token.
        InvalidVerificationTokenError: token unknown or already used.
    """
    if not token or not token.strip():
        raise ValidationError("Verification token is required")

    updated = (
        db.query(User)
        .filter(User.verification_token == token)
        .update({"is_verified": True, "verification_token": None}, synchronize_session=False)
    )
    db.commit()

    if updated == 0:
        raise InvalidVerificationTokenError()

    logger.info("Email verified")
    return {"message": "Email verified successfully"}
