"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from src.api.dependencies import get_current_user
from src.database import get_db
from src.schemas.auth import (
    LoginResponse,
    MessageResponse,
    UserClaims,
    UserLogin,
    UserRegister,
    UserResponse,
)
from src.services.auth import issue_session
from src.services.registration import register_user, verify_email

router = APIRouter(tags=["auth"])


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_data: UserRegister,
    db: Annotated[Session, Depends(get_db)],
):
    """Register a new user and send the verification email."""
    return register_user(
        db,
        fullname=user_data.fullname,
        username=user_data.username,
        email=user_data.email,
        password=user_data.password,
    )


@router.post("/login", response_model=LoginResponse)
def login(
    credentials: UserLogin,
    db: Annotated[Session, Depends(get_db)],
):
    """Login with email and password."""
    token, user = issue_session(db, credentials.email, credentials.password)

    return LoginResponse(
        token=token,
        user=UserResponse.model_validate(user),
    )


@router.get("/verify-email", response_model=MessageResponse)
def verify(
    token: Annotated[str, Query(min_length=1)],
    db: Annotated[Session, Depends(get_db)],
):
    """Consume an email verification token from the link sent on registration."""
    return verify_email(db, token)


@router.get("/me", response_model=UserClaims)
async def get_me(
    current_user: Annotated[UserClaims, Depends(get_current_user)],
):
    """Get the identity carried by the current session token."""
    return current_user
