"""Credential store and session issuing.

Credentials live in ``auth_users``; application data (role, name) lives in
``profiles`` keyed by the same id. Callers own the transaction: the
functions here only flush so sign-up can be combined with other writes.
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from leasedesk.config import ACCESS_TOKEN_EXPIRE_MINUTES
from leasedesk.database.models import AuthUser, Profile
from leasedesk.schemas.auth_schema import AuthResponse, ProfileResponse
from leasedesk.utils.dependencies import (
    hash_password,
    verify_password,
    create_access_token,
    create_refresh_token,
    decode_token,
    REFRESH_TOKEN,
)

logger = logging.getLogger(__name__)


class SignupError(ValueError):
    pass


def normalize_email(email: str) -> str:
    return email.strip().lower()


def get_auth_user_by_email(email: str, db: Session) -> Optional[AuthUser]:
    return db.query(AuthUser).filter_by(email=normalize_email(email)).first()


def get_profile(user_id: str, db: Session) -> Optional[Profile]:
    return db.query(Profile).filter(Profile.id == user_id).first()


def create_auth_user(email: str, password: str, db: Session) -> AuthUser:
    if get_auth_user_by_email(email, db):
        raise SignupError("User already registered")

    user = AuthUser(email=normalize_email(email), hashed_password=hash_password(password))
    db.add(user)
    db.flush()
    return user


def create_profile(
    user: AuthUser,
    role: str,
    full_name: str,
    db: Session,
    phone: Optional[str] = None,
) -> Profile:
    profile = Profile(
        id=user.id,
        role=role,
        full_name=full_name.strip(),
        email=user.email,
        phone=phone or None,
    )
    db.add(profile)
    db.flush()
    return profile


def authenticate(email: str, password: str, db: Session) -> Optional[AuthUser]:
    user = get_auth_user_by_email(email, db)
    if not user or not verify_password(password, user.hashed_password):
        return None
    return user


def user_id_from_refresh_token(refresh_token: str) -> str:
    """Raises JWTError when the token is invalid, expired or not a refresh token."""
    return decode_token(refresh_token, REFRESH_TOKEN)


def issue_session(profile: Profile) -> AuthResponse:
    return AuthResponse(
        access_token=create_access_token(profile.id),
        refresh_token=create_refresh_token(profile.id),
        expires_in=ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        user=ProfileResponse.model_validate(profile),
    )
