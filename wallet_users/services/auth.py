"""Password hashing and the session cookie that authenticates wallet users."""

import logging
from datetime import timedelta

from fastapi import Response
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from wallet_users.config import settings
from wallet_users.models.user import User, UserSession

logger = logging.getLogger(__name__)

# pbkdf2_sha256 avoids native bcrypt backend incompatibilities across environments.
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    return pwd_context.verify(password, password_hash)


def issue_session_cookie(response: Response, db: Session, user_id: str) -> UserSession:
    """Open a session for ``user_id`` and attach its id to ``response`` as the auth cookie.

    The cookie lifetime matches the session expiry so the browser drops it
    at the same moment the server stops accepting it.
    """
    ttl = timedelta(hours=settings.session_ttl_hours)
    session = UserSession.open(user_id, ttl)
    db.add(session)
    db.commit()
    db.refresh(session)

    response.set_cookie(
        key=settings.cookie_name,
        value=session.id,
        max_age=int(ttl.total_seconds()),
        path="/",
        httponly=True,
        samesite="lax",
        secure=settings.cookie_secure,
    )
    return session


def resolve_session(db: Session, token: str) -> User | None:
    session = db.get(UserSession, token)
    if session is None:
        return None
    if session.is_expired():
        logger.info("Dropping expired session for user %s", session.user_id)
        db.delete(session)
        db.commit()
        return None
    return session.user
