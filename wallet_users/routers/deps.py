from fastapi import Cookie, Depends, HTTPException
from sqlalchemy.orm import Session

from wallet_users.config import settings
from wallet_users.database import get_db
from wallet_users.models.user import User
from wallet_users.services.auth import resolve_session
from wallet_users.services.users import SqlUserService, UserService


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return SqlUserService(db)


def get_current_user(
    token: str | None = Cookie(default=None, alias=settings.cookie_name),
    db: Session = Depends(get_db),
) -> User:
    if not token:
        raise HTTPException(status_code=401, detail="Missing session cookie")
    user = resolve_session(db, token)
    if not user:
        raise HTTPException(status_code=401, detail="Invalid or expired session")
    return user
