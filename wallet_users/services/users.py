"""User service contract consumed by the HTTP handlers, plus the SQL-backed default.

Handlers only rely on :class:`UserService` and the error types below; the
concrete implementation is injected through ``routers.deps.get_user_service``.
"""

import logging
from typing import Protocol

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from wallet_users.models.user import User
from wallet_users.services.auth import hash_password, verify_password

logger = logging.getLogger(__name__)


class UserServiceError(Exception):
    """Base class for outcomes the handlers know how to classify."""


class ConflictError(UserServiceError):
    def __init__(self, message: str = "user already exists"):
        super().__init__(message)


class NotFoundError(UserServiceError):
    def __init__(self, message: str = "user not found"):
        super().__init__(message)


class WrongPasswordError(UserServiceError):
    def __init__(self, message: str = "wrong password"):
        super().__init__(message)


class UserService(Protocol):
    """What the handlers need from a user store.

    Returned users must be rows of this service's ``users`` table: the
    handlers open a ``user_sessions`` row keyed by ``User.id`` after every
    successful call, so an implementation backed by another store has to
    mirror its users here first.
    """

    def create(self, username: str, password: str) -> User: ...

    def login(self, username: str, password: str) -> User: ...


class SqlUserService:
    def __init__(self, db: Session):
        self.db = db

    def create(self, username: str, password: str) -> User:
        existing = self.db.query(User).filter(User.username == username).first()
        if existing:
            raise ConflictError()

        user = User(username=username, password_hash=hash_password(password))
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as exc:
            # Lost a race with a concurrent registration of the same name.
            self.db.rollback()
            raise ConflictError() from exc
        self.db.refresh(user)
        logger.info("Created user %s", user.id)
        return user

    def login(self, username: str, password: str) -> User:
        user = self.db.query(User).filter(User.username == username).first()
        if not user:
            raise NotFoundError()
        if not verify_password(password, user.password_hash):
            raise WrongPasswordError()
        return user
