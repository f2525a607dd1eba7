import logging

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from wallet_users.config import settings
from wallet_users.database import get_db
from wallet_users.models.user import User
from wallet_users.routers.deps import get_current_user, get_user_service
from wallet_users.schemas.user import CredentialsRequest, ErrorResponse, UserResponse
from wallet_users.services.auth import issue_session_cookie
from wallet_users.services.users import ConflictError, NotFoundError, UserService, WrongPasswordError

router = APIRouter(tags=["users"])
logger = logging.getLogger(__name__)

_error_responses = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def _internal_error(exc: Exception) -> HTTPException:
    logger.exception("User service failed: %s", exc)
    message = str(exc) if settings.expose_internal_errors else ""
    return HTTPException(status_code=500, detail=message or "internal server error")


@router.post(
    "/users",
    status_code=201,
    response_model=UserResponse,
    responses={**_error_responses, 409: {"model": ErrorResponse}},
)
def create_user(
    payload: CredentialsRequest,
    response: Response,
    db: Session = Depends(get_db),
    service: UserService = Depends(get_user_service),
):
    try:
        user = service.create(payload.username, payload.password)
    except ConflictError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    except Exception as exc:
        raise _internal_error(exc) from exc

    issue_session_cookie(response, db, user.id)
    logger.info("Registered user %s", user.username)
    return UserResponse(id=user.id, username=user.username)


@router.post(
    "/login",
    status_code=201,
    response_model=UserResponse,
    responses={**_error_responses, 401: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def login(
    payload: CredentialsRequest,
    response: Response,
    db: Session = Depends(get_db),
    service: UserService = Depends(get_user_service),
):
    try:
        user = service.login(payload.username, payload.password)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except WrongPasswordError as exc:
        raise HTTPException(status_code=401, detail=str(exc)) from exc
    except Exception as exc:
        raise _internal_error(exc) from exc

    issue_session_cookie(response, db, user.id)
    logger.info("User %s logged in", user.username)
    return UserResponse(id=user.id, username=user.username)


@router.get("/users/me", response_model=UserResponse, responses={401: {"model": ErrorResponse}})
def current_user(user: User = Depends(get_current_user)):
    return UserResponse(id=user.id, username=user.username)
