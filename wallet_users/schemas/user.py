from pydantic import BaseModel, Field

from wallet_users.models.user import USERNAME_MAX_LENGTH


class CredentialsRequest(BaseModel):
    username: str = Field(min_length=1, max_length=USERNAME_MAX_LENGTH)
    password: str = Field(min_length=1)


class UserResponse(BaseModel):
    id: str
    username: str


class ErrorResponse(BaseModel):
    error: str
