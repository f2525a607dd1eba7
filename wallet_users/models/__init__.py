from wallet_users.models.user import User, UserSession

__all__ = [
    "User",
    "UserSession",
]
