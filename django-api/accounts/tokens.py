"""JWT helpers for bearer tokens."""

from django.conf import settings
from jose import JWTError, jwt

from accounts.models import Session


def create_access_token(user_id: int) -> str:
    """Sign a token identifying the user."""
    return jwt.encode(
        {"userId": user_id}, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM
    )


def decode_access_token(token: str) -> int:
    """Return the user id carried by the token.

    Raises:
        JWTError: If the token is malformed, badly signed or has no user id.
    """
    payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    user_id = payload.get("userId")
    if not isinstance(user_id, int):
        raise JWTError("Token carries no user id")
    return user_id


def open_session(user) -> Session:
    """Issue a token for the user and record it as an active session."""
    return Session.objects.create(user=user, token=create_access_token(user.pk))
