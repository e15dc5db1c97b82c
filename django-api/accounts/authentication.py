"""Bearer token authentication for DRF views."""

import logging

from jose import JWTError
from rest_framework.authentication import BaseAuthentication, get_authorization_header
from rest_framework.exceptions import AuthenticationFailed

from accounts.models import Session
from accounts.tokens import decode_access_token

logger = logging.getLogger(__name__)


class BearerTokenAuthentication(BaseAuthentication):
    """Accepts ``Authorization: Bearer <jwt>`` when the token has a live session.

    Requests without the header are left unauthenticated so that permission
    classes reject them with 401.
    """

    keyword = "Bearer"

    def authenticate(self, request):
        auth = get_authorization_header(request).split()
        if not auth or auth[0].lower() != self.keyword.lower().encode():
            return None
        if len(auth) != 2:
            raise AuthenticationFailed("Invalid token header.")

        try:
            token = auth[1].decode()
        except UnicodeError:
            raise AuthenticationFailed("Invalid token header.") from None

        try:
            user_id = decode_access_token(token)
        except JWTError:
            raise AuthenticationFailed("You must be signed in to continue") from None

        session = (
            Session.objects.select_related("user")
            .filter(token=token, user_id=user_id)
            .first()
        )
        if session is None:
            logger.info("rejected token for user %s: no active session", user_id)
            raise AuthenticationFailed("You must be signed in to continue")
        if not session.user.is_active:
            raise AuthenticationFailed("You must be signed in to continue")
        return session.user, session

    def authenticate_header(self, request) -> str:
        return self.keyword
