"""Tests for bearer tokens and sessions.

Run with: pytest tests/test_authentication.py -v
"""

import pytest
from django.conf import settings
from jose import JWTError, jwt

from accounts.models import Session
from accounts.tokens import create_access_token, decode_access_token, open_session


class TestTokens:
    def test_token_carries_user_id(self):
        assert decode_access_token(create_access_token(42)) == 42

    def test_garbage_token_raises(self):
        with pytest.raises(JWTError):
            decode_access_token("lorem")

    def test_token_signed_with_other_secret_raises(self):
        token = jwt.encode({"userId": 1}, "not-the-secret", algorithm="HS256")

        with pytest.raises(JWTError):
            decode_access_token(token)

    def test_token_without_user_id_raises(self):
        token = jwt.encode({"sub": "1"}, settings.JWT_SECRET, algorithm="HS256")

        with pytest.raises(JWTError):
            decode_access_token(token)


@pytest.mark.django_db
class TestSessions:
    def test_open_session_records_token(self, user):
        session = open_session(user)

        assert Session.objects.get(user=user).token == session.token
        assert decode_access_token(session.token) == user.id

    def test_inactive_user_is_rejected(self, api_client, user, eligible_user):
        token = open_session(user).token
        user.is_active = False
        user.save()
        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")

        assert api_client.get("/hotels").status_code == 401

    def test_deleted_session_is_rejected(self, api_client, user, eligible_user):
        session = open_session(user)
        session.delete()
        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {session.token}")

        assert api_client.get("/hotels").status_code == 401
