"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from accounts.tokens import open_session
from enrollments.models import Ticket
from tests import factories


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def user(db):
    return factories.create_user()


@pytest.fixture
def token(user) -> str:
    return open_session(user).token


@pytest.fixture
def auth_client(api_client: APIClient, token: str) -> APIClient:
    api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
    return api_client


@pytest.fixture
def eligible_user(user):
    """User with an enrollment and a paid, in-person, hotel-inclusive ticket."""
    enrollment = factories.create_enrollment_with_address(user)
    ticket_type = factories.create_ticket_type(includes_hotel=True, is_remote=False)
    factories.create_ticket(enrollment, ticket_type, Ticket.Status.PAID)
    return user
