import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.members.models import Member


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def staff_user(db):
    return User.objects.create_user(
        email='barista@example.com',
        password='TestPass123!',
        display_name='Test Barista',
        is_staff=True,
    )


@pytest.fixture
def authenticated_client(api_client, staff_user):
    """Return an authenticated API client using JWT."""
    refresh = RefreshToken.for_user(staff_user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def member(db):
    """Create and return a member."""
    return Member.objects.create(
        name='Alice Novak',
        email='alice@example.com',
        phone='+420 601 000 001',
    )


@pytest.fixture
def member_bob(db):
    return Member.objects.create(name='Bob Dvorak', email='bob@example.com')
