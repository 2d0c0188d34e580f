import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def barista(db):
    """Active staff account."""
    return User.objects.create_user(
        email='barista@example.com',
        password='TestPass123!',
        display_name='Test Barista',
        is_staff=True,
    )


@pytest.fixture
def former_barista(db):
    """Deactivated staff account."""
    return User.objects.create_user(
        email='former@example.com',
        password='TestPass123!',
        is_staff=True,
        is_active=False,
    )


@pytest.fixture
def non_staff(db):
    """Account without the staff flag."""
    return User.objects.create_user(email='customer@example.com', password='TestPass123!')


@pytest.fixture
def staff_client(api_client, barista):
    """Return an API client carrying the barista's JWT."""
    refresh = RefreshToken.for_user(barista)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client
