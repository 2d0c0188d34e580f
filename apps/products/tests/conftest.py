import pytest
from decimal import Decimal
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.products.models import Product


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
def menu(db):
    """A small menu across two categories."""
    return {
        'espresso': Product.objects.create(name='Espresso', price=Decimal('45.00'), category='Coffee'),
        'cappuccino': Product.objects.create(
            name='Cappuccino',
            price=Decimal('65.00'),
            category='Coffee',
            description='Espresso with steamed milk foam',
        ),
        'croissant': Product.objects.create(name='Croissant', price=Decimal('49.00'), category='Pastry'),
    }
