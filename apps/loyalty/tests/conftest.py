import pytest
from decimal import Decimal
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.members.models import Member
from apps.products.models import Product
from apps.loyalty.services import InMemoryLoyaltyStore, DjangoLoyaltyStore


# =============================================================================
# In-memory store
# =============================================================================

@pytest.fixture
def memory_store():
    """Return an empty in-memory loyalty store."""
    return InMemoryLoyaltyStore()


@pytest.fixture
def store_member(memory_store):
    """Member in the in-memory store with a zero balance."""
    return memory_store.add_member(name='Alice Novak', email='alice@example.com')


@pytest.fixture
def store_latte(memory_store):
    """Product priced 20.00 in the in-memory store."""
    return memory_store.add_product(name='Latte', price=Decimal('20.00'), category='Coffee')


@pytest.fixture
def store_beans(memory_store):
    """Product priced 50.00 in the in-memory store."""
    return memory_store.add_product(name='House Blend 250g', price=Decimal('50.00'), category='Beans')


@pytest.fixture
def store_pastry(memory_store):
    """Product priced 49.00 in the in-memory store."""
    return memory_store.add_product(name='Croissant', price=Decimal('49.00'), category='Pastry')


# =============================================================================
# Django store
# =============================================================================

@pytest.fixture
def django_store(db):
    return DjangoLoyaltyStore()


@pytest.fixture
def member(db):
    """Create and return a member with a zero balance."""
    return Member.objects.create(
        name='Bob Dvorak',
        email='bob@example.com',
        phone='+420 601 000 002',
    )


@pytest.fixture
def other_member(db):
    return Member.objects.create(name='Charlie Svoboda', email='charlie@example.com')


@pytest.fixture
def latte(db):
    """Create and return a product priced 20.00."""
    return Product.objects.create(name='Latte', price=Decimal('20.00'), category='Coffee')


@pytest.fixture
def beans(db):
    """Create and return a product priced 50.00."""
    return Product.objects.create(name='House Blend 250g', price=Decimal('50.00'), category='Beans')


# =============================================================================
# API clients
# =============================================================================

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
