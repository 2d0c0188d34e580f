import pytest
from django.urls import reverse
from rest_framework import status
from apps.accounts.models import User
from apps.accounts.services import (
    authenticate_staff,
    InvalidCredentialsError,
    InactiveAccountError,
    NotStaffError,
)


# =============================================================================
# Login Tests
# =============================================================================

@pytest.mark.django_db
class TestLogin:
    """Tests for POST /api/auth/login/"""

    def test_login_returns_tokens(self, api_client, barista):
        response = api_client.post(reverse('accounts:login'), {
            'email': 'barista@example.com',
            'password': 'TestPass123!',
        })

        assert response.status_code == status.HTTP_200_OK
        assert set(response.data['tokens']) == {'access', 'refresh'}
        assert response.data['staff']['email'] == barista.email
        assert response.data['staff']['name'] == 'Test Barista'
        assert response.data['staff']['role'] == 'barista'

    def test_access_token_authenticates(self, api_client, barista):
        response = api_client.post(reverse('accounts:login'), {
            'email': 'barista@example.com',
            'password': 'TestPass123!',
        })
        access = response.data['tokens']['access']

        api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {access}')
        response = api_client.get(reverse('accounts:current-staff'))

        assert response.status_code == status.HTTP_200_OK

    def test_refresh_token(self, api_client, barista):
        response = api_client.post(reverse('accounts:login'), {
            'email': 'barista@example.com',
            'password': 'TestPass123!',
        })

        response = api_client.post(reverse('token_refresh'), {
            'refresh': response.data['tokens']['refresh'],
        })

        assert response.status_code == status.HTTP_200_OK
        assert 'access' in response.data

    @pytest.mark.parametrize('email, password', [
        ('barista@example.com', 'WrongPassword!'),
        ('nobody@example.com', 'TestPass123!'),
    ])
    def test_bad_credentials(self, api_client, barista, email, password):
        response = api_client.post(reverse('accounts:login'), {'email': email, 'password': password})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data['error'] == 'Invalid email or password'

    def test_deactivated_account(self, api_client, former_barista):
        response = api_client.post(reverse('accounts:login'), {
            'email': former_barista.email,
            'password': 'TestPass123!',
        })

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_non_staff_account(self, api_client, non_staff):
        response = api_client.post(reverse('accounts:login'), {
            'email': non_staff.email,
            'password': 'TestPass123!',
        })

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_missing_password(self, api_client):
        response = api_client.post(reverse('accounts:login'), {'email': 'barista@example.com'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'password' in response.data


# =============================================================================
# Current Staff Tests
# =============================================================================

@pytest.mark.django_db
class TestCurrentStaff:
    """Tests for GET /api/auth/user/"""

    def test_profile(self, staff_client, barista):
        response = staff_client.get(reverse('accounts:current-staff'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['email'] == barista.email
        assert 'password' not in response.data

    def test_unauthenticated(self, api_client):
        response = api_client.get(reverse('accounts:current-staff'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


# =============================================================================
# Service Tests
# =============================================================================

@pytest.mark.django_db
class TestAuthenticateStaff:

    def test_stamps_last_login(self, barista):
        assert barista.last_login is None

        authenticate_staff(email='barista@example.com', password='TestPass123!')

        barista.refresh_from_db()
        assert barista.last_login is not None

    def test_domain_part_is_case_insensitive(self, barista):
        user = authenticate_staff(email='barista@EXAMPLE.COM', password='TestPass123!')
        assert user == barista

    def test_errors(self, barista, former_barista, non_staff):
        with pytest.raises(InvalidCredentialsError):
            authenticate_staff(email=barista.email, password='nope')
        with pytest.raises(InactiveAccountError):
            authenticate_staff(email=former_barista.email, password='TestPass123!')
        with pytest.raises(NotStaffError):
            authenticate_staff(email=non_staff.email, password='TestPass123!')


@pytest.mark.django_db
class TestUserManager:

    def test_email_required(self):
        with pytest.raises(ValueError):
            User.objects.create_user(email='', password='x')

    def test_superuser_flags(self):
        admin_user = User.objects.create_superuser(email='owner@example.com', password='x')

        assert admin_user.is_staff
        assert admin_user.is_superuser
        assert admin_user.role == 'manager'

    def test_display_name_falls_back_to_email(self):
        user = User.objects.create_user(email='night.shift@example.com', password='x')
        assert user.get_display_name() == 'night.shift'
