import pytest
from django.urls import reverse
from rest_framework import status
from rest_framework_simplejwt.tokens import RefreshToken


def client_for(api_client, user):
    refresh = RefreshToken.for_user(user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.mark.django_db
class TestIsShopStaff:
    """Member, menu and loyalty endpoints are for staff accounts only."""

    @pytest.mark.parametrize('url_name', [
        'members:member-list',
        'products:product-list',
    ])
    def test_staff_allowed(self, staff_client, url_name):
        response = staff_client.get(reverse(url_name))
        assert response.status_code == status.HTTP_200_OK

    @pytest.mark.parametrize('url_name', [
        'members:member-list',
        'products:product-list',
    ])
    def test_non_staff_forbidden(self, api_client, non_staff, url_name):
        response = client_for(api_client, non_staff).get(reverse(url_name))
        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_non_staff_cannot_post_purchase(self, api_client, non_staff):
        response = client_for(api_client, non_staff).post(reverse('loyalty:purchase'), {}, format='json')
        assert response.status_code == status.HTTP_403_FORBIDDEN
