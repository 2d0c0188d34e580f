import uuid
import pytest
from django.urls import reverse
from rest_framework import status


# =============================================================================
# Member List / Create Tests
# =============================================================================

@pytest.mark.django_db
class TestMemberList:
    """Tests for GET/POST /api/members/"""

    def test_list_members(self, authenticated_client, member, member_bob):
        url = reverse('members:member-list')
        response = authenticated_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 2

    def test_search_members(self, authenticated_client, member, member_bob):
        url = reverse('members:member-list')
        response = authenticated_client.get(url, {'search': 'alice'})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 1
        assert response.data['results'][0]['email'] == 'alice@example.com'

    def test_list_requires_authentication(self, api_client):
        url = reverse('members:member-list')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_create_member(self, authenticated_client):
        url = reverse('members:member-list')
        data = {'name': 'Dana Kralova', 'email': 'dana@example.com'}
        response = authenticated_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['points_balance'] == 0
        assert response.data['phone'] == ''

    def test_create_duplicate_email(self, authenticated_client, member):
        url = reverse('members:member-list')
        data = {'name': 'Alice Again', 'email': 'alice@example.com'}
        response = authenticated_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'error' in response.data

    def test_create_ignores_balance(self, authenticated_client):
        """points_balance is not an input field."""
        url = reverse('members:member-list')
        data = {'name': 'Eve', 'email': 'eve@example.com', 'points_balance': 500}
        response = authenticated_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['points_balance'] == 0


# =============================================================================
# Member Detail Tests
# =============================================================================

@pytest.mark.django_db
class TestMemberDetail:
    """Tests for GET/PATCH /api/members/{id}/"""

    def test_retrieve_member(self, authenticated_client, member):
        url = reverse('members:member-detail', kwargs={'pk': member.id})
        response = authenticated_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['name'] == 'Alice Novak'
        assert response.data['points_balance'] == 0

    def test_retrieve_unknown(self, authenticated_client):
        url = reverse('members:member-detail', kwargs={'pk': uuid.uuid4()})
        response = authenticated_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_update_member(self, authenticated_client, member):
        url = reverse('members:member-detail', kwargs={'pk': member.id})
        response = authenticated_client.patch(url, {'phone': '+420 777 000 000'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['phone'] == '+420 777 000 000'

    def test_update_cannot_touch_balance(self, authenticated_client, member):
        url = reverse('members:member-detail', kwargs={'pk': member.id})
        response = authenticated_client.patch(url, {'points_balance': 999}, format='json')

        assert response.status_code == status.HTTP_200_OK
        member.refresh_from_db()
        assert member.points_balance == 0

    def test_update_unknown(self, authenticated_client):
        url = reverse('members:member-detail', kwargs={'pk': uuid.uuid4()})
        response = authenticated_client.patch(url, {'name': 'Ghost'}, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_update_duplicate_email(self, authenticated_client, member, member_bob):
        url = reverse('members:member-detail', kwargs={'pk': member_bob.id})
        response = authenticated_client.patch(url, {'email': 'alice@example.com'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
