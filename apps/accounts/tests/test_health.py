import pytest
from django.urls import reverse
from rest_framework import status


@pytest.mark.django_db
class TestHealthCheck:
    """Tests for GET /api/health/ and the JSON error handlers."""

    def test_health_check_is_public(self, api_client):
        response = api_client.get(reverse('health-check'))

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {'status': 'healthy', 'database': 'ok'}

    def test_health_check_rejects_post(self, api_client):
        response = api_client.post(reverse('health-check'))

        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED

    def test_schema_is_public(self, api_client):
        response = api_client.get(reverse('api-schema'))

        assert response.status_code == status.HTTP_200_OK
