from rest_framework import serializers
from .models import User


class StaffSerializer(serializers.ModelSerializer):
    """Staff account as shown to the client."""

    name = serializers.CharField(source='get_display_name', read_only=True)

    class Meta:
        model = User
        fields = ['id', 'email', 'name', 'role', 'is_staff', 'last_login']
        read_only_fields = fields


class StaffLoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, style={'input_type': 'password'})
