from rest_framework import serializers
from .models import Member


# =============================================================================
# Input Serializers
# =============================================================================

class MemberCreateSerializer(serializers.Serializer):
    """Validate input for enrolling a member."""

    name = serializers.CharField(max_length=200)
    email = serializers.EmailField(max_length=255)
    phone = serializers.CharField(max_length=30, required=False, allow_blank=True, default='')


class MemberUpdateSerializer(serializers.Serializer):
    """Validate input for updating member contact details."""

    name = serializers.CharField(max_length=200, required=False)
    email = serializers.EmailField(max_length=255, required=False)
    phone = serializers.CharField(max_length=30, required=False, allow_blank=True)


# =============================================================================
# Output Serializers
# =============================================================================

class MemberSerializer(serializers.ModelSerializer):
    """Member with current points balance."""

    class Meta:
        model = Member
        fields = [
            'id',
            'name',
            'email',
            'phone',
            'points_balance',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class MemberMinimalSerializer(serializers.ModelSerializer):
    """Minimal member info for nested serialization."""

    class Meta:
        model = Member
        fields = ['id', 'name', 'email']
        read_only_fields = fields
