# ==========================================
# apps/members/admin.py
# ==========================================

from django.contrib import admin
from .models import Member


@admin.register(Member)
class MemberAdmin(admin.ModelAdmin):
    """
    Admin interface for loyalty members.

    Contact details are editable; the points balance is shown read-only
    because it only changes through loyalty earn/redeem operations.
    """

    list_display = [
        'name',
        'email',
        'phone',
        'points_balance',
        'created_at',
    ]

    list_filter = [
        'created_at',
    ]

    search_fields = [
        'name',
        'email',
        'phone',
    ]

    ordering = ['-created_at']
    date_hierarchy = 'created_at'

    fields = ['name', 'email', 'phone', 'points_balance', 'created_at', 'updated_at']
    readonly_fields = ['points_balance', 'created_at', 'updated_at']

    def has_delete_permission(self, request, obj=None):
        """Members with a ledger history must not be removed."""
        return False
