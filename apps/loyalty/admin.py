# ==========================================
# apps/loyalty/admin.py
# ==========================================

from django.contrib import admin
from django.utils.html import format_html
from .models import LedgerEntry, EntryKind


@admin.register(LedgerEntry)
class LedgerEntryAdmin(admin.ModelAdmin):
    """
    Read-only view of the points ledger.

    Entries are written only by earn/redeem operations and are never
    changed afterwards, so add, change and delete are all disabled.
    """

    list_display = [
        'created_at',
        'member',
        'kind_badge',
        'points_delta',
        'product',
        'description',
    ]

    list_filter = [
        'kind',
        'created_at',
    ]

    search_fields = [
        'member__name',
        'member__email',
        'description',
    ]

    list_select_related = ['member', 'product']
    ordering = ['-created_at']
    date_hierarchy = 'created_at'

    readonly_fields = [
        'id',
        'member',
        'product',
        'points_delta',
        'kind',
        'description',
        'sequence',
        'created_at',
    ]

    def kind_badge(self, obj):
        color = '#28a745' if obj.kind == EntryKind.EARNED else '#dc3545'
        return format_html(
            '<span style="background-color: {}; color: white; padding: 3px 8px; '
            'border-radius: 3px;">{}</span>',
            color,
            obj.get_kind_display()
        )
    kind_badge.short_description = 'Kind'
    kind_badge.admin_order_field = 'kind'

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
