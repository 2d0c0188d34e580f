# ==========================================
# apps/products/admin.py
# ==========================================

from django.contrib import admin
from .models import Product


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    """Admin interface for the coffee-shop menu."""

    list_display = [
        'name',
        'category',
        'price',
        'updated_at',
    ]

    list_filter = [
        'category',
    ]

    search_fields = [
        'name',
        'description',
    ]

    ordering = ['category', 'name']
    readonly_fields = ['created_at', 'updated_at']

    def has_delete_permission(self, request, obj=None):
        """Products referenced by ledger entries stay on record."""
        if obj is not None and obj.ledger_entries.exists():
            return False
        return super().has_delete_permission(request, obj)
