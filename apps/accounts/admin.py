from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from .models import User


@admin.register(User)
class StaffAdmin(BaseUserAdmin):
    """Counter staff accounts. Email replaces the username."""

    list_display = ['email', 'display_name', 'role', 'is_active', 'last_login']
    list_filter = ['role', 'is_active', 'is_staff']
    search_fields = ['email', 'display_name']
    ordering = ['email']

    fieldsets = (
        (None, {'fields': ('email', 'display_name', 'role', 'password')}),
        ('Access', {'fields': ('is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions')}),
        ('Activity', {'fields': ('created_at', 'last_login')}),
    )
    add_fieldsets = (
        (None, {
            'classes': ('wide',),
            'fields': ('email', 'display_name', 'role', 'password1', 'password2', 'is_staff'),
        }),
    )
    readonly_fields = ['created_at', 'last_login']

    actions = ['revoke_counter_access']

    @admin.action(description='Revoke counter access')
    def revoke_counter_access(self, request, queryset):
        # Superusers keep access so the shop cannot lock itself out
        count = queryset.filter(is_superuser=False).update(is_active=False)
        self.message_user(request, f'Revoked access for {count} account(s).')
