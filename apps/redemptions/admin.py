# ==========================================
# apps/redemptions/admin.py
# ==========================================

from django.contrib import admin
from django.utils.html import format_html
from apps.redemptions.models import Redemption, RedemptionStatus


STATUS_COLORS = {
    RedemptionStatus.PENDING: '#C9A227',
    RedemptionStatus.REDEEMED: '#6B8E5E',
    RedemptionStatus.EXPIRED: '#B85C5C',
}


@admin.register(Redemption)
class RedemptionAdmin(admin.ModelAdmin):
    """
    Admin interface for Redemptions.

    Read-only: codes change state only through the verify/finalize flow.
    """
    
    list_display = [
        'redemption_code',
        'deal',
        'business',
        'user',
        'status_badge',
        'created_at',
        'expires_at',
        'redeemed_at',
    ]
    list_filter = ['status', 'created_at']
    search_fields = ['redemption_code', 'deal__title', 'business__name', 'user__email']
    readonly_fields = [
        'redemption_code',
        'deal',
        'business',
        'user',
        'status',
        'created_at',
        'expires_at',
        'redeemed_at',
    ]
    date_hierarchy = 'created_at'
    ordering = ['-created_at']
    
    def status_badge(self, obj):
        """Display status as colored badge."""
        return format_html(
            '<span style="background: {}; color: white; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{}</span>',
            STATUS_COLORS.get(obj.status, '#999'),
            obj.get_status_display(),
        )
    status_badge.short_description = 'Status'
    status_badge.admin_order_field = 'status'
    
    def has_add_permission(self, request):
        return False
