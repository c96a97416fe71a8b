# ==========================================
# apps/deals/admin.py
# ==========================================

from django.contrib import admin
from django.utils.html import format_html
from apps.deals.models import Deal, Favorite


@admin.register(Deal)
class DealAdmin(admin.ModelAdmin):
    """Admin interface for Deals."""
    
    list_display = [
        'title',
        'business',
        'discount_value',
        'expiry_date',
        'redemption_progress',
        'is_active',
        'created_at',
    ]
    list_filter = ['is_active', 'business__category', 'expiry_date', 'created_at']
    search_fields = ['title', 'description', 'business__name']
    readonly_fields = ['current_redemptions', 'created_at', 'updated_at']
    raw_id_fields = ['business']
    date_hierarchy = 'created_at'
    ordering = ['-created_at']
    
    fieldsets = (
        ('Offer', {
            'fields': ('business', 'title', 'description', 'discount_value', 'terms')
        }),
        ('Availability', {
            'fields': ('expiry_date', 'is_active', 'max_redemptions', 'current_redemptions')
        }),
        ('Metadata', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )
    
    def redemption_progress(self, obj):
        """Show redemptions against the cap."""
        cap = obj.max_redemptions if obj.max_redemptions is not None else '∞'
        color = '#B85C5C' if obj.is_fully_redeemed else '#6B8E5E'
        return format_html(
            '<span style="color: {};">{} / {}</span>',
            color,
            obj.current_redemptions,
            cap,
        )
    redemption_progress.short_description = 'Redeemed'
    
    actions = ['activate_deals', 'deactivate_deals']
    
    @admin.action(description='Activate selected deals')
    def activate_deals(self, request, queryset):
        count = queryset.update(is_active=True)
        self.message_user(request, f"Activated {count} deal(s).")
    
    @admin.action(description='Deactivate selected deals')
    def deactivate_deals(self, request, queryset):
        count = queryset.update(is_active=False)
        self.message_user(request, f"Deactivated {count} deal(s).")


@admin.register(Favorite)
class FavoriteAdmin(admin.ModelAdmin):
    """Admin interface for Favorites."""
    
    list_display = ['user', 'deal', 'created_at']
    search_fields = ['user__email', 'deal__title']
    raw_id_fields = ['user', 'deal']
    ordering = ['-created_at']
