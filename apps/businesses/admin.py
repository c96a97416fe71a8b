# ==========================================
# apps/businesses/admin.py
# ==========================================

from django.contrib import admin
from apps.businesses.models import Business


@admin.register(Business)
class BusinessAdmin(admin.ModelAdmin):
    """Admin interface for Businesses."""
    
    list_display = [
        'name',
        'owner',
        'category',
        'address',
        'deal_count',
        'created_at',
    ]
    list_filter = ['category', 'created_at']
    search_fields = ['name', 'address', 'owner__email']
    readonly_fields = ['created_at', 'updated_at']
    raw_id_fields = ['owner']
    ordering = ['name']
    
    fieldsets = (
        ('Basic Information', {
            'fields': ('name', 'owner', 'category', 'description', 'logo_url')
        }),
        ('Location', {
            'fields': ('address', 'latitude', 'longitude')
        }),
        ('Metadata', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )
    
    def deal_count(self, obj):
        """Show number of deals published."""
        return obj.deals.count()
    deal_count.short_description = 'Deals'
