# ==========================================
# apps/businesses/models.py
# ==========================================

from django.db import models
import uuid


class BusinessCategory(models.TextChoices):
    RESTAURANT = 'Restaurant', 'Restaurant'
    CAFE = 'Cafe', 'Cafe'
    RETAIL = 'Retail', 'Retail'
    SALON_SPA = 'Salon & Spa', 'Salon & Spa'
    FITNESS = 'Fitness', 'Fitness'
    ENTERTAINMENT = 'Entertainment', 'Entertainment'
    SERVICES = 'Services', 'Services'
    OTHER = 'Other', 'Other'


class Business(models.Model):
    """Storefront published by a business account. One per owner."""
    
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    owner = models.OneToOneField(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='business'
    )
    name = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    address = models.CharField(max_length=300)
    
    # Stored for display, not used for search
    latitude = models.DecimalField(max_digits=9, decimal_places=6, null=True, blank=True)
    longitude = models.DecimalField(max_digits=9, decimal_places=6, null=True, blank=True)
    
    category = models.CharField(
        max_length=30,
        choices=BusinessCategory.choices,
        default=BusinessCategory.RESTAURANT,
        db_index=True
    )
    logo_url = models.URLField(max_length=500, blank=True)
    
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)
    
    class Meta:
        db_table = 'businesses'
        verbose_name_plural = 'businesses'
        indexes = [
            models.Index(fields=['name'], name='businesses_name_idx'),
        ]
        ordering = ['name']
    
    def __str__(self):
        return self.name
