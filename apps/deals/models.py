# ==========================================
# apps/deals/models.py
# ==========================================

from django.db import models
from django.core.validators import MinValueValidator
from django.utils import timezone
import uuid


class Deal(models.Model):
    """Time-limited discount offer published by a business."""
    
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    business = models.ForeignKey('businesses.Business', on_delete=models.CASCADE, related_name='deals')
    title = models.CharField(max_length=200)
    description = models.TextField()
    discount_value = models.CharField(max_length=50)
    terms = models.TextField(blank=True)
    expiry_date = models.DateTimeField()
    is_active = models.BooleanField(default=True)
    max_redemptions = models.PositiveIntegerField(null=True, blank=True, validators=[MinValueValidator(1)])
    current_redemptions = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)
    
    class Meta:
        db_table = 'deals'
        indexes = [
            models.Index(fields=['is_active', 'expiry_date'], name='deals_active_expiry_idx'),
            models.Index(fields=['business', 'created_at'], name='deals_business_created_idx'),
            models.Index(fields=['created_at'], name='deals_created_idx'),
        ]
        ordering = ['-created_at']
    
    def __str__(self):
        return f"{self.title} ({self.discount_value})"
    
    @property
    def is_expired(self):
        return self.expiry_date <= timezone.now()
    
    @property
    def is_fully_redeemed(self):
        return (
            self.max_redemptions is not None
            and self.current_redemptions >= self.max_redemptions
        )
    
    @property
    def remaining_redemptions(self):
        """Redemptions left before the cap, or None when uncapped."""
        if self.max_redemptions is None:
            return None
        return max(self.max_redemptions - self.current_redemptions, 0)
    
    @property
    def is_available(self):
        return not self.is_fully_redeemed


class Favorite(models.Model):
    """Deal bookmarked by a user."""
    
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='favorites')
    deal = models.ForeignKey(Deal, on_delete=models.CASCADE, related_name='favorited_by')
    created_at = models.DateTimeField(auto_now_add=True)
    
    class Meta:
        db_table = 'favorites'
        unique_together = [['user', 'deal']]
        indexes = [
            models.Index(fields=['user', 'created_at'], name='favorites_user_created_idx'),
        ]
        ordering = ['-created_at']
    
    def __str__(self):
        return f"{self.user.email} - {self.deal.title}"
