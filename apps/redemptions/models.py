# ==========================================
# apps/redemptions/models.py
# ==========================================

from django.db import models
from django.utils import timezone
import uuid


class RedemptionStatus(models.TextChoices):
    PENDING = 'pending', 'Pending'
    REDEEMED = 'redeemed', 'Redeemed'
    EXPIRED = 'expired', 'Expired'


class Redemption(models.Model):
    """
    Single-use code binding a customer to a deal.

    Status only moves forward: pending -> redeemed or pending -> expired.
    Both end states are terminal.
    """
    
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    deal = models.ForeignKey('deals.Deal', on_delete=models.CASCADE, related_name='redemptions')
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='redemptions')
    business = models.ForeignKey('businesses.Business', on_delete=models.CASCADE, related_name='redemptions')
    redemption_code = models.CharField(max_length=32, unique=True, db_index=True, editable=False)
    status = models.CharField(
        max_length=20,
        choices=RedemptionStatus.choices,
        default=RedemptionStatus.PENDING
    )
    # Set explicitly at issue time so expires_at - created_at is exactly the TTL
    created_at = models.DateTimeField(default=timezone.now, editable=False)
    redeemed_at = models.DateTimeField(null=True, blank=True)
    expires_at = models.DateTimeField()
    
    class Meta:
        db_table = 'redemptions'
        indexes = [
            models.Index(fields=['business', 'status'], name='redemptions_business_st_idx'),
            models.Index(fields=['user', 'created_at'], name='redemptions_user_created_idx'),
            models.Index(fields=['deal', 'status'], name='redemptions_deal_status_idx'),
        ]
        ordering = ['-created_at']
    
    def __str__(self):
        return f"{self.redemption_code} ({self.status})"
    
    @property
    def is_pending(self):
        return self.status == RedemptionStatus.PENDING
    
    def is_past_expiry(self, now=None):
        return self.expires_at < (now or timezone.now())
    
    def seconds_remaining(self, now=None):
        """Whole seconds left before expiry, never negative."""
        delta = self.expires_at - (now or timezone.now())
        return max(int(delta.total_seconds()), 0)
