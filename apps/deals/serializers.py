from django.utils import timezone
from rest_framework import serializers
from .models import Deal
from apps.businesses.serializers import BusinessMinimalSerializer


class DealSerializer(serializers.ModelSerializer):
    """Deal with business metadata and availability flags."""
    
    business = BusinessMinimalSerializer(read_only=True)
    is_expired = serializers.BooleanField(read_only=True)
    is_fully_redeemed = serializers.BooleanField(read_only=True)
    is_available = serializers.BooleanField(read_only=True)
    remaining_redemptions = serializers.IntegerField(read_only=True, allow_null=True)
    
    class Meta:
        model = Deal
        fields = [
            'id',
            'business',
            'title',
            'description',
            'discount_value',
            'terms',
            'expiry_date',
            'is_active',
            'max_redemptions',
            'current_redemptions',
            'remaining_redemptions',
            'is_expired',
            'is_fully_redeemed',
            'is_available',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class DealCreateSerializer(serializers.ModelSerializer):
    """Serializer for publishing deals."""
    
    class Meta:
        model = Deal
        fields = [
            'title',
            'description',
            'discount_value',
            'terms',
            'expiry_date',
            'max_redemptions',
        ]
    
    def validate_expiry_date(self, value):
        if value <= timezone.now():
            raise serializers.ValidationError('Expiry date must be in the future')
        return value


class SetDealActiveSerializer(serializers.Serializer):
    is_active = serializers.BooleanField()


class FavoriteInputSerializer(serializers.Serializer):
    deal_id = serializers.UUIDField()


class FavoriteToggleResponseSerializer(serializers.Serializer):
    deal_id = serializers.UUIDField()
    is_favorite = serializers.BooleanField()


class FavoriteIdsSerializer(serializers.Serializer):
    deal_ids = serializers.ListField(child=serializers.UUIDField())
