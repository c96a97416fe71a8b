from rest_framework import serializers
from .models import Redemption
from .services import build_qr_image_url
from apps.accounts.models import User
from apps.deals.models import Deal


class DealSummarySerializer(serializers.ModelSerializer):
    """Deal fields shown next to a code."""
    
    class Meta:
        model = Deal
        fields = ['id', 'title', 'discount_value']
        read_only_fields = fields


class CustomerSummarySerializer(serializers.ModelSerializer):
    
    class Meta:
        model = User
        fields = ['name', 'email']
        read_only_fields = fields


class RedemptionRequestSerializer(serializers.Serializer):
    deal_id = serializers.UUIDField()


class CodeVerifySerializer(serializers.Serializer):
    code = serializers.CharField(max_length=32)


class IssuedCodeSerializer(serializers.ModelSerializer):
    """Freshly issued code as shown to the customer."""
    
    deal = DealSummarySerializer(read_only=True)
    seconds_remaining = serializers.SerializerMethodField()
    qr_image_url = serializers.SerializerMethodField()
    
    class Meta:
        model = Redemption
        fields = [
            'id',
            'redemption_code',
            'status',
            'deal',
            'created_at',
            'expires_at',
            'seconds_remaining',
            'qr_image_url',
        ]
        read_only_fields = fields
    
    def get_seconds_remaining(self, obj) -> int:
        return obj.seconds_remaining()
    
    def get_qr_image_url(self, obj) -> str:
        return build_qr_image_url(obj.redemption_code)


class RedemptionDetailsSerializer(serializers.ModelSerializer):
    """What the business scanner sees after a successful verify."""
    
    deal = DealSummarySerializer(read_only=True)
    customer = CustomerSummarySerializer(source='user', read_only=True)
    
    class Meta:
        model = Redemption
        fields = ['id', 'status', 'expires_at', 'deal', 'customer']
        read_only_fields = fields


class RedemptionSerializer(serializers.ModelSerializer):
    """Redemption state after finalize."""
    
    class Meta:
        model = Redemption
        fields = [
            'id',
            'deal',
            'redemption_code',
            'status',
            'created_at',
            'redeemed_at',
            'expires_at',
        ]
        read_only_fields = fields


class RedemptionHistorySerializer(serializers.ModelSerializer):
    """Customer's past redemption with deal and business names."""
    
    deal = DealSummarySerializer(read_only=True)
    business_name = serializers.CharField(source='business.name', read_only=True)
    
    class Meta:
        model = Redemption
        fields = [
            'id',
            'redemption_code',
            'status',
            'deal',
            'business_name',
            'created_at',
            'redeemed_at',
            'expires_at',
        ]
        read_only_fields = fields
