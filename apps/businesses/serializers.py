from rest_framework import serializers
from .models import Business, BusinessCategory
from apps.accounts.serializers import UserMinimalSerializer


class BusinessSerializer(serializers.ModelSerializer):
    """Full business profile."""
    
    owner = UserMinimalSerializer(read_only=True)
    
    class Meta:
        model = Business
        fields = [
            'id',
            'owner',
            'name',
            'description',
            'address',
            'latitude',
            'longitude',
            'category',
            'logo_url',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'owner', 'created_at', 'updated_at']


class BusinessWriteSerializer(serializers.ModelSerializer):
    """Input fields for creating or editing a business."""
    
    category = serializers.ChoiceField(
        choices=BusinessCategory.choices,
        default=BusinessCategory.RESTAURANT
    )
    
    class Meta:
        model = Business
        fields = [
            'name',
            'description',
            'address',
            'latitude',
            'longitude',
            'category',
            'logo_url',
        ]


class BusinessMinimalSerializer(serializers.ModelSerializer):
    """Business metadata nested into deals and redemptions."""
    
    class Meta:
        model = Business
        fields = ['id', 'name', 'address', 'category', 'logo_url']
        read_only_fields = fields


class CategorySerializer(serializers.Serializer):
    value = serializers.CharField()
    label = serializers.CharField()
