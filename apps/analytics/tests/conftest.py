import pytest
from datetime import timedelta
from django.utils import timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, UserType
from apps.businesses.models import Business, BusinessCategory
from apps.deals.models import Deal
from apps.redemptions.models import Redemption, RedemptionStatus


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


# =============================================================================
# Users
# =============================================================================

@pytest.fixture
def analytics_owner(db):
    """Create the business account whose dashboard is tested."""
    return User.objects.create_user(
        email='analytics_owner@example.com',
        password='TestPass123!',
        name='Analytics Owner',
        user_type=UserType.BUSINESS,
    )


@pytest.fixture
def analytics_customer(db):
    """Create a customer redeeming deals."""
    return User.objects.create_user(
        email='analytics_customer@example.com',
        password='TestPass123!',
        name='Analytics Customer',
        user_type=UserType.CUSTOMER,
    )


@pytest.fixture
def analytics_owner_client(analytics_owner, analytics_business):
    """Return an API client authenticated as the business owner."""
    client = APIClient()
    refresh = RefreshToken.for_user(analytics_owner)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def analytics_customer_client(analytics_customer):
    """Return an API client authenticated as the customer."""
    client = APIClient()
    refresh = RefreshToken.for_user(analytics_customer)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


# =============================================================================
# Businesses and deals
# =============================================================================

@pytest.fixture
def analytics_business(analytics_owner):
    return Business.objects.create(
        owner=analytics_owner,
        name='Analytics Cafe',
        address='5 Data Street',
        category=BusinessCategory.CAFE,
    )


@pytest.fixture
def analytics_other_business(db):
    owner = User.objects.create_user(
        email='analytics_other@example.com',
        password='TestPass123!',
        user_type=UserType.BUSINESS,
    )
    return Business.objects.create(
        owner=owner,
        name='Other Place',
        address='7 Elsewhere',
    )


@pytest.fixture
def analytics_deals(analytics_business):
    """Two active deals and one inactive deal."""
    expiry = timezone.now() + timedelta(days=7)
    return [
        Deal.objects.create(
            business=analytics_business,
            title='Latte Monday',
            description='Any latte',
            discount_value='30% OFF',
            expiry_date=expiry,
        ),
        Deal.objects.create(
            business=analytics_business,
            title='Cake Combo',
            description='Coffee and cake',
            discount_value='$3 OFF',
            expiry_date=expiry,
        ),
        Deal.objects.create(
            business=analytics_business,
            title='Winter Special',
            description='Seasonal',
            discount_value='10% OFF',
            expiry_date=expiry,
            is_active=False,
        ),
    ]


def _create_redemption(deal, user, status, minutes_ago):
    created_at = timezone.now() - timedelta(minutes=minutes_ago)
    return Redemption.objects.create(
        deal=deal,
        user=user,
        business=deal.business,
        redemption_code=f'TEST-{status[:4].upper()}-{minutes_ago:04d}',
        status=status,
        created_at=created_at,
        expires_at=created_at + timedelta(seconds=60),
        redeemed_at=created_at + timedelta(seconds=30) if status == RedemptionStatus.REDEEMED else None,
    )


@pytest.fixture
def make_redemption(db):
    """Factory creating a redemption issued ``minutes_ago`` minutes in the past."""
    return _create_redemption


@pytest.fixture
def analytics_redemptions(analytics_deals, analytics_customer, make_redemption):
    """12 redeemed, 1 pending and 1 expired redemption."""
    latte = analytics_deals[0]
    redeemed = [
        make_redemption(latte, analytics_customer, RedemptionStatus.REDEEMED, minutes_ago=minutes)
        for minutes in range(1, 13)
    ]
    make_redemption(latte, analytics_customer, RedemptionStatus.PENDING, minutes_ago=0)
    make_redemption(latte, analytics_customer, RedemptionStatus.EXPIRED, minutes_ago=100)
    return redeemed
