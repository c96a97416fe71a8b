from datetime import timedelta

import pytest
from django.utils import timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, UserType
from apps.businesses.models import Business, BusinessCategory
from apps.deals.models import Deal
from apps.redemptions.services import request_code


def _client_for(user):
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def customer(db):
    return User.objects.create_user(
        email='customer@example.com',
        password='TestPass123!',
        name='Carla Customer',
        user_type=UserType.CUSTOMER,
    )


@pytest.fixture
def other_customer(db):
    return User.objects.create_user(
        email='second@example.com',
        password='TestPass123!',
        name='Sam Second',
        user_type=UserType.CUSTOMER,
    )


@pytest.fixture
def business_user(db):
    return User.objects.create_user(
        email='owner@example.com',
        password='TestPass123!',
        name='Oscar Owner',
        user_type=UserType.BUSINESS,
    )


@pytest.fixture
def business(business_user):
    return Business.objects.create(
        owner=business_user,
        name='Corner Bistro',
        address='1 Main Street',
        category=BusinessCategory.RESTAURANT,
    )


@pytest.fixture
def other_business(db):
    owner = User.objects.create_user(
        email='rival@example.com',
        password='TestPass123!',
        user_type=UserType.BUSINESS,
    )
    return Business.objects.create(
        owner=owner,
        name='Glow Salon',
        address='9 Side Street',
        category=BusinessCategory.SALON_SPA,
    )


@pytest.fixture
def deal(business):
    """Uncapped deal expiring in a week."""
    return Deal.objects.create(
        business=business,
        title='Lunch Special',
        description='Two courses for the price of one',
        discount_value='50% OFF',
        expiry_date=timezone.now() + timedelta(days=7),
    )


@pytest.fixture
def capped_deal(business):
    """Deal that can be redeemed once."""
    return Deal.objects.create(
        business=business,
        title='Free Dessert',
        description='First guest only',
        discount_value='FREE',
        expiry_date=timezone.now() + timedelta(days=7),
        max_redemptions=1,
    )


@pytest.fixture
def redemption(deal, customer):
    """Pending code issued for the deal."""
    return request_code(deal=deal, user=customer)


@pytest.fixture
def expired_redemption(redemption):
    """Pending code whose TTL has already run out."""
    redemption.expires_at = timezone.now() - timedelta(seconds=1)
    redemption.save(update_fields=['expires_at'])
    return redemption


@pytest.fixture
def customer_client(customer):
    return _client_for(customer)


@pytest.fixture
def other_customer_client(other_customer):
    return _client_for(other_customer)


@pytest.fixture
def business_client(business_user, business):
    return _client_for(business_user)


@pytest.fixture
def other_business_client(other_business):
    return _client_for(other_business.owner)
