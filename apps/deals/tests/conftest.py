from datetime import timedelta

import pytest
from django.utils import timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, UserType
from apps.businesses.models import Business, BusinessCategory
from apps.deals.models import Deal


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
        name='Rita Rival',
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
    """Active deal expiring in a week."""
    return Deal.objects.create(
        business=business,
        title='Lunch Special',
        description='Two courses for the price of one',
        discount_value='50% OFF',
        expiry_date=timezone.now() + timedelta(days=7),
    )


@pytest.fixture
def expired_deal(business):
    return Deal.objects.create(
        business=business,
        title='Old Breakfast',
        description='Gone already',
        discount_value='10% OFF',
        expiry_date=timezone.now() - timedelta(hours=1),
    )


@pytest.fixture
def inactive_deal(business):
    return Deal.objects.create(
        business=business,
        title='Paused Dinner',
        description='Temporarily off',
        discount_value='20% OFF',
        expiry_date=timezone.now() + timedelta(days=7),
        is_active=False,
    )


@pytest.fixture
def salon_deal(other_business):
    return Deal.objects.create(
        business=other_business,
        title='Manicure',
        description='Classic manicure',
        discount_value='$10 OFF',
        expiry_date=timezone.now() + timedelta(days=3),
    )


@pytest.fixture
def customer_client(customer):
    return _client_for(customer)


@pytest.fixture
def business_client(business_user, business):
    return _client_for(business_user)
