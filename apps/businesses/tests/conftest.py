import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, UserType
from apps.businesses.models import Business, BusinessCategory


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def customer(db):
    """Create and return a customer account."""
    return User.objects.create_user(
        email='customer@example.com',
        password='TestPass123!',
        name='Carla Customer',
        user_type=UserType.CUSTOMER,
    )


@pytest.fixture
def business_user(db):
    """Create and return a business account without a business."""
    return User.objects.create_user(
        email='owner@example.com',
        password='TestPass123!',
        name='Oscar Owner',
        user_type=UserType.BUSINESS,
    )


@pytest.fixture
def business(business_user):
    """Create and return a business owned by business_user."""
    return Business.objects.create(
        owner=business_user,
        name='Corner Bistro',
        address='1 Main Street',
        category=BusinessCategory.RESTAURANT,
    )


@pytest.fixture
def customer_client(customer):
    """Return an API client authenticated as the customer."""
    client = APIClient()
    refresh = RefreshToken.for_user(customer)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def business_client(business_user):
    """Return an API client authenticated as the business account."""
    client = APIClient()
    refresh = RefreshToken.for_user(business_user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client
