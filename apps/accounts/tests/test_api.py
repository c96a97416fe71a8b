import pytest
from django.urls import reverse
from rest_framework import status
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, UserType
from apps.accounts.services import (
    register_user,
    authenticate_user,
    UserRegistrationError,
    InvalidCredentialsError,
    InactiveAccountError,
)


# =============================================================================
# Registration Tests
# =============================================================================

@pytest.mark.django_db
class TestRegistration:
    """Tests for POST /api/auth/register/"""

    def test_register_customer(self, api_client):
        """Successfully register a customer account."""
        url = reverse('users:register')
        data = {
            'email': 'newuser@example.com',
            'password': 'SecurePass123!',
            'password_confirm': 'SecurePass123!',
            'name': 'New User',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_201_CREATED
        assert 'access' in response.data['tokens']
        assert 'refresh' in response.data['tokens']
        assert response.data['user']['user_type'] == UserType.CUSTOMER
        assert User.objects.filter(email='newuser@example.com').exists()

    def test_register_business(self, api_client):
        """Account type is taken from the request."""
        url = reverse('users:register')
        data = {
            'email': 'shop@example.com',
            'password': 'SecurePass123!',
            'password_confirm': 'SecurePass123!',
            'user_type': 'business',
            'phone': '+420 777 000 111',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_201_CREATED
        user = User.objects.get(email='shop@example.com')
        assert user.is_business
        assert user.phone == '+420 777 000 111'

    def test_register_unknown_user_type(self, api_client):
        url = reverse('users:register')
        data = {
            'email': 'admin@example.com',
            'password': 'SecurePass123!',
            'password_confirm': 'SecurePass123!',
            'user_type': 'admin',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'user_type' in response.data

    def test_register_duplicate_email(self, api_client, user):
        """Cannot register with existing email."""
        url = reverse('users:register')
        data = {
            'email': user.email,
            'password': 'SecurePass123!',
            'password_confirm': 'SecurePass123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_register_password_mismatch(self, api_client):
        """Registration fails when passwords don't match."""
        url = reverse('users:register')
        data = {
            'email': 'mismatch@example.com',
            'password': 'SecurePass123!',
            'password_confirm': 'DifferentPass123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'password_confirm' in response.data

    def test_register_weak_password(self, api_client):
        url = reverse('users:register')
        data = {
            'email': 'weak@example.com',
            'password': '123',
            'password_confirm': '123',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST


# =============================================================================
# Login Tests
# =============================================================================

@pytest.mark.django_db
class TestLogin:
    """Tests for POST /api/auth/login/"""

    def test_login_success(self, api_client, user):
        url = reverse('users:login')
        data = {
            'email': user.email,
            'password': 'TestPass123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_200_OK
        assert 'access' in response.data['tokens']
        assert response.data['user']['email'] == user.email

        user.refresh_from_db()
        assert user.last_login is not None

    def test_login_is_case_insensitive_on_email(self, api_client, user):
        url = reverse('users:login')
        response = api_client.post(url, {
            'email': 'TestUser@Example.com',
            'password': 'TestPass123!',
        })

        assert response.status_code == status.HTTP_200_OK

    def test_login_wrong_password(self, api_client, user):
        url = reverse('users:login')
        data = {
            'email': user.email,
            'password': 'WrongPassword123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert 'error' in response.data

    def test_login_nonexistent_user(self, api_client):
        url = reverse('users:login')
        data = {
            'email': 'nonexistent@example.com',
            'password': 'SomePass123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_login_inactive_user(self, api_client, user_inactive):
        url = reverse('users:login')
        data = {
            'email': user_inactive.email,
            'password': 'TestPass123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_403_FORBIDDEN


# =============================================================================
# Logout Tests
# =============================================================================

@pytest.mark.django_db
class TestLogout:
    """Tests for POST /api/auth/logout/"""

    def test_logout_success(self, authenticated_client, user):
        url = reverse('users:logout')
        refresh = RefreshToken.for_user(user)
        response = authenticated_client.post(url, {'refresh': str(refresh)})

        assert response.status_code == status.HTTP_200_OK

    def test_logout_without_refresh_token(self, authenticated_client):
        url = reverse('users:logout')
        response = authenticated_client.post(url, {})

        assert response.status_code == status.HTTP_200_OK

    def test_logout_invalid_token(self, authenticated_client):
        url = reverse('users:logout')
        response = authenticated_client.post(url, {'refresh': 'not-a-token'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_logout_unauthenticated(self, api_client):
        url = reverse('users:logout')
        response = api_client.post(url, {})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


# =============================================================================
# Profile Tests
# =============================================================================

@pytest.mark.django_db
class TestCurrentUser:
    """Tests for GET /api/auth/user/"""

    def test_get_current_user(self, authenticated_client, user):
        url = reverse('users:current-user')
        response = authenticated_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['email'] == user.email
        assert response.data['name'] == 'Test User'
        assert response.data['user_type'] == 'customer'

    def test_get_current_user_unauthenticated(self, api_client):
        url = reverse('users:current-user')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestUpdateProfile:
    """Tests for PATCH /api/auth/user/update/"""

    def test_update_name_and_phone(self, authenticated_client, user):
        url = reverse('users:update-profile')
        response = authenticated_client.patch(
            url,
            {'name': 'Renamed', 'phone': '123456789'},
            format='json',
        )

        assert response.status_code == status.HTTP_200_OK
        user.refresh_from_db()
        assert user.name == 'Renamed'
        assert user.phone == '123456789'

    def test_user_type_is_not_editable(self, authenticated_client, user):
        url = reverse('users:update-profile')
        response = authenticated_client.patch(
            url,
            {'user_type': 'business'},
            format='json',
        )

        assert response.status_code == status.HTTP_200_OK
        user.refresh_from_db()
        assert user.user_type == UserType.CUSTOMER


# =============================================================================
# Service Tests
# =============================================================================

@pytest.mark.django_db
class TestAccountServices:

    def test_register_user_rejects_unknown_type(self):
        with pytest.raises(UserRegistrationError):
            register_user(email='x@example.com', password='SecurePass123!', user_type='root')

    def test_register_user_duplicate_email(self, user):
        with pytest.raises(UserRegistrationError):
            register_user(email=user.email, password='SecurePass123!')

    def test_authenticate_user_invalid(self, user):
        with pytest.raises(InvalidCredentialsError):
            authenticate_user(email=user.email, password='nope')

    def test_authenticate_user_inactive(self, user_inactive):
        with pytest.raises(InactiveAccountError):
            authenticate_user(email=user_inactive.email, password='TestPass123!')
