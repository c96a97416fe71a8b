from datetime import timedelta
from unittest.mock import patch

import pytest
from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from apps.deals.models import Deal
from apps.redemptions.models import Redemption, RedemptionStatus
from apps.redemptions.services import request_code, finalize_redemption


# =============================================================================
# RequestCode
# =============================================================================

@pytest.mark.django_db
class TestRequestCodeEndpoint:
    """Tests for POST /api/redemptions/request/"""

    def test_request_code(self, customer_client, customer, deal):
        url = reverse('redemptions:request')
        response = customer_client.post(url, {'deal_id': str(deal.id)}, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        code = response.data['redemption_code']
        assert response.data['status'] == 'pending'
        assert response.data['deal']['title'] == 'Lunch Special'
        assert 0 < response.data['seconds_remaining'] <= 60
        assert 'size=300x300' in response.data['qr_image_url']
        assert f'data={code}' in response.data['qr_image_url']
        assert Redemption.objects.get(redemption_code=code).user == customer

    def test_expired_deal_is_not_found(self, customer_client, deal):
        Deal.objects.filter(pk=deal.pk).update(expiry_date=timezone.now() - timedelta(minutes=1))

        url = reverse('redemptions:request')
        response = customer_client.post(url, {'deal_id': str(deal.id)}, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert not Redemption.objects.exists()

    def test_inactive_deal_is_not_found(self, customer_client, deal):
        Deal.objects.filter(pk=deal.pk).update(is_active=False)

        url = reverse('redemptions:request')
        response = customer_client.post(url, {'deal_id': str(deal.id)}, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_business_account_cannot_request(self, business_client, deal):
        url = reverse('redemptions:request')
        response = business_client.post(url, {'deal_id': str(deal.id)}, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_unauthenticated(self, api_client, deal):
        url = reverse('redemptions:request')
        response = api_client.post(url, {'deal_id': str(deal.id)}, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_code_collisions_return_503(self, customer_client, redemption, deal):
        url = reverse('redemptions:request')
        with patch(
            'apps.redemptions.services.code_lifecycle.generate_redemption_code',
            return_value=redemption.redemption_code,
        ):
            response = customer_client.post(url, {'deal_id': str(deal.id)}, format='json')

        assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
        assert response.data['code'] == 'code_generation_failed'
        assert Redemption.objects.count() == 1


# =============================================================================
# VerifyCode
# =============================================================================

@pytest.mark.django_db
class TestVerifyCodeEndpoint:
    """Tests for POST /api/redemptions/verify/"""

    def test_verify(self, business_client, redemption):
        url = reverse('redemptions:verify')
        response = business_client.post(url, {'code': redemption.redemption_code}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['id'] == str(redemption.id)
        assert response.data['status'] == 'pending'
        assert response.data['deal']['discount_value'] == '50% OFF'
        assert response.data['customer'] == {
            'name': 'Carla Customer',
            'email': 'customer@example.com',
        }

    def test_surrounding_whitespace_is_ignored(self, business_client, redemption):
        url = reverse('redemptions:verify')
        response = business_client.post(
            url, {'code': f'  {redemption.redemption_code} '}, format='json'
        )

        assert response.status_code == status.HTTP_200_OK

    def test_unknown_code(self, business_client, redemption):
        url = reverse('redemptions:verify')
        response = business_client.post(url, {'code': 'NOPE-NOPE-NOPE'}, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['code'] == 'not_found'

    def test_other_business_gets_not_found(self, other_business_client, redemption):
        url = reverse('redemptions:verify')
        response = other_business_client.post(
            url, {'code': redemption.redemption_code}, format='json'
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_already_redeemed(self, business_client, business, redemption):
        finalize_redemption(redemption_id=redemption.id, business=business)

        url = reverse('redemptions:verify')
        response = business_client.post(url, {'code': redemption.redemption_code}, format='json')

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.data['code'] == 'already_redeemed'

    def test_expired(self, business_client, expired_redemption):
        url = reverse('redemptions:verify')
        response = business_client.post(
            url, {'code': expired_redemption.redemption_code}, format='json'
        )

        assert response.status_code == status.HTTP_410_GONE
        assert response.data['code'] == 'expired'
        expired_redemption.refresh_from_db()
        assert expired_redemption.status == RedemptionStatus.EXPIRED

    def test_customer_cannot_verify(self, customer_client, redemption):
        url = reverse('redemptions:verify')
        response = customer_client.post(url, {'code': redemption.redemption_code}, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_verify_twice_returns_same_details(self, business_client, redemption):
        url = reverse('redemptions:verify')
        first = business_client.post(url, {'code': redemption.redemption_code}, format='json')
        second = business_client.post(url, {'code': redemption.redemption_code}, format='json')

        assert first.status_code == second.status_code == status.HTTP_200_OK
        assert first.data == second.data


# =============================================================================
# FinalizeRedemption
# =============================================================================

@pytest.mark.django_db
class TestFinalizeEndpoint:
    """Tests for POST /api/redemptions/{id}/finalize/"""

    def test_finalize(self, business_client, redemption, deal):
        url = reverse('redemptions:finalize', kwargs={'redemption_id': redemption.id})
        response = business_client.post(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['status'] == 'redeemed'
        assert response.data['redeemed_at'] is not None
        deal.refresh_from_db()
        assert deal.current_redemptions == 1

    def test_second_finalize_conflicts(self, business_client, redemption, deal):
        url = reverse('redemptions:finalize', kwargs={'redemption_id': redemption.id})
        business_client.post(url)
        response = business_client.post(url)

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.data['code'] == 'already_redeemed'
        deal.refresh_from_db()
        assert deal.current_redemptions == 1

    def test_expired(self, business_client, expired_redemption):
        url = reverse('redemptions:finalize', kwargs={'redemption_id': expired_redemption.id})
        response = business_client.post(url)

        assert response.status_code == status.HTTP_410_GONE
        expired_redemption.refresh_from_db()
        assert expired_redemption.status == RedemptionStatus.EXPIRED

    def test_deal_fully_redeemed(self, business_client, business, capped_deal, customer, other_customer):
        first = request_code(deal=capped_deal, user=customer)
        second = request_code(deal=capped_deal, user=other_customer)
        finalize_redemption(redemption_id=first.id, business=business)

        url = reverse('redemptions:finalize', kwargs={'redemption_id': second.id})
        response = business_client.post(url)

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.data['code'] == 'deal_fully_redeemed'
        second.refresh_from_db()
        assert second.status == RedemptionStatus.PENDING

    def test_other_business_gets_not_found(self, other_business_client, redemption):
        url = reverse('redemptions:finalize', kwargs={'redemption_id': redemption.id})
        response = other_business_client.post(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        redemption.refresh_from_db()
        assert redemption.status == RedemptionStatus.PENDING


# =============================================================================
# QR image and history
# =============================================================================

@pytest.mark.django_db
class TestQrImageEndpoint:
    """Tests for GET /api/redemptions/{id}/qr/"""

    def test_png(self, customer_client, redemption):
        url = reverse('redemptions:qr', kwargs={'redemption_id': redemption.id})
        response = customer_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response['Content-Type'] == 'image/png'
        assert response.content.startswith(b'\x89PNG')

    def test_other_customer_gets_not_found(self, other_customer_client, redemption):
        url = reverse('redemptions:qr', kwargs={'redemption_id': redemption.id})
        response = other_customer_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_redeemed_code_has_no_qr(self, customer_client, business, redemption):
        finalize_redemption(redemption_id=redemption.id, business=business)

        url = reverse('redemptions:qr', kwargs={'redemption_id': redemption.id})
        response = customer_client.get(url)

        assert response.status_code == status.HTTP_409_CONFLICT


@pytest.mark.django_db
class TestHistoryEndpoint:
    """Tests for GET /api/redemptions/history/"""

    def test_history(self, customer_client, customer, other_customer, deal, business):
        first = request_code(deal=deal, user=customer)
        finalize_redemption(redemption_id=first.id, business=business)
        second = request_code(deal=deal, user=customer)
        request_code(deal=deal, user=other_customer)

        url = reverse('redemptions:history')
        response = customer_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert [item['id'] for item in response.data] == [str(second.id), str(first.id)]
        assert response.data[1]['status'] == 'redeemed'
        assert response.data[1]['business_name'] == 'Corner Bistro'
        assert response.data[1]['deal']['title'] == 'Lunch Special'


# =============================================================================
# End-to-end over HTTP
# =============================================================================

@pytest.mark.django_db
class TestRedemptionFlow:

    def test_request_verify_finalize(self, customer_client, business_client, deal):
        response = customer_client.post(
            reverse('redemptions:request'), {'deal_id': str(deal.id)}, format='json'
        )
        code = response.data['redemption_code']

        response = business_client.post(reverse('redemptions:verify'), {'code': code}, format='json')
        assert response.status_code == status.HTTP_200_OK
        redemption_id = response.data['id']

        response = business_client.post(
            reverse('redemptions:finalize', kwargs={'redemption_id': redemption_id})
        )
        assert response.status_code == status.HTTP_200_OK

        response = business_client.post(reverse('redemptions:verify'), {'code': code}, format='json')
        assert response.status_code == status.HTTP_409_CONFLICT

    def test_code_expires_after_61_seconds(self, customer_client, business_client, deal):
        response = customer_client.post(
            reverse('redemptions:request'), {'deal_id': str(deal.id)}, format='json'
        )
        redemption = Redemption.objects.get(id=response.data['id'])
        later = redemption.created_at + timedelta(seconds=61)

        with patch('django.utils.timezone.now', return_value=later):
            response = business_client.post(
                reverse('redemptions:verify'),
                {'code': redemption.redemption_code},
                format='json',
            )

        assert response.status_code == status.HTTP_410_GONE
        redemption.refresh_from_db()
        assert redemption.status == RedemptionStatus.EXPIRED
