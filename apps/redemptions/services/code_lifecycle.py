"""
Redemption code lifecycle.

A customer requests a code for a deal (pending, short TTL). The business
verifies it by typing the code into its scanner, then finalizes it, which
marks the redemption as redeemed and counts it against the deal.

Expiry is enforced lazily: a pending code past its ``expires_at`` is moved
to expired the first time it is verified or finalized. There is no sweep.
"""

import logging
import secrets
import string
from datetime import timedelta
from io import BytesIO
from urllib.parse import urlencode
from uuid import UUID

import qrcode
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.db import transaction, IntegrityError
from django.db.models import F, Q
from django.utils import timezone

from apps.accounts.models import User
from apps.businesses.models import Business
from apps.deals.models import Deal
from ..models import Redemption, RedemptionStatus
from .exceptions import (
    RedemptionNotFoundError,
    AlreadyRedeemedError,
    CodeExpiredError,
    DealFullyRedeemedError,
    CodeGenerationError,
)

logger = logging.getLogger(__name__)

CODE_ALPHABET = string.ascii_uppercase + string.digits
CODE_GROUP_SIZE = 4
MAX_CODE_ATTEMPTS = 5


def generate_redemption_code(length: int = None) -> str:
    """
    Draw a random code like ``7KQ2-M9XD-A4PL``.

    Characters come from ``secrets`` and carry no information about the
    deal, the customer or the time of issue.

    Raises:
        ImproperlyConfigured: If the hyphenated code would not fit the
            redemption_code column
    """
    length = length or settings.REDEMPTION_CODE_LENGTH
    formatted_length = length + (length - 1) // CODE_GROUP_SIZE
    max_length = Redemption._meta.get_field('redemption_code').max_length
    if length < 1 or formatted_length > max_length:
        raise ImproperlyConfigured(
            f"Redemption code length {length} does not fit the "
            f"{max_length}-character code column"
        )

    raw = ''.join(secrets.choice(CODE_ALPHABET) for _ in range(length))
    return '-'.join(
        raw[i:i + CODE_GROUP_SIZE]
        for i in range(0, length, CODE_GROUP_SIZE)
    )


def build_qr_image_url(code: str) -> str:
    """URL of the external service rendering ``code`` as a square QR image."""
    size = settings.QR_IMAGE_SIZE
    query = urlencode({'size': f'{size}x{size}', 'data': code})
    return f"{settings.QR_IMAGE_ENDPOINT}?{query}"


def render_qr_png(code: str) -> bytes:
    """
    Render a code as a PNG QR image.

    Uses error correction level M with the standard 4-module quiet zone.
    """
    qr = qrcode.QRCode(
        version=1,
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        box_size=10,
        border=4,
    )
    qr.add_data(code)
    qr.make(fit=True)

    img = qr.make_image(fill_color="black", back_color="white")

    buffer = BytesIO()
    img.save(buffer, format='PNG')
    return buffer.getvalue()


def request_code(
    *,
    deal: Deal,
    user: User,
    max_retries: int = MAX_CODE_ATTEMPTS
) -> Redemption:
    """
    Issue a new pending code for a deal.

    The deal itself is not modified. Callers resolve the deal through the
    catalog so only active, unexpired deals reach this point; the
    redemption cap is checked at finalize time only.

    Args:
        deal: Deal being redeemed
        user: Customer requesting the code
        max_retries: Attempts to draw a code that is not taken yet

    Returns:
        Pending Redemption with expires_at = created_at + TTL

    Raises:
        CodeGenerationError: If every drawn code collided
    """
    ttl = timedelta(seconds=settings.REDEMPTION_CODE_TTL_SECONDS)

    # Retry logic outside transaction to handle code collisions
    for attempt in range(max_retries):
        code = generate_redemption_code()
        now = timezone.now()

        try:
            # Each attempt is a separate transaction
            with transaction.atomic():
                redemption = Redemption.objects.create(
                    deal=deal,
                    user=user,
                    business_id=deal.business_id,
                    redemption_code=code,
                    status=RedemptionStatus.PENDING,
                    created_at=now,
                    expires_at=now + ttl,
                )
        except IntegrityError:
            logger.warning("Redemption code collision on attempt %d", attempt + 1)
            continue

        logger.info(
            "Issued code for redemption %s (deal %s, user %s)",
            redemption.id, deal.id, user.id
        )
        return redemption

    raise CodeGenerationError(
        f"Failed to generate unique redemption code after {max_retries} attempts"
    )


def _mark_expired(redemption: Redemption) -> None:
    """Move a pending redemption to expired. Does nothing if it already left pending."""
    updated = (
        Redemption.objects
        .filter(pk=redemption.pk, status=RedemptionStatus.PENDING)
        .update(status=RedemptionStatus.EXPIRED)
    )
    if updated:
        logger.info("Redemption %s expired", redemption.pk)
    redemption.status = RedemptionStatus.EXPIRED


def _check_presentable(redemption: Redemption) -> None:
    """
    Raise unless the redemption is pending and within its TTL.

    A redeemed code is reported as such without looking at the clock.
    """
    if redemption.status == RedemptionStatus.REDEEMED:
        raise AlreadyRedeemedError("This code has already been redeemed")

    if redemption.status == RedemptionStatus.EXPIRED or redemption.is_past_expiry():
        _mark_expired(redemption)
        raise CodeExpiredError("This code has expired")


def verify_code(*, code: str, business: Business) -> Redemption:
    """
    Look up a code typed into the business's scanner.

    Verification has no side effect other than persisting the expired
    status of a stale code, so repeated calls on a valid code return the
    same redemption.

    Raises:
        RedemptionNotFoundError: If the code does not exist for this business
        AlreadyRedeemedError: If the code was already finalized
        CodeExpiredError: If the code is past its TTL
    """
    try:
        redemption = (
            Redemption.objects
            .select_related('deal', 'user')
            .get(redemption_code=code, business=business)
        )
    except Redemption.DoesNotExist:
        raise RedemptionNotFoundError("Invalid redemption code")

    _check_presentable(redemption)

    logger.info("Redemption %s verified by business %s", redemption.id, business.id)
    return redemption


def finalize_redemption(*, redemption_id: UUID, business: Business) -> Redemption:
    """
    Consume a verified code and count it against the deal.

    The status claim and the counter increment happen in one transaction,
    each as a conditional update:

    1. pending -> redeemed, only if still pending
    2. current_redemptions + 1, only while below max_redemptions

    If the deal is already at its cap the whole transaction rolls back and
    the code stays pending.

    Raises:
        RedemptionNotFoundError: If the redemption does not belong to the business
        AlreadyRedeemedError: If the code was already finalized
        CodeExpiredError: If the code is past its TTL
        DealFullyRedeemedError: If the deal has no redemptions left
    """
    expired = False

    with transaction.atomic():
        try:
            redemption = (
                Redemption.objects
                .select_for_update()
                .get(pk=redemption_id, business=business)
            )
        except Redemption.DoesNotExist:
            raise RedemptionNotFoundError(f"Redemption with ID {redemption_id} not found")

        if redemption.status == RedemptionStatus.REDEEMED:
            raise AlreadyRedeemedError("This code has already been redeemed")

        now = timezone.now()

        if not redemption.is_pending or redemption.is_past_expiry(now):
            expired = True
        else:
            claimed = (
                Redemption.objects
                .filter(pk=redemption.pk, status=RedemptionStatus.PENDING)
                .update(status=RedemptionStatus.REDEEMED, redeemed_at=now)
            )
            if not claimed:
                raise AlreadyRedeemedError("This code has already been redeemed")

            incremented = (
                Deal.objects
                .filter(pk=redemption.deal_id)
                .filter(
                    Q(max_redemptions__isnull=True) |
                    Q(current_redemptions__lt=F('max_redemptions'))
                )
                .update(
                    current_redemptions=F('current_redemptions') + 1,
                    updated_at=now,
                )
            )
            if not incremented:
                logger.warning(
                    "Finalize of redemption %s refused: deal %s fully redeemed",
                    redemption.pk, redemption.deal_id
                )
                raise DealFullyRedeemedError("This deal has been fully redeemed")

    if expired:
        # Persisted outside the transaction so the transition survives the error
        _mark_expired(redemption)
        raise CodeExpiredError("This code has expired")

    redemption.refresh_from_db()
    logger.info("Redemption %s redeemed at business %s", redemption.pk, business.id)
    return redemption


def get_presentable_redemption(*, redemption_id: UUID, user: User) -> Redemption:
    """
    Get a customer's own redemption that can still be shown at the counter.

    Raises:
        RedemptionNotFoundError: If the redemption is not the customer's
        AlreadyRedeemedError: If the code was already finalized
        CodeExpiredError: If the code is past its TTL
    """
    try:
        redemption = Redemption.objects.get(pk=redemption_id, user=user)
    except Redemption.DoesNotExist:
        raise RedemptionNotFoundError(f"Redemption with ID {redemption_id} not found")

    _check_presentable(redemption)
    return redemption
