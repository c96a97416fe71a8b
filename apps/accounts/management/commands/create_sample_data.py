"""
Management command to create sample data for exploring the API.

Usage:
    python manage.py create_sample_data [--clear]

This creates:
- 1 admin, 2 customers and 3 business accounts
- 3 businesses in different categories
- Deals per business (active, capped, inactive and expired)
- A few favorites
- Redemptions in every status
"""

from datetime import timedelta

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from apps.accounts.models import User, UserType
from apps.businesses.models import Business, BusinessCategory
from apps.deals.models import Deal, Favorite
from apps.redemptions.models import Redemption, RedemptionStatus
from apps.redemptions.services import generate_redemption_code


class Command(BaseCommand):
    help = 'Create sample data for exploring the API'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Clear existing data before creating new sample data',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write('Clearing existing data...')
            self.clear_data()

        self.stdout.write('Creating sample data...')

        users = self.create_users()
        businesses = self.create_businesses(users)
        deals = self.create_deals(businesses)
        self.create_favorites(users, deals)
        self.create_redemptions(users, deals)

        self.stdout.write(self.style.SUCCESS('Sample data created successfully!'))
        self.stdout.write('')
        self.stdout.write('Test accounts:')
        self.stdout.write('  admin@example.com / admin123 (superuser)')
        self.stdout.write('  alice@example.com / password123 (customer)')
        self.stdout.write('  bob@example.com / password123 (customer)')
        self.stdout.write('  bistro@example.com / password123 (business)')
        self.stdout.write('  beans@example.com / password123 (business)')
        self.stdout.write('  glow@example.com / password123 (business)')

    def clear_data(self):
        """Clear all marketplace data from the database."""
        Redemption.objects.all().delete()
        Favorite.objects.all().delete()
        Deal.objects.all().delete()
        Business.objects.all().delete()
        User.objects.filter(is_superuser=False).delete()

    def _user(self, email, password, **defaults):
        user, _ = User.objects.get_or_create(email=email, defaults=defaults)
        user.set_password(password)
        user.save()
        return user

    def create_users(self):
        """Create test users."""
        self.stdout.write('  Creating users...')

        return {
            'admin': self._user(
                'admin@example.com', 'admin123',
                name='Admin User', is_staff=True, is_superuser=True,
            ),
            'alice': self._user(
                'alice@example.com', 'password123',
                name='Alice Shopper', user_type=UserType.CUSTOMER,
            ),
            'bob': self._user(
                'bob@example.com', 'password123',
                name='Bob Bargain', user_type=UserType.CUSTOMER, phone='+1 555 0100',
            ),
            'bistro': self._user(
                'bistro@example.com', 'password123',
                name='Marco Bistro', user_type=UserType.BUSINESS,
            ),
            'beans': self._user(
                'beans@example.com', 'password123',
                name='Bea Roaster', user_type=UserType.BUSINESS,
            ),
            'glow': self._user(
                'glow@example.com', 'password123',
                name='Gina Glow', user_type=UserType.BUSINESS,
            ),
        }

    def create_businesses(self, users):
        """Create one business per business account."""
        self.stdout.write('  Creating businesses...')

        businesses_data = [
            ('bistro', {
                'name': 'Corner Bistro',
                'description': 'Seasonal plates and house wine.',
                'address': '12 Market Square',
                'category': BusinessCategory.RESTAURANT,
                'latitude': '50.087465',
                'longitude': '14.421254',
            }),
            ('beans', {
                'name': 'Bean There Cafe',
                'description': 'Specialty coffee roasted on site.',
                'address': '3 Roastery Lane',
                'category': BusinessCategory.CAFE,
            }),
            ('glow', {
                'name': 'Glow Salon & Spa',
                'description': 'Hair, nails and massage.',
                'address': '48 River Road',
                'category': BusinessCategory.SALON_SPA,
            }),
        ]

        businesses = {}
        for key, defaults in businesses_data:
            business, _ = Business.objects.get_or_create(owner=users[key], defaults=defaults)
            businesses[key] = business
        return businesses

    def create_deals(self, businesses):
        """Create deals in various states."""
        self.stdout.write('  Creating deals...')

        now = timezone.now()
        deals_data = [
            ('bistro', 'lunch', {
                'title': 'Two-Course Lunch',
                'description': 'Starter and main from the lunch menu.',
                'discount_value': '25% OFF',
                'terms': 'Weekdays 11:00-15:00. Dine-in only.',
                'expiry_date': now + timedelta(days=30),
            }),
            ('bistro', 'wine', {
                'title': 'Free Glass of Wine',
                'description': 'With any main course.',
                'discount_value': 'FREE',
                'expiry_date': now + timedelta(days=14),
                'max_redemptions': 20,
            }),
            ('bistro', 'brunch', {
                'title': 'Holiday Brunch',
                'description': 'Last season brunch offer.',
                'discount_value': '15% OFF',
                'expiry_date': now - timedelta(days=2),
            }),
            ('beans', 'flat_white', {
                'title': 'Flat White Happy Hour',
                'description': 'Any size flat white after 3pm.',
                'discount_value': '$1 OFF',
                'expiry_date': now + timedelta(days=7),
            }),
            ('beans', 'beans_bag', {
                'title': 'Bag of House Beans',
                'description': '250g of our house blend.',
                'discount_value': '30% OFF',
                'expiry_date': now + timedelta(days=10),
                'max_redemptions': 1,
            }),
            ('glow', 'manicure', {
                'title': 'Classic Manicure',
                'description': 'Shape, buff and polish.',
                'discount_value': '$10 OFF',
                'expiry_date': now + timedelta(days=21),
            }),
            ('glow', 'massage', {
                'title': 'Summer Massage',
                'description': 'Paused until next season.',
                'discount_value': '20% OFF',
                'expiry_date': now + timedelta(days=60),
                'is_active': False,
            }),
        ]

        deals = {}
        for business_key, key, fields in deals_data:
            deal, _ = Deal.objects.get_or_create(
                business=businesses[business_key],
                title=fields.pop('title'),
                defaults=fields,
            )
            deals[key] = deal
        return deals

    def create_favorites(self, users, deals):
        """Create favorites for customers."""
        self.stdout.write('  Creating favorites...')

        for user_key, deal_key in [
            ('alice', 'lunch'),
            ('alice', 'manicure'),
            ('bob', 'flat_white'),
            ('bob', 'brunch'),
        ]:
            Favorite.objects.get_or_create(user=users[user_key], deal=deals[deal_key])

    def create_redemptions(self, users, deals):
        """Create redemptions in every status."""
        self.stdout.write('  Creating redemptions...')

        if Redemption.objects.exists():
            self.stdout.write('  Redemptions already present, skipping.')
            return

        now = timezone.now()
        ttl = timedelta(seconds=60)
        redemptions_data = [
            ('alice', 'lunch', RedemptionStatus.REDEEMED, timedelta(days=3)),
            ('bob', 'lunch', RedemptionStatus.REDEEMED, timedelta(days=1)),
            ('alice', 'wine', RedemptionStatus.REDEEMED, timedelta(hours=5)),
            ('bob', 'flat_white', RedemptionStatus.EXPIRED, timedelta(hours=2)),
            ('alice', 'manicure', RedemptionStatus.PENDING, timedelta(seconds=0)),
        ]

        for user_key, deal_key, redemption_status, age in redemptions_data:
            deal = deals[deal_key]
            created_at = now - age
            Redemption.objects.create(
                deal=deal,
                user=users[user_key],
                business=deal.business,
                redemption_code=generate_redemption_code(),
                status=redemption_status,
                created_at=created_at,
                expires_at=created_at + ttl,
                redeemed_at=(
                    created_at + timedelta(seconds=20)
                    if redemption_status == RedemptionStatus.REDEEMED else None
                ),
            )
            if redemption_status == RedemptionStatus.REDEEMED:
                deal.current_redemptions += 1
                deal.save(update_fields=['current_redemptions', 'updated_at'])
