"""
Management command to create sample data for local development.

Usage:
    python manage.py create_sample_data

This creates:
- 1 staff user (barista@example.com)
- 4 loyalty members
- A small coffee menu
- A few purchases and one redemption, recorded through the points engine

Running it again is safe: existing records are reused and members that
already have ledger history get no new transactions.
"""

from decimal import Decimal

from django.core.management.base import BaseCommand

from apps.accounts.models import User
from apps.members.models import Member
from apps.products.models import Product
from apps.loyalty.services import earn_points, redeem_points


MENU = [
    ('Espresso', 'Coffee', Decimal('45.00'), 'Single shot'),
    ('Cappuccino', 'Coffee', Decimal('65.00'), 'Espresso with steamed milk foam'),
    ('Flat White', 'Coffee', Decimal('75.00'), 'Double ristretto with microfoam'),
    ('Cold Brew', 'Coffee', Decimal('80.00'), '18-hour steep'),
    ('Croissant', 'Pastry', Decimal('49.00'), 'Butter croissant'),
    ('Cinnamon Roll', 'Pastry', Decimal('55.00'), ''),
    ('Ethiopia Yirgacheffe 250g', 'Beans', Decimal('320.00'), 'Whole beans, light roast'),
]

MEMBERS = [
    ('Alice Novak', 'alice@example.com', '+420 601 000 001'),
    ('Bob Dvorak', 'bob@example.com', '+420 601 000 002'),
    ('Charlie Svoboda', 'charlie@example.com', ''),
    ('Dana Kralova', 'dana@example.com', ''),
]


class Command(BaseCommand):
    help = 'Create sample data for trying out the loyalty API'

    def handle(self, *args, **options):
        self.stdout.write('Creating sample data...')

        self.create_staff()
        products = self.create_menu()
        members = self.create_members()
        self.create_transactions(members, products)

        self.stdout.write(self.style.SUCCESS('Sample data created successfully!'))
        self.stdout.write('')
        self.stdout.write('Staff account:')
        self.stdout.write('  barista@example.com / password123')

    def create_staff(self):
        self.stdout.write('  Creating staff user...')
        barista, created = User.objects.get_or_create(
            email='barista@example.com',
            defaults={
                'display_name': 'Barista',
                'is_staff': True,
            }
        )
        if created:
            barista.set_password('password123')
            barista.save()
        return barista

    def create_menu(self):
        self.stdout.write('  Creating menu...')
        products = {}
        for name, category, price, description in MENU:
            product, _ = Product.objects.get_or_create(
                name=name,
                defaults={
                    'category': category,
                    'price': price,
                    'description': description,
                }
            )
            products[name] = product
        return products

    def create_members(self):
        self.stdout.write('  Creating members...')
        members = {}
        for name, email, phone in MEMBERS:
            member, _ = Member.objects.get_or_create(
                email=email,
                defaults={'name': name, 'phone': phone},
            )
            members[email] = member
        return members

    def create_transactions(self, members, products):
        """Earn and redeem through the engine so balances match the ledger."""
        self.stdout.write('  Recording transactions...')

        purchases = {
            'alice@example.com': [('Ethiopia Yirgacheffe 250g', 1), ('Flat White', 2)],
            'bob@example.com': [('Cappuccino', 3), ('Croissant', 1)],
            'charlie@example.com': [('Espresso', 1)],
        }
        redemptions = {
            'alice@example.com': (5, Decimal('75.00')),
        }

        for email, member in members.items():
            if member.ledger_entries.exists():
                continue

            for product_name, quantity in purchases.get(email, []):
                earn_points(
                    member_id=member.id,
                    product_id=products[product_name].id,
                    quantity=quantity,
                )

            if email in redemptions:
                points, amount = redemptions[email]
                redeem_points(
                    member_id=member.id,
                    points_to_redeem=points,
                    purchase_amount=amount,
                )
