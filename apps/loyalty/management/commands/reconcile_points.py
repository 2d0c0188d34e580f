"""
Management command to check member balances against the points ledger.

Every member's balance must equal the sum of their ledger deltas. This
command reports members where it does not. It never changes data: the
ledger is append-only and balances only move through earn/redeem.

Usage:
    python manage.py reconcile_points
    python manage.py reconcile_points --member <uuid>
    python manage.py reconcile_points --dry-run
"""

from django.core.management.base import BaseCommand, CommandError
from apps.members.models import Member
from apps.loyalty.services import reconcile_member, LoyaltyServiceError


class Command(BaseCommand):
    help = 'Report members whose points balance differs from their ledger total'

    def add_arguments(self, parser):
        parser.add_argument(
            '--member',
            help='Only check the member with this ID',
        )
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Report discrepancies but exit with status 0',
        )
        parser.add_argument(
            '--fix',
            action='store_true',
            help='Not supported: balances are only changed through earn/redeem',
        )

    def handle(self, *args, **options):
        if options['fix']:
            raise CommandError(
                'Refusing to fix balances: the ledger is append-only and balances '
                'change only through earn/redeem. Investigate the report instead.'
            )

        if options['member']:
            member_ids = [options['member']]
        else:
            member_ids = list(Member.objects.order_by('created_at').values_list('id', flat=True))

        self.stdout.write(f'\nChecking {len(member_ids)} member(s)...\n')

        discrepancies = []
        for member_id in member_ids:
            try:
                summary = reconcile_member(member_id=member_id)
            except LoyaltyServiceError as e:
                raise CommandError(str(e))

            if not summary.is_consistent:
                discrepancies.append(summary)
                self.stdout.write(
                    f'  - {summary.member_id} | balance {summary.points_balance} | '
                    f'ledger {summary.ledger_total} ({summary.entry_count} entries) | '
                    f'off by {summary.discrepancy:+d}'
                )

        if not discrepancies:
            self.stdout.write(
                self.style.SUCCESS('All balances match the ledger.')
            )
            return

        message = f'\n{len(discrepancies)} member(s) with balance discrepancies.'
        if options['dry_run']:
            self.stdout.write(self.style.WARNING(message))
            return

        raise CommandError(message.strip())
