import pytest
from io import StringIO
from django.core.management import call_command
from django.core.management.base import CommandError
from apps.accounts.models import User
from apps.members.models import Member
from apps.products.models import Product
from apps.loyalty.models import LedgerEntry
from apps.loyalty.services import earn_points, reconcile_member


@pytest.mark.django_db
class TestReconcilePoints:

    def test_all_consistent(self, member, beans):
        earn_points(member_id=member.id, product_id=beans.id, quantity=50)
        out = StringIO()

        call_command('reconcile_points', stdout=out)

        assert 'All balances match the ledger.' in out.getvalue()

    def test_discrepancy_fails(self, member, other_member):
        Member.objects.filter(id=member.id).update(points_balance=7)
        out = StringIO()

        with pytest.raises(CommandError, match='1 member'):
            call_command('reconcile_points', stdout=out)

        assert str(member.id) in out.getvalue()
        assert str(other_member.id) not in out.getvalue()

    def test_dry_run_only_reports(self, member):
        Member.objects.filter(id=member.id).update(points_balance=7)
        out = StringIO()

        call_command('reconcile_points', '--dry-run', stdout=out)

        assert 'off by +7' in out.getvalue()

    def test_single_member(self, member, other_member):
        Member.objects.filter(id=other_member.id).update(points_balance=3)
        out = StringIO()

        call_command('reconcile_points', '--member', str(member.id), stdout=out)

        assert 'Checking 1 member(s)' in out.getvalue()

    def test_unknown_member(self, db):
        with pytest.raises(CommandError):
            call_command('reconcile_points', '--member', '00000000-0000-0000-0000-000000000000', stdout=StringIO())

    def test_fix_refused(self, member):
        Member.objects.filter(id=member.id).update(points_balance=7)

        with pytest.raises(CommandError, match='Refusing'):
            call_command('reconcile_points', '--fix', stdout=StringIO())

        member.refresh_from_db()
        assert member.points_balance == 7


@pytest.mark.django_db
class TestCreateSampleData:

    def test_creates_consistent_data(self):
        call_command('create_sample_data', stdout=StringIO())

        assert User.objects.filter(email='barista@example.com', is_staff=True).exists()
        assert Member.objects.count() == 4
        assert Product.objects.count() == 7
        assert LedgerEntry.objects.exists()

        alice = Member.objects.get(email='alice@example.com')
        # 320.00 -> 6, 2 x 75.00 -> 3, minus 5 redeemed
        assert alice.points_balance == 4
        for member in Member.objects.all():
            assert reconcile_member(member_id=member.id).is_consistent

    def test_running_twice_adds_nothing(self):
        call_command('create_sample_data', stdout=StringIO())
        entries = LedgerEntry.objects.count()

        call_command('create_sample_data', stdout=StringIO())

        assert LedgerEntry.objects.count() == entries
        assert Member.objects.count() == 4
