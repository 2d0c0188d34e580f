import uuid
import pytest
from django.db import IntegrityError, transaction
from apps.members.models import Member
from apps.members.services import (
    create_member,
    get_member_by_id,
    update_member,
    list_members,
    MemberNotFoundError,
    DuplicateEmailError,
)


@pytest.mark.django_db
class TestCreateMember:

    def test_create_member_starts_at_zero(self):
        member = create_member(name='  Dana Kralova ', email='Dana@Example.com ')

        assert member.name == 'Dana Kralova'
        assert member.email == 'dana@example.com'
        assert member.phone == ''
        assert member.points_balance == 0

    def test_duplicate_email(self, member):
        with pytest.raises(DuplicateEmailError):
            create_member(name='Another Alice', email='ALICE@example.com')


@pytest.mark.django_db
class TestUpdateMember:

    def test_update_contact_details(self, member):
        updated = update_member(member_id=member.id, name='Alice N.', phone='')

        assert updated.name == 'Alice N.'
        assert updated.phone == ''
        assert updated.email == 'alice@example.com'

    def test_update_email_taken(self, member, member_bob):
        with pytest.raises(DuplicateEmailError):
            update_member(member_id=member_bob.id, email='alice@example.com')

    def test_update_own_email_allowed(self, member):
        updated = update_member(member_id=member.id, email='ALICE@example.com')
        assert updated.email == 'alice@example.com'

    def test_update_unknown(self):
        with pytest.raises(MemberNotFoundError):
            update_member(member_id=uuid.uuid4(), name='Nobody')


@pytest.mark.django_db
class TestQueries:

    def test_get_member_by_id(self, member):
        assert get_member_by_id(member_id=member.id) == member

    def test_get_member_unknown(self):
        with pytest.raises(MemberNotFoundError):
            get_member_by_id(member_id=uuid.uuid4())

    def test_list_members_search(self, member, member_bob):
        assert list(list_members(search='dvorak')) == [member_bob]
        assert list(list_members(search='601')) == [member]
        assert list_members().count() == 2


@pytest.mark.django_db
class TestBalanceConstraint:

    def test_negative_balance_rejected_by_database(self, member):
        with pytest.raises(IntegrityError):
            with transaction.atomic():
                Member.objects.filter(id=member.id).update(points_balance=-1)
