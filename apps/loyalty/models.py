from django.db import models
import uuid


class EntryKind(models.TextChoices):
    EARNED = 'earned', 'Earned'
    SPENT = 'spent', 'Spent'


class LedgerEntryQuerySet(models.QuerySet):
    """Ledger rows are append-only: bulk updates and deletes are refused."""

    def update(self, **kwargs):
        raise TypeError("Ledger entries are append-only and cannot be updated")

    def delete(self):
        raise TypeError("Ledger entries are append-only and cannot be deleted")


class LedgerEntry(models.Model):
    """One points-affecting event for a member."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    member = models.ForeignKey(
        'members.Member',
        on_delete=models.PROTECT,
        related_name='ledger_entries'
    )
    product = models.ForeignKey(
        'products.Product',
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='ledger_entries'
    )

    # Positive = earned, negative = spent
    points_delta = models.IntegerField()
    kind = models.CharField(max_length=10, choices=EntryKind.choices)
    description = models.CharField(max_length=255)
    # 1, 2, 3 ... per member, assigned while the member row is locked
    sequence = models.PositiveIntegerField(editable=False)

    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    objects = LedgerEntryQuerySet.as_manager()

    class Meta:
        db_table = 'ledger_entries'
        ordering = ['-created_at']
        verbose_name_plural = 'ledger entries'
        indexes = [
            models.Index(fields=['member', '-created_at'], name='ledger_member_created_idx'),
        ]
        constraints = [
            models.UniqueConstraint(
                fields=['member', 'sequence'],
                name='ledger_member_sequence_unique',
            ),
            models.CheckConstraint(
                condition=(
                    models.Q(kind=EntryKind.EARNED, points_delta__gte=0) |
                    models.Q(kind=EntryKind.SPENT, points_delta__lt=0)
                ),
                name='ledger_delta_sign_matches_kind',
            ),
        ]

    def __str__(self):
        return f"{self.member_id}: {self.points_delta:+d} ({self.kind})"

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise TypeError("Ledger entries are append-only and cannot be updated")
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise TypeError("Ledger entries are append-only and cannot be deleted")
