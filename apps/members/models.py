from django.core.validators import MinValueValidator
from django.db import models
import uuid


class Member(models.Model):
    """Loyalty-program member (coffee-shop customer)."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200)
    email = models.EmailField(unique=True, max_length=255)
    phone = models.CharField(max_length=30, blank=True)

    # Only ever changed by the loyalty transaction coordinator
    points_balance = models.IntegerField(
        default=0,
        validators=[MinValueValidator(0)],
        editable=False,
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'members'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['name'], name='members_name_idx'),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(points_balance__gte=0),
                name='members_points_balance_non_negative',
            ),
        ]

    def __str__(self):
        return f"{self.name} <{self.email}> ({self.points_balance} pts)"
