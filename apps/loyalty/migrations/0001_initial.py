import uuid
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('members', '0001_initial'),
        ('products', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='LedgerEntry',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('points_delta', models.IntegerField()),
                ('kind', models.CharField(choices=[('earned', 'Earned'), ('spent', 'Spent')], max_length=10)),
                ('description', models.CharField(max_length=255)),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True)),
                ('member', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='ledger_entries', to='members.member')),
                ('product', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name='ledger_entries', to='products.product')),
            ],
            options={
                'db_table': 'ledger_entries',
                'ordering': ['-created_at'],
                'verbose_name_plural': 'ledger entries',
                'indexes': [models.Index(fields=['member', '-created_at'], name='ledger_member_created_idx')],
                'constraints': [models.CheckConstraint(condition=models.Q(models.Q(('kind', 'earned'), ('points_delta__gte', 0)), models.Q(('kind', 'spent'), ('points_delta__lt', 0)), _connector='OR'), name='ledger_delta_sign_matches_kind')],
            },
        ),
    ]
