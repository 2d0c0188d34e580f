# Per-member entry numbers as a deterministic newest-first order
from django.db import migrations, models


def number_existing_entries(apps, schema_editor):
    """Number each member's entries 1..n in creation order."""
    LedgerEntry = apps.get_model('loyalty', 'LedgerEntry')

    counters = {}
    for entry in LedgerEntry.objects.order_by('created_at', 'id').only('id', 'member_id'):
        counters[entry.member_id] = counters.get(entry.member_id, 0) + 1
        LedgerEntry.objects.filter(id=entry.id).update(sequence=counters[entry.member_id])


class Migration(migrations.Migration):

    dependencies = [
        ('loyalty', '0001_initial'),
    ]

    operations = [
        migrations.AddField(
            model_name='ledgerentry',
            name='sequence',
            field=models.PositiveIntegerField(default=0, editable=False),
            preserve_default=False,
        ),
        migrations.RunPython(number_existing_entries, migrations.RunPython.noop),
        migrations.AddConstraint(
            model_name='ledgerentry',
            constraint=models.UniqueConstraint(fields=('member', 'sequence'), name='ledger_member_sequence_unique'),
        ),
    ]
