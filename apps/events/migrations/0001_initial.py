import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('customers', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Event',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('type', models.CharField(max_length=100)),
                ('properties', models.JSONField(blank=True, default=dict)),
                ('occurred_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('idempotency_key', models.CharField(blank=True, max_length=255, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('customer', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='events', to='customers.customer')),
            ],
            options={
                'indexes': [
                    models.Index(fields=['type', 'occurred_at'], name='event_type_occurred_idx'),
                    models.Index(fields=['customer', 'occurred_at'], name='event_customer_occurred_idx'),
                ],
                'constraints': [
                    models.UniqueConstraint(fields=('customer', 'idempotency_key'), name='unique_event_idempotency_key'),
                ],
            },
        ),
    ]
