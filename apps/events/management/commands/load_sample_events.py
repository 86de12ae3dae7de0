# apps/events/management/commands/load_sample_events.py
from datetime import timedelta
from django.core.management.base import BaseCommand
from django.utils import timezone
from apps.customers.models import Customer
from apps.events.models import Event
import random

EVENT_TYPES = ['page_view', 'page_view', 'page_view', 'added_to_cart', 'purchase', 'login', 'signup']
PAGE_PATHS = ['/', '/pricing', '/features', '/checkout', '/blog']
SKUS = ['WIDGET-42', 'GADGET-7', 'GIZMO-3', 'DOOHICKEY-9']


class Command(BaseCommand):
    help = "Seed customers and random events from the last few weeks"

    def add_arguments(self, parser):
        parser.add_argument('--customers', type=int, default=100)
        parser.add_argument('--events', type=int, default=5000)
        parser.add_argument('--days', type=int, default=45)
        parser.add_argument('--batch-size', type=int, default=1000)

    def handle(self, *args, **options):
        customers = [
            Customer.objects.get_or_create(email=f'customer{i}@example.com')[0]
            for i in range(options['customers'])
        ]
        self.stdout.write(f"{len(customers)} customers ready")

        now = timezone.now()
        batch = []
        created = 0
        for _ in range(options['events']):
            batch.append(self.random_event(random.choice(customers), now, options['days']))

            if len(batch) == options['batch_size']:
                Event.objects.bulk_create(batch)
                created += len(batch)
                batch = []
                self.stdout.write(f"{created} events created...")

        if batch:
            Event.objects.bulk_create(batch)
            created += len(batch)

        self.stdout.write(self.style.SUCCESS(f"Created {created} events"))

    def random_event(self, customer, now, days):
        event_type = random.choice(EVENT_TYPES)
        properties = {}
        if event_type == 'page_view':
            properties['path'] = random.choice(PAGE_PATHS)
        elif event_type in ('added_to_cart', 'purchase'):
            properties['sku'] = random.choice(SKUS)

        return Event(
            customer=customer,
            type=event_type,
            properties=properties,
            occurred_at=now - timedelta(
                days=random.randint(0, days),
                hours=random.randint(0, 23),
                minutes=random.randint(0, 59),
            ),
        )
