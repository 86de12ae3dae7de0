#!/usr/bin/env python
"""
Seed a demo segment and campaign on top of the sample events
"""
import os
import sys
import django

# Setup Django
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'core.settings.local')
django.setup()

from django.core.management import call_command
from apps.campaigns.models import Campaign
from apps.campaigns.services import create_campaign, generate_drafts
from apps.events.models import Event
from apps.segments.definitions import parse_definition
from apps.segments.evaluation import evaluate_segment
from apps.segments.models import Segment


def create_test_data():
    print("Creating demo data...")

    # 1. Events
    if not Event.objects.exists():
        call_command('load_sample_events', customers=50, events=2000)

    # 2. Segment
    segment, created = Segment.objects.get_or_create(
        name='Pricing page visitors',
        defaults={
            'description': 'Viewed /pricing in the last 30 days',
            'definition': {
                'kind': 'event_property_equals',
                'eventType': 'page_view',
                'path': 'path',
                'value': '/pricing',
                'days': 30,
            },
        }
    )
    if created:
        print(f"Created segment: {segment.name}")

    preview = evaluate_segment(parse_definition(segment.definition))
    print(f"Segment matches {preview.count} customers")

    # 3. Campaign with drafts
    campaign = Campaign.objects.filter(segment=segment, name='Pricing follow-up').first()
    if campaign is None:
        campaign = create_campaign(segment, name='Pricing follow-up')
        print(f"Created campaign: {campaign.name}")

    if campaign.status in (Campaign.DRAFT, Campaign.DRAFTED):
        drafted = generate_drafts(campaign)
        print(f"Generated {drafted} drafts")

    print("\nDemo data ready:")
    print(f"   - Segment ID: {segment.id}")
    print(f"   - Campaign ID: {campaign.id} ({campaign.status})")
    print(f"   - Drafts: {campaign.drafts.count()}")


if __name__ == '__main__':
    create_test_data()
