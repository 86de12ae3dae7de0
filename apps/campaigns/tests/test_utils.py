from types import SimpleNamespace
from django.test import SimpleTestCase
from apps.campaigns.utils import extract_recent_event_type, extract_recommended_sku


def event(event_type='page_view', **properties):
    return SimpleNamespace(type=event_type, properties=properties)


class ExtractRecommendedSkuTest(SimpleTestCase):
    def test_skips_empty_sku(self):
        self.assertEqual(extract_recommended_sku([event(sku=''), event(sku='WIDGET-42')]), 'WIDGET-42')

    def test_first_sku_wins(self):
        self.assertEqual(extract_recommended_sku([event(sku='NEW'), event(sku='OLD')]), 'NEW')

    def test_trims_sku(self):
        self.assertEqual(extract_recommended_sku([event(sku='  GADGET-7 ')]), 'GADGET-7')

    def test_ignores_non_string_sku(self):
        self.assertEqual(extract_recommended_sku([event(sku=42), event(sku='   ')]), None)

    def test_no_events(self):
        self.assertIsNone(extract_recommended_sku([]))


class ExtractRecentEventTypeTest(SimpleTestCase):
    def test_newest_event_type(self):
        self.assertEqual(extract_recent_event_type([event('purchase'), event('login')]), 'purchase')

    def test_no_events(self):
        self.assertIsNone(extract_recent_event_type([]))
