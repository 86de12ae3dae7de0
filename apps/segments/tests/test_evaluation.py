from datetime import timedelta
from django.test import TestCase, override_settings
from django.utils import timezone
from apps.customers.models import Customer
from apps.events.models import Event
from apps.segments.definitions import (
    EventCountGteInLastDays,
    EventPropertyEquals,
    EventTypeInLastDays,
    parse_definition,
)
from apps.segments.evaluation import cutoff_for, evaluate_segment, matching_customer_ids


class SegmentEvaluationTest(TestCase):
    def setUp(self):
        self.now = timezone.now()
        self.alice = Customer.objects.create(email='alice@example.com')
        self.bob = Customer.objects.create(email='bob@example.com')

    def add_event(self, customer, event_type, days_ago=1, **properties):
        return Event.objects.create(
            customer=customer,
            type=event_type,
            properties=properties,
            occurred_at=self.now - timedelta(days=days_ago),
        )

    def test_event_type_respects_window_and_type(self):
        self.add_event(self.alice, 'purchase', days_ago=2)
        self.add_event(self.bob, 'purchase', days_ago=20)
        self.add_event(self.bob, 'signup', days_ago=1)

        ids = matching_customer_ids(EventTypeInLastDays(event_type='purchase', days=7), self.now)
        self.assertEqual(ids, [self.alice.id])

    def test_count_gte_matches_three_events_but_not_two(self):
        for days_ago in (1, 3, 5):
            self.add_event(self.alice, 'page_view', days_ago=days_ago)
        for days_ago in (1, 2):
            self.add_event(self.bob, 'page_view', days_ago=days_ago)

        definition = EventCountGteInLastDays(event_type='page_view', days=10, min_count=3)
        self.assertEqual(matching_customer_ids(definition, self.now), [self.alice.id])

    def test_count_ignores_events_outside_window(self):
        for days_ago in (1, 2, 15):
            self.add_event(self.alice, 'page_view', days_ago=days_ago)

        definition = EventCountGteInLastDays(event_type='page_view', days=10, min_count=3)
        self.assertEqual(matching_customer_ids(definition, self.now), [])

    def test_property_equals_is_exact_json_match(self):
        self.add_event(self.alice, 'page_view', path='/pricing')
        self.add_event(self.bob, 'page_view', path='/pricing/enterprise')

        definition = EventPropertyEquals(event_type='page_view', path='path', value='/pricing', days=7)
        self.assertEqual(matching_customer_ids(definition, self.now), [self.alice.id])

    def test_property_equals_does_not_coerce_numbers(self):
        self.add_event(self.alice, 'purchase', order='123')
        self.add_event(self.bob, 'purchase', order=123)

        definition = EventPropertyEquals(event_type='purchase', path='order', value='123', days=7)
        self.assertEqual(matching_customer_ids(definition, self.now), [self.alice.id])

    def test_customer_counted_once(self):
        self.add_event(self.alice, 'login', days_ago=1)
        self.add_event(self.alice, 'login', days_ago=2)

        result = evaluate_segment(EventTypeInLastDays(event_type='login', days=7), now=self.now)
        self.assertEqual(result.count, 1)

    @override_settings(SEGMENT_PREVIEW_LIMIT=1)
    def test_count_is_not_capped_by_preview_limit(self):
        self.add_event(self.alice, 'login')
        self.add_event(self.bob, 'login')

        result = evaluate_segment(EventTypeInLastDays(event_type='login', days=7), now=self.now)
        self.assertEqual(result.count, 2)
        self.assertEqual(result.customers, [{'id': self.alice.id, 'email': 'alice@example.com'}])

    def test_no_matches(self):
        result = evaluate_segment(EventTypeInLastDays(event_type='login', days=7), now=self.now)
        self.assertEqual(result.to_dict(), {'count': 0, 'customers': []})

    def test_unknown_definition_type(self):
        class Other:
            days = 1
            event_type = 'login'

        with self.assertRaises(TypeError):
            matching_customer_ids(Other(), self.now)

    @override_settings(SEGMENT_SLOW_QUERY_SECONDS=-1)
    def test_slow_evaluation_is_logged(self):
        with self.assertLogs('apps.segments.performance', level='WARNING') as logs:
            evaluate_segment(EventTypeInLastDays(event_type='login', days=7), now=self.now)
        self.assertIn('Slow query: evaluate_segment', logs.output[0])

    def test_window_reaching_past_earliest_datetime(self):
        self.add_event(self.alice, 'login', days_ago=3650)

        for days in (1000000, 10 ** 12):
            with self.subTest(days=days):
                definition = parse_definition({'kind': 'event_type_in_last_days', 'eventType': 'login', 'days': days})
                result = evaluate_segment(definition, now=self.now)
                self.assertEqual(result.count, 1)

    def test_cutoff_for_huge_window_is_unbounded(self):
        self.assertIsNone(cutoff_for(1000000, self.now))
        self.assertEqual(cutoff_for(2, self.now), self.now - timedelta(days=2))
