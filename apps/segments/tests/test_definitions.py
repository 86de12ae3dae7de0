from django.test import SimpleTestCase
from apps.segments.definitions import (
    EventCountGteInLastDays,
    EventPropertyEquals,
    EventTypeInLastDays,
    InvalidSegmentDefinition,
    parse_definition,
)


class ParseDefinitionTest(SimpleTestCase):
    def test_event_type_in_last_days(self):
        definition = parse_definition({'kind': 'event_type_in_last_days', 'eventType': 'purchase', 'days': 7})
        self.assertEqual(definition, EventTypeInLastDays(event_type='purchase', days=7))

    def test_event_property_equals(self):
        definition = parse_definition({
            'kind': 'event_property_equals',
            'eventType': 'page_view',
            'path': 'path',
            'value': '/pricing',
            'days': 14,
        })
        self.assertIsInstance(definition, EventPropertyEquals)
        self.assertEqual(definition.value, '/pricing')

    def test_event_count_gte(self):
        definition = parse_definition({
            'kind': 'event_count_gte_in_last_days', 'eventType': 'page_view', 'days': 10, 'minCount': 3,
        })
        self.assertEqual(definition, EventCountGteInLastDays(event_type='page_view', days=10, min_count=3))

    def test_to_dict_uses_camel_case(self):
        raw = {'kind': 'event_count_gte_in_last_days', 'eventType': 'login', 'days': 5, 'minCount': 2}
        self.assertEqual(parse_definition(raw).to_dict(), raw)

    def test_event_type_is_trimmed(self):
        definition = parse_definition({'kind': 'event_type_in_last_days', 'eventType': '  signup ', 'days': 1})
        self.assertEqual(definition.event_type, 'signup')

    def test_integral_float_is_accepted(self):
        definition = parse_definition({'kind': 'event_type_in_last_days', 'eventType': 'signup', 'days': 7.0})
        self.assertEqual(definition.days, 7)

    def test_rejects_non_object(self):
        with self.assertRaisesMessage(InvalidSegmentDefinition, 'Definition must be a JSON object'):
            parse_definition(['kind'])

    def test_rejects_missing_kind(self):
        with self.assertRaisesMessage(InvalidSegmentDefinition, "Definition must have a 'kind' field"):
            parse_definition({'eventType': 'signup', 'days': 1})

    def test_rejects_unknown_kind(self):
        with self.assertRaisesMessage(InvalidSegmentDefinition, "Unknown definition kind: 'nope'"):
            parse_definition({'kind': 'nope'})

    def test_rejects_bad_numbers(self):
        for days in (0, -3, 1.5, '7', True, None):
            with self.subTest(days=days):
                with self.assertRaisesMessage(InvalidSegmentDefinition, 'days must be a positive integer'):
                    parse_definition({'kind': 'event_type_in_last_days', 'eventType': 'signup', 'days': days})

    def test_rejects_blank_event_type(self):
        with self.assertRaisesMessage(InvalidSegmentDefinition, 'eventType must be a non-empty string'):
            parse_definition({'kind': 'event_type_in_last_days', 'eventType': '   ', 'days': 3})

    def test_rejects_non_string_value(self):
        with self.assertRaisesMessage(InvalidSegmentDefinition, 'value must be a string'):
            parse_definition({
                'kind': 'event_property_equals', 'eventType': 'page_view', 'path': 'path', 'value': 3, 'days': 3,
            })

    def test_rejects_missing_min_count(self):
        with self.assertRaisesMessage(InvalidSegmentDefinition, 'minCount must be a positive integer'):
            parse_definition({'kind': 'event_count_gte_in_last_days', 'eventType': 'login', 'days': 5})
