from unittest.mock import patch
from rest_framework import status
from rest_framework.test import APITestCase
from apps.events.models import Event

URL = '/api/v1/events/'


class RecordEventAPITest(APITestCase):
    def test_record_event(self):
        response = self.client.post(URL, {
            'email': 'jane@example.com',
            'type': 'purchase',
            'properties': {'sku': 'WIDGET-42'},
            'occurredAt': '2024-03-01T12:00:00Z',
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertTrue(response.data['created'])
        event = Event.objects.get(pk=response.data['eventId'])
        self.assertEqual(event.customer_id, response.data['customerId'])
        self.assertEqual(event.properties, {'sku': 'WIDGET-42'})

    def test_nested_customer_email(self):
        response = self.client.post(URL, {
            'customer': {'email': 'Nested@Example.com'},
            'type': 'login',
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(Event.objects.get().customer.email, 'nested@example.com')

    def test_duplicate_idempotency_key(self):
        payload = {'email': 'jane@example.com', 'type': 'purchase'}
        first = self.client.post(URL, payload, format='json', HTTP_IDEMPOTENCY_KEY='order-1')
        second = self.client.post(URL, payload, format='json', HTTP_IDEMPOTENCY_KEY='order-1')

        self.assertEqual(first.status_code, status.HTTP_201_CREATED)
        self.assertEqual(second.status_code, status.HTTP_200_OK)
        self.assertFalse(second.data['created'])
        self.assertEqual(first.data['eventId'], second.data['eventId'])
        self.assertEqual(Event.objects.count(), 1)

    def test_missing_email(self):
        response = self.client.post(URL, {'type': 'login'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('Email is required', str(response.data['email']))

    def test_invalid_email(self):
        response = self.client.post(URL, {'email': 'not-an-email', 'type': 'login'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('Invalid email format', str(response.data['email']))

    def test_missing_type(self):
        response = self.client.post(URL, {'email': 'jane@example.com'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('type', response.data)

    def test_properties_must_be_object(self):
        response = self.client.post(URL, {
            'email': 'jane@example.com', 'type': 'login', 'properties': ['a'],
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('Properties must be a JSON object', str(response.data['properties']))

    def test_invalid_occurred_at(self):
        response = self.client.post(URL, {
            'email': 'jane@example.com', 'type': 'login', 'occurredAt': 'yesterday',
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('Invalid occurredAt date format', str(response.data['occurredAt']))
        self.assertFalse(Event.objects.exists())

    @patch('apps.events.views.ingest_event', side_effect=RuntimeError('boom'))
    def test_unexpected_error(self, mock_ingest):
        with self.assertLogs('apps.events.views', level='ERROR'):
            response = self.client.post(URL, {'email': 'jane@example.com', 'type': 'login'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.data, {'error': 'Internal server error'})

    def test_type_longer_than_column(self):
        response = self.client.post(URL, {'email': 'jane@example.com', 'type': 'x' * 101}, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('Event type must be at most 100 characters', str(response.data['type']))
        self.assertFalse(Event.objects.exists())

    def test_idempotency_key_longer_than_column(self):
        response = self.client.post(
            URL, {'email': 'jane@example.com', 'type': 'login'}, format='json', HTTP_IDEMPOTENCY_KEY='k' * 256
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data, {'error': 'Idempotency-Key must be at most 255 characters'})
        self.assertFalse(Event.objects.exists())

    def test_email_longer_than_column(self):
        response = self.client.post(URL, {'email': 'a' * 250 + '@example.com', 'type': 'login'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('Invalid email format', str(response.data['email']))
