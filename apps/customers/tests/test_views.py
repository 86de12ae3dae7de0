from datetime import timedelta
from django.test import SimpleTestCase
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase
from apps.customers.models import Customer
from apps.customers.utils import is_valid_email, normalize_email
from apps.events.models import Event


class CustomerUtilsTest(SimpleTestCase):
    def test_normalize_email(self):
        self.assertEqual(normalize_email('  Jane@Example.COM '), 'jane@example.com')

    def test_is_valid_email(self):
        self.assertTrue(is_valid_email('jane@example.com'))
        self.assertFalse(is_valid_email('jane@example'))
        self.assertFalse(is_valid_email('jane doe@example.com'))


class CustomerAPITest(APITestCase):
    def setUp(self):
        self.customer = Customer.objects.create(email='jane@example.com')
        now = timezone.now()
        self.older = Event.objects.create(customer=self.customer, type='signup', occurred_at=now - timedelta(days=2))
        self.newer = Event.objects.create(customer=self.customer, type='login', occurred_at=now)

    def test_list_includes_event_count(self):
        Customer.objects.create(email='quiet@example.com')

        response = self.client.get('/api/v1/customers/')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        counts = {row['email']: row['event_count'] for row in response.data}
        self.assertEqual(counts, {'jane@example.com': 2, 'quiet@example.com': 0})

    def test_detail_lists_events_newest_first(self):
        response = self.client.get(f'/api/v1/customers/{self.customer.id}/')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([e['id'] for e in response.data['events']], [self.newer.id, self.older.id])

    def test_unknown_customer(self):
        response = self.client.get('/api/v1/customers/999/')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
