from django.db.models import Count
from rest_framework import viewsets
from .models import Customer
from .serializers import CustomerSerializer, CustomerDetailSerializer


class CustomerViewSet(viewsets.ReadOnlyModelViewSet):
    """Customer profiles and their event timelines"""
    queryset = Customer.objects.all()

    def get_queryset(self):
        if self.action == 'retrieve':
            return Customer.objects.all()
        return Customer.objects.annotate(event_count=Count('events')).order_by('-created_at', '-id')

    def get_serializer_class(self):
        if self.action == 'retrieve':
            return CustomerDetailSerializer
        return CustomerSerializer
