import strawberry_django
from strawberry import auto
from apps.customers.models import Customer


@strawberry_django.type(Customer)
class CustomerType:
    id: auto
    email: auto
    created_at: auto
