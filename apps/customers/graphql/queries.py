import strawberry
from typing import List
from apps.customers.models import Customer
from .types import CustomerType


@strawberry.type
class CustomerQueries:

    @strawberry.field
    def customers(self, limit: int = 100) -> List[CustomerType]:
        return Customer.objects.order_by('-created_at', '-id')[:max(limit, 0)]
