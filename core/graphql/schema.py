import strawberry
from apps.campaigns.graphql.queries import CampaignQueries
from apps.customers.graphql.queries import CustomerQueries
from apps.segments.graphql.queries import SegmentQueries


@strawberry.type
class Query(CampaignQueries, SegmentQueries, CustomerQueries):
    pass


schema = strawberry.Schema(query=Query)
