"""Service layer for the metadata migrator."""

from .graphql_client import GraphQLError, ShopifyGraphQLClient, build_api_endpoint
from .reference_filter import has_metaobject_reference

__all__ = [
    "GraphQLError",
    "ShopifyGraphQLClient",
    "build_api_endpoint",
    "has_metaobject_reference",
]
