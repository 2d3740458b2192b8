"""Extractor for definitions stored on a Shopify source store."""

import logging
from typing import Any, Dict, List

from .base import BaseDefinitionExtractor, ExtractionResult
from ..models.definition import MetafieldDefinitionInput, MetaobjectDefinitionInput
from ..models.migration import PAGE_SIZE
from ..services.graphql_client import ShopifyGraphQLClient
from ..services.queries import METAFIELD_DEFINITIONS_QUERY, METAOBJECT_DEFINITIONS_QUERY

logger = logging.getLogger(__name__)


def _edge_nodes(connection: Dict[str, Any]) -> List[Dict[str, Any]]:
    return [edge["node"] for edge in connection.get("edges") or []]


class ShopifyDefinitionExtractor(BaseDefinitionExtractor):
    """
    Reads metaobject and metafield definitions from the source store.

    Only the first page is fetched. When the store reports more, a warning
    is logged and the result is flagged with ``has_more``.
    """

    def __init__(self, client: ShopifyGraphQLClient, page_size: int = PAGE_SIZE):
        self.client = client
        self.page_size = page_size

    def extract_metaobject_definitions(self) -> ExtractionResult:
        result = ExtractionResult(entity="metaobjectDefinitions")

        data = self.client.execute(METAOBJECT_DEFINITIONS_QUERY, {"first": self.page_size})
        connection = data["metaobjectDefinitions"]

        result.records = [MetaobjectDefinitionInput.from_node(n) for n in _edge_nodes(connection)]
        result.has_more = self._has_next_page(connection)

        if result.has_more:
            logger.warning(
                f"Source store has more than {self.page_size} metaobject definitions; "
                f"only the first {self.page_size} will be migrated"
            )

        return result

    def extract_metafield_definitions(self, owner_type: str) -> ExtractionResult:
        result = ExtractionResult(entity="metafieldDefinitions")

        data = self.client.execute(
            METAFIELD_DEFINITIONS_QUERY,
            {"first": self.page_size, "ownerType": owner_type},
        )
        connection = data["metafieldDefinitions"]

        result.records = [MetafieldDefinitionInput.from_node(n) for n in _edge_nodes(connection)]
        result.has_more = self._has_next_page(connection)

        if result.has_more:
            logger.warning(
                f"Source store has more than {self.page_size} metafield definitions for {owner_type}; "
                f"only the first {self.page_size} will be migrated"
            )

        return result

    @staticmethod
    def _has_next_page(connection: Dict[str, Any]) -> bool:
        return bool((connection.get("pageInfo") or {}).get("hasNextPage"))
