"""Loader that creates definitions on a Shopify target store."""

import json
import logging
from typing import Any, Dict

from .base import BaseDefinitionLoader, LoadResult
from ..models.definition import MetafieldDefinitionInput, MetaobjectDefinitionInput
from ..services.graphql_client import ShopifyGraphQLClient
from ..services.queries import (
    CREATE_METAFIELD_DEFINITION_MUTATION,
    CREATE_METAOBJECT_DEFINITION_MUTATION,
)

logger = logging.getLogger(__name__)


class ShopifyDefinitionLoader(BaseDefinitionLoader):
    """Submits ``metaobjectDefinitionCreate`` / ``metafieldDefinitionCreate``."""

    def __init__(self, client: ShopifyGraphQLClient, dry_run: bool = False):
        super().__init__(dry_run=dry_run)
        self.client = client

    def create_metaobject_definition(self, definition: MetaobjectDefinitionInput) -> LoadResult:
        return self._create(
            definition.name,
            CREATE_METAOBJECT_DEFINITION_MUTATION,
            "metaobjectDefinitionCreate",
            {"definition": definition.model_dump()},
        )

    def create_metafield_definition(self, definition: MetafieldDefinitionInput) -> LoadResult:
        return self._create(
            definition.name,
            CREATE_METAFIELD_DEFINITION_MUTATION,
            "metafieldDefinitionCreate",
            {"definition": definition.model_dump()},
        )

    def _create(
        self,
        name: str,
        mutation: str,
        payload_field: str,
        variables: Dict[str, Any]
    ) -> LoadResult:
        if self.dry_run:
            logger.info(f"[dry run] Would create {payload_field} for: {name}")
            return LoadResult(name=name, success=True, dry_run=True)

        data = self.client.execute(mutation, variables)
        result = self.interpret_payload(name, data.get(payload_field))

        if not result.success:
            logger.debug("Original variables: %s", json.dumps(variables, indent=2))

        return result
