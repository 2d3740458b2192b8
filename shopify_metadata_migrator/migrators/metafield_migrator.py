"""Metafield definition migration."""

import logging
from typing import List

from .base import BaseDefinitionMigrator
from ..extractors.base import BaseDefinitionExtractor
from ..loaders.base import BaseDefinitionLoader
from ..models.migration import VERBOSE
from ..models.summary import CategorySummary, RunSummary
from ..services.reference_filter import is_reference_type

logger = logging.getLogger(__name__)


class MetafieldDefinitionMigrator(BaseDefinitionMigrator):
    """
    Copies metafield definitions, one owner type at a time, in the given order.

    A failed fetch for one owner type is recorded and the next owner type
    still runs. Reference-typed metafields are submitted like any other.
    """

    kind = "metafield"

    def __init__(
        self,
        extractor: BaseDefinitionExtractor,
        loader: BaseDefinitionLoader,
        summary: RunSummary,
        owner_types: List[str]
    ):
        super().__init__(extractor, loader, summary, summary.metafields)
        self.owner_types = list(owner_types)

    def run(self) -> CategorySummary:
        for owner_type in self.owner_types:
            self.migrate_owner_type(owner_type)
        return self.bucket

    def migrate_owner_type(self, owner_type: str) -> None:
        try:
            extraction = self.extractor.extract_metafield_definitions(owner_type)
        except Exception as e:
            self._record_error(
                f"GraphQL request failed while fetching source metafield definitions for ownerType {owner_type}",
                e,
            )
            return

        definitions = extraction.records
        total = extraction.total_extracted
        logger.info(f"Found {total} metafield definitions for {owner_type} to migrate")

        for index, definition in enumerate(definitions, 1):
            self.bucket.record_processed()

            logger.info(
                f"Migrating metafield definition {index}/{total} for {owner_type}: {definition.name}"
            )
            logger.log(
                VERBOSE,
                f"Definition {definition.qualified_key} "
                f"(type: {definition.type}, ownerType: {definition.ownerType})",
            )

            if is_reference_type(definition.type):
                logger.warning(
                    f"Metafield definition {definition.qualified_key} is a metaobject reference; "
                    f"the target will likely reject its validations"
                )

            self._submit(definition, self.loader.create_metafield_definition)
