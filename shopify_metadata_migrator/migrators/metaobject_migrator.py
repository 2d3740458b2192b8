"""Metaobject definition migration."""

import logging

from .base import BaseDefinitionMigrator
from ..extractors.base import BaseDefinitionExtractor
from ..loaders.base import BaseDefinitionLoader
from ..models.migration import VERBOSE
from ..models.summary import CategorySummary, RunSummary
from ..services.reference_filter import (
    SKIP_REASON,
    has_metaobject_reference,
    reference_field_keys,
)

logger = logging.getLogger(__name__)


class MetaobjectDefinitionMigrator(BaseDefinitionMigrator):
    """
    Copies metaobject definitions from the source store to the target.

    Definitions with any ``metaobject_reference`` field are counted as
    processed and skipped: they are neither created nor failed.
    """

    kind = "metaobject"

    def __init__(
        self,
        extractor: BaseDefinitionExtractor,
        loader: BaseDefinitionLoader,
        summary: RunSummary
    ):
        super().__init__(extractor, loader, summary, summary.metaobjects)

    def run(self) -> CategorySummary:
        try:
            extraction = self.extractor.extract_metaobject_definitions()
        except Exception as e:
            self._record_error(
                "GraphQL request failed while fetching source metaobject definitions", e
            )
            return self.bucket

        definitions = extraction.records
        total = extraction.total_extracted
        logger.info(f"Found {total} metaobject definitions to migrate")

        skip_count = sum(map(has_metaobject_reference, definitions))
        if skip_count:
            logger.info(
                f"{skip_count} metaobject definitions reference other metaobjects and will be skipped"
            )

        for index, definition in enumerate(definitions, 1):
            self.bucket.record_processed()

            logger.info(f"Migrating metaobject definition {index}/{total}: {definition.name}")
            logger.log(
                VERBOSE,
                f"Fields for {definition.name}: "
                + ", ".join(f.describe() for f in definition.fieldDefinitions),
            )

            if has_metaobject_reference(definition):
                keys = ", ".join(reference_field_keys(definition))
                logger.warning(
                    f"Skipping metaobject definition {definition.name}: "
                    f"field(s) {keys} reference other metaobjects"
                )
                self.bucket.record_skipped(definition.name, SKIP_REASON)
                continue

            self._submit(definition, self.loader.create_metaobject_definition)

        return self.bucket
