"""Shared bookkeeping for the definition migrators."""

import logging
from typing import Any, Callable

from ..extractors.base import BaseDefinitionExtractor
from ..loaders.base import BaseDefinitionLoader, LoadResult
from ..models.migration import VERBOSE
from ..models.summary import CategorySummary, RunSummary

logger = logging.getLogger(__name__)


class BaseDefinitionMigrator:
    """
    Fetches definitions through an extractor and replays them through a loader.

    Outcomes are written to one category of the shared RunSummary. Failures
    of a single create are recorded and swallowed so sibling definitions
    still run.
    """

    kind = "definition"

    def __init__(
        self,
        extractor: BaseDefinitionExtractor,
        loader: BaseDefinitionLoader,
        summary: RunSummary,
        bucket: CategorySummary
    ):
        self.extractor = extractor
        self.loader = loader
        self.summary = summary
        self.bucket = bucket

    def run(self) -> CategorySummary:
        raise NotImplementedError

    def _record_error(self, context: str, exc: Exception) -> str:
        record = self.summary.record_error(context, exc)
        logger.error(f"{record.context}: {record.message}")
        return record.message

    def _submit(self, definition: Any, create: Callable[[Any], LoadResult]) -> None:
        """Create one definition on the target and record the outcome."""
        name = definition.name
        try:
            result = create(definition)
        except Exception as e:
            message = self._record_error(
                f"GraphQL request failed while creating {self.kind} definition for {name}", e
            )
            self.bucket.record_failed(name, error=message)
            return

        if result.success:
            self.bucket.record_created(name, dry_run=result.dry_run)
            logger.info(f"Successfully created {self.kind} definition for: {name}")
        else:
            self.bucket.record_failed(name, user_errors=result.user_errors)
            logger.error(f"Failed to create {self.kind} definition for: {name}")
            logger.log(VERBOSE, f"User Errors: {result.user_errors}")
